import pytest

from edgecontracts.enums import (
    ActionType,
    AdminState,
    ChannelType,
    NotificationsCategory,
    OperatingState,
    admin_state_from_json,
    category_from_json,
    channel_type_from_json,
    get_admin_state,
    get_operating_state,
    is_notifications_category,
    operating_state_from_json,
    validate_admin_state,
    validate_channel_type,
    validate_operating_state,
)
from edgecontracts.errors import ContractInvalidError


@pytest.mark.parametrize(
    "data, expected",
    [
        (b'"LOCKED"', "LOCKED"),
        (b'"locked"', "LOCKED"),
        (b'"UNLOCKED"', "UNLOCKED"),
        (b'"unlocked"', "UNLOCKED"),
    ],
)
def test_admin_state_unmarshal_valid(data, expected):
    state = admin_state_from_json(data)
    assert state == expected
    assert validate_admin_state(state) is True


def test_admin_state_unmarshal_bad_value_fails_validation():
    state = admin_state_from_json('"goo"')
    assert state == "GOO"
    with pytest.raises(ContractInvalidError, match='invalid AdminState "GOO"'):
        validate_admin_state(state)


@pytest.mark.parametrize("data", ["123", "{nonsense}", "[1]"])
def test_admin_state_unmarshal_not_a_string(data):
    with pytest.raises(ValueError, match="AdminState should be a string"):
        admin_state_from_json(data)


def test_get_admin_state():
    assert get_admin_state("locked") is AdminState.LOCKED
    assert get_admin_state("Unlocked") is AdminState.UNLOCKED
    assert get_admin_state("foo") is None


@pytest.mark.parametrize(
    "data, expected",
    [
        (b'"DISABLED"', "DISABLED"),
        (b'"disabled"', "DISABLED"),
        (b'"ENABLED"', "ENABLED"),
        (b'"enabled"', "ENABLED"),
    ],
)
def test_operating_state_unmarshal_valid(data, expected):
    state = operating_state_from_json(data)
    assert state == expected
    assert validate_operating_state(state) is True


def test_operating_state_unmarshal_bad_value_fails_validation():
    state = operating_state_from_json('"goo"')
    with pytest.raises(ContractInvalidError, match='invalid OperatingState "GOO"'):
        validate_operating_state(state)


def test_operating_state_not_a_string():
    with pytest.raises(ValueError, match="OperatingState should be a string"):
        operating_state_from_json("42")


def test_get_operating_state():
    assert get_operating_state("enabled") is OperatingState.ENABLED
    assert get_operating_state("DISABLED") is OperatingState.DISABLED
    assert get_operating_state("foo") is None


@pytest.mark.parametrize(
    "data, expected",
    [
        (b'"SW_HEALTH"', NotificationsCategory.SW_HEALTH),
        (b'"HW_HEALTH"', NotificationsCategory.HW_HEALTH),
        (b'"SECURITY"', NotificationsCategory.SECURITY),
    ],
)
def test_category_unmarshal(data, expected):
    assert category_from_json(data) is expected


def test_category_unmarshal_invalid():
    with pytest.raises(ValueError, match='invalid NotificationsCategory "foo"'):
        category_from_json('"foo"')


def test_category_unmarshal_not_a_string():
    with pytest.raises(ValueError, match="NotificationsCategory should be a string"):
        category_from_json("true")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("SW_HEALTH", True),
        ("HW_HEALTH", True),
        ("SECURITY", True),
        ("foo", False),
    ],
)
def test_is_notifications_category(value, expected):
    assert is_notifications_category(value) is expected


@pytest.mark.parametrize(
    "data, expected",
    [(b'"EMAIL"', ChannelType.EMAIL), (b'"REST"', ChannelType.REST)],
)
def test_channel_type_unmarshal(data, expected):
    assert channel_type_from_json(data) is expected


def test_channel_type_unmarshal_error():
    with pytest.raises(ValueError, match='invalid ChannelType "foo"'):
        channel_type_from_json(b'"foo"')


@pytest.mark.parametrize("value", [ChannelType.EMAIL, ChannelType.REST, "EMAIL"])
def test_channel_type_validate_valid(value):
    assert validate_channel_type(value) is True


def test_channel_type_validate_invalid():
    with pytest.raises(ContractInvalidError, match='invalid Channeltype "foo"'):
        validate_channel_type("foo")


def test_enum_members_behave_as_strings():
    assert ActionType("DEVICE") == "DEVICE"
    locked = get_admin_state("locked")
    assert str(locked) == "LOCKED"
    rest = channel_type_from_json(b'"REST"')
    assert f"{rest}" == "REST"