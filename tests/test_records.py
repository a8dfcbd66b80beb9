import json

import pytest

from edgecontracts.base import dump_json
from edgecontracts.enums import ChannelType
from edgecontracts.records import (
    ENC_AES,
    AutoEvent,
    CallbackAlert,
    Channel,
    EncryptionDetails,
    Filter,
)


@pytest.fixture
def auto_event():
    return AutoEvent(resource="TestDevice", frequency="300ms", on_change=True)


def test_auto_event_to_string(auto_event):
    assert str(auto_event) == '{"frequency":"300ms","onChange":true,"resource":"TestDevice"}'


def test_auto_event_marshal_matches_string(auto_event):
    assert dump_json(auto_event) == str(auto_event)


def test_empty_auto_event_marshal():
    assert str(AutoEvent()) == "{}"


def test_auto_event_unmarshal_success(auto_event):
    assert AutoEvent.from_json(str(auto_event)) == auto_event


def test_auto_event_unmarshal_failure():
    with pytest.raises(ValueError):
        AutoEvent.from_json("{nonsense}")


def test_auto_event_unmarshal_not_object():
    with pytest.raises(ValueError):
        AutoEvent.from_json("[1, 2]")


def test_callback_alert_to_string():
    alert = CallbackAlert("DEVICE", "1234")
    assert str(alert) == '{"type":"DEVICE","id":"1234"}'


def test_callback_alert_without_id_is_null():
    alert = CallbackAlert("DEVICE", "")
    assert str(alert) == '{"type":"DEVICE","id":null}'


def test_callback_alert_round_trip():
    alert = CallbackAlert("DEVICE", "1234")
    assert CallbackAlert.from_dict(json.loads(str(alert))) == alert


def test_callback_alert_null_id_decodes_empty():
    assert CallbackAlert.from_dict({"type": "PROFILE", "id": None}) == CallbackAlert("PROFILE", "")


def test_email_channel_to_string():
    channel = Channel(type=ChannelType.EMAIL, mail_addresses=["first@example.com", "second@example.com"])
    assert str(channel) == '{"type":"EMAIL","mailAddresses":["first@example.com","second@example.com"]}'


def test_rest_channel_to_string():
    channel = Channel(type=ChannelType.REST, url="http://www.example.com/notifications")
    assert str(channel) == '{"type":"REST","url":"http://www.example.com/notifications"}'


def test_empty_channel_to_string():
    assert str(Channel()) == "{}"


def test_channel_round_trip():
    channel = Channel(type=ChannelType.REST, url="http://www.example.com/notifications")
    decoded = Channel.from_dict(json.loads(str(channel)))
    assert decoded == channel
    assert decoded.type is ChannelType.REST


def test_channel_invalid_type():
    with pytest.raises(ValueError):
        Channel.from_dict({"type": "foo"})


def test_encryption_details_mapping():
    details = EncryptionDetails(algo=ENC_AES, key="placeholder", init_vector="123")
    assert details.to_dict() == {
        "encryptionAlgorithm": "AES",
        "encryptionKey": "placeholder",
        "initializingVector": "123",
    }
    assert EncryptionDetails.from_dict(details.to_dict()) == details


def test_empty_encryption_details():
    assert EncryptionDetails().to_dict() == {}


def test_filter_mapping_and_round_trip():
    flt = Filter(device_ids=["dev1"], value_descriptor_ids=["temperature", "humidity"])
    assert flt.to_dict() == {
        "deviceIdentifiers": ["dev1"],
        "valueDescriptorIdentifiers": ["temperature", "humidity"],
    }
    assert Filter.from_dict(flt.to_dict()) == flt


def test_empty_filter():
    assert Filter().to_dict() == {}