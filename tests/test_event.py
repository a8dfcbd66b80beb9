import dataclasses

import pytest

from edgecontracts.errors import ContractInvalidError
from edgecontracts.event import Event

READING = {"device": "test device name", "name": "Temperature", "value": "45"}


def make_event():
    return Event(
        pushed=123,
        created=123,
        device="test device name",
        origin=123,
        modified=123,
        readings=[dict(READING)],
    )


def test_event_to_string():
    expected = (
        '{"pushed":123,"device":"test device name","created":123,'
        '"modified":123,"origin":123,'
        '"readings":[{"device":"test device name","name":"Temperature","value":"45"}]}'
    )
    assert str(make_event()) == expected


def test_empty_event_to_string():
    assert str(Event()) == "{}"


def test_to_dict_matches_string():
    event = make_event()
    assert event.to_dict()["readings"] == [READING]
    assert "id" not in event.to_dict()


def test_validate_valid():
    assert make_event().validate() is True


def test_validate_invalid():
    invalid = dataclasses.replace(make_event(), device="")
    with pytest.raises(ContractInvalidError):
        invalid.validate()


def test_json_round_trip():
    event = make_event()
    assert Event.from_json(str(event)) == event


def test_from_json_without_device_fails():
    with pytest.raises(ContractInvalidError, match="source device"):
        Event.from_json('{"pushed":1}')


def test_cbor_round_trip():
    event = make_event()
    assert Event.from_cbor(event.cbor()) == event


def test_empty_event_cbor_is_empty_map():
    assert Event().cbor() == b"\xa0"


def test_from_cbor_not_a_map():
    with pytest.raises(ValueError):
        Event.from_cbor(b"\x01")


def test_from_cbor_malformed():
    with pytest.raises(ValueError):
        Event.from_cbor(b"\xff")