# edgecontracts

Data models for an edge computing platform: addressables, device services,
device reports, device resources and profile resources, events, intervals,
log entries, notifications and a few small records. Each model converts to
and from the JSON shape that the platform's services exchange, leaves out
empty values the same way those services do, and checks its own contents.

## Installation

```
pip install edgecontracts
```

The only runtime dependency is `cbor2`, which `Event` uses for its binary
encoding.

## Modules

| Module | Contents |
| --- | --- |
| `edgecontracts.errors` | `ContractInvalidError`, a `ValueError` raised when a model fails validation |
| `edgecontracts.enums` | `ActionType`, `AdminState`, `OperatingState`, `NotificationsCategory`, `ChannelType` and helpers to decode, look up and validate them |
| `edgecontracts.base` | `Timestamps`, `DescribedObject` and `dump_json` |
| `edgecontracts.records` | `AutoEvent`, `CallbackAlert`, `Channel`, `EncryptionDetails`, `Filter` |
| `edgecontracts.addressable` | `Addressable` |
| `edgecontracts.deviceservice` | `DeviceService` |
| `edgecontracts.devicereport` | `DeviceReport` |
| `edgecontracts.interval` | `Interval` and `parse_duration` |
| `edgecontracts.log_entry` | `LogLevel`, `LogEntry` |
| `edgecontracts.notifications` | `Notification` |
| `edgecontracts.event` | `Event`, with JSON and CBOR encoding |
| `edgecontracts.profile` | `Get`, `ProfileProperty`, `DeviceResource`, `ProfileResource` |

## Usage

Models are dataclasses. `to_dict()` gives the JSON-ready mapping and
`str()` gives the compact JSON text (via `edgecontracts.base.dump_json`,
which escapes `<`, `>` and `&`). `from_dict()` builds a model from a decoded
mapping, and where a model has it, `from_json()` builds it from JSON text.

```python
from edgecontracts.addressable import Addressable

addr = Addressable(name="core-data", protocol="HTTP", address="localhost",
                   port=48080, path="/api/v1/event")
print(addr.base_url())      # http://localhost:48080
print(addr.callback_url())  # http://localhost:48080/api/v1/event
print(str(addr))            # JSON including "baseURL" and "url"
```

Validation failures raise `ContractInvalidError`, so a caller can tell a
bad contract apart from any other failure:

```python
from edgecontracts.errors import ContractInvalidError
from edgecontracts.interval import Interval

try:
    Interval(name="nightly", start="blah").validate()
except ContractInvalidError as exc:
    print(exc)
```

For `Addressable`, `DeviceService`, `Interval`, `LogEntry`, `Notification`
and `Event`, building from a mapping or from JSON validates the result as
well, and raises `ContractInvalidError` if it does not pass.

```python
from edgecontracts.event import Event

event = Event.from_json('{"device": "thermostat", "origin": 123}')
data = event.cbor()
assert Event.from_cbor(data) == event
```

Enumerations and helper functions live in `edgecontracts.enums`:

```python
from edgecontracts.enums import get_admin_state, is_notifications_category

get_admin_state("locked")              # AdminState.LOCKED
is_notifications_category("SECURITY")  # True
```

Interval frequencies accept both ISO 8601 periods (`P1D`, `PT15M`) and
duration strings such as `10h20m15s11us`; `edgecontracts.interval.parse_duration`
parses the latter into nanoseconds.

`Get.associated_value_descriptors()` returns the distinct expected value
names from a get command's responses.

## What the package does not do

The package holds data models only. It has no models for devices, device
profiles, commands, command responses, readings or value descriptors:
readings in an `Event`, responses in a `Get`, resource operations in a
`ProfileResource` and the value and units of a `ProfileProperty` are kept as
plain dictionaries and are not checked. It has no clients for talking to
services, no storage and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```