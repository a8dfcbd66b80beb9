"""Device services, which connect a set of devices to the core services."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .addressable import Addressable
from .base import DescribedObject, dump_json
from .enums import AdminState, OperatingState
from .errors import ContractInvalidError
from .records import _load_object


def _state(value: Any, type_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{type_name} should be a string, got {json.dumps(value)}")
    return value.upper()


@dataclass
class DeviceService(DescribedObject):
    """A service that proxies connectivity between devices and the core services."""

    id: str = ""
    name: str = ""
    last_connected: int = 0
    last_reported: int = 0
    operating_state: Union[OperatingState, str] = ""
    labels: Optional[List[str]] = None
    addressable: Addressable = field(default_factory=Addressable)
    admin_state: Union[AdminState, str] = ""
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the service as a JSON-ready mapping; empty id and name become null."""
        out = super().to_dict()
        out.update(
            {
                "id": self.id or None,
                "name": self.name or None,
                "lastConnected": self.last_connected,
                "lastReported": self.last_reported,
                "operatingState": self.operating_state,
                "labels": list(self.labels) if self.labels is not None else None,
                "addressable": self.addressable.to_dict(),
                "adminState": self.admin_state,
            }
        )
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeviceService":
        """Build and validate a device service from a decoded JSON mapping."""
        raw_addressable = data.get("addressable")
        if raw_addressable is None:
            addressable = Addressable()
        elif isinstance(raw_addressable, Mapping):
            addressable = Addressable.from_dict(raw_addressable)
        else:
            raise ValueError("addressable should be a JSON object")
        labels = data.get("labels")
        item = cls(
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
            description=data.get("description") or "",
            id=data.get("id") or "",
            name=data.get("name") or "",
            last_connected=data.get("lastConnected") or 0,
            last_reported=data.get("lastReported") or 0,
            operating_state=_state(data.get("operatingState"), "OperatingState"),
            labels=list(labels) if labels is not None else None,
            addressable=addressable,
            admin_state=_state(data.get("adminState"), "AdminState"),
        )
        item._validated = item.validate()
        return item

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "DeviceService":
        """Decode and validate a device service from JSON text."""
        return cls.from_dict(_load_object(text))

    def validate(self) -> bool:
        """Return True if the service has an id or a name, else raise ContractInvalidError."""
        if self._validated:
            return True
        if not self.id and not self.name:
            raise ContractInvalidError("Device Service ID and Name are both blank")
        return True

    def __str__(self) -> str:
        return dump_json(self)