"""Small value records: auto events, callback alerts, channels, encryption and filters."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from .base import dump_json
from .enums import ActionType, ChannelType

ENC_NONE = "NONE"
ENC_AES = "AES"


def _load_object(text: Union[str, bytes]) -> Mapping[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


@dataclass
class AutoEvent:
    """An event a device service generates on its own at a given frequency."""

    frequency: str = ""
    on_change: bool = False
    resource: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.frequency:
            out["frequency"] = self.frequency
        if self.on_change:
            out["onChange"] = self.on_change
        if self.resource:
            out["resource"] = self.resource
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AutoEvent":
        """Build an auto event from a decoded JSON mapping."""
        return cls(
            frequency=data.get("frequency") or "",
            on_change=bool(data.get("onChange", False)),
            resource=data.get("resource") or "",
        )

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "AutoEvent":
        """Decode an auto event from JSON text; raise ValueError on malformed input."""
        return cls.from_dict(_load_object(text))

    def __str__(self) -> str:
        return dump_json(self)


@dataclass
class CallbackAlert:
    """An action to take when a callback fires."""

    action_type: Union[ActionType, str] = ""
    id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the alert as a JSON-ready mapping; an empty id becomes null."""
        return {"type": self.action_type, "id": self.id or None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CallbackAlert":
        """Build a callback alert from a decoded JSON mapping."""
        return cls(action_type=data.get("type") or "", id=data.get("id") or "")

    def __str__(self) -> str:
        return dump_json(self)


@dataclass
class Channel:
    """A delivery channel for notifications, by e-mail or REST."""

    type: Union[ChannelType, str] = ""
    mail_addresses: List[str] = field(default_factory=list)
    url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.type:
            out["type"] = self.type
        if self.mail_addresses:
            out["mailAddresses"] = list(self.mail_addresses)
        if self.url:
            out["url"] = self.url
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Channel":
        """Build a channel from a decoded JSON mapping; raise ValueError on an unknown type."""
        raw_type = data.get("type")
        return cls(
            type=ChannelType(raw_type) if raw_type is not None else "",
            mail_addresses=list(data.get("mailAddresses") or []),
            url=data.get("url") or "",
        )

    def __str__(self) -> str:
        return dump_json(self)


@dataclass
class EncryptionDetails:
    """Encryption settings for exported data."""

    algo: str = ""
    key: str = ""
    init_vector: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.algo:
            out["encryptionAlgorithm"] = self.algo
        if self.key:
            out["encryptionKey"] = self.key
        if self.init_vector:
            out["initializingVector"] = self.init_vector
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EncryptionDetails":
        """Build encryption details from a decoded JSON mapping."""
        return cls(
            algo=data.get("encryptionAlgorithm") or "",
            key=data.get("encryptionKey") or "",
            init_vector=data.get("initializingVector") or "",
        )


@dataclass
class Filter:
    """Client filters on reading data."""

    device_ids: List[str] = field(default_factory=list)
    value_descriptor_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty filters as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.device_ids:
            out["deviceIdentifiers"] = list(self.device_ids)
        if self.value_descriptor_ids:
            out["valueDescriptorIdentifiers"] = list(self.value_descriptor_ids)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Filter":
        """Build a filter from a decoded JSON mapping."""
        return cls(
            device_ids=list(data.get("deviceIdentifiers") or []),
            value_descriptor_ids=list(data.get("valueDescriptorIdentifiers") or []),
        )