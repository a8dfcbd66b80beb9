"""Events: measurable readings taken from a device."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

import cbor2

from .base import dump_json
from .errors import ContractInvalidError
from .records import _load_object


@dataclass
class Event:
    """A single event read from a device, with its readings."""

    id: str = ""
    pushed: int = 0
    device: str = ""
    created: int = 0
    modified: int = 0
    origin: int = 0
    readings: List[Dict[str, Any]] = field(default_factory=list)
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        fields = (
            ("id", self.id),
            ("pushed", self.pushed),
            ("device", self.device),
            ("created", self.created),
            ("modified", self.modified),
            ("origin", self.origin),
            ("readings", list(self.readings)),
        )
        return {key: value for key, value in fields if value}

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> "Event":
        return cls(
            id=data.get("id") or "",
            pushed=data.get("pushed") or 0,
            device=data.get("device") or "",
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
            readings=list(data.get("readings") or []),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """Build and validate an event from a decoded JSON mapping."""
        item = cls._from_mapping(data)
        item._validated = item.validate()
        return item

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Event":
        """Decode and validate an event from JSON text."""
        return cls.from_dict(_load_object(text))

    @classmethod
    def from_cbor(cls, data: bytes) -> "Event":
        """Decode an event from its CBOR encoding; raise ValueError on malformed input."""
        try:
            decoded = cbor2.loads(data)
        except cbor2.CBORDecodeError as exc:
            raise ValueError(f"invalid CBOR event: {exc}") from None
        if not isinstance(decoded, dict):
            raise ValueError(f"expected a CBOR map, got {type(decoded).__name__}")
        return cls._from_mapping(decoded)

    def validate(self) -> bool:
        """Return True if the event names its source device, else raise ContractInvalidError."""
        if not self._validated and not self.device:
            raise ContractInvalidError("source device for event not specified")
        return True

    def cbor(self) -> bytes:
        """Return the CBOR encoding of the event, or empty bytes if it cannot be encoded."""
        try:
            return cbor2.dumps(self.to_dict())
        except cbor2.CBOREncodeError:
            return b""

    def __str__(self) -> str:
        return dump_json(self)