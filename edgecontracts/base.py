"""Shared building blocks for the contract models: timestamps and JSON output."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dump_json(value: Any) -> str:
    """Serialise a value to compact JSON, using to_dict() on models and escaping HTML characters."""
    text = json.dumps(value, default=_default, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


@dataclass
class Timestamps:
    """Creation, modification and origin times in milliseconds."""

    created: int = 0
    modified: int = 0
    origin: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-zero timestamps as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.created:
            out["created"] = self.created
        if self.modified:
            out["modified"] = self.modified
        if self.origin:
            out["origin"] = self.origin
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Timestamps":
        """Build timestamps from a decoded JSON mapping."""
        return cls(
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
        )


@dataclass
class DescribedObject(Timestamps):
    """Timestamps together with a free-text description."""

    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the timestamps and the description as a JSON-ready mapping."""
        out = Timestamps.to_dict(self)
        out["description"] = self.description
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DescribedObject":
        """Build a described object from a decoded JSON mapping."""
        return cls(
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
            description=data.get("description") or "",
        )

    def __str__(self) -> str:
        return dump_json(self)