"""Device reports naming the value descriptors captured for a device."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .base import Timestamps, dump_json


@dataclass
class DeviceReport(Timestamps):
    """A report tying a device and an interval action to expected value descriptors."""

    id: str = ""
    name: str = ""
    device: str = ""
    action: str = ""
    expected: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the report as a JSON-ready mapping; empty name, device and action become null."""
        out = super().to_dict()
        out.update(
            {
                "id": self.id,
                "name": self.name or None,
                "device": self.device or None,
                "action": self.action or None,
                "expected": list(self.expected) if self.expected is not None else None,
            }
        )
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeviceReport":
        """Build a device report from a decoded JSON mapping."""
        expected = data.get("expected")
        return cls(
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
            id=data.get("id") or "",
            name=data.get("name") or "",
            device=data.get("device") or "",
            action=data.get("action") or "",
            expected=list(expected) if expected is not None else None,
        )

    def __str__(self) -> str:
        return dump_json(self)