"""Pieces of a device profile: get commands, resources and their properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from .base import dump_json


def _expected_values(response: Any) -> Iterable[str]:
    if isinstance(response, Mapping):
        return response.get("expectedValues") or []
    return getattr(response, "expected_values", None) or []


@dataclass
class Get:
    """A get command: the path it reads, its possible responses and its URL."""

    path: str = ""
    responses: List[Dict[str, Any]] = field(default_factory=list)
    url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.path:
            out["path"] = self.path
        if self.responses:
            out["responses"] = list(self.responses)
        if self.url:
            out["url"] = self.url
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Get":
        """Build a get command from a decoded JSON mapping."""
        return cls(
            path=data.get("path") or "",
            responses=list(data.get("responses") or []),
            url=data.get("url") or "",
        )

    def associated_value_descriptors(self) -> List[str]:
        """Return the distinct expected value names of all responses, in first-seen order."""
        names: Dict[str, None] = {}
        for response in self.responses:
            names.update(dict.fromkeys(_expected_values(response)))
        return list(names)

    def __str__(self) -> str:
        return dump_json(self)


@dataclass
class ProfileProperty:
    """The value and units description of a device resource."""

    value: Dict[str, Any] = field(default_factory=dict)
    units: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the value and units as a JSON-ready mapping."""
        return {"value": dict(self.value), "units": dict(self.units)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProfileProperty":
        """Build a profile property from a decoded JSON mapping."""
        return cls(value=dict(data.get("value") or {}), units=dict(data.get("units") or {}))

    def __str__(self) -> str:
        return dump_json(self)


@dataclass
class DeviceResource:
    """A value on a device that can be read or written."""

    description: str = ""
    name: str = ""
    tag: str = ""
    properties: ProfileProperty = field(default_factory=ProfileProperty)
    attributes: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the resource as a JSON-ready mapping, leaving out empty strings and attributes."""
        out: Dict[str, Any] = {}
        if self.description:
            out["description"] = self.description
        if self.name:
            out["name"] = self.name
        if self.tag:
            out["tag"] = self.tag
        out["properties"] = self.properties.to_dict()
        if self.attributes:
            out["attributes"] = dict(sorted(self.attributes.items()))
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeviceResource":
        """Build a device resource from a decoded JSON mapping."""
        raw_properties = data.get("properties")
        return cls(
            description=data.get("description") or "",
            name=data.get("name") or "",
            tag=data.get("tag") or "",
            properties=ProfileProperty.from_dict(raw_properties)
            if isinstance(raw_properties, Mapping)
            else ProfileProperty(),
            attributes=dict(data.get("attributes") or {}),
        )

    def __str__(self) -> str:
        return dump_json(self)


@dataclass
class ProfileResource:
    """A named set of get and set operations on device resources."""

    name: str = ""
    get: List[Dict[str, Any]] = field(default_factory=list)
    set: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.get:
            out["get"] = list(self.get)
        if self.set:
            out["set"] = list(self.set)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProfileResource":
        """Build a profile resource from a decoded JSON mapping."""
        return cls(
            name=data.get("name") or "",
            get=list(data.get("get") or []),
            set=list(data.get("set") or []),
        )

    def __str__(self) -> str:
        return dump_json(self)