"""Addressables: how to reach a specific endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from .base import Timestamps, dump_json
from .errors import ContractInvalidError
from .records import _load_object


@dataclass
class Addressable(Timestamps):
    """Connection details for an endpoint: protocol, address, port, path and credentials."""

    id: str = ""
    name: str = ""
    protocol: str = ""
    http_method: str = ""
    address: str = ""
    port: int = 0
    path: str = ""
    publisher: str = ""
    user: str = ""
    password: str = ""
    topic: str = ""
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields plus the derived base URL and URL."""
        out = super().to_dict()
        fields = (
            ("id", self.id),
            ("name", self.name),
            ("protocol", self.protocol),
            ("method", self.http_method),
            ("address", self.address),
            ("port", self.port),
            ("path", self.path),
            ("publisher", self.publisher),
            ("user", self.user),
            ("password", self.password),
            ("topic", self.topic),
        )
        out.update((key, value) for key, value in fields if value)
        if self.protocol and self.address:
            base = self.base_url()
            url = base
            if not self.publisher and self.topic:
                url += self.topic + "/"
            url += self.path
            out["baseURL"] = base
            if url:
                out["url"] = url
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Addressable":
        """Build and validate an addressable from a decoded JSON mapping."""
        item = cls(
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
            id=data.get("id") or "",
            name=data.get("name") or "",
            protocol=data.get("protocol") or "",
            http_method=data.get("method") or "",
            address=data.get("address") or "",
            port=data.get("port") or 0,
            path=data.get("path") or "",
            publisher=data.get("publisher") or "",
            user=data.get("user") or "",
            password=data.get("password") or "",
            topic=data.get("topic") or "",
        )
        item._validated = item.validate()
        return item

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Addressable":
        """Decode and validate an addressable from JSON text."""
        return cls.from_dict(_load_object(text))

    def validate(self) -> bool:
        """Return True if the addressable has an id or a name, else raise ContractInvalidError."""
        if self._validated:
            return True
        if not self.id and not self.name:
            raise ContractInvalidError("Addressable ID and Name are both blank")
        return True

    def base_url(self) -> str:
        """Return protocol://address:port with the protocol lower-cased."""
        return f"{self.protocol.lower()}://{self.address}:{self.port}"

    def callback_url(self) -> str:
        """Return the callback URL, or an empty string if protocol, address, port or path is missing."""
        if self.protocol and self.address and self.port > 0 and self.path:
            return self.base_url() + self.path
        return ""

    def __str__(self) -> str:
        return dump_json(self)