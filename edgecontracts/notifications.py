"""Notifications sent to interested parties about security or health events."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .base import Timestamps, dump_json
from .enums import NotificationsCategory, category_from_json
from .errors import ContractInvalidError
from .records import _load_object

_SEVERITIES = frozenset({"CRITICAL", "NORMAL"})
_CATEGORIES = frozenset(member.value for member in NotificationsCategory)
_STATUSES = frozenset({"NEW", "PROCESSED", "ESCALATED"})


@dataclass
class Notification(Timestamps):
    """A notification with its sender, category, severity, content and status."""

    id: str = ""
    slug: str = ""
    sender: str = ""
    category: Union[NotificationsCategory, str] = ""
    severity: str = ""
    content: str = ""
    description: str = ""
    status: str = ""
    labels: Optional[List[str]] = None
    content_type: str = ""
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the notification as a JSON-ready mapping; the id is always present, null if empty."""
        out = super().to_dict()
        out["id"] = self.id or None
        fields = (
            ("slug", self.slug),
            ("sender", self.sender),
            ("category", self.category),
            ("severity", self.severity),
            ("content", self.content),
            ("description", self.description),
            ("status", self.status),
            ("labels", list(self.labels) if self.labels else None),
            ("contenttype", self.content_type),
        )
        out.update((key, value) for key, value in fields if value)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Notification":
        """Build and validate a notification; raise ValueError on an unknown category."""
        raw_category = data.get("category")
        category: Union[NotificationsCategory, str] = ""
        if raw_category is not None:
            category = category_from_json(json.dumps(raw_category))
        labels = data.get("labels")
        item = cls(
            created=data.get("created") or 0,
            modified=data.get("modified") or 0,
            origin=data.get("origin") or 0,
            id=data.get("id") or "",
            slug=data.get("slug") or "",
            sender=data.get("sender") or "",
            category=category,
            severity=data.get("severity") or "",
            content=data.get("content") or "",
            description=data.get("description") or "",
            status=data.get("status") or "",
            labels=list(labels) if labels is not None else None,
            content_type=data.get("contenttype") or "",
        )
        item._validated = item.validate()
        return item

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Notification":
        """Decode and validate a notification from JSON text."""
        return cls.from_dict(_load_object(text))

    def validate(self) -> bool:
        """Return True if the notification is complete and its values known, else raise ContractInvalidError."""
        if self._validated:
            return True
        if not self.id and not self.slug:
            raise ContractInvalidError("Notifiaction ID and Slug are both blank")
        if not self.sender:
            raise ContractInvalidError("Sender is empty")
        if not self.content:
            raise ContractInvalidError("Content is empty")
        if not self.category:
            raise ContractInvalidError("Category is empty")
        if not self.severity:
            raise ContractInvalidError("Severity is empty")
        if str(self.severity) not in _SEVERITIES:
            raise ContractInvalidError("Invalid notification severity")
        if str(self.category) not in _CATEGORIES:
            raise ContractInvalidError("Invalid notification severity")
        if self.status and str(self.status) not in _STATUSES:
            raise ContractInvalidError("Invalid notification severity")
        return True

    def __str__(self) -> str:
        return dump_json(self)