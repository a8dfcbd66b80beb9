"""Log entries recorded by services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from .base import dump_json
from .errors import ContractInvalidError
from .records import _load_object


class LogLevel(str, Enum):
    """Log levels in order of increasing severity."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


_LEVELS = frozenset(level.value for level in LogLevel)


@dataclass
class LogEntry:
    """A single log message with its level, origin and arguments."""

    level: Union[LogLevel, str] = ""
    args: List[Any] = field(default_factory=list)
    origin_service: str = ""
    message: str = ""
    created: int = 0
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the non-empty fields as a JSON-ready mapping."""
        out: Dict[str, Any] = {}
        if self.level:
            out["logLevel"] = self.level
        if self.args:
            out["args"] = list(self.args)
        if self.origin_service:
            out["originService"] = self.origin_service
        if self.message:
            out["message"] = self.message
        if self.created:
            out["created"] = self.created
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogEntry":
        """Build and validate a log entry from a decoded JSON mapping."""
        item = cls(
            level=data.get("logLevel") or "",
            args=list(data.get("args") or []),
            origin_service=data.get("originService") or "",
            message=data.get("message") or "",
            created=data.get("created") or 0,
        )
        item._validated = item.validate()
        return item

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "LogEntry":
        """Decode and validate a log entry from JSON text."""
        return cls.from_dict(_load_object(text))

    def validate(self) -> bool:
        """Return True if the level is known, else raise ContractInvalidError."""
        if self._validated:
            return True
        if str(self.level) in _LEVELS:
            return True
        raise ContractInvalidError(f"Invalid level in LogEntry: {self.level}")

    def __str__(self) -> str:
        return dump_json(self)