"""Intervals: named periods of time with a start, an end and a frequency."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Union

from .base import Timestamps, dump_json
from .errors import ContractInvalidError
from .records import _load_object

FREQUENCY_PATTERN = re.compile(
    r"P([0-9]+Y)?([0-9]+M)?([0-9]+D)?(T([0-9]+H)?([0-9]+M)?([0-9]+S)?)?"
)
TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"
_TIMESTAMP_SHAPE = re.compile(r"[0-9]{8}T[0-9]{6}")

_DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_DURATION_PART = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_MAX_DURATION = 2**63 - 1


def parse_duration(text: str) -> int:
    """Parse a duration such as "1h15m30s" or "300ms" into nanoseconds; raise ValueError if invalid."""
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise ValueError(f'invalid duration "{text}"')
    total = 0
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(f'invalid duration "{text}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{text}"')
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            raise ValueError(f'unknown unit "{unit}" in duration "{text}"')
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > _MAX_DURATION + 1:
            raise ValueError(f'invalid duration "{text}"')
        pos = match.end()
    if not negative and total > _MAX_DURATION:
        raise ValueError(f'invalid duration "{text}"')
    return -total if negative else total


def _check_timestamp(value: str) -> None:
    if not _TIMESTAMP_SHAPE.fullmatch(value):
        raise ValueError(f'parsing time "{value}": expected YYYYMMDDTHHMMSS')
    datetime.strptime(value, TIMESTAMP_FORMAT)


def _is_legacy_frequency(value: str) -> bool:
    return bool(FREQUENCY_PATTERN.fullmatch(value)) and value not in ("P", "PT")


@dataclass
class Interval:
    """A named period of time with optional start, end, frequency and cron expression."""

    timestamps: Timestamps = field(default_factory=Timestamps)
    id: str = ""
    name: str = ""
    start: str = ""
    end: str = ""
    frequency: str = ""
    cron: str = ""
    run_once: bool = False
    _validated: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the interval as a JSON-ready mapping, leaving out empty fields."""
        out: Dict[str, Any] = {"Timestamps": self.timestamps.to_dict()}
        fields = (
            ("id", self.id),
            ("name", self.name),
            ("start", self.start),
            ("end", self.end),
            ("frequency", self.frequency),
            ("cron", self.cron),
        )
        out.update((key, value) for key, value in fields if value)
        if self.run_once:
            out["runOnce"] = True
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Interval":
        """Build and validate an interval from a decoded JSON mapping."""
        raw_timestamps = data.get("Timestamps")
        timestamps = (
            Timestamps.from_dict(raw_timestamps)
            if isinstance(raw_timestamps, Mapping)
            else Timestamps()
        )
        item = cls(
            timestamps=timestamps,
            id=data.get("id") or "",
            name=data.get("name") or "",
            start=data.get("start") or "",
            end=data.get("end") or "",
            frequency=data.get("frequency") or "",
            cron=data.get("cron") or "",
            run_once=bool(data.get("runOnce", False)),
        )
        item._validated = item.validate()
        return item

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Interval":
        """Decode and validate an interval from JSON text."""
        return cls.from_dict(_load_object(text))

    def validate(self) -> bool:
        """Return True if identifiers, times and frequency are valid, else raise ContractInvalidError."""
        if self._validated:
            return True
        if not self.id and not self.name:
            raise ContractInvalidError("Interval ID and Name are both blank")
        for label, value in (("Start", self.start), ("End", self.end)):
            if value:
                try:
                    _check_timestamp(value)
                except ValueError as exc:
                    raise ContractInvalidError(f"error parsing {label} {exc}") from None
        if self.frequency and not _is_legacy_frequency(self.frequency):
            try:
                parse_duration(self.frequency)
            except ValueError:
                raise ContractInvalidError(
                    f"invalid Interval frequency {self.frequency} format"
                ) from None
        return True

    def __str__(self) -> str:
        return dump_json(self)