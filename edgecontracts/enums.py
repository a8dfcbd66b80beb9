"""Enumerated string values used by the contract models."""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional, Union

from .errors import ContractInvalidError


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class ActionType(_StrEnum):
    """Kinds of object a callback can refer to."""

    PROFILE = "PROFILE"
    DEVICE = "DEVICE"
    SERVICE = "SERVICE"
    SCHEDULE = "SCHEDULE"
    SCHEDULEEVENT = "SCHEDULEEVENT"
    ADDRESSABLE = "ADDRESSABLE"
    VALUEDESCRIPTOR = "VALUEDESCRIPTOR"
    PROVISIONWATCHER = "PROVISIONWATCHER"
    REPORT = "REPORT"


class AdminState(_StrEnum):
    """Administrative states of a device."""

    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


class OperatingState(_StrEnum):
    """Operating states of a device."""

    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class NotificationsCategory(_StrEnum):
    """Categories of notification."""

    SECURITY = "SECURITY"
    HW_HEALTH = "HW_HEALTH"
    SW_HEALTH = "SW_HEALTH"


class ChannelType(_StrEnum):
    """Delivery types of a notification channel."""

    REST = "REST"
    EMAIL = "EMAIL"


_ADMIN_STATES = frozenset(member.value for member in AdminState)
_OPERATING_STATES = frozenset(member.value for member in OperatingState)
_CATEGORIES = frozenset(member.value for member in NotificationsCategory)
_CHANNEL_TYPES = frozenset(member.value for member in ChannelType)


def _load_string(data: Union[str, bytes], type_name: str) -> str:
    shown = data.decode("utf-8", "replace") if isinstance(data, (bytes, bytearray)) else data
    try:
        value = json.loads(data)
    except ValueError:
        raise ValueError(f"{type_name} should be a string, got {shown}") from None
    if not isinstance(value, str):
        raise ValueError(f"{type_name} should be a string, got {shown}")
    return value


def _quote(value: str) -> str:
    return json.dumps(str(value), ensure_ascii=False)


def admin_state_from_json(data: Union[str, bytes]) -> str:
    """Decode a JSON string into an upper-cased admin state, without validating it."""
    return _load_string(data, "AdminState").upper()


def validate_admin_state(value: str) -> bool:
    """Return True if the value is a known admin state, else raise ContractInvalidError."""
    if str(value) not in _ADMIN_STATES:
        raise ContractInvalidError(f"invalid AdminState {_quote(value)}")
    return True


def get_admin_state(value: str) -> Optional[AdminState]:
    """Look up an admin state case-insensitively; None if unknown."""
    try:
        return AdminState(value.upper())
    except ValueError:
        return None


def operating_state_from_json(data: Union[str, bytes]) -> str:
    """Decode a JSON string into an upper-cased operating state, without validating it."""
    return _load_string(data, "OperatingState").upper()


def validate_operating_state(value: str) -> bool:
    """Return True if the value is a known operating state, else raise ContractInvalidError."""
    if str(value) not in _OPERATING_STATES:
        raise ContractInvalidError(f"invalid OperatingState {_quote(value)}")
    return True


def get_operating_state(value: str) -> Optional[OperatingState]:
    """Look up an operating state case-insensitively; None if unknown."""
    try:
        return OperatingState(value.upper())
    except ValueError:
        return None


def category_from_json(data: Union[str, bytes]) -> NotificationsCategory:
    """Decode a JSON string into a notifications category; raise ValueError if unknown."""
    value = _load_string(data, "NotificationsCategory")
    if value not in _CATEGORIES:
        raise ValueError(f"invalid NotificationsCategory {_quote(value)}")
    return NotificationsCategory(value)


def is_notifications_category(value: str) -> bool:
    """Tell whether the string is a valid notifications category."""
    return value in _CATEGORIES


def channel_type_from_json(data: Union[str, bytes]) -> ChannelType:
    """Decode a JSON string into a channel type; raise ValueError if unknown."""
    value = _load_string(data, "ChannelType")
    if value not in _CHANNEL_TYPES:
        raise ValueError(f"invalid ChannelType {_quote(value)}")
    return ChannelType(value)


def validate_channel_type(value: str) -> bool:
    """Return True if the value is a known channel type, else raise ContractInvalidError."""
    if str(value) not in _CHANNEL_TYPES:
        raise ContractInvalidError(f"invalid Channeltype {_quote(value)}")
    return True