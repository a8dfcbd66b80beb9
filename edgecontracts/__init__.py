"""Data models for edge device services, events, intervals, log entries and notifications."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "enums",
    "base",
    "records",
    "addressable",
    "deviceservice",
    "devicereport",
    "interval",
    "log_entry",
    "notifications",
    "event",
    "profile",
]