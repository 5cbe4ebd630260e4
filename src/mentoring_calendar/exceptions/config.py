"""Configuration exceptions: settings files, timezone names."""

from typing import Any

from .base import MentoringCalendarError


class ConfigurationError(MentoringCalendarError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidTimezoneError(ConfigurationError):
    """Raised when a timezone identifier cannot be resolved."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Unknown timezone: {name}", details={"timezone": name, "reason": reason})
        self.name = name
        self.reason = reason
