"""Configuration loading and management for mentoring-calendar.

Configuration sources are merged in priority order:
    1. Defaults (defined in CalendarConfig)
    2. Global config (~/.mentoring-calendar.toml)
    3. Project config (./mentoring-calendar.toml)
    4. Explicit config file
    5. Environment variables (MENTORING_CALENDAR_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(timezone="UTC", verbose=True)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import timedelta, timezone, tzinfo
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError, InvalidConfigError, InvalidTimezoneError
from .logging_config import get_logger

logger = get_logger(__name__)

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["ics", "json", "rich"]

ENV_PREFIX = "MENTORING_CALENDAR_"
CONFIG_FILENAME = "mentoring-calendar.toml"

OUTPUT_FORMATS = ("ics", "json", "rich")
VERBOSITIES = ("quiet", "normal", "verbose")

# UTC+5:30, GMT-8, +05:30, -0800
OFFSET_RE = re.compile(r"^(?:UTC|GMT)?\s*([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


@dataclass(frozen=True)
class CalendarConfig:
    """Settings for one timeline conversion.

    Attributes:
        timezone: Zone the opens/closes windows are placed in (IANA name,
            ``UTC``, or a fixed offset such as ``UTC+5:30``)
        strict_timezone: Fail on an unknown zone instead of falling back to UTC
        header_labels: Row titles treated as the table's header
        input_path: Markdown file read when none is given
        output_format: ics, json or rich
        prod_id: iCalendar PRODID
        description: DESCRIPTION stamped on every event
        calendar_name: Optional X-WR-CALNAME
        verbosity: Logging verbosity level
    """

    timezone: str = "Asia/Kolkata"
    strict_timezone: bool = False
    header_labels: list[str] = field(default_factory=lambda: ["Activity"])
    input_path: str = "events.md"
    output_format: OutputFormat = "ics"
    prod_id: str = "-//LFX Mentorship//Timeline//EN"
    description: str = "Generated from LFX Timeline"
    calendar_name: Optional[str] = None
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            InvalidConfigError: On a wrong type or out-of-range value
        """
        for key in ("timezone", "input_path", "prod_id", "description"):
            value = getattr(self, key)
            if not isinstance(value, str):
                raise InvalidConfigError(key, value, "must be a string")
            if not value.strip():
                raise InvalidConfigError(key, value, "must not be empty")
        if self.calendar_name is not None and not isinstance(self.calendar_name, str):
            raise InvalidConfigError("calendar_name", self.calendar_name, "must be a string")
        if not isinstance(self.strict_timezone, bool):
            raise InvalidConfigError("strict_timezone", self.strict_timezone, "must be true or false")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"must be one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of: {', '.join(VERBOSITIES)}"
            )
        if not isinstance(self.header_labels, (list, tuple)) or not all(
            isinstance(label, str) for label in self.header_labels
        ):
            raise InvalidConfigError("header_labels", self.header_labels, "must be a list of strings")

    @property
    def tz(self) -> tzinfo:
        """Resolved timezone."""
        return resolve_timezone(self.timezone, strict=self.strict_timezone)


def resolve_timezone(name: str, strict: bool = False) -> tzinfo:
    """Resolve a timezone identifier to a tzinfo.

    Args:
        name: IANA name (``Asia/Kolkata``), ``UTC``, or fixed offset
            (``UTC+5:30``, ``+05:30``, ``GMT-8``)
        strict: Raise instead of falling back to UTC

    Returns:
        ZoneInfo for IANA names, datetime.timezone for offsets

    Raises:
        InvalidTimezoneError: If ``strict`` and the name is unknown
    """
    key = name.strip()
    if key.upper() in ("UTC", "Z", "GMT"):
        return timezone.utc

    m = OFFSET_RE.match(key)
    if m:
        sign, hours, minutes = m.group(1), int(m.group(2)), int(m.group(3) or 0)
        if hours > 23 or minutes > 59:
            return _unresolved(name, "offset out of range", strict)
        offset = timedelta(hours=hours, minutes=minutes)
        return timezone(-offset if sign == "-" else offset)

    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        # OSError: the key names a tz database directory, e.g. "America"
        return _unresolved(name, str(e) or "not found", strict)


def _unresolved(name: str, reason: str, strict: bool) -> tzinfo:
    if strict:
        raise InvalidTimezoneError(name, reason)
    logger.warning(f"Could not load timezone {name!r} ({reason}), falling back to UTC")
    return timezone.utc


def load_config(config_file: Optional[Path] = None, **overrides) -> CalendarConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). None
            values are ignored.

    Returns:
        Validated CalendarConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update(overrides)

    try:
        return CalendarConfig(**merged)
    except ConfigurationError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from MENTORING_CALENDAR_* environment variables.

    Supported environment variables:
        MENTORING_CALENDAR_TIMEZONE: zone name or offset
        MENTORING_CALENDAR_STRICT_TIMEZONE: bool (true/false/1/0)
        MENTORING_CALENDAR_HEADER_LABELS: comma-separated titles
        MENTORING_CALENDAR_INPUT_PATH: str
        MENTORING_CALENDAR_OUTPUT_FORMAT: ics/json/rich
        MENTORING_CALENDAR_PROD_ID: str
        MENTORING_CALENDAR_DESCRIPTION: str
        MENTORING_CALENDAR_CALENDAR_NAME: str
        MENTORING_CALENDAR_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(CalendarConfig)

    result: dict[str, Any] = {}

    for field_name in CalendarConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[calendar]`` table is accepted as well as top-level keys.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.pop("calendar", None)
    if isinstance(section, dict):
        data.update(section)
    return data
