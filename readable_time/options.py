"""Formatting options for the relative time formatter."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from readable_time.exceptions import InvalidOptionsError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(name: str) -> str:
    """Convert ``convertToWords`` style keys to ``convert_to_words``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class FormatOptions:
    """Toggles controlling the timeago output.

    A negative ``long_time_ago_threshold_days`` disables the "A long time ago"
    collapse. Abbreviation lengths of 0 keep full day and month names.
    """

    verbose: bool = False
    convert_to_words: bool = True
    include_ago_suffix: bool = True
    include_today: bool = False
    include_just_now: bool = True
    days_of_week: bool = False
    longform: bool = False
    long_time_ago_threshold_days: int = -1
    abbreviate_days: int = 0
    abbreviate_months: int = 0
    abbreviate_period: str = "."

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type == "bool" and not isinstance(value, bool):
                raise InvalidOptionsError(f"{f.name} must be a bool, got {value!r}")
            if f.type == "int" and (isinstance(value, bool) or not isinstance(value, int)):
                raise InvalidOptionsError(f"{f.name} must be an int, got {value!r}")
            if f.type == "str" and not isinstance(value, str):
                raise InvalidOptionsError(f"{f.name} must be a str, got {value!r}")

        if self.abbreviate_days < 0:
            raise InvalidOptionsError("abbreviate_days must not be negative")
        if self.abbreviate_months < 0:
            raise InvalidOptionsError("abbreviate_months must not be negative")

    @property
    def long_time_ago_enabled(self) -> bool:
        return self.long_time_ago_threshold_days >= 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a mapping with camelCase or snake_case keys.

        ``None`` values are dropped so the field default applies.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        unknown = []
        for key, value in data.items():
            name = _snake_case(str(key))
            if name not in known:
                unknown.append(str(key))
                continue
            if value is not None:
                kwargs[name] = value
        if unknown:
            raise InvalidOptionsError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        return cls(**kwargs)

    @classmethod
    def coerce(
        cls, options: Union["FormatOptions", Mapping[str, Any], None]
    ) -> "FormatOptions":
        """Accept options as an instance, a mapping, or None for defaults."""
        if options is None:
            return DEFAULT_OPTIONS
        if isinstance(options, FormatOptions):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise InvalidOptionsError(
            f"options must be FormatOptions or a mapping, got {type(options).__name__}"
        )

    def replace(self, **changes: Any) -> "FormatOptions":
        """Return a copy with some fields changed."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_OPTIONS = FormatOptions()


def merge_options(
    base: Optional[FormatOptions], overrides: Mapping[str, Any]
) -> FormatOptions:
    """Apply non-None overrides on top of ``base``."""
    changes = {_snake_case(k): v for k, v in overrides.items() if v is not None}
    known = {f.name for f in fields(FormatOptions)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise InvalidOptionsError(f"Unknown option(s): {', '.join(unknown)}")
    return (base or DEFAULT_OPTIONS).replace(**changes)
