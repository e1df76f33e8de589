"""Exceptions raised by readable_time."""

from typing import Optional


class ReadableTimeError(Exception):
    """Base class for all readable_time errors."""


class UnknownLocaleError(ReadableTimeError, LookupError):
    """Requested locale has no registered label table."""

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f"Unknown locale: {locale!r}")


class UnknownLabelKeyError(ReadableTimeError, LookupError):
    """A label table is missing a key the formatter needs.

    Only a malformed table can trigger this, so callers should treat it
    as a bug rather than something to recover from.
    """

    def __init__(self, path: str, locale: Optional[str] = None) -> None:
        self.path = path
        self.locale = locale
        where = f" in locale {locale!r}" if locale else ""
        super().__init__(f"Unknown label key {path!r}{where}")


class UnknownFormatError(ReadableTimeError, ValueError):
    def __init__(self, format: str, choices: tuple[str, ...] = ()) -> None:
        self.format = format
        self.choices = choices
        message = f"Unknown format: {format!r}"
        if choices:
            message += f" (expected one of: {', '.join(choices)})"
        super().__init__(message)


class InvalidOptionsError(ReadableTimeError, ValueError):
    """Formatting options could not be coerced into FormatOptions."""


class ConfigurationError(ReadableTimeError):
    """Options file is missing or malformed."""
