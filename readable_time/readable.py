"""Single entry point for every supported time format."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from readable_time import clock
from readable_time.exceptions import UnknownFormatError
from readable_time.labels import DEFAULT_LOCALE, LabelResolver, default_resolver
from readable_time.timeago import (
    Instant,
    OptionsLike,
    RelativeTimeFormatter,
    to_datetime,
)

DEFAULT_FORMAT = "timeago"

_CLOCK_FORMATS: Dict[str, Callable] = {
    "clock-24": clock.clock_24,
    "clock-long": clock.clock_long,
    "clock-short": clock.clock_short,
    "clock-short-pad": clock.clock_short_pad,
}

FORMATS = (*_CLOCK_FORMATS, DEFAULT_FORMAT)


def to_readable_time(
    time: Instant,
    format: str = DEFAULT_FORMAT,
    locale: str = DEFAULT_LOCALE,
    options: OptionsLike = None,
    now: Optional[Instant] = None,
    resolver: Optional[LabelResolver] = None,
) -> str:
    """Convert an instant to a readable string.

    Args:
        time: A datetime or millisecond epoch timestamp.
        format: One of ``clock-24``, ``clock-long``, ``clock-short``,
            ``clock-short-pad`` or ``timeago``.
        locale: Locale identifier, ``en-US`` by default.
        options: FormatOptions or a mapping of option names; only used by
            ``timeago``.
        now: Reference instant for ``timeago``. Defaults to the current time.
        resolver: Label source. Defaults to the built-in tables.

    Returns:
        The formatted string, e.g. ``11:15 PM`` or ``A couple of hours ago``.

    Raises:
        UnknownFormatError: ``format`` is not recognised.
        UnknownLocaleError: ``locale`` has no label table.
    """
    resolver = resolver or default_resolver

    if format == DEFAULT_FORMAT:
        return RelativeTimeFormatter(resolver).format(time, options, locale, now)

    render = _CLOCK_FORMATS.get(format)
    if render is None:
        raise UnknownFormatError(format, FORMATS)
    return render(to_datetime(time), resolver.table(locale))
