"""Absolute clock and numeric date rendering.

These are the plain wall-clock formats: no relative wording, just the
locale's conventions for hour cycle, AM/PM markers and numeric date order.
"""

from datetime import datetime

from readable_time.labels import LabelTable


def _twelve_hour(hour: int) -> int:
    return hour % 12 or 12


def _meridiem(dt: datetime, labels: LabelTable) -> str:
    return labels.am if dt.hour < 12 else labels.pm


def _clock(dt: datetime, labels: LabelTable, *, seconds: bool, pad_hour: bool) -> str:
    if labels.hour_cycle == 24:
        hour = dt.hour
    else:
        hour = _twelve_hour(dt.hour)

    text = f"{hour:02d}" if pad_hour else str(hour)
    text += f":{dt.minute:02d}"
    if seconds:
        text += f":{dt.second:02d}"

    if labels.hour_cycle == 12:
        text += f" {_meridiem(dt, labels)}"
    return text


def clock_24(dt: datetime, labels: LabelTable) -> str:
    """24-hour clock regardless of locale, e.g. ``23:15``."""
    return f"{dt.hour}:{dt.minute:02d}"


def clock_long(dt: datetime, labels: LabelTable) -> str:
    """Locale clock with seconds, e.g. ``11:15:00 PM``."""
    return _clock(dt, labels, seconds=True, pad_hour=False)


def clock_short(dt: datetime, labels: LabelTable) -> str:
    """Locale clock, e.g. ``11:15 PM``."""
    return _clock(dt, labels, seconds=False, pad_hour=False)


def clock_short_pad(dt: datetime, labels: LabelTable) -> str:
    """Locale clock with a two digit hour, e.g. ``01:15 AM``."""
    return _clock(dt, labels, seconds=False, pad_hour=True)


def numeric_date(dt: datetime, labels: LabelTable) -> str:
    """Numeric date in locale field order, e.g. ``1/15/2023`` for en-US."""
    parts = {"M": str(dt.month), "D": str(dt.day), "Y": str(dt.year)}
    return labels.date_separator.join(parts[field] for field in labels.date_order)
