"""Locale label tables and lookup.

Each supported locale is described by a ``LabelTable`` record. Tables are
checked when they are constructed, so a formatter holding a table can read
its fields without further validation. The built-in tables are created once
at import time and never mutated afterwards, which makes them safe to share
between threads.
"""

from dataclasses import dataclass, fields, is_dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from readable_time.exceptions import UnknownLabelKeyError, UnknownLocaleError

DEFAULT_LOCALE = "en-US"

# Flat key spellings accepted by label()
_PATH_ALIASES = {
    "justnow": "just_now",
    "fewmoments": "few_moments",
    "longtime": "long_time",
}


def _require_text(value: Any, path: str) -> None:
    if not isinstance(value, str) or not value:
        raise UnknownLabelKeyError(path)


@dataclass(frozen=True)
class UnitLabels:
    """Singular noun for each magnitude unit."""

    minute: str
    hour: str
    day: str
    week: str
    month: str
    year: str

    def __post_init__(self) -> None:
        for f in fields(self):
            _require_text(getattr(self, f.name), f"units.{f.name}")

    def for_unit(self, unit: str) -> str:
        if unit not in UNITS:
            raise UnknownLabelKeyError(f"units.{unit}")
        return getattr(self, unit)


@dataclass(frozen=True)
class Articles:
    a: str
    an: str

    def __post_init__(self) -> None:
        _require_text(self.a, "article.a")
        _require_text(self.an, "article.an")


UNITS = ("minute", "hour", "day", "week", "month", "year")
SMALL_DELTAS = (2, 3, 4)


@dataclass(frozen=True)
class LabelTable:
    """Every phrase and name the formatter reads for one locale.

    ``days`` is indexed 0=Sunday..6=Saturday and ``months`` 0=January..11=December.
    The clock fields describe how absolute times and dates are written.
    """

    just_now: str
    few_moments: str
    today: str
    yesterday: str
    long_time: str
    ago: str
    units: UnitLabels
    deltas: Mapping[int, str]
    article: Articles
    days: tuple[str, ...]
    months: tuple[str, ...]
    hour_cycle: int = 12
    am: str = "AM"
    pm: str = "PM"
    date_order: str = "MDY"
    date_separator: str = "/"

    def __post_init__(self) -> None:
        for name in ("just_now", "few_moments", "today", "yesterday", "long_time", "ago"):
            _require_text(getattr(self, name), name)

        for delta in SMALL_DELTAS:
            _require_text(self.deltas.get(delta), f"deltas.{delta}")
        # Freeze the mapping so the table stays read-only
        object.__setattr__(self, "deltas", MappingProxyType(dict(self.deltas)))

        if len(self.days) != 7:
            raise UnknownLabelKeyError(f"days.{len(self.days)}")
        for index, name in enumerate(self.days):
            _require_text(name, f"days.{index}")

        if len(self.months) != 12:
            raise UnknownLabelKeyError(f"months.{len(self.months)}")
        for index, name in enumerate(self.months):
            _require_text(name, f"months.{index}")

        if self.hour_cycle not in (12, 24):
            raise UnknownLabelKeyError("hour_cycle")
        if sorted(self.date_order) != ["D", "M", "Y"]:
            raise UnknownLabelKeyError("date_order")

    def delta_word(self, delta: int) -> str:
        """Return the small-count word for deltas 2 to 4."""
        try:
            return self.deltas[delta]
        except KeyError:
            raise UnknownLabelKeyError(f"deltas.{delta}") from None

    def day_name(self, index: int) -> str:
        return self.days[index]

    def month_name(self, index: int) -> str:
        return self.months[index]


EN_US = LabelTable(
    just_now="Just now",
    few_moments="A few moments",
    today="Today",
    yesterday="Yesterday",
    long_time="A long time",
    ago="ago",
    units=UnitLabels(
        minute="minute",
        hour="hour",
        day="day",
        week="week",
        month="month",
        year="year",
    ),
    deltas={2: "couple of", 3: "few", 4: "few"},
    article=Articles(a="A", an="An"),
    days=(
        "Sunday",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
    ),
    months=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
)

BUILTIN_LOCALES: Mapping[str, LabelTable] = MappingProxyType({DEFAULT_LOCALE: EN_US})
SUPPORTED_LOCALES = tuple(BUILTIN_LOCALES)


def _step(node: Any, segment: str) -> Any:
    """Descend one segment of a dotted label path."""
    if is_dataclass(node):
        names = {f.name for f in fields(node)}
        if segment in names:
            return getattr(node, segment)
        raise KeyError(segment)
    if isinstance(node, Mapping):
        key: Any = int(segment) if segment.lstrip("-").isdigit() else segment
        return node[key]
    if isinstance(node, tuple):
        index = int(segment)
        if index < 0:
            raise IndexError(index)
        return node[index]
    raise KeyError(segment)


class LabelResolver:
    """Read-only lookup of label tables by locale."""

    def __init__(self, tables: Optional[Mapping[str, LabelTable]] = None) -> None:
        self._tables: Mapping[str, LabelTable] = MappingProxyType(
            dict(BUILTIN_LOCALES if tables is None else tables)
        )

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def table(self, locale: str) -> LabelTable:
        """Return the label table for a locale."""
        try:
            return self._tables[locale]
        except KeyError:
            raise UnknownLocaleError(locale) from None

    def label(self, locale: str, path: str) -> str:
        """Look up one label by dotted path, e.g. ``units.hour`` or ``days.0``.

        Raises:
            UnknownLocaleError: the locale is not registered.
            UnknownLabelKeyError: the path does not name a label.
        """
        node: Any = self.table(locale)
        segments = path.split(".") if path else []
        if segments:
            segments[0] = _PATH_ALIASES.get(segments[0], segments[0])
        try:
            for segment in segments:
                node = _step(node, segment)
        except (KeyError, IndexError, ValueError):
            raise UnknownLabelKeyError(path, locale) from None
        if not isinstance(node, str):
            raise UnknownLabelKeyError(path, locale)
        return node


default_resolver = LabelResolver()


def get_labels(locale: str = DEFAULT_LOCALE) -> LabelTable:
    """Return the built-in label table for a locale."""
    return default_resolver.table(locale)


def get_label(locale: str, path: str) -> str:
    """Look up a built-in label by locale and dotted path."""
    return default_resolver.label(locale, path)
