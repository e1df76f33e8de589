"""Relative ("timeago") time formatting.

Turns the time elapsed between a target instant and now into a phrase.
Two styles are supported:

Concise (default):
    "Just now" within a minute, the clock time within the last day,
    "Today"/"Yesterday" when enabled, the weekday within the last week,
    and a date beyond that.

Verbose:
    "X units ago" for the largest non-zero unit, with small counts
    optionally spelled out ("A couple of hours ago").

Each call reads the clock at most once. Passing ``now`` explicitly makes the
result fully deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional, Union

import structlog

from readable_time import clock
from readable_time.labels import DEFAULT_LOCALE, LabelResolver, LabelTable, default_resolver
from readable_time.options import FormatOptions

logger = structlog.get_logger()

Instant = Union[datetime, int, float]
OptionsLike = Union[FormatOptions, Mapping[str, Any], None]

DAY = timedelta(days=1)
WEEK = DAY * 7
MONTH_WINDOW = DAY * 31
YEAR_WINDOW = DAY * 365


def to_datetime(value: Instant) -> datetime:
    """Normalise an instant to a timezone-aware datetime.

    Numbers are millisecond epoch timestamps. Naive datetimes and timestamps
    are placed in the local timezone.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.astimezone()
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000.0, tz=UTC).astimezone()
    raise TypeError(f"Expected a datetime or millisecond timestamp, got {type(value).__name__}")


def _snapshot(target: Instant, now: Optional[Instant] = None) -> tuple[datetime, datetime]:
    """Return ``(target, now)`` as aware datetimes for calendar comparison.

    An aware target keeps its timezone and ``now`` is moved into it. A local
    target (timestamp or naive datetime) leaves ``now`` at its own local
    offset, which may differ from the target's across a DST change.
    Future targets are clamped to ``now`` so they read as zero elapsed time.
    """
    target_dt = to_datetime(target)
    now_dt = datetime.now(UTC) if now is None else to_datetime(now)
    if isinstance(target, datetime) and target.tzinfo is not None:
        now_dt = now_dt.astimezone(target_dt.tzinfo)
    else:
        now_dt = now_dt.astimezone()
    if target_dt > now_dt:
        logger.debug(
            "Future time clamped to now",
            target=target_dt.isoformat(),
            now=now_dt.isoformat(),
        )
        target_dt = now_dt
    return target_dt, now_dt


def weekday_index(dt: datetime) -> int:
    """Weekday with 0=Sunday..6=Saturday."""
    return (dt.weekday() + 1) % 7


@dataclass(frozen=True)
class TimeBuckets:
    """Floor-divided elapsed counts. Months are 30 days and years 365."""

    elapsed: timedelta
    minutes: int
    hours: int
    days: int
    weeks: int
    months: int
    years: int


def compute_buckets(target: Instant, now: Optional[Instant] = None) -> TimeBuckets:
    target_dt, now_dt = _snapshot(target, now)
    elapsed = now_dt - target_dt
    minutes = elapsed // timedelta(minutes=1)
    hours = minutes // 60
    days = hours // 24
    return TimeBuckets(
        elapsed=elapsed,
        minutes=minutes,
        hours=hours,
        days=days,
        weeks=days // 7,
        months=days // 30,
        years=days // 365,
    )


def is_within_yesterday(target: Instant, now: Optional[Instant] = None) -> bool:
    """True when at most one day has elapsed."""
    target_dt, now_dt = _snapshot(target, now)
    return now_dt - target_dt <= DAY


def is_past_midnight(target: Instant, now: Optional[Instant] = None) -> bool:
    """True when more than a day has elapsed or the weekday has changed."""
    target_dt, now_dt = _snapshot(target, now)
    if now_dt - target_dt > DAY:
        return True
    return weekday_index(target_dt) != weekday_index(now_dt)


def is_within_week(target: Instant, now: Optional[Instant] = None) -> bool:
    target_dt, now_dt = _snapshot(target, now)
    return now_dt - target_dt <= WEEK


def is_within_month(target: Instant, now: Optional[Instant] = None) -> bool:
    target_dt, now_dt = _snapshot(target, now)
    return now_dt - target_dt <= MONTH_WINDOW


def is_within_year(target: Instant, now: Optional[Instant] = None) -> bool:
    target_dt, now_dt = _snapshot(target, now)
    return now_dt - target_dt <= YEAR_WINDOW


def abbreviate(name: str, length: int, period: str) -> str:
    """Keep the first ``length`` characters and append ``period``.

    A length of 0 leaves the name untouched.
    """
    if length > 0:
        return name[:length] + period
    return name


def ago_suffix(labels: LabelTable, include: bool) -> str:
    return f" {labels.ago}" if include else ""


def render_magnitude(
    delta: int,
    unit: str,
    labels: LabelTable,
    convert_to_words: bool = True,
    include_ago_suffix: bool = True,
    article: Optional[str] = None,
) -> str:
    """Render ``delta`` units as e.g. "A few days ago" or "7 days ago".

    Counts below 5 take the article when ``convert_to_words`` is set.
    ``article`` overrides the default "A" (used for "An hour").
    """
    noun = labels.units.for_unit(unit)
    if convert_to_words and delta < 5:
        prefix = article or labels.article.a
        if delta > 1:
            prefix += f" {labels.delta_word(delta)}"
    else:
        prefix = str(delta)
    if delta != 1:
        noun += "s"
    return f"{prefix} {noun}{ago_suffix(labels, include_ago_suffix)}"


class Rule(str, Enum):
    """Which branch of the formatter produced the text."""

    JUST_NOW = "just_now"
    LONG_TIME_AGO = "long_time_ago"
    MAGNITUDE = "magnitude"
    TODAY = "today"
    YESTERDAY = "yesterday"
    LONGFORM_DATE = "longform_date"
    WEEKDAY = "weekday"
    DAY_AND_DATE = "day_and_date"
    NUMERIC_DATE = "numeric_date"
    CLOCK = "clock"


class RuleMatch(NamedTuple):
    rule: Rule
    text: str


class RelativeTimeFormatter:
    """Formats instants relative to now using a label resolver."""

    def __init__(self, resolver: Optional[LabelResolver] = None) -> None:
        self._resolver = resolver or default_resolver

    def format(
        self,
        target: Instant,
        options: OptionsLike = None,
        locale: str = DEFAULT_LOCALE,
        now: Optional[Instant] = None,
    ) -> str:
        """Return the relative time phrase for ``target``."""
        return self.match(target, options, locale, now).text

    def match(
        self,
        target: Instant,
        options: OptionsLike = None,
        locale: str = DEFAULT_LOCALE,
        now: Optional[Instant] = None,
    ) -> RuleMatch:
        """Like ``format`` but also report which rule fired."""
        opts = FormatOptions.coerce(options)
        labels = self._resolver.table(locale)
        target_dt, now_dt = _snapshot(target, now)
        buckets = compute_buckets(target_dt, now_dt)
        return self._resolve(target_dt, now_dt, buckets, opts, labels)

    def _resolve(
        self,
        target: datetime,
        now: datetime,
        buckets: TimeBuckets,
        opts: FormatOptions,
        labels: LabelTable,
    ) -> RuleMatch:
        if opts.include_just_now and buckets.minutes < 1:
            if opts.verbose:
                suffix = ago_suffix(labels, opts.include_ago_suffix)
                return RuleMatch(Rule.JUST_NOW, f"{labels.few_moments}{suffix}")
            return RuleMatch(Rule.JUST_NOW, labels.just_now)

        if opts.verbose:
            return self._verbose(buckets, opts, labels)
        return self._concise(target, now, buckets, opts, labels)

    def _verbose(
        self, buckets: TimeBuckets, opts: FormatOptions, labels: LabelTable
    ) -> RuleMatch:
        if opts.long_time_ago_enabled and buckets.days >= opts.long_time_ago_threshold_days:
            suffix = ago_suffix(labels, opts.include_ago_suffix)
            return RuleMatch(Rule.LONG_TIME_AGO, f"{labels.long_time}{suffix}")

        article = None
        if buckets.years > 0:
            delta, unit = buckets.years, "year"
        elif buckets.months > 0:
            delta, unit = buckets.months, "month"
        elif buckets.weeks > 0:
            delta, unit = buckets.weeks, "week"
        elif buckets.days > 0:
            delta, unit = buckets.days, "day"
        elif buckets.hours > 0:
            delta, unit = buckets.hours, "hour"
            article = labels.article.an if delta == 1 else labels.article.a
        else:
            delta, unit = buckets.minutes, "minute"

        text = render_magnitude(
            delta,
            unit,
            labels,
            convert_to_words=opts.convert_to_words,
            include_ago_suffix=opts.include_ago_suffix,
            article=article,
        )
        return RuleMatch(Rule.MAGNITUDE, text)

    def _concise(
        self,
        target: datetime,
        now: datetime,
        buckets: TimeBuckets,
        opts: FormatOptions,
        labels: LabelTable,
    ) -> RuleMatch:
        within_yesterday = buckets.elapsed <= DAY
        past_midnight = not within_yesterday or weekday_index(target) != weekday_index(now)
        within_week = buckets.elapsed <= WEEK
        hours = buckets.hours

        if opts.convert_to_words:
            if opts.include_today and hours < 24 and not past_midnight:
                return RuleMatch(Rule.TODAY, labels.today)
            if (hours < 24 and past_midnight) or (24 <= hours < 48 and within_yesterday):
                return RuleMatch(Rule.YESTERDAY, labels.yesterday)

        if not within_yesterday:
            return self._far_date(target, within_week, opts, labels)

        return RuleMatch(Rule.CLOCK, clock.clock_short(target, labels))

    def _far_date(
        self,
        target: datetime,
        within_week: bool,
        opts: FormatOptions,
        labels: LabelTable,
    ) -> RuleMatch:
        period = opts.abbreviate_period
        day = abbreviate(labels.day_name(weekday_index(target)), opts.abbreviate_days, period)
        month = abbreviate(labels.month_name(target.month - 1), opts.abbreviate_months, period)

        if opts.convert_to_words:
            if opts.longform:
                return RuleMatch(Rule.LONGFORM_DATE, f"{month} {target.day}, {target.year}")
            if within_week:
                return RuleMatch(Rule.WEEKDAY, day)
            if opts.days_of_week:
                return RuleMatch(Rule.DAY_AND_DATE, f"{day}, {month} {target.day}")

        return RuleMatch(Rule.NUMERIC_DATE, clock.numeric_date(target, labels))


default_formatter = RelativeTimeFormatter()


def format_relative(
    target: Instant,
    options: OptionsLike = None,
    locale: str = DEFAULT_LOCALE,
    now: Optional[Instant] = None,
) -> str:
    """Format ``target`` relative to ``now`` with the built-in labels."""
    return default_formatter.format(target, options, locale, now)
