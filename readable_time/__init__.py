"""Human readable relative and absolute times."""

from .exceptions import (
    ConfigurationError,
    InvalidOptionsError,
    ReadableTimeError,
    UnknownFormatError,
    UnknownLabelKeyError,
    UnknownLocaleError,
)
from .labels import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    LabelResolver,
    LabelTable,
    get_label,
    get_labels,
)
from .options import FormatOptions
from .readable import FORMATS, to_readable_time
from .timeago import (
    RelativeTimeFormatter,
    TimeBuckets,
    compute_buckets,
    format_relative,
    is_past_midnight,
    is_within_month,
    is_within_week,
    is_within_year,
    is_within_yesterday,
    render_magnitude,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Entry points
    "to_readable_time",
    "format_relative",
    "FORMATS",
    # Relative formatting
    "RelativeTimeFormatter",
    "FormatOptions",
    "TimeBuckets",
    "compute_buckets",
    "render_magnitude",
    "is_within_yesterday",
    "is_past_midnight",
    "is_within_week",
    "is_within_month",
    "is_within_year",
    # Labels
    "LabelResolver",
    "LabelTable",
    "get_label",
    "get_labels",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    # Exceptions
    "ReadableTimeError",
    "UnknownLocaleError",
    "UnknownLabelKeyError",
    "UnknownFormatError",
    "InvalidOptionsError",
    "ConfigurationError",
]
