"""Tests for the to_readable_time entry point."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from readable_time import FORMATS, __version__, to_readable_time
from readable_time.exceptions import UnknownFormatError, UnknownLocaleError
from readable_time.labels import EN_US, LabelResolver
from readable_time.options import FormatOptions

NOW = datetime(2024, 3, 13, 15, 30, tzinfo=UTC)
TARGET = datetime(2024, 3, 13, 13, 5, 9, tzinfo=UTC)


class TestFormats:
    def test_supported_formats(self) -> None:
        assert FORMATS == (
            "clock-24",
            "clock-long",
            "clock-short",
            "clock-short-pad",
            "timeago",
        )

    def test_default_is_timeago(self) -> None:
        assert to_readable_time(NOW - timedelta(seconds=5), now=NOW) == "Just now"

    @pytest.mark.parametrize(
        ("format", "expected"),
        [
            ("clock-24", "13:05"),
            ("clock-long", "1:05:09 PM"),
            ("clock-short", "1:05 PM"),
            ("clock-short-pad", "01:05 PM"),
        ],
    )
    def test_clock_formats(self, format: str, expected: str) -> None:
        assert to_readable_time(TARGET, format=format) == expected

    def test_timeago_with_options_mapping(self) -> None:
        result = to_readable_time(
            TARGET, format="timeago", options={"verbose": True}, now=NOW
        )
        assert result == "A couple of hours ago"

    def test_timeago_with_options_instance(self) -> None:
        result = to_readable_time(TARGET, options=FormatOptions(include_today=True), now=NOW)
        assert result == "Today"

    def test_unknown_format(self) -> None:
        with pytest.raises(UnknownFormatError) as exc_info:
            to_readable_time(TARGET, format="clock-12")
        assert exc_info.value.format == "clock-12"
        assert isinstance(exc_info.value, ValueError)

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            to_readable_time(TARGET, format="clock-short", locale="de-DE")
        with pytest.raises(UnknownLocaleError):
            to_readable_time(TARGET, locale="de-DE", now=NOW)

    def test_custom_resolver(self) -> None:
        resolver = LabelResolver({"en-GB": replace(EN_US, hour_cycle=24)})
        assert (
            to_readable_time(TARGET, format="clock-short", locale="en-GB", resolver=resolver)
            == "13:05"
        )


def test_version() -> None:
    assert __version__
