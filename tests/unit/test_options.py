"""Tests for FormatOptions and JSON option loading."""

import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from readable_time.config import load_options
from readable_time.exceptions import ConfigurationError, InvalidOptionsError
from readable_time.options import DEFAULT_OPTIONS, FormatOptions, merge_options


class TestFormatOptionsDefaults:
    def test_defaults(self) -> None:
        options = FormatOptions()
        assert options.verbose is False
        assert options.convert_to_words is True
        assert options.include_ago_suffix is True
        assert options.include_today is False
        assert options.include_just_now is True
        assert options.days_of_week is False
        assert options.longform is False
        assert options.long_time_ago_threshold_days == -1
        assert options.long_time_ago_enabled is False
        assert options.abbreviate_days == 0
        assert options.abbreviate_months == 0
        assert options.abbreviate_period == "."

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_OPTIONS.verbose = True  # type: ignore[misc]

    def test_replace_returns_copy(self) -> None:
        changed = DEFAULT_OPTIONS.replace(verbose=True)
        assert changed.verbose is True
        assert DEFAULT_OPTIONS.verbose is False


class TestFormatOptionsValidation:
    def test_negative_abbreviation_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError):
            FormatOptions(abbreviate_days=-1)
        with pytest.raises(InvalidOptionsError):
            FormatOptions(abbreviate_months=-3)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"verbose": "yes"},
            {"include_today": 1},
            {"abbreviate_days": 2.5},
            {"abbreviate_months": True},
            {"abbreviate_period": 0},
        ],
    )
    def test_wrong_types_rejected(self, kwargs: dict) -> None:
        with pytest.raises(InvalidOptionsError):
            FormatOptions(**kwargs)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FormatOptions(abbreviate_days=-1)


class TestFromMapping:
    def test_camel_case_keys(self) -> None:
        options = FormatOptions.from_mapping(
            {
                "verbose": True,
                "convertToWords": False,
                "includeAgoSuffix": False,
                "longTimeAgoThresholdDays": 30,
                "abbreviateMonths": 3,
            }
        )
        assert options == FormatOptions(
            verbose=True,
            convert_to_words=False,
            include_ago_suffix=False,
            long_time_ago_threshold_days=30,
            abbreviate_months=3,
        )

    def test_snake_case_keys(self) -> None:
        options = FormatOptions.from_mapping({"days_of_week": True, "abbreviate_days": 3})
        assert options.days_of_week is True
        assert options.abbreviate_days == 3

    def test_none_values_use_defaults(self) -> None:
        options = FormatOptions.from_mapping({"verbose": None, "abbreviatePeriod": None})
        assert options == DEFAULT_OPTIONS

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError, match="colour"):
            FormatOptions.from_mapping({"colour": "red"})

    def test_coerce(self) -> None:
        assert FormatOptions.coerce(None) is DEFAULT_OPTIONS
        options = FormatOptions(verbose=True)
        assert FormatOptions.coerce(options) is options
        assert FormatOptions.coerce({"verbose": True}) == options
        with pytest.raises(InvalidOptionsError):
            FormatOptions.coerce(["verbose"])  # type: ignore[arg-type]


class TestMergeOptions:
    def test_overrides_skip_none(self) -> None:
        base = FormatOptions(verbose=True, abbreviate_days=3)
        merged = merge_options(base, {"verbose": None, "abbreviate_days": 2})
        assert merged.verbose is True
        assert merged.abbreviate_days == 2

    def test_defaults_without_base(self) -> None:
        assert merge_options(None, {"longform": True}) == FormatOptions(longform=True)

    def test_unknown_override(self) -> None:
        with pytest.raises(InvalidOptionsError):
            merge_options(None, {"loud": True})


class TestLoadOptions:
    def test_none_returns_defaults(self) -> None:
        assert load_options(None) is DEFAULT_OPTIONS

    def test_reads_json_object(self, tmp_path: Path) -> None:
        config_file = tmp_path / "options.json"
        config_file.write_text(json.dumps({"verbose": True, "includeAgoSuffix": False}))
        options = load_options(config_file)
        assert options == FormatOptions(verbose=True, include_ago_suffix=False)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_options(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        config_file = tmp_path / "options.json"
        config_file.write_text("{verbose: true")
        with pytest.raises(ConfigurationError):
            load_options(config_file)

    def test_non_object_payload(self, tmp_path: Path) -> None:
        config_file = tmp_path / "options.json"
        config_file.write_text(json.dumps(["verbose"]))
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_options(config_file)

    def test_invalid_option_value(self, tmp_path: Path) -> None:
        config_file = tmp_path / "options.json"
        config_file.write_text(json.dumps({"abbreviateDays": -2}))
        with pytest.raises(ConfigurationError, match="Invalid options"):
            load_options(config_file)
