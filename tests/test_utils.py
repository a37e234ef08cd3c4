"""Tests for discrete_time.utils date and unit helpers."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pandas as pd
import pytest

from discrete_time.settings import TravelerSettings, coerce_settings
from discrete_time.utils.date import format_date, is_valid_timestamp, to_timestamp
from discrete_time.utils.units import TimeUnit, add, get_time_unit, subtract


class TestToTimestamp:
    def test_iso_date(self) -> None:
        assert to_timestamp("2016-10-31") == datetime(2016, 10, 31)

    def test_iso_datetime_with_offset(self) -> None:
        assert to_timestamp("2016-10-31T12:30:00+00:00") == datetime(
            2016, 10, 31, 12, 30, tzinfo=timezone.utc
        )

    def test_native_values(self) -> None:
        assert to_timestamp(date(2016, 10, 31)) == datetime(2016, 10, 31)
        assert to_timestamp(datetime(2016, 10, 31, 6)) == datetime(2016, 10, 31, 6)
        assert to_timestamp(pd.Timestamp("2016-10-31")) == datetime(2016, 10, 31)

    @pytest.mark.parametrize(
        "value", ["2016-02-30", "2016-13-01", "yesterday", "", True, 10, None, pd.NaT]
    )
    def test_invalid_values_become_none(self, value) -> None:
        assert to_timestamp(value) is None

    def test_is_valid_timestamp(self) -> None:
        assert is_valid_timestamp(datetime(2016, 10, 31))
        assert not is_valid_timestamp(None)


class TestFormatDate:
    def test_default_format(self) -> None:
        assert format_date(datetime(2016, 10, 31)) == "2016-10-31"

    def test_custom_format(self) -> None:
        assert format_date(datetime(2016, 10, 31), "%Y %m %d") == "2016 10 31"

    def test_invalid_timestamp(self) -> None:
        with pytest.raises(ValueError):
            format_date(None)


class TestTimeUnits:
    @pytest.mark.parametrize(
        "name, unit",
        [
            ("days", TimeUnit.DAYS),
            ("Day", TimeUnit.DAYS),
            ("d", TimeUnit.DAYS),
            ("M", TimeUnit.MONTHS),
            ("m", TimeUnit.MINUTES),
            ("quarter", TimeUnit.QUARTERS),
            ("ms", TimeUnit.MILLISECONDS),
            (TimeUnit.YEARS, TimeUnit.YEARS),
        ],
    )
    def test_resolves_names_and_aliases(self, name, unit) -> None:
        assert get_time_unit(name) is unit

    @pytest.mark.parametrize("name", ["fortnights", "", None, 3])
    def test_unsupported_unit(self, name) -> None:
        with pytest.raises(ValueError, match="Unsupported time unit"):
            get_time_unit(name)

    def test_add_quarters_and_milliseconds(self) -> None:
        start = datetime(2016, 10, 31)
        assert add(start, 1, "quarters") == datetime(2017, 1, 31)
        assert add(start, 1500, "ms") == datetime(2016, 10, 31, 0, 0, 1, 500000)

    def test_subtract_clips_to_month_end(self) -> None:
        assert subtract(datetime(2016, 3, 31), 1, TimeUnit.MONTHS) == datetime(2016, 2, 29)

    def test_invalid_timestamp_stays_invalid(self) -> None:
        assert add(None, 1, "days") is None
        assert subtract(None, 1, "days") is None

    def test_non_integer_months_are_rejected(self) -> None:
        with pytest.raises(ValueError):
            add(datetime(2016, 10, 31), 1.5, "months")


class TestSettings:
    def test_effective_time_scale(self) -> None:
        assert TravelerSettings().effective_time_scale == 1
        assert TravelerSettings(time_scale=3).effective_time_scale == 3

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        settings = TravelerSettings.from_mapping({"starts_at": "2016-10-31", "unit": "days"})
        assert settings == TravelerSettings(starts_at="2016-10-31")

    def test_coerce_settings_ignores_unknown_overrides(self) -> None:
        base = TravelerSettings(starts_at="2016-10-31", steps=1)
        assert coerce_settings(base, label="demo", steps=3) == TravelerSettings(
            starts_at="2016-10-31", steps=3
        )

    def test_coerce_settings(self) -> None:
        base = TravelerSettings(starts_at="2016-10-31", steps=1)

        assert coerce_settings(base) is base
        assert coerce_settings(base, steps=4).steps == 4
        assert coerce_settings(steps=2) == TravelerSettings(steps=2)

    def test_coerce_settings_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            coerce_settings(["2016-10-31", 5])
