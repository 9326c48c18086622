"""Tests for the units module."""

import math

import pytest

from microengineer.units import (
    AltUnit,
    UnitSpec,
    alt_unit,
    distance_units,
    force_units,
    format_number,
    format_value,
    mass_units,
    plain_unit,
    seconds_to_time_string,
    select_unit,
    speed_units,
    split_value,
)


class TestUnitSpec:
    """Test unit descriptor creation and validation."""

    def test_unitless(self) -> None:
        """Test that an empty descriptor has no unit."""
        spec = UnitSpec()
        assert not spec.has_unit
        assert not spec.has_alt_unit

    def test_prefix_without_base_raises_error(self) -> None:
        """Test that prefixed symbols need a base unit."""
        with pytest.raises(ValueError, match="require a base unit"):
            UnitSpec(milli="mm")

    def test_unknown_alt_unit_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown alternate unit"):
            alt_unit("furlong")

    def test_zero_alt_factor_raises_error(self) -> None:
        with pytest.raises(ValueError, match="finite non-zero factor"):
            AltUnit("x", 0.0)

    def test_frozen_dataclass(self) -> None:
        """Test that UnitSpec is immutable."""
        spec = distance_units()
        with pytest.raises(AttributeError):
            spec.base = "ft"  # type: ignore

    def test_speed_has_km_per_hour_alt(self) -> None:
        spec = speed_units()
        assert spec.has_alt_unit
        assert spec.alt.symbol == "km/h"
        assert spec.alt.factor == pytest.approx(3.6)
        assert not spec.alt_active


# =============================================================================
# Unit Selection
# =============================================================================


class TestSelectUnit:
    """Test magnitude-based prefix selection."""

    def test_kilo(self) -> None:
        value, symbol = select_unit(12500.0, force_units())
        assert value == pytest.approx(12.5)
        assert symbol == "kN"

    def test_mega(self) -> None:
        value, symbol = select_unit(2_500_000.0, distance_units())
        assert value == pytest.approx(2.5)
        assert symbol == "Mm"

    def test_giga(self) -> None:
        value, symbol = select_unit(-1.5e9, distance_units())
        assert value == pytest.approx(-1.5)
        assert symbol == "Gm"

    def test_just_below_kilo_stays_base(self) -> None:
        value, symbol = select_unit(999.0, distance_units())
        assert value == 999.0
        assert symbol == "m"

    def test_milli_between_zero_and_one(self) -> None:
        value, symbol = select_unit(0.5, mass_units())
        assert value == pytest.approx(500.0)
        assert symbol == "g"

    def test_zero_stays_base(self) -> None:
        """Test that zero is not shown in the milli unit."""
        value, symbol = select_unit(0.0, distance_units())
        assert value == 0.0
        assert symbol == "m"

    def test_undefined_prefix_falls_through(self) -> None:
        """Test that a missing mega symbol falls back to kilo."""
        spec = UnitSpec(base="m", kilo="km")
        value, symbol = select_unit(5e6, spec)
        assert value == pytest.approx(5000.0)
        assert symbol == "km"

    def test_factor_of_thousand_shifts_one_prefix(self) -> None:
        spec = distance_units()
        symbols = [select_unit(0.005 * 1000**k, spec)[1] for k in range(5)]
        assert symbols == ["mm", "m", "km", "Mm", "Gm"]

    def test_deterministic(self) -> None:
        assert format_value(123456.789, distance_units()) == format_value(123456.789, distance_units())

    def test_unitless(self) -> None:
        value, symbol = select_unit(1234.0, UnitSpec())
        assert value == 1234.0
        assert symbol == ""

    def test_active_alt_unit_skips_prefixes(self) -> None:
        spec = UnitSpec(base="m/s", kilo="km/s", alt=alt_unit("km/h", is_active=True))
        value, symbol = select_unit(2000.0, spec)
        assert value == pytest.approx(7200.0)
        assert symbol == "km/h"


# =============================================================================
# Formatting
# =============================================================================


class TestFormatNumber:
    """Test bare number formatting."""

    def test_grouped(self) -> None:
        assert format_number(1234.5, 1, "N") == "1,234.5"

    def test_fixed(self) -> None:
        assert format_number(1234.5, 1, "F") == "1234.5"

    def test_raw(self) -> None:
        assert format_number(1234.5, 2, None) == "1234.5"

    def test_zero_decimals(self) -> None:
        assert format_number(42000.0, 0) == "42,000"

    def test_no_negative_zero(self) -> None:
        assert format_number(-0.001, 2) == "0.00"

    def test_unknown_format_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown numeric format"):
            format_number(1.0, 2, "X")


class TestFormatValue:
    """Test value formatting with units."""

    def test_kilonewtons(self) -> None:
        assert format_value(12500.0, force_units()) == "12.50 kN"

    def test_grouped_thousands_with_prefix(self) -> None:
        assert format_value(5e6, UnitSpec(base="m", kilo="km")) == "5,000.00 km"

    def test_unitless_has_no_trailing_space(self) -> None:
        assert format_value(1.25, UnitSpec()) == "1.25"

    def test_plain_unit(self) -> None:
        assert format_value(45.0, plain_unit("°")) == "45.00 °"

    def test_alt_unit(self) -> None:
        spec = UnitSpec(base="m/s", alt=alt_unit("km/h", is_active=True))
        assert format_value(100.0, spec) == "360.00 km/h"

    @pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf])
    def test_missing_values_show_placeholder(self, value) -> None:
        """Test that None and non-finite values render as the placeholder."""
        assert format_value(value, distance_units()) == "-"

    def test_split_value(self) -> None:
        assert split_value(12500.0, force_units()) == ("12.50", "kN")

    def test_split_value_missing(self) -> None:
        assert split_value(None, force_units()) == ("-", "")


class TestSecondsToTimeString:
    """Test duration formatting."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0s"),
            (45, "45s"),
            (59.9, "59s"),
            (60, "1m 00s"),
            (125, "2m 05s"),
            (3599, "59m 59s"),
            (3600, "1h 00m"),
            (3700, "1h 01m"),
            (86399, "23h 59m"),
            (86400, "1d 00h"),
            (90000, "1d 01h"),
        ],
    )
    def test_two_most_significant_units(self, seconds, expected) -> None:
        assert seconds_to_time_string(seconds) == expected

    def test_negative_duration(self) -> None:
        assert seconds_to_time_string(-125) == "-2m 05s"

    @pytest.mark.parametrize("value", [None, math.nan, math.inf])
    def test_missing(self, value) -> None:
        assert seconds_to_time_string(value) == "-"
