"""Tests for the Entry model and the entry catalog."""

import logging
import math

import pytest

from microengineer.entries import Category, Entry, EntryKind, attribute_source, build_all
from microengineer.telemetry import AeroForces, TelemetryContext, VesselState
from microengineer.units import force_units, speed_units


def make_entry(source, **kwargs) -> Entry:
    return Entry(name="Test", description="", category=Category.MISC, source=source, **kwargs)


class TestAttributeSource:
    """Test attribute path sources."""

    def test_walks_path(self, full_context) -> None:
        assert attribute_source("vessel", "orbit", "apoapsis")(full_context) == 12500.0

    def test_missing_link_gives_none(self) -> None:
        assert attribute_source("vessel", "orbit", "apoapsis")(TelemetryContext()) is None

    def test_unknown_attribute_raises(self, full_context) -> None:
        with pytest.raises(AttributeError):
            attribute_source("vessel", "warp_factor")(full_context)

    def test_needs_a_name(self) -> None:
        with pytest.raises(ValueError):
            attribute_source()


# =============================================================================
# Entry
# =============================================================================


class TestEntryCreation:
    """Test Entry construction and capabilities."""

    def test_empty_name_raises_error(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Entry(name="", description="", category=Category.MISC, source=lambda ctx: None)

    def test_negative_decimals_raise_error(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            make_entry(lambda ctx: None, decimals=-1)

    def test_capabilities(self) -> None:
        speed = make_entry(lambda ctx: None, units=speed_units())
        assert speed.has_unit
        assert speed.has_alt_unit
        assert not speed.is_table_row

        table = make_entry(lambda ctx: None, kind=EntryKind.STAGE_TABLE)
        assert table.is_table_row
        assert not table.has_unit

    def test_starts_without_data(self) -> None:
        entry = make_entry(lambda ctx: 1.0)
        assert entry.value is None
        assert entry.value_display == "-"


class TestEntryRefresh:
    """Test refresh and the no-data policy."""

    def test_number(self) -> None:
        entry = make_entry(lambda ctx: 12500.0, units=force_units())
        entry.refresh(TelemetryContext())
        assert entry.value == 12500.0
        assert entry.value_display == "12.50"
        assert entry.unit_display == "kN"
        assert entry.display == "12.50 kN"

    @pytest.mark.parametrize("error", [AttributeError, TypeError, ValueError, ZeroDivisionError, OverflowError])
    def test_source_errors_become_no_data(self, error, caplog) -> None:
        def source(ctx):
            raise error("boom")

        entry = make_entry(source)
        entry.value = 1.0
        with caplog.at_level(logging.DEBUG, logger="microengineer.entries.base"):
            entry.refresh(TelemetryContext())
        assert entry.value is None
        assert entry.display == "-"
        assert "has no data" in caplog.text

    def test_unexpected_errors_propagate(self) -> None:
        def source(ctx):
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            make_entry(source).refresh(TelemetryContext())

    @pytest.mark.parametrize("raw", [math.nan, math.inf, "fast", True, [1.0]])
    def test_invalid_numbers_become_no_data(self, raw) -> None:
        entry = make_entry(lambda ctx: raw)
        entry.refresh(TelemetryContext())
        assert entry.value is None
        assert entry.value_display == "-"

    def test_text(self) -> None:
        entry = make_entry(lambda ctx: "Kerbal X", kind=EntryKind.TEXT)
        entry.refresh(TelemetryContext())
        assert entry.display == "Kerbal X"
        assert entry.unit_display == ""

    def test_time(self) -> None:
        entry = make_entry(lambda ctx: 3700.0, kind=EntryKind.TIME)
        entry.refresh(TelemetryContext())
        assert entry.display == "1h 01m"

    def test_stage_table_counts_propulsive_stages(self, stages) -> None:
        entry = make_entry(lambda ctx: list(stages), kind=EntryKind.STAGE_TABLE)
        entry.refresh(TelemetryContext())
        assert entry.value == stages
        assert entry.value_display == "2"

    def test_clear(self) -> None:
        entry = make_entry(lambda ctx: 1.0)
        entry.refresh(TelemetryContext())
        entry.clear()
        assert not entry.has_data


class TestAltUnit:
    """Test switching to the alternate unit."""

    def test_toggle(self) -> None:
        entry = make_entry(lambda ctx: 174.5, units=speed_units())
        entry.refresh(TelemetryContext())
        assert entry.display == "174.50 m/s"

        entry.set_alt_unit_active(True)
        assert entry.display == "628.20 km/h"

        entry.set_alt_unit_active(False)
        assert entry.display == "174.50 m/s"

    def test_without_alt_unit(self, caplog) -> None:
        entry = make_entry(lambda ctx: 1.0, units=force_units())
        with caplog.at_level(logging.WARNING):
            entry.set_alt_unit_active(True)
        assert entry.units == force_units()
        assert "no alternate unit" in caplog.text


# =============================================================================
# Catalog
# =============================================================================


class TestCatalog:
    """Test the registered entries against realistic telemetry."""

    @pytest.fixture
    def table(self):
        return build_all()

    def test_every_entry_handles_empty_context(self, table) -> None:
        """Without any telemetry every entry shows the placeholder."""
        for entry in table:
            entry.refresh(TelemetryContext())
            assert entry.value is None, entry.name
            assert entry.display == "-", entry.name

    def test_every_entry_handles_partial_context(self, table) -> None:
        partial = TelemetryContext(vessel=VesselState(name="Probe"))
        for entry in table:
            entry.refresh(partial)
            assert isinstance(entry.display, str), entry.name

    def test_every_entry_handles_full_context(self, table, full_context) -> None:
        for entry in table:
            entry.refresh(full_context)
            assert entry.has_data or entry.hide_when_no_data, entry.name
            assert isinstance(entry.display, str), entry.name

    def test_vessel_values(self, table, full_context) -> None:
        for entry in table:
            entry.refresh(full_context)
        assert table.get("Vessel").display == "Kerbal X"
        assert table.get("Mass").display == "42,000 kg"
        assert table.get("Thrust").display == "168 kN"
        assert table.get("Total Burn Time").display == "6m 45s"
        assert table.get("Speed").display == "174.50 m/s"
        assert table.get("Total lift").display == "1.20 kN"
        assert table.get("Time to Ap.").display == "48s"
        assert table.get("Body").display == "Kerbin"

    def test_lift_to_drag(self, table, full_context) -> None:
        entry = table.get("Lift / Drag")
        entry.refresh(full_context)
        assert entry.value == pytest.approx(1200.0 / 8500.0)

    def test_lift_to_drag_without_drag(self, table) -> None:
        entry = table.get("Lift / Drag")
        entry.refresh(TelemetryContext(vessel=VesselState(aero=AeroForces(lift=100.0, drag=0.0))))
        assert entry.display == "-"

    def test_current_stage_without_stages(self, table) -> None:
        entry = table.get("TWR")
        entry.refresh(TelemetryContext(vessel=VesselState(name="Probe")))
        assert entry.display == "-"
