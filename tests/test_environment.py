"""Tests for the environment module (atmosphere, gravity, bodies)."""

import logging

import numpy as np
import pytest

from microengineer.environment import (
    AtmosphereProfile,
    CelestialBody,
    CelestialBodyTable,
    exponential_profile,
    standard_profile,
    stock_bodies,
    surface_gravity,
)
from microengineer.environment.atmosphere import RHO0, standard_density

# =============================================================================
# Atmosphere
# =============================================================================


class TestStandardDensity:
    """Test the 1976 standard atmosphere density model."""

    def test_sea_level(self) -> None:
        assert standard_density(0.0) == pytest.approx(RHO0)

    def test_below_sea_level_clamps(self) -> None:
        assert standard_density(-500.0) == pytest.approx(RHO0)

    def test_tropopause(self) -> None:
        """Density at 11 km is about 0.36 kg/m^3."""
        assert standard_density(11000.0) == pytest.approx(0.364, rel=0.01)

    def test_above_model_top(self) -> None:
        assert standard_density(90000.0) == 0.0

    def test_decreases_with_altitude(self) -> None:
        densities = [standard_density(h) for h in np.linspace(0.0, 80000.0, 50)]
        assert all(a > b for a, b in zip(densities, densities[1:]))


class TestAtmosphereProfile:
    """Test tabulated density profiles."""

    def test_standard_profile(self) -> None:
        atm = standard_profile(70000.0)
        assert atm.sea_level_density == pytest.approx(RHO0)
        assert atm.depth == pytest.approx(70000.0)

    def test_interpolates_between_samples(self) -> None:
        atm = AtmosphereProfile(np.array([0.0, 1000.0]), np.array([1.0, 0.0]))
        assert atm.density(250.0) == pytest.approx(0.75)

    def test_zero_above_depth(self) -> None:
        atm = standard_profile(70000.0)
        assert atm.density(70001.0) == 0.0

    def test_exponential_profile(self) -> None:
        atm = exponential_profile(6.2, 7200.0, 90000.0)
        assert atm.sea_level_density == pytest.approx(6.2)
        assert atm.density(7200.0) == pytest.approx(6.2 / np.e, rel=0.01)
        assert atm.densities[-1] == 0.0

    def test_non_positive_scale_height_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Scale height"):
            exponential_profile(1.0, 0.0, 1000.0)

    def test_must_start_at_sea_level(self) -> None:
        with pytest.raises(ValueError, match="sea level"):
            AtmosphereProfile(np.array([10.0, 20.0]), np.array([1.0, 0.5]))

    def test_altitudes_must_increase(self) -> None:
        with pytest.raises(ValueError, match="strictly increasing"):
            AtmosphereProfile(np.array([0.0, 20.0, 20.0]), np.array([1.0, 0.5, 0.2]))

    def test_mismatched_lengths_raise_error(self) -> None:
        with pytest.raises(ValueError, match="equal length"):
            AtmosphereProfile(np.array([0.0, 20.0]), np.array([1.0, 0.5, 0.2]))

    def test_negative_density_raises_error(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            AtmosphereProfile(np.array([0.0, 20.0]), np.array([1.0, -0.5]))


# =============================================================================
# Gravity and Bodies
# =============================================================================


class TestCelestialBody:
    """Test body construction and derived properties."""

    def test_surface_gravity(self) -> None:
        assert surface_gravity(3.5316e12, 600000.0) == pytest.approx(9.81)

    def test_airless_body(self) -> None:
        mun = CelestialBody("Mun", "Mun", 6.5138398e10, 200000.0)
        assert not mun.has_atmosphere
        assert mun.sea_level_density == 0.0
        assert mun.surface_gravity == pytest.approx(1.628, rel=1e-3)

    def test_non_positive_radius_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Radius"):
            CelestialBody("Bad", "Bad", 1.0e12, 0.0)

    def test_negative_mu_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Gravitational parameter"):
            CelestialBody("Bad", "Bad", -1.0, 1000.0)


class TestStockBodies:
    """Test the default body list."""

    def test_kerbin_is_home(self) -> None:
        homes = [b for b in stock_bodies() if b.is_home]
        assert [b.name for b in homes] == ["Kerbin"]

    def test_names_are_unique(self) -> None:
        names = [b.name for b in stock_bodies()]
        assert len(names) == len(set(names))

    def test_atmospheric_bodies(self) -> None:
        with_air = {b.name for b in stock_bodies() if b.has_atmosphere}
        assert with_air == {"Eve", "Kerbin", "Duna", "Jool", "Laythe"}


class TestCelestialBodyTable:
    """Test the lazily populated body table."""

    def test_lazy_population(self) -> None:
        calls = []

        def loader():
            calls.append(1)
            return stock_bodies()

        table = CelestialBodyTable(loader)
        assert not table.is_populated
        assert calls == []

        assert table.home.name == "Kerbin"
        assert len(table) == 16
        assert "Mun" in table
        assert calls == [1]

    def test_lookup(self) -> None:
        table = CelestialBodyTable()
        assert table.get("Duna").surface_gravity == pytest.approx(2.943, rel=1e-3)
        assert table.get("Vulcan") is None
        assert "Vulcan" not in table

    def test_duplicates_skipped(self, caplog) -> None:
        kerbin = CelestialBody("Kerbin", "Kerbin", 3.5316e12, 600000.0, is_home=True)
        copy = CelestialBody("Kerbin", "Kerbin II", 1.0e12, 500000.0)
        table = CelestialBodyTable(lambda: [kerbin, copy])

        with caplog.at_level(logging.WARNING):
            assert len(table) == 1
        assert table.get("Kerbin").display_name == "Kerbin"
        assert "Duplicate celestial body" in caplog.text

    def test_first_body_is_home_when_none_flagged(self) -> None:
        mun = CelestialBody("Mun", "Mun", 6.5138398e10, 200000.0)
        minmus = CelestialBody("Minmus", "Minmus", 1.7658e9, 60000.0)
        table = CelestialBodyTable(lambda: [mun, minmus])
        assert table.home is mun

    def test_empty_loader_raises_error(self) -> None:
        table = CelestialBodyTable(lambda: [])
        with pytest.raises(ValueError, match="no bodies"):
            table.ensure_populated()

    def test_iteration_order(self) -> None:
        names = [b.name for b in CelestialBodyTable()]
        assert names[:4] == ["Moho", "Eve", "Gilly", "Kerbin"]

    def test_failed_load_leaves_table_empty(self) -> None:
        """A loader that fails partway is retried from scratch."""
        attempts = []

        def loader():
            attempts.append(1)
            bodies = stock_bodies()
            if len(attempts) == 1:
                yield bodies[0]
                raise RuntimeError("host not ready")
            yield from bodies

        table = CelestialBodyTable(loader)
        with pytest.raises(RuntimeError):
            table.ensure_populated()
        assert not table.is_populated

        assert len(table) == 16
        assert "Moho" in [b.name for b in table]
