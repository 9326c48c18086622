"""Atmospheric density profiles for reference bodies.

A body's atmosphere is stored as a tabulated density-vs-altitude curve.
The staging calculator only needs the surface (sea level) density, but the
full curve lets the dashboard look up density at any altitude.

The home body's curve is sampled from the seven-layer US Standard
Atmosphere 1976 (0-86 km), compressed to the body's atmosphere depth.
Other bodies use an isothermal exponential profile.

Example:
    >>> from microengineer.environment.atmosphere import standard_profile
    >>>
    >>> atm = standard_profile(depth=70000.0)
    >>> print(f"Sea level: {atm.sea_level_density:.3f} kg/m^3")
    Sea level: 1.225 kg/m^3
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# =============================================================================
# Constants
# =============================================================================

# Sea level conditions
P0 = 101325.0  # Pressure [Pa]
RHO0 = 1.225  # Density [kg/m^3]

# Physical constants
R_AIR = 287.05287  # Specific gas constant for dry air [J/(kg·K)]
G0 = 9.80665  # Standard gravity [m/s^2]

# Geopotential altitude conversion radius [m]
R_EARTH = 6356766.0

# Top of the 1976 model [m]
STANDARD_DEPTH = 86000.0

# Layer definitions: (base_altitude_km, base_temp_K, lapse_rate_K_per_km)
LAYERS = [
    (0.0, 288.15, -6.5),      # Troposphere
    (11.0, 216.65, 0.0),      # Tropopause
    (20.0, 216.65, 1.0),      # Stratosphere 1
    (32.0, 228.65, 2.8),      # Stratosphere 2
    (47.0, 270.65, 0.0),      # Stratopause
    (51.0, 270.65, -2.8),     # Mesosphere 1
    (71.0, 214.65, -2.0),     # Mesosphere 2
]


def _layer_pressure(p_base: float, t_base: float, lapse_k_per_km: float, dh: float) -> float:
    """Pressure dh metres above a layer base."""
    if abs(lapse_k_per_km) < 1e-10:
        return p_base * np.exp(-G0 * dh / (R_AIR * t_base))
    lapse_m = lapse_k_per_km / 1000
    t = t_base + lapse_m * dh
    return p_base * (t / t_base) ** (-G0 / (R_AIR * lapse_m))


def _base_pressures() -> list[float]:
    pressures = [P0]
    for i in range(len(LAYERS) - 1):
        h0, t_layer, lapse = LAYERS[i]
        h1, _, _ = LAYERS[i + 1]
        pressures.append(_layer_pressure(pressures[-1], t_layer, lapse, (h1 - h0) * 1000))
    return pressures


_BASE_PRESSURES = _base_pressures()


@beartype
def standard_density(altitude: float | int) -> float:
    """Density of the 1976 standard atmosphere at a geometric altitude.

    Args:
        altitude: Geometric altitude [m]

    Returns:
        Density [kg/m^3]; sea level below 0 m, zero above 86 km
    """
    if altitude <= 0:
        return RHO0
    if altitude >= STANDARD_DEPTH:
        return 0.0

    h_km = R_EARTH * altitude / (R_EARTH + altitude) / 1000

    layer_idx = 0
    for i in range(len(LAYERS) - 1, -1, -1):
        if h_km >= LAYERS[i][0]:
            layer_idx = i
            break

    h0, t_layer, lapse = LAYERS[layer_idx]
    dh = (h_km - h0) * 1000
    temperature = t_layer + (lapse / 1000) * dh
    pressure = _layer_pressure(_BASE_PRESSURES[layer_idx], t_layer, lapse, dh)
    return float(pressure / (R_AIR * temperature))


# =============================================================================
# Profile
# =============================================================================


@beartype
@dataclass(frozen=True)
class AtmosphereProfile:
    """Tabulated density curve of one body's atmosphere.

    Attributes:
        altitudes: Sample altitudes, strictly increasing, starting at 0 [m]
        densities: Density at each sample [kg/m^3]
    """

    altitudes: NDArray[np.float64]
    densities: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate the samples."""
        if self.altitudes.shape != self.densities.shape or self.altitudes.ndim != 1:
            raise ValueError(
                f"Altitude and density samples must be 1-D and equal length, "
                f"got {self.altitudes.shape} and {self.densities.shape}"
            )
        if self.altitudes.size < 2:
            raise ValueError("An atmosphere profile needs at least two samples")
        if self.altitudes[0] != 0.0:
            raise ValueError(f"Profile must start at sea level, got {self.altitudes[0]} m")
        if np.any(np.diff(self.altitudes) <= 0):
            raise ValueError("Profile altitudes must be strictly increasing")
        if np.any(self.densities < 0):
            raise ValueError("Densities must be non-negative")

    @property
    def depth(self) -> float:
        """Altitude where the atmosphere ends [m]."""
        return float(self.altitudes[-1])

    @property
    def sea_level_density(self) -> float:
        """Density at the surface [kg/m^3]."""
        return float(self.densities[0])

    def density(self, altitude: float | int) -> float:
        """Linearly interpolated density; zero above the atmosphere."""
        if altitude > self.depth:
            return 0.0
        return float(np.interp(altitude, self.altitudes, self.densities))


# =============================================================================
# Profile Builders
# =============================================================================


@beartype
def standard_profile(depth: float = 70000.0, samples: int = 141) -> AtmosphereProfile:
    """Sample the 1976 model, compressed so its top sits at `depth`.

    Args:
        depth: Atmosphere depth of the body [m]
        samples: Number of samples including both ends

    Returns:
        AtmosphereProfile with sea-level density RHO0
    """
    altitudes = np.linspace(0.0, depth, samples)
    scale = STANDARD_DEPTH / depth
    densities = np.array([standard_density(float(h * scale)) for h in altitudes])
    return AtmosphereProfile(altitudes, densities)


@beartype
def exponential_profile(
    sea_level_density: float,
    scale_height: float,
    depth: float,
    samples: int = 101,
) -> AtmosphereProfile:
    """Isothermal exponential atmosphere rho = rho0 * exp(-h / H).

    Args:
        sea_level_density: Surface density [kg/m^3]
        scale_height: Scale height H [m]
        depth: Altitude where the atmosphere ends [m]
        samples: Number of samples including both ends
    """
    if scale_height <= 0:
        raise ValueError(f"Scale height must be positive, got {scale_height}")
    altitudes = np.linspace(0.0, depth, samples)
    densities = sea_level_density * np.exp(-altitudes / scale_height)
    densities[-1] = 0.0
    return AtmosphereProfile(altitudes, densities)
