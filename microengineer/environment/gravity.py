"""Surface gravity helpers.

Core functions are numba-compiled so the body table and the staging
calculator share one implementation.

Example:
    >>> from microengineer.environment.gravity import surface_gravity
    >>>
    >>> g = surface_gravity(3.5316e12, 600000.0)  # ~9.81 m/s^2
"""

from beartype import beartype
from numba import njit

# Standard gravity, used by the Tsiolkovsky relation with Isp in seconds [m/s^2]
G0: float = 9.80665


@njit(cache=True, fastmath=True)
def gravity_magnitude_at_altitude(altitude: float, mu: float, radius: float) -> float:
    """Point-mass gravity magnitude at altitude above the surface."""
    r = radius + altitude
    if r <= 0.0:
        return 0.0
    return mu / (r * r)


@beartype
def surface_gravity(mu: float, radius: float) -> float:
    """Gravity at the surface of a spherical body.

    Args:
        mu: Gravitational parameter [m^3/s^2]
        radius: Mean radius [m]

    Returns:
        Surface gravity [m/s^2]
    """
    return float(gravity_magnitude_at_altitude(0.0, mu, radius))

