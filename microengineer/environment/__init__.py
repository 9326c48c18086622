"""Environment models for reference bodies.

Provides atmospheric density profiles, surface gravity and the table of
celestial bodies the staging calculator can use as reference.

Example:
    >>> from microengineer.environment import CelestialBodyTable
    >>>
    >>> bodies = CelestialBodyTable()
    >>> kerbin = bodies.home
    >>> g = kerbin.surface_gravity  # m/s^2
    >>> rho = kerbin.atmosphere.density(10000.0)  # kg/m^3
"""

from microengineer.environment.atmosphere import (
    AtmosphereProfile,
    exponential_profile,
    standard_profile,
)
from microengineer.environment.bodies import (
    CelestialBody,
    CelestialBodyTable,
    stock_bodies,
)
from microengineer.environment.gravity import (
    G0,
    surface_gravity,
)

__all__ = [
    "AtmosphereProfile",
    "CelestialBody",
    "CelestialBodyTable",
    "G0",
    "exponential_profile",
    "standard_profile",
    "stock_bodies",
    "surface_gravity",
]
