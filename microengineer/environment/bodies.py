"""Reference celestial bodies for TWR and delta-v recomputation.

The body table is filled once per session from a loader (the host
simulation's body list, or the stock system below) and is read-only
afterwards.

Example:
    >>> from microengineer.environment import CelestialBodyTable
    >>>
    >>> bodies = CelestialBodyTable()
    >>> bodies.home.name
    'Kerbin'
    >>> bodies.get("Mun").has_atmosphere
    False
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from beartype import beartype

from microengineer.environment.atmosphere import (
    AtmosphereProfile,
    exponential_profile,
    standard_profile,
)
from microengineer.environment.gravity import surface_gravity

logger = logging.getLogger(__name__)


# =============================================================================
# Body
# =============================================================================


@beartype
@dataclass(frozen=True)
class CelestialBody:
    """A body the user can pick as a stage's reference.

    Attributes:
        name: Identifier used by the host and in stage selections
        display_name: Label shown in the body picker
        gravitational_parameter: mu = G*M [m^3/s^2]
        radius: Mean radius [m]
        atmosphere: Density profile, None for airless bodies
        is_home: Whether this is the reference (home) body
    """

    name: str
    display_name: str
    gravitational_parameter: float
    radius: float
    atmosphere: AtmosphereProfile | None = None
    is_home: bool = False

    def __post_init__(self) -> None:
        """Validate physical parameters."""
        if self.radius <= 0:
            raise ValueError(f"Radius of {self.name!r} must be positive, got {self.radius}")
        if self.gravitational_parameter < 0:
            raise ValueError(
                f"Gravitational parameter of {self.name!r} must be non-negative, "
                f"got {self.gravitational_parameter}"
            )

    @property
    def surface_gravity(self) -> float:
        """Gravity at the surface [m/s^2]."""
        return surface_gravity(self.gravitational_parameter, self.radius)

    @property
    def has_atmosphere(self) -> bool:
        return self.atmosphere is not None

    @property
    def sea_level_density(self) -> float:
        """Surface atmospheric density, zero when airless [kg/m^3]."""
        if self.atmosphere is None:
            return 0.0
        return self.atmosphere.sea_level_density


# =============================================================================
# Stock System
# =============================================================================


def _airless(name: str, mu: float, radius: float) -> CelestialBody:
    return CelestialBody(name, name, mu, radius)


def stock_bodies() -> list[CelestialBody]:
    """The stock Kerbol system, planets and moons in orbital order.

    Atmospheres other than Kerbin's are exponential approximations tuned
    to each body's surface density.
    """
    return [
        _airless("Moho", 1.6860938e11, 250000.0),
        CelestialBody(
            "Eve", "Eve", 8.1717302e12, 700000.0,
            atmosphere=exponential_profile(6.2, 7200.0, 90000.0),
        ),
        _airless("Gilly", 8289449.8, 13000.0),
        CelestialBody(
            "Kerbin", "Kerbin", 3.5316e12, 600000.0,
            atmosphere=standard_profile(70000.0),
            is_home=True,
        ),
        _airless("Mun", 6.5138398e10, 200000.0),
        _airless("Minmus", 1.7658e9, 60000.0),
        CelestialBody(
            "Duna", "Duna", 3.0136321e11, 320000.0,
            atmosphere=exponential_profile(0.0293, 5700.0, 50000.0),
        ),
        _airless("Ike", 1.8568369e10, 130000.0),
        _airless("Dres", 2.1484489e10, 138000.0),
        CelestialBody(
            "Jool", "Jool", 2.82528e14, 6000000.0,
            atmosphere=exponential_profile(2.2, 30000.0, 200000.0),
        ),
        CelestialBody(
            "Laythe", "Laythe", 1.962e12, 500000.0,
            atmosphere=exponential_profile(0.764, 4000.0, 50000.0),
        ),
        _airless("Vall", 2.074815e11, 300000.0),
        _airless("Tylo", 2.82528e12, 600000.0),
        _airless("Bop", 2.4868349e9, 65000.0),
        _airless("Pol", 7.2170208e8, 44000.0),
        _airless("Eeloo", 7.4410815e10, 210000.0),
    ]


# =============================================================================
# Body Table
# =============================================================================


@beartype
class CelestialBodyTable:
    """Lazily populated, process-lifetime cache of reference bodies.

    The loader runs on first access only. Duplicate names are skipped. When
    no body is flagged as home, the first body takes that role.

    Example:
        >>> table = CelestialBodyTable(loader=my_host_bodies)
        >>> table.home.surface_gravity
    """

    def __init__(self, loader: Callable[[], Iterable[CelestialBody]] = stock_bodies) -> None:
        self._loader = loader
        self._bodies: tuple[CelestialBody, ...] = ()
        self._by_name: dict[str, CelestialBody] = {}
        self._home: CelestialBody | None = None

    @property
    def is_populated(self) -> bool:
        return bool(self._bodies)

    def ensure_populated(self) -> None:
        """Run the loader once; later calls are no-ops."""
        if self._bodies:
            return

        by_name: dict[str, CelestialBody] = {}
        bodies: list[CelestialBody] = []
        for body in self._loader():
            if body.name in by_name:
                logger.warning(f"Duplicate celestial body {body.name!r} skipped.")
                continue
            by_name[body.name] = body
            bodies.append(body)

        if not bodies:
            raise ValueError("Celestial body loader returned no bodies")

        homes = [b for b in bodies if b.is_home]
        if not homes:
            logger.warning(f"No home body flagged, using {bodies[0].name!r} as reference.")
            home = bodies[0]
        else:
            if len(homes) > 1:
                logger.warning(f"Several home bodies flagged, using {homes[0].name!r}.")
            home = homes[0]

        # Publish only a complete table
        self._by_name = by_name
        self._home = home
        self._bodies = tuple(bodies)
        logger.debug(f"Celestial body table populated with {len(bodies)} bodies.")

    @property
    def bodies(self) -> tuple[CelestialBody, ...]:
        self.ensure_populated()
        return self._bodies

    @property
    def home(self) -> CelestialBody:
        """The reference body whose gravity the host's TWR figures assume."""
        self.ensure_populated()
        return self._home

    def get(self, name: str) -> CelestialBody | None:
        self.ensure_populated()
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        self.ensure_populated()
        return name in self._by_name

    def __iter__(self) -> Iterator[CelestialBody]:
        return iter(self.bodies)

    def __len__(self) -> int:
        return len(self.bodies)
