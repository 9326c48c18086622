"""Orbital entries read from the active vessel's Keplerian state."""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source
from microengineer.units import distance_units, plain_unit, speed_units


def _orbit(field: str):
    return attribute_source("vessel", "orbit", field)


def apoapsis() -> Entry:
    return Entry(
        name="Apoapsis",
        description="Highest point of the orbit above sea level.",
        category=Category.ORBITAL,
        source=_orbit("apoapsis"),
        is_default=True,
        units=distance_units(),
    )


def time_to_apoapsis() -> Entry:
    return Entry(
        name="Time to Ap.",
        description="Time until the vessel reaches apoapsis.",
        category=Category.ORBITAL,
        source=_orbit("time_to_apoapsis"),
        is_default=True,
        kind=EntryKind.TIME,
    )


def periapsis() -> Entry:
    return Entry(
        name="Periapsis",
        description="Lowest point of the orbit above sea level.",
        category=Category.ORBITAL,
        source=_orbit("periapsis"),
        is_default=True,
        units=distance_units(),
    )


def time_to_periapsis() -> Entry:
    return Entry(
        name="Time to Pe.",
        description="Time until the vessel reaches periapsis.",
        category=Category.ORBITAL,
        source=_orbit("time_to_periapsis"),
        is_default=True,
        kind=EntryKind.TIME,
    )


def inclination() -> Entry:
    return Entry(
        name="Inclination",
        description="Angle between the orbit and the body's equator.",
        category=Category.ORBITAL,
        source=_orbit("inclination"),
        is_default=True,
        units=plain_unit("°"),
        decimals=3,
    )


def eccentricity() -> Entry:
    return Entry(
        name="Eccentricity",
        description="Shape of the orbit; 0 is circular, 1 is an escape trajectory.",
        category=Category.ORBITAL,
        source=_orbit("eccentricity"),
        is_default=True,
        decimals=3,
    )


def period() -> Entry:
    return Entry(
        name="Period",
        description="Time to complete one orbit.",
        category=Category.ORBITAL,
        source=_orbit("period"),
        is_default=True,
        kind=EntryKind.TIME,
    )


def orbital_speed() -> Entry:
    return Entry(
        name="Orbit speed",
        description="Speed relative to the orbited body's centre.",
        category=Category.ORBITAL,
        source=_orbit("orbital_speed"),
        units=speed_units(),
        decimals=1,
    )


def semi_major_axis() -> Entry:
    return Entry(
        name="Semi-major axis",
        description="Half of the orbit's longest diameter.",
        category=Category.ORBITAL,
        source=_orbit("semi_major_axis"),
        units=distance_units(),
    )


def time_to_soi_change() -> Entry:
    return Entry(
        name="SOI transition",
        description="Time until the vessel leaves the current sphere of influence.",
        category=Category.ORBITAL,
        source=_orbit("time_to_soi_change"),
        is_default=True,
        kind=EntryKind.TIME,
        hide_when_no_data=True,
    )


FACTORIES = (
    apoapsis,
    time_to_apoapsis,
    periapsis,
    time_to_periapsis,
    inclination,
    eccentricity,
    period,
    orbital_speed,
    semi_major_axis,
    time_to_soi_change,
)
