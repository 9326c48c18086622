"""Surface entries: where the vessel is relative to the body below it."""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source
from microengineer.units import UnitSpec, distance_units, plain_unit, speed_units


def body() -> Entry:
    return Entry(
        name="Body",
        description="Celestial body the vessel is orbiting.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "orbit", "body_name"),
        is_default=True,
        kind=EntryKind.TEXT,
    )


def situation() -> Entry:
    return Entry(
        name="Situation",
        description="Flight situation reported by the simulation.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "situation"),
        is_default=True,
        kind=EntryKind.TEXT,
    )


def biome() -> Entry:
    return Entry(
        name="Biome",
        description="Biome directly below the vessel.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "biome"),
        is_default=True,
        kind=EntryKind.TEXT,
        hide_when_no_data=True,
    )


def altitude_sea_level() -> Entry:
    return Entry(
        name="Altitude (Sea)",
        description="Altitude above sea level.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "altitude_sea_level"),
        is_default=True,
        units=distance_units(),
    )


def altitude_terrain() -> Entry:
    return Entry(
        name="Altitude (Ground)",
        description="Altitude above the terrain.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "altitude_terrain"),
        is_default=True,
        units=distance_units(),
    )


def vertical_speed() -> Entry:
    return Entry(
        name="Vertical speed",
        description="Rate of climb; negative while descending.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "vertical_speed"),
        is_default=True,
        units=speed_units(),
        decimals=1,
    )


def horizontal_speed() -> Entry:
    return Entry(
        name="Horizontal speed",
        description="Speed parallel to the surface.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "horizontal_speed"),
        is_default=True,
        units=speed_units(),
        decimals=1,
    )


def latitude() -> Entry:
    return Entry(
        name="Latitude",
        description="Latitude of the point below the vessel.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "latitude"),
        units=plain_unit("°"),
        decimals=4,
    )


def longitude() -> Entry:
    return Entry(
        name="Longitude",
        description="Longitude of the point below the vessel.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "longitude"),
        units=plain_unit("°"),
        decimals=4,
    )


def static_pressure() -> Entry:
    return Entry(
        name="Static pressure",
        description="Atmospheric pressure around the vessel.",
        category=Category.SURFACE,
        source=attribute_source("vessel", "static_pressure"),
        units=UnitSpec(base="Pa", kilo="kPa", mega="MPa"),
        decimals=0,
    )


FACTORIES = (
    body,
    situation,
    biome,
    altitude_sea_level,
    altitude_terrain,
    vertical_speed,
    horizontal_speed,
    latitude,
    longitude,
    static_pressure,
)
