"""Target entries, shown while the vessel has a target selected."""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source
from microengineer.units import distance_units, plain_unit, speed_units


def target_name() -> Entry:
    return Entry(
        name="Target",
        description="Name of the current target.",
        category=Category.TARGET,
        source=attribute_source("target", "name"),
        is_default=True,
        kind=EntryKind.TEXT,
    )


def distance_to_target() -> Entry:
    return Entry(
        name="Distance to target",
        description="Straight-line distance between the vessel and the target.",
        category=Category.TARGET,
        source=attribute_source("target", "distance"),
        is_default=True,
        units=distance_units(),
    )


def relative_speed() -> Entry:
    return Entry(
        name="Relative speed",
        description="Speed of the vessel relative to the target.",
        category=Category.TARGET,
        source=attribute_source("target", "relative_speed"),
        is_default=True,
        units=speed_units(),
    )


def closest_approach() -> Entry:
    return Entry(
        name="Closest approach",
        description="Smallest separation on the current trajectories.",
        category=Category.TARGET,
        source=attribute_source("target", "closest_approach"),
        is_default=True,
        units=distance_units(),
    )


def time_to_closest_approach() -> Entry:
    return Entry(
        name="Time to C.A.",
        description="Time until the closest approach.",
        category=Category.TARGET,
        source=attribute_source("target", "time_to_closest_approach"),
        is_default=True,
        kind=EntryKind.TIME,
    )


def target_apoapsis() -> Entry:
    return Entry(
        name="Target Ap.",
        description="Apoapsis of the target's orbit.",
        category=Category.TARGET,
        source=attribute_source("target", "orbit", "apoapsis"),
        units=distance_units(),
        hide_when_no_data=True,
    )


def target_periapsis() -> Entry:
    return Entry(
        name="Target Pe.",
        description="Periapsis of the target's orbit.",
        category=Category.TARGET,
        source=attribute_source("target", "orbit", "periapsis"),
        units=distance_units(),
        hide_when_no_data=True,
    )


def target_inclination() -> Entry:
    return Entry(
        name="Target Inc.",
        description="Inclination of the target's orbit.",
        category=Category.TARGET,
        source=attribute_source("target", "orbit", "inclination"),
        units=plain_unit("°"),
        decimals=3,
        hide_when_no_data=True,
    )


FACTORIES = (
    target_name,
    distance_to_target,
    relative_speed,
    closest_approach,
    time_to_closest_approach,
    target_apoapsis,
    target_periapsis,
    target_inclination,
)
