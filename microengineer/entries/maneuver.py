"""Maneuver entries for the next planned node."""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source
from microengineer.units import delta_v_units, distance_units


def delta_v_required() -> Entry:
    return Entry(
        name="∆v required",
        description="Delta velocity needed to execute the maneuver.",
        category=Category.MANEUVER,
        source=attribute_source("maneuver", "delta_v_required"),
        is_default=True,
        units=delta_v_units(),
        decimals=1,
    )


def delta_v_remaining() -> Entry:
    return Entry(
        name="∆v remaining",
        description="Delta velocity still to burn for the maneuver.",
        category=Category.MANEUVER,
        source=attribute_source("maneuver", "delta_v_remaining"),
        is_default=True,
        units=delta_v_units(),
        decimals=1,
    )


def burn_time() -> Entry:
    return Entry(
        name="Burn time",
        description="Time the maneuver burn takes at full throttle.",
        category=Category.MANEUVER,
        source=attribute_source("maneuver", "burn_time"),
        is_default=True,
        kind=EntryKind.TIME,
    )


def time_to_node() -> Entry:
    return Entry(
        name="Time to node",
        description="Time until the maneuver node.",
        category=Category.MANEUVER,
        source=attribute_source("maneuver", "time_to_node"),
        is_default=True,
        kind=EntryKind.TIME,
    )


def projected_apoapsis() -> Entry:
    return Entry(
        name="Projected Ap.",
        description="Apoapsis after the maneuver.",
        category=Category.MANEUVER,
        source=attribute_source("maneuver", "projected_apoapsis"),
        is_default=True,
        units=distance_units(),
    )


def projected_periapsis() -> Entry:
    return Entry(
        name="Projected Pe.",
        description="Periapsis after the maneuver.",
        category=Category.MANEUVER,
        source=attribute_source("maneuver", "projected_periapsis"),
        is_default=True,
        units=distance_units(),
    )


FACTORIES = (
    delta_v_required,
    delta_v_remaining,
    burn_time,
    time_to_node,
    projected_apoapsis,
    projected_periapsis,
)
