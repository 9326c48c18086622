"""Vessel entries: mass, totals and figures of the stage that fires next.

Totals come from the vessel's delta-v solution; per-stage figures read the
current stage, so they show no data until the solver has produced one.
"""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source
from microengineer.units import delta_v_units, force_units, mass_units, plain_unit


def _current_stage(field: str):
    return attribute_source("vessel", "delta_v", "current_stage", field)


def vessel_name() -> Entry:
    return Entry(
        name="Vessel",
        description="Name of the current vessel.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "name"),
        is_default=True,
        kind=EntryKind.TEXT,
    )


def mass() -> Entry:
    return Entry(
        name="Mass",
        description="Shows the total mass of the vessel.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "mass"),
        is_default=True,
        units=mass_units(),
        decimals=0,
    )


def total_delta_v_actual() -> Entry:
    return Entry(
        name="Total ∆v",
        description="Shows the vessel's total delta velocity.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "delta_v", "total_delta_v_actual"),
        is_default=True,
        units=delta_v_units(),
        decimals=0,
    )


def thrust_actual() -> Entry:
    return Entry(
        name="Thrust",
        description="Shows the vessel's actual thrust.",
        category=Category.VESSEL,
        source=_current_stage("thrust_actual"),
        is_default=True,
        units=force_units(),
        decimals=0,
    )


def twr_actual() -> Entry:
    return Entry(
        name="TWR",
        description="Shows the vessel's thrust to weight ratio.",
        category=Category.VESSEL,
        source=_current_stage("twr_actual"),
        is_default=True,
    )


def part_count() -> Entry:
    return Entry(
        name="Parts",
        description="Number of parts considered by the delta-v solver.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "delta_v", "part_count"),
        decimals=0,
    )


def total_burn_time() -> Entry:
    return Entry(
        name="Total Burn Time",
        description="Burn time of all stages at full throttle.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "delta_v", "total_burn_time"),
        kind=EntryKind.TIME,
    )


def total_delta_v_asl() -> Entry:
    return Entry(
        name="Total ∆v ASL",
        description="Shows the total delta velocity of the vessel At Sea Level.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "delta_v", "total_delta_v_asl"),
        units=delta_v_units(),
        decimals=0,
    )


def total_delta_v_vac() -> Entry:
    return Entry(
        name="Total ∆v Vac",
        description="Shows the total delta velocity of the vessel in vacuum.",
        category=Category.VESSEL,
        source=attribute_source("vessel", "delta_v", "total_delta_v_vac"),
        units=delta_v_units(),
        decimals=0,
    )


def isp_asl() -> Entry:
    return Entry(
        name="ISP (ASL)",
        description="Specific impulse of the current stage at sea level.",
        category=Category.VESSEL,
        source=_current_stage("isp_asl"),
        units=plain_unit("s"),
        decimals=0,
    )


def isp_actual() -> Entry:
    return Entry(
        name="ISP (Actual)",
        description="Specific impulse of the current stage in the current surroundings.",
        category=Category.VESSEL,
        source=_current_stage("isp_actual"),
        units=plain_unit("s"),
        decimals=0,
    )


def isp_vac() -> Entry:
    return Entry(
        name="ISP (Vacuum)",
        description="Specific impulse of the current stage in vacuum.",
        category=Category.VESSEL,
        source=_current_stage("isp_vac"),
        units=plain_unit("s"),
        decimals=0,
    )


def twr_asl() -> Entry:
    return Entry(
        name="TWR (ASL)",
        description="Thrust to weight ratio of the current stage at sea level.",
        category=Category.VESSEL,
        source=_current_stage("twr_asl"),
    )


def twr_vac() -> Entry:
    return Entry(
        name="TWR (Vacuum)",
        description="Thrust to weight ratio of the current stage in vacuum.",
        category=Category.VESSEL,
        source=_current_stage("twr_vac"),
    )


def thrust_asl() -> Entry:
    return Entry(
        name="Thrust (ASL)",
        description="Thrust of the current stage at sea level.",
        category=Category.VESSEL,
        source=_current_stage("thrust_asl"),
        units=force_units(),
        decimals=0,
    )


def thrust_vac() -> Entry:
    return Entry(
        name="Thrust (Vacuum)",
        description="Thrust of the current stage in vacuum.",
        category=Category.VESSEL,
        source=_current_stage("thrust_vac"),
        units=force_units(),
        decimals=0,
    )


FACTORIES = (
    vessel_name,
    mass,
    total_delta_v_actual,
    thrust_actual,
    twr_actual,
    part_count,
    total_burn_time,
    total_delta_v_asl,
    total_delta_v_vac,
    isp_asl,
    isp_actual,
    isp_vac,
    twr_asl,
    twr_vac,
    thrust_asl,
    thrust_vac,
)
