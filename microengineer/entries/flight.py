"""Flight entries: speed, attitude and aerodynamics of the active vessel."""

from microengineer.entries.base import Category, Entry, attribute_source
from microengineer.telemetry import TelemetryContext
from microengineer.units import density_units, force_units, plain_unit, speed_units

DEGREES = "°"


def _lift_to_drag(context: TelemetryContext) -> float | None:
    # Missing forces raise TypeError, zero drag raises ZeroDivisionError;
    # both resolve to no data in Entry.refresh
    aero = context.vessel.aero
    return aero.lift / aero.drag


def speed() -> Entry:
    return Entry(
        name="Speed",
        description="Shows the vessel's total velocity.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "surface_speed"),
        is_default=True,
        units=speed_units(),
    )


def mach_number() -> Entry:
    return Entry(
        name="Mach number",
        description="Shows the ratio of the vessel's speed to the local speed of sound.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "mach_number"),
        is_default=True,
    )


def gee_force() -> Entry:
    return Entry(
        name="G-Force",
        description="Measures the g-force the vessel is experiencing.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "gee_force"),
        is_default=True,
        units=plain_unit("g"),
        decimals=3,
    )


def angle_of_attack() -> Entry:
    return Entry(
        name="AoA",
        description="Angle between the vessel's nose and the airflow.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "aero", "angle_of_attack"),
        is_default=True,
        units=plain_unit(DEGREES),
        decimals=3,
    )


def sideslip() -> Entry:
    return Entry(
        name="Sideslip",
        description="Sideways angle between the vessel's nose and the airflow.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "aero", "sideslip"),
        units=plain_unit(DEGREES),
        decimals=3,
    )


def heading() -> Entry:
    return Entry(
        name="Heading",
        description="Compass direction the vessel is pointing.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "heading"),
        is_default=True,
        units=plain_unit(DEGREES),
    )


def pitch() -> Entry:
    return Entry(
        name="Pitch",
        description="Angle of the vessel's nose above the horizon.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "pitch"),
        is_default=True,
        units=plain_unit(DEGREES),
    )


def roll() -> Entry:
    return Entry(
        name="Roll",
        description="Rotation of the vessel around its longitudinal axis.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "roll"),
        is_default=True,
        units=plain_unit(DEGREES),
    )


def yaw() -> Entry:
    return Entry(
        name="Yaw",
        description="Rotation of the vessel around its vertical axis.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "yaw"),
        is_default=True,
        units=plain_unit(DEGREES),
    )


def zenith() -> Entry:
    return Entry(
        name="Zenith",
        description="Angle between the vessel's nose and straight up.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "zenith"),
        units=plain_unit(DEGREES),
    )


def total_lift() -> Entry:
    return Entry(
        name="Total lift",
        description="Total lift force acting on the vessel.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "aero", "lift"),
        is_default=True,
        units=force_units(),
    )


def total_drag() -> Entry:
    return Entry(
        name="Total drag",
        description="Total drag force acting on the vessel.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "aero", "drag"),
        is_default=True,
        units=force_units(),
    )


def lift_to_drag() -> Entry:
    return Entry(
        name="Lift / Drag",
        description="Ratio of total lift to total drag.",
        category=Category.FLIGHT,
        source=_lift_to_drag,
        is_default=True,
    )


def drag_coefficient() -> Entry:
    return Entry(
        name="Drag coefficient",
        description="Drag coefficient of the vessel.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "drag_coefficient"),
    )


def exposed_area() -> Entry:
    return Entry(
        name="Exposed area",
        description="Cross-section of the vessel exposed to the airflow.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "exposed_area"),
        units=plain_unit("m²"),
    )


def atmospheric_density() -> Entry:
    return Entry(
        name="Atm. density",
        description="Density of the atmosphere around the vessel.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "atmospheric_density"),
        is_default=True,
        units=density_units(),
    )


def sound_speed() -> Entry:
    return Entry(
        name="Speed of sound",
        description="Speed of sound in the surrounding atmosphere.",
        category=Category.FLIGHT,
        source=attribute_source("vessel", "sound_speed"),
        units=speed_units(),
    )


FACTORIES = (
    speed,
    mach_number,
    gee_force,
    angle_of_attack,
    sideslip,
    heading,
    pitch,
    roll,
    yaw,
    zenith,
    total_lift,
    total_drag,
    lift_to_drag,
    drag_coefficient,
    exposed_area,
    atmospheric_density,
    sound_speed,
)
