"""Telemetry context consumed by entry refreshes.

The host simulation builds one TelemetryContext per tick and passes it to
every refresh call. Every field may be None: no active vessel, no delta-v
solution yet, no target, no atmosphere. Entries turn missing fields into
"no data" rather than failing.

All quantities are SI: metres, seconds, kilograms, newtons, degrees for
angles, kg/m^3 for density.

Example:
    >>> from microengineer.telemetry import TelemetryContext, VesselState
    >>>
    >>> ctx = TelemetryContext(vessel=VesselState(name="Kerbal X", mass=42000.0))
    >>> ctx.has_vessel
    True
"""

from dataclasses import dataclass

from microengineer.config import STAGE_DELTA_V_EPSILON

# =============================================================================
# Propulsion
# =============================================================================


@dataclass(frozen=True)
class StagePropulsion:
    """Aggregate propulsion figures for one stage.

    Thrust and Isp come in three environments: vacuum, reference-atmosphere
    sea level (ASL) and the vessel's actual surroundings. TWR values are
    computed by the host against the reference body's surface gravity.

    Attributes:
        stage: Internal stage index (0 fires last in the host's numbering)
        thrust_vac, thrust_asl, thrust_actual: Thrust [N]
        isp_vac, isp_asl, isp_actual: Specific impulse [s]
        delta_v_vac, delta_v_asl, delta_v_actual: Delta-v [m/s]
        twr_vac, twr_asl, twr_actual: Thrust-to-weight ratio [-]
        burn_time: Stage burn time at full throttle [s]
        part_count: Number of parts in the stage
    """

    stage: int
    thrust_vac: float = 0.0
    thrust_asl: float = 0.0
    thrust_actual: float = 0.0
    isp_vac: float = 0.0
    isp_asl: float = 0.0
    isp_actual: float = 0.0
    delta_v_vac: float = 0.0
    delta_v_asl: float = 0.0
    delta_v_actual: float = 0.0
    twr_vac: float = 0.0
    twr_asl: float = 0.0
    twr_actual: float = 0.0
    burn_time: float = 0.0
    part_count: int = 0

    @property
    def is_propulsive(self) -> bool:
        """False for decoupler-only stages that contribute no delta-v."""
        return (
            self.delta_v_vac > STAGE_DELTA_V_EPSILON
            or self.delta_v_asl > STAGE_DELTA_V_EPSILON
        )


@dataclass(frozen=True)
class DeltaVSolution:
    """The host's delta-v solution for a vessel.

    Attributes:
        stages: Per-stage records, current stage first
        total_delta_v_vac, total_delta_v_asl, total_delta_v_actual: [m/s]
        total_burn_time: Sum of stage burn times [s]
        part_count: Parts considered by the solver
    """

    stages: tuple[StagePropulsion, ...] = ()
    total_delta_v_vac: float | None = None
    total_delta_v_asl: float | None = None
    total_delta_v_actual: float | None = None
    total_burn_time: float | None = None
    part_count: int | None = None

    @property
    def current_stage(self) -> StagePropulsion | None:
        """The stage that fires next, or None before the solver has run."""
        return self.stages[0] if self.stages else None


# =============================================================================
# Vessel, Orbit, Aerodynamics
# =============================================================================


@dataclass(frozen=True)
class AeroForces:
    """Aerodynamic readings.

    Attributes:
        lift: Total lift force [N]
        drag: Total drag force [N]
        angle_of_attack: [deg]
        sideslip: [deg]
    """

    lift: float | None = None
    drag: float | None = None
    angle_of_attack: float | None = None
    sideslip: float | None = None


@dataclass(frozen=True)
class OrbitState:
    """Keplerian state of a vessel or target around its current body."""

    body_name: str | None = None
    apoapsis: float | None = None  # altitude above sea level [m]
    periapsis: float | None = None  # altitude above sea level [m]
    time_to_apoapsis: float | None = None  # [s]
    time_to_periapsis: float | None = None  # [s]
    inclination: float | None = None  # [deg]
    eccentricity: float | None = None
    period: float | None = None  # [s]
    orbital_speed: float | None = None  # [m/s]
    semi_major_axis: float | None = None  # [m]
    time_to_soi_change: float | None = None  # [s]


@dataclass(frozen=True)
class VesselState:
    """Aggregate state of the active vessel."""

    name: str | None = None
    mass: float | None = None  # [kg]
    situation: str | None = None
    biome: str | None = None

    # Motion
    surface_speed: float | None = None
    vertical_speed: float | None = None
    horizontal_speed: float | None = None
    mach_number: float | None = None
    gee_force: float | None = None

    # Orientation [deg]
    heading: float | None = None
    pitch: float | None = None
    roll: float | None = None
    yaw: float | None = None
    zenith: float | None = None

    # Position
    altitude_sea_level: float | None = None
    altitude_terrain: float | None = None
    latitude: float | None = None
    longitude: float | None = None

    # Atmosphere
    atmospheric_density: float | None = None  # [kg/m^3]
    static_pressure: float | None = None  # [Pa]
    sound_speed: float | None = None
    drag_coefficient: float | None = None
    exposed_area: float | None = None  # [m^2]

    orbit: OrbitState | None = None
    delta_v: DeltaVSolution | None = None
    aero: AeroForces | None = None


@dataclass(frozen=True)
class TargetState:
    """The vessel's current target."""

    name: str | None = None
    distance: float | None = None  # [m]
    relative_speed: float | None = None  # [m/s]
    closest_approach: float | None = None  # [m]
    time_to_closest_approach: float | None = None  # [s]
    orbit: OrbitState | None = None


@dataclass(frozen=True)
class ManeuverState:
    """The next planned maneuver node."""

    delta_v_required: float | None = None  # [m/s]
    delta_v_remaining: float | None = None  # [m/s]
    burn_time: float | None = None  # [s]
    time_to_node: float | None = None  # [s]
    projected_apoapsis: float | None = None  # [m]
    projected_periapsis: float | None = None  # [m]


# =============================================================================
# Per-tick Context
# =============================================================================


@dataclass(frozen=True)
class TelemetryContext:
    """Everything one tick of the dashboard may read.

    Attributes:
        vessel: Active vessel in flight, or None
        target: Current target, or None
        maneuver: Next maneuver node, or None
        universal_time: Game clock [s]
        editor: Delta-v solution of the vehicle in the assembly editor
    """

    vessel: VesselState | None = None
    target: TargetState | None = None
    maneuver: ManeuverState | None = None
    universal_time: float | None = None
    editor: DeltaVSolution | None = None

    @property
    def has_vessel(self) -> bool:
        return self.vessel is not None

    @property
    def has_target(self) -> bool:
        return self.target is not None

    @property
    def has_maneuver(self) -> bool:
        return self.maneuver is not None
