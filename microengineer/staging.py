"""Staging delta-v and TWR calculator.

The host reports per-stage thrust, Isp, delta-v and TWR for vacuum and for
the reference atmosphere at sea level (ASL), with TWR measured against the
reference (home) body's gravity. This module re-derives those figures for
any other reference body:

- TWR is rescaled by the ratio of surface gravities.
- Thrust and Isp at the body's surface are blended linearly between the
  vacuum and ASL endpoints by the body's sea-level density relative to the
  reference atmosphere. Airless bodies resolve to the vacuum endpoint.
- Sea-level delta-v follows Tsiolkovsky with the blended Isp.

Example:
    >>> from microengineer.environment import CelestialBodyTable
    >>> from microengineer.staging import StagingTable
    >>>
    >>> table = StagingTable(CelestialBodyTable())
    >>> table.update(solution.stages)
    >>> table.select_body(0, "Mun")
    >>> for row in table.rows:
    ...     print(row.label, row.twr_asl, row.delta_v_asl, row.burn_time_display)
"""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import polars as pl
from beartype import beartype
from numba import njit

from microengineer.config import DIVISION_EPSILON, FORMAT_GROUPED, TWR_DEFAULT_DIGITS
from microengineer.environment.bodies import CelestialBody, CelestialBodyTable
from microengineer.environment.gravity import G0
from microengineer.telemetry import StagePropulsion
from microengineer.units import format_number, seconds_to_time_string

logger = logging.getLogger(__name__)


# =============================================================================
# Environment Mapping
# =============================================================================


@njit(cache=True, fastmath=True)
def _blend(vacuum: float, sea_level: float, ratio: float) -> float:
    """Linear blend between the vacuum (ratio 0) and ASL (ratio 1) endpoints."""
    if ratio <= 0.0:
        return vacuum
    if ratio >= 1.0:
        return sea_level
    return vacuum + (sea_level - vacuum) * ratio


@beartype
def twr_factor(body: CelestialBody, reference: CelestialBody) -> float:
    """Factor converting a reference-gravity TWR to the body's gravity.

    Returns:
        reference.surface_gravity / body.surface_gravity; exactly 1.0 when
        body is the reference, 0.0 for a body without gravity
    """
    if body is reference:
        return 1.0
    g_body = body.surface_gravity
    if g_body < DIVISION_EPSILON:
        return 0.0
    return reference.surface_gravity / g_body


@beartype
def density_ratio(body: CelestialBody, reference: CelestialBody) -> float:
    """Body sea-level density relative to the reference atmosphere, in [0, 1]."""
    if not body.has_atmosphere:
        return 0.0
    rho_ref = reference.sea_level_density
    if rho_ref < DIVISION_EPSILON:
        return 0.0
    return min(1.0, max(0.0, body.sea_level_density / rho_ref))


@beartype
def thrust_at_surface(stage: StagePropulsion, body: CelestialBody, reference: CelestialBody) -> float:
    """Stage thrust at the body's surface [N]."""
    return float(_blend(stage.thrust_vac, stage.thrust_asl, density_ratio(body, reference)))


@beartype
def isp_at_surface(stage: StagePropulsion, body: CelestialBody, reference: CelestialBody) -> float:
    """Stage specific impulse at the body's surface [s]."""
    return float(_blend(stage.isp_vac, stage.isp_asl, density_ratio(body, reference)))


@beartype
def twr_at_sea_level(stage: StagePropulsion, body: CelestialBody, reference: CelestialBody) -> float:
    """Thrust-to-weight ratio at the body's surface, in the body's gravity.

    Weight is implied by the host's vacuum TWR, so scaling it by the thrust
    loss gives the surface TWR in reference gravity before rescaling.
    """
    if stage.thrust_vac < DIVISION_EPSILON:
        return 0.0
    thrust_ratio = thrust_at_surface(stage, body, reference) / stage.thrust_vac
    return stage.twr_vac * thrust_ratio * twr_factor(body, reference)


@beartype
def mass_ratio(stage: StagePropulsion) -> float:
    """Initial mass / burnout mass, recovered from the vacuum figures."""
    if stage.isp_vac < DIVISION_EPSILON or stage.delta_v_vac <= 0:
        return 1.0
    return float(np.exp(stage.delta_v_vac / (G0 * stage.isp_vac)))


@beartype
def delta_v(isp: float | int, ratio: float | int) -> float:
    """Ideal delta-v (Tsiolkovsky equation).

    Args:
        isp: Specific impulse [s]
        ratio: Initial mass / burnout mass

    Returns:
        Delta-v [m/s]
    """
    if ratio <= 1.0:
        return 0.0
    return float(G0 * isp * np.log(ratio))


@beartype
def delta_v_at_sea_level(stage: StagePropulsion, body: CelestialBody, reference: CelestialBody) -> float:
    """Stage delta-v when burned at the body's surface [m/s]."""
    return delta_v(isp_at_surface(stage, body, reference), mass_ratio(stage))


# =============================================================================
# Stage Rows
# =============================================================================


@beartype
@dataclass(frozen=True)
class StageRow:
    """One line of the editor stage summary.

    Attributes:
        label: Two-digit stage number counted from the first stage to fire
        stage: Internal stage index
        body_name: Reference body the figures are computed for
        twr_vac: Vacuum TWR in the body's gravity
        twr_asl: Surface TWR in the body's gravity
        delta_v_asl: Delta-v at the body's surface [m/s]
        delta_v_vac: Vacuum delta-v [m/s]
        burn_time: Burn time [s]
        burn_time_display: Burn time formatted for display
    """

    label: str
    stage: int
    body_name: str
    twr_vac: float
    twr_asl: float
    delta_v_asl: float
    delta_v_vac: float
    burn_time: float
    burn_time_display: str


@beartype
@dataclass(frozen=True)
class FlightStageRow:
    """One line of the in-flight stage table."""

    label: str
    stage: int
    delta_v: float
    twr: float
    burn_time_display: str


@beartype
def stage_label(stage: StagePropulsion, stage_count: int) -> str:
    """Displayed stage number: '01' is always the first stage that fires."""
    return f"{stage_count - stage.stage:02d}"


@beartype
def propulsive_stages(stages: Iterable[StagePropulsion]) -> list[StagePropulsion]:
    """Stages that contribute delta-v, highest internal index first."""
    return sorted(
        (s for s in stages if s.is_propulsive),
        key=lambda s: s.stage,
        reverse=True,
    )


@beartype
def compute_stage_row(
    stage: StagePropulsion,
    body: CelestialBody,
    reference: CelestialBody,
    stage_count: int,
) -> StageRow:
    """Re-derive one stage's figures for a reference body.

    Args:
        stage: Host propulsion record
        body: Selected reference body for this stage
        reference: Home body the host's TWR figures assume
        stage_count: Total number of stages, propulsive or not

    Returns:
        StageRow for display
    """
    return StageRow(
        label=stage_label(stage, stage_count),
        stage=stage.stage,
        body_name=body.name,
        twr_vac=float(stage.twr_vac * twr_factor(body, reference)),
        twr_asl=twr_at_sea_level(stage, body, reference),
        delta_v_asl=delta_v_at_sea_level(stage, body, reference),
        delta_v_vac=float(stage.delta_v_vac),
        burn_time=float(stage.burn_time),
        burn_time_display=seconds_to_time_string(stage.burn_time),
    )


@beartype
def twr_decimal_digits(twr_values: Iterable[float | int]) -> int:
    """Decimal digits for a TWR column so its width stays stable.

    Two digits up to a highest TWR of 99, then one fewer per extra integer
    digit, never below zero.
    """
    finite = [v for v in twr_values if math.isfinite(v)]
    if not finite:
        return TWR_DEFAULT_DIGITS
    highest = math.floor(max(finite))
    if highest <= 0:
        return TWR_DEFAULT_DIGITS
    integer_digits = math.floor(math.log10(highest)) + 1
    return max(0, TWR_DEFAULT_DIGITS - max(0, integer_digits - 2))


@beartype
def format_twr(value: float | int, digits: int) -> str:
    return format_number(value, digits, FORMAT_GROUPED)


@beartype
def flight_stage_rows(stages: Sequence[StagePropulsion]) -> list[FlightStageRow]:
    """Rows of the in-flight stage table, using actual-environment figures."""
    stage_count = len(stages)
    return [
        FlightStageRow(
            label=stage_label(s, stage_count),
            stage=s.stage,
            delta_v=float(s.delta_v_actual),
            twr=float(s.twr_actual),
            burn_time_display=seconds_to_time_string(s.burn_time),
        )
        for s in propulsive_stages(stages)
    ]


@beartype
def to_frame(rows: Sequence[StageRow]) -> pl.DataFrame:
    """Stage rows as a DataFrame for export."""
    return pl.DataFrame(
        {
            "stage": [r.label for r in rows],
            "body": [r.body_name for r in rows],
            "twr_vac": [r.twr_vac for r in rows],
            "twr_asl": [r.twr_asl for r in rows],
            "delta_v_asl": [r.delta_v_asl for r in rows],
            "delta_v_vac": [r.delta_v_vac for r in rows],
            "burn_time": [r.burn_time for r in rows],
        },
        schema={
            "stage": pl.Utf8,
            "body": pl.Utf8,
            "twr_vac": pl.Float64,
            "twr_asl": pl.Float64,
            "delta_v_asl": pl.Float64,
            "delta_v_vac": pl.Float64,
            "burn_time": pl.Float64,
        },
    )


# =============================================================================
# Editor Stage Summary
# =============================================================================


@beartype
class StagingTable:
    """Per-stage figures with a user-selected reference body per stage.

    Body selections are keyed by row position in the displayed (propulsive)
    stage list and default to the home body. Rows are recomputed as soon as
    new stage data arrives or a selection changes.

    Example:
        >>> table = StagingTable(CelestialBodyTable())
        >>> table.update(stages)
        >>> table.select_body(0, "Duna")
        >>> table.rows[0].body_name
        'Duna'
    """

    def __init__(self, bodies: CelestialBodyTable) -> None:
        self.bodies = bodies
        self.stages: tuple[StagePropulsion, ...] = ()
        self.selections: list[str] = []
        self.rows: list[StageRow] = []

    @property
    def stage_count(self) -> int:
        return len(self.stages)

    @property
    def has_data(self) -> bool:
        return bool(self.stages)

    @property
    def twr_digits(self) -> int:
        return twr_decimal_digits(r.twr_vac for r in self.rows)

    def update(self, stages: Sequence[StagePropulsion] | None) -> None:
        """Replace the stage list (None clears it) and recompute."""
        self.stages = tuple(stages) if stages is not None else ()
        self._recompute()

    def body_for(self, position: int) -> str:
        """Selected body name for a displayed row."""
        self._ensure_selections(position + 1)
        return self.selections[position]

    def select_body(self, position: int, body_name: str) -> bool:
        """Pick the reference body for one displayed row.

        Returns:
            True if the selection was applied. Unknown bodies and positions
            outside the displayed rows are logged and ignored.
        """
        if not 0 <= position < len(self.rows):
            logger.warning(f"Stage selection index {position} out of range ({len(self.rows)} rows).")
            return False
        if body_name not in self.bodies:
            logger.warning(f"Unknown celestial body {body_name!r} for stage row {position}.")
            return False

        self.selections[position] = body_name
        self._recompute()
        return True

    def reset_selections(self) -> None:
        """Point every row back at the home body."""
        self.selections = []
        self._recompute()

    def to_frame(self) -> pl.DataFrame:
        return to_frame(self.rows)

    def _ensure_selections(self, count: int) -> None:
        home = self.bodies.home.name
        while len(self.selections) < count:
            self.selections.append(home)

    def _recompute(self) -> None:
        displayed = propulsive_stages(self.stages)
        self._ensure_selections(len(displayed))
        reference = self.bodies.home

        rows = []
        for position, stage in enumerate(displayed):
            body = self.bodies.get(self.selections[position]) or reference
            rows.append(compute_stage_row(stage, body, reference, self.stage_count))
        self.rows = rows
