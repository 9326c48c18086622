"""Shared telemetry fixtures."""

import pytest

from microengineer.telemetry import (
    AeroForces,
    DeltaVSolution,
    ManeuverState,
    OrbitState,
    StagePropulsion,
    TargetState,
    TelemetryContext,
    VesselState,
)


@pytest.fixture
def stages() -> tuple[StagePropulsion, ...]:
    """A two-engine vehicle with a decoupler-only stage in between."""
    return (
        StagePropulsion(
            stage=0,
            thrust_vac=215000.0,
            thrust_asl=168000.0,
            thrust_actual=168000.0,
            isp_vac=310.0,
            isp_asl=265.0,
            isp_actual=265.0,
            delta_v_vac=1800.0,
            delta_v_asl=1540.0,
            delta_v_actual=1540.0,
            twr_vac=1.9,
            twr_asl=1.49,
            twr_actual=1.49,
            burn_time=95.0,
            part_count=12,
        ),
        StagePropulsion(stage=1, part_count=1),
        StagePropulsion(
            stage=2,
            thrust_vac=60000.0,
            thrust_asl=14000.0,
            thrust_actual=60000.0,
            isp_vac=345.0,
            isp_asl=80.0,
            isp_actual=345.0,
            delta_v_vac=2400.0,
            delta_v_asl=560.0,
            delta_v_actual=2400.0,
            twr_vac=2.4,
            twr_asl=0.56,
            twr_actual=2.4,
            burn_time=310.0,
            part_count=8,
        ),
    )


@pytest.fixture
def solution(stages) -> DeltaVSolution:
    return DeltaVSolution(
        stages=stages,
        total_delta_v_vac=4200.0,
        total_delta_v_asl=2100.0,
        total_delta_v_actual=3940.0,
        total_burn_time=405.0,
        part_count=21,
    )


@pytest.fixture
def vessel(solution) -> VesselState:
    return VesselState(
        name="Kerbal X",
        mass=42000.0,
        situation="Flying",
        biome="Grasslands",
        surface_speed=174.5,
        vertical_speed=55.0,
        horizontal_speed=165.6,
        mach_number=0.52,
        gee_force=1.3,
        heading=90.0,
        pitch=72.5,
        roll=0.0,
        yaw=0.0,
        zenith=17.5,
        altitude_sea_level=4850.0,
        altitude_terrain=4780.0,
        latitude=-0.0972,
        longitude=-74.5577,
        atmospheric_density=0.72,
        static_pressure=55000.0,
        sound_speed=330.0,
        drag_coefficient=0.31,
        exposed_area=3.4,
        orbit=OrbitState(
            body_name="Kerbin",
            apoapsis=12500.0,
            periapsis=-580000.0,
            time_to_apoapsis=48.0,
            time_to_periapsis=-600.0,
            inclination=0.1,
            eccentricity=0.97,
            period=1200.0,
            orbital_speed=350.0,
            semi_major_axis=320000.0,
        ),
        delta_v=solution,
        aero=AeroForces(lift=1200.0, drag=8500.0, angle_of_attack=2.5, sideslip=0.1),
    )


@pytest.fixture
def full_context(vessel, solution) -> TelemetryContext:
    return TelemetryContext(
        vessel=vessel,
        target=TargetState(
            name="Mun Station",
            distance=1.2e7,
            relative_speed=850.0,
            closest_approach=2500.0,
            time_to_closest_approach=21600.0,
            orbit=OrbitState(body_name="Mun", apoapsis=30000.0, periapsis=29000.0, inclination=0.0),
        ),
        maneuver=ManeuverState(
            delta_v_required=860.0,
            delta_v_remaining=860.0,
            burn_time=95.0,
            time_to_node=1800.0,
            projected_apoapsis=11.4e6,
            projected_periapsis=75000.0,
        ),
        universal_time=1_234_567.0,
        editor=solution,
    )
