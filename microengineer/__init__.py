"""MicroEngineer - Live flight telemetry dashboard.

This package turns raw simulation telemetry into formatted, unit-aware
entries grouped in user-configurable panels, and recomputes staging
delta-v and TWR for any reference body.

Example:
    >>> from microengineer import Dashboard, Scene, TelemetryContext, VesselState
    >>>
    >>> dashboard = Dashboard()
    >>> dashboard.load_layout()
    >>> context = TelemetryContext(vessel=VesselState(name="Kerbal X", surface_speed=174.5))
    >>> for view in dashboard.tick(context):
    ...     print(view.name, [(r.name, r.value, r.unit) for r in view.rows])
"""

__version__ = "0.1.0"

# Tick driver
from microengineer.dashboard import Dashboard, EntryRow, PanelView

# Entries
from microengineer.entries import (
    ENTRY_FACTORIES,
    Category,
    Entry,
    EntryKind,
    EntryTable,
    attribute_source,
    build_all,
)

# Reference bodies
from microengineer.environment import (
    AtmosphereProfile,
    CelestialBody,
    CelestialBodyTable,
    stock_bodies,
)

# Panels and persistence
from microengineer.layout import Layout, Panel, PanelRole, Scene, validate_abbreviation
from microengineer.logging_config import setup_logging
from microengineer.recording import TelemetryRecorder

# Staging
from microengineer.staging import (
    FlightStageRow,
    StageRow,
    StagingTable,
    compute_stage_row,
    flight_stage_rows,
    propulsive_stages,
    twr_decimal_digits,
    twr_factor,
)
from microengineer.storage import LayoutError, LayoutFile, LocalLayoutStorage

# Telemetry context
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

# Units and formatting
from microengineer.units import (
    AltUnit,
    UnitSpec,
    format_value,
    seconds_to_time_string,
    split_value,
)

__all__ = [
    # Version
    "__version__",
    # Tick driver
    "Dashboard",
    "EntryRow",
    "PanelView",
    # Entries
    "Category",
    "ENTRY_FACTORIES",
    "Entry",
    "EntryKind",
    "EntryTable",
    "attribute_source",
    "build_all",
    # Reference bodies
    "AtmosphereProfile",
    "CelestialBody",
    "CelestialBodyTable",
    "stock_bodies",
    # Panels and persistence
    "Layout",
    "LayoutError",
    "LayoutFile",
    "LocalLayoutStorage",
    "Panel",
    "PanelRole",
    "Scene",
    "validate_abbreviation",
    # Logging
    "setup_logging",
    # Recording
    "TelemetryRecorder",
    # Staging
    "FlightStageRow",
    "StageRow",
    "StagingTable",
    "compute_stage_row",
    "flight_stage_rows",
    "propulsive_stages",
    "twr_decimal_digits",
    "twr_factor",
    # Telemetry context
    "AeroForces",
    "DeltaVSolution",
    "ManeuverState",
    "OrbitState",
    "StagePropulsion",
    "TargetState",
    "TelemetryContext",
    "VesselState",
    # Units and formatting
    "AltUnit",
    "UnitSpec",
    "format_value",
    "seconds_to_time_string",
    "split_value",
]
