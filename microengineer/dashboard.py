"""Tick driver: refreshes entries and builds what each visible panel shows.

The host calls Dashboard.tick once per frame with a fresh TelemetryContext.
In flight and map view, entries on panels active in that scene are
refreshed, each at most once per tick, and only while a vessel exists. In
the assembly editor, the editor stage panel is refreshed when a new delta-v
solution arrives.

Example:
    >>> from microengineer.dashboard import Dashboard
    >>> from microengineer.layout import Scene
    >>>
    >>> dashboard = Dashboard()
    >>> dashboard.load_layout()
    >>> for view in dashboard.tick(context):
    ...     for row in view.rows:
    ...         print(row.name, row.value, row.unit)
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from beartype import beartype

from microengineer.config import PLACEHOLDER
from microengineer.entries.base import EntryKind
from microengineer.environment.bodies import CelestialBodyTable
from microengineer.layout import Layout, Panel, PanelRole, Scene
from microengineer.recording import TelemetryRecorder
from microengineer.staging import (
    FlightStageRow,
    StageRow,
    StagingTable,
    flight_stage_rows,
    twr_decimal_digits,
)
from microengineer.storage import LayoutError, LayoutStorage, LocalLayoutStorage
from microengineer.telemetry import DeltaVSolution, TelemetryContext

logger = logging.getLogger(__name__)

FLIGHT_SCENES = frozenset({Scene.FLIGHT, Scene.MAP})

# Panels drawn by the host itself rather than from entries
CHROME_ROLES = frozenset({PanelRole.MAIN_GUI, PanelRole.SETTINGS})

EDITOR_TOTALS_LABEL = "Total ∆v (ASL, vacuum)"
EDITOR_TOTAL_ASL = "Total ∆v Actual (OAB)"
EDITOR_TOTAL_VAC = "Total ∆v Vac (OAB)"


# =============================================================================
# Render Rows
# =============================================================================


@beartype
@dataclass(frozen=True)
class EntryRow:
    """Name, value and unit columns of one entry."""

    name: str
    value: str
    unit: str = ""


@beartype
@dataclass(frozen=True)
class PanelView:
    """Everything needed to draw one panel this tick.

    Generic panels fill ``rows``. The flight stage panel fills
    ``stage_rows`` and the editor stage panel fills ``header`` and
    ``editor_rows``; both set ``twr_digits`` for their TWR columns.
    """

    name: str
    role: PanelRole
    popped_out: bool = False
    show_close_button: bool = True
    rows: tuple[EntryRow, ...] = ()
    stage_rows: tuple[FlightStageRow, ...] = ()
    editor_rows: tuple[StageRow, ...] = ()
    header: tuple[EntryRow, ...] = ()
    twr_digits: int = 2


# =============================================================================
# Dashboard
# =============================================================================


@beartype
class Dashboard:
    """Owns the layout, the body table and the editor staging calculator.

    Example:
        >>> dashboard = Dashboard(storage=LocalLayoutStorage("./profile"))
        >>> dashboard.set_scene(Scene.EDITOR)
        >>> views = dashboard.tick(TelemetryContext(editor=solution))
        >>> dashboard.select_body(0, "Mun")
    """

    def __init__(
        self,
        layout: Layout | None = None,
        bodies: CelestialBodyTable | None = None,
        storage: LayoutStorage | None = None,
    ) -> None:
        self.layout = layout if layout is not None else Layout.default()
        self.bodies = bodies if bodies is not None else CelestialBodyTable()
        self.storage = storage if storage is not None else LocalLayoutStorage()
        self.staging = StagingTable(self.bodies)
        self.scene = Scene.FLIGHT
        self.context = TelemetryContext()
        self.recorder: TelemetryRecorder | None = None
        self._editor_solution: DeltaVSolution | None = None

    def set_scene(self, scene: Scene) -> None:
        if scene is not self.scene:
            logger.debug(f"Scene changed from {self.scene.value} to {scene.value}.")
        self.scene = scene

    # -------------------------------------------------------------------------
    # Refresh
    # -------------------------------------------------------------------------

    def tick(self, context: TelemetryContext) -> list[PanelView]:
        """Refresh entries for the current scene and build panel views."""
        self.context = context

        if self.scene in FLIGHT_SCENES:
            if not context.has_vessel:
                return []
            self._refresh_flight(context)
        elif context.editor is not self._editor_solution:
            self.refresh_editor(context.editor)

        return self.render()

    def _refresh_flight(self, context: TelemetryContext) -> None:
        refreshed: set[str] = set()
        names = [n for p in self.visible_panels() for n in p.entry_names]
        if self.recorder is not None:
            names.extend(self.recorder.entry_names)

        for name in names:
            if name in refreshed:
                continue
            entry = self.layout.entries.get(name)
            if entry is None:
                continue
            entry.refresh(context)
            refreshed.add(name)

        if self.recorder is not None:
            self.recorder.sample(self.layout.entries, context.universal_time)

    def refresh_editor(self, solution: DeltaVSolution | None) -> None:
        """Take a new delta-v solution for the vehicle in the editor."""
        self._editor_solution = solution
        editor_context = TelemetryContext(editor=solution)

        panel = self.layout.find(PanelRole.STAGE_INFO_OAB)
        if panel is not None:
            for entry in self.layout.entries_of(panel):
                entry.refresh(editor_context)

        self.staging.update(solution.stages if solution is not None else None)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def visible_panels(self) -> list[Panel]:
        """Panels shown in the current scene.

        In flight, the Target and Maneuver panels stay hidden while there is
        no target or maneuver node. The editor stage panel needs stage data.
        """
        visible = []
        for panel in self.layout.panels:
            if panel.role in CHROME_ROLES or not panel.is_active(self.scene):
                continue
            if self.scene in FLIGHT_SCENES:
                if panel.role is PanelRole.STAGE_INFO_OAB:
                    continue
                if panel.role is PanelRole.TARGET and not self.context.has_target:
                    continue
                if panel.role is PanelRole.MANEUVER and not self.context.has_maneuver:
                    continue
            elif panel.role is PanelRole.STAGE_INFO_OAB and not self.staging.has_data:
                continue
            visible.append(panel)
        return visible

    def render(self) -> list[PanelView]:
        return [self.panel_view(p) for p in self.visible_panels()]

    def panel_view(self, panel: Panel) -> PanelView:
        """Build the rows of one panel from its entries' current values."""
        common = {
            "name": panel.name,
            "role": panel.role,
            "popped_out": panel.is_popped_out(self.scene),
            "show_close_button": panel.show_close_button(self.scene),
        }

        if panel.role is PanelRole.STAGE:
            table = next((e for e in self.layout.entries_of(panel) if e.is_table_row), None)
            stages = table.value if table is not None and table.value is not None else ()
            rows = flight_stage_rows(stages)
            return PanelView(
                **common,
                stage_rows=tuple(rows),
                twr_digits=twr_decimal_digits(r.twr for r in rows),
            )

        if panel.role is PanelRole.STAGE_INFO_OAB:
            return PanelView(
                **common,
                header=(self._editor_totals(),),
                editor_rows=tuple(self.staging.rows),
                twr_digits=self.staging.twr_digits,
            )

        rows = []
        for entry in self.layout.entries_of(panel):
            if entry.hide_when_no_data and not entry.has_data:
                continue
            unit = entry.unit_display if entry.kind is EntryKind.NUMBER else ""
            rows.append(EntryRow(entry.name, entry.value_display, unit))
        return PanelView(**common, rows=tuple(rows))

    def _editor_totals(self) -> EntryRow:
        asl = self.layout.entries.get(EDITOR_TOTAL_ASL)
        vac = self.layout.entries.get(EDITOR_TOTAL_VAC)
        values = [e.value_display if e is not None else PLACEHOLDER for e in (asl, vac)]
        return EntryRow(EDITOR_TOTALS_LABEL, ", ".join(values), "m/s")

    # -------------------------------------------------------------------------
    # Staging
    # -------------------------------------------------------------------------

    def select_body(self, position: int, body_name: str) -> bool:
        """Pick the reference body of one editor stage row."""
        return self.staging.select_body(position, body_name)

    # -------------------------------------------------------------------------
    # Layout persistence
    # -------------------------------------------------------------------------

    def save_layout(self) -> Path:
        return self.storage.save(self.layout)

    def load_layout(self) -> bool:
        """Apply the saved layout; an unreadable file keeps the current one."""
        try:
            return self.storage.load(self.layout)
        except LayoutError as e:
            logger.error(f"Could not load layout, keeping current layout: {e}")
            return False

    def reset_layout(self) -> None:
        """Restore default panels and entries, then save them."""
        self.layout.reset_to_defaults()
        self._editor_solution = None
        self.staging.reset_selections()
        self.staging.update(None)
        self.save_layout()
