"""Panel and layout model.

A panel is a named, ordered list of entry names with per-scene window state.
The layout owns every panel plus the one EntryTable their names point into.

Example:
    >>> from microengineer.layout import Layout, Scene
    >>>
    >>> layout = Layout.default()
    >>> custom = layout.create_panel()
    >>> custom.name
    'Custom1'
    >>> custom.add_entry("Apoapsis")
    True
    >>> [e.name for e in layout.entries_of(custom)]
    ['Apoapsis']
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from beartype import beartype

from microengineer.config import (
    ABBREVIATION_MAX_LENGTH,
    CUSTOM_PANEL_BASE_NAME,
    EDITOR_RECT,
    MAIN_GUI_RECT,
    POPPED_OUT_RECT,
)
from microengineer.entries.base import Category, Entry
from microengineer.entries.registry import EntryTable, build_all

logger = logging.getLogger(__name__)

Rect = tuple[float, float, float, float]  # x, y, width, height

EMPTY_RECT: Rect = (0.0, 0.0, 0.0, 0.0)


# =============================================================================
# Enums
# =============================================================================


class Scene(Enum):
    """Presentation context a panel can be shown in."""

    FLIGHT = "flight"
    MAP = "map"
    EDITOR = "editor"


class PanelRole(Enum):
    """Which built-in panel a panel is; NONE for user-created panels."""

    NONE = "None"
    MAIN_GUI = "MainGui"
    SETTINGS = "Settings"
    VESSEL = "Vessel"
    ORBITAL = "Orbital"
    SURFACE = "Surface"
    FLIGHT = "Flight"
    TARGET = "Target"
    MANEUVER = "Maneuver"
    STAGE = "Stage"
    STAGE_INFO_OAB = "StageInfoOAB"


NON_EDITABLE_ROLES = frozenset(
    {PanelRole.MAIN_GUI, PanelRole.SETTINGS, PanelRole.STAGE, PanelRole.STAGE_INFO_OAB}
)

STAGE_ROLES = frozenset({PanelRole.STAGE, PanelRole.STAGE_INFO_OAB})

ROLE_CATEGORIES: dict[PanelRole, Category] = {
    PanelRole.VESSEL: Category.VESSEL,
    PanelRole.ORBITAL: Category.ORBITAL,
    PanelRole.SURFACE: Category.SURFACE,
    PanelRole.FLIGHT: Category.FLIGHT,
    PanelRole.TARGET: Category.TARGET,
    PanelRole.MANEUVER: Category.MANEUVER,
    PanelRole.STAGE: Category.STAGE,
    PanelRole.STAGE_INFO_OAB: Category.OAB,
}


@beartype
def validate_abbreviation(text: str) -> bool:
    """Abbreviations are 1 to 3 letters or digits."""
    return 0 < len(text) <= ABBREVIATION_MAX_LENGTH and text.isalnum()


# =============================================================================
# Panel
# =============================================================================


@beartype
@dataclass
class SceneState:
    """Window state of a panel in one scene."""

    active: bool = False
    popped_out: bool = False
    rect: Rect = EMPTY_RECT


def _scene_states() -> dict[Scene, SceneState]:
    return {scene: SceneState() for scene in Scene}


@beartype
@dataclass
class Panel:
    """A titled, ordered collection of entry names.

    Attributes:
        name: Title, unique within a layout
        abbreviation: Short label on the main window toggle
        description: Free text
        role: Built-in role, NONE for user panels
        entry_names: Entry names in display order
        locked: Locked panels keep their position when popped out
        scenes: Active/popped-out flags and rectangle per scene
    """

    name: str
    abbreviation: str = ""
    description: str = ""
    role: PanelRole = PanelRole.NONE
    entry_names: list[str] = field(default_factory=list)
    locked: bool = False
    scenes: dict[Scene, SceneState] = field(default_factory=_scene_states)

    def __post_init__(self) -> None:
        for scene in Scene:
            self.scenes.setdefault(scene, SceneState())

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    @property
    def is_editable(self) -> bool:
        """Whether users may change the panel's entries."""
        return self.role not in NON_EDITABLE_ROLES

    @property
    def is_deletable(self) -> bool:
        return self.role is PanelRole.NONE

    @property
    def is_stage_table(self) -> bool:
        """Stage panels render as stage tables instead of entry rows."""
        return self.role in STAGE_ROLES

    # -------------------------------------------------------------------------
    # Scene state
    # -------------------------------------------------------------------------

    def is_active(self, scene: Scene) -> bool:
        return self.scenes[scene].active

    def set_active(self, scene: Scene, active: bool) -> None:
        self.scenes[scene].active = active

    def is_popped_out(self, scene: Scene) -> bool:
        return self.scenes[scene].popped_out

    def set_popped_out(self, scene: Scene, popped_out: bool) -> None:
        self.scenes[scene].popped_out = popped_out

    def rect(self, scene: Scene) -> Rect:
        return self.scenes[scene].rect

    def set_rect(self, scene: Scene, rect: Rect) -> None:
        self.scenes[scene].rect = rect

    def show_close_button(self, scene: Scene) -> bool:
        """Locked panels popped out of the main window cannot be closed."""
        return not (self.locked and self.is_popped_out(scene))

    def set_abbreviation(self, text: str) -> bool:
        """Apply a new abbreviation if it is valid; returns whether it was applied."""
        if not validate_abbreviation(text):
            logger.warning(f"Invalid abbreviation {text!r} for panel {self.name!r} ignored.")
            return False
        self.abbreviation = text
        return True

    # -------------------------------------------------------------------------
    # Entry list
    # -------------------------------------------------------------------------

    def add_entry(self, name: str) -> bool:
        """Append an entry; a name already on the panel is not added twice."""
        if name in self.entry_names:
            return False
        self.entry_names.append(name)
        return True

    def remove_entry(self, index: int) -> bool:
        if not 0 <= index < len(self.entry_names):
            return False
        del self.entry_names[index]
        return True

    def move_entry_up(self, index: int) -> bool:
        """Swap an entry with the one above it; the first entry stays put."""
        if not 0 < index < len(self.entry_names):
            return False
        names = self.entry_names
        names[index - 1], names[index] = names[index], names[index - 1]
        return True

    def move_entry_down(self, index: int) -> bool:
        """Swap an entry with the one below it; the last entry stays put."""
        if not 0 <= index < len(self.entry_names) - 1:
            return False
        names = self.entry_names
        names[index], names[index + 1] = names[index + 1], names[index]
        return True


# =============================================================================
# Default Panels
# =============================================================================


def _category_panel(
    entries: EntryTable,
    role: PanelRole,
    abbreviation: str,
    description: str,
    flight_active: bool = True,
) -> Panel:
    panel = Panel(
        name=role.value,
        abbreviation=abbreviation,
        description=description,
        role=role,
        entry_names=[e.name for e in entries.defaults(ROLE_CATEGORIES[role])],
    )
    panel.set_active(Scene.FLIGHT, flight_active)
    panel.set_rect(Scene.FLIGHT, POPPED_OUT_RECT)
    panel.set_rect(Scene.MAP, POPPED_OUT_RECT)
    return panel


@beartype
def default_panels(entries: EntryTable) -> list[Panel]:
    """The built-in panel set, filled with each category's default entries."""
    main_gui = Panel(name="MainGui", description="Main GUI", role=PanelRole.MAIN_GUI)
    main_gui.set_rect(Scene.FLIGHT, MAIN_GUI_RECT)
    main_gui.set_rect(Scene.MAP, MAIN_GUI_RECT)

    settings = Panel(name="Settings", abbreviation="SET", description="Settings", role=PanelRole.SETTINGS)
    settings.set_rect(Scene.FLIGHT, POPPED_OUT_RECT)
    settings.set_rect(Scene.MAP, POPPED_OUT_RECT)

    stage_editor = Panel(
        name="Stage (OAB)",
        abbreviation="OAB",
        description="Stage Info window for the assembly editor",
        role=PanelRole.STAGE_INFO_OAB,
        entry_names=[e.name for e in entries.defaults(Category.OAB)],
    )
    stage_editor.set_active(Scene.EDITOR, True)
    stage_editor.set_popped_out(Scene.EDITOR, True)
    stage_editor.set_rect(Scene.EDITOR, EDITOR_RECT)

    return [
        main_gui,
        settings,
        _category_panel(entries, PanelRole.VESSEL, "VES", "Vessel entries"),
        _category_panel(entries, PanelRole.ORBITAL, "ORB", "Orbital entries"),
        _category_panel(entries, PanelRole.SURFACE, "SUR", "Surface entries"),
        _category_panel(entries, PanelRole.FLIGHT, "FLT", "Flight entries", flight_active=False),
        _category_panel(entries, PanelRole.TARGET, "TGT", "Target entries"),
        _category_panel(entries, PanelRole.MANEUVER, "MAN", "Maneuver entries"),
        _category_panel(entries, PanelRole.STAGE, "STG", "Stage entries"),
        stage_editor,
    ]


# =============================================================================
# Layout
# =============================================================================


@beartype
class Layout:
    """All panels of a session and the entry table they reference.

    Example:
        >>> layout = Layout.default()
        >>> layout.find(PanelRole.VESSEL).entry_names[:2]
        ['Vessel', 'Mass']
    """

    def __init__(self, entries: EntryTable, panels: list[Panel] | None = None) -> None:
        self.entries = entries
        self.panels: list[Panel] = panels if panels is not None else default_panels(entries)

    @classmethod
    def default(cls) -> "Layout":
        """Fresh entries from the registry and the built-in panel set."""
        return cls(build_all())

    @property
    def editable_panels(self) -> list[Panel]:
        return [p for p in self.panels if p.is_editable]

    def find(self, role: PanelRole) -> Panel | None:
        """The first panel with a role; use find_by_name for user panels."""
        return next((p for p in self.panels if p.role is role), None)

    def find_by_name(self, name: str) -> Panel | None:
        return next((p for p in self.panels if p.name == name), None)

    def entries_of(self, panel: Panel) -> list[Entry]:
        """Resolve a panel's entry names; names missing from the table are skipped."""
        resolved = []
        for name in panel.entry_names:
            entry = self.entries.get(name)
            if entry is None:
                logger.debug(f"Panel {panel.name!r} references unknown entry {name!r}.")
                continue
            resolved.append(entry)
        return resolved

    def create_panel(self) -> Panel:
        """Add an empty user panel named Custom<n>, n the lowest unused number.

        The panel starts active in flight only.
        """
        taken = {p.name for p in self.panels}
        number = 1
        while f"{CUSTOM_PANEL_BASE_NAME}{number}" in taken:
            number += 1

        digits = str(number)
        if len(digits) == 1:
            abbreviation = f"Cu{digits}"
        elif len(digits) == 2:
            abbreviation = f"C{digits}"
        else:
            abbreviation = digits

        panel = Panel(name=f"{CUSTOM_PANEL_BASE_NAME}{number}", abbreviation=abbreviation)
        panel.set_active(Scene.FLIGHT, True)
        panel.set_rect(Scene.FLIGHT, POPPED_OUT_RECT)
        panel.set_rect(Scene.MAP, POPPED_OUT_RECT)
        self.panels.append(panel)
        logger.info(f"Created panel {panel.name!r}.")
        return panel

    def delete_panel(self, panel: Panel) -> bool:
        """Remove a user panel; built-in panels are never removed."""
        if not panel.is_deletable:
            logger.warning(f"Panel {panel.name!r} cannot be deleted.")
            return False
        index = next((i for i, p in enumerate(self.panels) if p is panel), None)
        if index is None:
            return False
        del self.panels[index]
        logger.info(f"Deleted panel {panel.name!r}.")
        return True

    def reset_to_defaults(self) -> None:
        """Rebuild entries through the registry and restore the built-in panels."""
        self.entries = build_all()
        self.panels = default_panels(self.entries)
        logger.info("Layout reset to defaults.")

    def restore_missing_panels(self) -> list[Panel]:
        """Add any built-in panel whose role is absent, at its default position.

        Returns:
            The panels that were added
        """
        present = {p.role for p in self.panels}
        added = []
        for position, panel in enumerate(default_panels(self.entries)):
            if panel.role in present:
                continue
            self.panels.insert(min(position, len(self.panels)), panel)
            added.append(panel)
            logger.warning(f"Panel {panel.name!r} missing from layout, restored from defaults.")
        return added
