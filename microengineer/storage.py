"""File-based layout persistence for MicroEngineer.

The layout is stored as one JSON document:

    {
      "layout_version": 2,
      "saved_at": "2024-05-01T12:00:00",
      "panels": [
        {
          "name": "Vessel",
          "abbreviation": "VES",
          "description": "Vessel entries",
          "role": "Vessel",
          "locked": false,
          "scenes": {
            "flight": {"active": true, "popped_out": false, "rect": [1900.0, 50.0, 290.0, 1440.0]},
            "map": {...},
            "editor": {...}
          },
          "entries": ["Vessel", "Mass", "Total ∆v"]
        }
      ]
    }

Entries are stored by name and re-linked against the current EntryTable on
load. A file that cannot be read as a whole raises LayoutError; problems
with single panels or entries are logged and skipped.

Example:
    >>> from microengineer.layout import Layout
    >>> from microengineer.storage import LocalLayoutStorage
    >>>
    >>> storage = LocalLayoutStorage("./profile")
    >>> storage.save(layout)
    >>>
    >>> restored = Layout.default()
    >>> storage.load(restored)
    True
"""

import json
import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from beartype import beartype

from microengineer.config import DEFAULT_LAYOUT_DIR, LAYOUT_FILE_NAME, LAYOUT_VERSION
from microengineer.entries.registry import EntryTable
from microengineer.layout import Layout, Panel, PanelRole, Rect, Scene, SceneState, validate_abbreviation

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """The layout file as a whole cannot be read."""


# =============================================================================
# Serialization Helpers
# =============================================================================


def _serialize_scene(state: SceneState) -> dict[str, Any]:
    return {
        "active": state.active,
        "popped_out": state.popped_out,
        "rect": list(state.rect),
    }


def panel_to_dict(panel: Panel) -> dict[str, Any]:
    """Serialize a panel to a JSON-compatible descriptor."""
    return {
        "name": panel.name,
        "abbreviation": panel.abbreviation,
        "description": panel.description,
        "role": panel.role.value,
        "locked": panel.locked,
        "scenes": {scene.value: _serialize_scene(panel.scenes[scene]) for scene in Scene},
        "entries": list(panel.entry_names),
    }


def _require(data: dict[str, Any], key: str, kind: type, default: Any = None) -> Any:
    value = data.get(key, default)
    # bool is an int subclass; never accept it where a number is expected
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise ValueError(f"Field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _deserialize_rect(value: Any) -> Rect:
    if not isinstance(value, list) or len(value) != 4:
        raise ValueError(f"Rectangle must be a list of 4 numbers, got {value!r}")
    if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in value):
        raise ValueError(f"Rectangle must be a list of 4 numbers, got {value!r}")
    x, y, width, height = (float(v) for v in value)
    return (x, y, width, height)


def _deserialize_scene(value: Any) -> SceneState:
    if value is None:
        return SceneState()
    if not isinstance(value, dict):
        raise ValueError(f"Scene state must be an object, got {type(value).__name__}")
    rect = value.get("rect")
    return SceneState(
        active=_require(value, "active", bool, False),
        popped_out=_require(value, "popped_out", bool, False),
        rect=_deserialize_rect(rect) if rect is not None else (0.0, 0.0, 0.0, 0.0),
    )


def panel_from_dict(data: Any, entries: EntryTable) -> Panel:
    """Rebuild a panel from its descriptor, re-linking entries by name.

    Entry names the table does not know are dropped with a warning.

    Raises:
        ValueError: If the descriptor itself is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Panel descriptor must be an object, got {type(data).__name__}")

    name = _require(data, "name", str)
    role = PanelRole(_require(data, "role", str, PanelRole.NONE.value))

    scenes_data = _require(data, "scenes", dict, {})
    scenes = {scene: _deserialize_scene(scenes_data.get(scene.value)) for scene in Scene}

    entry_names: list[str] = []
    for entry_name in _require(data, "entries", list, []):
        if not isinstance(entry_name, str) or entry_name not in entries:
            logger.warning(f"Panel {name!r}: unknown entry {entry_name!r} dropped.")
            continue
        if entry_name in entry_names:
            continue
        entry_names.append(entry_name)

    abbreviation = _require(data, "abbreviation", str, "")
    if abbreviation and not validate_abbreviation(abbreviation):
        logger.warning(f"Panel {name!r}: invalid abbreviation {abbreviation!r} cleared.")
        abbreviation = ""

    return Panel(
        name=name,
        abbreviation=abbreviation,
        description=_require(data, "description", str, ""),
        role=role,
        entry_names=entry_names,
        locked=_require(data, "locked", bool, False),
        scenes=scenes,
    )


# =============================================================================
# Layout File
# =============================================================================


@beartype
@dataclass
class LayoutFile:
    """A serializable layout document.

    Attributes:
        panels: Panel descriptors in display order
        layout_version: Format version the document was written with
        saved_at: When the document was written
    """

    panels: list[Any]
    layout_version: int = LAYOUT_VERSION
    saved_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_layout(cls, layout: Layout) -> "LayoutFile":
        return cls(panels=[panel_to_dict(p) for p in layout.panels])

    def to_json(self) -> str:
        """Serialize to JSON string."""
        data = {
            "layout_version": self.layout_version,
            "saved_at": self.saved_at.isoformat(),
            "panels": self.panels,
        }
        return json.dumps(data, indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "LayoutFile":
        """Deserialize from JSON string.

        Raises:
            LayoutError: If the text is not a layout document
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise LayoutError(f"Layout file is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise LayoutError("Layout file must contain a JSON object")

        version = data.get("layout_version")
        if not isinstance(version, int) or isinstance(version, bool):
            raise LayoutError(f"Layout file has no valid layout_version: {version!r}")

        panels = data.get("panels")
        if not isinstance(panels, list):
            raise LayoutError("Layout file has no panel list")

        saved_at = datetime.now()
        if isinstance(data.get("saved_at"), str):
            try:
                saved_at = datetime.fromisoformat(data["saved_at"])
            except ValueError:
                logger.warning(f"Ignoring unreadable saved_at {data['saved_at']!r}.")

        return cls(panels=panels, layout_version=version, saved_at=saved_at)

    def to_panels(self, entries: EntryTable) -> list[Panel]:
        """Decode panel descriptors; malformed or duplicate panels are skipped."""
        panels: list[Panel] = []
        names: set[str] = set()
        roles: set[PanelRole] = set()

        for index, descriptor in enumerate(self.panels):
            try:
                panel = panel_from_dict(descriptor, entries)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed panel #{index}: {e}")
                continue

            if panel.name in names:
                logger.warning(f"Skipping duplicate panel {panel.name!r}.")
                continue
            if panel.role is not PanelRole.NONE and panel.role in roles:
                logger.warning(f"Skipping second panel with role {panel.role.value!r}.")
                continue

            names.add(panel.name)
            roles.add(panel.role)
            panels.append(panel)

        return panels


# =============================================================================
# Storage Backend Protocol
# =============================================================================


@runtime_checkable
class LayoutStorage(Protocol):
    """Protocol for layout storage backends."""

    @abstractmethod
    def save(self, layout: Layout) -> Path:
        """Persist a layout.

        Returns:
            Path where the layout was saved
        """
        ...

    @abstractmethod
    def load(self, layout: Layout) -> bool:
        """Replace the layout's panels with the stored ones.

        Returns:
            True if a stored layout was applied, False if the current
            layout was kept
        """
        ...


# =============================================================================
# Local Storage Implementation
# =============================================================================


@beartype
class LocalLayoutStorage:
    """Stores the layout as a single JSON file in a directory.

    Example:
        >>> storage = LocalLayoutStorage()  # ~/.microengineer/micro_layout.json
        >>> storage.save(layout)
    """

    def __init__(self, root: str | Path = DEFAULT_LAYOUT_DIR, file_name: str = LAYOUT_FILE_NAME) -> None:
        self.root = Path(root)
        self.path = self.root / file_name

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, layout: Layout) -> Path:
        """Write the layout, creating the directory if needed."""
        text = LayoutFile.from_layout(layout).to_json()
        self.root.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Saved layout with {len(layout.panels)} panels to {self.path}.")
        return self.path

    def read(self) -> LayoutFile:
        """Read and parse the stored document.

        Raises:
            FileNotFoundError: If nothing has been saved yet
            LayoutError: If the file cannot be read or parsed
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Layout not found at {self.path}")
        try:
            with open(self.path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LayoutError(f"Cannot read layout file {self.path}: {e}") from e
        return LayoutFile.from_json(text)

    def load(self, layout: Layout) -> bool:
        """Apply the stored layout.

        A missing file or a different layout_version keeps the current
        layout. Built-in panels absent from the file are restored from
        defaults.

        Raises:
            LayoutError: If the file exists but cannot be read as a layout
        """
        if not self.path.exists():
            logger.info(f"No saved layout at {self.path}, keeping current layout.")
            return False

        layout_file = self.read()
        if layout_file.layout_version != LAYOUT_VERSION:
            logger.warning(
                f"Layout version {layout_file.layout_version} does not match "
                f"{LAYOUT_VERSION}, keeping current layout."
            )
            return False

        layout.panels = layout_file.to_panels(layout.entries)
        layout.restore_missing_panels()
        logger.info(f"Loaded layout with {len(layout.panels)} panels from {self.path}.")
        return True
