"""The Entry model: one computed, displayable telemetry value.

An Entry is a single record type. Variants differ only in data: a category
tag, an EntryKind that selects how the value is displayed, unit metadata,
and a source function that pulls the raw value out of the per-tick
TelemetryContext.

Example:
    >>> from microengineer.entries.base import Category, Entry, attribute_source
    >>> from microengineer.units import mass_units
    >>>
    >>> mass = Entry(
    ...     name="Mass",
    ...     description="Total mass of the vessel.",
    ...     category=Category.VESSEL,
    ...     source=attribute_source("vessel", "mass"),
    ...     units=mass_units(),
    ...     decimals=0,
    ... )
    >>> mass.refresh(context)
    >>> mass.display
    '42,000 kg'
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any

from beartype import beartype

from microengineer.config import FORMAT_GROUPED, PLACEHOLDER
from microengineer.telemetry import TelemetryContext
from microengineer.units import UnitSpec, seconds_to_time_string, split_value

logger = logging.getLogger(__name__)

# Errors a source may raise when part of the context is missing or degenerate
SOURCE_ERRORS = (AttributeError, TypeError, ValueError, ArithmeticError, IndexError, KeyError)

Source = Callable[[TelemetryContext], Any]


# =============================================================================
# Enums
# =============================================================================


class Category(Enum):
    """Domain an entry belongs to; drives default panel membership."""

    VESSEL = "Vessel"
    ORBITAL = "Orbital"
    SURFACE = "Surface"
    FLIGHT = "Flight"
    TARGET = "Target"
    MANEUVER = "Maneuver"
    STAGE = "Stage"
    OAB = "OAB"
    MISC = "Misc"


class EntryKind(Enum):
    """How an entry's value is displayed."""

    NUMBER = auto()       # prefix-scaled number with unit
    TEXT = auto()         # string shown as-is
    TIME = auto()         # duration in seconds, two most significant units
    STAGE_TABLE = auto()  # tuple of stage records, drawn as a table


# =============================================================================
# Sources
# =============================================================================


def attribute_source(*names: str) -> Source:
    """Build a source that walks attributes from the context.

    A None anywhere along the path yields None.

    Example:
        >>> speed = attribute_source("vessel", "surface_speed")
        >>> speed(TelemetryContext())  # no vessel
    """
    if not names:
        raise ValueError("attribute_source needs at least one attribute name")

    def source(context: TelemetryContext) -> Any:
        obj: Any = context
        for name in names:
            if obj is None:
                return None
            obj = getattr(obj, name)
        return obj

    source.__qualname__ = "attribute_source(" + ".".join(names) + ")"
    return source


# =============================================================================
# Entry
# =============================================================================


@beartype
@dataclass
class Entry:
    """A computed telemetry value with unit and format metadata.

    Attributes:
        name: Display name; also the identifier panels and layout files use
        description: Tooltip text
        category: Domain of the entry
        source: Pulls the raw value from a TelemetryContext
        is_default: Included in the category's default panel
        kind: Display variant
        units: Unit metadata for NUMBER entries
        decimals: Digits after the decimal point
        formatting: Numeric format ("N", "F" or None)
        hide_when_no_data: Skip the row while the value is missing
        value: Last refreshed value, None when there is no data
    """

    name: str
    description: str
    category: Category
    source: Source
    is_default: bool = False
    kind: EntryKind = EntryKind.NUMBER
    units: UnitSpec = field(default_factory=UnitSpec)
    decimals: int = 2
    formatting: str | None = FORMAT_GROUPED
    hide_when_no_data: bool = False
    value: Any = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Entry name must not be empty")
        if self.decimals < 0:
            raise ValueError(f"Decimal count of {self.name!r} must be non-negative, got {self.decimals}")

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    @property
    def has_unit(self) -> bool:
        return self.kind is EntryKind.NUMBER and self.units.has_unit

    @property
    def has_alt_unit(self) -> bool:
        return self.kind is EntryKind.NUMBER and self.units.has_alt_unit

    @property
    def is_table_row(self) -> bool:
        return self.kind is EntryKind.STAGE_TABLE

    @property
    def has_data(self) -> bool:
        return self.value is not None

    # -------------------------------------------------------------------------
    # Refresh
    # -------------------------------------------------------------------------

    def refresh(self, context: TelemetryContext) -> None:
        """Pull this entry's value from the context.

        Never raises for missing or degenerate telemetry; the value becomes
        None instead.
        """
        try:
            raw = self.source(context)
        except SOURCE_ERRORS as e:
            logger.debug(f"Entry {self.name!r} has no data: {type(e).__name__}: {e}")
            self.value = None
            return

        self.value = self._normalize(raw)

    def clear(self) -> None:
        self.value = None

    def _normalize(self, raw: Any) -> Any:
        if raw is None:
            return None

        if self.kind is EntryKind.TEXT:
            return str(raw)

        if self.kind is EntryKind.STAGE_TABLE:
            try:
                return tuple(raw)
            except TypeError:
                logger.debug(f"Entry {self.name!r} expected a stage sequence, got {type(raw).__name__}")
                return None

        # NUMBER and TIME
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            logger.debug(f"Entry {self.name!r} expected a number, got {type(raw).__name__}")
            return None
        if isinstance(raw, float) and not math.isfinite(raw):
            return None
        return raw

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    @property
    def value_display(self) -> str:
        """Value column text (no unit)."""
        if self.value is None:
            return PLACEHOLDER
        if self.kind is EntryKind.TEXT:
            return self.value
        if self.kind is EntryKind.TIME:
            return seconds_to_time_string(self.value)
        if self.kind is EntryKind.STAGE_TABLE:
            return str(sum(1 for s in self.value if getattr(s, "is_propulsive", False)))
        text, _ = split_value(self.value, self.units, self.decimals, self.formatting)
        return text

    @property
    def unit_display(self) -> str:
        """Unit column text, matching the prefix chosen for the value."""
        if self.value is None or self.kind is not EntryKind.NUMBER:
            return ""
        _, symbol = split_value(self.value, self.units, self.decimals, self.formatting)
        return symbol

    @property
    def display(self) -> str:
        """Value and unit in one string."""
        unit = self.unit_display
        return f"{self.value_display} {unit}" if unit else self.value_display

    def set_alt_unit_active(self, active: bool) -> None:
        """Switch between the alternate unit and prefix scaling."""
        if self.units.alt is None:
            logger.warning(f"Entry {self.name!r} has no alternate unit.")
            return
        self.units = replace(self.units, alt=replace(self.units.alt, is_active=active))
