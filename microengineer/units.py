"""Unit and format engine for MicroEngineer.

Turns a raw telemetry number plus a unit descriptor into the text shown in a
dashboard row. Values are scaled through metric prefixes (milli, base, kilo,
mega, giga) so the mantissa stays readable, or converted to an alternate unit
with a fixed factor when the user has switched one on.

Design principles:
- Pure: same inputs, same string. No state, no I/O.
- Tolerant: missing or non-finite values render as the placeholder instead
  of raising.
- Immutable: unit descriptors are frozen dataclasses.

Example:
    >>> from microengineer.units import force_units, format_value
    >>> format_value(12500.0, force_units(), 2)
    '12.50 kN'
    >>> format_value(None, force_units(), 2)
    '-'
"""

import math
from dataclasses import dataclass

from beartype import beartype

from microengineer.config import FORMAT_FIXED, FORMAT_GROUPED, PLACEHOLDER

# =============================================================================
# Prefix and Conversion Definitions
# =============================================================================

# Prefix thresholds relative to the base unit, largest first
KILO = 1e3
MEGA = 1e6
GIGA = 1e9

# Alternate units: symbol -> multiplicative factor FROM the SI base unit
# e.g. 1 m/s = 3.6 km/h, so ALT_CONVERSIONS["km/h"] = 3.6
ALT_CONVERSIONS: dict[str, float] = {
    # Velocity (from m/s)
    "km/h": 3.6,
    "mph": 2.2369362920544,
    "kn": 1.9438444924406,
    "ft/s": 3.2808398950131,
    # Length (from m)
    "ft": 3.2808398950131,
    "mi": 0.000621371192237,
    # Mass (from kg)
    "t": 0.001,
    "lbm": 2.2046226218488,
    # Force (from N)
    "lbf": 0.2248089430997,
    # Angle (from degrees)
    "rad": math.pi / 180.0,
}

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


def _get_alt_factor(symbol: str) -> float:
    """Get the conversion factor for an alternate unit symbol."""
    if symbol not in ALT_CONVERSIONS:
        raise ValueError(f"Unknown alternate unit: {symbol!r}")
    return ALT_CONVERSIONS[symbol]


# =============================================================================
# Unit Descriptors
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class AltUnit:
    """An alternate display unit reached through a fixed factor.

    Attributes:
        symbol: Unit symbol shown after the value (e.g. "km/h")
        factor: Multiplier applied to the base-unit value
        is_active: Whether the alternate unit replaces prefix scaling
    """

    symbol: str
    factor: float | int
    is_active: bool = False

    def __post_init__(self) -> None:
        """Validate the conversion factor."""
        if not math.isfinite(self.factor) or self.factor == 0:
            raise ValueError(
                f"Alternate unit {self.symbol!r} needs a finite non-zero factor, "
                f"got {self.factor}"
            )


@beartype
@dataclass(frozen=True, slots=True)
class UnitSpec:
    """Unit metadata for one entry.

    Any prefix symbol may be None, in which case values in that range fall
    back to the next smaller defined unit.

    Examples:
        >>> UnitSpec(base="N", milli="mN", kilo="kN", mega="MN", giga="GN")
        >>> UnitSpec(base="°")
        >>> UnitSpec()  # unitless (Mach number, TWR)
    """

    base: str | None = None
    milli: str | None = None
    kilo: str | None = None
    mega: str | None = None
    giga: str | None = None
    alt: AltUnit | None = None

    def __post_init__(self) -> None:
        """Prefixed symbols only make sense on top of a base unit."""
        prefixed = (self.milli, self.kilo, self.mega, self.giga)
        if self.base is None and any(p is not None for p in prefixed):
            raise ValueError("Prefixed unit symbols require a base unit")

    @property
    def has_unit(self) -> bool:
        return self.base is not None

    @property
    def has_alt_unit(self) -> bool:
        return self.alt is not None

    @property
    def alt_active(self) -> bool:
        return self.alt is not None and self.alt.is_active


# =============================================================================
# Factory Functions - Unit descriptors used by the entry catalog
# =============================================================================


@beartype
def alt_unit(symbol: str, is_active: bool = False) -> AltUnit:
    """Create an alternate unit from the known conversion table."""
    return AltUnit(symbol, _get_alt_factor(symbol), is_active)


@beartype
def plain_unit(symbol: str | None = None) -> UnitSpec:
    """A unit without prefix scaling (degrees, seconds, g)."""
    return UnitSpec(base=symbol)


@beartype
def speed_units() -> UnitSpec:
    """Speeds in m/s with km/h available as alternate unit."""
    return UnitSpec(
        base="m/s", milli="mm/s", kilo="km/s", mega="Mm/s", giga="Gm/s",
        alt=alt_unit("km/h"),
    )


@beartype
def distance_units() -> UnitSpec:
    """Distances in metres scaled up to gigametres."""
    return UnitSpec(base="m", milli="mm", kilo="km", mega="Mm", giga="Gm")


@beartype
def force_units() -> UnitSpec:
    """Forces in newtons scaled up to giganewtons."""
    return UnitSpec(base="N", milli="mN", kilo="kN", mega="MN", giga="GN")


@beartype
def mass_units() -> UnitSpec:
    """Masses in kilograms with tonnes available as alternate unit."""
    return UnitSpec(base="kg", milli="g", alt=alt_unit("t"))


@beartype
def density_units() -> UnitSpec:
    """Atmospheric density in g/L (numerically equal to kg/m^3)."""
    return UnitSpec(base="g/L", milli="mg/L", kilo="kg/L", mega="Mg/L", giga="Gg/L")


@beartype
def delta_v_units() -> UnitSpec:
    """Delta-v in m/s without prefix scaling, as pilots read it."""
    return UnitSpec(base="m/s")


# =============================================================================
# Formatting
# =============================================================================


@beartype
def select_unit(value: float | int, units: UnitSpec) -> tuple[float | int, str]:
    """Pick the display magnitude and symbol for a value.

    The largest defined prefix whose threshold the magnitude clears wins.
    Values strictly between 0 and 1 use the milli unit when one exists.

    Args:
        value: Raw value in the base unit
        units: Unit descriptor

    Returns:
        Tuple of (scaled value, unit symbol); the symbol is "" for unitless
    """
    if units.alt_active:
        return value * units.alt.factor, units.alt.symbol

    magnitude = abs(value)
    for threshold, symbol in ((GIGA, units.giga), (MEGA, units.mega), (KILO, units.kilo)):
        if symbol is not None and magnitude >= threshold:
            return value / threshold, symbol

    if units.milli is not None and 0 < magnitude < 1:
        return value * KILO, units.milli

    return value, units.base or ""


@beartype
def format_number(value: float | int, decimals: int = 2, formatting: str | None = FORMAT_GROUPED) -> str:
    """Format a bare number.

    Args:
        value: Number to format
        decimals: Digits after the decimal point
        formatting: "N" for thousands separators, "F" for plain fixed point,
            None for the number's own string form

    Returns:
        Formatted mantissa without unit
    """
    if formatting is None:
        return str(value)
    if formatting not in (FORMAT_GROUPED, FORMAT_FIXED):
        raise ValueError(f"Unknown numeric format: {formatting!r}")
    if decimals < 0:
        raise ValueError(f"Decimal count must be non-negative, got {decimals}")

    # Avoid printing "-0.00" for tiny negative values
    if round(value, decimals) == 0:
        value = 0.0

    if formatting == FORMAT_GROUPED:
        return f"{value:,.{decimals}f}"
    return f"{value:.{decimals}f}"


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and not math.isfinite(value)


@beartype
def split_value(
    value: float | int | None,
    units: UnitSpec,
    decimals: int = 2,
    formatting: str | None = FORMAT_GROUPED,
) -> tuple[str, str]:
    """Format a value into separate value and unit columns.

    Returns:
        Tuple of (value text, unit symbol). Missing or non-finite values
        give (PLACEHOLDER, "").
    """
    if _is_missing(value):
        return PLACEHOLDER, ""

    scaled, symbol = select_unit(value, units)
    return format_number(scaled, decimals, formatting), symbol


@beartype
def format_value(
    value: float | int | None,
    units: UnitSpec,
    decimals: int = 2,
    formatting: str | None = FORMAT_GROUPED,
) -> str:
    """Format a value with its unit symbol appended.

    Args:
        value: Raw value in the base unit, or None for no data
        units: Unit descriptor
        decimals: Digits after the decimal point
        formatting: Numeric format ("N", "F" or None)

    Returns:
        Display string such as "12.50 kN", or the placeholder
    """
    text, symbol = split_value(value, units, decimals, formatting)
    return f"{text} {symbol}" if symbol else text


@beartype
def seconds_to_time_string(seconds: float | int | None) -> str:
    """Format a duration using its two most significant units.

    Finer units are truncated, never rounded up.

    Examples:
        >>> seconds_to_time_string(45)
        '45s'
        >>> seconds_to_time_string(125)
        '2m 05s'
        >>> seconds_to_time_string(3700)
        '1h 01m'
        >>> seconds_to_time_string(90000)
        '1d 01h'
    """
    if _is_missing(seconds):
        return PLACEHOLDER

    total = int(abs(seconds))
    sign = "-" if seconds < 0 and total > 0 else ""

    days, rest = divmod(total, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, SECONDS_PER_MINUTE)

    if days:
        return f"{sign}{days}d {hours:02d}h"
    if hours:
        return f"{sign}{hours}h {minutes:02d}m"
    if minutes:
        return f"{sign}{minutes}m {secs:02d}s"
    return f"{sign}{secs}s"
