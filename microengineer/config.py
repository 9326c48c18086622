"""Configuration constants for MicroEngineer.

Central place for values shared across the entry pipeline, the staging
calculator and the layout model. Nothing here reads the environment or the
filesystem at import time.
"""

from pathlib import Path

# =============================================================================
# Display
# =============================================================================

# Shown for any value that cannot currently be computed
PLACEHOLDER = "-"

# Numeric formats understood by the unit/format engine
FORMAT_GROUPED = "N"  # thousands separator, fixed decimals
FORMAT_FIXED = "F"  # fixed decimals, no separator

# =============================================================================
# Staging
# =============================================================================

# Stages whose vacuum and ASL delta-v both fall below this are non-propulsive
STAGE_DELTA_V_EPSILON = 1e-4

# Guard for divisions by thrust, Isp, gravity and density
DIVISION_EPSILON = 1e-12

# Default decimal digits for the TWR column
TWR_DEFAULT_DIGITS = 2

# =============================================================================
# Layout
# =============================================================================

LAYOUT_VERSION = 2
LAYOUT_FILE_NAME = "micro_layout.json"
DEFAULT_LAYOUT_DIR = Path.home() / ".microengineer"

CUSTOM_PANEL_BASE_NAME = "Custom"
ABBREVIATION_MAX_LENGTH = 3

# Window geometry (x, y, width, height) in screen pixels
MAIN_GUI_RECT = (1500.0, 20.0, 290.0, 1440.0)
POPPED_OUT_RECT = (1900.0, 50.0, 290.0, 1440.0)
EDITOR_RECT = (645.0, 41.0, 0.0, 0.0)
