"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TERM = 1

# Multi-click gesture window between two clicks on the same cell.
MULTI_CLICK_WINDOW_MS = 500
CLEAR_CLICK_COUNT = 3

# Status thresholds (inclusive lower bounds, in percent).
GOOD_THRESHOLD = 85
WARNING_THRESHOLD = 75

LAB_MARKER = "LAB"
LAB_WEIGHT = 2
DEFAULT_WEIGHT = 1

MONTH_GRID_CELLS = 42
