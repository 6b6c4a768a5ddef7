from pathlib import Path

DEFAULT_DATA_DIR = (Path(__file__).parent.parent.resolve() / "data").absolute().resolve()

# Raw score bounds (scores outside are clamped, never rejected)
SCORE_MIN = 0.0
SCORE_MAX = 10.0

# Weights are authored as percentages (0-100)
WEIGHT_SCALE = 100.0
WEIGHT_SUM_TOLERANCE = 0.01  # Sibling weights within this of 100 are considered valid
WEIGHT_MAX = 1e12  # Larger weights are capped so weighted sums stay finite

# Totals closer than this are ranked as ties
RANK_EPSILON = 1e-9

# Contribution dominance thresholds
DOMINANCE_BALANCED_RATIO = 1.2
DOMINANCE_SINGLE_RATIO = 999.0  # Only one dimension contributes anything

# Timelines need at least two dated charts to compare
TIMELINE_MIN_SOURCES = 2

# Timeline validation error codes
TIMELINE_MIN_SOURCES_REQUIRED = "timeline.minSourcesRequired"
TIMELINE_INVALID_SOURCES = "timeline.invalidSources"
TIMELINE_MISSING_TIME_MARKER = "timeline.missingTimeMarker"
TIMELINE_DIMENSION_MISMATCH = "timeline.dimensionMismatch"
TIMELINE_VENDOR_MISMATCH = "timeline.vendorMismatch"

# Vendor palette offered by the editor
PRESET_COLORS = [
    "#5470c6",  # Blue
    "#91cc75",  # Green
    "#fac858",  # Yellow
    "#ee6666",  # Red
    "#73c0de",  # Light blue
    "#3ba272",  # Dark green
    "#fc8452",  # Orange
    "#9a60b4",  # Purple
    "#ea7ccc",  # Pink
]

PRESET_MARKERS = [
    "circle",
    "diamond",
    "triangle",
    "rect",
    "roundRect",
    "pin",
    "arrow",
]

# Storage schema version for persisted score files
SCORES_FILE_VERSION = "1.0"
