"""Default configuration values for world-graph."""

# Stroke colors per node category (entity=cyan, action=green, risk=red, outcome=amber)
CATEGORY_COLORS: dict[str, str] = {
    "entity": "#06b6d4",
    "action": "#10b981",
    "risk": "#ef4444",
    "outcome": "#f59e0b",
}

# Neutral slate used for unrecognized categories
COMPACT_FALLBACK_COLOR = "#94a3b8"  # slate-400
FULL_SCREEN_FALLBACK_COLOR = "#64748b"  # slate-500

HIGHLIGHT_EDGE_COLOR = "#22d3ee"
EDGE_LABEL_COLOR = "#64748b"
NODE_FILL = "#0f172a"
NODE_FILL_HOVER = "#ffffff"
NODE_LABEL_COLOR = "#cbd5e1"
NODE_LABEL_COLOR_HOVER = "#ffffff"

# Phase offsets (radians) for the three placement tiers
TIER_PHASES: tuple[float, float, float] = (0.0, 0.5, 1.0)

# Viewport limits
MIN_SCALE = 0.2
MAX_SCALE = 4.0
WHEEL_SENSITIVITY = 0.001
ZOOM_STEP = 0.2

# Dimming
EDGE_DIM_OPACITY = 0.1

# Radii tables: (rx, ry) per tier
COMPACT_RADII: dict[str, tuple[float, float]] = {
    "tier0": (40.0, 40.0),
    "tier1": (90.0, 90.0),
    "tier2": (130.0, 130.0),
}
FULL_SCREEN_RADII: dict[str, tuple[float, float]] = {
    "tier0": (100.0, 80.0),
    "tier1": (220.0, 160.0),
    "tier2": (320.0, 240.0),
}

TOOLTIP_HINT = "Double click to focus"
