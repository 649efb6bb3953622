# view/constants.py
# Shared view-level constants for the crossplot

# -- color palette --
PRIMARY_COLOR = "#1976d2"
ACCENT_COLOR = "#ff9800"
SECONDARY_COLOR = "#424242"
PLOT_BG = "white"
ERROR_FG = "#c62828"
ERROR_BG = "#ffe0e0"

# marker size in screen pixels
POINT_SIZE = 8

CONTROLS_HINT = "Zoom: Mouse wheel • Pan: Drag • Reset: Double-click"
EMPTY_HINT = (
    "To get started: upload a CSV file and select columns for your crossplot!\n"
    "(You can use Save Sample CSV for a demo)"
)
COLUMN_PLACEHOLDER = "Select column..."
