# config.py
# Defaults and limits for the page replacement visualizer. Adjust these to
# change what the sidebar offers and how the results are drawn.

# SIMULATION DEFAULTS #
DEFAULT_REFERENCE_STRING = "7,0,1,2,0,3,0,4,2,3,0,3,2"
DEFAULT_FRAME_COUNT = 3
MIN_FRAMES = 1
MAX_FRAMES = 10

# PLAYBACK #
DEFAULT_SPEED = 1.0  # steps per second
MIN_SPEED = 0.5
MAX_SPEED = 5.0

# STATISTICS #
THRASHING_THRESHOLD = 70.0  # miss ratio (%) above which thrashing is flagged
EVENT_LOG_LENGTH = 20

# COLOURS #
FRAME_COLORS = {
    "empty": "lightgray",
    "filled": "lightblue",
    "hit": "lightgreen",
    "fault": "salmon",
}
FAULT_COLOR = "#ef4444"
HIT_COLOR = "#16a34a"

# LOGGING #
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
