"""
Configuration constants for frontier selection.

Defaults for map configuration and built-in evaluation strategies.
"""


class Config:
    """Frontier selection configuration constants."""

    # ==================== Occupancy Grid ====================
    UNKNOWN_VALUE = -1              # ROS OccupancyGrid unknown cell
    FREE_THRESHOLD = 0              # values in [0, FREE_THRESHOLD] are free
    OCCUPIED_VALUE = 100            # fully occupied cell

    # ==================== Frontiers Map ====================
    MIN_FRONTIER_SIZE = 3           # cells - default for FrontierDetector
    DEFAULT_NAMESPACE = "frontiers" # parameter namespace for load_params
    DEFAULT_VERBOSITY = 0

    # ==================== Detection ====================
    SAFETY_MARGIN = 0               # grid cells - dilation of obstacles

    # ==================== Strategy Defaults ====================
    DEFAULT_WEIGHT = 1.0            # multiplier applied by every strategy
    DISTANCE_EPSILON = 0.1          # m - keeps inverse distance finite
    MIN_HEADING_DISTANCE = 0.5      # m - below this heading is meaningless
    NEUTRAL_DIRECTION_SCORE = 0.5

    # ==================== Information Gain ====================
    INFO_GAIN_RADIUS = 40           # grid cells (~2m at 0.05m resolution)
    INFO_GAIN_NORMALIZER = 100.0

    # ==================== Openness Calculation ====================
    OPENNESS_RADIUS = 12            # grid cells - openness check radius
    OPENNESS_MIN_SCORE = 0.3        # minimum openness score
    UNKNOWN_OPENNESS_FACTOR = 0.7   # unknown cells count as partly open
    WALL_PENALTY_FACTOR = 0.3       # multiply openness for wall-adjacent frontiers
    WALL_CHECK_THRESHOLD = 8        # grid cells - wall proximity check
    WALL_OBSTACLE_RATIO = 0.3       # obstacle share that makes a wall
