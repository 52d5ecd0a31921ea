"""
Built-in frontier evaluation strategies.

Evaluates frontiers based on size, distance, information gain, openness
and heading consistency.
"""
from typing import Dict, Optional, Tuple
import math
import numpy as np

from frontier_selection.config import Config
from frontier_selection.exceptions import ConfigurationError
from frontier_selection.strategies.base import FrontierValue
from frontier_selection.types import ExplorationContext, Frontier
from frontier_selection import utils


def _frontier_world_pos(frontier: Frontier, context: ExplorationContext) -> Tuple[float, float]:
    gx, gy = frontier.center
    wx, wy = utils.grid_to_world(gx, gy, context.map_info)
    if wx is None:
        # No map metadata, fall back to cell coordinates
        return gx + 0.5, gy + 0.5
    return wx, wy


class MaxSize(FrontierValue):
    """Prefer large frontiers."""

    name = 'max_size'

    def value(self, frontier, context):
        return frontier.size


class Constant(FrontierValue):
    """Same score for every frontier. Requires ``value``."""

    name = 'constant'

    def __init__(self, params: Optional[Dict[str, str]] = None):
        super().__init__(params)
        self.constant = self.float_param('value')

    def value(self, frontier, context):
        return self.constant


class MinEuclideanDistance(FrontierValue):
    """Prefer frontiers close to the robot in straight-line distance."""

    name = 'min_euclidean_distance'

    def __init__(self, params: Optional[Dict[str, str]] = None):
        super().__init__(params)
        self.epsilon = self.float_param('epsilon', Config.DISTANCE_EPSILON)
        if self.epsilon <= 0:
            raise ConfigurationError(f"Strategy '{self.name}' needs epsilon > 0")

    def distance(self, frontier: Frontier, context: ExplorationContext) -> Optional[float]:
        wx, wy = _frontier_world_pos(frontier, context)
        return utils.euclidean_distance(wx, wy, context.robot.x, context.robot.y)

    def value(self, frontier, context):
        dist = self.distance(frontier, context)
        if dist is None:
            return 0.0
        return 1.0 / (dist + self.epsilon)


class MinPathDistance(MinEuclideanDistance):
    """Prefer frontiers with a short travel distance.

    Reads ``context.distance_map`` (travel distance in cells from the robot,
    same shape as the grid) at the frontier center. Without a distance map
    the straight-line distance is used. Unreachable frontiers score 0.
    """

    name = 'min_path_distance'

    def distance(self, frontier, context):
        if context.distance_map is None:
            return super().distance(frontier, context)

        gx, gy = frontier.center
        cells = float(context.distance_map[gy, gx])
        if not math.isfinite(cells) or cells < 0:
            return None
        return cells * context.map_info.resolution


class MaxInformationGain(FrontierValue):
    """Prefer frontiers that can reveal more unknown area.

    Gain is the sum of 1/distance over unknown cells within ``radius``
    of the frontier center, normalized by ``normalizer`` and capped at 1.
    """

    name = 'max_information_gain'

    def __init__(self, params: Optional[Dict[str, str]] = None):
        super().__init__(params)
        self.radius = self.int_param('radius', Config.INFO_GAIN_RADIUS)
        self.normalizer = self.float_param('normalizer', Config.INFO_GAIN_NORMALIZER)

    def information_gain(self, gx: int, gy: int, map_data: np.ndarray) -> float:
        if map_data is None:
            return 0.0

        rows, cols = utils.window(gx, gy, self.radius, map_data.shape)
        region = map_data[rows, cols]

        # Closer cells worth more
        cy, cx = gy - rows.start, gx - cols.start
        y_coords, x_coords = np.ogrid[0:region.shape[0], 0:region.shape[1]]
        distances = np.sqrt((y_coords - cy) ** 2 + (x_coords - cx) ** 2)
        distances = np.maximum(distances, 1)

        unknown_mask = (region == Config.UNKNOWN_VALUE)
        return float(np.sum(unknown_mask / distances))

    def value(self, frontier, context):
        gx, gy = frontier.center
        gain = self.information_gain(gx, gy, context.map_info.data)
        if self.normalizer <= 0:
            return gain
        return min(gain / self.normalizer, 1.0)


class MaxOpenness(FrontierValue):
    """Prefer frontiers in open space, away from walls."""

    name = 'max_openness'

    def __init__(self, params: Optional[Dict[str, str]] = None):
        super().__init__(params)
        self.radius = self.int_param('radius', Config.OPENNESS_RADIUS)
        self.wall_penalty = self.float_param('wall_penalty', Config.WALL_PENALTY_FACTOR)

    def openness(self, gx: int, gy: int, map_data: np.ndarray) -> float:
        """
        Calculate openness score at a position.

        Args:
            gx, gy: Grid coordinates
            map_data: Occupancy grid data

        Returns:
            Openness score between OPENNESS_MIN_SCORE and 1.0
        """
        if map_data is None:
            return 0.5

        rows, cols = utils.window(gx, gy, self.radius, map_data.shape)
        region = map_data[rows, cols]
        total_cells = region.size

        if total_cells == 0:
            return 0.5

        free_cells = np.sum((region >= 0) & (region <= Config.FREE_THRESHOLD))
        obstacle_cells = np.sum(region > Config.FREE_THRESHOLD)
        unknown_cells = np.sum(region == Config.UNKNOWN_VALUE)

        openness = (free_cells + unknown_cells * Config.UNKNOWN_OPENNESS_FACTOR) / total_cells
        obstacle_penalty = obstacle_cells / total_cells

        return float(max(Config.OPENNESS_MIN_SCORE, min(1.0, openness - obstacle_penalty)))

    def is_near_wall(
        self,
        gx: int,
        gy: int,
        map_data: np.ndarray,
        threshold: int = Config.WALL_CHECK_THRESHOLD
    ) -> bool:
        """True if obstacles exceed WALL_OBSTACLE_RATIO of the nearby area."""
        if map_data is None:
            return False

        rows, cols = utils.window(gx, gy, threshold, map_data.shape)
        obstacle_count = np.sum(map_data[rows, cols] > Config.FREE_THRESHOLD)
        return bool(obstacle_count > threshold * threshold * Config.WALL_OBSTACLE_RATIO)

    def value(self, frontier, context):
        gx, gy = frontier.center
        map_data = context.map_info.data
        openness = self.openness(gx, gy, map_data)
        if self.is_near_wall(gx, gy, map_data):
            openness *= self.wall_penalty
        return openness


class DirectionConsistency(FrontierValue):
    """Prefer frontiers in the same direction as the previous goal.

    0 degrees scores 1.0, 90 degrees 0.5, 180 degrees 0.0.
    """

    name = 'direction_consistency'

    def value(self, frontier, context):
        if context.last_direction is None or not math.isfinite(context.last_direction):
            return Config.NEUTRAL_DIRECTION_SCORE

        wx, wy = _frontier_world_pos(frontier, context)
        robot = context.robot
        if utils.euclidean_distance(wx, wy, robot.x, robot.y) <= Config.MIN_HEADING_DISTANCE:
            return Config.NEUTRAL_DIRECTION_SCORE

        frontier_direction = math.atan2(wy - robot.y, wx - robot.x)
        angle_diff = abs(utils.normalize_angle(frontier_direction - context.last_direction))
        return 1.0 - (angle_diff / math.pi)


BUILTIN_STRATEGIES = (
    MaxSize,
    Constant,
    MinEuclideanDistance,
    MinPathDistance,
    MaxInformationGain,
    MaxOpenness,
    DirectionConsistency,
)
