"""
Frontier detection and clustering.

Identifies boundaries between known and unknown space in the occupancy grid.
"""
from typing import List
import numpy as np
from scipy import ndimage

from frontier_selection.config import Config
from frontier_selection.types import Frontier, MapInfo


class FrontierDetector:
    """Detects and clusters frontier cells in occupancy grids."""

    def __init__(
        self,
        min_frontier_size: int = Config.MIN_FRONTIER_SIZE,
        safety_margin: int = Config.SAFETY_MARGIN
    ):
        """
        Initialize frontier detector.

        Args:
            min_frontier_size: Minimum cluster size to report
            safety_margin: Grid cells to keep away from obstacles (0 disables)
        """
        self.min_frontier_size = min_frontier_size
        self.safety_margin = safety_margin

    def _structure(self, map_info: MapInfo) -> np.ndarray:
        # 8-connectivity is a full 3x3 block, 4-connectivity a cross
        rank = 2 if map_info.connectivity == 8 else 1
        return ndimage.generate_binary_structure(2, rank)

    def find_frontier_cells(self, map_info: MapInfo) -> np.ndarray:
        """
        Find frontier cells in the occupancy grid.

        Frontiers are free cells adjacent to unknown cells, away from obstacles.

        Args:
            map_info: Map data and metadata

        Returns:
            Boolean mask with the shape of the grid
        """
        if not map_info.is_valid():
            return np.zeros((0, 0), dtype=bool)

        map_data = map_info.data
        structure = self._structure(map_info)

        free = (map_data >= 0) & (map_data <= Config.FREE_THRESHOLD)
        unknown = (map_data == Config.UNKNOWN_VALUE)
        occupied = (map_data > Config.FREE_THRESHOLD)

        # Frontiers: free cells adjacent to unknown cells
        unknown_dilated = ndimage.binary_dilation(unknown, structure=structure)
        frontier_mask = free & unknown_dilated

        if self.safety_margin > 0:
            obstacle_nearby = ndimage.binary_dilation(
                occupied, structure=structure, iterations=self.safety_margin
            )
            frontier_mask = frontier_mask & ~obstacle_nearby

        return frontier_mask

    def cluster_frontiers(self, frontier_mask: np.ndarray) -> List[Frontier]:
        """
        Group frontier cells into connected frontiers.

        Args:
            frontier_mask: Boolean mask of frontier cells

        Returns:
            Frontiers in label order, smaller than min_frontier_size dropped
        """
        if not frontier_mask.any():
            return []

        labeled, num_features = ndimage.label(
            frontier_mask, structure=np.ones((3, 3), dtype=bool)
        )

        frontiers = []
        for i in range(1, num_features + 1):
            points = np.argwhere(labeled == i)
            if len(points) >= self.min_frontier_size:
                frontiers.append(Frontier.from_points(points))

        return frontiers

    def detect(self, map_info: MapInfo) -> List[Frontier]:
        """Find and cluster frontiers in one call."""
        return self.cluster_frontiers(self.find_frontier_cells(map_info))
