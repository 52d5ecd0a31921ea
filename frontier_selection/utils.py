"""
Utility functions for frontier selection.

Common coordinate transformations and math utilities.
"""
import math
from typing import Tuple, Optional

from frontier_selection.types import MapInfo


def grid_to_world(gx: int, gy: int, map_info: MapInfo) -> Tuple[Optional[float], Optional[float]]:
    """
    Convert grid coordinates to world coordinates.

    Args:
        gx: Grid x coordinate
        gy: Grid y coordinate
        map_info: Map metadata

    Returns:
        Tuple of (world_x, world_y) or (None, None) if invalid
    """
    if not map_info.is_valid():
        return None, None

    wx = map_info.origin_x + (gx + 0.5) * map_info.resolution
    wy = map_info.origin_y + (gy + 0.5) * map_info.resolution
    return wx, wy


def normalize_angle(angle: float) -> float:
    """
    Normalize angle to [-pi, pi] range.

    Args:
        angle: Angle in radians

    Returns:
        Normalized angle in radians, NaN for non-finite input
    """
    if not math.isfinite(angle):
        return math.nan
    return math.remainder(angle, 2 * math.pi)


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Distance between two points."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def window(gx: int, gy: int, radius: int, shape: Tuple[int, int]) -> Tuple[slice, slice]:
    """
    Row/column slices of a square window clipped to the array shape.

    Args:
        gx, gy: Window center in grid coordinates
        radius: Half width of the window
        shape: (height, width) of the array

    Returns:
        (rows, cols) slices usable as array[rows, cols]
    """
    h, w = shape
    rows = slice(max(0, gy - radius), min(h, gy + radius + 1))
    cols = slice(max(0, gx - radius), min(w, gx + radius + 1))
    return rows, cols
