"""
Frontier cell test.

A frontier cell is a free cell with at least one unknown neighbor.
"""
from frontier_selection.exceptions import OutOfRangeError
from frontier_selection.types import Cell, MapInfo


def is_frontier_cell(cell: Cell, map_info: MapInfo) -> bool:
    """
    Check if a grid cell lies on the boundary of explored space.

    Args:
        cell: (gx, gy) grid coordinates
        map_info: Grid providing is_free, is_unknown and neighbors

    Returns:
        True if the cell is free and touches unknown space

    Raises:
        OutOfRangeError: If the cell is outside the grid
    """
    if not map_info.in_bounds(cell):
        raise OutOfRangeError(cell, map_info.width, map_info.height)

    if not map_info.is_free(cell):
        return False

    return any(map_info.is_unknown(n) for n in map_info.neighbors(cell))
