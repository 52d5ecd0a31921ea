"""
Data type definitions for frontier selection.

Provides structured data classes for grids, frontiers and scoring context.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import numpy as np

from frontier_selection.config import Config

Cell = Tuple[int, int]

_NEIGHBORS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))
_NEIGHBORS_8 = _NEIGHBORS_4 + ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(frozen=True)
class Frontier:
    """Connected set of grid cells bordering unknown space."""
    cells: Tuple[Cell, ...]

    def __post_init__(self):
        # Normalize to a tuple of int pairs so equality is structural
        object.__setattr__(
            self, 'cells', tuple((int(gx), int(gy)) for gx, gy in self.cells)
        )
        if not self.cells:
            raise ValueError('Frontier needs at least one cell')

    @classmethod
    def from_points(cls, points: np.ndarray) -> 'Frontier':
        """
        Build a frontier from an array of (y, x) points.

        Args:
            points: Array as returned by np.argwhere on a grid mask

        Returns:
            Frontier with (x, y) cells
        """
        return cls(tuple((int(x), int(y)) for y, x in points))

    @property
    def size(self) -> int:
        """Number of cells in the frontier."""
        return len(self.cells)

    @property
    def center(self) -> Cell:
        """Integer mean of the cells."""
        cells = np.asarray(self.cells)
        cx, cy = cells.mean(axis=0).astype(int)
        return int(cx), int(cy)


@dataclass
class RobotState:
    """Robot pose in world coordinates."""
    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0


@dataclass
class MapInfo:
    """Occupancy grid with metadata for coordinate transformations.

    Cell values follow the ROS OccupancyGrid convention: -1 unknown,
    0..Config.FREE_THRESHOLD free, anything above occupied. Cells are
    addressed as (gx, gy), the array as data[gy, gx].
    """
    data: Optional[np.ndarray] = field(default=None, repr=False)
    resolution: float = 0.05
    origin_x: float = 0.0
    origin_y: float = 0.0
    width: int = 0
    height: int = 0
    connectivity: int = 8

    def __post_init__(self):
        if self.connectivity not in (4, 8):
            raise ValueError(f'connectivity must be 4 or 8, got {self.connectivity}')
        if self.data is not None:
            self.data = np.asarray(self.data)
            self.height, self.width = self.data.shape

    @classmethod
    def from_array(cls, data, resolution: float = 0.05,
                   origin: Tuple[float, float] = (0.0, 0.0),
                   connectivity: int = 8) -> 'MapInfo':
        """Wrap a 2D array of occupancy values."""
        return cls(
            data=np.asarray(data),
            resolution=resolution,
            origin_x=origin[0],
            origin_y=origin[1],
            connectivity=connectivity,
        )

    def is_valid(self) -> bool:
        """Check if map data is available."""
        return self.data is not None and self.width > 0 and self.height > 0

    def in_bounds(self, cell: Cell) -> bool:
        if not self.is_valid():
            return False
        gx, gy = cell
        return 0 <= gx < self.width and 0 <= gy < self.height

    def value(self, cell: Cell) -> int:
        gx, gy = cell
        return int(self.data[gy, gx])

    def is_free(self, cell: Cell) -> bool:
        return 0 <= self.value(cell) <= Config.FREE_THRESHOLD

    def is_unknown(self, cell: Cell) -> bool:
        return self.value(cell) == Config.UNKNOWN_VALUE

    def is_occupied(self, cell: Cell) -> bool:
        return self.value(cell) > Config.FREE_THRESHOLD

    def neighbors(self, cell: Cell) -> List[Cell]:
        """In-bounds neighbors of a cell, 4- or 8-connected."""
        offsets = _NEIGHBORS_8 if self.connectivity == 8 else _NEIGHBORS_4
        gx, gy = cell
        candidates = ((gx + dx, gy + dy) for dx, dy in offsets)
        return [c for c in candidates if self.in_bounds(c)]

    def cell_from_index(self, index: int) -> Cell:
        """Convert a row-major OccupancyGrid index to (gx, gy)."""
        return index % self.width, index // self.width


@dataclass
class ExplorationContext:
    """Per-cycle inputs shared by every evaluation strategy."""
    map_info: MapInfo
    robot: RobotState = field(default_factory=RobotState)
    distance_map: Optional[np.ndarray] = field(default=None, repr=False)
    last_direction: Optional[float] = None


@dataclass(frozen=True)
class StrategySpec:
    """Name of an evaluation strategy plus its string parameters."""
    name: str
    params: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def create(cls, name: str, params: Optional[Dict[str, str]] = None) -> 'StrategySpec':
        items = sorted((str(k), str(v)) for k, v in (params or {}).items())
        return cls(name=name, params=tuple(items))

    def params_dict(self) -> Dict[str, str]:
        return dict(self.params)


@dataclass(frozen=True)
class FrontierMapConfig:
    """Configuration applied to a FrontiersMap as a single unit."""
    minimum_size: int = 0
    verbosity: int = 0
    strategies: Tuple[StrategySpec, ...] = ()

