"""
Frontier Selection Package

Finds exploration frontiers in occupancy grids, scores them with
pluggable strategies and selects the next exploration goal.
"""
from .config import Config
from .exceptions import (
    FrontierSelectionError,
    ConfigurationError,
    EmptyCollectionError,
    OutOfRangeError,
)
from .types import (
    Frontier,
    MapInfo,
    RobotState,
    ExplorationContext,
    StrategySpec,
    FrontierMapConfig,
)
from .frontier import FrontierDetector, is_frontier_cell
from .strategies import FrontierValue, StrategyRegistry, default_registry
from .scoring import ScoreTable, AggregateComparator
from .params import DictParameterSource, YamlParameterSource
from .frontiers_map import FrontiersMap
from . import utils

__version__ = "1.0.0"
__all__ = [
    'Config',
    'FrontierSelectionError',
    'ConfigurationError',
    'EmptyCollectionError',
    'OutOfRangeError',
    'Frontier',
    'MapInfo',
    'RobotState',
    'ExplorationContext',
    'StrategySpec',
    'FrontierMapConfig',
    'FrontierDetector',
    'is_frontier_cell',
    'FrontierValue',
    'StrategyRegistry',
    'default_registry',
    'ScoreTable',
    'AggregateComparator',
    'DictParameterSource',
    'YamlParameterSource',
    'FrontiersMap',
    'utils',
]
