"""
Collection of frontiers for one exploration cycle.

Holds the current frontiers and the registered evaluation strategies,
filters small frontiers and selects the most valuable one.
"""
from numbers import Integral
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from frontier_selection.config import Config
from frontier_selection.exceptions import (
    ConfigurationError,
    EmptyCollectionError,
    OutOfRangeError,
)
from frontier_selection.frontier.predicate import is_frontier_cell
from frontier_selection.params import parse_int, parse_strategy_entries
from frontier_selection.scoring import AggregateComparator, ScoreTable
from frontier_selection.strategies.base import FrontierValue
from frontier_selection.strategies.registry import StrategyRegistry, default_registry
from frontier_selection.types import (
    Cell,
    ExplorationContext,
    Frontier,
    FrontierMapConfig,
    MapInfo,
    StrategySpec,
)

StrategyEntry = Union[str, StrategySpec, FrontierValue, Tuple[str, dict]]


class FrontiersMap:
    """Frontiers of the current exploration cycle and how to rank them.

    Strategies passed to ``add_strategy`` are held by reference and must
    outlive the map. Rankings are computed per request, so they always
    reflect the latest frontiers and strategies.
    """

    def __init__(
        self,
        map_info: Optional[MapInfo] = None,
        registry: Optional[StrategyRegistry] = None,
        logger: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize an unconfigured frontiers map.

        Args:
            map_info: Occupancy grid used by is_frontier_cell
            registry: Strategy registry for add_frontier_value/configure
            logger: Optional logger function (node.get_logger().info, etc.)
        """
        self.map_info = map_info
        self.registry = registry or default_registry()
        self.logger = logger or (lambda msg: None)

        self._frontiers: List[Frontier] = []
        self._strategies: List[FrontierValue] = []
        self._config = FrontierMapConfig()
        self._configured = False

    # ==================== Configuration ====================

    @property
    def config(self) -> FrontierMapConfig:
        return self._config

    @property
    def is_configured(self) -> bool:
        return self._configured

    @property
    def minimum_size(self) -> int:
        return self._config.minimum_size

    @property
    def verbosity(self) -> int:
        return self._config.verbosity

    @property
    def strategies(self) -> Tuple[FrontierValue, ...]:
        return tuple(self._strategies)

    def configure(
        self,
        minimum_size: int,
        strategies: Iterable[StrategyEntry] = (),
        verbosity: int = Config.DEFAULT_VERBOSITY
    ) -> None:
        """
        Replace threshold, verbosity and strategy set in one step.

        Every value is validated and every strategy built before anything
        is applied. On error the previous configuration stays in place.

        Args:
            minimum_size: Minimum frontier size in cells
            strategies: Strategy names, (name, params) pairs, StrategySpecs
                or already built strategies
            verbosity: Logging level, 0 is silent

        Raises:
            ConfigurationError: If any value is missing or malformed
        """
        minimum_size = parse_int(minimum_size, 'min_size', minimum=0)
        verbosity = parse_int(verbosity, 'verbosity')

        if strategies is None:
            strategies = ()
        elif isinstance(strategies, str):
            raise ConfigurationError('strategies must be a list of entries, not a string')

        specs: List[StrategySpec] = []
        built: List[FrontierValue] = []
        for entry in strategies:
            if isinstance(entry, FrontierValue):
                specs.append(StrategySpec.create(entry.name, entry.params))
                built.append(entry)
                continue
            if isinstance(entry, (tuple, list)):
                if len(entry) != 2 or not isinstance(entry[0], str) \
                        or not isinstance(entry[1], dict):
                    raise ConfigurationError(f"Malformed strategy entry: {entry!r}")
                entry = StrategySpec.create(entry[0], entry[1])
            elif isinstance(entry, str):
                entry = StrategySpec.create(entry)
            elif not isinstance(entry, StrategySpec):
                raise ConfigurationError(f"Malformed strategy entry: {entry!r}")
            specs.append(entry)
            built.append(self.registry.create(entry.name, entry.params_dict()))

        self._config = FrontierMapConfig(
            minimum_size=minimum_size,
            verbosity=verbosity,
            strategies=tuple(specs),
        )
        self._strategies = built
        self._configured = True

        if verbosity >= 1:
            names = ', '.join(s.name for s in specs) or 'none'
            self.logger(f'Frontiers map configured: min_size={minimum_size}, strategies=[{names}]')

    def load_params(self, source, namespace: str = Config.DEFAULT_NAMESPACE) -> None:
        """
        Configure from a parameter source.

        Reads ``<namespace>/min_size`` and ``<namespace>/strategies``
        (required) and ``<namespace>/verbosity`` (default 0).

        Args:
            source: Object with get_param/has_param, see frontier_selection.params
            namespace: Parameter namespace

        Raises:
            ConfigurationError: If the namespace or a required value is
                missing or malformed
        """
        if not source.has_param(namespace):
            raise ConfigurationError(f"Missing parameter namespace '{namespace}'")

        prefix = namespace.rstrip('/')
        minimum_size = source.get_param(f'{prefix}/min_size')
        strategies = parse_strategy_entries(source.get_param(f'{prefix}/strategies'))
        verbosity = source.get_param(f'{prefix}/verbosity', Config.DEFAULT_VERBOSITY)

        self.configure(minimum_size, strategies, verbosity)

    def add_strategy(self, strategy: FrontierValue) -> None:
        """Register a strategy; it must outlive this map."""
        self._strategies.append(strategy)

    def add_frontier_value(self, name: str, params: Optional[dict] = None) -> FrontierValue:
        """
        Build a strategy from the registry and register it.

        Args:
            name: Registered strategy name
            params: String parameters for the strategy

        Returns:
            The registered strategy

        Raises:
            ConfigurationError: If the name is unknown or params are invalid
        """
        strategy = self.registry.create(name, params)
        self.add_strategy(strategy)
        return strategy

    # ==================== Frontiers ====================

    def add(self, frontier: Frontier) -> None:
        """Append a frontier without size filtering."""
        self._frontiers.append(frontier)

    def set_frontiers(self, candidates: Iterable[Frontier]) -> None:
        """
        Replace the frontiers with the candidates of at least minimum_size.

        Args:
            candidates: Frontiers from boundary extraction, order is kept
        """
        candidates = list(candidates)
        minimum_size = self._config.minimum_size
        self._frontiers = [f for f in candidates if f.size >= minimum_size]

        if self._config.verbosity >= 1:
            self.logger(
                f'Kept {len(self._frontiers)}/{len(candidates)} frontiers '
                f'(min_size={minimum_size})'
            )

    def clear(self) -> None:
        self._frontiers = []

    @property
    def frontiers(self) -> Tuple[Frontier, ...]:
        return tuple(self._frontiers)

    def __len__(self) -> int:
        return len(self._frontiers)

    def __iter__(self) -> Iterator[Frontier]:
        return iter(tuple(self._frontiers))

    def is_frontier_cell(self, cell: Union[Cell, int]) -> bool:
        """
        Check if a cell of the bound grid is a frontier cell.

        Args:
            cell: (gx, gy) or a row-major OccupancyGrid index

        Raises:
            ConfigurationError: If no grid is bound
            OutOfRangeError: If the cell is outside the grid
        """
        if self.map_info is None:
            raise ConfigurationError('No occupancy grid bound to frontiers map')
        if not self.map_info.is_valid():
            raise OutOfRangeError(cell, 0, 0)
        if isinstance(cell, Integral):
            cell = self.map_info.cell_from_index(cell)
        return is_frontier_cell(cell, self.map_info)

    # ==================== Evaluation ====================

    def evaluate(self, context: ExplorationContext) -> AggregateComparator:
        """Score every frontier once and return the comparator over them."""
        table = ScoreTable.build(self._frontiers, self._strategies, context)
        return AggregateComparator(table)

    def ordered_view(self, context: ExplorationContext) -> Tuple[Frontier, ...]:
        """Frontiers from most to least valuable."""
        return self.evaluate(context).ordered()

    def best(self, context: ExplorationContext) -> Frontier:
        """
        Get the most valuable frontier.

        Args:
            context: Shared exploration context

        Returns:
            Top ranked frontier, earliest inserted among equals

        Raises:
            EmptyCollectionError: If there are no frontiers
        """
        if not self._frontiers:
            raise EmptyCollectionError('No frontiers to select from')

        comparator = self.evaluate(context)
        if self._config.verbosity >= 2:
            for line in self._describe_lines(comparator.table):
                self.logger(line)

        index = comparator.best_index()
        best = comparator.table.frontiers[index]
        if self._config.verbosity >= 1:
            self.logger(
                f'Selected frontier {index} (size {best.size}, center {best.center}, '
                f'value {comparator.table.totals[index]:.3f})'
            )
        return best

    def describe(
        self,
        context: ExplorationContext,
        sink: Optional[Callable[[str], None]] = None
    ) -> None:
        """
        Print each frontier's per-strategy scores and total.

        Args:
            context: Shared exploration context
            sink: Line consumer, defaults to the map's logger
        """
        sink = sink or self.logger
        table = ScoreTable.build(self._frontiers, self._strategies, context)
        for line in self._describe_lines(table):
            sink(line)

    def _describe_lines(self, table: ScoreTable) -> List[str]:
        if not table.frontiers:
            return ['No frontiers']

        lines = []
        totals = table.totals
        for i, frontier in enumerate(table.frontiers):
            parts = [
                f'{strategy.name}={table.scores[i, j]:.3f}'
                for j, strategy in enumerate(table.strategies)
            ]
            parts.append(f'total={totals[i]:.3f}')
            lines.append(
                f'Frontier {i} (size {frontier.size}, center {frontier.center}): '
                + ' '.join(parts)
            )
        return lines

