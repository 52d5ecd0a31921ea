"""
Aggregate frontier scoring.

Every strategy is evaluated once per frontier per evaluation pass. The
comparator then orders frontiers by their summed scores, breaking ties by
insertion order, without calling any strategy again.
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
import numpy as np

from frontier_selection.strategies.base import FrontierValue
from frontier_selection.types import ExplorationContext, Frontier


@dataclass
class ScoreTable:
    """Per-frontier score vectors for one evaluation pass."""
    frontiers: Tuple[Frontier, ...]
    strategies: Tuple[FrontierValue, ...]
    scores: np.ndarray = field(repr=False)  # shape (n_frontiers, n_strategies)

    @classmethod
    def build(
        cls,
        frontiers: Sequence[Frontier],
        strategies: Sequence[FrontierValue],
        context: ExplorationContext
    ) -> 'ScoreTable':
        """
        Score every frontier with every strategy.

        Args:
            frontiers: Frontiers in insertion order
            strategies: Strategies in registration order
            context: Shared exploration context

        Returns:
            ScoreTable with an (n, k) score array
        """
        scores = np.zeros((len(frontiers), len(strategies)), dtype=float)
        for i, frontier in enumerate(frontiers):
            for j, strategy in enumerate(strategies):
                scores[i, j] = strategy.score(frontier, context)
        return cls(tuple(frontiers), tuple(strategies), scores)

    @property
    def totals(self) -> np.ndarray:
        """Aggregate score per frontier, summed in registration order."""
        totals = np.zeros(len(self.frontiers), dtype=float)
        for j in range(len(self.strategies)):
            totals += self.scores[:, j]
        return totals

    def __len__(self) -> int:
        return len(self.frontiers)


class AggregateComparator:
    """Strict weak ordering of frontiers by aggregate score.

    Frontiers are addressed by their index in the ScoreTable, which is
    their insertion order.
    """

    def __init__(self, table: ScoreTable):
        self.table = table
        totals = table.totals
        # NaN scores rank last
        self._totals = np.where(np.isnan(totals), -np.inf, totals)

    def less_valuable(self, i: int, j: int) -> bool:
        """True if frontier i ranks below frontier j."""
        left, right = self._totals[i], self._totals[j]
        if left != right:
            return bool(left < right)
        # Equal totals: the later insertion loses
        return i > j

    __call__ = less_valuable

    def ranking(self) -> List[int]:
        """Indices from most to least valuable."""
        return sorted(range(len(self.table)), key=lambda i: (-self._totals[i], i))

    def ordered(self) -> Tuple[Frontier, ...]:
        frontiers = self.table.frontiers
        return tuple(frontiers[i] for i in self.ranking())

    def best_index(self) -> int:
        return self.ranking()[0]
