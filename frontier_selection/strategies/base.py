"""
Frontier evaluation interface.

Every evaluation strategy maps a frontier and the shared exploration
context to a real-valued score. Higher scores mean more valuable.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from frontier_selection.config import Config
from frontier_selection.exceptions import ConfigurationError
from frontier_selection.types import ExplorationContext, Frontier


class FrontierValue(ABC):
    """Base class for frontier evaluation strategies.

    Subclasses implement ``value``; ``score`` applies the configured weight.
    Parameters arrive as strings and are parsed at construction, so a
    strategy that builds successfully is fully configured.
    """

    name = 'frontier_value'

    def __init__(self, params: Optional[Dict[str, str]] = None):
        self.params = dict(params or {})
        self.weight = self.float_param('weight', Config.DEFAULT_WEIGHT)

    @abstractmethod
    def value(self, frontier: Frontier, context: ExplorationContext) -> float:
        """Unweighted score of a frontier."""

    def score(self, frontier: Frontier, context: ExplorationContext) -> float:
        return self.weight * float(self.value(frontier, context))

    def float_param(self, key: str, default: Optional[float] = None) -> float:
        """
        Read a float parameter.

        Args:
            key: Parameter name
            default: Value when absent; None makes the parameter required

        Returns:
            Parsed value

        Raises:
            ConfigurationError: If the parameter is missing or not a number
        """
        if key not in self.params:
            if default is None:
                raise ConfigurationError(
                    f"Strategy '{self.name}' requires parameter '{key}'"
                )
            return float(default)
        try:
            return float(self.params[key])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Strategy '{self.name}' parameter '{key}' must be a number, "
                f"got {self.params[key]!r}"
            ) from e

    def int_param(self, key: str, default: int) -> int:
        value = self.float_param(key, default)
        if not value.is_integer() or value < 0:
            raise ConfigurationError(
                f"Strategy '{self.name}' parameter '{key}' must be a "
                f"non-negative integer, got {self.params[key]!r}"
            )
        return int(value)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(weight={self.weight})'
