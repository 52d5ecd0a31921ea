"""
Strategy registry and factory.

Maps strategy names to factories that build configured evaluation
strategies from string parameters.
"""
from typing import Callable, Dict, List, Optional

from frontier_selection.exceptions import ConfigurationError
from frontier_selection.strategies.base import FrontierValue
from frontier_selection.strategies.builtin import BUILTIN_STRATEGIES

StrategyFactory = Callable[[Dict[str, str]], FrontierValue]


class StrategyRegistry:
    """Explicit name to factory mapping for evaluation strategies."""

    def __init__(self):
        self._factories: Dict[str, StrategyFactory] = {}

    def register(self, name: str, factory: StrategyFactory) -> None:
        """
        Register a strategy factory.

        Args:
            name: Name used in configuration
            factory: Callable taking a dict of string params

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._factories:
            raise ValueError(f"Strategy '{name}' is already registered")
        self._factories[name] = factory

    def create(self, name: str, params: Optional[Dict[str, str]] = None) -> FrontierValue:
        """
        Instantiate a strategy by name.

        Args:
            name: Registered strategy name
            params: String parameters passed to the factory

        Returns:
            Configured strategy

        Raises:
            ConfigurationError: If the name is unknown or params are invalid

        Example:
            >>> registry = default_registry()
            >>> registry.create('max_size', {'weight': '2'}).weight
            2.0
        """
        if name not in self._factories:
            raise ConfigurationError(
                f"Unknown frontier strategy: {name}. "
                f"Available strategies: {self.names()}"
            )

        params = {str(k): str(v) for k, v in (params or {}).items()}
        try:
            return self._factories[name](params)
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid parameters for strategy {name}: {e}. "
                f"Provided params: {params}"
            ) from e

    def names(self) -> List[str]:
        return list(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories


def default_registry() -> StrategyRegistry:
    """Registry holding every built-in strategy."""
    registry = StrategyRegistry()
    for strategy_class in BUILTIN_STRATEGIES:
        registry.register(strategy_class.name, strategy_class)
    return registry
