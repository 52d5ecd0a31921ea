"""
Parameter sources for FrontiersMap configuration.

A parameter source answers ``get_param(name, default)`` for
'/'-separated names, the way a ROS parameter server does. Sources can
wrap an in-memory dict or a YAML file.
"""
from numbers import Integral
from typing import Any, Dict, List, Optional, Tuple
import yaml
from importlib import resources

from frontier_selection.exceptions import ConfigurationError
from frontier_selection.types import StrategySpec

_MISSING = object()

DEFAULTS_RESOURCE = 'frontiers.yaml'


class DictParameterSource:
    """Parameter source backed by a nested dict."""

    def __init__(self, params: Optional[Dict[str, Any]] = None):
        self.params: Dict[str, Any] = params or {}

    def get_param(self, name: str, default: Any = _MISSING) -> Any:
        """
        Look up a '/'-separated parameter name.

        Args:
            name: Parameter name, e.g. 'frontiers/min_size'
            default: Returned when the name is absent

        Returns:
            Parameter value

        Raises:
            ConfigurationError: If absent and no default was given
        """
        node: Any = self.params
        for key in (k for k in name.split('/') if k):
            if not isinstance(node, dict) or key not in node:
                if default is _MISSING:
                    raise ConfigurationError(f"Missing parameter '{name}'")
                return default
            node = node[key]
        return node

    def has_param(self, name: str) -> bool:
        sentinel = object()
        return self.get_param(name, sentinel) is not sentinel


class YamlParameterSource(DictParameterSource):
    """Parameter source loaded from a YAML file."""

    @classmethod
    def from_file(cls, path: str) -> 'YamlParameterSource':
        """
        Load parameters from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Parameter source

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(path, 'r') as f:
                params = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load parameters from {path}: {e}") from e

        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ConfigurationError(f"Parameter file {path} must contain a mapping")
        return cls(params)

    @classmethod
    def packaged_defaults(cls) -> 'YamlParameterSource':
        """Load the default parameters shipped in frontier_selection/data."""
        resource = resources.files('frontier_selection').joinpath('data').joinpath(DEFAULTS_RESOURCE)
        with resources.as_file(resource) as path:
            return cls.from_file(str(path))


def parse_strategy_entries(entries: Any) -> Tuple[StrategySpec, ...]:
    """
    Convert a strategies parameter into StrategySpecs.

    Each entry is either a strategy name or a mapping with a ``name`` and
    optional ``params`` mapping. Param values are converted to strings.

    Raises:
        ConfigurationError: If the list or an entry is malformed
    """
    if entries is None:
        return ()
    if not isinstance(entries, (list, tuple)):
        raise ConfigurationError(f"'strategies' must be a list, got {type(entries).__name__}")

    specs: List[StrategySpec] = []
    for entry in entries:
        if isinstance(entry, str):
            specs.append(StrategySpec.create(entry))
            continue
        if not isinstance(entry, dict) or not isinstance(entry.get('name'), str):
            raise ConfigurationError(f"Malformed strategy entry: {entry!r}")
        params = entry.get('params') or {}
        if not isinstance(params, dict):
            raise ConfigurationError(
                f"Parameters of strategy '{entry['name']}' must be a mapping"
            )
        specs.append(StrategySpec.create(entry['name'], params))
    return tuple(specs)


def parse_int(value: Any, name: str, minimum: Optional[int] = None) -> int:
    """Validate an integer parameter (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigurationError(f"Parameter '{name}' must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"Parameter '{name}' must be >= {minimum}, got {value}")
    return int(value)
