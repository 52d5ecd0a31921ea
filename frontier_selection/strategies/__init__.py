"""
Frontier evaluation strategies.

Provides the strategy interface, built-in variants and the name registry.
"""
from .base import FrontierValue
from .builtin import (
    MaxSize,
    Constant,
    MinEuclideanDistance,
    MinPathDistance,
    MaxInformationGain,
    MaxOpenness,
    DirectionConsistency,
)
from .registry import StrategyRegistry, default_registry

__all__ = [
    'FrontierValue',
    'MaxSize',
    'Constant',
    'MinEuclideanDistance',
    'MinPathDistance',
    'MaxInformationGain',
    'MaxOpenness',
    'DirectionConsistency',
    'StrategyRegistry',
    'default_registry',
]
