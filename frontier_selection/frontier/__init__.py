"""
Frontier detection module.

Provides the frontier cell test and clustering of frontier regions.
"""
from .detector import FrontierDetector
from .predicate import is_frontier_cell

__all__ = ['FrontierDetector', 'is_frontier_cell']
