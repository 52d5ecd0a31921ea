"""Errors raised by frontier selection."""


class FrontierSelectionError(Exception):
    """Base class for frontier selection errors."""
    pass


class ConfigurationError(FrontierSelectionError, ValueError):
    """Raised for unknown strategies or missing/malformed parameters."""
    pass


class EmptyCollectionError(FrontierSelectionError, LookupError):
    """Raised when a best frontier is requested from an empty map."""
    pass


class OutOfRangeError(FrontierSelectionError, IndexError):
    """Raised when a cell lies outside the occupancy grid."""

    def __init__(self, cell, width: int, height: int):
        self.cell = cell
        self.width = width
        self.height = height
        super().__init__(f'Cell {cell} outside grid of size {width}x{height}')
