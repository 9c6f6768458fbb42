"""
Common exceptions for boxsplit.
"""


class BoxSplitError(Exception):
    """Base exception for all boxsplit errors."""
    pass


class CapacityError(BoxSplitError):
    """Raised when a diagram exceeds the configured grid or region limits."""
    pass


class GridInvariantError(BoxSplitError):
    """Raised when grid rows stop being of equal length."""
    pass
