"""Layout computation exceptions."""


class LayoutError(Exception):
    """Base error for layout computations."""


class InvalidScaleError(LayoutError, ValueError):
    """Raised when a map scale is zero, negative or not a finite number."""
