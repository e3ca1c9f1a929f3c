"""Exceptions raised by the hull builders."""


class HullError(Exception):
    """Base class for every error raised by hull_trace."""


class InsufficientPointsError(HullError):
    """Fewer than 3 distinct points were supplied."""

    def __init__(self, count):
        super().__init__(f"need at least 3 distinct points, got {count}")
        self.count = count


class DegenerateCollinearInputError(HullError):
    """All points lie on one line; the hull is the segment between `extremes`."""

    def __init__(self, extremes):
        super().__init__(f"all points are collinear, hull is the segment {extremes}")
        self.extremes = extremes


class InvalidSlopeDivisionError(HullError, ZeroDivisionError):
    """Slope requested for two points sharing an x-coordinate."""


class InvalidPointError(HullError, ValueError):
    """Input is not an (x, y) pair of finite numbers."""


class HullConstructionError(HullError):
    """The wrapping loop could not make progress."""


class HullCancelledError(HullError):
    """The caller's stop event was set while the hull was being built."""
