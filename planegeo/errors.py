"""Exception types for planegeo."""


class GeometryError(Exception):
    """Base error for planegeo."""


class BrokenEdgeChainError(GeometryError, AssertionError):
    """Edges handed to a Polygon do not form a closed chain.

    This is a programming error, not a recoverable condition: every edge must
    end where the next one starts, including the last edge wrapping around to
    the first.
    """
