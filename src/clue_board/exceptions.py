"""
Board configuration errors.

Any of these aborts board setup. A board is never built from a layout or
legend that raised one of them.
"""


class BoardConfigError(ValueError):
    """Base exception for invalid board layout or legend data."""


class MalformedLayout(BoardConfigError):
    """Raised when the layout rows cannot form a valid grid."""


class MalformedLegend(BoardConfigError):
    """Raised when a legend entry is badly formed or duplicated."""


class UnknownRoomType(MalformedLegend):
    """Raised when a legend entry's room kind is not Card or Other."""
