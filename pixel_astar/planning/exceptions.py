"""
Planning errors.
Structural problems fail fast; an unreachable goal is a result, not an error.
"""


class PathPlanningError(Exception):
    """Base class for pathfinding errors."""


class InvalidCoordinateError(PathPlanningError, IndexError):
    """Start or goal address lies outside the grid."""

    def __init__(self, x, y, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate ({x}, {y}) outside grid of size {width}x{height}"
        )


class MalformedGraphError(PathPlanningError):
    """Graph contains a negative cost, self-loop, duplicate or dangling edge."""


class ImageLoadError(PathPlanningError):
    """Image file could not be read as a grid source."""
