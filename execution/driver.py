"""
Driver capability set shared by every drawing device.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class DrawingDriver(Protocol):
    """
    A 2D drawing device.

    Coordinates are integer canvas units. Distances between them are
    measured as floats, so coordinates must stay within float range
    (about 1e308); larger values raise OverflowError when tracked.
    Implementations may raise from either method; callers get the error
    unchanged.
    """

    def set_position(self, x: int, y: int) -> None:
        """Move to (x, y) without drawing."""
        ...

    def operate_to(self, x: int, y: int) -> None:
        """Draw a straight line from the current position to (x, y)."""
        ...
