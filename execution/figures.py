"""
Simple figures drawn through any DrawingDriver.
"""
from typing import List, Tuple

from execution.driver import DrawingDriver


def draw_polyline(driver: DrawingDriver, points: List[Tuple[int, int]]) -> None:
    """
    Draw a polyline (connected points).

    Moves to the first point with the pen up, then draws through the rest.

    Args:
        driver: Driver to draw with
        points: List of (x, y) canvas coordinates
    """
    if not points:
        return

    first_x, first_y = points[0]
    driver.set_position(first_x, first_y)

    for x, y in points[1:]:
        driver.operate_to(x, y)


def draw_rectangle(driver: DrawingDriver, x: int, y: int, width: int, height: int) -> None:
    """Draw a closed rectangle with its lower-left corner at (x, y)."""
    draw_polyline(driver, [
        (x, y),
        (x + width, y),
        (x + width, y + height),
        (x, y + height),
        (x, y),
    ])
