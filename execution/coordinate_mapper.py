"""
Coordinate mapping for drawing jobs.
Maps integer canvas coordinates (origin at the centre, y up) to physical arm coordinates.
"""
from typing import Tuple
from config import DRAWING_BOX, CANVAS_WIDTH, CANVAS_HEIGHT


class CoordinateMapper:
    """Maps canvas coordinates to physical coordinates."""

    def __init__(self, drawing_box: dict = None,
                 canvas_width: int = None, canvas_height: int = None):
        """
        Initialize with drawing box bounds and canvas size.

        Args:
            drawing_box: Dict with min_x, max_x, min_y, max_y (in mm)
            canvas_width: Canvas width in canvas units (default from config)
            canvas_height: Canvas height in canvas units (default from config)
        """
        self.drawing_box = drawing_box or DRAWING_BOX
        self.min_x = self.drawing_box["min_x"]
        self.max_x = self.drawing_box["max_x"]
        self.min_y = self.drawing_box["min_y"]
        self.max_y = self.drawing_box["max_y"]

        self.canvas_width = canvas_width or CANVAS_WIDTH
        self.canvas_height = canvas_height or CANVAS_HEIGHT

        # mm per canvas unit
        self.scale_x = (self.max_x - self.min_x) / self.canvas_width
        self.scale_y = (self.max_y - self.min_y) / self.canvas_height

    def canvas_to_physical(self, x: int, y: int) -> Tuple[float, float]:
        """
        Convert canvas coordinates to physical coordinates, clamped to the drawing box.

        Args:
            x: Canvas X, 0 at the centre
            y: Canvas Y, 0 at the centre, positive up

        Returns:
            (x_physical, y_physical) in mm
        """
        center_x = (self.min_x + self.max_x) / 2.0
        center_y = (self.min_y + self.max_y) / 2.0
        x_phys = center_x + x * self.scale_x
        y_phys = center_y + y * self.scale_y
        return self.clamp_physical(x_phys, y_phys)

    def clamp_physical(self, x: float, y: float) -> Tuple[float, float]:
        """Clamp physical coordinates to drawing box."""
        x_clamped = max(self.min_x, min(self.max_x, x))
        y_clamped = max(self.min_y, min(self.max_y, y))
        return (x_clamped, y_clamped)
