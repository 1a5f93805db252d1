"""
Usage-tracking decorator for drawing drivers.
Counts travel and ink distance while the wrapped driver does the real work.
"""
import logging
import math

from execution.driver import DrawingDriver


class UsageTrackingDriver:
    """
    Decorator that counts distance while delegating to the wrapped driver.

    Every call is logged and counted before it is delegated, so a failing
    driver still leaves the counters incremented. The last known position
    is only updated once the delegate returns.
    """

    def __init__(self, delegate: DrawingDriver, label: str, logger: logging.Logger):
        self._delegate = delegate
        self._label = label
        self._logger = logger

        self.last_x = 0
        self.last_y = 0
        self.travel_distance = 0.0
        self.drawing_distance = 0.0

    @property
    def label(self) -> str:
        return self._label

    @property
    def delegate(self) -> DrawingDriver:
        return self._delegate

    def set_position(self, x: int, y: int) -> None:
        """Reposition without drawing; counts as travel only."""
        self._register_movement(x, y, drawing=False)
        self._delegate.set_position(x, y)
        self._update_position(x, y)

    def operate_to(self, x: int, y: int) -> None:
        """Draw to (x, y); counts as travel and ink."""
        self._register_movement(x, y, drawing=True)
        self._delegate.operate_to(x, y)
        self._update_position(x, y)

    def _register_movement(self, x: int, y: int, drawing: bool) -> None:
        segment = math.hypot(x - self.last_x, y - self.last_y)
        self.travel_distance += segment
        if drawing:
            self.drawing_distance += segment
        kind = "draw" if drawing else "move"
        self._logger.info(
            f"[{self._label}] {kind} to ({x}, {y}); segment={segment:.2f}; "
            f"travel={self.travel_distance:.2f}; ink={self.drawing_distance:.2f}"
        )

    def _update_position(self, x: int, y: int) -> None:
        self.last_x = x
        self.last_y = y

    def log_summary(self) -> None:
        """Log the current counters for this driver."""
        self._logger.info(f"[{self._label}] usage summary -> travel={self.travel_distance:.2f}, "
                          f"ink={self.drawing_distance:.2f}")

    def reset(self) -> None:
        """Zero the counters and the last known position."""
        self.travel_distance = 0.0
        self.drawing_distance = 0.0
        self.last_x = 0
        self.last_y = 0
        self._logger.info(f"[{self._label}] monitoring counters reset")

    def __str__(self) -> str:
        return f"{self._delegate} [monitored]"
