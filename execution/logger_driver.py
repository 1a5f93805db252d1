"""
Driver that only reports positions to the log.
"""
from utils.logger import get_logger

logger = get_logger(__name__)


class LoggerDriver:
    """Writes every movement to the log instead of drawing it."""

    def __init__(self, name: str = "logger"):
        self.name = name

    def set_position(self, x: int, y: int) -> None:
        logger.info(f"[{self.name}] move position: ({x}, {y})")

    def operate_to(self, x: int, y: int) -> None:
        logger.info(f"[{self.name}] draw position: ({x}, {y})")

    def __str__(self) -> str:
        return f"Logger driver '{self.name}'"
