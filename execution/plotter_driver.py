"""
PlotterDriver for the BrachioGraph drawing arm.
Supports both real hardware and simulation mode.
"""
from typing import Optional, Tuple
from config import SIMULATION_MODE, get_drawing_bounds
from execution.coordinate_mapper import CoordinateMapper
from utils.logger import get_logger

logger = get_logger(__name__)


class PlotterDriver:
    """
    Drawing driver backed by a BrachioGraph arm.
    In simulation mode, logs planned movements instead of moving hardware.
    """

    def __init__(self, mapper: CoordinateMapper = None, simulation: bool = None):
        """
        Initialize the plotter driver.

        Args:
            mapper: CoordinateMapper instance (default: mapper built from config)
            simulation: If True, simulate without hardware (default from config)
        """
        self.mapper = mapper or CoordinateMapper()
        self.simulation = simulation if simulation is not None else SIMULATION_MODE
        self.pen_is_down = False
        self.current_position: Optional[Tuple[int, int]] = None

        # BrachioGraph instance (None in simulation)
        self.brachiograph = None

        if not self.simulation:
            self._initialize_hardware()
        else:
            logger.info("Running in SIMULATION MODE - no hardware will be moved")

    def _initialize_hardware(self) -> None:
        """Initialize BrachioGraph hardware with the configured drawing bounds."""
        try:
            from brachiograph import BrachioGraph
        except ImportError:
            logger.error("BrachioGraph package not available. Install with: pip install brachiograph")
            raise

        # BrachioGraph works in cm; bounds format is [left, top, right, bottom]
        min_x, max_x, min_y, max_y = get_drawing_bounds()
        bounds = [min_x / 10.0, max_y / 10.0, max_x / 10.0, min_y / 10.0]

        self.brachiograph = BrachioGraph(
            virtual=False,
            bounds=bounds,
            inner_arm=8,  # Adjust based on your hardware
            outer_arm=8,  # Adjust based on your hardware
            resolution=0.1,
            angular_step=0.1,
            wait=0.01
        )
        logger.info(f"BrachioGraph hardware initialized with bounds {bounds} cm")

    def set_position(self, x: int, y: int) -> None:
        """Move to (x, y) with the pen up."""
        self._move(x, y, draw=False)

    def operate_to(self, x: int, y: int) -> None:
        """Draw a line to (x, y) with the pen down."""
        self._move(x, y, draw=True)

    def _move(self, x: int, y: int, draw: bool) -> None:
        x_phys, y_phys = self.mapper.canvas_to_physical(x, y)

        if self.simulation:
            action = "DRAW" if draw else "MOVE"
            logger.info(f"[SIM] {action} to ({x}, {y}) -> physical ({x_phys:.1f}, {y_phys:.1f}) mm")
        else:
            # xy() handles angle calculations and servo control
            self.brachiograph.xy(x=x_phys / 10.0, y=y_phys / 10.0, draw=draw)
            logger.debug(f"Moved to ({x_phys / 10.0:.2f}, {y_phys / 10.0:.2f}) cm (draw={draw})")

        self.pen_is_down = draw
        self.current_position = (x, y)

    def __str__(self) -> str:
        mode = "simulation" if self.simulation else "hardware"
        return f"BrachioGraph plotter ({mode})"
