"""
Configuration for the drawing application.
"""
import os
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()

# Drawing Bounds (physical coordinates in mm)
# These should match your BrachioGraph's drawing area
DRAWING_BOX = {
    "min_x": 0.0,   # mm
    "max_x": 200.0, # mm
    "min_y": 0.0,   # mm
    "max_y": 200.0  # mm
}

# Canvas (integer job coordinates, origin at the centre)
CANVAS_WIDTH = int(os.getenv("CANVAS_WIDTH", "600"))
CANVAS_HEIGHT = int(os.getenv("CANVAS_HEIGHT", "600"))

# Drivers
SIMULATION_MODE = os.getenv("SIMULATION_MODE", "true").lower() == "true"

# Monitoring
MONITORING_LOGGER_NAME = os.getenv("MONITORING_LOGGER_NAME", "monitoring")
MONITORING_MENU_NAME = "Monitoring"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "drawing_app.log")  # Empty string disables file logging

# Web application
WEBAPP_HOST = os.getenv("WEBAPP_HOST", "0.0.0.0")
WEBAPP_PORT = int(os.getenv("WEBAPP_PORT", "5000"))


def get_drawing_bounds() -> Tuple[float, float, float, float]:
    """Returns (min_x, max_x, min_y, max_y)"""
    box = DRAWING_BOX
    return (box["min_x"], box["max_x"], box["min_y"], box["max_y"])
