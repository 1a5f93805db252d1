"""Execution layer: drawing drivers and helpers."""

from .driver import DrawingDriver
from .plotter_driver import PlotterDriver
from .logger_driver import LoggerDriver
from .coordinate_mapper import CoordinateMapper
from .figures import draw_polyline, draw_rectangle

__all__ = [
    "DrawingDriver",
    "PlotterDriver",
    "LoggerDriver",
    "CoordinateMapper",
    "draw_polyline",
    "draw_rectangle",
]
