"""Usage monitoring for drawing drivers."""

from .tracking_driver import UsageTrackingDriver
from .registry import DriverRegistry
from .feature import MonitoringFeature, REPORT_ACTION, RESET_ACTION

__all__ = [
    "UsageTrackingDriver",
    "DriverRegistry",
    "MonitoringFeature",
    "REPORT_ACTION",
    "RESET_ACTION",
]
