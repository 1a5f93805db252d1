"""
Monitoring feature: wraps drivers for usage tracking and exposes
"report" / "reset" actions in the host application's menu.
"""
import logging
from typing import Optional

from config import MONITORING_MENU_NAME
from execution.driver import DrawingDriver
from monitoring.registry import DriverRegistry
from monitoring.tracking_driver import UsageTrackingDriver
from ui.menu import MenuHost

REPORT_ACTION = "Report usage summary"
RESET_ACTION = "Reset usage counters"


class MonitoringFeature:
    """
    Owns the registry of tracked drivers and the logger they report to.

    Built once at startup; pass the same instance to everything that wraps
    drivers or triggers reports.
    """

    def __init__(self, logger: logging.Logger, registry: Optional[DriverRegistry] = None):
        """
        Args:
            logger: Sink for usage lines and feature messages
            registry: Existing registry (creates an empty one if None)
        """
        self.logger = logger
        self.registry = registry if registry is not None else DriverRegistry()

    def configure(self, app: MenuHost, logger: Optional[logging.Logger] = None) -> None:
        """
        Add the monitoring menu to the host application.

        Meant to be called once during startup; calling it again adds the
        menu entries again. A given logger replaces the current one for
        feature messages and for drivers wrapped from now on.
        """
        if logger is not None:
            self.logger = logger

        app.add_component_menu(MONITORING_MENU_NAME)
        app.add_component_menu_element(MONITORING_MENU_NAME, REPORT_ACTION, self.report_all)
        app.add_component_menu_element(MONITORING_MENU_NAME, RESET_ACTION, self.reset_all)

    def wrap(self, driver: DrawingDriver, label: str) -> UsageTrackingDriver:
        """Wrap a driver so every move/draw is counted; use the result in place of `driver`."""
        tracked = UsageTrackingDriver(driver, label, self.logger)
        self.registry.append(tracked)
        return tracked

    def report_all(self) -> None:
        """Log a usage summary for each tracked driver."""
        if len(self.registry) == 0:
            self.logger.info("Monitoring: no drivers registered for tracking")
            return
        for driver in self.registry:
            driver.log_summary()

    def reset_all(self) -> None:
        """Reset the counters of every tracked driver."""
        for driver in self.registry:
            driver.reset()
        self.logger.info("Monitoring: counters reset")
