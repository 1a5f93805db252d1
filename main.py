"""
Main entrypoint for the drawing application (CLI host).
"""
import sys
from typing import Dict

from config import SIMULATION_MODE, MONITORING_LOGGER_NAME
from execution.driver import DrawingDriver
from execution.logger_driver import LoggerDriver
from execution.plotter_driver import PlotterDriver
from monitoring.feature import MonitoringFeature
from ui.cli import CLIInterface
from utils.logger import setup_logger, get_logger

# Setup logging
logger = setup_logger()


def create_drivers(feature: MonitoringFeature) -> Dict[str, DrawingDriver]:
    """Build the available drivers, each wrapped for usage monitoring."""
    plotter = PlotterDriver(simulation=SIMULATION_MODE)
    return {
        "plotter": feature.wrap(plotter, "plotter"),
        "logger": feature.wrap(LoggerDriver(), "logger"),
    }


def run_interactive_loop(cli: CLIInterface) -> None:
    """Read commands until 'quit' or end of input."""
    cli.display("Type 'help' for commands.")
    while True:
        try:
            command = cli.get_input()
        except EOFError:
            break
        if command.lower() in ("quit", "exit"):
            break
        if command and not cli.handle_special_command(command):
            cli.display_error(f"Unknown command: {command}")


def main():
    """Main entry point."""
    logger.info("=" * 60)
    logger.info("Drawing Application Starting")
    logger.info(f"Simulation Mode: {SIMULATION_MODE}")
    logger.info("=" * 60)

    try:
        feature = MonitoringFeature(get_logger(MONITORING_LOGGER_NAME))
        drivers = create_drivers(feature)
        logger.info(f"Drivers initialized: {', '.join(drivers)}")

        cli = CLIInterface(drivers)
        feature.configure(cli)

        run_interactive_loop(cli)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\n\nInterrupted. Goodbye!")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"\nFATAL ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
