"""
Minimal CLI host for the drawing application.
"""
from typing import Dict, Optional

from execution.driver import DrawingDriver
from execution.figures import draw_rectangle
from ui.menu import ComponentMenus
from utils.logger import get_logger

logger = get_logger(__name__)


class CLIInterface(ComponentMenus):
    """Simple CLI interface with component menus and a selectable driver."""

    def __init__(self, drivers: Dict[str, DrawingDriver] = None):
        super().__init__()
        self.prompt = "> "
        self.drivers: Dict[str, DrawingDriver] = dict(drivers or {})
        self.active: Optional[str] = next(iter(self.drivers), None)

    def get_input(self) -> str:
        """Get user input from command line."""
        return input(self.prompt).strip()

    def display(self, message: str) -> None:
        """Display a message to the user."""
        print(message)

    def display_error(self, message: str) -> None:
        """Display an error message."""
        print(f"ERROR: {message}")
        logger.error(f"UI Error: {message}")

    def show_help(self) -> None:
        """Show help message, including registered menu actions."""
        lines = [
            "Drawing Commands:",
            "  drivers               - List drivers (* marks the active one)",
            "  use <label>           - Select the active driver",
            "  move <x> <y>          - Move without drawing",
            "  draw <x> <y>          - Draw a line to (x, y)",
            "  square <x> <y> <size> - Draw a square",
            "  help                  - Show this help",
            "  quit                  - Exit",
        ]
        for menu, items in self.menus().items():
            lines.append(f"{menu}:")
            lines.extend(f"  {item.lower()}" for item in items)
        self.display("\n".join(lines))

    def handle_special_command(self, command: str) -> bool:
        """
        Handle a CLI command.

        Returns:
            True if command was handled, False otherwise
        """
        cmd = command.strip()
        parts = cmd.split()
        if not parts:
            return False
        verb = parts[0].lower()

        if verb == "help":
            self.show_help()
            return True
        if verb == "drivers":
            for label, driver in self.drivers.items():
                marker = "*" if label == self.active else " "
                self.display(f"{marker} {label}: {driver}")
            return True
        if verb == "use" and len(parts) == 2:
            if parts[1] not in self.drivers:
                self.display_error(f"Unknown driver: {parts[1]}")
            else:
                self.active = parts[1]
                self.display(f"Active driver: {self.active}")
            return True
        if verb in ("move", "draw", "square"):
            return self._handle_drawing(verb, parts[1:])

        action = self.find_item(cmd)
        if action is not None:
            try:
                action()
            except Exception as e:
                logger.error(f"Menu action '{cmd}' failed: {e}", exc_info=True)
                self.display_error(f"Menu action '{cmd}' failed: {e}")
            return True

        return False

    def _handle_drawing(self, verb: str, args) -> bool:
        expected = 3 if verb == "square" else 2
        try:
            values = [int(arg) for arg in args]
        except ValueError:
            values = []
        if len(values) != expected:
            usage = "square <x> <y> <size>" if verb == "square" else f"{verb} <x> <y>"
            self.display_error(f"Usage: {usage}")
            return True

        if self.active is None:
            self.display_error("No driver available")
            return True

        driver = self.drivers[self.active]
        try:
            if verb == "move":
                driver.set_position(*values)
            elif verb == "draw":
                driver.operate_to(*values)
            else:
                x, y, size = values
                draw_rectangle(driver, x, y, size, size)
        except Exception as e:
            logger.error(f"Driver '{self.active}' failed: {e}", exc_info=True)
            self.display_error(f"Driver '{self.active}' failed: {e}")
        return True
