"""
Flask web application: drives tracked drivers, exposes the component menus
and streams log lines to the browser's logger panel.
"""
import logging
from typing import Dict, Literal, Tuple

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO
from pydantic import BaseModel, Field, ValidationError

from execution.driver import DrawingDriver
from monitoring.feature import MonitoringFeature
from ui.menu import ComponentMenus
from utils.logger import get_logger

logger = get_logger("webapp")


class DriverCommand(BaseModel):
    """Body of a move/draw request."""
    kind: Literal["move", "draw"] = Field(description="'move' repositions, 'draw' draws a line")
    x: int = Field(description="Target canvas X")
    y: int = Field(description="Target canvas Y")


class SocketIOLogHandler(logging.Handler):
    """Pushes formatted log records to connected clients as 'log' events."""

    def __init__(self, socketio: SocketIO, level: int = logging.INFO):
        super().__init__(level)
        self.socketio = socketio
        self.setFormatter(logging.Formatter('%(asctime)s - %(message)s', datefmt='%H:%M:%S'))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self.socketio.emit("log", {"level": record.levelname, "message": message})
        except Exception:
            self.handleError(record)


def attach_socketio_handler(target: logging.Logger, socketio: SocketIO) -> SocketIOLogHandler:
    """Stream `target` to `socketio`, replacing any handler a previous app attached."""
    for handler in list(target.handlers):
        if isinstance(handler, SocketIOLogHandler):
            target.removeHandler(handler)
    handler = SocketIOLogHandler(socketio)
    target.addHandler(handler)
    return handler


def create_app(feature: MonitoringFeature,
               drivers: Dict[str, DrawingDriver]) -> Tuple[Flask, SocketIO]:
    """
    Build the web application around an already configured drawing setup.

    The app acts as the menu host: `feature.configure` is called here, and
    the application log (and the feature's logger, when it lives outside
    the application hierarchy) is mirrored to the browser. Only the most
    recently created app streams log lines.

    Args:
        feature: Monitoring feature owning the tracked drivers
        drivers: Drivers addressable by label (normally the wrapped ones)
    """
    app = Flask(__name__)
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*")

    menus = ComponentMenus()
    feature.configure(menus)

    app_logger = get_logger()
    attach_socketio_handler(app_logger, socketio)
    if not feature.logger.name.startswith(app_logger.name + "."):
        attach_socketio_handler(feature.logger, socketio)

    @app.route('/api/status', methods=['GET'])
    def get_status():
        """Current counters of every tracked driver."""
        return jsonify({
            "status": "ready",
            "drivers": [
                {
                    "label": d.label,
                    "travel": round(d.travel_distance, 2),
                    "ink": round(d.drawing_distance, 2),
                    "description": str(d),
                }
                for d in feature.registry
            ],
        })

    @app.route('/api/menus', methods=['GET'])
    def get_menus():
        return jsonify(menus.menus())

    @app.route('/api/menus/<menu>/<item>', methods=['POST'])
    def invoke_menu(menu, item):
        action = menus.find_action(menu, item)
        if action is None:
            return jsonify({"error": f"Unknown menu action: {menu}/{item}"}), 404
        action()
        return jsonify({"success": True})

    @app.route('/api/drivers/<label>/commands', methods=['POST'])
    def run_command(label):
        driver = drivers.get(label)
        if driver is None:
            return jsonify({"error": f"Unknown driver: {label}"}), 404

        try:
            command = DriverCommand.model_validate(request.get_json(silent=True) or {})
        except ValidationError as e:
            return jsonify({"error": "Invalid command", "details": e.errors(include_url=False, include_context=False)}), 400

        try:
            if command.kind == "draw":
                driver.operate_to(command.x, command.y)
            else:
                driver.set_position(command.x, command.y)
        except Exception as e:
            logger.error(f"Driver '{label}' failed on {command.kind}: {e}", exc_info=True)
            return jsonify({"success": False, "error": str(e)}), 500

        return jsonify({"success": True})

    return app, socketio
