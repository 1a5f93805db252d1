"""
Run the web application.
"""
import sys

from config import WEBAPP_HOST, WEBAPP_PORT, MONITORING_LOGGER_NAME
from main import create_drivers
from monitoring.feature import MonitoringFeature
from utils.logger import setup_logger, get_logger
from webapp.app import create_app

logger = setup_logger()


def main():
    try:
        feature = MonitoringFeature(get_logger(MONITORING_LOGGER_NAME))
        drivers = create_drivers(feature)
        app, socketio = create_app(feature, drivers)
    except Exception as e:
        logger.error(f"Failed to initialize drawing application: {e}", exc_info=True)
        print("ERROR: Failed to initialize drawing application. Exiting.")
        sys.exit(1)

    print("=" * 70)
    print("Drawing Application - Web Host")
    print("=" * 70)
    print(f"Starting server on http://{WEBAPP_HOST}:{WEBAPP_PORT}")
    print("=" * 70)

    socketio.run(app, host=WEBAPP_HOST, port=WEBAPP_PORT)


if __name__ == '__main__':
    main()
