#!/usr/bin/env python3
"""Start the weather API server; releases the database handle on shutdown."""

import atexit
import logging
import signal
import sys

from weather_api import create_app

logger = logging.getLogger(__name__)

app = create_app()


def _release_storage():
    with app.app_context():
        app.extensions['weather_store'].close()


def _handle_signal(signum, frame):
    logger.info(f"Received signal {signum}, shutting down")
    sys.exit(0)


if __name__ == '__main__':
    atexit.register(_release_storage)
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    host = app.config['HOST']
    port = app.config['PORT']
    logger.info(f"Weather API server running on http://{host}:{port}")
    logger.info(f"Dashboard: http://{host}:{port}/dashboard")
    app.run(host=host, port=port, debug=False)
