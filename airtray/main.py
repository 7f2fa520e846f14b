from __future__ import annotations

import atexit
import logging
import signal

from airtray.app import AirTray
from airtray.core.config import DEFAULT_CONFIG
from airtray.core.logging_ import setup_logging
from airtray.ui.tray import build_icon, run_tray

log = logging.getLogger(__name__)


def main() -> None:
    config = DEFAULT_CONFIG
    setup_logging(config.log_level)

    app = AirTray(config)
    # never leave a receiver behind, whatever path we exit by
    atexit.register(app.shutdown)

    icon = build_icon(app)

    def on_signal(signum, _frame):
        log.info("Received %s, shutting down", signal.Signals(signum).name)
        icon.stop()

    signal.signal(signal.SIGINT, on_signal)
    signal.signal(signal.SIGTERM, on_signal)

    log.info("%s started (receiver: %s)", config.app_name, config.executable)
    run_tray(app, icon)
    log.info("%s exiting", config.app_name)


if __name__ == "__main__":
    main()
