from __future__ import annotations

import logging

from airtray.core.config import AppletConfig, DEFAULT_CONFIG
from airtray.core.types import Message, Quit, ToggleAirPlay
from airtray.runtime.uxplay import SpawnError, UxPlayProcess

log = logging.getLogger(__name__)


class AirTray:
    """
    Top-level applet state.
    airplay_toggle is what the tray shows; uxplay owns the child process.
    Every mutation arrives through update() on the tray's event thread.
    """

    def __init__(self, config: AppletConfig = DEFAULT_CONFIG):
        self.config = config
        self.airplay_toggle = False
        self.quitting = False
        self.uxplay = UxPlayProcess(config.executable, stop_timeout=config.stop_timeout)

    def update(self, message: Message) -> None:
        if isinstance(message, ToggleAirPlay):
            self._toggle_airplay(message.enabled)
        elif isinstance(message, Quit):
            self.shutdown()
        else:
            raise TypeError(f"unknown message: {message!r}")

    def _toggle_airplay(self, enabled: bool) -> None:
        self.airplay_toggle = enabled
        try:
            self.uxplay.set_enabled(enabled)
        except SpawnError as e:
            log.error("Failed to set airplay: %s", e)
            # flip back so the tray matches reality and the next click retries
            self.airplay_toggle = False
            self.uxplay.set_enabled(False)

    def shutdown(self) -> None:
        if self.quitting:
            return
        self.quitting = True
        self.airplay_toggle = False
        self.uxplay.set_enabled(False)

    def status_text(self) -> str:
        return f"{self.config.app_name} (AirPlay {'ON' if self.airplay_toggle else 'OFF'})"
