"""
AirTray — defaults

Everything the applet needs is known at build time; there is no config
file, no env vars and no CLI flags. Change a default here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppletConfig:
    app_id: str = "com.github.introini.airtray"
    app_name: str = "AirTray"

    # receiver binary, resolved on PATH, launched with no arguments
    executable: str = "uxplay"

    # None = wait for exit forever (a hung receiver blocks the tray thread)
    stop_timeout: Optional[float] = None

    icon_size: int = 64
    log_level: str = "INFO"


DEFAULT_CONFIG = AppletConfig()
