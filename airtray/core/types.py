"""
AirTray — shared types

Tray -> AirTray messages and the process manager's externally visible state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ProcessState(str, Enum):
    STOPPED = "STOPPED"
    RUNNING = "RUNNING"


@dataclass(frozen=True)
class ToggleAirPlay:
    """The AirPlay toggle was flipped to `enabled`."""
    enabled: bool


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[ToggleAirPlay, Quit]
