from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def logs_dir() -> Path:
    return Path.home() / ".cache" / "airtray" / "logs"


def log_path() -> Path:
    return logs_dir() / "airtray.log"


def setup_logging(level: str = "INFO", to_file: bool = True) -> None:
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

    # StreamHandler defaults to stderr
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if not to_file:
        return

    try:
        logs_dir().mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(str(log_path()), maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    except OSError as e:
        root.warning("file logging disabled: %s", e)
        return
    fh.setLevel(level)
    fh.setFormatter(fmt)
    root.addHandler(fh)
