"""
Logging configuration for the Invitation API.

``setup_logging`` attaches console and optional file handlers to the
root logger and then applies per-logger level overrides.  The driver
logs every server heartbeat and pool event; by default ``pymongo`` is
held at ``WARNING`` so request logs from the repositories stay
readable.  Overrides come from ``LOG_LEVELS`` as ``name=LEVEL`` pairs,
e.g. ``pymongo=DEBUG,uvicorn.access=WARNING``.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL_OVERRIDES = {"pymongo": "WARNING"}


def parse_level_overrides(value: str) -> Dict[str, str]:
    """Parse ``"name=LEVEL,other=LEVEL"`` into a mapping.

    Blank items are skipped; an item without ``=`` is a configuration
    error.
    """
    overrides: Dict[str, str] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, level = item.partition("=")
        if not sep or not name.strip() or not level.strip():
            raise ValueError(f"invalid log level override {item!r}; expected name=LEVEL")
        overrides[name.strip()] = level.strip().upper()
    return overrides


def _to_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    overrides: Optional[Dict[str, str]] = None,
) -> None:
    """Configure the root logger and named logger levels.

    Handlers are only attached when the root logger has none, so
    repeated ``create_app`` calls do not duplicate output.  Level
    overrides are applied every time; ``overrides`` is merged on top of
    :data:`DEFAULT_LEVEL_OVERRIDES`.
    """
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(_to_level(level))
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if logfile:
            file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name, name_level in {**DEFAULT_LEVEL_OVERRIDES, **(overrides or {})}.items():
        logging.getLogger(name).setLevel(_to_level(name_level))
