"""Logging setup shared by the server and the export CLI."""

from __future__ import annotations

import logging

from blogsite.config import BLOGSITE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str | int = BLOGSITE_LOG_LEVEL) -> None:
    """Install a single stream handler on the root logger; later calls only adjust the level."""
    global _configured
    root = logging.getLogger()
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        _configured = True
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring root logging on first use."""
    configure_logging()
    return logging.getLogger(name)
