"""
Shared utilities.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger_name = "cardiorisk"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the package namespace."""
    if not name.startswith(_root_logger_name):
        name = f"{_root_logger_name}.{name}"
    return logging.getLogger(name)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; the handler is only installed the first time.
    """
    root = logging.getLogger(_root_logger_name)
    if not any(getattr(h, "_cardiorisk_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._cardiorisk_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    if level:
        root.setLevel(level.upper())
    return root
