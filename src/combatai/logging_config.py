"""Opt-in console logging for the decision engine.

Library modules only create loggers; nothing is emitted until a host
application configures handlers, either its own or via ``configure_logging``.
"""
from __future__ import annotations

import logging
import sys
from datetime import datetime

PACKAGE_LOGGER = "combatai"


class HumanFormatter(logging.Formatter):
    """Compact human-readable format with optional level colors."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        line = f"{timestamp} {record.levelname[:4]} [{record.name}]: {record.getMessage()}"
        if self.use_colors and sys.stderr.isatty():
            line = f"{self.COLORS.get(record.levelname, '')}{line}{self.RESET}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(level: str = "INFO", use_colors: bool = True) -> logging.Logger:
    """Attach one stderr handler to the package logger and set its level.

    Calling it again replaces the handler rather than stacking another one.
    The root logger is left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    for handler in list(logger.handlers):
        if getattr(handler, "_combatai_console", False):
            logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter(use_colors=use_colors))
    console._combatai_console = True  # type: ignore[attr-defined]
    logger.addHandler(console)
    return logger
