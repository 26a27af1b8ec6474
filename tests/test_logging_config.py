from __future__ import annotations

import logging

from combatai.logging_config import PACKAGE_LOGGER, HumanFormatter, configure_logging


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, "_combatai_console", False)]


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("DEBUG", use_colors=False)
    configure_logging("WARNING", use_colors=False)

    try:
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.WARNING
        assert len(_console_handlers(logger)) == 1
    finally:
        for handler in _console_handlers(logger):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_human_formatter_plain_line() -> None:
    record = logging.LogRecord(
        name="combatai.services.decision_service",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="No candidates for %s",
        args=("npc",),
        exc_info=None,
    )

    line = HumanFormatter(use_colors=False).format(record)

    assert "WARN [combatai.services.decision_service]: No candidates for npc" in line
    assert "\033[" not in line
