"""Логирование для приложений поверх клиента (CLI и т.п.).

Сама библиотека только пишет в stdlib-логгер `openai_binding` и ничего не
настраивает. `configure_logging()` вызывает тот, кто владеет процессом.
"""

import logging
import sys

import structlog

from openai_binding.settings import get_settings

LIBRARY_LOGGER = "openai_binding"


def configure_logging(level_name: str | None = None) -> None:
    """Настраивает stdlib logging + structlog (JSON в stderr).

    Уровень берётся из аргумента, иначе из `LOG_LEVEL`. stdout остаётся
    под ответы CLI.
    """
    name = level_name or get_settings().log_level
    level = getattr(logging, name.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    logging.getLogger(LIBRARY_LOGGER).setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
