"""
Структурированное логирование для хост-кода (checkout, demo).

Доменное ядро не логирует: ошибки поднимаются, а хост ловит их на границе
и пишет человекочитаемое сообщение.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(log_level: str = "INFO", use_json: bool = False) -> None:
    """
    Настройка structlog поверх стандартного logging.

    Args:
        log_level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        use_json: JSON формат (production) вместо консольного
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: str = __name__, **context: Any) -> structlog.stdlib.BoundLogger:
    """Логгер модуля с привязанным контекстом (order_id, customer_id и т.д.)"""
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
