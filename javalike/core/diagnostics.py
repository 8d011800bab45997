"""
Diagnostics — Инжектируемый sink для диагностики некорректного использования

Неправильное, но не фатальное использование API (прямой вызов конструктора
Optional, передача UNDEFINED) сообщается через logging, а не исключениями.

Sink можно заменить глобально (set_diagnostics_logger) или локально
(use_diagnostics_logger), чтобы тесты проверяли диагностику без перехвата
вывода всего процесса.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

DEFAULT_LOGGER_NAME = "javalike.diagnostics"

_default_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
_global_logger: Optional[logging.Logger] = None
_scoped_logger: ContextVar[Optional[logging.Logger]] = ContextVar(
    "javalike_diagnostics_logger", default=None
)


def get_diagnostics_logger() -> logging.Logger:
    """
    Текущий sink диагностики.

    Приоритет: scoped override → глобальный override → logger по умолчанию.
    """
    scoped = _scoped_logger.get()
    if scoped is not None:
        return scoped
    if _global_logger is not None:
        return _global_logger
    return _default_logger


def set_diagnostics_logger(diagnostics_logger: Optional[logging.Logger]) -> None:
    """
    Глобальная замена sink диагностики.

    Args:
        diagnostics_logger: Новый logger (None: вернуть logger по умолчанию)
    """
    global _global_logger
    _global_logger = diagnostics_logger


@contextmanager
def use_diagnostics_logger(diagnostics_logger: logging.Logger) -> Iterator[logging.Logger]:
    """
    Временная замена sink диагностики в текущем контексте.

    Args:
        diagnostics_logger: Logger, действующий внутри блока with

    Yields:
        Установленный logger
    """
    token = _scoped_logger.set(diagnostics_logger)
    try:
        yield diagnostics_logger
    finally:
        _scoped_logger.reset(token)


def warn(message: str, *args: object) -> None:
    """WARNING в текущий sink диагностики."""
    get_diagnostics_logger().warning(message, *args)
