"""
Loguru configuration for the library.

This module configures loguru with:
- Automatic Trace ID in each log
- Configurable format from settings, installed only on request
- Redirection of standard library logs to loguru
"""

import logging
import sys
from typing import Any

from loguru import logger

from devicereg.config import settings
from devicereg.core.trace_context import trace_id_context


def add_trace_id(record: dict[str, Any]) -> bool:
    """
    Adds the trace_id to the log record.

    The trace_id is obtained from the current context, allowing all logs
    of one registration flow to be correlated.

    Args:
        record: Loguru record

    Returns:
        True to indicate that the filter passed
    """
    trace_id = trace_id_context.get()
    record["extra"]["trace_id"] = trace_id if trace_id else "N/A"
    return True
def configure_logger(replace_handlers: bool = False) -> int:
    """
    Installs a stderr handler using the level and format from settings.

    Nothing is configured on import: the library's records are disabled
    until an application calls this function (or logger.enable).

    Args:
        replace_handlers: Remove every existing loguru handler first

    Returns:
        int: Id of the added handler, usable with logger.remove()
    """
    if replace_handlers:
        logger.remove()

    handler_id = logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        filter=add_trace_id,
        colorize=True,
        serialize=False,
        backtrace=True,
        diagnose=False,
        enqueue=settings.logger_enqueue,
    )
    logger.enable(settings.logger_name)
    return handler_id


def mask(value: str | None, visible: int = 4) -> str:
    """
    Shortens a secret-bearing value for log output.

    Args:
        value: Code or state value (may be absent)
        visible: Number of leading characters to keep

    Returns:
        Masked representation, or "<absent>" when value is None
    """
    if value is None:
        return "<absent>"
    if len(value) <= visible:
        return "***"
    return f"{value[:visible]}..."


# Silent by default; applications opt in via configure_logger()
logger.disable(settings.logger_name)


__all__ = ["logger", "InterceptHandler", "configure_logger", "mask"]


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging logs to loguru.

    Usage:
        import logging
        from devicereg.core.logging import InterceptHandler

        logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)
    """

    def emit(self, record: logging.LogRecord) -> None:
        """
        Redirects a standard logging record to loguru.

        Args:
            record: logging.LogRecord record
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())
