"""Structured logging for swimbarriers.

Usage:
    from swimbarriers.logging import get_logger, configure_logging

    # Once, when the API or CLI starts
    configure_logging()

    logger = get_logger(__name__)
    logger.info("race_record_created", swimmer_id="abc", total_milliseconds=47000)

Level, format and environment come from ``Settings`` (``LOG_LEVEL``,
``LOG_FORMAT``, ``ENVIRONMENT``). Without an explicit ``LOG_FORMAT``,
production logs JSON and every other environment logs to the console.
"""

import logging
import sys
from typing import Any

import structlog

from swimbarriers.config import LogFormat, Settings, get_settings

NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "supabase", "postgrest")


def _resolve_format(settings: Settings) -> LogFormat:
    if settings.log_format is not None:
        return settings.log_format
    return LogFormat.JSON if settings.is_production else LogFormat.CONSOLE


def _environment_adder(environment: str) -> structlog.typing.Processor:
    def add_environment(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["environment"] = environment
        return event_dict

    return add_environment


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once; the last call wins.
    """
    settings = settings or get_settings()
    log_level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _environment_adder(settings.environment.value),
    ]

    if _resolve_format(settings) == LogFormat.JSON:
        renderer: list[structlog.typing.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger, typically with ``__name__`` of the calling module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context (swimmer_id, request_id, ...) to all subsequent log entries.

    Example:
        bind_context(swimmer_id="abc123")
        logger.info("barrier_summary_built")  # includes swimmer_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
