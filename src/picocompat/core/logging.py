# src/picocompat/core/logging.py
"""Structured logging configuration for picocompat.

Uses structlog for structured logging of the legacy event traffic.

Architecture:
    This module configures BOTH structlog and stdlib logging to emit
    consistent output (JSON or console). It uses ProcessorFormatter
    to route stdlib log records through structlog's processor chain,
    so a host CMS that logs with logging.getLogger(__name__) produces
    the same output format as the compatibility layer itself.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter

# Third-party loggers that are excessively verbose at DEBUG level.
# Settings loading reports every file and environment variable it looks
# at; that is noise next to the dispatch trace. Silence them to WARNING
# even when picocompat runs in DEBUG mode.
_NOISY_LOGGERS: tuple[str, ...] = (
    # Dynaconf - settings file discovery and loader internals
    "dynaconf",
    "dynaconf.base",
    "dynaconf.loaders",
)


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove internal structlog fields from output.

    ProcessorFormatter ALWAYS adds _record and _from_structlog when processing
    log records (see structlog.stdlib.ProcessorFormatter.format()). These are
    internal bookkeeping and should not appear in output.

    Using del instead of .pop(default) because these fields are guaranteed
    present by ProcessorFormatter's contract. KeyError would indicate a bug
    in the structlog integration.
    """
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
) -> None:
    """Configure structlog and stdlib logging for picocompat.

    Modules using logging.getLogger(__name__) emit the same format (JSON
    or console) as modules using structlog.get_logger().

    Log calls must never pass ``event=`` as a keyword: structlog takes the
    message as its ``event`` argument.

    Args:
        json_output: If True, output JSON. If False, human-readable.
        level: Log level (DEBUG, INFO, WARNING, ERROR).
    """
    log_level = getattr(logging, level.upper())

    # Shared processors applied to ALL log records (structlog and stdlib)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    # Final processors for the formatter (run after shared_processors)
    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # No colours: output usually lands in the host's server log
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    # Route structlog through stdlib logging
    # wrap_for_formatter prepares event_dict for ProcessorFormatter
    structlog.configure(
        processors=[*shared_processors, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Caching off so tests can reconfigure; cached loggers go stale
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            # foreign_pre_chain: processors for stdlib-only records
            # (structlog records already went through shared_processors)
            foreign_pre_chain=shared_processors,
        )
    )

    # Replace root logger handlers
    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)

    # Never make noisy loggers less restrictive than the root level.
    noisy_level = max(log_level, logging.WARNING)
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a module.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Bound structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
