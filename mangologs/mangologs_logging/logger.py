"""
structlog setup for MangoLogs.

Every record carries event_type (the snake_case first argument), level,
timestamp and the module's logger name, plus whatever keyword context the
caller passes (address, wallet, owner_class, error, ...). Records go to
stderr so stdout is left to command output.

Defaults come from LOG_LEVEL and LOG_FORMAT (json | console); the CLI may
call configure_logging() again to override them. Loggers returned by
get_logger() are lazy, so module-level loggers follow a reconfiguration.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import structlog

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "json"
LOG_FORMATS = ("json", "console")


def _level_value(name: str, *, strict: bool) -> int:
    value = getattr(logging, name.strip().upper(), None)
    if isinstance(value, int):
        return value
    if strict:
        raise ValueError(f"unknown log level {name!r}")
    return logging.INFO


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """
    (Re)configure structlog.

    level and fmt fall back to LOG_LEVEL / LOG_FORMAT. An explicit unknown
    level or format raises ValueError; a bad env value falls back to the default.
    """
    if level is None:
        level_value = _level_value(os.getenv("LOG_LEVEL", DEFAULT_LEVEL), strict=False)
    else:
        level_value = _level_value(level, strict=True)

    if fmt is None:
        fmt = os.getenv("LOG_FORMAT", DEFAULT_FORMAT).strip().lower()
        if fmt not in LOG_FORMATS:
            fmt = DEFAULT_FORMAT
    elif fmt not in LOG_FORMATS:
        raise ValueError(f"unknown log format {fmt!r}; expected one of {', '.join(LOG_FORMATS)}")

    out = stream if stream is not None else sys.stderr
    # sys.stderr is looked up per record so a swapped stream (e.g. test capture) is honoured
    factory = structlog.PrintLoggerFactory(file=stream) if stream is not None else _stderr_logger
    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
    ]
    if fmt == "json":
        processors += [
            structlog.processors.EventRenamer("event_type"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=out.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=factory,
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> Any:
    """
    Return a logger tagged with name.

        logger = get_logger(__name__)
        logger.info("owner_classified", address=addr, owner_class="system_owned")

    JSON output: {"address": "...", "owner_class": "system_owned", "logger": "...",
    "level": "info", "timestamp": "...", "event_type": "owner_classified"}
    """
    return structlog.get_logger(logger=name)


def bind_address(address: str) -> Any:
    """Logger for one resolution; address is attached to every record."""
    return structlog.get_logger(logger="mangologs.resolver", address=address)
