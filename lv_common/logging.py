"""Shared logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog

from lv_common.config.env import parse_bool_env


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.WARNING
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    return logging._nameToLevel.get(value.upper(), logging.INFO)


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Configure stdlib logging and structlog with a shared formatter."""
    env_level, env_json, env_log_file = _read_logging_env()
    resolved_level = _resolve_level(level or env_level, debug)
    resolved_json = env_json if json is None else json
    resolved_log_file = env_log_file if log_file is None else log_file

    formatter = _make_structlog_formatter(resolved_json)
    root_logger = logging.getLogger()
    if _reuse_existing_handlers(root_logger, force):
        _configure_structlog()
        return

    handlers = _build_handlers(formatter, resolved_log_file)
    if force:
        root_logger.handlers.clear()

    _attach_handlers(root_logger, resolved_level, handlers)
    _configure_structlog()


def _read_logging_env() -> tuple[str | None, bool | None, str | None]:
    return (
        os.environ.get("LV_LOG_LEVEL"),
        parse_bool_env(os.environ.get("LV_LOG_JSON")),
        os.environ.get("LV_LOG_FILE"),
    )


def _make_structlog_formatter(
    resolved_json: bool | None,
) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if resolved_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )


def _reuse_existing_handlers(root_logger: logging.Logger, force: bool) -> bool:
    return bool(root_logger.handlers) and not force


def _build_handlers(
    formatter: structlog.stdlib.ProcessorFormatter,
    log_file: str | None,
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    return handlers


def _attach_handlers(
    root_logger: logging.Logger, level: int, handlers: list[logging.Handler]
) -> None:
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
