"""Loguru setup: one stderr sink, an optional rotating file, stdlib interception."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_NO_CORRELATION = "-"
_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default=_NO_CORRELATION)

# Libraries that are chatty at INFO.
_QUIET_LOGGERS = {"sqlalchemy.engine": logging.WARNING, "urllib3": logging.WARNING}


def _inject_correlation_id(record: dict[str, Any]) -> None:
    record["extra"].setdefault("correlation_id", _CORRELATION_ID.get())


logger.configure(patcher=_inject_correlation_id)


class _InterceptHandler(logging.Handler):
    """Forward stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or _NO_CORRELATION)


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set(_NO_CORRELATION)


def setup_logging(
    level: str | None = None,
    *,
    debug_mode: bool = False,
    log_file: str | None = None,
) -> None:
    level = "DEBUG" if debug_mode else (level or "INFO").upper()
    common: dict[str, Any] = {
        "level": level,
        "format": _FMT,
        "backtrace": False,
        "diagnose": False,
        "filter": sanitize_record,
    }

    logger.remove()
    logger.add(sys.stderr, colorize=True, **common)

    if log_file:
        Path(log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            colorize=False,
            enqueue=True,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            **common,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
