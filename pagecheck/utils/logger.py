# pagecheck/utils/logger.py
from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from pagecheck.utils.config import get_settings, LogLevel


__all__ = [
    "get_logger",
    "set_log_level",
    "log_with_context",
]


_config_lock = threading.Lock()
_configured = False


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line for file logs.
    Context from `log_with_context` is merged into the payload.
    """

    default_time_format = "%Y-%m-%dT%H:%M:%S"

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(self.default_time_format),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if hasattr(record, "extra") and isinstance(record.extra, dict):
            payload.update(record.extra)

        return json.dumps(payload, ensure_ascii=False)


_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


def _ensure_configured() -> None:
    """
    Configure the `pagecheck` logger once based on settings.
    Subsequent calls are no-ops.
    """
    global _configured
    if _configured:
        return

    with _config_lock:
        if _configured:
            return

        settings = get_settings()
        level = _LEVEL_MAP.get(settings.LOG_LEVEL, logging.INFO)

        # Library logger only; the host test runner owns the root logger
        base = logging.getLogger("pagecheck")
        base.setLevel(level)
        for h in list(base.handlers):
            base.removeHandler(h)

        console = Console(
            stderr=True,
            force_jupyter=False,
            color_system="auto" if settings.COLORIZED_OUTPUT else None,
        )
        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,  # selectors and class lists contain brackets
            omit_repeated_times=False,
        )
        rich_handler.setFormatter(logging.Formatter("%(message)s"))
        rich_handler.setLevel(level)
        base.addHandler(rich_handler)

        if settings.LOG_TO_FILE:
            settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=str(settings.LOG_FILE),
                maxBytes=5 * 1024 * 1024,  # 5MB per file
                backupCount=5,
                encoding="utf-8",
                delay=True,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JsonFormatter())
            base.addHandler(file_handler)

        logging.getLogger("playwright").setLevel(max(level, logging.WARNING))

        _configured = True


def get_logger(name: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a configured logger wrapped with a LoggerAdapter
    whose context `log_with_context` can extend.
    """
    _ensure_configured()
    base = logging.getLogger(name if name else "pagecheck")
    return logging.LoggerAdapter(base, extra={"extra": {}})


def set_log_level(level: LogLevel | str) -> None:
    """
    Dynamically adjust log level at runtime.
    """
    _ensure_configured()
    lvl = level if isinstance(level, str) else level.value
    py_level = getattr(logging, lvl.upper(), logging.INFO)
    base = logging.getLogger("pagecheck")
    base.setLevel(py_level)
    for h in base.handlers:
        h.setLevel(py_level)


def log_with_context(logger: logging.LoggerAdapter, **kwargs: Any) -> logging.LoggerAdapter:
    """
    Return a new LoggerAdapter that merges additional context for a scoped section.
    Usage:
        log = get_logger(__name__)
        scoped = log_with_context(log, selector="div.form button.save")
        scoped.debug("resolving")
    """
    merged = dict((logger.extra or {}).get("extra", {}))
    merged.update(kwargs)
    return logging.LoggerAdapter(logger.logger, extra={"extra": merged})
