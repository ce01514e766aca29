"""
Logging configuration.

Library modules only obtain loggers through get_logger(); handlers are
installed by setup_logging(), which the command-line driver calls.

Records may carry an ``extra_data`` dict (the expression being evaluated,
the error type and details on failure). The JSON formatter merges it into the
record; the text formatter appends it as key=value pairs.
"""

import sys
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING
from datetime import datetime, timezone
import json
from pathlib import Path

if TYPE_CHECKING:
    from .config import Settings


def _extra_data(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_data", None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extra_data(record),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter with trailing key=value context"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _extra_data(record)
        if context:
            line += " [" + " ".join(f"{k}={v!r}" for k, v in context.items()) + "]"
        return line


def setup_logging(settings: Optional["Settings"] = None) -> None:
    """Configure logging for the expr_eval package"""
    if settings is None:
        from .config import get_settings
        settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    formatter = StructuredFormatter() if settings.log_format == "json" else TextFormatter()

    # stdout carries only results
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class EvaluationLogger(logging.LoggerAdapter):
    """Logger bound to one expression; call-site ``extra_data`` is merged in"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        kwargs.setdefault("extra", {})["extra_data"] = {**self.extra, **extra_data}
        return msg, kwargs


def get_evaluation_logger(name: str, expression: str) -> EvaluationLogger:
    """Get a logger whose records all carry the expression being evaluated"""
    return EvaluationLogger(get_logger(name), {"expression": expression})
