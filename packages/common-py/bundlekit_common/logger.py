"""
Structured Logging for bundlekit

Every log record is emitted as a single JSON object on stdout, carrying the
logger name, level, message and any structured fields passed by the caller.

Usage:
    from bundlekit_common.logger import get_logger

    logger = get_logger("core.manifest")
    logger.warning("Failed to parse manifest", path=str(manifest_path))

    # Attach fields to every record from a derived logger
    pkg_logger = logger.with_context(package="my-lib")
    pkg_logger.info("Resolved entries", count=2)

The level is taken from the explicit ``log_level`` argument, then the
``BUNDLEKIT_LOG_LEVEL`` environment variable, then INFO.

Records also propagate to the standard library root logger, so tools that
hook into ``logging`` (pytest's caplog, application handlers) see them.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .constants import LOG_LEVELS, LogDefaults
from .errors import ValidationError

_build_id: ContextVar[Optional[str]] = ContextVar("bundlekit_build_id", default=None)


def set_build_id(build_id: str) -> None:
    """Tag all records logged in the current context with a build session id."""
    _build_id.set(build_id)


def get_build_id() -> Optional[str]:
    """Return the build session id of the current context, if any."""
    return _build_id.get()


def clear_build_id() -> None:
    """Remove the build session id from the current context."""
    _build_id.set(None)


def resolve_log_level(log_level: Optional[str] = None) -> str:
    """
    Determine the effective log level name.

    Args:
        log_level: Explicit level name; overrides the environment

    Returns:
        Upper-case level name from LOG_LEVELS

    Raises:
        ValidationError: If the level name is not recognised
    """
    level = log_level or os.environ.get(LogDefaults.ENV_VAR) or LogDefaults.LEVEL
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValidationError(
            f"Invalid log level: '{level}'. Supported levels: {', '.join(LOG_LEVELS)}"
        )
    return level


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as one line of JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "context", {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _StdoutHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stdout is at emit time."""

    def __init__(self):
        super().__init__()

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


def _stdlib_logger(service_name: str, log_level: Optional[str]) -> logging.Logger:
    prefix = LogDefaults.LOGGER_PREFIX
    name = service_name if service_name.startswith(f"{prefix}.") else f"{prefix}.{service_name}"
    std_logger = logging.getLogger(name)

    if not any(isinstance(h, _StdoutHandler) for h in std_logger.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(JSONFormatter())
        std_logger.addHandler(handler)

    if log_level is not None or std_logger.level == logging.NOTSET:
        std_logger.setLevel(resolve_log_level(log_level))

    return std_logger


class BundleKitLogger:
    """
    Logger that accepts structured fields as keyword arguments.

    Attributes:
        service_name: Name passed to get_logger (e.g. "core.paths")
        context: Fields attached to every record from this logger
    """

    def __init__(
        self,
        service_name: str,
        log_level: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.service_name = service_name
        self.context: Dict[str, Any] = dict(context or {})
        self._logger = _stdlib_logger(service_name, log_level)

    @property
    def level(self) -> int:
        return self._logger.level

    def with_context(self, **fields: Any) -> "BundleKitLogger":
        """Return a new logger whose records also carry ``fields``."""
        return BundleKitLogger(self.service_name, context={**self.context, **fields})

    def _log(self, level: int, message: str, exc_info: bool = False, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return

        context = {**self.context, **fields}
        build_id = get_build_id()
        if build_id is not None:
            context.setdefault("build_id", build_id)

        self._logger.log(level, message, exc_info=exc_info, extra={"context": context})

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, **fields)

    warn = warning

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, **fields)

    def critical(self, message: str, **fields: Any) -> None:
        self._log(logging.CRITICAL, message, **fields)

    def exception(self, message: str, **fields: Any) -> None:
        """Log at ERROR level with the active exception's traceback."""
        self._log(logging.ERROR, message, exc_info=True, **fields)


def get_logger(service_name: str, log_level: Optional[str] = None) -> BundleKitLogger:
    """
    Get a structured logger.

    Args:
        service_name: Dotted component name, e.g. "core.manifest"
        log_level: Optional level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        BundleKitLogger instance
    """
    return BundleKitLogger(service_name, log_level=log_level)


def configure_logging(service_name: str, log_level: Optional[str] = None) -> BundleKitLogger:
    """Configure the level for ``service_name`` and return its logger."""
    return BundleKitLogger(service_name, log_level=resolve_log_level(log_level))
