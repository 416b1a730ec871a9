"""
Logging setup for applications embedding rdfmeta.

The library only creates module loggers; it never configures handlers on
import. Host applications call ``setup_logging`` once (or pass the
``logging`` section of an ``EngineConfig``).
"""

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Handler
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Literal, Optional

from ..constants import LoggingConfig

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Attributes every LogRecord carries; anything else came in through ``extra``
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: ``timestamp`` (UTC), ``level``, ``logger``, ``component`` (the
    logger name below ``rdfmeta``), ``message`` and ``source``
    (``module:line``). Exceptions add ``exception``. Values passed through
    ``extra=`` are copied as-is, or as ``str()`` when not JSON encodable.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.strftime(LoggingConfig.JSON_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "component": record.name.split(".", 1)[1] if record.name.startswith("rdfmeta.") else record.name,
            "message": record.getMessage(),
            "source": f"{record.module}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key in _STANDARD_ATTRS or key in payload or key.startswith("_"):
                continue
            try:
                json.dumps(value)
            except TypeError:
                value = str(value)
            payload[key] = value

        return json.dumps(payload, ensure_ascii=False)


@dataclass(frozen=True)
class _LogSettings:
    """Resolved logging options; equal settings mean nothing to reinstall."""

    level: int
    file: Optional[str]
    style: str
    pattern: str
    date_format: str
    console: bool
    rotate: bool
    max_bytes: int
    backup_count: int

    @classmethod
    def resolve(
        cls,
        level: Optional[str],
        log_file: Optional[str],
        config: Dict[str, Any],
        include_console: bool,
    ) -> "_LogSettings":
        level_name = str(config.get("level") or level or LoggingConfig.DEFAULT_LOG_LEVEL).upper()
        file_path = log_file if log_file is not None else config.get("file")

        style = str(config.get("format", LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
        if style not in LoggingConfig.SUPPORTED_FORMATS:
            style = LoggingConfig.DEFAULT_FORMAT_STYLE

        rotation = config.get("rotation")
        rotation = rotation if isinstance(rotation, dict) else {}
        rotate = rotation.get("enabled")
        if rotate is None:
            rotate = LoggingConfig.ROTATION_ENABLED

        return cls(
            level=getattr(logging, level_name, logging.INFO),
            file=file_path or None,
            style=style,
            pattern=config.get("pattern") or LoggingConfig.LOG_FORMAT,
            date_format=config.get("date_format") or LoggingConfig.DATE_FORMAT,
            console=include_console or not file_path,
            rotate=bool(rotate),
            max_bytes=_positive_int(rotation.get("max_mb"), LoggingConfig.MAX_LOG_FILE_MB) * 1024 * 1024,
            backup_count=_positive_int(rotation.get("backup_count"), LoggingConfig.LOG_BACKUP_COUNT),
        )

    def formatter(self) -> logging.Formatter:
        if self.style == "json":
            return JSONFormatter()
        return logging.Formatter(fmt=self.pattern, datefmt=self.date_format)

    def handlers(self) -> List[Handler]:
        handlers: List[Handler] = []
        if self.console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if self.file:
            log_dir = os.path.dirname(self.file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            if self.rotate:
                handlers.append(RotatingFileHandler(
                    self.file,
                    maxBytes=self.max_bytes,
                    backupCount=self.backup_count,
                    encoding="utf-8",
                ))
            else:
                handlers.append(logging.FileHandler(self.file, encoding="utf-8"))
        formatter = self.formatter()
        for handler in handlers:
            handler.setFormatter(formatter)
        return handlers


_MANAGED_HANDLERS: List[Handler] = []
_LOGGING_SIGNATURE: Optional[_LogSettings] = None


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _clear_managed_handlers() -> None:
    """Detach and close the handlers installed by setup_logging."""
    global _MANAGED_HANDLERS
    root_logger = logging.getLogger()
    for handler in _MANAGED_HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _MANAGED_HANDLERS = []


def setup_logging(
    level: LogLevel = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger.

    Calling again with identical settings is a no-op; different settings
    replace the handlers installed by the previous call.

    Args:
        level: Log level, overridden by ``config["level"]``.
        log_file: Optional log file, overrides ``config["file"]``.
        config: Optional logging dictionary with keys ``level``, ``file``,
            ``format`` ("text" or "json"), ``pattern``, ``date_format`` and
            ``rotation`` ({"enabled", "max_mb", "backup_count"}).
        include_console: If False, skip adding a console handler.

    Returns:
        The log file path used, or None if logging to console only.
    """
    global _LOGGING_SIGNATURE

    settings = _LogSettings.resolve(level, log_file, dict(config or {}), include_console)
    if settings == _LOGGING_SIGNATURE and _MANAGED_HANDLERS:
        return settings.file

    handlers = settings.handlers()
    _clear_managed_handlers()

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    logging.captureWarnings(True)
    for handler in handlers:
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)
    _LOGGING_SIGNATURE = settings

    if settings.file:
        logging.getLogger(__name__).info(f"Logging to: {settings.file}")
    return settings.file
