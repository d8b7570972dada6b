# src/mostle/utils/logging_config.py
"""
File logging for the Mostle API.

Usage:
    from mostle.utils.logging_config import Logger, LogFiles

    Logger.info("GET /api/daily", file=LogFiles.API)
    Logger.error("Scoring failed", file=LogFiles.ERROR)

Configuration via environment variables:
    MOSTLE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    MOSTLE_LOG_DIR: Base directory for log files (default: logs/)
    MOSTLE_LOG_MAX_BYTES: Max size per log file in bytes (default: 5MB)
    MOSTLE_LOG_BACKUP_COUNT: Number of rotated files to keep (default: 3)
"""

from __future__ import annotations

import inspect
import os
import uuid
from contextvars import ContextVar
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

import yaml

_trace_id_var: ContextVar[Optional[str]] = ContextVar("mostle_trace_id", default=None)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "mostle.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 3
LINE_FORMAT = "{timestamp} [{level}] [{trace_id}] {filename}:{lineno} - {message}"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONFIG_FILE = Path(__file__).parent / "log_config.yaml"

LOG_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class _LogFilesMeta(type):
    """Lets `LogFiles.API` resolve through the yaml mapping."""

    def __getattr__(cls, name: str) -> str:
        files = cls._load()
        key = name.lower()
        if key in files:
            return files[key]
        raise AttributeError(f"Log file '{name}' not found in config")


class LogFiles(metaclass=_LogFilesMeta):
    """Named log files from log_config.yaml (`files:` section)."""

    _files: Optional[Dict[str, str]] = None

    @classmethod
    def _load(cls) -> Dict[str, str]:
        if cls._files is not None:
            return cls._files

        files = {
            "api": "api/api.log",
            "error": "errors/error.log",
        }
        if LOG_CONFIG_FILE.exists():
            with open(LOG_CONFIG_FILE, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            files.update({str(k).lower(): str(v) for k, v in (config.get("files") or {}).items()})

        cls._files = files
        return files

    @classmethod
    def get(cls, name: str) -> str:
        return cls._load().get(name.lower(), f"{name}/{name}.log")


_config: Dict[str, object] = {}
_handlers: Dict[str, RotatingFileHandler] = {}


def _env_config() -> Dict[str, object]:
    return {
        "level": os.environ.get("MOSTLE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        "base_dir": os.environ.get("MOSTLE_LOG_DIR", DEFAULT_LOG_DIR),
        "max_bytes": int(os.environ.get("MOSTLE_LOG_MAX_BYTES", DEFAULT_MAX_BYTES)),
        "backup_count": int(os.environ.get("MOSTLE_LOG_BACKUP_COUNT", DEFAULT_BACKUP_COUNT)),
    }


def _handler_for(file: Optional[str]) -> RotatingFileHandler:
    base_dir = Path(str(_config.get("base_dir", DEFAULT_LOG_DIR)))
    path = base_dir / (file or DEFAULT_LOG_FILE)
    key = str(path)
    if key not in _handlers:
        path.parent.mkdir(parents=True, exist_ok=True)
        _handlers[key] = RotatingFileHandler(
            filename=key,
            maxBytes=int(_config.get("max_bytes", DEFAULT_MAX_BYTES)),
            backupCount=int(_config.get("backup_count", DEFAULT_BACKUP_COUNT)),
            encoding="utf-8",
        )
    return _handlers[key]


def _write(level: str, message: str, file: Optional[str]) -> None:
    current = str(_config.get("level", DEFAULT_LOG_LEVEL))
    if LOG_LEVELS.get(level, 0) < LOG_LEVELS.get(current, 0):
        return

    # Skip _write and the Logger method to report the real caller.
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    filename = os.path.basename(caller.f_code.co_filename) if caller else "unknown"
    lineno = caller.f_lineno if caller else 0

    line = LINE_FORMAT.format(
        timestamp=datetime.now().strftime(DATE_FORMAT),
        level=level,
        trace_id=_trace_id_var.get() or "-",
        filename=filename,
        lineno=lineno,
        message=message,
    )
    handler = _handler_for(file)
    handler.acquire()
    try:
        handler.stream.write(line + "\n")
        handler.stream.flush()
    finally:
        handler.release()


class Logger:
    """Static file logger; initializes from the environment on first use."""

    @staticmethod
    def init(level: Optional[str] = None, base_dir: Optional[str] = None) -> None:
        if _config:
            return
        _config.update(_env_config())
        if level:
            _config["level"] = level.upper()
        if base_dir:
            _config["base_dir"] = base_dir

    @staticmethod
    def debug(message: str, file: Optional[str] = None) -> None:
        Logger.init()
        _write("DEBUG", message, file)

    @staticmethod
    def info(message: str, file: Optional[str] = None) -> None:
        Logger.init()
        _write("INFO", message, file)

    @staticmethod
    def warning(message: str, file: Optional[str] = None) -> None:
        Logger.init()
        _write("WARNING", message, file)

    @staticmethod
    def error(message: str, file: Optional[str] = None) -> None:
        Logger.init()
        _write("ERROR", message, file)

    @staticmethod
    def close() -> None:
        for handler in _handlers.values():
            handler.close()
        _handlers.clear()
        _config.clear()


# ============================================================================
# Trace ID Management
# ============================================================================


def generate_trace_id() -> str:
    return f"req-{uuid.uuid4().hex[:12]}"


def set_trace_id(trace_id: Optional[str] = None) -> str:
    """Set the trace id for the current request context and return it."""
    tid = trace_id or generate_trace_id()
    _trace_id_var.set(tid)
    return tid


def get_trace_id() -> Optional[str]:
    return _trace_id_var.get()


def clear_trace_id() -> None:
    _trace_id_var.set(None)
