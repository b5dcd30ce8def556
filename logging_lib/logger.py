"""Structured logging facade."""

from __future__ import annotations

import sys
import traceback
from contextvars import ContextVar, Token
from threading import RLock
from typing import Any, Dict, List, Mapping, MutableMapping

from .config import LEVELS, LoggingSettings, get_settings
from .schema import build_log_record
from .sinks import InMemorySink, Sink, StdoutSink


_CONTEXT: ContextVar[Mapping[str, Any]] = ContextVar("logging_lib_context", default={})


def should_emit(level: str, settings: LoggingSettings) -> bool:
    """Return True when ``level`` is at or above the configured threshold."""

    try:
        return LEVELS.index(level) >= LEVELS.index(settings.level)
    except ValueError:
        return True


class StructuredLogger:
    """Structured logger for the logging library."""

    def __init__(self, name: str, manager: "LoggerManager") -> None:
        """Initialize the structured logger with a given name and manager."""

        self._name = name # The name of the logger
        self._manager = manager # The manager for the logger

    @property
    def name(self) -> str:
        return self._name

    def debug(self, message: str, **fields: Any) -> None:
        """Log a debug message."""

        self._log("DEBUG", message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        """Log an info message."""

        self._log("INFO", message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        """Log a warning message."""

        self._log("WARNING", message, **fields)

    def error(self, message: str, **fields: Any) -> None:
        """Log an error message."""

        self._log("ERROR", message, **fields)

    def critical(self, message: str, **fields: Any) -> None:
        """Log a critical message."""

        self._log("CRITICAL", message, **fields)

    def _log(self, level: str, message: str, **fields: Any) -> None:
        """Log a message at a given level."""

        manager = self._manager
        settings = manager.settings

        if not should_emit(level, settings):
            return

        runtime_context = dict(manager.base_context)
        runtime_context.update(_CONTEXT.get())

        explicit_context = fields.pop("context", {}) or {}
        if explicit_context:
            runtime_context.update(explicit_context)

        # stdlib-style ``extra=`` keyword is flattened into the record
        extra = fields.pop("extra", None) or {}
        fields.update(extra)

        if fields.pop("exc_info", False):
            exc_type, exc, tb = sys.exc_info()
            if exc_type is not None:
                fields["exc_type"] = exc_type.__name__
                fields["exc"] = "".join(traceback.format_exception(exc_type, exc, tb))

        record = build_log_record(
            level=level,
            message=message,
            settings=settings,
            component=self._name,
            context=runtime_context,
            **fields,
        )

        manager.emit(record)


class LoggerManager:
    """Manager for the structured loggers."""

    def __init__(self) -> None:
        """Initialize the logger manager."""

        self._lock = RLock() # The lock for the logger manager
        self._loggers: Dict[str, StructuredLogger] = {} # The loggers
        self._settings: LoggingSettings | None = None # The settings for the logger manager
        self._sinks: List[Sink] = [] # The sinks records are written to
        self._base_context: MutableMapping[str, Any] = {} # The base context for the logger manager

    def configure(self, settings: LoggingSettings) -> None:
        """Configure the logger manager with a given settings."""

        with self._lock:
            self._close_sinks()

            self._settings = settings
            self._loggers.clear()

            sinks: List[Sink] = []
            for sink_name in settings.sinks:
                name = sink_name.strip().lower()

                if name == "stdout":
                    sinks.append(StdoutSink())
                elif name == "memory":
                    sinks.append(InMemorySink())

            if not sinks:
                sinks.append(StdoutSink())

            self._sinks = sinks
            self._base_context = dict(settings.default_context)

    @property
    def settings(self) -> LoggingSettings:
        """Get the settings for the logger manager."""

        settings = self._settings

        if settings is None:
            settings = get_settings()
            self.configure(settings)

        return settings

    @property
    def sinks(self) -> List[Sink]:
        if self._settings is None:
            self.configure(get_settings())
        return list(self._sinks)

    @property
    def base_context(self) -> Mapping[str, Any]:
        """Get the base context for the logger manager."""

        return dict(self._base_context)

    def emit(self, record: Mapping[str, Any]) -> None:
        for sink in self.sinks:
            sink.emit(record)

    def get_logger(self, name: str) -> StructuredLogger:
        """Get a logger with a given name."""

        with self._lock:
            logger = self._loggers.get(name)

            if logger is None:
                logger = StructuredLogger(name, self)
                self._loggers[name] = logger

            return logger

    def reset(self) -> None:
        """Reset the logger manager."""

        with self._lock:
            self._close_sinks()
            self._loggers.clear()
            self._settings = None
            self._base_context.clear()

    def _close_sinks(self) -> None:
        for sink in self._sinks:
            sink.close()
        self._sinks = []


_MANAGER = LoggerManager()


def configure_manager(settings: LoggingSettings) -> None:
    """Configure the manager with a given settings."""

    _MANAGER.configure(settings)


def get_logger(name: str) -> StructuredLogger:
    """Get a logger with a given name."""

    return _MANAGER.get_logger(name)


def get_manager() -> LoggerManager:
    return _MANAGER


def reset_loggers() -> None:
    """Reset the logger manager."""

    _MANAGER.reset()


def push_context(**context: Any) -> Token:
    current = dict(_CONTEXT.get())
    current.update(context)
    return _CONTEXT.set(current)


def pop_context(token: Token) -> None:
    _CONTEXT.reset(token)


def clear_context() -> None:
    _CONTEXT.set({})
