"""Structured logging for toml-describe.

Provides JSON-formatted or colored console logs. Everything goes to stderr:
stdout belongs to the build system's directive stream.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

# Record attributes promoted out of ``extra_data``
CONTEXT_FIELDS = ("component", "capability", "predicate", "target", "toolchain")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for human-readable output."""

    COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.MAGENTA,
    }
    RESET = Style.RESET_ALL

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now().strftime("%H:%M:%S")
        prefix = f"{color}[{timestamp}] {record.levelname:8}{self.RESET}"

        if hasattr(record, "component"):
            prefix += f" [{record.component}]"

        message = record.getMessage()

        extras = []
        if hasattr(record, "capability"):
            extras.append(f"cap={record.capability}")
        if hasattr(record, "predicate"):
            extras.append(f"cfg={record.predicate}")
        if hasattr(record, "target"):
            extras.append(f"target={record.target}")

        if extras:
            message += f" ({', '.join(extras)})"

        return f"{prefix} {message}"


class DescribeLogger:
    """Logger wrapper that turns keyword context into record attributes."""

    def __init__(self, name: str, logger: logging.Logger):
        self._name = name
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def _log(self, level: int, message: str, **kwargs):
        extra = {}

        for key in CONTEXT_FIELDS:
            if key in kwargs:
                extra[key] = kwargs.pop(key)

        if kwargs:
            extra["extra_data"] = kwargs

        self._logger.log(level, message, extra=extra)

    # Convenience methods for the evaluation pipeline

    def toolchain_detected(self, version: str, prerelease: bool):
        channel = "pre-release" if prerelease else "stable"
        self.info(f"Toolchain {version} ({channel})", component="probe", toolchain=version)

    def group_evaluated(self, predicate: str, target: str, matched: bool):
        self.debug(
            f"Platform group {'applies' if matched else 'skipped'}",
            component="manifest",
            predicate=predicate,
            target=target,
        )

    def capability_checked(self, name: str, enabled: bool):
        self.debug(
            f"Capability {'enabled' if enabled else 'disabled'}",
            component="engine",
            capability=name,
        )


_loggers: dict[str, DescribeLogger] = {}
_initialized = False


def setup_logging(
    level: str = "WARNING",
    format_type: str = "text",
    console_enabled: bool = True,
    stream: Optional[TextIO] = None
) -> None:
    """Initialize the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "json" or "text"
        console_enabled: Write logs to the console stream
        stream: Stream for console output (defaults to stderr)
    """
    global _initialized

    if _initialized:
        return

    root = logging.getLogger("toml_describe")
    root.setLevel(getattr(logging, level.upper()))
    root.handlers.clear()
    root.propagate = False

    if console_enabled:
        console = logging.StreamHandler(stream or sys.stderr)
        console.setLevel(logging.DEBUG)

        if format_type == "json":
            console.setFormatter(JSONFormatter())
        else:
            just_fix_windows_console()
            console.setFormatter(ColoredFormatter())

        root.addHandler(console)
    else:
        root.addHandler(logging.NullHandler())

    _initialized = True


def reset_logging() -> None:
    """Drop handlers so the next setup_logging() call reconfigures."""
    global _initialized
    logging.getLogger("toml_describe").handlers.clear()
    _initialized = False


def get_logger(name: str = "toml_describe") -> DescribeLogger:
    """Get a toml-describe logger instance."""
    if name not in _loggers:
        full_name = name if name.startswith("toml_describe") else f"toml_describe.{name}"
        _loggers[name] = DescribeLogger(name, logging.getLogger(full_name))
    return _loggers[name]
