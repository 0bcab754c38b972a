"""
Logging configuration: central setup for the CLI entrypoint.

Called once at startup by main.py.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Console lines are labelled with diagnostic severities (``error``,
``warning``, ``remark``) so that a build host relaying the plugin's
stderr shows them the way it shows its own diagnostics:

    warning: No SwiftGen configurations found for target Foo. ...

Levels are resolved in precedence order:
    CLI flag  >  SWIFTGEN_PLUGIN_LOG_LEVEL env var  >  WARNING (default)

Optional file output via SWIFTGEN_PLUGIN_LOG_FILE / SWIFTGEN_PLUGIN_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

from swiftgen_plugin.core.diagnostics import LOG_LEVELS

ENV_LOG_LEVEL = "SWIFTGEN_PLUGIN_LOG_LEVEL"
ENV_LOG_FILE = "SWIFTGEN_PLUGIN_LOG_FILE"
ENV_LOG_FILE_LEVEL = "SWIFTGEN_PLUGIN_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

_FMT_MINIMAL = "%(severity)s: %(message)s"

_FMT_VERBOSE = "%(asctime)s %(severity)s: [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

_FMT_DEBUG = "%(asctime)s %(severity)s: %(name)s:%(lineno)d %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# File output keeps the stdlib level names
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = ("yaml",)


def severity_name(levelno: int) -> str:
    """Diagnostic severity for a log level; anything below a remark is ``debug``."""
    best = "debug"
    best_level = -1
    for severity, level in LOG_LEVELS.items():
        if best_level < level <= levelno:
            best, best_level = severity, level
    return best


class SeverityFormatter(logging.Formatter):
    """Formatter exposing ``%(severity)s`` alongside the usual record fields."""

    def format(self, record: logging.LogRecord) -> str:
        record.severity = severity_name(record.levelno)
        return super().format(record)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.
        quiet_third_party: If True, keep noisy third-party loggers at WARNING
            unless we're at DEBUG level.
    """
    numeric_level = parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(SeverityFormatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)

    if quiet_third_party and numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
