"""structlog setup for podctl.

Two sinks hang off the stdlib root logger:

* stderr, filtered by ``--verbose``/``--debug`` (WARNING by default). stdout
  is left to the picker and the shell session.
* a rotating JSON file under ``~/.local/state/podctl`` that records
  everything at DEBUG.
"""

from __future__ import annotations

import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

LOG_DIR = Path.home() / ".local" / "state" / "podctl"
LOG_FILE = LOG_DIR / "podctl.log"
MAX_LOG_SIZE = 10 * 1024 * 1024
BACKUP_COUNT = 5
RETENTION_DAYS = 30


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _formatter(renderer: structlog.types.Processor) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_pre_chain(),
    )


def _cleanup_old_logs() -> None:
    """Remove rotated podctl logs not touched for RETENTION_DAYS."""
    if not LOG_DIR.exists():
        return
    cutoff = time.time() - RETENTION_DAYS * 24 * 60 * 60
    for path in LOG_DIR.glob("podctl.log*"):
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
        except OSError:
            continue


def _setup_file_logging() -> None:
    """Attach the rotating JSON file handler to the root logger."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    _cleanup_old_logs()

    handler = RotatingFileHandler(LOG_FILE, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    logging.getLogger().addHandler(handler)


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
) -> None:
    """Route structlog through stdlib logging to stderr and the log file.

    Args:
        verbose: Show INFO events on stderr.
        debug: Show DEBUG events on stderr, with locals in tracebacks.
    """
    console_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        # Handlers do the filtering; the file wants every event.
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=debug),
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_formatter(renderer))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(console)

    _setup_file_logging()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Return a structlog logger, optionally with context already bound."""
    logger: structlog.BoundLogger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
