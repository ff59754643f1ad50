"""Logging for Printeez.

Everything goes through the stdlib root logger so Protean, uvicorn and our
own structlog loggers share the same handlers:

- stdout, at the environment's level;
- ``logs/printeez.log``, rotated at 10 MB;
- ``logs/printeez_error.log``, ERROR and above only.

Production and staging render JSON lines; every other environment renders
coloured console output with rich tracebacks.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

# Third-party loggers that drown out order events at DEBUG
QUIET_LOGGERS = ("protean", "sqlalchemy.engine", "urllib3", "asyncio", "uvicorn.access")


def _environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", LEVELS.get(_environment(), "INFO"))


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def _add_service(_, __, event_dict):
    event_dict.setdefault("service", "printeez")
    return event_dict


def setup_stdlib_logging(log_dir: str = "logs", log_file_prefix: str = "printeez") -> None:
    level = get_log_level()
    log_path = Path(os.getenv("LOG_DIR", log_dir))
    log_path.mkdir(exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating(log_path / f"{log_file_prefix}.log", level),
        _rotating(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_structlog() -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _add_service,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
    ]

    if _environment() in ("production", "staging"):
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=5),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str = "logs", log_file_prefix: str = "printeez") -> None:
    """Configure stdlib handlers and structlog for the whole process."""
    setup_stdlib_logging(log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def bind_request(**context) -> None:
    """Start a fresh log context for one HTTP request.

    Keys bound here (request_id, method, path) appear on every line logged
    while the request is handled, including lines from the order workflow.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context)
