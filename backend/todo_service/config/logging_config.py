import logging
from logging.handlers import RotatingFileHandler
import io
import sys
from pathlib import Path
from contextvars import ContextVar
from typing import Optional

NO_CORRELATION_ID = "NO Correlation ID"

# Context variable to store correlation ID across async boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


_stdout: Optional[io.TextIOWrapper] = None
_installed_handlers: list[logging.Handler] = []


def _utf8_stdout() -> io.TextIOWrapper:
    # One wrapper per process; a collected wrapper would close sys.stdout
    global _stdout
    if _stdout is None:
        _stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
    return _stdout


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_format: str = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise

    # Calling again replaces the handlers from the previous call
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    logger_handler = logging.StreamHandler(_utf8_stdout())
    formatter = SafeFormatter(log_format)
    logger_handler.setFormatter(formatter)
    logger_handler.addFilter(CorrelationIdFilter())
    root.addHandler(logger_handler)
    _installed_handlers.append(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    # Only the service's own loggers go below WARNING
    logging.getLogger("todo_service").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger("todo_service").info("Logging is set up.")

    return root
