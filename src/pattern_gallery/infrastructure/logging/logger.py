"""Structured logging for the gallery, built on structlog and the stdlib logging module."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, List, Optional

import structlog

from pattern_gallery.config.schemas import LogDestination, LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


def _add_caller_info(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Collapse callsite parameters into a single ``caller_info`` entry."""
    module = event_dict.pop("module", None)
    func_name = event_dict.pop("func_name", None)
    lineno = event_dict.pop("lineno", None)
    if module is not None:
        event_dict["caller_info"] = f"{module}.{func_name}:{lineno}"
    return event_dict


def _render_event(logger: Any, method_name: str, event_dict: dict) -> str:
    """Render the event followed by its bound key/value context."""
    record = event_dict.pop("_record", None)
    caller_info = event_dict.pop("caller_info", None)
    if record is not None:
        record.caller_info = caller_info or f"{record.module}.{record.funcName}:{record.lineno}"

    for key in ("_from_structlog", "level", "logger", "logger_name"):
        event_dict.pop(key, None)

    event = str(event_dict.pop("event", ""))
    if not event_dict:
        return event
    context = " ".join(f"{key}={value!r}" for key, value in event_dict.items())
    return f"{event} {context}"


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Formatter that renders structlog events into the standard line format."""

    def __init__(self, fmt: str = LOG_FORMAT) -> None:
        super().__init__(
            fmt=fmt,
            processors=[_render_event],
            foreign_pre_chain=[structlog.stdlib.add_log_level],
        )


SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.CallsiteParameterAdder(
        {
            structlog.processors.CallsiteParameter.MODULE,
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        }
    ),
    _add_caller_info,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=SHARED_PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    handlers: List[logging.Handler] = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter())
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        # stderr keeps demo output on stdout clean
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter())
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger("pattern_gallery")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination.value,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


_configure_structlog()
