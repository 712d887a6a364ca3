"""Logging configuration for the PDF parsing service."""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import LoggerFactory

from .config import Settings, get_settings

# Marks the file handler we own so repeated setup does not stack handlers
_FILE_HANDLER_NAME = "pdf_service.file"


def build_processors(log_format: str) -> List[Any]:
    """Processor chain for request logs, ending in the configured renderer."""
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Route structlog through stdlib logging on stdout, plus an optional file."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper())

    structlog.configure(
        processors=build_processors(settings.log_format),
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    root = logging.getLogger()
    root.setLevel(level)

    for handler in [h for h in root.handlers if h.get_name() == _FILE_HANDLER_NAME]:
        root.removeHandler(handler)
        handler.close()

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
