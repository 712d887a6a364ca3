"""Core services for the PDF parsing service."""

from .config import Settings, get_settings
from .exceptions import (
    DownloadFailedError,
    DownloadTimeoutError,
    ExtractionError,
    InvalidInputError,
    MalformedDocumentError,
    PayloadTooLargeError,
)
from .logging import setup_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "ExtractionError",
    "InvalidInputError",
    "DownloadTimeoutError",
    "PayloadTooLargeError",
    "DownloadFailedError",
    "MalformedDocumentError",
]
