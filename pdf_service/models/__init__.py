"""Data models for the PDF parsing service."""

from .extraction import (
    ErrorEnvelope,
    ExtractionRequest,
    ExtractionResponse,
    HealthStatus,
    RawDocument,
)

__all__ = [
    "ErrorEnvelope",
    "ExtractionRequest",
    "ExtractionResponse",
    "HealthStatus",
    "RawDocument",
]
