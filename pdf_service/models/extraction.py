"""Request and response models for text extraction."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ExtractionRequest(BaseModel):
    """Body of ``POST /parse``."""
    model_config = ConfigDict(extra="ignore")

    url: StrictStr = Field(min_length=1)


class RawDocument(BaseModel):
    """Downloaded PDF bytes, held only for the duration of one request.

    ``content`` is the download buffer itself, not a copy.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    content: Union[bytes, bytearray]
    size: int
    content_type: Optional[str] = None
    fetch_time: float = 0.0


class ExtractionResponse(BaseModel):
    """Successful extraction envelope."""
    text: str


class ErrorEnvelope(BaseModel):
    """Failure envelope."""
    error: str
    details: Optional[str] = None


class HealthStatus(BaseModel):
    """Liveness probe body."""
    status: str = "ok"
    message: str = "PDF Parsing Service is running"
