"""Endpoint that downloads a PDF by URL and returns its text."""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core.config import Settings
from ..core.exceptions import ExtractionError, InvalidInputError
from ..core.logging import get_logger
from ..fetchers import URLFetcher
from ..models.extraction import ErrorEnvelope, ExtractionRequest, ExtractionResponse
from ..parsers import BaseParser
from .dependencies import get_app_settings, get_fetcher, get_parser

logger = get_logger(__name__)
router = APIRouter()

PROCESSING_FAILED = "Failed to process PDF"


def error_response(error: ExtractionError, settings: Settings) -> JSONResponse:
    """Render a pipeline failure as the uniform error envelope."""
    if isinstance(error, InvalidInputError):
        return JSONResponse(status_code=400, content=ErrorEnvelope(error=error.message).model_dump(exclude_none=True))

    status_code = error.status_code if settings.distinct_error_status else 500
    envelope = ErrorEnvelope(error=PROCESSING_FAILED, details=error.message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


async def read_extraction_request(request: Request) -> ExtractionRequest:
    """Parse the body, treating anything without a usable ``url`` as invalid input."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        return ExtractionRequest.model_validate(payload)
    except ValidationError:
        raise InvalidInputError("URL is required") from None


@router.post("/parse")
async def parse_pdf(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    fetcher: URLFetcher = Depends(get_fetcher),
    parser: BaseParser = Depends(get_parser),
):
    """Download the PDF at ``url`` and return its text layer."""
    try:
        extraction_request = await read_extraction_request(request)
    except InvalidInputError as e:
        logger.info("Rejected parse request", reason=e.message)
        return error_response(e, settings)

    url = extraction_request.url
    logger.info("Received request to parse", url=url)

    try:
        document = await fetcher.fetch(url)
        logger.info("Downloaded document", url=url, bytes=document.size)

        text = await run_in_threadpool(parser.extract, document.content)
        logger.info("Parsing complete", url=url, chars=len(text), backend=parser.name)
    except ExtractionError as e:
        logger.error("PDF processing failed", url=url, error_code=e.code, error=e.message)
        return error_response(e, settings)
    except Exception as e:
        logger.exception("Unexpected error while processing PDF", url=url)
        envelope = ErrorEnvelope(error=PROCESSING_FAILED, details=str(e))
        return JSONResponse(status_code=500, content=envelope.model_dump())

    return ExtractionResponse(text=text)
