"""FastAPI application for the PDF parsing service."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import health_router, parse_router
from .core.config import Settings, get_settings
from .core.logging import get_logger, setup_logging
from .fetchers import URLFetcher
from .models.extraction import ErrorEnvelope
from .parsers import get_parser

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its shared fetcher and parser."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.fetcher = URLFetcher(settings)
        logger.info(
            "PDF parsing service started",
            backend=app.state.parser.name,
            download_timeout=settings.download_timeout,
            max_download_bytes=settings.max_download_bytes,
        )
        try:
            yield
        finally:
            await app.state.fetcher.aclose()
            logger.info("PDF parsing service stopped")

    app = FastAPI(
        title="PDF Parsing Service",
        description="Downloads a PDF by URL and returns its text layer",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    # Unknown backends fail here, before the server accepts traffic
    app.state.parser = get_parser(settings.pdf_backend)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and wrong methods are both reported as a plain 404
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404)
        envelope = ErrorEnvelope(error=str(exc.detail))
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope.model_dump(exclude_none=True),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        # Runs outside the CORS middleware, so headers are added here
        logger.exception("Unhandled error", path=request.url.path, error=str(exc))
        envelope = ErrorEnvelope(error="Internal Server Error", details=str(exc))
        return JSONResponse(status_code=500, content=envelope.model_dump(), headers=CORS_HEADERS)

    app.include_router(health_router)
    app.include_router(parse_router)

    return app


setup_logging()
app = create_app()
