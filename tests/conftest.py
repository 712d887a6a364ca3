"""Shared fixtures: generated PDFs, mocked downloads and a test app."""

import inspect
from typing import Callable, List

import fitz  # PyMuPDF
import httpx
import pytest
from fastapi.testclient import TestClient

from pdf_service.api.dependencies import get_fetcher
from pdf_service.core.config import Settings, get_settings
from pdf_service.fetchers import URLFetcher
from pdf_service.main import create_app


def make_pdf(pages: List[str]) -> bytes:
    """Build a PDF with one page per string, each string drawn as real text."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def make_scanned_pdf() -> bytes:
    """Build a PDF whose only page content is a raster image."""
    doc = fitz.open()
    page = doc.new_page()
    pixmap = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, 32, 32), False)
    pixmap.clear_with(180)
    page.insert_image(page.rect, pixmap=pixmap)
    data = doc.tobytes()
    doc.close()
    return data


def make_encrypted_pdf() -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Confidential", fontsize=12)
    data = doc.tobytes(
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner-secret",
        user_pw="user-secret",
    )
    doc.close()
    return data


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_pdf() -> bytes:
    return make_pdf([
        "Executive Summary",
        "Section 2: Findings",
        "Section 3: Recommendations",
    ])


@pytest.fixture
def scanned_pdf() -> bytes:
    return make_scanned_pdf()


@pytest.fixture
def encrypted_pdf() -> bytes:
    return make_encrypted_pdf()


@pytest.fixture
def settings() -> Settings:
    return Settings(download_timeout=2.0, max_download_bytes=1024 * 1024)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable):
        self.requests: List[httpx.Request] = []

        async def recording_handler(request: httpx.Request):
            self.requests.append(request)
            result = handler(request)
            if inspect.isawaitable(result):
                result = await result
            return result

        super().__init__(recording_handler)


@pytest.fixture
def make_fetcher(settings):
    """Build a URLFetcher whose downloads are answered by ``handler``."""
    def _make(handler: Callable, **kwargs) -> URLFetcher:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport, follow_redirects=True)
        fetcher = URLFetcher(kwargs.pop("settings", settings), client=client, **kwargs)
        fetcher.transport = transport
        return fetcher
    return _make


@pytest.fixture
def make_client(settings, make_fetcher):
    """Build a TestClient whose fetcher downloads through ``handler``."""
    clients = []

    def _make(handler: Callable, app_settings: Settings = None) -> TestClient:
        app_settings = app_settings or settings
        app = create_app(app_settings)
        fetcher = make_fetcher(handler, settings=app_settings)
        app.dependency_overrides[get_fetcher] = lambda: fetcher
        client = TestClient(app)
        client.__enter__()
        client.fetcher = fetcher
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
