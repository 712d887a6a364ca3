"""Request-scoped accessors for the process-wide collaborators."""

from fastapi import Request

from ..core.config import Settings
from ..fetchers import URLFetcher
from ..parsers import BaseParser


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_fetcher(request: Request) -> URLFetcher:
    return request.app.state.fetcher


def get_parser(request: Request) -> BaseParser:
    return request.app.state.parser
