"""PDF text extractors."""

from .base_parser import BaseParser
from .pdfplumber_parser import PdfPlumberParser
from .pymupdf_parser import PyMuPDFParser

__all__ = [
    "BaseParser",
    "PdfPlumberParser",
    "PyMuPDFParser",
    "PARSER_REGISTRY",
    "get_parser",
    "list_available_parsers",
]

# Parser registry mapping backend names to parser classes
PARSER_REGISTRY = {
    "pymupdf": PyMuPDFParser,
    "fitz": PyMuPDFParser,  # Alias
    "pdfplumber": PdfPlumberParser,
}


def get_parser(backend: str) -> BaseParser:
    """Instantiate the parser registered for ``backend``."""
    key = backend.lower().replace("-", "").replace("_", "")
    if key not in PARSER_REGISTRY:
        raise ValueError(
            f"Unknown PDF backend '{backend}'. Available: {', '.join(list_available_parsers())}"
        )
    return PARSER_REGISTRY[key]()


def list_available_parsers() -> dict[str, str]:
    """List all available parser backends and their descriptions."""
    return {
        "pymupdf": "PyMuPDF (MuPDF bindings), the default",
        "pdfplumber": "pdfplumber on top of pdfminer.six",
    }
