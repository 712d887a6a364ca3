"""PDF text extraction with PyMuPDF."""

from typing import Union

import fitz  # PyMuPDF

from ..core.exceptions import MalformedDocumentError
from .base_parser import BaseParser


class PyMuPDFParser(BaseParser):
    """Parser backed by PyMuPDF (MuPDF). Fast, handles most text-based PDFs."""

    name = "pymupdf"

    def _extract_pages(self, content: Union[bytes, bytearray]) -> list[str]:
        # filetype is only a hint; MuPDF sniffs the bytes and also opens
        # HTML, XPS and images as their own document types.
        doc = fitz.open(stream=content, filetype="pdf")
        try:
            if not doc.is_pdf:
                raise MalformedDocumentError(
                    "PDF parsing failed (pymupdf): content is not a PDF document"
                )
            if doc.needs_pass:
                raise MalformedDocumentError(
                    "PDF parsing failed (pymupdf): document is encrypted and requires a password"
                )
            return [page.get_text() for page in doc]
        finally:
            doc.close()
