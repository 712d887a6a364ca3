"""PDF text extraction with pdfplumber."""

from io import BytesIO
from typing import Union

import pdfplumber

from .base_parser import BaseParser


class PdfPlumberParser(BaseParser):
    """Parser backed by pdfplumber (pdfminer.six). Slower, pure Python."""

    name = "pdfplumber"

    def _extract_pages(self, content: Union[bytes, bytearray]) -> list[str]:
        with pdfplumber.open(BytesIO(content)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
