"""Tests for the PDF text extractors."""

import pytest

from pdf_service.core.exceptions import MalformedDocumentError
from pdf_service.parsers import (
    PdfPlumberParser,
    PyMuPDFParser,
    get_parser,
    list_available_parsers,
)
from pdf_service.parsers.base_parser import describe_error

from .conftest import make_pdf

BACKENDS = [PyMuPDFParser, PdfPlumberParser]


@pytest.fixture(params=BACKENDS, ids=lambda cls: cls.name)
def parser(request):
    return request.param()


def test_extracts_text_from_every_page(parser, sample_pdf):
    text = parser.extract(sample_pdf)

    for word in ("Executive", "Summary", "Findings", "Recommendations"):
        assert word in text


def test_pages_are_concatenated_in_order(parser):
    text = parser.extract(make_pdf(["Alpha", "Bravo", "Charlie"]))

    assert text.index("Alpha") < text.index("Bravo") < text.index("Charlie")


def test_document_without_text_layer_yields_empty_text(parser, scanned_pdf):
    assert parser.extract(scanned_pdf).strip() == ""


def test_blank_pages_are_not_an_error(parser):
    assert parser.extract(make_pdf(["", ""])).strip() == ""


@pytest.mark.parametrize("content", [
    b"<!DOCTYPE html><html><body>404 Not Found</body></html>",
    b"\x00\x01\x02\x03 definitely not a pdf",
])
def test_non_pdf_bytes_are_malformed(parser, content):
    with pytest.raises(MalformedDocumentError) as exc_info:
        parser.extract(content)

    assert "PDF parsing failed" in exc_info.value.message


def test_empty_input_is_malformed(parser):
    with pytest.raises(MalformedDocumentError, match="empty"):
        parser.extract(b"")


def test_html_page_is_not_read_as_a_document():
    html = b"<!DOCTYPE html><html><body><h1>Access denied</h1></body></html>"

    with pytest.raises(MalformedDocumentError, match=r"PDF parsing failed \(pymupdf\)"):
        PyMuPDFParser().extract(html)


def test_password_protected_pdf_is_malformed(parser, encrypted_pdf):
    with pytest.raises(MalformedDocumentError) as exc_info:
        parser.extract(encrypted_pdf)

    message = exc_info.value.message
    prefix = f"PDF parsing failed ({parser.name}): "
    assert message.startswith(prefix)
    assert message[len(prefix):].strip()


def test_password_protected_pdf_names_encryption_with_pymupdf(encrypted_pdf):
    with pytest.raises(MalformedDocumentError, match="encrypted"):
        PyMuPDFParser().extract(encrypted_pdf)


def test_silent_library_error_still_has_a_reason():
    class SilentParser(PyMuPDFParser):
        def _extract_pages(self, content):
            raise RuntimeError()

    with pytest.raises(MalformedDocumentError) as exc_info:
        SilentParser().extract(b"%PDF-1.7")

    assert exc_info.value.message == "PDF parsing failed (pymupdf): RuntimeError"


class WrappingError(Exception):
    pass


class SilentPasswordError(Exception):
    pass


@pytest.mark.parametrize("error, expected", [
    (ValueError("bad xref"), "bad xref"),
    (SilentPasswordError(), "SilentPasswordError"),
    (WrappingError(SilentPasswordError()), "SilentPasswordError"),
    (WrappingError(ValueError("No /Root object")), "No /Root object"),
])
def test_describe_error(error, expected):
    assert describe_error(error) == expected


def test_describe_error_follows_cause():
    try:
        try:
            raise ValueError("trailer not found")
        except ValueError as inner:
            raise WrappingError() from inner
    except WrappingError as outer:
        assert describe_error(outer) == "trailer not found"


def test_bytearray_input_is_accepted(parser, sample_pdf):
    assert "Executive" in parser.extract(bytearray(sample_pdf))


def test_input_is_left_untouched(parser, sample_pdf):
    buffer = bytearray(sample_pdf)

    parser.extract(bytes(buffer))

    assert bytes(buffer) == sample_pdf


def test_parsing_is_deterministic(parser, sample_pdf):
    assert parser.extract(sample_pdf) == parser.extract(sample_pdf)


@pytest.mark.parametrize("name, expected", [
    ("pymupdf", PyMuPDFParser),
    ("PyMuPDF", PyMuPDFParser),
    ("fitz", PyMuPDFParser),
    ("pdfplumber", PdfPlumberParser),
    ("pdf_plumber", PdfPlumberParser),
])
def test_get_parser_resolves_backends(name, expected):
    assert isinstance(get_parser(name), expected)


def test_get_parser_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unknown PDF backend 'tika'"):
        get_parser("tika")


def test_every_listed_backend_is_constructible():
    for name in list_available_parsers():
        assert get_parser(name).name == name
