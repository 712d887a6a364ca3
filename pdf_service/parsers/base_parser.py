"""Base parser class for PDF text extraction."""

from abc import ABC, abstractmethod
from typing import Union

from ..core.exceptions import MalformedDocumentError
from ..core.logging import get_logger


def describe_error(error: BaseException) -> str:
    """Return a non-empty description of a parser exception.

    pdfminer raises several exceptions without a message and pdfplumber wraps
    them as the first argument of its own exception, so fall back to the
    wrapped exception and finally to the class name.
    """
    message = str(error)
    if message:
        return message
    if error.args and isinstance(error.args[0], BaseException):
        return describe_error(error.args[0])
    if error.__cause__ is not None:
        return describe_error(error.__cause__)
    return type(error).__name__


class BaseParser(ABC):
    """Turn PDF bytes into the text its pages natively expose.

    Implementations are pure: they never mutate or keep the input, and they
    report any failure to read the document as ``MalformedDocumentError``.
    A document without a text layer is not a failure and yields an empty or
    near-empty string. Page texts are joined with a newline in page order.
    """

    name = "base"

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def extract(self, content: Union[bytes, bytearray]) -> str:
        """Extract all text from ``content``."""
        if not content:
            raise MalformedDocumentError("PDF parsing failed: document is empty")

        try:
            pages = self._extract_pages(content)
        except MalformedDocumentError:
            raise
        except Exception as e:
            reason = describe_error(e)
            self.logger.error(f"{self.name} parsing failed", error=reason)
            raise MalformedDocumentError(f"PDF parsing failed ({self.name}): {reason}") from e

        return "\n".join(pages)

    @abstractmethod
    def _extract_pages(self, content: Union[bytes, bytearray]) -> list[str]:
        """Return the text of each page in document order."""
        pass
