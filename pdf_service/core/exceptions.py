"""Error taxonomy for the extraction pipeline.

Each stage raises one of a closed set of errors. The request handler turns
any of them into the same JSON envelope; the original library message is kept
in ``details`` for diagnostics.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for failures while turning a URL into text."""

    code = "extraction_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(ExtractionError):
    """Request body has no usable ``url``."""

    code = "invalid_input"
    status_code = 400


class DownloadTimeoutError(ExtractionError):
    """Download did not finish inside the wall-clock budget."""

    code = "download_timeout"
    status_code = 504

    def __init__(self, timeout: float):
        super().__init__(f"Download timed out after {timeout:g} seconds")
        self.timeout = timeout


class PayloadTooLargeError(ExtractionError):
    """Remote payload is bigger than the configured ceiling."""

    code = "payload_too_large"
    status_code = 502

    def __init__(self, limit: int, size: Optional[int] = None):
        if size is not None:
            message = f"Remote file is {size} bytes, exceeding the limit of {limit} bytes"
        else:
            message = f"Remote file exceeds the limit of {limit} bytes"
        super().__init__(message)
        self.limit = limit
        self.size = size


class DownloadFailedError(ExtractionError):
    """Upstream answered with a non-success status or the transport failed."""

    code = "download_failed"
    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class MalformedDocumentError(ExtractionError):
    """Bytes could not be interpreted as a PDF with a readable text layer."""

    code = "malformed_document"
    status_code = 422
