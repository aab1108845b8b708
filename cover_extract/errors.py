# cover_extract/errors.py
from typing import Optional


class ExtractionError(Exception):
    """Base class for failures raised by the input collaborators."""


class UnsupportedInput(ExtractionError, ValueError):
    """Document type outside PDF/DOCX, or an upload over the size limit."""


class UpstreamFailure(ExtractionError, RuntimeError):
    """A posting URL could not be fetched (network error or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
