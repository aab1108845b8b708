# cover_extract/sources/files.py
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Optional

from cover_extract.errors import UnsupportedInput

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_TYPES = [PDF_MIME, DOCX_MIME]
MAX_UPLOAD_BYTES = 5 * 1024 * 1024

_ALIASES = {
    "pdf": PDF_MIME,
    ".pdf": PDF_MIME,
    PDF_MIME: PDF_MIME,
    "docx": DOCX_MIME,
    ".docx": DOCX_MIME,
    DOCX_MIME: DOCX_MIME,
}


def resolve_type(mime_or_extension: str) -> Optional[str]:
    """Map a MIME type or file extension onto one of SUPPORTED_TYPES."""
    key = (mime_or_extension or "").strip().lower()
    return _ALIASES.get(key)


def validate_upload(
    data: bytes,
    mime_or_extension: str,
    max_bytes: int = MAX_UPLOAD_BYTES,
    allowed_types: Optional[Iterable[str]] = None,
) -> str:
    """
    Reject uploads that are too large or of an unsupported type.
    Returns the resolved MIME type.
    """
    allowed = list(allowed_types) if allowed_types is not None else SUPPORTED_TYPES
    mime = resolve_type(mime_or_extension)
    if mime is None or mime not in allowed:
        raise UnsupportedInput(f"Only PDF and DOCX files are supported (got {mime_or_extension!r})")
    if len(data) > max_bytes:
        raise UnsupportedInput(f"File size exceeds {max_bytes // (1024 * 1024)}MB limit")
    return mime


def _pdf_text(data: bytes) -> str:
    import pdfplumber

    with pdfplumber.open(io.BytesIO(data)) as pdf:
        parts = []
        for page in pdf.pages:
            parts.append(page.extract_text() or "")
        return "\n".join(parts)


def _docx_text(data: bytes) -> str:
    from docx import Document

    doc = Document(io.BytesIO(data))
    return "\n".join(par.text for par in doc.paragraphs)


def decode_document(data: bytes, mime_or_extension: str) -> str:
    """Decode PDF or DOCX bytes into plain text."""
    mime = resolve_type(mime_or_extension)
    if mime == PDF_MIME:
        decoder = _pdf_text
    elif mime == DOCX_MIME:
        decoder = _docx_text
    else:
        raise UnsupportedInput(f"Unsupported file type: {mime_or_extension}")

    try:
        text = decoder(data)
    except Exception as e:
        raise UnsupportedInput(f"Could not read {mime_or_extension} document: {e}") from e

    logger.debug("decoded %d bytes of %s into %d chars", len(data), mime, len(text))
    return text


def load_document_text(
    path: str,
    max_bytes: int = MAX_UPLOAD_BYTES,
    allowed_types: Optional[Iterable[str]] = None,
) -> str:
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Resume not found: {p}")

    data = p.read_bytes()
    mime = validate_upload(data, p.suffix, max_bytes=max_bytes, allowed_types=allowed_types)
    return decode_document(data, mime)
