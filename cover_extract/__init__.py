# cover_extract/__init__.py
from __future__ import annotations

from typing import Tuple

from cover_extract import document, posting
from cover_extract.errors import ExtractionError, UnsupportedInput, UpstreamFailure
from cover_extract.models import DocumentExtraction, PostingExtraction


def extract_from_document_text(text: str) -> DocumentExtraction:
    return document.extract(text)


def extract_from_posting_html(html: str) -> Tuple[PostingExtraction, str]:
    return posting.extract(html)


__all__ = [
    "DocumentExtraction",
    "PostingExtraction",
    "ExtractionError",
    "UnsupportedInput",
    "UpstreamFailure",
    "extract_from_document_text",
    "extract_from_posting_html",
]
