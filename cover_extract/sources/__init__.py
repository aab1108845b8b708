from cover_extract.sources.files import decode_document, load_document_text, validate_upload
from cover_extract.sources.web import fetch_posting, is_valid_url

__all__ = [
    "decode_document",
    "load_document_text",
    "validate_upload",
    "fetch_posting",
    "is_valid_url",
]
