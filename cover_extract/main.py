# cover_extract/main.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from cover_extract import extract_from_document_text, extract_from_posting_html
from cover_extract.config import Config, load_config
from cover_extract.errors import ExtractionError
from cover_extract.models import DocumentExtraction, PostingExtraction
from cover_extract.sources.files import load_document_text
from cover_extract.sources.web import fetch_posting
from cover_extract.utils import clip

REPO_ROOT = Path(__file__).resolve().parents[1]

logger = logging.getLogger(__name__)


def _load(config_path: str) -> Config:
    config_file = (REPO_ROOT / config_path).resolve()
    cfg = load_config(str(config_file))
    logging.basicConfig(level=cfg.logging.level, format="%(asctime)s %(levelname)s: %(message)s")
    logger.debug("Using config file: %s", config_file)
    return cfg


def extract_from_document_file(path: str, cfg: Optional[Config] = None) -> DocumentExtraction:
    cfg = cfg or Config()
    text = load_document_text(path, max_bytes=cfg.files.max_bytes, allowed_types=cfg.files.allowed_types)
    return extract_from_document_text(text)


def extract_from_posting_url(url: str, cfg: Optional[Config] = None) -> Tuple[PostingExtraction, str]:
    cfg = cfg or Config()
    _, html = fetch_posting(url, timeout=cfg.fetch.timeout, user_agent=cfg.fetch.user_agent)
    result, preview = extract_from_posting_html(html)
    return result, clip(preview, cfg.output.preview_chars)


def _print(payload: Dict[str, Any], indent: int) -> None:
    print(json.dumps(payload, indent=indent, ensure_ascii=False))


def run_resume(path: str, config_path: str = "config/config.yaml") -> int:
    cfg = _load(config_path)
    try:
        result = extract_from_document_file(path, cfg)
    except (ExtractionError, FileNotFoundError) as e:
        print(f"Could not read resume: {e}")
        return 2

    if result.is_empty():
        logger.info("No fields recognised in %s; fill the form by hand.", path)
    _print(result.as_dict(), cfg.output.indent)
    return 0


def run_posting(url: str, config_path: str = "config/config.yaml", show_preview: bool = False) -> int:
    cfg = _load(config_path)
    try:
        result, preview = extract_from_posting_url(url, cfg)
    except ExtractionError as e:
        print(f"Could not fetch job posting: {e}")
        return 2

    payload: Dict[str, Any] = {"data": result.as_dict()}
    if show_preview:
        payload["rawText"] = preview
    _print(payload, cfg.output.indent)
    return 0
