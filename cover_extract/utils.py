# cover_extract/utils.py
import re
from typing import Optional


_ws_re = re.compile(r"\s+")
_hspace_re = re.compile(r"[^\S\n]+")
_edge_space_re = re.compile(r" *\n *")
_blank_run_re = re.compile(r"\n{3,}")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space."""
    if not text:
        return ""
    return _ws_re.sub(" ", text).strip()


def normalize_whitespace(text: str) -> str:
    """
    Collapse runs of spaces/tabs, trim spaces around newlines and
    cap blank-line runs at a single blank line.
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _hspace_re.sub(" ", text)
    text = _edge_space_re.sub("\n", text)
    text = _blank_run_re.sub("\n\n", text)
    return text.strip()


def clip(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[:max_len].rstrip()


def clean_field(text: Optional[str], max_len: int) -> Optional[str]:
    """Normalize then clip. Empty results come back as None."""
    if not text:
        return None
    out = clip(normalize_whitespace(text), max_len)
    return out or None
