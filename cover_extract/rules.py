# cover_extract/rules.py
"""
Ordered rule chains shared by both extractors.

A field is described by a list of rules. Rules run strictly in order and the
first one returning a non-empty string wins; later rules are never consulted.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from cover_extract.utils import clean_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    name: str
    extract: Callable[[Any], Optional[str]]


def run_rules(rules: Sequence[Rule], source: Any) -> Optional[str]:
    for rule in rules:
        value = rule.extract(source)
        if value:
            logger.debug("rule %s matched (%d chars)", rule.name, len(value))
            return value
    return None


def capture_section(
    text: str,
    heading: re.Pattern,
    boundary: re.Pattern,
    max_len: int,
    min_len: int = 1,
) -> Optional[str]:
    """
    Find the first heading, then take everything up to the next boundary
    (or end of text). Captures shorter than min_len are treated as no match;
    longer than max_len are clipped.
    """
    m = heading.search(text)
    if not m:
        return None

    body = text[m.end():]
    stop = boundary.search(body)
    if stop:
        body = body[: stop.start()]

    value = clean_field(body, max_len)
    if not value or len(value) < min_len:
        return None
    return value


def section_rule(
    name: str,
    heading: re.Pattern,
    boundary: re.Pattern,
    max_len: int,
    min_len: int = 1,
) -> Rule:
    return Rule(name, lambda text: capture_section(text, heading, boundary, max_len, min_len))


def regex_rule(name: str, pattern: re.Pattern, max_len: int, group: int = 0) -> Rule:
    """Whole-match (or single group) regex rule; values over max_len are rejected."""

    def _extract(text: str) -> Optional[str]:
        m = pattern.search(text)
        if not m:
            return None
        value = (m.group(group) or "").strip()
        if not value or len(value) > max_len:
            return None
        return value

    return Rule(name, _extract)
