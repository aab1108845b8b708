# cover_extract/posting.py
"""
Job-posting HTML -> (PostingExtraction, preview_text).

Noise elements are removed first, then structured markup is tried
(headings, class/attribute hints, microdata) and prose patterns over the
flattened page text act as the fallback.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString
from bs4.builder import ParserRejectedMarkup

from cover_extract.models import (
    COMPANY_MAX,
    DESCRIPTION_MAX,
    FALLBACK_DESCRIPTION_MAX,
    NARROW_SECTION_MAX,
    POSITION_MAX,
    PREVIEW_MAX,
    SECTION_MAX,
    PostingExtraction,
)
from cover_extract.rules import Rule, regex_rule, run_rules, section_rule
from cover_extract.utils import clean_field, clip, collapse_whitespace

logger = logging.getLogger(__name__)

NOISE_TAGS = ["script", "style", "nav", "header", "footer", "iframe", "noscript"]
HEAD_TAGS = ["head", "title"]

# heading captures shorter than this are ignored
HEADING_MIN = 10
NARROW_MIN = 50

_APOS = r"['’]?"
_BLANK = r"\n\s*\n"


def _rx(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


_REQ_HEADING = _rx(
    rf"\b(?:requirements?|qualifications|what\s+you{_APOS}ll\s+need|what\s+we{_APOS}re\s+looking\s+for)\b\s*:?\s*"
)
_REQ_BOUNDARY = _rx(rf"{_BLANK}|\b(?:responsibilities|about|benefits)\b")
_REQ_NARROW_HEADING = _rx(r"\b(?:required|must[\s-]+have)\b\s*:?\s*")
_REQ_NARROW_BOUNDARY = _rx(r"\b(?:preferred|nice[\s-]+to[\s-]+have|responsibilities)\b")

_RESP_HEADING = _rx(rf"\b(?:responsibilities|what\s+you{_APOS}ll\s+do|role\s+overview|job\s+duties)\b\s*:?\s*")
_RESP_BOUNDARY = _rx(rf"{_BLANK}|\b(?:requirements?|qualifications|about|benefits|what\s+you{_APOS}ll\s+need)\b")
_RESP_NARROW_HEADING = _rx(rf"\b(?:you\s+will|you{_APOS}ll)\b\s*")
_RESP_NARROW_BOUNDARY = _rx(r"\b(?:requirements?|qualifications|about|benefits)\b")

_QUAL_HEADING = _rx(
    r"\b(?:preferred\s+qualifications|bonus\s+qualifications|nice[\s-]+to[\s-]+have|bonus\s+points|preferred\s+skills)\b\s*:?\s*"
)
_QUAL_BOUNDARY = _rx(rf"{_BLANK}|\b(?:requirements?|responsibilities|about|benefits)\b")

_DESC_HEADING = _rx(r"\b(?:job\s+description|about\s+the\s+(?:role|job|position)|job\s+summary|overview)\b\s*:?\s*")
_DESC_BOUNDARY = _rx(rf"{_BLANK}|\b(?:requirements?|qualifications|responsibilities|benefits|what\s+you{_APOS}ll)\b")

# "... at Acme Corp is hiring ..." - company words must be capitalized
_COMPANY_PROSE_RE = re.compile(
    r"(?:\b[Aa]t|@)\s+([A-Z][\w&.,'’-]{0,40}(?:\s+[A-Z&][\w&.,'’-]{0,40}){0,5})"
    r"\s+(?:is\s+hiring|seeks|is\s+looking)"
)


@dataclass(frozen=True)
class Page:
    soup: BeautifulSoup
    text: str


def _element_text(el) -> str:
    return collapse_whitespace(el.get_text(" "))


def _strip_title_suffix(value: str) -> str:
    return value.split("|", 1)[0].strip()


def selector_rule(
    name: str,
    selector: str,
    max_len: int,
    attr: Optional[str] = None,
    transform: Optional[Callable[[str], str]] = None,
) -> Rule:
    """
    First element matching `selector`. Falls back to `attr` when the element
    has no text. Values longer than max_len are a non-match.
    """

    def _extract(page: Page) -> Optional[str]:
        el = page.soup.select_one(selector)
        if el is None:
            return None
        value = _element_text(el)
        if not value and attr:
            value = collapse_whitespace(el.get(attr) or "")
        if transform:
            value = transform(value)
        if not value or len(value) > max_len:
            return None
        return value

    return Rule(name, _extract)


def _on_text(rule: Rule) -> Rule:
    return Rule(rule.name, lambda page: rule.extract(page.text))


def _title_suffix_company(page: Page) -> Optional[str]:
    title = page.soup.title
    if title is None:
        return None
    parts = collapse_whitespace(title.get_text(" ")).rsplit("|", 1)
    if len(parts) != 2:
        return None
    value = parts[1].strip()
    if not value or len(value) > COMPANY_MAX:
        return None
    return value


FIELD_RULES: Dict[str, List[Rule]] = {
    "position": [
        selector_rule("position:h1", "h1", POSITION_MAX, transform=_strip_title_suffix),
        selector_rule("position:class-job-title", '[class*="job-title"]', POSITION_MAX, transform=_strip_title_suffix),
        selector_rule("position:class-jobTitle", '[class*="jobTitle"]', POSITION_MAX, transform=_strip_title_suffix),
        selector_rule("position:class-position", '[class*="position"]', POSITION_MAX, transform=_strip_title_suffix),
        selector_rule(
            "position:data-job-title",
            "[data-job-title]",
            POSITION_MAX,
            attr="data-job-title",
            transform=_strip_title_suffix,
        ),
        selector_rule("position:title", "title", POSITION_MAX, transform=_strip_title_suffix),
    ],
    "company_name": [
        selector_rule("company:class-company", '[class*="company"]', COMPANY_MAX),
        selector_rule("company:class-employer", '[class*="employer"]', COMPANY_MAX),
        selector_rule("company:class-organization", '[class*="organization"]', COMPANY_MAX),
        selector_rule("company:data-company", "[data-company]", COMPANY_MAX, attr="data-company"),
        selector_rule(
            "company:itemprop-name",
            '[itemprop="hiringOrganization"] [itemprop="name"]',
            COMPANY_MAX,
            attr="content",
        ),
        selector_rule("company:itemprop", '[itemprop="hiringOrganization"]', COMPANY_MAX, attr="content"),
        _on_text(regex_rule("company:prose", _COMPANY_PROSE_RE, COMPANY_MAX, group=1)),
        Rule("company:title-suffix", _title_suffix_company),
    ],
    "requirements": [
        _on_text(section_rule("requirements:heading", _REQ_HEADING, _REQ_BOUNDARY, SECTION_MAX, HEADING_MIN)),
        _on_text(
            section_rule(
                "requirements:narrow", _REQ_NARROW_HEADING, _REQ_NARROW_BOUNDARY, NARROW_SECTION_MAX, NARROW_MIN
            )
        ),
    ],
    "responsibilities": [
        _on_text(section_rule("responsibilities:heading", _RESP_HEADING, _RESP_BOUNDARY, SECTION_MAX, HEADING_MIN)),
        _on_text(
            section_rule(
                "responsibilities:narrow",
                _RESP_NARROW_HEADING,
                _RESP_NARROW_BOUNDARY,
                NARROW_SECTION_MAX,
                NARROW_MIN,
            )
        ),
    ],
    "qualifications": [
        _on_text(
            section_rule("qualifications:heading", _QUAL_HEADING, _QUAL_BOUNDARY, NARROW_SECTION_MAX, HEADING_MIN)
        ),
    ],
    "description": [
        _on_text(section_rule("description:heading", _DESC_HEADING, _DESC_BOUNDARY, DESCRIPTION_MAX, HEADING_MIN)),
    ],
}

FIELD_CAPS = {
    "position": POSITION_MAX,
    "company_name": COMPANY_MAX,
    "requirements": SECTION_MAX,
    "responsibilities": SECTION_MAX,
    "qualifications": NARROW_SECTION_MAX,
    "description": DESCRIPTION_MAX,
}


def _visible_text(soup: BeautifulSoup) -> str:
    if soup.body is not None:
        return soup.body.get_text(" ")
    # html.parser adds no <body> of its own; skip <head>/<title> text by hand
    strings = [
        s
        for s in soup.find_all(string=True)
        if type(s) is NavigableString and s.find_parent(HEAD_TAGS) is None
    ]
    return " ".join(strings)


def parse_page(html: str) -> Optional[Page]:
    """Parse, drop noise elements and flatten. None if the parser rejects the markup."""
    try:
        soup = BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as e:
        logger.debug("markup rejected by parser: %s", e)
        return None

    for tag in soup(NOISE_TAGS):
        # nested noise (script inside header) is already gone with its parent
        if not tag.decomposed:
            tag.decompose()

    return Page(soup=soup, text=collapse_whitespace(_visible_text(soup)))


def extract(html: str) -> Tuple[PostingExtraction, str]:
    page = parse_page(html)
    if page is None:
        return PostingExtraction(), ""

    found: Dict[str, str] = {}
    for field, rules in FIELD_RULES.items():
        value = run_rules(rules, page)
        if value:
            found[field] = value

    if not any(found.get(k) for k in ("description", "requirements", "responsibilities")):
        fallback = clean_field(page.text[:FALLBACK_DESCRIPTION_MAX], FALLBACK_DESCRIPTION_MAX)
        if fallback:
            found["description"] = fallback

    cleaned = {}
    for field, value in found.items():
        value = clean_field(value, FIELD_CAPS[field])
        if value:
            cleaned[field] = value

    return PostingExtraction(**cleaned), clip(page.text, PREVIEW_MAX)
