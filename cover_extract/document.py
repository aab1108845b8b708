# cover_extract/document.py
"""
Résumé text -> DocumentExtraction.

Input is text that has already been decoded from PDF/DOCX. Every field is a
best-effort guess; a miss simply leaves the field unset.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional

from cover_extract.models import (
    EDUCATION_MAX,
    EXPERIENCE_MAX,
    NAME_MAX,
    SKILLS_MAX,
    DocumentExtraction,
)
from cover_extract.rules import Rule, regex_rule, run_rules, section_rule


# Bounded quantifiers keep these linear on very long inputs.
_EMAIL_RE = re.compile(r"[\w.-]{1,64}@[\w.-]{1,253}\.\w+")
_PHONE_RE = re.compile(r"(?<!\d)(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")
_NAME_RE = re.compile(r"^[^\W\d_](?:[^\W\d_]|[ \t.'-])*$")

# Plain keyword boundaries: "experienced" also ends a section.
_BLANK_LINE = r"\n[^\S\n]*\n"

_SKILLS_HEADING = re.compile(r"\b(?:technical\s+skills?|skills?|competencies)\b\s*[:.]?\s*", re.IGNORECASE)
_SKILLS_BOUNDARY = re.compile(rf"{_BLANK_LINE}|experience|education", re.IGNORECASE)

_EXPERIENCE_HEADING = re.compile(r"\b(?:experience|work\s+history|employment)\b\s*[:.]?\s*", re.IGNORECASE)
_EXPERIENCE_BOUNDARY = re.compile(rf"{_BLANK_LINE}|education|skills", re.IGNORECASE)

_EDUCATION_HEADING = re.compile(r"\b(?:education|academic\s+background)\b\s*[:.]?\s*", re.IGNORECASE)
_EDUCATION_BOUNDARY = re.compile(rf"{_BLANK_LINE}|experience|skills", re.IGNORECASE)


def _first_line_name(text: str) -> Optional[str]:
    # Only the first non-blank line is considered.
    for line in text.split("\n"):
        candidate = line.strip()
        if not candidate:
            continue
        if len(candidate) <= NAME_MAX and _NAME_RE.match(candidate):
            return " ".join(candidate.split())
        return None
    return None


FIELD_RULES: Dict[str, List[Rule]] = {
    "email": [regex_rule("email", _EMAIL_RE, max_len=320)],
    "phone": [regex_rule("phone", _PHONE_RE, max_len=32)],
    "name": [Rule("name:first_line", _first_line_name)],
    "skills": [section_rule("skills:heading", _SKILLS_HEADING, _SKILLS_BOUNDARY, SKILLS_MAX)],
    "experience": [
        section_rule("experience:heading", _EXPERIENCE_HEADING, _EXPERIENCE_BOUNDARY, EXPERIENCE_MAX)
    ],
    "education": [section_rule("education:heading", _EDUCATION_HEADING, _EDUCATION_BOUNDARY, EDUCATION_MAX)],
}


def extract(raw_text: str) -> DocumentExtraction:
    text = (raw_text or "").replace("\r\n", "\n").replace("\r", "\n")

    found = {}
    for field, rules in FIELD_RULES.items():
        value = run_rules(rules, text)
        if value:
            found[field] = value

    return DocumentExtraction(**found)
