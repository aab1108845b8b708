from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# Field caps shared by the extractors and the record constraints.
NAME_MAX = 49
SKILLS_MAX = 500
EXPERIENCE_MAX = 1000
EDUCATION_MAX = 500

POSITION_MAX = 150
COMPANY_MAX = 99
SECTION_MAX = 1500
NARROW_SECTION_MAX = 1000
DESCRIPTION_MAX = 1000
FALLBACK_DESCRIPTION_MAX = 800
PREVIEW_MAX = 3000


class DocumentExtraction(BaseModel):
    """
    Candidate contact fields and résumé sections pulled from decoded text.
    Every field is optional; None means "not found", never "empty".
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, max_length=NAME_MAX)
    email: Optional[str] = None
    phone: Optional[str] = None
    skills: Optional[str] = Field(default=None, max_length=SKILLS_MAX)
    experience: Optional[str] = Field(default=None, max_length=EXPERIENCE_MAX)
    education: Optional[str] = Field(default=None, max_length=EDUCATION_MAX)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.as_dict()


class PostingExtraction(BaseModel):
    """Candidate job-posting fields. Serialized with the form's camelCase keys."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    company_name: Optional[str] = Field(default=None, alias="companyName", max_length=COMPANY_MAX)
    position: Optional[str] = Field(default=None, max_length=POSITION_MAX)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX)
    requirements: Optional[str] = Field(default=None, max_length=SECTION_MAX)
    responsibilities: Optional[str] = Field(default=None, max_length=SECTION_MAX)
    qualifications: Optional[str] = Field(default=None, max_length=NARROW_SECTION_MAX)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        return not self.as_dict()
