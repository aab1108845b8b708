# cover_extract/form.py
"""
The long-lived cover-letter form record, and the non-destructive merge of
extraction results into it. A merge only ever writes non-empty values.
"""
from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from cover_extract.models import DocumentExtraction, PostingExtraction

TemplateType = Literal["professional", "modern", "creative", "minimal"]


class PersonalInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class CompanyInfo(BaseModel):
    company_name: str = ""
    position: str = ""
    hiring_manager: str = ""


class ExperienceInfo(BaseModel):
    current_role: str = ""
    years_of_experience: str = ""


class CoverLetterData(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    company_info: CompanyInfo = Field(default_factory=CompanyInfo)
    experience_info: ExperienceInfo = Field(default_factory=ExperienceInfo)
    skills: str = ""
    achievements: str = ""
    custom_message: str = ""
    template_id: TemplateType = "professional"


def _non_empty(updates: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in updates.items() if isinstance(v, str) and v.strip()}


def merge_document(form: CoverLetterData, extraction: DocumentExtraction) -> CoverLetterData:
    personal = form.personal_info.model_copy(
        update=_non_empty({"name": extraction.name, "email": extraction.email, "phone": extraction.phone})
    )
    top = _non_empty({"skills": extraction.skills, "achievements": extraction.experience})
    return form.model_copy(update={"personal_info": personal, **top})


def merge_posting(form: CoverLetterData, extraction: PostingExtraction) -> CoverLetterData:
    company = form.company_info.model_copy(
        update=_non_empty({"company_name": extraction.company_name, "position": extraction.position})
    )
    top = _non_empty({"custom_message": extraction.requirements})
    return form.model_copy(update={"company_info": company, **top})
