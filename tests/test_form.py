from cover_extract.form import CoverLetterData, PersonalInfo, merge_document, merge_posting
from cover_extract.models import DocumentExtraction, PostingExtraction


def test_document_merge_only_writes_found_fields():
    form = CoverLetterData(personal_info=PersonalInfo(name="Existing Name", phone="555-000-0000"), skills="Go")
    extraction = DocumentExtraction(email="new@example.com", experience="Led a team of five.")

    merged = merge_document(form, extraction)

    assert merged.personal_info.name == "Existing Name"
    assert merged.personal_info.phone == "555-000-0000"
    assert merged.personal_info.email == "new@example.com"
    assert merged.skills == "Go"
    assert merged.achievements == "Led a team of five."


def test_document_merge_overwrites_with_non_empty_values():
    form = CoverLetterData(personal_info=PersonalInfo(name="Old"), skills="Old skills")

    merged = merge_document(form, DocumentExtraction(name="Jane Doe", skills="Python"))

    assert merged.personal_info.name == "Jane Doe"
    assert merged.skills == "Python"
    # input record is left untouched
    assert form.personal_info.name == "Old"


def test_posting_merge():
    form = CoverLetterData(custom_message="Keep me")
    form.company_info.hiring_manager = "Pat"

    merged = merge_posting(form, PostingExtraction(company_name="Acme", position="Engineer"))

    assert merged.company_info.company_name == "Acme"
    assert merged.company_info.position == "Engineer"
    assert merged.company_info.hiring_manager == "Pat"
    assert merged.custom_message == "Keep me"

    merged = merge_posting(merged, PostingExtraction(requirements="Go, SQL and a lot of patience."))
    assert merged.custom_message == "Go, SQL and a lot of patience."
    assert merged.company_info.company_name == "Acme"


def test_empty_extraction_is_a_no_op():
    form = CoverLetterData(personal_info=PersonalInfo(name="Sam"), template_id="modern")

    assert merge_document(form, DocumentExtraction()).model_dump() == form.model_dump()
    assert merge_posting(form, PostingExtraction()).model_dump() == form.model_dump()
