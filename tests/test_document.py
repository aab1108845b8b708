from cover_extract.document import extract
from cover_extract.models import DocumentExtraction, EDUCATION_MAX, EXPERIENCE_MAX, NAME_MAX, SKILLS_MAX


def test_contact_block_and_sections():
    text = "Jane Doe\njane.doe@example.com\n(555) 123-4567\nSkills: Python, Go, SQL\n\nExperience: 5 years backend."

    result = extract(text)

    assert result.as_dict() == {
        "name": "Jane Doe",
        "email": "jane.doe@example.com",
        "phone": "(555) 123-4567",
        "skills": "Python, Go, SQL",
        "experience": "5 years backend.",
    }


def test_unstructured_prose_only_yields_name():
    result = extract("random unstructured prose with no markers")

    assert result.as_dict() == {"name": "random unstructured prose with no markers"}


def test_name_is_first_line_only():
    result = extract("jane@example.com\nJane Doe")

    assert result.name is None
    assert result.email == "jane@example.com"


def test_name_allows_punctuation_and_rejects_long_lines():
    assert extract("Mary-Jane O'Neil Jr.\nfoo").name == "Mary-Jane O'Neil Jr."
    assert extract("A" * 60).name is None
    assert extract("\n\n   \nAlex Smith").name == "Alex Smith"


def test_phone_variants():
    assert extract("call +1 555.123.4567 today").phone == "+1 555.123.4567"
    assert extract("cell: 555-123-4567").phone == "555-123-4567"
    assert extract("id 12345678901234").phone is None


def test_education_and_work_history_headings():
    text = "Work History\nAcme Corp 2019-2024\n\nEducation: BSc Computer Science, MIT\n\nSkills: Python"

    result = extract(text)

    assert result.experience == "Acme Corp 2019-2024"
    assert result.education == "BSc Computer Science, MIT"
    assert result.skills == "Python"


def test_only_first_heading_is_used():
    text = "Experience: first job\n\nEducation: x\n\nExperience: second job"

    assert extract(text).experience == "first job"


def test_empty_section_is_absent():
    # heading immediately followed by the next heading
    result = extract("Skills:\nExperience: 3 years")

    assert result.skills is None
    assert result.experience == "3 years"


def test_sections_are_clipped_to_caps():
    text = (
        "Skills: " + "python, " * 200
        + "\n\nExperience: " + "built things; " * 200
        + "\n\nEducation: " + "coursework; " * 200
    )

    result = extract(text)

    assert len(result.skills) <= SKILLS_MAX
    assert len(result.experience) <= EXPERIENCE_MAX
    assert len(result.education) <= EDUCATION_MAX
    assert result.skills.startswith("python, python")


def test_whitespace_is_normalized():
    result = extract("Skills:   Python\t\tGo   \n  SQL")

    assert result.skills == "Python Go\nSQL"


def test_empty_and_garbage_input_never_raise():
    assert extract("") == DocumentExtraction()
    assert extract("   \n\t  ").as_dict() == {}
    assert extract(None).as_dict() == {}

    garbage = "\x00\x01\xff�%PDF-1.4 \x89PNG" * 500
    result = extract(garbage)
    assert isinstance(result, DocumentExtraction)


def test_long_input_respects_caps():
    text = ("word " * 20000) + "\nSkills: " + ("x" * 5000)

    result = extract(text)

    assert result.name is None
    assert result.skills is None or len(result.skills) <= SKILLS_MAX
    for value in result.as_dict().values():
        assert len(value) <= 5000
    assert len(result.name or "") <= NAME_MAX


def test_idempotent():
    text = "Jane Doe\njane@example.com\nSkills: Go\n\nEducation: MIT"

    assert extract(text) == extract(text)
    assert extract(text).as_dict() == extract(text).as_dict()


def test_boundary_keywords_match_inside_words():
    assert extract("Skills: Python, experienced mentor").skills == "Python,"
    assert extract("Education: MIT, skillset in math").education == "MIT,"
