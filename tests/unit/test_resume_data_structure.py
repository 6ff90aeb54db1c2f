"""Unit tests for the resume data structure."""

import dataclasses
from pathlib import Path

import pytest

from vitae.contexts.templating.exceptions import InvalidResumeStructureError
from vitae.contexts.templating.resume_data_structure import (
    ResumeData,
    Technologies,
    load_resume_data,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.mark.unit
def test_from_dict_camel_case():
    """Test loading the stored-record (camelCase) format."""
    data = ResumeData.from_dict(
        {
            "personalInfo": {"fullName": "Ada Lovelace", "profileImage": "ada.png"},
            "experience": [{"company": "A", "startDate": "2020", "endDate": "2021", "current": True}],
        }
    )

    assert data.personal_info.full_name == "Ada Lovelace"
    assert data.personal_info.profile_image == "ada.png"
    assert data.experience[0].start_date == "2020"
    assert data.experience[0].end_date == "2021"
    assert data.experience[0].current is True


@pytest.mark.unit
def test_from_dict_snake_case():
    """Test that snake_case keys are accepted as well."""
    data = ResumeData.from_dict(
        {"personal_info": {"full_name": "Ada"}, "education": [{"institution": "U", "start_date": "2014"}]}
    )

    assert data.personal_info.full_name == "Ada"
    assert data.education[0].start_date == "2014"


@pytest.mark.unit
def test_from_dict_tolerates_missing_and_null_fields():
    """Test that absent or null fields never raise."""
    data = ResumeData.from_dict(
        {
            "personalInfo": None,
            "summary": None,
            "skills": None,
            "experience": [{"company": "A", "description": None}, "not a mapping"],
            "languages": None,
            "unknownKey": 42,
        }
    )

    assert data.personal_info is None
    assert data.summary == ""
    assert data.skills == ()
    assert data.experience[0].description == ()
    assert data.experience[1].company == ""
    assert data.languages == ()
    assert data.template is None


@pytest.mark.unit
def test_scalars_coerced_to_strings():
    data = ResumeData.from_dict({"education": [{"institution": "U", "gpa": 3.9, "startDate": 2014}]})

    assert data.education[0].gpa == "3.9"
    assert data.education[0].start_date == "2014"


@pytest.mark.unit
def test_record_is_immutable():
    """Test that the record cannot be modified."""
    data = ResumeData.from_dict({"summary": "Hello", "languages": ["English"]})

    with pytest.raises(dataclasses.FrozenInstanceError):
        data.summary = "Changed"
    assert isinstance(data.languages, tuple)


@pytest.mark.unit
def test_skill_items_keep_their_shape():
    data = ResumeData.from_dict({"skills": [{"items": "A\nB"}, {"items": ["A", "B"], "category": "Core"}]})

    assert data.skills[0].items == "A\nB"
    assert data.skills[1].items == ("A", "B")
    assert data.skills[1].category == "Core"


@pytest.mark.unit
def test_technologies_string():
    """Test a comma-separated technologies string."""
    technologies = Technologies.from_raw("React, Node.js , ,GraphQL")

    assert not technologies.is_list
    assert technologies.joined() == "React, Node.js , ,GraphQL"
    assert technologies.tags() == ("React", "Node.js", "GraphQL")


@pytest.mark.unit
def test_technologies_list():
    """Test a technologies list."""
    technologies = Technologies.from_raw(["React", "Node.js"])

    assert technologies.is_list
    assert technologies.joined() == "React, Node.js"
    assert technologies.tags() == ("React", "Node.js")


@pytest.mark.unit
@pytest.mark.parametrize("raw", [None, "", []])
def test_technologies_empty(raw):
    assert not Technologies.from_raw(raw)


@pytest.mark.unit
def test_degree_title():
    data = ResumeData.from_dict({"education": [{"degree": "BSc", "field": "Physics"}, {"degree": "MBA"}]})

    assert data.education[0].degree_title == "BSc in Physics"
    assert data.education[1].degree_title == "MBA"


@pytest.mark.unit
def test_load_resume_data_fixture():
    """Test loading a YAML record from disk."""
    data = load_resume_data(FIXTURES_PATH / "sample_resume.yaml")

    assert data.personal_info.full_name == "Ada Lovelace"
    assert data.template == "modern"
    assert len(data.experience) == 2
    assert data.projects[1].technologies.is_list


@pytest.mark.unit
def test_load_resume_data_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resume_data(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_load_resume_data_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n")

    with pytest.raises(InvalidResumeStructureError):
        load_resume_data(path)


@pytest.mark.unit
def test_load_resume_data_keeps_dollar_braces_literal(tmp_path):
    """Test that ${...} in resume text is kept as written."""
    path = tmp_path / "resume.yaml"
    path.write_text(
        "title: Platform\n"
        "summary: 'Cut costs by ${budget} in 2023'\n"
        "experience:\n"
        "  - company: Acme\n"
        "    description:\n"
        "      - 'Wrote deploy hooks like echo ${HOME}'\n"
        "      - 'Renamed ${title} placeholders'\n"
    )

    data = load_resume_data(path)

    assert data.summary == "Cut costs by ${budget} in 2023"
    assert data.experience[0].description == (
        "Wrote deploy hooks like echo ${HOME}",
        "Renamed ${title} placeholders",
    )


@pytest.mark.unit
def test_load_resume_data_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("summary: [unclosed\nskills: {\n")

    with pytest.raises(InvalidResumeStructureError):
        load_resume_data(path)


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [(True, True), (False, False), ("true", True), ("TRUE", True), ("false", False),
     ("no", False), ("", False), (None, False), (1, False)],
)
def test_current_flag(raw, expected):
    """Test that only booleans or the string "true" mark a job as current."""
    data = ResumeData.from_dict({"experience": [{"company": "A", "current": raw}]})

    assert data.experience[0].current is expected
