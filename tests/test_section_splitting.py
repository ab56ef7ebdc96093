"""Tests for heading detection and section splitting."""

import pytest

from cv_importer.core.section_splitter import (
    SECTION_PATTERNS,
    detect_section_heading,
    group_section_lines,
    split_sections,
)


def test_two_sections_no_header():
    result = split_sections(["Experience", "line 1", "line 2", "Education", "line 3"])

    assert result.header_lines == []
    assert [s.key for s in result.sections] == ["experience", "education"]
    assert result.sections[0].lines == ["line 1", "line 2"]
    assert result.sections[1].lines == ["line 3"]


def test_lines_before_first_heading_are_header():
    result = split_sections(["Jane Doe", "Backend Developer", "Skills", "Go"])
    assert result.header_lines == ["Jane Doe", "Backend Developer"]
    assert result.sections[0].key == "skills"
    assert result.sections[0].lines == ["Go"]


@pytest.mark.parametrize("line,key", [
    ("KINH NGHIỆM LÀM VIỆC", "experience"),
    ("Kinh nghiệm", "experience"),
    ("Work Experience", "experience"),
    ("Học vấn", "education"),
    ("Kỹ năng chuyên môn", "skills"),
    ("Technical Skills:", "skills"),
    ("Dự án cá nhân", "projects"),
    ("Chứng chỉ", "certifications"),
    ("Honors & Awards", "certifications"),
    ("Mục tiêu nghề nghiệp", "summary"),
    ("About Me", "summary"),
])
def test_heading_vocabulary(line, key):
    assert detect_section_heading(line) == key


def test_heading_must_match_whole_line():
    assert detect_section_heading("Experience with distributed systems") is None
    assert detect_section_heading("My Skills") is None


def test_long_line_is_never_a_heading():
    line = "Honors" + " " * 60 + "and Awards"
    assert SECTION_PATTERNS["certifications"].match(line)
    assert detect_section_heading(line) is None


def test_empty_lines_are_skipped():
    result = split_sections(["", "Skills", "   ", "Go"])
    assert result.header_lines == []
    assert result.sections[0].lines == ["Go"]


def test_repeated_heading_opens_new_section_and_groups_by_key():
    result = split_sections(["Experience", "a", "Skills", "Go", "Experience", "b"])
    assert [s.key for s in result.sections] == ["experience", "skills", "experience"]

    grouped = group_section_lines(result.sections)
    assert grouped["experience"] == ["a", "b"]
    assert grouped["skills"] == ["Go"]


def test_heading_table_is_read_only():
    with pytest.raises(TypeError):
        SECTION_PATTERNS["hobbies"] = None
