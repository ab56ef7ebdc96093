"""Tests for certification / award extraction."""

from cv_importer.core.certification_parser import parse_certifications


def test_trailing_year_is_split_off():
    entries = parse_certifications(["AWS Certified 2023", "Dean's List"])
    assert [(e.name, e.year) for e in entries] == [("AWS Certified", "2023"), ("Dean's List", "")]


def test_year_must_be_exactly_four_digits():
    entries = parse_certifications(["Mã chứng chỉ 12345"])
    assert entries[0].name == "Mã chứng chỉ 12345"
    assert entries[0].year == ""


def test_one_entry_per_non_empty_line():
    entries = parse_certifications(["IELTS 7.5 2022", "", "  ", "Giải Nhất Olympic Tin học 2019  "])
    assert len(entries) == 2
    assert entries[0].name == "IELTS 7.5"
    assert entries[1].year == "2019"
