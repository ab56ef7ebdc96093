"""Tests for experience entry extraction (marker scan + date-range fallback)."""

from cv_importer.core.entry_parsers import LineCursor, parse_experience


def test_marker_entries_with_role_and_description():
    lines = [
        "❖ Bach Khoa Technology 06/2024 - Present",
        "Backend Developer",
        "- Built the payment service",
        "- Reduced latency by 30%",
        "Tech Stack: Go, PostgreSQL, Redis",
        "❖ FPT Software 2021 - 2024",
        "Intern",
        "Maintained legacy APIs",
    ]
    entries = parse_experience(lines)
    assert len(entries) == 2

    first = entries[0]
    assert first.company == "Bach Khoa Technology"
    assert first.role == "Backend Developer"
    assert first.start_date == "06/2024"
    assert first.end_date == ""
    assert first.is_current is True
    assert first.description == (
        "<ul><li>Built the payment service</li><li>Reduced latency by 30%</li></ul>\n"
        "<p><b>Tech Stack:</b> Go, PostgreSQL, Redis</p>"
    )

    second = entries[1]
    assert second.company == "FPT Software"
    assert second.role == "Intern"
    assert (second.start_date, second.end_date, second.is_current) == ("2021", "2024", False)
    assert second.description == "<p>Maintained legacy APIs</p>"


def test_entry_ids_are_unique():
    entries = parse_experience(["❖ A 2020 - 2021", "Dev", "❖ B 2021 - 2022", "Dev"])
    assert len({e.id for e in entries}) == 2


def test_next_marker_is_not_taken_as_role():
    entries = parse_experience(["◆ Company A 2020 - 2021", "◆ Company B 2021 - 2022", "QA"])
    assert [e.company for e in entries] == ["Company A", "Company B"]
    assert entries[0].role == ""
    assert entries[1].role == "QA"


def test_long_line_after_headline_is_description_not_role():
    long_line = "Responsible for designing and operating the event ingestion platform for 40 teams"
    assert len(long_line) >= 80
    entries = parse_experience(["► Acme 2019 - 2020", long_line])
    assert entries[0].role == ""
    assert entries[0].description == f"<p>{long_line}</p>"


def test_headline_without_dates():
    entries = parse_experience(["★ Freelance", "Consultant"])
    assert entries[0].company == "Freelance"
    assert entries[0].start_date == ""
    assert entries[0].is_current is False


def test_lines_before_first_marker_are_ignored():
    entries = parse_experience(["Some intro text", "❖ Acme 2019 - 2020", "Engineer"])
    assert len(entries) == 1
    assert entries[0].description == ""


def test_fallback_uses_date_ranges_when_no_markers():
    lines = ["2020 - 2022", "Some Role", "• Designed the billing API", "• Mentored two interns"]
    entries = parse_experience(lines)

    assert len(entries) == 1
    entry = entries[0]
    assert entry.company == ""
    assert entry.role == "Some Role"
    assert (entry.start_date, entry.end_date) == ("2020", "2022")
    assert entry.description.startswith("<ul>")
    assert "<li>Designed the billing API</li>" in entry.description


def test_fallback_splits_on_each_date_range():
    lines = [
        "Tiki Corporation 03/2022 - Hiện tại",
        "Senior Engineer",
        "Led the search team",
        "Shopee 2019 - 2022",
        "Software Engineer",
    ]
    entries = parse_experience(lines)
    assert [e.company for e in entries] == ["Tiki Corporation", "Shopee"]
    assert entries[0].is_current is True
    assert entries[0].description == "<p>Led the search team</p>"
    assert entries[1].role == "Software Engineer"


def test_section_without_markers_or_dates_yields_nothing():
    assert parse_experience(["Worked on many things", "Enjoyed it"]) == []


def test_empty_section():
    assert parse_experience([]) == []


def test_line_cursor_peek_and_consume():
    cursor = LineCursor(["a", "", "b"])
    assert cursor.next() == "a"
    assert cursor.peek() == "b"
    assert cursor.next() == "b"
    assert cursor.peek() is None
    assert cursor.has_next() is False


def test_labeled_role_is_stripped_and_consumed_even_when_long():
    long_role = "Role: " + "Backend Developer on the payments, ledger and reconciliation platform team"
    assert len(long_role) >= 80
    entries = parse_experience([
        "❖ Smartosc 2019 - 2021",
        "Role: Backend Developer",
        "❖ Vinmart 2021 - Currently",
        long_role,
        "- Owned the settlement jobs",
    ])

    assert [e.company for e in entries] == ["Smartosc", "Vinmart"]
    assert entries[0].role == "Backend Developer"
    assert entries[0].start_date == "2019"
    assert entries[1].role.startswith("Backend Developer on the payments")
    assert entries[1].is_current is True
    assert entries[1].description == "<ul><li>Owned the settlement jobs</li></ul>"


def test_fallback_strips_role_label():
    entries = parse_experience(["Bigmart 2018 - 2019", "Vai trò: Kỹ sư phần mềm"])
    assert entries[0].company == "Bigmart"
    assert entries[0].role == "Kỹ sư phần mềm"
