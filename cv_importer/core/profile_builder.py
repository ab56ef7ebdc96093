import re
from typing import Iterable, List

from cv_importer.core.contact_extractor import URL_RE
from cv_importer.core.dates import contains_date_range
from cv_importer.core.markup import format_lines_to_html
from cv_importer.core.schemas import ContactInfo, Profile


# "Huynh Quoc Bao - Backend Developer" -> ("Huynh Quoc Bao", "Backend Developer")
NAME_POSITION_RE = re.compile(r"^(.+?)\s*[-–—]\s*(.+)$")
MAX_LOCATION_LENGTH = 60


def _is_contact_line(line: str, contact_strings: List[str]) -> bool:
    if URL_RE.search(line):
        return True
    compact = re.sub(r"\s", "", line)
    return any(c in line or c in compact for c in contact_strings)


def build_profile(header_lines: Iterable[str], contact: ContactInfo, summary_lines: Iterable[str]) -> Profile:
    """
    Derive name, position and location from the lines above the first heading.

    Positional heuristic over the header lines that are not contact lines:
    first line is the name (or "Name - Position"), the next is the position,
    and the first short, date-free line after that is the location.
    """
    contact_strings = [
        c for c in (contact.email, contact.phone, contact.linkedin, contact.github, contact.website) if c
    ]

    full_name = ""
    position = ""
    location = ""

    for line in header_lines:
        line = line.strip()
        if not line or _is_contact_line(line, contact_strings):
            continue

        if not full_name:
            m = NAME_POSITION_RE.match(line)
            if m:
                full_name = m.group(1).strip()
                position = m.group(2).strip()
            else:
                full_name = line
        elif not position:
            position = line
        elif not location:
            if len(line) < MAX_LOCATION_LENGTH and not contains_date_range(line):
                location = line
        else:
            break

    return Profile(
        full_name=full_name,
        position=position,
        email=contact.email,
        phone=contact.phone,
        location=location,
        linkedin=contact.linkedin,
        github=contact.github,
        website=contact.website,
        summary=format_lines_to_html(summary_lines),
    )
