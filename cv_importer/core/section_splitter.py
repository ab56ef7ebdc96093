"""
Split reconstructed lines into a header block and labeled résumé sections.

Headings are recognised by a fixed Vietnamese + English vocabulary. A heading
must be short and must match the whole line; everything before the first
heading is the header block (name, position, contact lines).
"""

import re
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, NamedTuple, Optional

from cv_importer.core.schemas import RawSection, SectionKey

logger = logging.getLogger(__name__)

MAX_HEADING_LENGTH = 60


def _heading(body: str) -> "re.Pattern[str]":
    return re.compile(rf"^(?:{body})\s*[:：]?$", re.IGNORECASE)


SECTION_PATTERNS = MappingProxyType({
    "summary": _heading(
        r"Tóm tắt|Summary|Giới thiệu(?: bản thân)?|Mục tiêu(?: nghề nghiệp)?|Objective|About(?: Me)?"
        r"|Profile|Thông tin chung|Career (?:Objective|Summary)|Professional Summary"
    ),
    "experience": _heading(
        r"Kinh nghiệm(?: làm việc)?|Experience|Work Experience|Lịch sử làm việc|Employment(?: History)?"
        r"|Professional Experience|Quá trình làm việc"
    ),
    "education": _heading(
        r"Học vấn|Trình độ(?: học vấn)?|Giáo dục|Education|Quá trình học tập|Academic(?: Background)?|Bằng cấp"
    ),
    "skills": _heading(
        r"Kỹ năng(?: chuyên môn| mềm| kỹ thuật)?|Skills|Core Competencies|Technical Skills|Competencies"
        r"|Năng lực|Chuyên môn"
    ),
    "projects": _heading(
        r"Dự án(?: cá nhân| nổi bật| tiêu biểu)?|Projects|Personal Projects|Notable Projects|Side Projects"
    ),
    "certifications": _heading(
        r"Chứng chỉ|Certifications?|Licenses?|Awards?|Giải thưởng|Thành tích|Honors?\s*(?:&|and)\s*Awards?"
    ),
})


class SplitResult(NamedTuple):
    header_lines: List[str]
    sections: List[RawSection]


def detect_section_heading(line: str) -> Optional[SectionKey]:
    """Return the section key if the line is a heading, else None."""
    text = line.strip()
    if not text or len(text) >= MAX_HEADING_LENGTH:
        return None
    for key, pattern in SECTION_PATTERNS.items():
        if pattern.match(text):
            return key
    return None


def split_sections(lines: Iterable[str]) -> SplitResult:
    header_lines: List[str] = []
    sections: List[RawSection] = []
    current: Optional[RawSection] = None

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        key = detect_section_heading(line)
        if key is not None:
            logger.debug(f"SECTION HEADER DETECTED: '{line}' -> section_type='{key}'")
            if current is not None:
                sections.append(current)
            current = RawSection(key=key)
            continue

        if current is not None:
            current.lines.append(line)
        else:
            header_lines.append(line)

    if current is not None:
        sections.append(current)

    return SplitResult(header_lines, sections)


def group_section_lines(sections: Iterable[RawSection]) -> Dict[SectionKey, List[str]]:
    """Concatenate the lines of repeated sections so each key is parsed once."""
    grouped: Dict[SectionKey, List[str]] = {}
    for section in sections:
        if section.key in grouped:
            logger.debug(f"Section '{section.key}' appears again, appending {len(section.lines)} lines")
        grouped.setdefault(section.key, []).extend(section.lines)
    return grouped
