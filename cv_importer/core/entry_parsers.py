"""
Entry parsing for the experience, education and projects sections.

All three sections share one layout convention:

    ❖ Bach Khoa Technology 06/2024 - Present     <- marker + headline (+ date range)
    Backend Developer                            <- sub-label (role / degree)
    - Built the payment service ...              <- description lines
    Tech Stack: Go, PostgreSQL, Redis

Each parser walks the lines with an explicit state machine (IDLE / IN_ENTRY)
and a cursor that can peek at and consume the line after a headline. When no
marker is found at all, the section is re-scanned using date ranges as entry
boundaries, which recovers plain layouts without marker glyphs.
"""

import re
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from cv_importer.core.contact_extractor import find_urls
from cv_importer.core.dates import DateRange, contains_date_range, split_date_range
from cv_importer.core.markup import format_lines_to_html
from cv_importer.core.schemas import EducationEntry, ExperienceEntry, ProjectEntry

logger = logging.getLogger(__name__)

ENTRY_MARKER_RE = re.compile(r"^[❖◆◇►▪●★☆✦✧⬥♦]\s*(.+)")
TECH_STACK_RE = re.compile(r"^Tech\s*Stack\s*[:：]\s*(.+)", re.IGNORECASE)
PROJECT_TECH_RE = re.compile(
    r"^(?:Công nghệ|Technologies|Technology|Tech(?:nical)?\s*Stack|Sử dụng)\s*[:：]\s*(.+)$",
    re.IGNORECASE,
)
ROLE_LABEL_RE = re.compile(r"^(?:Vai trò|Role|Position)\s*[:：]\s*(.+)$", re.IGNORECASE)
MAJOR_PREFIX_RE = re.compile(r"^(?:Major|Chuyên ngành)\s*[:：]\s*", re.IGNORECASE)

T = TypeVar("T")


class ParserState(Enum):
    IDLE = "idle"
    IN_ENTRY = "in_entry"


class LineCursor:
    """Index-based cursor over non-empty section lines with one-line lookahead."""

    def __init__(self, lines: Iterable[str]):
        self.lines = [ln.strip() for ln in lines if ln and ln.strip()]
        self.pos = 0

    def has_next(self) -> bool:
        return self.pos < len(self.lines)

    def next(self) -> str:
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def peek(self) -> Optional[str]:
        if self.has_next():
            return self.lines[self.pos]
        return None


@dataclass
class EntryDraft:
    """In-progress entry. Only turned into a record entry when flushed."""
    label: str
    dates: DateRange
    sub_label: str = ""
    description: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)
    link: str = ""


def is_entry_marker(line: str) -> bool:
    return ENTRY_MARKER_RE.match(line) is not None


def _marker_headline(line: str) -> Optional[str]:
    m = ENTRY_MARKER_RE.match(line)
    return m.group(1) if m else None


def _date_range_headline(line: str) -> Optional[str]:
    return line if contains_date_range(line) else None


def strip_role_label(line: str) -> str:
    """'Role: Backend Developer' -> 'Backend Developer'; unlabeled lines pass through."""
    m = ROLE_LABEL_RE.match(line)
    return m.group(1).strip() if m else line


class SectionEntryParser(Generic[T]):
    """Shared marker scan + date-range fallback. Subclasses supply the section rules."""

    section = ""

    def parse(self, lines: Iterable[str]) -> List[T]:
        lines = [ln for ln in lines if ln and ln.strip()]
        entries = self._scan(lines, _marker_headline, fallback=False)
        if not entries and lines:
            logger.warning(f"No entry markers in {self.section} section, falling back to date-range boundaries")
            entries = self._scan(lines, _date_range_headline, fallback=True)
        if not entries and lines:
            entries = self.last_resort(lines)
        logger.debug(f"Parsed {len(entries)} {self.section} entries")
        return entries

    def _scan(self, lines: List[str], headline_of: Callable[[str], Optional[str]], fallback: bool) -> List[T]:
        entries: List[T] = []
        cursor = LineCursor(lines)
        state = ParserState.IDLE
        draft: Optional[EntryDraft] = None

        while cursor.has_next():
            line = cursor.next()
            headline = headline_of(line)

            if headline is not None:
                if state is ParserState.IN_ENTRY:
                    entries.append(self.finish(draft))
                label, dates = split_date_range(headline)
                draft = EntryDraft(label=label, dates=dates)
                if fallback:
                    if cursor.has_next():
                        draft.sub_label = self.clean_sub_label(cursor.next())
                else:
                    self.read_sub_label(draft, cursor)
                state = ParserState.IN_ENTRY
            elif state is ParserState.IN_ENTRY:
                self.add_detail(draft, line)

        if state is ParserState.IN_ENTRY:
            entries.append(self.finish(draft))
        return entries

    def read_sub_label(self, draft: EntryDraft, cursor: LineCursor) -> None:
        """Look at the line after a marker headline and consume it if it is the sub-label. Must be overridden."""
        raise NotImplementedError

    def clean_sub_label(self, line: str) -> str:
        return line

    def add_detail(self, draft: EntryDraft, line: str) -> None:
        draft.description.append(line)

    def finish(self, draft: EntryDraft) -> T:
        """Convert a completed draft into the section's record entry. Must be overridden."""
        raise NotImplementedError

    def last_resort(self, lines: List[str]) -> List[T]:
        return []


class ExperienceParser(SectionEntryParser[ExperienceEntry]):
    section = "experience"
    max_role_length = 80

    def read_sub_label(self, draft: EntryDraft, cursor: LineCursor) -> None:
        nxt = cursor.peek()
        if nxt is not None and ROLE_LABEL_RE.match(nxt):
            draft.sub_label = self.clean_sub_label(cursor.next())
        elif nxt is not None and not is_entry_marker(nxt) and len(nxt) < self.max_role_length:
            draft.sub_label = cursor.next()

    def clean_sub_label(self, line: str) -> str:
        return strip_role_label(line)

    def finish(self, draft: EntryDraft) -> ExperienceEntry:
        return ExperienceEntry(
            company=draft.label,
            role=draft.sub_label,
            start_date=draft.dates.start,
            end_date=draft.dates.end,
            is_current=draft.dates.is_current,
            description=format_lines_to_html(draft.description, label_re=TECH_STACK_RE),
        )


class EducationParser(SectionEntryParser[EducationEntry]):
    section = "education"
    max_degree_length = 100

    def read_sub_label(self, draft: EntryDraft, cursor: LineCursor) -> None:
        nxt = cursor.peek()
        if nxt is None or is_entry_marker(nxt):
            return
        if len(nxt) < self.max_degree_length or MAJOR_PREFIX_RE.match(nxt):
            draft.sub_label = self.clean_sub_label(cursor.next())

    def clean_sub_label(self, line: str) -> str:
        return MAJOR_PREFIX_RE.sub("", line).strip()

    def finish(self, draft: EntryDraft) -> EducationEntry:
        # No "current" flag on education entries, so an ongoing range keeps its literal end
        return EducationEntry(
            institution=draft.label,
            degree=draft.sub_label,
            start_date=draft.dates.start,
            end_date=draft.dates.end_text,
            description=format_lines_to_html(draft.description),
        )

    def last_resort(self, lines: List[str]) -> List[EducationEntry]:
        logger.warning("Education fallback triggered: treating whole section as a single entry")
        return [EducationEntry(
            institution=lines[0],
            degree=self.clean_sub_label(lines[1]) if len(lines) > 1 else "",
            description=format_lines_to_html(lines[2:]),
        )]


class ProjectParser(SectionEntryParser[ProjectEntry]):
    section = "projects"
    max_role_length = 60

    def read_sub_label(self, draft: EntryDraft, cursor: LineCursor) -> None:
        nxt = cursor.peek()
        if nxt is None:
            return
        if ROLE_LABEL_RE.match(nxt):
            draft.sub_label = self.clean_sub_label(cursor.next())
        elif not is_entry_marker(nxt) and not PROJECT_TECH_RE.match(nxt) and len(nxt) < self.max_role_length:
            draft.sub_label = cursor.next()

    def clean_sub_label(self, line: str) -> str:
        return strip_role_label(line)

    def add_detail(self, draft: EntryDraft, line: str) -> None:
        m = PROJECT_TECH_RE.match(line)
        if m:
            draft.technologies = [t.strip() for t in re.split(r"[,;]", m.group(1)) if t.strip()]
            return
        if not draft.link:
            urls = find_urls(line)
            if urls:
                draft.link = urls[0]
        draft.description.append(line)

    def finish(self, draft: EntryDraft) -> ProjectEntry:
        return ProjectEntry(
            name=draft.label,
            role=draft.sub_label,
            description=format_lines_to_html(draft.description),
            technologies=list(draft.technologies),
            link=draft.link,
            start_date=draft.dates.start,
            end_date=draft.dates.end,
        )


def parse_experience(lines: Iterable[str]) -> List[ExperienceEntry]:
    return ExperienceParser().parse(lines)


def parse_education(lines: Iterable[str]) -> List[EducationEntry]:
    return EducationParser().parse(lines)


def parse_projects(lines: Iterable[str]) -> List[ProjectEntry]:
    return ProjectParser().parse(lines)
