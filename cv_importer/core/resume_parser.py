"""
Pipeline entry points: glyph fragments in, StructuredRecord out.

    pages -> lines -> (contact info, header + sections) -> profile + entries -> record

parse_pages() always produces a record, possibly mostly empty. The public
parse_resume_* helpers also own document decoding and turn any failure into
None so callers get one explicit "no result" value.
"""

import logging
from typing import Callable, Iterable, List, Optional

from cv_importer.core.certification_parser import parse_certifications
from cv_importer.core.contact_extractor import extract_contact_info
from cv_importer.core.docx_extractor import extract_docx_pages
from cv_importer.core.entry_parsers import parse_education, parse_experience, parse_projects
from cv_importer.core.line_reconstructor import reconstruct_lines
from cv_importer.core.pdf_extractor import iter_pdf_pages
from cv_importer.core.profile_builder import build_profile
from cv_importer.core.schemas import GlyphFragment, Settings, StructuredRecord
from cv_importer.core.section_splitter import group_section_lines, split_sections
from cv_importer.core.skills_parser import parse_skills
from cv_importer.core.text_parser import extract_text_pages

logger = logging.getLogger(__name__)


def build_record(lines: List[str]) -> StructuredRecord:
    contact = extract_contact_info("\n".join(lines))
    header_lines, sections = split_sections(lines)
    by_key = group_section_lines(sections)

    logger.debug(
        f"Split {len(lines)} lines into {len(header_lines)} header lines and sections {[s.key for s in sections]}"
    )

    profile = build_profile(header_lines, contact, by_key.get("summary", []))

    return StructuredRecord(
        profile=profile,
        experience=parse_experience(by_key.get("experience", [])),
        education=parse_education(by_key.get("education", [])),
        skills=parse_skills(by_key.get("skills", [])),
        projects=parse_projects(by_key.get("projects", [])),
        certifications=parse_certifications(by_key.get("certifications", [])),
        settings=Settings(),
    )


def parse_pages(pages: Iterable[Iterable[GlyphFragment]]) -> StructuredRecord:
    lines = reconstruct_lines(pages)
    if not lines:
        logger.warning("Document has no extractable text; returning an empty record")
    return build_record(lines)


def _parse_safely(decode: Callable[[], Iterable[Iterable[GlyphFragment]]], source: str) -> Optional[StructuredRecord]:
    try:
        record = parse_pages(decode())
    except Exception:
        logger.exception(f"Failed to parse {source} resume")
        return None
    logger.info(
        f"Parsed {source} resume: {len(record.experience)} experience, {len(record.education)} education, "
        f"{len(record.skills)} skill groups, {len(record.projects)} projects, "
        f"{len(record.certifications)} certifications"
    )
    return record


def parse_resume_pdf(pdf_bytes: bytes) -> Optional[StructuredRecord]:
    """Parse a PDF resume. Returns None when the document cannot be decoded or parsed."""
    return _parse_safely(lambda: iter_pdf_pages(pdf_bytes), "pdf")


def parse_resume_docx(docx_bytes: bytes) -> Optional[StructuredRecord]:
    return _parse_safely(lambda: extract_docx_pages(docx_bytes), "docx")


def parse_resume_text(text: str) -> Optional[StructuredRecord]:
    return _parse_safely(lambda: extract_text_pages(text), "text")
