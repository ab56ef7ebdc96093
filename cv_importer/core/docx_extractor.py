from io import BytesIO
from typing import List

from docx import Document

from cv_importer.core.schemas import GlyphFragment
from cv_importer.core.text_parser import lines_to_fragments


def extract_docx_lines(docx_bytes: bytes) -> List[str]:
    """
    Deterministically extract non-empty paragraph text from a DOCX.
    """
    doc = Document(BytesIO(docx_bytes))
    out: List[str] = []
    for p in doc.paragraphs:
        t = (p.text or "").strip()
        if t:
            out.append(t)
    return out


def extract_docx_pages(docx_bytes: bytes) -> List[List[GlyphFragment]]:
    """DOCX has no page geometry: every paragraph becomes a fragment of a single page."""
    return [lines_to_fragments(extract_docx_lines(docx_bytes))]
