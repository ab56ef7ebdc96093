from io import BytesIO
from typing import Any, Iterator, List
import logging

import pdfplumber

from cv_importer.core.schemas import GlyphFragment

logger = logging.getLogger(__name__)


def _page_fragments(page: Any, *, x_tolerance: float = 1.5, y_tolerance: float = 2) -> List[GlyphFragment]:
    """
    Turn a pdfplumber page into positioned fragments.

    pdfplumber measures 'top'/'bottom' from the top of the page; fragments use
    PDF user space instead (y grows upwards), so y is the bottom edge of the
    word box (baseline minus font descent) measured from the page bottom, and
    reading order is descending y.

    Args:
        page: pdfplumber page object
        x_tolerance: Horizontal gap under which characters belong to the same word
        y_tolerance: Vertical tolerance for grouping characters into a word
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=y_tolerance,
        keep_blank_chars=False,
        use_text_flow=False,
        extra_attrs=["size"],
    )
    height = float(page.height)
    return [
        GlyphFragment(
            x=float(w["x0"]),
            y=height - float(w["bottom"]),
            font_size=float(w.get("size") or 0.0),
            text=w["text"],
        )
        for w in words
    ]


def iter_pdf_pages(pdf_bytes: bytes) -> Iterator[List[GlyphFragment]]:
    """
    Decode a PDF page by page, yielding each page's glyph fragments.

    Text-layer only: scanned pages simply yield no fragments.
    Decoding errors from pdfplumber/pdfminer propagate to the caller.
    """
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page_i, page in enumerate(pdf.pages, start=1):
            fragments = _page_fragments(page)
            logger.debug(f"PDF page {page_i}: {len(fragments)} fragments")
            yield fragments
