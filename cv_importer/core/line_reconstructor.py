"""
Reading-order line reconstruction from positioned glyph fragments.

PDF text arrives as independent fragments with no line structure. Fragments
whose baselines sit within LINE_Y_TOLERANCE of each other are merged into one
line, read left to right; lines are read top to bottom, page after page.
"""

import re
import logging
from typing import Iterable, List

from cv_importer.core.schemas import GlyphFragment

logger = logging.getLogger(__name__)

LINE_Y_TOLERANCE = 3.0

MULTI_SPACE_RE = re.compile(r" {2,}")


def _finish_line(fragments: List[GlyphFragment]) -> str:
    fragments = sorted(fragments, key=lambda f: f.x)
    line = " ".join(f.text for f in fragments)
    return MULTI_SPACE_RE.sub(" ", line).strip()


def reconstruct_page_lines(fragments: Iterable[GlyphFragment]) -> List[str]:
    """
    Group one page's fragments into text lines.

    Fragments are visited top to bottom (descending y). A fragment more than
    LINE_Y_TOLERANCE away from the previous one starts a new line; fragments
    on the same line are ordered by ascending x and joined with one space.

    Example:
        [(x=90, y=700, "Doe"), (x=50, y=701, "Jane"), (x=50, y=680, "Hanoi")]
        -> ["Jane Doe", "Hanoi"]
    """
    items = [f for f in fragments if f.text and f.text.strip()]
    if not items:
        return []

    # Stable sort keeps input order for identical y before the x ordering below
    items.sort(key=lambda f: -f.y)

    lines: List[str] = []
    current: List[GlyphFragment] = []
    last_y = None

    for frag in items:
        if last_y is not None and abs(frag.y - last_y) > LINE_Y_TOLERANCE:
            lines.append(_finish_line(current))
            current = []
        current.append(frag)
        last_y = frag.y

    if current:
        lines.append(_finish_line(current))

    return [ln for ln in lines if ln]


def reconstruct_lines(pages: Iterable[Iterable[GlyphFragment]]) -> List[str]:
    """Reconstruct every page and concatenate the lines in page order."""
    all_lines: List[str] = []
    for page_i, fragments in enumerate(pages, start=1):
        page_lines = reconstruct_page_lines(fragments)
        logger.debug(f"Page {page_i}: reconstructed {len(page_lines)} lines")
        all_lines.extend(page_lines)
    return all_lines
