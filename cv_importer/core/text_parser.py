from typing import List

from cv_importer.core.schemas import GlyphFragment

# Synthetic layout for sources without geometry: one fragment per line,
# stacked top-down far enough apart that no two lines merge.
SYNTHETIC_TOP = 10000.0
SYNTHETIC_LINE_HEIGHT = 12.0


def lines_to_fragments(lines: List[str]) -> List[GlyphFragment]:
    return [
        GlyphFragment(x=0.0, y=SYNTHETIC_TOP - i * SYNTHETIC_LINE_HEIGHT, font_size=SYNTHETIC_LINE_HEIGHT, text=text)
        for i, text in enumerate(lines)
    ]


def extract_text_pages(text: str) -> List[List[GlyphFragment]]:
    """
    Plain text / markdown resumes: each non-empty line becomes one fragment,
    so TXT input goes through the same line reconstruction as PDF/DOCX.
    """
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    return [lines_to_fragments(lines)]
