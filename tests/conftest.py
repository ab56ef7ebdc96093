"""Shared fixtures: tiny text-layer PDFs built in memory for decoding tests."""

from typing import List, Tuple

import pytest


def build_pdf(lines: List[Tuple[float, float, str]], font_size: int = 12) -> bytes:
    """
    Single-page Letter PDF with one Helvetica text run per (x, y, text).
    y is in PDF user space (0 = page bottom).
    """
    stream = "\n".join(
        f"BT /F1 {font_size} Tf {x} {y} Td ({text}) Tj ET" for x, y, text in lines
    )
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        "/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]

    out = b"%PDF-1.4\n"
    offsets = []
    for i, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{i} 0 obj\n{body}\nendobj\n".encode("latin-1")

    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode("latin-1")
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += f"{off:010d} 00000 n \n".encode("latin-1")
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_at}\n%%EOF\n"
    ).encode("latin-1")
    return out


SAMPLE_RESUME_LINES = [
    (72, 720, "Jane Doe - Backend Developer"),
    (72, 700, "jane@example.com"),
    (72, 670, "Experience"),
    (72, 650, "Acme Corp 2019 - 2021"),
    (72, 635, "Software Engineer"),
    (72, 605, "Skills"),
    (72, 590, "Languages: Go, Python"),
]


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return build_pdf(SAMPLE_RESUME_LINES)


@pytest.fixture
def pdf_builder():
    return build_pdf
