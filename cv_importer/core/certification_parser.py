import re
from typing import Iterable, List

from cv_importer.core.schemas import CertificationEntry


YEAR_RE = re.compile(r"(?<!\d)(\d{4})\s*$")


def parse_certifications(lines: Iterable[str]) -> List[CertificationEntry]:
    """One entry per line; a trailing 4-digit year is split off ("AWS Certified 2023")."""
    entries: List[CertificationEntry] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        m = YEAR_RE.search(line)
        if m:
            entries.append(CertificationEntry(name=line[:m.start()].strip(), year=m.group(1)))
        else:
            entries.append(CertificationEntry(name=line))
    return entries
