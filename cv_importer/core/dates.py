import re
from typing import NamedTuple, Tuple


_MONTH_NAME = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\b"
)
_MONTH = rf"{_MONTH_NAME}[\s.]*\d{{4}}"
_VI_MONTH = r"Tháng\s*\d{1,2}[/\-]\d{4}"
_DATE = rf"(?:\d{{1,2}}[/\-])?\d{{4}}|{_MONTH}|{_VI_MONTH}"
_PRESENT = r"Present|Hiện tại|Nay|Current(?:ly)?|Now"

# "06/2024 - Present", "Jan 2019 – Dec 2021", "Tháng 3/2020 ~ Nay", "2019 - 2021"
# Both ends must sit on word boundaries, so "Vinmart 2019" is not read as "mart 2019"
DATE_RANGE_RE = re.compile(
    rf"(?<![\w/])(?P<start>{_DATE})\s*[-–—~]\s*(?P<end>{_DATE}|{_PRESENT})\b",
    re.IGNORECASE,
)
PRESENT_RE = re.compile(rf"^(?:{_PRESENT})$", re.IGNORECASE)


class DateRange(NamedTuple):
    start: str = ""
    end: str = ""  # Empty when the range is ongoing
    is_current: bool = False
    end_text: str = ""  # End exactly as written, "Present" included


def contains_date_range(text: str) -> bool:
    return DATE_RANGE_RE.search(text) is not None


def split_date_range(text: str) -> Tuple[str, DateRange]:
    """
    Pull the first date range out of a headline.

    Returns (label, range) where label is the headline without the range.

    Examples:
        "Company X 06/2024 - Present" -> ("Company X", DateRange("06/2024", "", True, "Present"))
        "Company Y 2019 - 2021"       -> ("Company Y", DateRange("2019", "2021", False, "2021"))
        "Company Z"                   -> ("Company Z", DateRange())
    """
    m = DATE_RANGE_RE.search(text)
    if not m:
        return text.strip(), DateRange()

    start = m.group("start").strip()
    end_text = m.group("end").strip()
    is_current = bool(PRESENT_RE.match(end_text))
    label = (text[:m.start()] + " " + text[m.end():]).strip()
    label = re.sub(r"\s{2,}", " ", label).strip(" \t,|")

    return label, DateRange(
        start=start,
        end="" if is_current else end_text,
        is_current=is_current,
        end_text=end_text,
    )
