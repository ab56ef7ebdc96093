import re
import logging
from typing import Iterable, List

from cv_importer.core.markup import render_item_list
from cv_importer.core.schemas import SkillCategory

logger = logging.getLogger(__name__)

# "TECHNICAL SKILLS - Programming: Go, Python" -> ("TECHNICAL SKILLS", "- Programming: Go, Python")
CATEGORY_LINE_RE = re.compile(r"^([A-Z][A-Z\s&]+?)\s+([-–].+)$")
LEADING_DASH_RE = re.compile(r"^[-–]\s*")
COLON_RE = re.compile(r"[:：]\s*")
ITEM_SPLIT_RE = re.compile(r"[,;]")


def parse_skills(lines: Iterable[str]) -> List[SkillCategory]:
    """
    Group skill lines into categories.

    Recognised per line, in order:
      "BACKEND - Go, Python"   caps category, rest is the first item
      "- Java"                 extra item of the current category
      "FRONTEND: React, Vue"   category, items split on , and ;
      "Golang"                 bare item when a category is open

    Categories without items are dropped.
    """
    entries: List[SkillCategory] = []
    category = ""
    items: List[str] = []

    def flush() -> None:
        nonlocal items
        if category and items:
            entries.append(SkillCategory(category=category, description=render_item_list(items)))
        elif category:
            logger.debug(f"Dropping empty skill category '{category}'")
        items = []

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        m = CATEGORY_LINE_RE.match(line)
        if m:
            flush()
            category = m.group(1).strip()
            item = LEADING_DASH_RE.sub("", m.group(2)).strip()
            if item:
                items.append(item)
            continue

        if line.startswith(("-", "–")):
            item = LEADING_DASH_RE.sub("", line).strip()
            if item:
                items.append(item)
            continue

        parts = COLON_RE.split(line)
        if len(parts) >= 2:
            flush()
            category = parts[0].strip()
            rest = ":".join(parts[1:])
            items = [s.strip() for s in ITEM_SPLIT_RE.split(rest) if s.strip()]
        elif category:
            items.append(line)

    flush()
    return entries
