"""
Free-text to editor markup.

Résumé descriptions are a mix of bullet lines and plain sentences. Bullet runs
become one list, every other line becomes its own paragraph. The result is
kept as blocks and rendered to the HTML subset the rich-text editor accepts.
"""

import re
from html import escape
from typing import Iterable, List, Optional

from cv_importer.core.schemas import MarkupBlock


BULLET_RE = re.compile(r"^[-•●◦▪❖◆◇►★☆✦✧*+]\s+")


def is_bullet_line(line: str) -> bool:
    return BULLET_RE.match(line) is not None


def lines_to_markup(lines: Iterable[str], label_re: Optional["re.Pattern[str]"] = None) -> List[MarkupBlock]:
    """
    Convert description lines to paragraph/list blocks.

    Args:
        lines: Raw description lines (empty lines are skipped)
        label_re: Optional pattern with one group; a matching non-bullet line
            becomes a paragraph whose label is the text before the group,
            e.g. "Tech Stack: Go, Redis" -> label "Tech Stack:", text "Go, Redis"
    """
    blocks: List[MarkupBlock] = []
    current_list: Optional[MarkupBlock] = None

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        if is_bullet_line(line):
            if current_list is None:
                current_list = MarkupBlock(kind="list")
                blocks.append(current_list)
            current_list.items.append(BULLET_RE.sub("", line, count=1))
            continue

        current_list = None
        m = label_re.match(line) if label_re is not None else None
        if m:
            label = line[:m.start(1)].strip()
            blocks.append(MarkupBlock(kind="paragraph", label=label, text=m.group(1).strip()))
        else:
            blocks.append(MarkupBlock(kind="paragraph", text=line))

    return blocks


def render_html(blocks: Iterable[MarkupBlock]) -> str:
    parts: List[str] = []
    for block in blocks:
        if block.kind == "list":
            items = "".join(f"<li>{escape(item, quote=False)}</li>" for item in block.items)
            parts.append(f"<ul>{items}</ul>")
        elif block.label:
            parts.append(f"<p><b>{escape(block.label, quote=False)}</b> {escape(block.text, quote=False)}</p>")
        else:
            parts.append(f"<p>{escape(block.text, quote=False)}</p>")
    return "\n".join(parts)


def format_lines_to_html(lines: Iterable[str], label_re: Optional["re.Pattern[str]"] = None) -> str:
    return render_html(lines_to_markup(lines, label_re=label_re))


def render_item_list(items: Iterable[str]) -> str:
    return render_html([MarkupBlock(kind="list", items=list(items))])
