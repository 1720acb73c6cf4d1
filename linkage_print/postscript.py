"""PostScript output: the words, the links with the rows the packer gave
them, and the first word of every page, optionally wrapped in a document
that draws them.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import List

from .packing import DiagramLayout
from .paginate import PagedDiagram
from .model import Linkage

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

WORDS_PER_LINE = 10
LINKS_PER_LINE = 7


class PostscriptMode(IntEnum):
    FRAGMENT = 0
    DOCUMENT = 1


def _template(name: str) -> str:
    return (TEMPLATE_DIR / name).read_text(encoding="utf-8")


def header(mode: int) -> str:
    if mode == PostscriptMode.DOCUMENT:
        return _template("header.ps")
    return ""


def trailer(mode: int) -> str:
    if mode == PostscriptMode.DOCUMENT:
        return _template("trailer.ps")
    return ""


def ps_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    return f"({escaped})"


def build_postscript_body(
    linkage: Linkage, layout: DiagramLayout, paged: PagedDiagram
) -> str:
    offset = layout.first_word
    parts: List[str] = ["["]
    for count, word in enumerate(layout.printed_words):
        if count and count % WORDS_PER_LINE == 0:
            parts.append("\n")
        parts.append(ps_string(word))
    parts.append("]\n[")

    count = 0
    for index, link in enumerate(linkage.links):
        height = layout.link_heights.get(index)
        if height is None:
            continue
        if count and count % LINKS_PER_LINE == 0:
            parts.append("\n")
        count += 1
        parts.append(
            f"[{link.left - offset} {link.right - offset} {height} {ps_string(link.label)}]"
        )
    parts.append("]\n[")
    parts.append(" ".join(str(start) for start in paged.row_starts))
    parts.append("]\n")
    return "".join(parts)


def wrap_document(body: str, mode: int) -> str:
    if mode not in (PostscriptMode.FRAGMENT, PostscriptMode.DOCUMENT):
        raise ValueError(f"Unknown PostScript mode {mode!r}; expected 0 or 1")
    return header(mode) + body + trailer(mode)
