"""Turn a packed layout into the printed diagram, split into pages no wider
than the screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .constants import BLANK, CARRY, CORNER
from .glyphs import split_clusters
from .packing import DiagramLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PagedDiagram:
    text: str
    # index, among the printed words, of the first word of every page
    row_starts: Tuple[int, ...]


def _ticks(cells: Sequence[str]) -> List[str]:
    return [CARRY if cell in (CORNER, CARRY) else BLANK for cell in cells]


def display_rows(layout: DiagramLayout, short: bool) -> List[List[str]]:
    """All printed rows, bottom first: the words, then the link rows.

    Every link row gets a tick row below it carrying the link ends down
    toward the words; in short mode only the lowest link row does.
    """
    words_line: List[str] = []
    for i in range(layout.first_word, layout.words_to_print):
        if not layout.is_hidden(i):
            words_line.extend(split_clusters(layout.words[i]))
        words_line.append(BLANK)

    rows: List[List[str]] = [words_line]
    if short:
        rows.append(_ticks(layout.picture[0]))
        rows.extend(list(cells) for cells in layout.picture)
    else:
        for cells in layout.picture:
            rows.append(_ticks(cells))
            rows.append(list(cells))
    return rows


def paginate(layout: DiagramLayout, screen_width: int, short: bool = True) -> PagedDiagram:
    """Print ``layout`` in pages of whole words fitting ``screen_width``.

    Each page shows every row sliced to the page's columns, top row first;
    rows that are blank on a page are left out.
    """
    rows = display_rows(layout, short)
    last = layout.words_to_print
    start = [0] * len(rows)
    row_starts = [0]
    pages: List[str] = []

    i = layout.first_word
    while i < last:
        page_width = 0
        while True:
            page_width += layout.word_width(i) + 1
            i += 1
            if i >= last or page_width + layout.word_width(i) + 1 >= screen_width:
                break
        if i < last:
            row_starts.append(i - layout.first_word)

        lines = [""]
        for row in reversed(range(len(rows))):
            cells = rows[row][start[row]:start[row] + page_width]
            start[row] += len(cells)
            if any(cell != BLANK for cell in cells):
                lines.append("".join(cells))
        lines.append("")
        pages.append("\n".join(lines) + "\n")

    logger.debug("Diagram printed in %d page(s)", len(pages))
    return PagedDiagram(text="".join(pages), row_starts=tuple(row_starts))
