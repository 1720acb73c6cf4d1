"""Row packing: place every link of a linkage in the lowest row of the
diagram where it does not cross another link.

Links are placed shortest first. A link occupies the columns strictly
between the centers of its two words, so links in one row may share an
end point but never overlap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .constants import (
    BLANK,
    CARRY,
    CORNER,
    DIAGRAM_TOO_HIGH,
    DIAGRAM_TOO_WIDE,
    FILL,
    MAX_HEIGHT,
    MAX_LINE,
    MAX_LINKS,
    MAX_SENTENCE,
    SENTENCE_TOO_LONG,
    TOO_MANY_LINKS,
    LexicalMarker,
)
from .errors import LayoutOverflowError
from .glyphs import display_width, split_clusters, upper_prefix
from .model import Link, Linkage, ParseOptions
from .words import is_suffix


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WallVisibility:
    left: bool
    right: bool

    @property
    def first_word(self) -> int:
        return 0 if self.left else 1


@dataclass(frozen=True)
class DiagramLayout:
    """Result of packing one linkage.

    ``picture`` holds rows 0..top_row of the link picture, bottom row first;
    every row is a tuple of one-column cells. ``link_heights`` maps the
    index of each drawn link to its row.
    """

    words: Tuple[str, ...]
    walls: WallVisibility
    words_to_print: int
    centers: Dict[int, int]
    picture: Tuple[Tuple[str, ...], ...]
    link_heights: Dict[int, int]
    hide_suffixes: bool = False

    @property
    def first_word(self) -> int:
        return self.walls.first_word

    @property
    def top_row(self) -> int:
        return len(self.picture) - 1

    @property
    def row_count(self) -> int:
        return len(self.picture)

    @property
    def printed_words(self) -> Tuple[str, ...]:
        return self.words[self.first_word:self.words_to_print]

    @property
    def line_length(self) -> int:
        return len(self.picture[0])

    def is_hidden(self, index: int) -> bool:
        return self.hide_suffixes and is_suffix(self.words[index])

    def word_width(self, index: int) -> int:
        """Columns taken by word ``index`` on the words line, separator excluded."""
        if self.is_hidden(index):
            return 0
        return display_width(self.words[index])


def _wall_shown(touching: Sequence[Link], suppressor: str, forced: bool) -> bool:
    suppressor_used = any(link.left_label == suppressor for link in touching)
    count = len(touching)
    return (not suppressor_used and count != 0) or count > 1 or forced


def wall_visibility(linkage: Linkage) -> WallVisibility:
    """Decide whether the left and right walls are drawn.

    A wall defined by the dictionary is drawn when the options force it,
    when more than one link touches it, or when exactly one link touches
    it through something other than the wall's suppress connector.
    """
    options = linkage.options
    dictionary = linkage.dictionary
    last = linkage.num_words - 1
    links = [link for link in linkage.links if not link.excluded]

    left = True
    if dictionary.left_wall_defined:
        touching: List[Link] = []
        if not options.display_walls:
            # A link running from wall to wall says nothing about either.
            touching = [link for link in links if link.left == 0 and link.right != last]
        left = _wall_shown(
            touching, LexicalMarker.LEFT_WALL_SUPPRESS.value, options.display_walls
        )

    right = True
    if dictionary.right_wall_defined:
        touching = [link for link in links if link.right == last]
        right = _wall_shown(
            touching, LexicalMarker.RIGHT_WALL_SUPPRESS.value, options.display_walls
        )

    return WallVisibility(left=left, right=right)


def compute_centers(
    words: Sequence[str], first_word: int, words_to_print: int, hide_suffixes: bool
) -> Dict[int, int]:
    """Column of the center of every printed word.

    Each word is followed by one blank column. A hidden suffix takes a
    single column of its own although nothing is drawn there.
    """
    centers: Dict[int, int] = {}
    total = 0
    for i in range(first_word, words_to_print):
        if hide_suffixes and is_suffix(words[i]):
            centers[i] = total
            total += 1
            continue
        width = display_width(words[i])
        centers[i] = total + width // 2
        total += width + 1
    return centers


def _is_drawn(link: Link, walls: WallVisibility, last: int, options: ParseOptions) -> bool:
    if link.excluded:
        return False
    if not walls.left and link.left == 0:
        return False
    if not walls.right and link.right == last:
        return False
    if link.label == LexicalMarker.EMPTY_WORD_LINK.value:
        return False
    if options.hide_suffixes and link.label.startswith(LexicalMarker.SUFFIX_LINK.value):
        return False
    return True


def _connector_text(label: str, options: ParseOptions) -> List[str]:
    if options.display_link_subscripts:
        return split_clusters(label)
    return split_clusters(upper_prefix(label))


def _draw_link(
    picture: List[List[str]], row: int, cl: int, cr: int, label: List[str]
) -> None:
    cells = picture[row]
    cells[cl] = CORNER
    cells[cr] = CORNER
    for k in range(cl + 1, cr):
        cells[k] = FILL

    width = len(label)
    if (cl + cr - width) // 2 + 1 <= cl:
        position = cl + 1
    else:
        position = (cl + cr + 2 - width) // 2
    for glyph in label:
        if position >= len(cells) or cells[position] != FILL:
            break
        cells[position] = glyph
        position += 1

    # Carry both ends up through the rows below.
    for lower in picture[:row]:
        if lower[cl] == BLANK:
            lower[cl] = CARRY
        if lower[cr] == BLANK:
            lower[cr] = CARRY


def _lowest_free_row(picture: List[List[str]], cl: int, cr: int) -> int:
    for row, cells in enumerate(picture):
        if all(cells[k] == BLANK for k in range(cl + 1, cr)):
            return row
    return len(picture)


def pack_links(linkage: Linkage) -> DiagramLayout:
    """Pack the links of ``linkage`` into rows and draw the link picture.

    Raises LayoutOverflowError when the sentence, the link list or the
    picture does not fit the fixed maxima.
    """
    if linkage.num_words > MAX_SENTENCE:
        raise LayoutOverflowError(SENTENCE_TOO_LONG)
    if len(linkage.links) > MAX_LINKS:
        raise LayoutOverflowError(TOO_MANY_LINKS)

    options = linkage.options
    words = linkage.words
    last = linkage.num_words - 1
    walls = wall_visibility(linkage)

    words_to_print = linkage.num_words
    if not walls.right:
        words_to_print -= 1

    centers = compute_centers(words, walls.first_word, words_to_print, options.hide_suffixes)
    if not centers:
        line_length = 1
    else:
        line_length = centers[words_to_print - 1] + 1
    if line_length >= MAX_LINE:
        raise LayoutOverflowError(DIAGRAM_TOO_WIDE)

    picture: List[List[str]] = [[BLANK] * line_length]
    link_heights: Dict[int, int] = {}

    drawn = [
        (index, link)
        for index, link in enumerate(linkage.links)
        if _is_drawn(link, walls, last, options)
    ]
    drawn.sort(key=lambda item: centers[item[1].right] - centers[item[1].left])

    for index, link in drawn:
        cl = centers[link.left]
        cr = centers[link.right]
        row = _lowest_free_row(picture, cl, cr)
        if 2 * row + 2 > MAX_HEIGHT - 1:
            logger.debug(
                "Link %s (%d-%d) needs row %d; diagram too high",
                link.label, link.left, link.right, row,
            )
            raise LayoutOverflowError(DIAGRAM_TOO_HIGH)
        while len(picture) <= row:
            picture.append([BLANK] * line_length)
        link_heights[index] = row
        _draw_link(picture, row, cl, cr, _connector_text(link.label, options))

    logger.debug(
        "Packed %d of %d links into %d row(s)", len(link_heights), len(linkage.links), len(picture)
    )
    return DiagramLayout(
        words=tuple(words),
        walls=walls,
        words_to_print=words_to_print,
        centers=centers,
        picture=tuple(tuple(cells) for cells in picture),
        link_heights=link_heights,
        hide_suffixes=options.hide_suffixes,
    )
