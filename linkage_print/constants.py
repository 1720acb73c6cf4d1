"""Reserved tokens, display strings and capacity limits for linkage printing."""

from __future__ import annotations

from enum import Enum


class LexicalMarker(str, Enum):
    """Reserved strings the dictionaries use to tag special tokens and links."""

    SUBSCRIPT = "."  # separates a word from its dictionary subscript
    IDIOM = "I"  # first letter of an idiom subscript, e.g. "lot.I12"
    SUFFIX = "="  # suffixes start with this
    SUFFIX_LINK = "LL"  # suffix links start with this
    EMPTY_WORD = "=.zzz"  # pure whitespace, used by the Russian dictionary
    EMPTY_WORD_LINK = "ZZZ"  # link to pure whitespace
    LEFT_WALL_SUPPRESS = "Wd"  # this connector on the left wall hides the wall
    RIGHT_WALL_SUPPRESS = "RW"  # this connector on the right wall hides the wall


# Equals signs that appear as ordinary words in non-Russian dictionaries.
NON_SUFFIX_EQUALS = frozenset({"=[!]", "=.v", "=.eq"})

LEFT_WALL_DISPLAY = "LEFT-WALL"
RIGHT_WALL_DISPLAY = "RIGHT-WALL"

# Grid characters
BLANK = " "
CORNER = "+"
FILL = "-"
CARRY = "|"

MAX_HEIGHT = 30  # rows in the picture, including the tick rows
MAX_LINE = 1500  # columns in the picture
MAX_SENTENCE = 250
MAX_LINKS = 2 * MAX_SENTENCE - 3

DIAGRAM_TOO_HIGH = "The diagram is too high.\n"
DIAGRAM_TOO_WIDE = "The diagram is too wide.\n"
SENTENCE_TOO_LONG = "The sentence is too long.\n"
TOO_MANY_LINKS = "The linkage has too many links.\n"
CORPUS_NOT_ENABLED = "Corpus statistics is not enabled in this version\n"

DEFAULT_SCREEN_WIDTH = 79

# Column widths used by the link listing
LINK_WORD_FIELD = 15
LINK_SUBLABEL_FIELD = 5
LINK_LABEL_FIELD = 5
