"""Word resolution: turn the parser's chosen lexical entries into the words
shown for each sentence position.

Rules, per position:

- An island (no chosen entry) shows its original unsplit word in brackets.
- Idiom subscripts (``lot.I12``) are stripped, the empty word is blanked.
- With suffixes hidden, a stem and the suffix that follows it are shown as
  one word in the stem's slot and the suffix slot is blanked.
- Walls are always shown by their fixed display names.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from .constants import (
    LEFT_WALL_DISPLAY,
    NON_SUFFIX_EQUALS,
    RIGHT_WALL_DISPLAY,
    LexicalMarker,
)
from .errors import MalformedSubscriptError

if TYPE_CHECKING:
    from .model import Disjunct, ParseOptions, Sentence

logger = logging.getLogger(__name__)

SUBSCRIPT = LexicalMarker.SUBSCRIPT.value
SUFFIX = LexicalMarker.SUFFIX.value
EMPTY_WORD = LexicalMarker.EMPTY_WORD.value


def is_suffix(word: str) -> bool:
    """True if ``word`` is a suffix token.

    Suffixes have the form ``=abc.xyz`` and null suffixes ``=.xyz``. A lone
    ``=`` and the equals-sign words of the English dictionary are not.
    """
    if not word.startswith(SUFFIX):
        return False
    if len(word) == 1:
        return False
    return word not in NON_SUFFIX_EQUALS


def is_idiom_word(word: str) -> bool:
    mark = word.find(SUBSCRIPT)
    if mark < 0:
        return False
    subscript = word[mark + 1:]
    return (
        subscript.startswith(LexicalMarker.IDIOM.value)
        and subscript[1:].isdigit()
    )


def strip_subscript(word: str) -> Optional[str]:
    """``word`` cut at its last subscript mark, or None if it has none."""
    mark = word.rfind(SUBSCRIPT)
    if mark < 0:
        return None
    return word[:mark]


def suffix_body(suffix: str) -> str:
    body = suffix[len(SUFFIX):]
    if body.startswith(SUBSCRIPT):
        body = body[len(SUBSCRIPT):]
    return body


def _chosen_string(disjunct: "Disjunct") -> str:
    word = disjunct.string
    idiom = disjunct.is_idiom if disjunct.is_idiom is not None else is_idiom_word(word)
    if idiom:
        stripped = strip_subscript(word)
        if stripped is None:
            raise MalformedSubscriptError(
                f"Idiom token {word!r} has no subscript mark {SUBSCRIPT!r}"
            )
        word = stripped
    if word == EMPTY_WORD:
        word = ""
    return word


def resolve_words(sentence: "Sentence", options: "ParseOptions") -> List[str]:
    """Compute the display word for every position of ``sentence``."""
    chosen = sentence.chosen_disjuncts
    length = sentence.length
    words: List[str] = [""] * length

    for i in range(length):
        disjunct = chosen[i]
        if disjunct is None:
            # Neither half of a split word is shown if one of them was not
            # chosen; show the original word instead.
            unsplit = sentence.words[i].unsplit_word
            words[i] = f"[{unsplit}]" if unsplit else ""
            continue

        if not options.display_word_subscripts:
            # Never reached with the stock options; alternative 0 may not be
            # the entry the parse used.
            words[i] = sentence.words[i].first_alternative
            continue

        word = _chosen_string(disjunct)

        if options.hide_suffixes:
            if is_suffix(word) and i > 0 and chosen[i - 1] is not None:
                stem = strip_subscript(chosen[i - 1].string)
                # A stem without a subscript is an ordinary equals sign.
                if stem is not None:
                    words[i - 1] = stem + suffix_body(word)
                    word = ""

            if i + 1 < length and chosen[i + 1] is not None:
                following = chosen[i + 1].string
                if is_suffix(following) and following != EMPTY_WORD:
                    word = ""

        words[i] = word

    dictionary = sentence.dictionary
    if length and dictionary.left_wall_defined:
        words[0] = LEFT_WALL_DISPLAY
    if length and dictionary.right_wall_defined:
        words[length - 1] = RIGHT_WALL_DISPLAY

    logger.debug("Resolved words: %s", words)
    return words
