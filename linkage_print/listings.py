"""Flat text listings of a linkage: links with their domains, chosen
disjuncts with their costs, and word senses.
"""

from __future__ import annotations

from typing import List, Optional

from .constants import (
    CORPUS_NOT_ENABLED,
    LEFT_WALL_DISPLAY,
    LINK_LABEL_FIELD,
    LINK_SUBLABEL_FIELD,
    LINK_WORD_FIELD,
    RIGHT_WALL_DISPLAY,
)
from .glyphs import left_append
from .model import CorpusScorer, Link, Linkage, Sentence


def _left_word(linkage: Linkage, link: Link) -> str:
    dictionary = linkage.dictionary
    if link.left == 0 and dictionary.left_wall_defined:
        return LEFT_WALL_DISPLAY
    if link.left == linkage.num_words - 1 and dictionary.right_wall_defined:
        return RIGHT_WALL_DISPLAY
    return linkage.word(link.left)


def format_link(linkage: Linkage, link: Link) -> str:
    return "".join(
        [
            left_append(_left_word(linkage, link), " " * LINK_WORD_FIELD),
            left_append(link.left_label, " " * LINK_SUBLABEL_FIELD),
            "   <---",
            left_append(link.label, "-" * LINK_LABEL_FIELD),
            "->  ",
            left_append(link.right_label, " " * LINK_SUBLABEL_FIELD),
            f"     {linkage.word(link.right)}\n",
        ]
    )


def print_links_and_domains(linkage: Linkage) -> str:
    """List every link, in linkage order, after the names of the domains
    it belongs to."""
    links = [link for link in linkage.links if not link.excluded]
    longest = max((len(link.domains) for link in links), default=0)

    parts: List[str] = []
    for link in links:
        for name in link.domains:
            parts.append(f" ({name})")
        parts.append("    " * (longest - len(link.domains)))
        parts.append("   ")
        parts.append(format_link(linkage, link))
    parts.append("\n")
    if linkage.violation is not None:
        parts.append("P.P. violations:\n")
        parts.append(f"        {linkage.violation}\n\n")
    return "".join(parts)


def print_disjuncts(linkage: Linkage, scorer: Optional[CorpusScorer] = None) -> str:
    sentence = linkage.sentence
    parts: List[str] = []
    # Skip both walls.
    for w in range(1, sentence.length - 1):
        disjunct = sentence.chosen_disjuncts[w]
        if disjunct is None:
            continue
        if scorer is not None:
            score = scorer.disjunct_score(linkage, w)
            parts.append(
                "%21s    %5.1f %6.3f %s\n"
                % (disjunct.string, disjunct.cost, score, disjunct.connectors)
            )
        else:
            parts.append(
                "%21s    %5.1f  %s\n" % (disjunct.string, disjunct.cost, disjunct.connectors)
            )
    return "".join(parts)


def print_senses(linkage: Linkage, scorer: Optional[CorpusScorer] = None) -> str:
    if scorer is None:
        return CORPUS_NOT_ENABLED
    parts: List[str] = []
    for w in range(linkage.num_words):
        for sense in scorer.word_senses(linkage, w):
            parts.append(
                "%d %s dj=%s sense=%s score=%f\n"
                % (sense.index, sense.subscripted_word, sense.disjunct, sense.sense, sense.score)
            )
    return "".join(parts)


def print_disjunct_counts(sentence: Sentence) -> str:
    counts = "".join(
        f"{word.first_alternative}({word.disjunct_count}) " for word in sentence.words
    )
    return counts + "\n\n"


def print_expression_sizes(sentence: Sentence) -> str:
    sizes = "".join(
        f"{word.first_alternative}[{word.expression_size}] " for word in sentence.words
    )
    return sizes + "\n\n"
