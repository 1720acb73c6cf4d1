from __future__ import annotations

from typing import Optional, Sequence, Union

import pytest

from linkage_print import (
    Dictionary,
    Disjunct,
    Link,
    Linkage,
    ParseOptions,
    Sentence,
    SentenceWord,
)

CAT_WORDS = ["LEFT-WALL", "the", "cat", "ran", ".", "RIGHT-WALL"]


def make_sentence(
    chosen: Sequence[Union[str, Disjunct, None]],
    unsplit: Optional[Sequence[Optional[str]]] = None,
    walls: bool = True,
) -> Sentence:
    words = []
    disjuncts = []
    for position, entry in enumerate(chosen):
        if isinstance(entry, str):
            entry = Disjunct(string=entry)
        original = unsplit[position] if unsplit is not None else (
            entry.string if entry is not None else None
        )
        alternatives = (entry.string,) if entry is not None else ()
        words.append(SentenceWord(unsplit_word=original, alternatives=alternatives))
        disjuncts.append(entry)
    dictionary = Dictionary(left_wall_defined=walls, right_wall_defined=walls)
    return Sentence(words=words, chosen_disjuncts=disjuncts, dictionary=dictionary)


def make_linkage(
    chosen: Sequence[Union[str, Disjunct, None]],
    links: Sequence[Link] = (),
    walls: bool = True,
    **options,
) -> Linkage:
    return Linkage(
        sentence=make_sentence(chosen, walls=walls),
        links=list(links),
        options=ParseOptions(**options),
    )


@pytest.fixture
def cat_linkage() -> Linkage:
    return make_linkage(CAT_WORDS, [Link(1, 2, "Ds", "D", "Ds")])


@pytest.fixture
def suffix_sentence() -> Sentence:
    return make_sentence(["LEFT-WALL", "run.v", "=.ed", "RIGHT-WALL"])
