"""In-memory view of one parse result, as handed over by the parser.

The printer never mutates these objects except for the display-word cache
on :class:`Linkage`, which is filled on the first print request.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple

from .constants import DEFAULT_SCREEN_WIDTH
from .words import resolve_words


@dataclass
class ParseOptions:
    display_walls: bool = False
    display_word_subscripts: bool = True
    display_suffixes: bool = True
    display_link_subscripts: bool = True
    display_short: bool = True
    screen_width: int = DEFAULT_SCREEN_WIDTH

    def __post_init__(self) -> None:
        if isinstance(self.screen_width, bool) or not isinstance(self.screen_width, int):
            raise ValueError(f"screen_width must be an integer, got {self.screen_width!r}")
        if self.screen_width <= 0:
            raise ValueError(f"screen_width must be positive, got {self.screen_width}")

    @property
    def hide_suffixes(self) -> bool:
        return not self.display_suffixes

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, object]]) -> "ParseOptions":
        if not raw:
            return cls()
        known = {option.name for option in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown display option(s): {', '.join(unknown)}")
        for name, value in raw.items():
            if name != "screen_width" and not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")
        return cls(**raw)


@dataclass
class Dictionary:
    """The dictionary flags the printer looks at."""

    left_wall_defined: bool = True
    right_wall_defined: bool = True


@dataclass
class Disjunct:
    """The lexical entry the parser chose for one word position."""

    string: str
    cost: float = 0.0
    connectors: str = ""
    # None lets the printer detect idioms from the subscript
    is_idiom: Optional[bool] = None


@dataclass
class SentenceWord:
    unsplit_word: Optional[str]
    alternatives: Sequence[str] = ()
    disjunct_count: int = 0
    expression_size: int = 0

    @property
    def first_alternative(self) -> str:
        if self.alternatives:
            return self.alternatives[0]
        return self.unsplit_word or ""


@dataclass
class Sentence:
    words: Sequence[SentenceWord]
    chosen_disjuncts: Sequence[Optional[Disjunct]]
    dictionary: Dictionary = field(default_factory=Dictionary)

    def __post_init__(self) -> None:
        if len(self.chosen_disjuncts) != len(self.words):
            raise ValueError(
                f"Sentence has {len(self.words)} words but "
                f"{len(self.chosen_disjuncts)} chosen disjuncts"
            )

    @property
    def length(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class Link:
    """A labeled edge between two word positions.

    ``left`` is None for a link the post-processor excluded; such links are
    never rendered or listed.
    """

    left: Optional[int]
    right: int
    label: str
    left_label: str = ""
    right_label: str = ""
    domains: Tuple[str, ...] = ()

    @property
    def excluded(self) -> bool:
        return self.left is None


@dataclass
class Sense:
    index: int
    subscripted_word: str
    disjunct: str
    sense: str
    score: float


class CorpusScorer(Protocol):
    """Optional corpus-statistics capability supplied by the caller."""

    def disjunct_score(self, linkage: "Linkage", word_index: int) -> float:
        ...

    def word_senses(self, linkage: "Linkage", word_index: int) -> Iterable[Sense]:
        ...


@dataclass
class Linkage:
    sentence: Sentence
    links: Sequence[Link]
    options: ParseOptions = field(default_factory=ParseOptions)
    violation: Optional[str] = None
    _words: Optional[List[str]] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        last = self.num_words - 1
        for index, link in enumerate(self.links):
            if link.excluded:
                continue
            if not 0 <= link.left < link.right <= last:
                raise ValueError(
                    f"Link {index} ({link.label}) joins words {link.left} and "
                    f"{link.right}; expected 0 <= left < right <= {last}"
                )

    @property
    def num_words(self) -> int:
        return self.sentence.length

    @property
    def dictionary(self) -> Dictionary:
        return self.sentence.dictionary

    @property
    def words(self) -> List[str]:
        """Display words, resolved on first access and cached."""
        if self._words is None:
            self._words = resolve_words(self.sentence, self.options)
        return self._words

    def word(self, index: int) -> str:
        return self.words[index]
