"""Render link-grammar linkages as text diagrams, PostScript and listings."""

from .errors import LayoutOverflowError, LinkagePrintError, MalformedSubscriptError
from .listings import (
    print_disjunct_counts,
    print_disjuncts,
    print_expression_sizes,
    print_links_and_domains,
    print_senses,
)
from .model import (
    CorpusScorer,
    Dictionary,
    Disjunct,
    Link,
    Linkage,
    ParseOptions,
    Sense,
    Sentence,
    SentenceWord,
)
from .packing import DiagramLayout, pack_links, wall_visibility
from .paginate import PagedDiagram, paginate
from .postscript import PostscriptMode
from .render import DiagramFormat, print_diagram, print_postscript, render
from .words import resolve_words

__all__ = [
    "CorpusScorer",
    "DiagramFormat",
    "DiagramLayout",
    "Dictionary",
    "Disjunct",
    "LayoutOverflowError",
    "Link",
    "Linkage",
    "LinkagePrintError",
    "MalformedSubscriptError",
    "PagedDiagram",
    "ParseOptions",
    "PostscriptMode",
    "Sense",
    "Sentence",
    "SentenceWord",
    "pack_links",
    "paginate",
    "print_diagram",
    "print_disjunct_counts",
    "print_disjuncts",
    "print_expression_sizes",
    "print_links_and_domains",
    "print_postscript",
    "print_senses",
    "render",
    "resolve_words",
    "wall_visibility",
]
