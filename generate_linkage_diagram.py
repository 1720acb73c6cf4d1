#!/usr/bin/env python3
"""Print link-grammar linkages as text diagrams, PostScript and listings.

Inputs (one JSON document per linkage):
- words: one entry per sentence position, walls included. Either a plain
  string (the word and the parser's choice for it are the same) or an object:
    word          original unsplit word (null for a split-off token)
    chosen        chosen dictionary entry, e.g. "cat.n"; null for an island
    cost          cost of the chosen disjunct
    connectors    connector string of the chosen disjunct, e.g. "Ds- Ss+"
    alternatives  dictionary alternatives, first one used when word
                  subscripts are not displayed
    idiom         force (true) or deny (false) idiom handling of "chosen"
    disjunct_count, expression_size   optional debug figures
- links: {"left", "right", "label", "llabel", "rlabel", "domains"}; a left
  of null marks a link removed by post-processing
- dictionary: {"left_wall": bool, "right_wall": bool}
- options: display options, see linkage_print.ParseOptions
- violation: optional post-processing violation name

Usage:
- Print the diagram of a linkage to stdout:
    python generate_linkage_diagram.py --linkage ./linkages/cat.json
- Write a full PostScript document:
    python generate_linkage_diagram.py --linkage ./linkages/cat.json \\
      --format postscript --postscript-mode 1 --output ./out/cat.eps
- Everything at once, with suffixes merged into their stems:
    python generate_linkage_diagram.py --linkage ./linkages/ru.json --format all --hide-suffixes
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from linkage_print import (
    Dictionary,
    Disjunct,
    Link,
    Linkage,
    ParseOptions,
    PostscriptMode,
    Sentence,
    SentenceWord,
    print_diagram,
    print_disjunct_counts,
    print_disjuncts,
    print_expression_sizes,
    print_links_and_domains,
    print_postscript,
    print_senses,
)

FORMATS = ("diagram", "postscript", "links", "disjuncts", "senses", "counts")
ALL_FORMATS = ("diagram", "links", "disjuncts")

# CLI flag -> (option name, value set by the flag)
OPTION_FLAGS: Dict[str, Tuple[str, object]] = {
    "display_walls": ("display_walls", True),
    "no_word_subscripts": ("display_word_subscripts", False),
    "hide_suffixes": ("display_suffixes", False),
    "no_link_subscripts": ("display_link_subscripts", False),
    "tall": ("display_short", False),
}

_MISSING = object()


def _number(raw: Dict[str, object], key: str, default: object, kind: type, position: int):
    value = raw.get(key, default)
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ValueError(f"Word {position} {key} must be a number, got {value!r}") from None


def load_document(path: Path) -> Dict[str, object]:
    with path.open("r", encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, dict):
        raise ValueError(f"Linkage document {path} must be a JSON object")
    return document


def build_word(raw: object, position: int) -> Tuple[SentenceWord, Optional[Disjunct]]:
    if isinstance(raw, str):
        return SentenceWord(unsplit_word=raw, alternatives=(raw,)), Disjunct(string=raw)
    if not isinstance(raw, dict):
        raise ValueError(f"Word {position} must be a string or an object")

    unsplit = raw.get("word")
    chosen = raw.get("chosen", _MISSING)
    if chosen is _MISSING:
        chosen = unsplit
    alternatives = raw.get("alternatives")
    if alternatives is None:
        alternatives = [chosen] if chosen is not None else []
    if not isinstance(alternatives, list):
        raise ValueError(f"Word {position} alternatives must be a list")

    word = SentenceWord(
        unsplit_word=None if unsplit is None else str(unsplit),
        alternatives=tuple(str(alt) for alt in alternatives),
        disjunct_count=_number(raw, "disjunct_count", 0, int, position),
        expression_size=_number(raw, "expression_size", 0, int, position),
    )
    if chosen is None:
        return word, None
    idiom = raw.get("idiom")
    disjunct = Disjunct(
        string=str(chosen),
        cost=_number(raw, "cost", 0.0, float, position),
        connectors=str(raw.get("connectors", "")),
        is_idiom=None if idiom is None else bool(idiom),
    )
    return word, disjunct


def build_sentence(raw_words: Iterable[object], raw_dict: Optional[Dict[str, object]]) -> Sentence:
    words: List[SentenceWord] = []
    chosen: List[Optional[Disjunct]] = []
    for position, raw in enumerate(raw_words):
        word, disjunct = build_word(raw, position)
        words.append(word)
        chosen.append(disjunct)
    if not words:
        raise ValueError("Linkage document must list at least one word")
    raw_dict = raw_dict or {}
    dictionary = Dictionary(
        left_wall_defined=bool(raw_dict.get("left_wall", True)),
        right_wall_defined=bool(raw_dict.get("right_wall", True)),
    )
    return Sentence(words=words, chosen_disjuncts=chosen, dictionary=dictionary)


def build_links(raw_links: Iterable[object]) -> List[Link]:
    links: List[Link] = []
    for index, raw in enumerate(raw_links):
        if not isinstance(raw, dict):
            raise ValueError(f"Link {index} must be an object")
        if "right" not in raw or "label" not in raw:
            raise ValueError(f"Link {index} is missing 'right' or 'label'")
        left = raw.get("left")
        domains = raw.get("domains") or []
        links.append(
            Link(
                left=None if left is None else int(left),
                right=int(raw["right"]),
                label=str(raw["label"]),
                left_label=str(raw.get("llabel", "")),
                right_label=str(raw.get("rlabel", "")),
                domains=tuple(str(name) for name in domains),
            )
        )
    return links


def build_options(raw: Optional[Dict[str, object]], args: argparse.Namespace) -> ParseOptions:
    values = dict(raw or {})
    for flag, (name, value) in OPTION_FLAGS.items():
        if getattr(args, flag, False):
            values[name] = value
    if args.screen_width is not None:
        values["screen_width"] = args.screen_width
    return ParseOptions.from_mapping(values)


def build_linkage(document: Dict[str, object], args: argparse.Namespace) -> Linkage:
    sentence = build_sentence(document.get("words", []), document.get("dictionary"))
    links = build_links(document.get("links", []))
    options = build_options(document.get("options"), args)
    violation = document.get("violation")
    return Linkage(
        sentence=sentence,
        links=links,
        options=options,
        violation=None if violation is None else str(violation),
    )


def render_format(linkage: Linkage, fmt: str, postscript_mode: int) -> str:
    if fmt == "diagram":
        return print_diagram(linkage)
    if fmt == "postscript":
        return print_postscript(linkage, postscript_mode)
    if fmt == "links":
        return print_links_and_domains(linkage)
    if fmt == "disjuncts":
        return print_disjuncts(linkage)
    if fmt == "senses":
        return print_senses(linkage)
    if fmt == "counts":
        return print_disjunct_counts(linkage.sentence) + print_expression_sizes(linkage.sentence)
    raise ValueError(f"Unknown format: {fmt}")


def generate_output(
    doc_path: Path, fmt: str, args: argparse.Namespace
) -> str:
    document = load_document(doc_path)
    linkage = build_linkage(document, args)
    formats = ALL_FORMATS if fmt == "all" else (fmt,)
    return "".join(render_format(linkage, name, args.postscript_mode) for name in formats)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print a linkage as a text diagram, PostScript or flat listings."
    )
    parser.add_argument("--linkage", required=True, help="Path to the linkage JSON document")
    parser.add_argument("--output", help="Output path (default: stdout)")
    parser.add_argument(
        "--format",
        choices=FORMATS + ("all",),
        default="diagram",
        help="What to print (default: diagram; all = diagram, links and disjuncts)",
    )
    parser.add_argument(
        "--postscript-mode",
        type=int,
        choices=[int(mode) for mode in PostscriptMode],
        default=int(PostscriptMode.FRAGMENT),
        help="0 prints the PostScript data only, 1 a complete document",
    )
    parser.add_argument("--display-walls", action="store_true", help="Always show the walls")
    parser.add_argument(
        "--no-word-subscripts", action="store_true", help="Show dictionary alternatives unprocessed"
    )
    parser.add_argument(
        "--hide-suffixes", action="store_true", help="Merge suffixes into their stems"
    )
    parser.add_argument(
        "--no-link-subscripts",
        action="store_true",
        help="Label links with the upper-case part of their names only",
    )
    parser.add_argument(
        "--tall", action="store_true", help="Draw a tick row under every row of links"
    )
    parser.add_argument("--screen-width", type=int, help="Page width in columns")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging (layout diagnostics)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    doc_path = Path(args.linkage).resolve()
    try:
        if not doc_path.exists():
            raise FileNotFoundError(f"Linkage document not found: {doc_path}")
        if args.screen_width is not None and args.screen_width <= 0:
            raise ValueError(f"Invalid screen width: {args.screen_width} (must be positive)")
        text = generate_output(doc_path, args.format, args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        raise SystemExit(1)

    if not args.output:
        sys.stdout.write(text)
        return

    output_path = Path(args.output)
    if not output_path.is_absolute():
        output_path = (Path.cwd() / output_path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
