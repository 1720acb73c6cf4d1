"""Column counting for display text.

A display column holds one grapheme cluster: a base character followed by
any combining marks, so accents never take a column of their own and are
never split from their base character.
"""

from __future__ import annotations

import unicodedata
from typing import List


def split_clusters(text: str) -> List[str]:
    clusters: List[str] = []
    buffer = ""
    for ch in text:
        if unicodedata.category(ch).startswith("M"):
            buffer += ch
        else:
            if buffer:
                clusters.append(buffer)
                buffer = ""
            buffer += ch
    if buffer:
        clusters.append(buffer)
    return clusters


def display_width(text: str) -> int:
    """Number of columns ``text`` occupies."""
    return len(split_clusters(text))


def left_append(text: str, pad: str) -> str:
    """Return ``text`` followed by the tail of ``pad``, in exactly as many
    columns as ``pad`` has.

    ``text`` is truncated when it is wider than ``pad``.
    """
    text_clusters = split_clusters(text)
    pad_clusters = split_clusters(pad)
    width = len(pad_clusters)
    return "".join(text_clusters[:width] + pad_clusters[len(text_clusters):])


def upper_prefix(text: str) -> str:
    """The leading run of upper-case characters of a connector name."""
    end = 0
    for ch in text:
        if not ch.isupper():
            break
        end += 1
    return text[:end]
