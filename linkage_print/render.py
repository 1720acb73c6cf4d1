"""Print entry points.

The ASCII and PostScript renderers share one packed layout; neither packs
links itself. When the layout overflows a fixed capacity both return the
diagnostic line instead of a diagram.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import LayoutOverflowError
from .model import Linkage
from .packing import DiagramLayout, pack_links
from .paginate import PagedDiagram, paginate
from .postscript import PostscriptMode, build_postscript_body, wrap_document

logger = logging.getLogger(__name__)


class DiagramFormat(Enum):
    ASCII = "ascii"
    POSTSCRIPT = "postscript"


@dataclass(frozen=True)
class DiagramContext:
    layout: DiagramLayout
    paged: PagedDiagram


def build_context(linkage: Linkage) -> DiagramContext:
    """Pack and paginate ``linkage``; raises LayoutOverflowError."""
    layout = pack_links(linkage)
    options = linkage.options
    paged = paginate(layout, options.screen_width, short=options.display_short)
    return DiagramContext(layout=layout, paged=paged)


def render(
    linkage: Linkage,
    fmt: DiagramFormat = DiagramFormat.ASCII,
    mode: int = PostscriptMode.FRAGMENT,
) -> str:
    if fmt is DiagramFormat.POSTSCRIPT and mode not in tuple(PostscriptMode):
        raise ValueError(f"Unknown PostScript mode {mode!r}; expected 0 or 1")
    try:
        context = build_context(linkage)
    except LayoutOverflowError as exc:
        logger.warning("Diagram not drawn: %s", exc)
        return exc.diagnostic

    if fmt is DiagramFormat.ASCII:
        return context.paged.text
    body = build_postscript_body(linkage, context.layout, context.paged)
    return wrap_document(body, mode)


def print_diagram(linkage: Optional[Linkage]) -> Optional[str]:
    """The linkage as a UTF-8 diagram, paginated to the screen width."""
    if linkage is None:
        return None
    return render(linkage, DiagramFormat.ASCII)


def print_postscript(linkage: Linkage, mode: int = PostscriptMode.FRAGMENT) -> str:
    """The linkage as PostScript: mode 0 gives the data only, mode 1 a
    complete document."""
    return render(linkage, DiagramFormat.POSTSCRIPT, mode)
