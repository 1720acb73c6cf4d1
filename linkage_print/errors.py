from __future__ import annotations


class LinkagePrintError(Exception):
    """Base class for errors raised while printing a linkage."""


class LayoutOverflowError(LinkagePrintError):
    """A fixed capacity of the diagram was exceeded.

    ``diagnostic`` is the text the print entry points return in place of
    the diagram.
    """

    def __init__(self, diagnostic: str):
        super().__init__(diagnostic.strip())
        self.diagnostic = diagnostic


class MalformedSubscriptError(LinkagePrintError, ValueError):
    """An idiom token is missing its subscript mark."""
