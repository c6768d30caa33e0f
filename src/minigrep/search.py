"""Line-oriented substring search.

Matches are reported as ``LineSpan`` index ranges into the searched text, so a
result never copies the document. ``search`` is the convenience form that
returns the line strings directly.
"""

import logging
from collections.abc import Iterator
from typing import NamedTuple

logger = logging.getLogger(__name__)


class LineSpan(NamedTuple):
    """Half-open ``[start, end)`` range of one line, terminator excluded."""

    start: int
    end: int

    def slice(self, text: str) -> str:
        """Return the line this span covers in ``text``."""
        return text[self.start : self.end]


def line_spans(text: str) -> Iterator[LineSpan]:
    """Yield the span of every line in ``text``.

    Lines end at ``\\n``; a ``\\r`` right before it is not part of the line.
    A trailing terminator does not start an extra empty line.
    """
    start = 0
    size = len(text)
    while start < size:
        newline = text.find("\n", start)
        if newline == -1:
            yield LineSpan(start, size)
            return
        end = newline - 1 if newline > start and text[newline - 1] == "\r" else newline
        yield LineSpan(start, end)
        start = newline + 1


def search_spans(query: str, text: str, *, ignore_case: bool = False) -> list[LineSpan]:
    """Return spans of the lines containing ``query``, in document order."""
    if ignore_case:
        needle = query.lower()
        spans = [span for span in line_spans(text) if needle in span.slice(text).lower()]
    else:
        spans = [span for span in line_spans(text) if query in span.slice(text)]
    logger.debug("%d matching lines for %r (ignore_case=%s)", len(spans), query, ignore_case)
    return spans


def search(query: str, text: str, ignore_case: bool = False) -> list[str]:
    """Return the lines of ``text`` containing ``query``, in document order."""
    return [span.slice(text) for span in search_spans(query, text, ignore_case=ignore_case)]
