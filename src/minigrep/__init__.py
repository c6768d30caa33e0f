"""Substring search over the lines of a single file."""

from .config import Config as Config
from .loader import Document as Document
from .loader import load as load
from .report import Reporter as Reporter
from .search import LineSpan as LineSpan
from .search import line_spans as line_spans
from .search import search as search
from .search import search_spans as search_spans
