"""Whole-file loading into an immutable document."""

import logging
from collections.abc import Iterable
from pathlib import Path

from mm_result import Result
from pydantic import BaseModel, ConfigDict

from .search import LineSpan

logger = logging.getLogger(__name__)


class Document(BaseModel):
    """Full text of one file. Owns the buffer that match spans point into."""

    model_config = ConfigDict(frozen=True)

    path: Path
    text: str

    def lines_for(self, spans: Iterable[LineSpan]) -> list[str]:
        """Return the line text for each span, in order."""
        return [span.slice(self.text) for span in spans]


def load(path: str | Path) -> Result[Document]:
    """Read a UTF-8 file fully into memory.

    Line terminators are kept as-is. Errors are returned, not raised:
    ``invalid_encoding`` for undecodable content, ``io_error`` for any OS failure.
    Both carry a display-ready ``context["message"]``.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        return Result.err(("invalid_encoding", e), context={"message": f"{path}: stream did not contain valid UTF-8"})
    except OSError as e:
        return Result.err(("io_error", e), context={"message": f"{path}: {e.strerror or e}"})

    logger.debug("read %d characters from %s", len(text), path)
    return Result.ok(Document(path=path, text=text))
