# Per-file analysis context: source path and text, plus location and comment helpers.
# Handles reading .cdc files, decoding errors, and normalizing non-text input so the
# detector always sees a plain string.

import bisect
import logging
import re
from pathlib import Path
from typing import Any, Optional

from cadence_modernizer.findings.models import SourceLocation

logger = logging.getLogger(__name__)

# Strings are matched so that "//" inside a string literal is not a comment.
_COMMENT_OR_STRING = re.compile(
    r'"(?:\\.|[^"\\\n])*"|//[^\n]*|/\*.*?(?:\*/|\Z)',
    re.DOTALL,
)


def normalize_source(source: Any) -> str:
    """
    Coerce any input into source text.

    None and non-text values become "", bytes are decoded as UTF-8 with
    errors="replace" so bad input never raises.
    """
    if source is None:
        return ""
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8", errors="replace")
    logger.warning("Ignoring non-text source of type %s", type(source).__name__)
    return ""


class LineIndex:
    """
    Offsets of every line start in a text, for offset -> (line, column) lookups.

    Equivalent to walking the text up to an offset and counting newlines, but
    built once per text so each lookup is a binary search.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.line_starts = [0]
        self.line_starts.extend(m.end() for m in re.finditer("\n", text))

    def line_col(self, offset: int) -> tuple[int, int]:
        """Return 1-based (line, column) for a 0-based offset."""
        row = bisect.bisect_right(self.line_starts, offset) - 1
        return row + 1, offset - self.line_starts[row] + 1

    def line_start(self, offset: int) -> int:
        """Return the offset of the first character of the line holding offset."""
        row = bisect.bisect_right(self.line_starts, offset) - 1
        return self.line_starts[row]

    def location(self, start: int, end: int) -> SourceLocation:
        line, column = self.line_col(start)
        return SourceLocation(line=line, column=column, start_index=start, end_index=end)


def get_source_span(text: str, location: SourceLocation) -> str:
    """Return the substring of text covered by location."""
    return text[location.start_index : location.end_index]


def get_line_indent(text: str, offset: int) -> str:
    """Return the leading whitespace of the line holding offset."""
    line_start = text.rfind("\n", 0, offset) + 1
    m = re.match(r"[ \t]*", text[line_start:])
    return m.group(0) if m else ""


def comment_spans(text: str) -> list[tuple[int, int]]:
    """
    Return [start, end) spans of every // and /* */ comment, in order.

    Unterminated block comments run to the end of the text.
    """
    spans: list[tuple[int, int]] = []
    for m in _COMMENT_OR_STRING.finditer(text):
        if m.group(0).startswith("/"):
            spans.append((m.start(), m.end()))
    return spans


def in_spans(spans: list[tuple[int, int]], offset: int) -> bool:
    """True if offset falls inside one of the sorted, disjoint spans."""
    idx = bisect.bisect_right(spans, (offset, float("inf"))) - 1
    return idx >= 0 and spans[idx][0] <= offset < spans[idx][1]


class SourceContext:
    """
    Per-file state for analysis: path and decoded source text.

    The engine itself works on plain strings; the context is what the CLI
    builds for each file it scans.
    """

    def __init__(self, path: Path, text: str) -> None:
        self.path = path
        self.text = text

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1 if self.text else 0


def create_context(path: Path) -> Optional[SourceContext]:
    """
    Read a Cadence file into a SourceContext.

    - Unreadable file (permission, missing): returns None and logs error.
    - Invalid UTF-8: decoded with replacement characters; logs a warning.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file %s: %s", path, e)
        return None

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("File %s is not valid UTF-8; undecodable bytes replaced", path)
        text = raw.decode("utf-8", errors="replace")

    ctx = SourceContext(path=path, text=text)
    logger.info("Loaded %s: %d line(s)", path, ctx.line_count)
    return ctx


def load_contexts(paths: list[Path]) -> list[SourceContext]:
    """
    Read multiple files into SourceContexts.

    Unreadable or missing files are skipped (logged). Order matches input
    order; failed files are omitted.
    """
    contexts: list[SourceContext] = []
    for path in paths:
        ctx = create_context(path)
        if ctx is not None:
            contexts.append(ctx)
    return contexts
