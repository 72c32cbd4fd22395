"""Source text accessor: offset to line/column mapping and comment-aware token search."""

from bisect import bisect_right
from collections.abc import Iterator
from typing import Optional

from max_params_linter.domain.entities import SourcePosition
from max_params_linter.domain.protocols import SourceTextProtocol

# JS line terminators; "\r\n" is handled as one break.
_LINE_BREAKS = frozenset("\n\r\u2028\u2029")
_QUOTES = frozenset("'\"`")


class SourceText(SourceTextProtocol):
    """
    Wraps the text a tree was parsed from.

    Offsets are indexes into the Python string, matching ESTree `range`
    values for text without astral-plane characters.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts = self._compute_line_starts(text)

    @staticmethod
    def _compute_line_starts(text: str) -> list[int]:
        starts = [0]
        i = 0
        length = len(text)
        while i < length:
            ch = text[i]
            if ch == "\r" and i + 1 < length and text[i + 1] == "\n":
                i += 1
            if ch in _LINE_BREAKS:
                starts.append(i + 1)
            i += 1
        return starts

    @property
    def text(self) -> str:
        return self._text

    def position_at(self, offset: int) -> SourcePosition:
        offset = max(0, min(offset, len(self._text)))
        index = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(line=index + 1, column=offset - self._line_starts[index])

    def _skip_string(self, start: int, quote: str) -> int:
        """Return the offset just past the string literal opened at start."""
        text = self._text
        i = start + 1
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                return i + 1
            if quote != "`" and ch in _LINE_BREAKS:
                return i
            i += 1
        return len(text)

    def _code_offsets(self, start: int, end: int) -> Iterator[int]:
        """Yield offsets in [start, end) that lie outside comments and string literals."""
        text = self._text
        end = min(end, len(text))
        i = max(start, 0)
        while i < end:
            ch = text[i]
            if ch == "/" and text.startswith("//", i):
                while i < end and text[i] not in _LINE_BREAKS:
                    i += 1
                continue
            if ch == "/" and text.startswith("/*", i):
                close = text.find("*/", i + 2)
                i = end if close < 0 else close + 2
                continue
            if ch in _QUOTES:
                i = self._skip_string(i, ch)
                continue
            yield i
            i += 1

    def find_token_after(self, token: str, start: int, end: Optional[int] = None) -> Optional[int]:
        limit = len(self._text) if end is None else end
        for offset in self._code_offsets(start, limit):
            if self._text.startswith(token, offset) and offset + len(token) <= limit:
                return offset
        return None

    def find_token_before(self, token: str, start: int, end: int) -> Optional[int]:
        found: Optional[int] = None
        for offset in self._code_offsets(start, end):
            if self._text.startswith(token, offset) and offset + len(token) <= end:
                found = offset
        return found
