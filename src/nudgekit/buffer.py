"""Text buffer interface and an in-memory document implementation."""

from __future__ import annotations

import bisect
import re
from typing import Callable, Protocol

from .exceptions import BoundaryError
from .models import EditEvent, LineSnapshot

EditListener = Callable[[EditEvent], None]

_LINE_DELIMITER = re.compile(r"\r\n|\r|\n")


class TextBuffer(Protocol):
    """Query interface evaluators need from a host buffer.

    Implementations raise ``BoundaryError`` for offsets or lines outside
    the buffer.
    """

    def length(self) -> int:
        ...

    def line_of_offset(self, offset: int) -> int:
        ...

    def line_offset(self, line: int) -> int:
        ...

    def line_length(self, line: int) -> int:
        """Length of ``line`` including its delimiter."""
        ...

    def get(self, offset: int, length: int) -> str:
        ...


def snapshot(buffer: TextBuffer, line: int) -> LineSnapshot:
    """Build a ``LineSnapshot`` for ``line`` of ``buffer``."""
    start = buffer.line_offset(line)
    length = buffer.line_length(line)
    return LineSnapshot(
        line_index=line,
        start_offset=start,
        length=length,
        text=buffer.get(start, length),
    )


class Document:
    """Mutable in-memory text buffer.

    Lines are delimited by ``\\n``, ``\\r\\n`` (kept intact as one
    delimiter) or a lone ``\\r``. Every insertion is announced to
    registered listeners after the text has been updated.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._line_starts = self._compute_line_starts(text)
        self._listeners: list[EditListener] = []

    @staticmethod
    def _compute_line_starts(text: str) -> list[int]:
        return [0] + [m.end() for m in _LINE_DELIMITER.finditer(text)]

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def length(self) -> int:
        return len(self._text)

    def line_of_offset(self, offset: int) -> int:
        if offset < 0 or offset > len(self._text):
            msg = f"Offset {offset} outside buffer of length {len(self._text)}"
            raise BoundaryError(msg, offset=offset)
        return bisect.bisect_right(self._line_starts, offset) - 1

    def line_offset(self, line: int) -> int:
        self._check_line(line)
        return self._line_starts[line]

    def line_length(self, line: int) -> int:
        self._check_line(line)
        if line + 1 < len(self._line_starts):
            return self._line_starts[line + 1] - self._line_starts[line]
        return len(self._text) - self._line_starts[line]

    def get(self, offset: int, length: int) -> str:
        if offset < 0 or length < 0 or offset + length > len(self._text):
            msg = f"Range [{offset}, {offset + length}) outside buffer"
            raise BoundaryError(msg, offset=offset)
        return self._text[offset : offset + length]

    def line_text(self, line: int) -> str:
        """Text of ``line`` without its delimiter."""
        return snapshot(self, line).text.rstrip("\r\n")

    def _check_line(self, line: int) -> None:
        if line < 0 or line >= len(self._line_starts):
            msg = f"Line {line} outside buffer of {len(self._line_starts)} lines"
            raise BoundaryError(msg, line=line)

    def add_listener(self, listener: EditListener) -> None:
        """Subscribe ``listener`` to insertions."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: EditListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def insert(self, offset: int, text: str) -> EditEvent:
        """Insert ``text`` at ``offset`` and notify listeners.

        Args:
            offset: Insertion point, between 0 and the buffer length
            text: Text to insert

        Returns:
            The edit event delivered to listeners

        Raises:
            BoundaryError: If offset lies outside the buffer
        """
        if offset < 0 or offset > len(self._text):
            msg = f"Cannot insert at offset {offset}"
            raise BoundaryError(msg, offset=offset)

        self._text = self._text[:offset] + text + self._text[offset:]
        self._line_starts = self._compute_line_starts(self._text)

        event = EditEvent(offset=offset, inserted_text=text)
        for listener in list(self._listeners):
            listener(event)
        return event
