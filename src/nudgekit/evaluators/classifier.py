"""Attribution of marker status to a single insertion."""

from __future__ import annotations

from ..buffer import TextBuffer
from ..exceptions import EditGeometryError
from ..models import EditEvent
from .predicates import LinePredicate


class EditClassifier:
    """Decides whether an insertion newly marked its line.

    The buffer is only ever seen after the edit, so the pre-edit state of
    the line is reconstructed from the text on either side of the inserted
    text. An insertion can land before an existing marker, after it, or
    inside it; all three mean the line was already marked.
    """

    def __init__(self, predicate: LinePredicate) -> None:
        self.predicate = predicate

    @property
    def marker(self) -> str:
        return self.predicate.marker

    def split(
        self,
        buffer: TextBuffer,
        event: EditEvent,
        line: int,
    ) -> tuple[str, str]:
        """Split ``line`` around the inserted text.

        Args:
            buffer: Buffer after the edit was applied
            event: The insertion
            line: Index of the line containing ``event.offset``

        Returns:
            Stripped text before the insertion point and after the inserted text

        Raises:
            EditGeometryError: If the insertion does not fit within the line
            BoundaryError: If the buffer rejects the line or range queries
        """
        line_start = buffer.line_offset(line)
        line_end = line_start + buffer.line_length(line)
        insert_end = event.end_offset

        if event.offset < line_start or insert_end > line_end:
            msg = "Inserted text extends outside its line"
            raise EditGeometryError(
                msg,
                details={
                    "line": line,
                    "line_start": line_start,
                    "line_end": line_end,
                    "offset": event.offset,
                    "insert_end": insert_end,
                },
            )

        before = buffer.get(line_start, event.offset - line_start).strip()
        after = buffer.get(insert_end, line_end - insert_end).strip()
        return before, after

    def was_already_marked(self, before: str, after: str) -> bool:
        marker = self.marker
        if before.startswith(marker):
            return True
        if not before and after.startswith(marker):
            return True
        # Insertion landed between characters of the marker itself
        return any(
            before == marker[:k] and after.startswith(marker[k:])
            for k in range(1, len(marker))
        )

    def new_marker_detected(self, line_text_now: str, was_already_marked: bool) -> bool:
        return self.predicate.is_marked(line_text_now) and not was_already_marked
