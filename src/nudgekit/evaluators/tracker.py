"""Adjacency and debounce bookkeeping for newly marked lines."""

from __future__ import annotations

from ..models import NO_LINE, NO_TIME, MarkerState

DEFAULT_DEBOUNCE_MS = 100.0


class AdjacencyTracker:
    """Remembers the last newly marked line and when it was marked.

    Two markings fire only when they are on adjacent lines and more than
    ``debounce_ms`` apart. Near-simultaneous markings come from the editor's
    own block feature, not from the user.
    """

    def __init__(self, debounce_ms: float = DEFAULT_DEBOUNCE_MS) -> None:
        self.debounce_ms = debounce_ms
        self.state = MarkerState()

    def check_and_record(self, candidate_line: int, now: float) -> bool:
        """Check ``candidate_line`` against the recorded state.

        This is a pure read; state changes only through ``record``.

        Args:
            candidate_line: Line that just became marked
            now: Current time in milliseconds

        Returns:
            True if the line is adjacent to the last marked line and the
            debounce window has elapsed
        """
        adjacent = abs(candidate_line - self.state.last_marked_line) == 1
        cooled_down = (now - self.state.last_marked_at) > self.debounce_ms
        return adjacent and cooled_down

    def record(self, candidate_line: int, now: float) -> None:
        self.state.last_marked_line = candidate_line
        self.state.last_marked_at = now

    def reset(self) -> None:
        self.state.last_marked_line = NO_LINE
        self.state.last_marked_at = NO_TIME
