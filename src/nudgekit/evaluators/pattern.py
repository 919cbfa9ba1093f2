"""Detection of lines being marked one at a time by hand."""

from __future__ import annotations

import logging

from ..buffer import TextBuffer, snapshot
from ..clock import Clock
from ..models import EditEvent, MarkerState
from .base import EvaluatorBase
from .classifier import EditClassifier
from .predicates import LinePredicate
from .tracker import DEFAULT_DEBOUNCE_MS, AdjacencyTracker

logger = logging.getLogger(__name__)


class PatternEvaluator(EvaluatorBase):
    """Fires when two adjacent lines are newly marked by separate edits.

    With the default ``//`` marker this detects a user commenting out
    consecutive lines manually instead of using the block comment hotkey.
    """

    def __init__(
        self,
        feature_id: str,
        buffer: TextBuffer,
        predicate: LinePredicate | None = None,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(feature_id, buffer, clock)
        self.predicate = predicate or LinePredicate()
        self.classifier = EditClassifier(self.predicate)
        self.tracker = AdjacencyTracker(debounce_ms)

    @property
    def state(self) -> MarkerState:
        return self.tracker.state

    def evaluate_edit(self, event: EditEvent) -> bool:
        line = self.buffer.line_of_offset(event.offset)
        before, after = self.classifier.split(self.buffer, event, line)
        already_marked = self.classifier.was_already_marked(before, after)

        line_text = snapshot(self.buffer, line).text
        if not self.classifier.new_marker_detected(line_text, already_marked):
            return False

        now = self.clock.now_ms()
        fired = self.tracker.check_and_record(line, now)
        self.tracker.record(line, now)

        if fired:
            logger.debug("%s fired on line %d", self.feature_id, line)
        return fired
