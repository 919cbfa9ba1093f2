"""Base classes and protocols for edit evaluators."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from ..buffer import TextBuffer
from ..clock import Clock, SystemClock
from ..exceptions import BoundaryError, EditGeometryError, EvaluatorError
from ..models import EditEvent, FireSignal

logger = logging.getLogger(__name__)


class EditEvaluator(Protocol):
    """Protocol defining the evaluator interface."""

    feature_id: str

    def on_edit(self, event: EditEvent) -> bool:
        """Inspect one edit event.

        Args:
            event: Insertion already applied to the buffer

        Returns:
            True if the feature's pattern fired
        """
        ...


class EvaluatorBase(ABC):
    """Abstract base class for edit evaluators bound to one buffer."""

    def __init__(
        self,
        feature_id: str,
        buffer: TextBuffer,
        clock: Clock | None = None,
    ) -> None:
        """Initialize evaluator.

        Args:
            feature_id: Identifier of the feature this evaluator suggests
            buffer: Buffer the edit events refer to
            clock: Time source, defaults to the system monotonic clock
        """
        self.feature_id = feature_id
        self.buffer = buffer
        self.clock = clock or SystemClock()

    @abstractmethod
    def evaluate_edit(self, event: EditEvent) -> bool:
        """Core evaluation logic - implement in subclasses.

        May raise ``BoundaryError`` or ``EditGeometryError``; both are
        treated as "not fired" by ``on_edit``.
        """
        ...

    def on_edit(self, event: EditEvent) -> bool:
        """Evaluate an edit, degrading buffer geometry failures to False.

        Raises:
            EvaluatorError: If evaluation fails for any other reason
        """
        try:
            return self.evaluate_edit(event)
        except (BoundaryError, EditGeometryError) as e:
            # Expected at the start and end of the buffer
            logger.debug(
                "%s: ignoring edit at offset %d: %s",
                self.feature_id,
                event.offset,
                e,
            )
            return False
        except Exception as e:
            raise EvaluatorError(
                f"Evaluator execution failed: {e}",
                feature_id=self.feature_id,
                details={"offset": event.offset},
            ) from e

    def signal(self, event: EditEvent) -> FireSignal:
        return FireSignal(feature_id=self.feature_id, fired=self.on_edit(event))
