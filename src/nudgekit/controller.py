"""Wiring between a document, its evaluators, and a notification sink."""

from __future__ import annotations

import logging

from .buffer import Document
from .catalog import SuggestionCatalog
from .clock import Clock, SystemClock
from .evaluators import EditEvaluator, EvaluatorRegistry, default_registry
from .exceptions import NudgeKitError
from .models import EditEvent, FireSignal, NudgeConfig
from .notify import NotificationSink

logger = logging.getLogger(__name__)


class SuggestionController:
    """Runs every enabled evaluator on each edit and delivers suggestions.

    Each feature is suggested at most once per controller unless
    ``config.repeat`` is set.
    """

    def __init__(
        self,
        catalog: SuggestionCatalog,
        sink: NotificationSink,
        registry: EvaluatorRegistry | None = None,
        config: NudgeConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        # Config overrides apply to a private copy of the caller's catalog
        self.catalog = catalog.copy()
        self.sink = sink
        self.registry = registry or default_registry()
        self.config = config or NudgeConfig()
        self.clock = clock or SystemClock()
        self.evaluators: list[EditEvaluator] = []
        self.shown: set[str] = set()
        self._document: Document | None = None

        for feature_id, text in self.config.suggestions.items():
            if feature_id in self.catalog:
                self.catalog.override(feature_id, text)
            else:
                self.catalog.register(feature_id, text)

    def attach(self, document: Document) -> None:
        """Build fresh evaluators for ``document`` and subscribe to its edits.

        Raises:
            NudgeKitError: If a controller is attached twice, or an enabled
                feature has no evaluator kind or catalog entry
        """
        if self._document is not None:
            msg = "Controller is already attached to a document"
            raise NudgeKitError(msg)

        for feature_id in self.config.enabled_features():
            # Fail at attach time rather than on the first fire
            self.catalog.get(feature_id)

        self.evaluators = self.registry.create_all(self.config, document, self.clock)
        document.add_listener(self.handle_edit)
        self._document = document
        logger.debug(
            "Attached %d evaluator(s): %s",
            len(self.evaluators),
            ", ".join(e.feature_id for e in self.evaluators),
        )

    def detach(self) -> None:
        if self._document is not None:
            self._document.remove_listener(self.handle_edit)
        self._document = None
        self.evaluators = []

    def handle_edit(self, event: EditEvent) -> list[FireSignal]:
        """Evaluate one edit with every evaluator.

        Args:
            event: Insertion already applied to the attached document

        Returns:
            One signal per evaluator, in evaluator order. An evaluator that
            raises is logged and reported as not fired.
        """
        signals = []
        for evaluator in self.evaluators:
            try:
                fired = evaluator.on_edit(event)
            except NudgeKitError:
                # One failing feature must not stop the others or the edit
                logger.exception("Evaluator %s failed", evaluator.feature_id)
                fired = False
            signals.append(FireSignal(feature_id=evaluator.feature_id, fired=fired))

        for signal in signals:
            if not signal.fired:
                continue
            try:
                self._deliver(signal.feature_id)
            except NudgeKitError:
                logger.exception("Could not deliver suggestion %s", signal.feature_id)
        return signals

    def _deliver(self, feature_id: str) -> None:
        if feature_id in self.shown and not self.config.repeat:
            return
        suggestion = self.catalog.get(feature_id)
        self.shown.add(feature_id)
        logger.info("Suggesting %s", feature_id)
        self.sink.notify(suggestion)
