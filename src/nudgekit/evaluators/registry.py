"""Registry of evaluator kinds and the features built from them."""

from __future__ import annotations

from typing import Callable

from ..buffer import TextBuffer
from ..clock import Clock
from ..exceptions import RegistryError
from ..models import FeatureConfig, NudgeConfig
from .base import EditEvaluator
from .pattern import PatternEvaluator
from .predicates import LinePredicate
from .tracker import DEFAULT_DEBOUNCE_MS

BLOCK_COMMENT_FEATURE_ID = "blockCommentSuggestion"

EvaluatorFactory = Callable[[str, TextBuffer, FeatureConfig, float, Clock], EditEvaluator]


def _line_marker_factory(
    feature_id: str,
    buffer: TextBuffer,
    feature: FeatureConfig,
    debounce_ms: float,
    clock: Clock,
) -> EditEvaluator:
    return PatternEvaluator(
        feature_id,
        buffer,
        predicate=LinePredicate(feature.marker),
        debounce_ms=debounce_ms,
        clock=clock,
    )


class EvaluatorRegistry:
    """Maps evaluator kind names to factories."""

    def __init__(self) -> None:
        self._factories: dict[str, EvaluatorFactory] = {}

    def register(self, kind: str, factory: EvaluatorFactory) -> None:
        """Register a factory under ``kind``.

        Raises:
            RegistryError: If ``kind`` is already registered
        """
        if kind in self._factories:
            msg = f"Evaluator kind already registered: {kind}"
            raise RegistryError(msg, details={"kind": kind})
        self._factories[kind] = factory

    def kinds(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories

    def create(
        self,
        feature_id: str,
        buffer: TextBuffer,
        feature: FeatureConfig,
        clock: Clock,
        debounce_ms: float | None = None,
    ) -> EditEvaluator:
        """Build an evaluator for one feature.

        Args:
            feature_id: Feature the evaluator reports
            buffer: Buffer the evaluator observes
            feature: Feature configuration
            clock: Time source for debounce
            debounce_ms: Fallback when the feature has no debounce of its own

        Returns:
            A fresh evaluator with its own state

        Raises:
            RegistryError: If the feature's evaluator kind is unknown
        """
        factory = self._factories.get(feature.evaluator)
        if factory is None:
            msg = f"Unknown evaluator kind: {feature.evaluator}"
            raise RegistryError(
                msg,
                details={"feature_id": feature_id, "available": self.kinds()},
            )

        if feature.debounce_ms is not None:
            debounce_ms = feature.debounce_ms
        elif debounce_ms is None:
            debounce_ms = DEFAULT_DEBOUNCE_MS
        return factory(feature_id, buffer, feature, debounce_ms, clock)

    def create_all(
        self,
        config: NudgeConfig,
        buffer: TextBuffer,
        clock: Clock,
    ) -> list[EditEvaluator]:
        """Build evaluators for every enabled feature in ``config``."""
        return [
            self.create(
                feature_id,
                buffer,
                feature,
                clock,
                debounce_ms=config.debounce_for(feature_id),
            )
            for feature_id, feature in config.enabled_features().items()
        ]


def default_registry() -> EvaluatorRegistry:
    """Registry with the built-in evaluator kinds."""
    registry = EvaluatorRegistry()
    registry.register("line_marker", _line_marker_factory)
    return registry
