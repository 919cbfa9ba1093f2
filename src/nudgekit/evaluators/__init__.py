"""Edit evaluators that detect manually repeated editor actions."""

from .base import EditEvaluator, EvaluatorBase
from .classifier import EditClassifier
from .pattern import PatternEvaluator
from .predicates import LinePredicate
from .registry import BLOCK_COMMENT_FEATURE_ID, EvaluatorRegistry, default_registry
from .tracker import AdjacencyTracker

__all__ = [
    "AdjacencyTracker",
    "BLOCK_COMMENT_FEATURE_ID",
    "EditClassifier",
    "EditEvaluator",
    "EvaluatorBase",
    "EvaluatorRegistry",
    "LinePredicate",
    "PatternEvaluator",
    "default_registry",
]
