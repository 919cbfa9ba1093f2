"""NudgeKit: suggest built-in editor features when users repeat edits by hand."""

__version__ = "0.1.0"
__author__ = "NudgeKit Contributors"
__description__ = "Suggest editor features when edits repeat by hand"

from .buffer import Document, TextBuffer
from .catalog import SuggestionCatalog
from .clock import ManualClock, SystemClock
from .controller import SuggestionController
from .evaluators import (
    AdjacencyTracker,
    EditClassifier,
    LinePredicate,
    PatternEvaluator,
    default_registry,
)
from .models import EditEvent, FireSignal, NudgeConfig

__all__ = [
    "AdjacencyTracker",
    "Document",
    "EditClassifier",
    "EditEvent",
    "FireSignal",
    "LinePredicate",
    "ManualClock",
    "NudgeConfig",
    "PatternEvaluator",
    "SuggestionCatalog",
    "SuggestionController",
    "SystemClock",
    "TextBuffer",
    "default_registry",
]
