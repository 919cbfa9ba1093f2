"""Core data models for NudgeKit.

Runtime values that flow through the evaluators on every keystroke are plain
dataclasses. Configuration and catalog entries are pydantic models.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, field_validator

FEATURE_ID_PATTERN = r"^[a-z][A-Za-z0-9]*$"

# Any value < -1 keeps the first marked line from ever being adjacent
NO_LINE = -2
# Any value < 0
NO_TIME = -1.0


@dataclass(frozen=True)
class EditEvent:
    """One atomic insertion into a buffer."""

    offset: int
    inserted_text: str

    @property
    def end_offset(self) -> int:
        """Offset just past the inserted text."""
        return self.offset + len(self.inserted_text)


@dataclass(frozen=True)
class LineSnapshot:
    """A single line of a buffer at the time of the query."""

    line_index: int
    start_offset: int
    length: int
    text: str


@dataclass
class MarkerState:
    """Last line that newly satisfied a marker, and when (milliseconds)."""

    last_marked_line: int = NO_LINE
    last_marked_at: float = NO_TIME

    @property
    def is_empty(self) -> bool:
        return self.last_marked_line < -1 or self.last_marked_at < 0


@dataclass(frozen=True)
class FireSignal:
    """Outcome of one evaluator for one edit event."""

    feature_id: str
    fired: bool


class SuggestionCategory(str, Enum):
    """Kind of action a suggestion points the user to."""

    CONFIG = "config"
    HOTKEY = "hotkey"


class PlatformFamily(str, Enum):
    """Platform families with distinct hotkey text."""

    MAC_UNIX = "mac_unix"
    WINDOWS = "windows"


class Suggestion(BaseModel):
    """A user-facing suggestion for one feature."""

    id: str = Field(..., description="Feature identifier")
    text: str = Field(..., description="Display text")
    category: SuggestionCategory = Field(..., description="Config or hotkey")
    platform_variant: bool = Field(
        default=True,
        description="Whether the suggestion applies on the current platform",
    )

    @field_validator("id")
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        """Validate feature identifiers are camelCase."""
        if not re.match(FEATURE_ID_PATTERN, v):
            msg = "Feature ID must be camelCase (e.g., blockCommentSuggestion)"
            raise ValueError(msg)
        return v


class FeatureConfig(BaseModel):
    """Configuration for one feature evaluator."""

    evaluator: str = Field(default="line_marker", description="Evaluator kind")
    marker: str = Field(default="//", description="Line prefix marker token")
    debounce_ms: float | None = Field(
        default=None,
        description="Debounce window, falls back to the global value",
    )
    enabled: bool = Field(default=True, description="Whether the feature is active")

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Reject markers that are empty once stripped."""
        if not v.strip():
            msg = "Marker must contain at least one non-whitespace character"
            raise ValueError(msg)
        return v.strip()

    @field_validator("debounce_ms")
    @classmethod
    def validate_debounce(cls, v: float | None) -> float | None:
        """Reject negative debounce windows."""
        if v is not None and v < 0:
            msg = "debounce_ms must be >= 0"
            raise ValueError(msg)
        return v


def _default_features() -> dict[str, FeatureConfig]:
    return {"blockCommentSuggestion": FeatureConfig(marker="//")}


class NudgeConfig(BaseModel):
    """Top-level NudgeKit configuration."""

    debounce_ms: float = Field(default=100.0, ge=0, description="Default debounce")
    platform: PlatformFamily | None = Field(
        default=None,
        description="Platform family for hotkey text, autodetected when unset",
    )
    repeat: bool = Field(
        default=False,
        description="Deliver a suggestion on every fire instead of once",
    )
    features: dict[str, FeatureConfig] = Field(default_factory=_default_features)
    suggestions: dict[str, str] = Field(
        default_factory=dict,
        description="Display text overrides keyed by feature ID",
    )

    @field_validator("features")
    @classmethod
    def validate_feature_ids(
        cls,
        v: dict[str, FeatureConfig],
    ) -> dict[str, FeatureConfig]:
        """Validate feature keys follow the identifier format."""
        for feature_id in v:
            if not re.match(FEATURE_ID_PATTERN, feature_id):
                msg = f"Invalid feature ID: {feature_id}"
                raise ValueError(msg)
        return v

    def debounce_for(self, feature_id: str) -> float:
        """Effective debounce window for a feature."""
        feature = self.features.get(feature_id)
        if feature is None or feature.debounce_ms is None:
            return self.debounce_ms
        return feature.debounce_ms

    def enabled_features(self) -> dict[str, FeatureConfig]:
        """Features with ``enabled`` set."""
        return {k: v for k, v in self.features.items() if v.enabled}


class ScriptedEdit(BaseModel):
    """One insertion in a replay script."""

    offset: int = Field(..., ge=0)
    text: str = Field(..., description="Inserted text")
    at_ms: float = Field(default=0.0, ge=0, description="Clock time of the edit")

    def to_event(self) -> EditEvent:
        return EditEvent(offset=self.offset, inserted_text=self.text)


class EditScript(BaseModel):
    """Initial buffer text plus a sequence of timed insertions."""

    text: str = Field(default="", description="Initial buffer contents")
    edits: list[ScriptedEdit] = Field(default_factory=list)

    @field_validator("edits")
    @classmethod
    def validate_monotonic(cls, v: list[ScriptedEdit]) -> list[ScriptedEdit]:
        """Edit times must not go backwards."""
        for prev, cur in zip(v, v[1:]):
            if cur.at_ms < prev.at_ms:
                msg = "Edit times must be non-decreasing"
                raise ValueError(msg)
        return v
