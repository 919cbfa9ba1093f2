"""Tests for NudgeKit data models."""

import dataclasses

import pytest
from pydantic import ValidationError

from nudgekit.models import (
    EditEvent,
    EditScript,
    FeatureConfig,
    MarkerState,
    NudgeConfig,
    PlatformFamily,
    ScriptedEdit,
    Suggestion,
    SuggestionCategory,
)


class TestEditEvent:
    """Test EditEvent values."""

    def test_end_offset(self) -> None:
        """Test offset just past the inserted text."""
        assert EditEvent(offset=4, inserted_text="//").end_offset == 6

    def test_frozen(self) -> None:
        """Test that events are immutable."""
        event = EditEvent(offset=0, inserted_text="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.offset = 3  # type: ignore[misc]


class TestMarkerState:
    """Test MarkerState sentinels."""

    def test_default_is_empty(self) -> None:
        """Test that a fresh state has no marked line."""
        state = MarkerState()
        assert state.is_empty
        assert state.last_marked_line < -1
        assert state.last_marked_at < 0

    def test_recorded_state(self) -> None:
        """Test a state with a recorded line."""
        assert not MarkerState(last_marked_line=0, last_marked_at=0.0).is_empty


class TestSuggestion:
    """Test Suggestion validation."""

    def test_valid_suggestion(self) -> None:
        """Test creating a valid suggestion."""
        suggestion = Suggestion(
            id="blockCommentSuggestion",
            text="Try using 'CMD + /' to comment several lines.",
            category=SuggestionCategory.HOTKEY,
        )
        assert suggestion.platform_variant is True
        assert suggestion.category == SuggestionCategory.HOTKEY

    def test_invalid_id(self) -> None:
        """Test invalid feature ID format."""
        with pytest.raises(ValidationError, match="Feature ID must be camelCase"):
            Suggestion(id="block-comment", text="x", category="hotkey")


class TestFeatureConfig:
    """Test FeatureConfig validation."""

    def test_defaults(self) -> None:
        """Test the default line marker evaluator."""
        feature = FeatureConfig()
        assert feature.evaluator == "line_marker"
        assert feature.marker == "//"
        assert feature.debounce_ms is None
        assert feature.enabled

    def test_marker_is_stripped(self) -> None:
        """Test surrounding whitespace is removed from markers."""
        assert FeatureConfig(marker=" # ").marker == "#"

    def test_blank_marker(self) -> None:
        """Test whitespace-only markers are rejected."""
        with pytest.raises(ValidationError, match="non-whitespace"):
            FeatureConfig(marker="   ")

    def test_negative_debounce(self) -> None:
        """Test negative debounce windows are rejected."""
        with pytest.raises(ValidationError, match="debounce_ms must be >= 0"):
            FeatureConfig(debounce_ms=-5)


class TestNudgeConfig:
    """Test NudgeConfig defaults and lookups."""

    def test_defaults(self) -> None:
        """Test the built-in block comment feature."""
        config = NudgeConfig()
        assert config.debounce_ms == 100.0
        assert config.platform is None
        assert not config.repeat
        assert list(config.features) == ["blockCommentSuggestion"]
        assert config.features["blockCommentSuggestion"].marker == "//"

    def test_debounce_fallback(self) -> None:
        """Test per-feature debounce overrides the global value."""
        config = NudgeConfig(
            debounce_ms=120,
            features={
                "blockCommentSuggestion": FeatureConfig(),
                "hashCommentSuggestion": FeatureConfig(marker="#", debounce_ms=300),
            },
        )
        assert config.debounce_for("blockCommentSuggestion") == 120
        assert config.debounce_for("hashCommentSuggestion") == 300
        assert config.debounce_for("unknownSuggestion") == 120

    def test_enabled_features(self) -> None:
        """Test disabled features are filtered out."""
        config = NudgeConfig(
            features={
                "blockCommentSuggestion": FeatureConfig(enabled=False),
                "hashCommentSuggestion": FeatureConfig(marker="#"),
            },
        )
        assert list(config.enabled_features()) == ["hashCommentSuggestion"]

    def test_invalid_feature_id(self) -> None:
        """Test feature keys must follow the identifier format."""
        with pytest.raises(ValidationError, match="Invalid feature ID"):
            NudgeConfig(features={"Block Comment": FeatureConfig()})

    def test_platform_value(self) -> None:
        """Test platform parsing from strings."""
        assert NudgeConfig(platform="windows").platform == PlatformFamily.WINDOWS


class TestEditScript:
    """Test EditScript validation."""

    def test_valid_script(self) -> None:
        """Test a script converts edits to events."""
        script = EditScript(
            text="a\nb\n",
            edits=[
                ScriptedEdit(offset=0, text="//"),
                ScriptedEdit(offset=4, text="//", at_ms=200),
            ],
        )
        assert script.edits[1].to_event() == EditEvent(offset=4, inserted_text="//")

    def test_times_must_not_decrease(self) -> None:
        """Test out-of-order edit times are rejected."""
        with pytest.raises(ValidationError, match="non-decreasing"):
            EditScript(
                edits=[
                    ScriptedEdit(offset=0, text="//", at_ms=300),
                    ScriptedEdit(offset=0, text="//", at_ms=100),
                ],
            )

    def test_negative_offset(self) -> None:
        """Test negative offsets are rejected."""
        with pytest.raises(ValidationError):
            ScriptedEdit(offset=-1, text="x")
