"""Tests for CLI commands."""

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from nudgekit.cli import app


class TestCLI:
    """Test CLI commands."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Create CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def script(self, tmp_path: Path) -> Path:
        """Edit script that comments two adjacent lines by hand."""
        data = {
            "text": "int x = 1;\nint y = 2;\n",
            "edits": [
                {"offset": 0, "text": "//", "at_ms": 0},
                {"offset": 13, "text": "//", "at_ms": 500},
                {"offset": 999, "text": "//", "at_ms": 900},
            ],
        }
        path = tmp_path / "edits.yaml"
        with path.open("w") as f:
            yaml.dump(data, f)
        return path

    def test_replay_reports_suggestion(self, runner: CliRunner, script: Path) -> None:
        """Test replaying manual commenting."""
        result = runner.invoke(app, ["replay", str(script), "--platform", "windows"])

        assert result.exit_code == 0
        assert "blockCommentSuggestion" in result.stdout
        assert "CTRL" in result.stdout
        assert "Skipped edit 2" in result.stdout
        assert "1 feature(s) suggested" in result.stdout

    def test_replay_fast_edits(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that near-simultaneous edits suggest nothing."""
        path = tmp_path / "edits.yaml"
        with path.open("w") as f:
            yaml.dump(
                {
                    "text": "a;\nb;\n",
                    "edits": [
                        {"offset": 0, "text": "//", "at_ms": 0},
                        {"offset": 5, "text": "//", "at_ms": 1},
                    ],
                },
                f,
            )

        result = runner.invoke(app, ["replay", str(path)])

        assert result.exit_code == 0
        assert "0 feature(s) suggested" in result.stdout

    def test_replay_invalid_config(
        self,
        runner: CliRunner,
        script: Path,
        tmp_path: Path,
    ) -> None:
        """Test that configuration errors exit with status 1."""
        config = tmp_path / "nudge.yaml"
        config.write_text("debounce_ms: -1\n", encoding="utf-8")

        result = runner.invoke(app, ["replay", str(script), "--config", str(config)])

        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_replay_unknown_platform(self, runner: CliRunner, script: Path) -> None:
        """Test rejecting unknown platform names."""
        result = runner.invoke(app, ["replay", str(script), "--platform", "amiga"])
        assert result.exit_code == 1
        assert "Unknown platform" in result.stdout

    def test_suggestions_per_platform(self, runner: CliRunner) -> None:
        """Test listing the catalog for each platform family."""
        windows = runner.invoke(app, ["suggestions", "--platform", "windows"])
        mac = runner.invoke(app, ["suggestions", "--platform", "mac_unix"])

        assert windows.exit_code == 0
        assert mac.exit_code == 0
        assert "CTRL" in windows.stdout
        assert "CMD" not in windows.stdout
        assert "CMD" in mac.stdout

    def test_doctor_defaults(self, runner: CliRunner) -> None:
        """Test doctor with the default configuration."""
        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0
        assert "NudgeKit Doctor" in result.stdout
        assert "blockCommentSuggestion" in result.stdout

    def test_doctor_flags_problems(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test doctor with an unknown evaluator kind."""
        config = tmp_path / "nudge.yaml"
        with config.open("w") as f:
            yaml.dump(
                {"features": {"getterSetterSuggestion": {"evaluator": "getter_setter"}}},
                f,
            )

        result = runner.invoke(app, ["doctor", "--config", str(config)])

        assert result.exit_code == 1
        assert "Unknown evaluator kind" in result.stdout

    def test_version(self, runner: CliRunner) -> None:
        """Test version output."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "NudgeKit version" in result.stdout

    def test_verbose_flag(self, runner: CliRunner, script: Path) -> None:
        """Test that verbose logging does not disturb the command."""
        result = runner.invoke(app, ["--verbose", "replay", str(script)])
        assert result.exit_code == 0
