"""NudgeKit command-line interface."""

from __future__ import annotations

import logging
import re
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .buffer import Document
from .catalog import SuggestionCatalog
from .clock import ManualClock
from .config import load_config, load_script
from .controller import SuggestionController
from .evaluators import default_registry
from .exceptions import BoundaryError, NudgeKitError
from .logging_config import setup_logging
from .models import NudgeConfig, PlatformFamily
from .notify import ConsoleSink

app = typer.Typer(
    name="nudge",
    help="NudgeKit: suggest editor features when edits repeat by hand",
    add_completion=False,
)
console = Console()

PLATFORM_CHOICES = {
    "auto": None,
    "mac_unix": PlatformFamily.MAC_UNIX,
    "windows": PlatformFamily.WINDOWS,
}


def _get_version_string() -> str:
    """Get version string from package metadata or pyproject.toml."""
    try:
        return get_version("nudgekit")
    except PackageNotFoundError:
        pass

    # Try to read version from pyproject.toml for development installs
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        content = pyproject_path.read_text()
        match = re.search(r'version\s*=\s*["\']([^"\']+)["\']', content)
        if match:
            return f"{match.group(1)} (development)"

    return "unknown"


def version_callback(value: bool) -> None:
    """Callback for --version flag."""
    if value:
        console.print(f"NudgeKit version {_get_version_string()}")
        raise typer.Exit


def _resolve_platform(choice: str | None, config: NudgeConfig) -> PlatformFamily | None:
    if choice is None:
        return config.platform
    key = choice.lower()
    if key not in PLATFORM_CHOICES:
        console.print(
            f"[red]Error:[/red] Unknown platform '{choice}' "
            f"(expected one of: {', '.join(PLATFORM_CHOICES)})",
        )
        raise typer.Exit(1)
    return PLATFORM_CHOICES[key]


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """NudgeKit: suggest editor features when edits repeat by hand."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def replay(
    script: Path = typer.Argument(
        ...,
        help="YAML edit script (text + edits with offset, text, at_ms)",
        exists=True,
        dir_okay=False,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="NudgeKit configuration file",
    ),
    platform: str | None = typer.Option(
        None,
        "--platform",
        "-p",
        help="Platform family for hotkey text: auto, mac_unix, windows",
    ),
) -> None:
    """Replay an edit script and show the suggestions it triggers."""
    try:
        config = load_config(config_path)
        edit_script = load_script(script)
        catalog = SuggestionCatalog(_resolve_platform(platform, config))

        clock = ManualClock()
        document = Document(edit_script.text)
        controller = SuggestionController(
            catalog,
            ConsoleSink(console),
            registry=default_registry(),
            config=config,
            clock=clock,
        )
        controller.attach(document)

        skipped = 0
        for index, edit in enumerate(edit_script.edits):
            clock.set(edit.at_ms)
            try:
                document.insert(edit.offset, edit.text)
            except BoundaryError as e:
                console.print(f"[yellow]Skipped edit {index}:[/yellow] {e}")
                skipped += 1

        controller.detach()

        console.print(
            f"\n[bold]Summary:[/bold] {len(edit_script.edits) - skipped} edits applied, "
            f"{len(controller.shown)} feature(s) suggested",
        )

    except NudgeKitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def suggestions(
    platform: str | None = typer.Option(
        None,
        "--platform",
        "-p",
        help="Platform family for hotkey text: auto, mac_unix, windows",
    ),
) -> None:
    """List every suggestion in the catalog."""
    catalog = SuggestionCatalog(_resolve_platform(platform, NudgeConfig()))

    table = Table(title=f"NudgeKit Suggestions ({catalog.platform.value})")
    table.add_column("Feature", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Suggestion", style="green")

    for suggestion in catalog.all():
        table.add_row(suggestion.id, suggestion.category.value, suggestion.text)

    console.print(table)


@app.command()
def doctor(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="NudgeKit configuration file",
    ),
) -> None:
    """Show effective configuration and the evaluators it enables."""
    try:
        config = load_config(config_path)
        registry = default_registry()
        catalog = SuggestionCatalog(config.platform)

        table = Table(title="NudgeKit Doctor")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Config File", str(config_path) if config_path else "(defaults)")
        table.add_row("Platform", catalog.platform.value)
        table.add_row("Default Debounce", f"{config.debounce_ms:g} ms")
        table.add_row("Repeat Suggestions", "yes" if config.repeat else "no")
        table.add_row("Evaluator Kinds", ", ".join(registry.kinds()))
        table.add_row("Enabled Features", str(len(config.enabled_features())))

        console.print(table)

        console.print("\n[bold]Features:[/bold]")
        problems = 0
        for feature_id, feature in sorted(config.features.items()):
            status = "[green]on[/green]" if feature.enabled else "[dim]off[/dim]"
            console.print(
                f"  {status} {feature_id}: {feature.evaluator} "
                f"marker={feature.marker!r} debounce={config.debounce_for(feature_id):g}ms",
            )
            if not feature.enabled:
                continue
            if feature.evaluator not in registry:
                console.print(
                    f"    [red]Unknown evaluator kind:[/red] {feature.evaluator}",
                )
                problems += 1
            if feature_id not in catalog and feature_id not in config.suggestions:
                console.print("    [red]No suggestion text for this feature[/red]")
                problems += 1

        if problems:
            raise typer.Exit(1)

    except NudgeKitError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def version() -> None:
    """Show NudgeKit version information."""
    console.print(f"NudgeKit version {_get_version_string()}")


def main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
