"""Notification sinks that receive fired suggestions."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console

from .models import Suggestion, SuggestionCategory


class NotificationSink(Protocol):
    """Receives a suggestion when its feature fires."""

    def notify(self, suggestion: Suggestion) -> None:
        ...


class ConsoleSink:
    """Prints suggestions to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def notify(self, suggestion: Suggestion) -> None:
        label = "Hotkey" if suggestion.category == SuggestionCategory.HOTKEY else "Setting"
        self.console.print(
            f"[bold cyan]{label} tip[/bold cyan] ({suggestion.id}): {suggestion.text}",
        )


class RecordingSink:
    """Keeps delivered suggestions in memory."""

    def __init__(self) -> None:
        self.delivered: list[Suggestion] = []

    def notify(self, suggestion: Suggestion) -> None:
        self.delivered.append(suggestion)

    @property
    def feature_ids(self) -> list[str]:
        return [s.id for s in self.delivered]
