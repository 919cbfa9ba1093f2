"""Suggestion text and hotkeys per feature and platform."""

from __future__ import annotations

import platform as _platform

from .exceptions import CatalogError
from .models import PlatformFamily, Suggestion, SuggestionCategory

# Hotkeys that vary between operating systems
_PLATFORM_HOTKEYS: dict[str, dict[PlatformFamily, str]] = {
    "blockCommentSuggestion": {
        PlatformFamily.MAC_UNIX: "Try using 'CMD + /' to comment several lines.",
        PlatformFamily.WINDOWS: "Try using 'CTRL + /' to comment several lines.",
    },
    "variableRenameRefactorSuggestion": {
        PlatformFamily.MAC_UNIX: (
            "Try using 'CMD + OPTION + R' to rename all instances of a "
            "variable, class, or method."
        ),
        PlatformFamily.WINDOWS: (
            "Try using 'ALT + SHIFT + R' to rename all instances of a "
            "variable, class, or method."
        ),
    },
    "addImportStatementsSuggestion": {
        PlatformFamily.MAC_UNIX: "Try using 'CMD + SHIFT + O' to add import statements.",
        PlatformFamily.WINDOWS: "Try using 'CTRL + SHIFT + O' to add import statements.",
    },
    "removeUnusedImportStatementsSuggestion": {
        PlatformFamily.MAC_UNIX: "Try using 'CMD + SHIFT + O' to remove unused imports.",
        PlatformFamily.WINDOWS: "Try using 'CTRL + SHIFT + O' to remove unused imports.",
    },
    "correctIndentationsSuggestion": {
        PlatformFamily.MAC_UNIX: "Try using 'CMD + I' to correct indentation.",
        PlatformFamily.WINDOWS: "Try using 'CTRL + I' to correct indentation.",
    },
}

# Hotkeys that remain the same between operating systems
_HOTKEYS: dict[str, str] = {
    "getterSetterSuggestion": (
        "Try using 'ALT + SHIFT + S, R' to automatically generate getters and setters."
    ),
}

_CONFIGURATIONS: dict[str, str] = {
    "enableAutocompleteSuggestion": "Enable content assist auto activation",
    "enableSmartSemicolonSuggestion": "Enable smart semicolon activation",
    "enableShadowedVariableWarning": "Enable shadowed variable warning",
    "trailingWhiteSpaceSuggestion": "Automatically remove trailing white spaces on save",
}


def detect_platform(system: str | None = None) -> PlatformFamily:
    """Map an OS name (``platform.system()`` by default) to a family."""
    name = (system if system is not None else _platform.system()).lower()
    if name.startswith(("windows", "cygwin", "msys")):
        return PlatformFamily.WINDOWS
    return PlatformFamily.MAC_UNIX


class SuggestionCatalog:
    """Lookup of suggestions by feature identifier for one platform."""

    def __init__(self, platform: PlatformFamily | None = None) -> None:
        self.platform = platform or detect_platform()
        self._suggestions: dict[str, Suggestion] = {}

        for feature_id, variants in _PLATFORM_HOTKEYS.items():
            self._add(feature_id, variants[self.platform], SuggestionCategory.HOTKEY)
        for feature_id, text in _HOTKEYS.items():
            self._add(feature_id, text, SuggestionCategory.HOTKEY)
        for feature_id, text in _CONFIGURATIONS.items():
            self._add(feature_id, text, SuggestionCategory.CONFIG)

    def _add(self, feature_id: str, text: str, category: SuggestionCategory) -> None:
        self._suggestions[feature_id] = Suggestion(
            id=feature_id,
            text=text,
            category=category,
            platform_variant=True,
        )

    def get(self, feature_id: str) -> Suggestion:
        """Suggestion for ``feature_id``.

        Raises:
            CatalogError: If the feature has no suggestion
        """
        try:
            return self._suggestions[feature_id]
        except KeyError:
            msg = f"No suggestion for feature: {feature_id}"
            raise CatalogError(
                msg,
                details={"feature_id": feature_id, "platform": self.platform.value},
            ) from None

    def register(
        self,
        feature_id: str,
        text: str,
        category: SuggestionCategory = SuggestionCategory.HOTKEY,
    ) -> None:
        """Add or replace a suggestion."""
        self._add(feature_id, text, category)

    def override(self, feature_id: str, text: str) -> None:
        """Replace the display text of a known suggestion.

        Raises:
            CatalogError: If the feature has no suggestion
        """
        current = self.get(feature_id)
        self._suggestions[feature_id] = current.model_copy(update={"text": text})

    def copy(self) -> SuggestionCatalog:
        """Independent catalog with the same platform and suggestions."""
        clone = SuggestionCatalog(self.platform)
        clone._suggestions = self.as_dict()
        return clone

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._suggestions

    def __len__(self) -> int:
        return len(self._suggestions)

    def all(self) -> list[Suggestion]:
        return sorted(self._suggestions.values(), key=lambda s: (s.category.value, s.id))

    def as_dict(self) -> dict[str, Suggestion]:
        return dict(self._suggestions)
