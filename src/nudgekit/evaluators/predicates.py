"""Line classification predicates."""

from __future__ import annotations


class LinePredicate:
    """Matches lines whose stripped text starts with a marker token."""

    def __init__(self, marker: str = "//") -> None:
        if not marker:
            msg = "Marker token must not be empty"
            raise ValueError(msg)
        self.marker = marker

    def is_marked(self, line_text: str) -> bool:
        return line_text.strip().startswith(self.marker)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(marker={self.marker!r})"
