"""Input-method composition state for the editor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ImeState:
    """Tracks the marked (preedit) byte range while the IME is composing."""

    marked_range: range | None = None

    def is_composing(self) -> bool:
        """Whether a composition is in progress."""
        return self.marked_range is not None

    def set_marked(self, marked: range) -> None:
        """Start or update a composition with the given marked range."""
        self.marked_range = marked

    def clear(self) -> None:
        """End the composition, whether committed or cancelled."""
        self.marked_range = None

    def take_marked(self) -> range | None:
        """Return the marked range and clear it."""
        marked, self.marked_range = self.marked_range, None
        return marked