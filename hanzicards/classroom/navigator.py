"""
DeckNavigator - Cursor over the characters of one deck.

Provides:
- Next/previous navigation clamped to the deck bounds
- Jump to a character by value
- Position data for the progress bar
"""

from typing import Optional

from hanzicards.schemas import CharacterEntry


class DeckNavigator:
    """
    Navigate through a deck one character at a time.

    The index always stays within [0, len(deck) - 1]; next/prev at the
    ends are no-ops rather than wrapping around.
    """

    def __init__(self, entries: list[CharacterEntry], start_index: int = 0):
        """
        Initialize navigator.

        Args:
            entries: Ordered deck entries (characters must be unique)
            start_index: Initial position, clamped into range
        """
        self._entries = list(entries)
        self._index_by_char: dict[str, int] = {}
        for idx, entry in enumerate(self._entries):
            self._index_by_char.setdefault(entry.character, idx)
        self.current_index = self._clamp(start_index)

    def _clamp(self, index: int) -> int:
        if not self._entries:
            return 0
        return max(0, min(index, len(self._entries) - 1))

    @property
    def entries(self) -> list[CharacterEntry]:
        return list(self._entries)

    @property
    def total(self) -> int:
        """Number of characters in the deck."""
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def current(self) -> Optional[CharacterEntry]:
        """Entry under the cursor, or None for an empty deck."""
        if not self._entries:
            return None
        return self._entries[self.current_index]

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self._entries) - 1

    @property
    def has_prev(self) -> bool:
        return self.current_index > 0

    def next(self) -> bool:
        """Advance one card. Returns False at the end."""
        if not self.has_next:
            return False
        self.current_index += 1
        return True

    def prev(self) -> bool:
        """Go back one card. Returns False at the start."""
        if not self.has_prev:
            return False
        self.current_index -= 1
        return True

    def index_of(self, character: str) -> Optional[int]:
        """Position of the first entry for character."""
        return self._index_by_char.get(character)

    def jump_to(self, character: str) -> bool:
        """Move to character. No-op if it isn't in the deck."""
        idx = self.index_of(character)
        if idx is None:
            return False
        self.current_index = idx
        return True

    def get(self, character: str) -> Optional[CharacterEntry]:
        idx = self.index_of(character)
        return self._entries[idx] if idx is not None else None

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    @property
    def position(self) -> tuple[int, int]:
        """
        Position as (current, total), 1-based.

        Returns (0, 0) for an empty deck.
        """
        if not self._entries:
            return (0, 0)
        return (self.current_index + 1, len(self._entries))

    @property
    def progress_percent(self) -> float:
        current, total = self.position
        return round(current / total * 100, 1) if total > 0 else 0.0
