"""
StudySession - Everything one study page needs for one grade.

A session owns the grade, its deck navigator, its progress state and the
review slider. User actions go through the session so every mutation is
followed by a save.
"""

import logging
from typing import Callable, Optional

from hanzicards.schemas import CharacterEntry, CharacterStatus, ProgressState

from .loader import DeckLoader
from .navigator import DeckNavigator
from .pager import ReviewSlider, SliderSource
from .progress import ProgressTracker


logger = logging.getLogger(__name__)

Speaker = Callable[[str], Optional[bytes]]


class StudySession:
    """
    Study state for one grade.

    Combines DeckNavigator (position), ProgressTracker (status persistence)
    and ReviewSlider (paged review view).
    """

    def __init__(
        self,
        grade: str,
        deck: list[CharacterEntry],
        tracker: ProgressTracker,
        page_size: int = 4,
    ):
        """
        Initialize session and load saved progress for the grade.

        Args:
            grade: Grade name, used as the progress key
            deck: Ordered deck entries
            tracker: ProgressTracker bound to the durable store
            page_size: Cards per slider page
        """
        self.grade = grade
        self.tracker = tracker
        self.navigator = DeckNavigator(deck)
        self.slider = ReviewSlider(page_size=page_size)
        self.progress: ProgressState = tracker.load(grade)

    @classmethod
    def start(cls, grade: str, loader: DeckLoader, tracker: ProgressTracker, page_size: int = 4) -> "StudySession":
        """Load the deck for grade and open a session on it."""
        deck = loader.load_deck(grade)
        return cls(grade, deck, tracker, page_size=page_size)

    def switch_grade(self, grade: str, loader: DeckLoader) -> "StudySession":
        """Remember grade as the selected one and return a session for it."""
        self.tracker.set_selected_grade(grade)
        return StudySession.start(grade, loader, self.tracker, page_size=self.slider.page_size)

    # -------------------------------------------------------------------------
    # Current Card
    # -------------------------------------------------------------------------

    def current(self) -> Optional[CharacterEntry]:
        return self.navigator.current()

    def status(self, character: Optional[str] = None) -> Optional[CharacterStatus]:
        """Status of character (default: current card); None for an empty deck."""
        if character is None:
            entry = self.current()
            if entry is None:
                return None
            character = entry.character
        return self.tracker.status_of(self.progress, character)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _save(self):
        self.tracker.save(self.progress, self.grade)

    def speak_current(self, speaker: Speaker) -> Optional[bytes]:
        """
        Read the current character aloud and mark it learned.

        The learned mark is saved before speech is requested, so a speech
        failure cannot lose it.
        """
        entry = self.current()
        if entry is None:
            return None
        if self.tracker.mark_learned(self.progress, entry.character):
            self._save()
            logger.info(f"Marked {entry.character} learned ({self.grade})")
        return speaker(entry.character)

    def mark_review(self) -> Optional[str]:
        """Mark the current character for review. Returns the character."""
        entry = self.current()
        if entry is None:
            return None
        self.tracker.mark_for_review(self.progress, entry.character)
        self._save()
        return entry.character

    def mark_mastered(self) -> Optional[str]:
        """Mark the current character mastered. Returns the character."""
        entry = self.current()
        if entry is None:
            return None
        self.tracker.mark_mastered(self.progress, entry.character)
        self._save()
        return entry.character

    def reset_progress(self):
        """Forget all progress for this grade."""
        self.tracker.reset(self.grade)
        self.progress = ProgressState()
        self.slider.close()

    # -------------------------------------------------------------------------
    # Slider
    # -------------------------------------------------------------------------

    def slider_characters(self) -> list[str]:
        """Characters of the open slider's source set."""
        if self.slider.source == SliderSource.REVIEW:
            return list(self.progress.review)
        if self.slider.source == SliderSource.MASTERED:
            return list(self.progress.mastered)
        return []

    def slider_items(self) -> list[CharacterEntry]:
        """
        Source set as deck entries, in deck order.

        Characters saved from an older version of the deck are appended
        as bare entries.
        """
        characters = self.slider_characters()
        members = set(characters)
        items = [entry for entry in self.navigator.entries if entry.character in members]
        known = {entry.character for entry in items}
        items.extend(CharacterEntry(character=c) for c in characters if c not in known)
        return items

    def select_from_slider(self, character: str) -> bool:
        """Show character on the main card and close the slider."""
        moved = self.navigator.jump_to(character)
        self.slider.close()
        return moved

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def stats(self) -> dict:
        return self.tracker.get_stats(self.progress, self.navigator.total)
