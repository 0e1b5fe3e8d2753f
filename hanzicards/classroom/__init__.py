"""
HanziCards Classroom - Runtime components for studying a deck.

This module provides:
- KeyValueStore: Durable key/value storage
- DeckLoader: Load grade decks from data.json
- ProgressTracker: Track learned/review/mastered characters
- DeckNavigator: Move through a deck
- ReviewSlider: Page through review/mastered characters
- StudySession: Per-grade study state
"""

from .store import (
    KeyValueStore,
    DEFAULT_PROGRESS_DIR,
    DEFAULT_PROGRESS_DB,
)

from .loader import (
    DeckLoader,
    get_demo_deck,
    dedupe_entries,
)

from .progress import (
    ProgressTracker,
    progress_key,
    PROGRESS_KEY_PREFIX,
    SELECTED_GRADE_KEY,
    DEFAULT_GRADE,
)

from .navigator import (
    DeckNavigator,
)

from .pager import (
    ReviewSlider,
    SliderSource,
    page_count,
    page,
    DEFAULT_PAGE_SIZE,
)

from .session import (
    StudySession,
)

__all__ = [
    # Store
    "KeyValueStore",
    "DEFAULT_PROGRESS_DIR",
    "DEFAULT_PROGRESS_DB",
    # Loader
    "DeckLoader",
    "get_demo_deck",
    "dedupe_entries",
    # Progress
    "ProgressTracker",
    "progress_key",
    "PROGRESS_KEY_PREFIX",
    "SELECTED_GRADE_KEY",
    "DEFAULT_GRADE",
    # Navigator
    "DeckNavigator",
    # Pager
    "ReviewSlider",
    "SliderSource",
    "page_count",
    "page",
    "DEFAULT_PAGE_SIZE",
    # Session
    "StudySession",
]
