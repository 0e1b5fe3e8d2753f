"""
HanziCards Schemas - Pydantic models for the flashcard app.

This module exports all schema classes for:
- Deck: source records, grade blocks, character entries
- Progress: character status and per-grade progress state
"""

# Deck schemas
from .deck import (
    CharacterEntry,
    DeckRecord,
    GradeDeck,
    DEMO_DECK,
)

# Progress schemas
from .progress import (
    CharacterStatus,
    ProgressState,
)

__all__ = [
    # Deck
    'CharacterEntry',
    'DeckRecord',
    'GradeDeck',
    'DEMO_DECK',
    # Progress
    'CharacterStatus',
    'ProgressState',
]
