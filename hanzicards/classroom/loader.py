"""
DeckLoader - Load character decks from data.json.

Provides read-only access to:
- Available grade names
- The ordered deck for a grade

Any problem with the source (missing file, bad JSON, unknown grade,
malformed records) falls back to the built-in demo deck.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from hanzicards.schemas import CharacterEntry, GradeDeck, DEMO_DECK


logger = logging.getLogger(__name__)


def get_demo_deck() -> list[CharacterEntry]:
    """Five-character fallback deck."""
    return list(DEMO_DECK)


def dedupe_entries(entries: list[CharacterEntry]) -> list[CharacterEntry]:
    """Drop repeated characters, keeping the first occurrence."""
    seen = set()
    result = []
    for entry in entries:
        if entry.character in seen:
            logger.warning(f"Duplicate character {entry.character!r} in deck; keeping first entry")
            continue
        seen.add(entry.character)
        result.append(entry)
    return result


class DeckLoader:
    """
    Load grade decks from a JSON file.

    The file holds a list of {grade, characters: [{word, pinyin, words, sentence}]}.
    The file is read once and cached; a failed read is not retried.
    """

    def __init__(self, data_path: str | Path):
        """
        Initialize loader with path to data.json.

        Args:
            data_path: Path to the deck source file
        """
        self.data_path = Path(data_path)
        self._raw: Optional[list] = None
        self._loaded = False

    def _read_source(self) -> Optional[list]:
        """Read and parse the source file once. Returns None when unusable."""
        if self._loaded:
            return self._raw
        self._loaded = True

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Deck source not found: {self.data_path}")
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load deck source {self.data_path}: {e}")
            return None

        if not isinstance(data, list):
            logger.error(f"Deck source {self.data_path} must be a list of grades")
            return None

        self._raw = data
        return self._raw

    # -------------------------------------------------------------------------
    # Grades
    # -------------------------------------------------------------------------

    def get_grades(self) -> list[str]:
        """Grade names in source order."""
        data = self._read_source() or []
        return [
            item["grade"] for item in data
            if isinstance(item, dict) and isinstance(item.get("grade"), str)
        ]

    # -------------------------------------------------------------------------
    # Decks
    # -------------------------------------------------------------------------

    def get_grade_deck(self, grade: str) -> Optional[list[CharacterEntry]]:
        """Deck for a grade, or None if missing or malformed."""
        data = self._read_source()
        if data is None:
            return None

        block = next(
            (item for item in data if isinstance(item, dict) and item.get("grade") == grade),
            None,
        )
        if block is None:
            return None

        try:
            grade_deck = GradeDeck.model_validate(block)
        except ValidationError as e:
            logger.error(f"Malformed deck for grade {grade}: {e.error_count()} validation errors")
            return None

        return dedupe_entries([record.to_entry() for record in grade_deck.characters])

    def load_deck(self, grade: str) -> list[CharacterEntry]:
        """
        Load the deck for a grade.

        Falls back to the demo deck when the grade is unavailable or empty.
        """
        deck = self.get_grade_deck(grade)
        if not deck:
            logger.warning(f"No data found for grade {grade!r}, using demo deck")
            return get_demo_deck()
        logger.info(f"Loaded {len(deck)} characters for grade {grade}")
        return deck
