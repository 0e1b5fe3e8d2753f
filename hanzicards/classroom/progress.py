"""
ProgressTracker - Track character learning status per grade.

Stores progress in the key/value store under learningProgress_<grade>:
- learned / review / mastered character lists
- lastUpdated timestamp
Also remembers the last selected grade.
"""

import json
import logging
from datetime import datetime
from typing import Any

from hanzicards.schemas import CharacterStatus, ProgressState

from .store import KeyValueStore


logger = logging.getLogger(__name__)

PROGRESS_KEY_PREFIX = "learningProgress_"
SELECTED_GRADE_KEY = "selectedGrade"
DEFAULT_GRADE = "一年级上册"


def progress_key(grade: str) -> str:
    """Store key holding progress for a grade."""
    return f"{PROGRESS_KEY_PREFIX}{grade}"


def _clean_characters(value: Any) -> list[str]:
    """Keep unique string items in first-seen order; anything else becomes []."""
    if not isinstance(value, list):
        return []
    result = []
    for item in value:
        if isinstance(item, str) and item and item not in result:
            result.append(item)
    return result


class ProgressTracker:
    """
    Load, mutate and save ProgressState objects.

    Mutations work on the state passed in and return True when something
    changed. Callers save after a change.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self, grade: str) -> ProgressState:
        """
        Load progress for a grade.

        Missing or malformed data yields an empty state. Never raises for
        bad stored data.
        """
        raw = self.store.get(progress_key(grade))
        if raw is None:
            return ProgressState()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding malformed progress for {grade}: {e}")
            return ProgressState()

        if not isinstance(data, dict):
            logger.warning(f"Discarding progress for {grade}: expected an object, got {type(data).__name__}")
            return ProgressState()

        last_updated = None
        if isinstance(data.get("lastUpdated"), str):
            try:
                last_updated = datetime.fromisoformat(data["lastUpdated"].replace("Z", "+00:00"))
            except ValueError:
                last_updated = None

        return ProgressState(
            learned=_clean_characters(data.get("learned")),
            review=_clean_characters(data.get("review")),
            mastered=_clean_characters(data.get("mastered")),
            last_updated=last_updated,
        )

    def save(self, state: ProgressState, grade: str):
        """Overwrite stored progress for a grade with the given state."""
        state.last_updated = datetime.now().astimezone()
        payload = {
            "learned": list(state.learned),
            "review": list(state.review),
            "mastered": list(state.mastered),
            "lastUpdated": state.last_updated.isoformat(),
        }
        self.store.set(progress_key(grade), json.dumps(payload, ensure_ascii=False))

    def reset(self, grade: str):
        """Delete stored progress for a grade."""
        self.store.delete(progress_key(grade))

    def get_tracked_grades(self) -> list[str]:
        """Grades that have stored progress."""
        return [
            key[len(PROGRESS_KEY_PREFIX):]
            for key in self.store.keys(PROGRESS_KEY_PREFIX)
        ]

    # -------------------------------------------------------------------------
    # Status Changes
    # -------------------------------------------------------------------------

    def mark_learned(self, state: ProgressState, character: str) -> bool:
        """Add character to learned."""
        if character in state.learned:
            return False
        state.learned.append(character)
        return True

    def mark_for_review(self, state: ProgressState, character: str) -> bool:
        """Add character to review and take it out of mastered. Learned is untouched."""
        changed = False
        if character not in state.review:
            state.review.append(character)
            changed = True
        if character in state.mastered:
            state.mastered.remove(character)
            changed = True
        return changed

    def mark_mastered(self, state: ProgressState, character: str) -> bool:
        """Add character to mastered (and learned) and take it out of review."""
        changed = False
        if character not in state.mastered:
            state.mastered.append(character)
            changed = True
        if character in state.review:
            state.review.remove(character)
            changed = True
        if character not in state.learned:
            state.learned.append(character)
            changed = True
        return changed

    def status_of(self, state: ProgressState, character: str) -> CharacterStatus:
        """Status for display: mastered > review > learned > new."""
        if character in state.mastered:
            return CharacterStatus.MASTERED
        if character in state.review:
            return CharacterStatus.REVIEW
        if character in state.learned:
            return CharacterStatus.LEARNED
        return CharacterStatus.NEW

    # -------------------------------------------------------------------------
    # Selected Grade
    # -------------------------------------------------------------------------

    def get_selected_grade(self, default: str = DEFAULT_GRADE) -> str:
        """Grade chosen in a previous session, or default."""
        return self.store.get(SELECTED_GRADE_KEY) or default

    def set_selected_grade(self, grade: str):
        self.store.set(SELECTED_GRADE_KEY, grade)

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_stats(self, state: ProgressState, total: int) -> dict:
        """
        Get display counters.

        Args:
            state: Progress for the current grade
            total: Number of characters in the deck

        Returns:
            Dictionary with counts and mastery percentage
        """
        return {
            "total": total,
            "learned": len(state.learned),
            "review": len(state.review),
            "mastered": len(state.mastered),
            "mastered_percent": round(len(state.mastered) / total * 100, 1) if total > 0 else 0,
        }
