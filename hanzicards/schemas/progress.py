"""
Progress tracking schemas for HanziCards.

Defines Pydantic models for learning progress including:
- Character status
- Per-grade progress state
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum


class CharacterStatus(str, Enum):
    NEW = "new"
    LEARNED = "learned"
    REVIEW = "review"
    MASTERED = "mastered"


class ProgressState(BaseModel):
    """
    Status sets for one grade.

    Lists hold unique character values. Order carries no meaning;
    review and mastered are kept disjoint and mastered is a subset of learned.
    """
    learned: list[str] = []
    review: list[str] = []
    mastered: list[str] = []
    last_updated: Optional[datetime] = None

    def same_membership(self, other: "ProgressState") -> bool:
        """Compare status sets ignoring order and timestamps."""
        return (
            set(self.learned) == set(other.learned)
            and set(self.review) == set(other.review)
            and set(self.mastered) == set(other.mastered)
        )
