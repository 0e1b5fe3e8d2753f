"""
Schema validation tests for HanziCards.

Tests all Pydantic models to ensure they validate correctly.
"""

import pytest
from datetime import datetime
from pydantic import ValidationError

from hanzicards.schemas import (
    # Deck
    CharacterEntry,
    DeckRecord,
    GradeDeck,
    DEMO_DECK,
    # Progress
    CharacterStatus,
    ProgressState,
)


class TestDeckSchemas:
    """Test deck-related schemas."""

    def test_character_entry_valid(self):
        entry = CharacterEntry(
            character="天",
            pinyin="tiān",
            word_groups=["天空", "今天"],
            sentence="蓝蓝的天空像大海。"
        )
        assert entry.character == "天"
        assert entry.word_groups == ["天空", "今天"]

    def test_character_entry_requires_character(self):
        with pytest.raises(ValueError):
            CharacterEntry(character="", pinyin="tiān")

    def test_character_entry_is_frozen(self):
        entry = CharacterEntry(character="天")
        with pytest.raises(ValidationError):
            entry.character = "地"

    def test_character_entry_defaults(self):
        entry = CharacterEntry(character="天")
        assert entry.pinyin == ""
        assert entry.word_groups == []
        assert entry.sentence == ""

    def test_deck_record_to_entry(self):
        record = DeckRecord(word="地", pinyin="dì", words=["大地", "土地"], sentence="大地妈妈真温暖。")
        entry = record.to_entry()
        assert entry == CharacterEntry(
            character="地",
            pinyin="dì",
            word_groups=["大地", "土地"],
            sentence="大地妈妈真温暖。",
        )

    def test_deck_record_invalid_words(self):
        with pytest.raises(ValueError):
            DeckRecord(word="地", words="大地")

    def test_grade_deck_valid(self):
        deck = GradeDeck.model_validate({
            "grade": "一年级上册",
            "characters": [
                {"word": "天", "pinyin": "tiān", "words": ["天空"], "sentence": "天很蓝。"},
            ],
        })
        assert deck.grade == "一年级上册"
        assert deck.characters[0].word == "天"

    def test_grade_deck_requires_characters(self):
        with pytest.raises(ValueError):
            GradeDeck.model_validate({"grade": "一年级上册"})

    def test_demo_deck(self):
        assert [e.character for e in DEMO_DECK] == ["天", "地", "人", "你", "我"]


class TestProgressSchemas:
    """Test progress tracking schemas."""

    def test_character_status_values(self):
        assert CharacterStatus.NEW.value == "new"
        assert CharacterStatus.LEARNED.value == "learned"
        assert CharacterStatus.REVIEW.value == "review"
        assert CharacterStatus.MASTERED.value == "mastered"

    def test_progress_state_defaults(self):
        state = ProgressState()
        assert state.learned == []
        assert state.review == []
        assert state.mastered == []
        assert state.last_updated is None

    def test_progress_state_defaults_not_shared(self):
        a = ProgressState()
        b = ProgressState()
        a.learned.append("天")
        assert b.learned == []

    def test_same_membership_ignores_order(self):
        a = ProgressState(learned=["天", "地"], review=["人"], mastered=["天"])
        b = ProgressState(learned=["地", "天"], review=["人"], mastered=["天"],
                          last_updated=datetime(2024, 1, 1))
        assert a.same_membership(b)

    def test_same_membership_detects_difference(self):
        a = ProgressState(learned=["天"])
        b = ProgressState(learned=["天"], review=["天"])
        assert not a.same_membership(b)


class TestSchemaImports:
    """Test that all schemas can be imported from the main module."""

    def test_import_from_hanzicards_schemas(self):
        from hanzicards.schemas import (
            CharacterEntry,
            ProgressState,
        )
        assert CharacterEntry is not None
        assert ProgressState is not None
