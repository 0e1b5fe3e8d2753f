"""
Progress tracking tests for HanziCards.

Covers the key/value store, status transitions and persistence.
"""

import itertools
import json

import pytest

from hanzicards.classroom import (
    KeyValueStore,
    ProgressTracker,
    progress_key,
    DEFAULT_GRADE,
)
from hanzicards.schemas import CharacterStatus, ProgressState


GRADE = "一年级上册"


class TestKeyValueStore:
    """Test the SQLite key/value store."""

    def test_missing_key(self, store):
        assert store.get("nope") is None

    def test_set_and_get(self, store):
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_set_overwrites(self, store):
        store.set("k", "v1")
        store.set("k", "v2")
        assert store.get("k") == "v2"

    def test_delete(self, store):
        store.set("k", "v")
        store.delete("k")
        store.delete("never-set")
        assert store.get("k") is None

    def test_keys_with_prefix(self, store):
        store.set("learningProgress_a", "{}")
        store.set("learningProgress_b", "{}")
        store.set("selectedGrade", "a")
        assert store.keys("learningProgress_") == ["learningProgress_a", "learningProgress_b"]

    def test_persists_across_instances(self, tmp_path):
        db_path = tmp_path / "nested" / "progress.db"
        KeyValueStore(db_path).set("k", "v")
        assert KeyValueStore(db_path).get("k") == "v"


class TestLoadSave:
    """Test reading and writing progress."""

    def test_load_missing_is_empty(self, tracker):
        state = tracker.load(GRADE)
        assert state.same_membership(ProgressState())

    def test_round_trip(self, tracker):
        state = ProgressState(learned=["天", "地", "人"], review=["地"], mastered=["天"])
        tracker.save(state, GRADE)
        loaded = tracker.load(GRADE)
        assert loaded.same_membership(state)
        assert loaded.last_updated is not None

    def test_save_sets_timestamp(self, tracker, store):
        state = ProgressState(learned=["天"])
        tracker.save(state, GRADE)
        data = json.loads(store.get(progress_key(GRADE)))
        assert state.last_updated is not None
        assert data["lastUpdated"] == state.last_updated.isoformat()

    def test_stored_format(self, tracker, store):
        tracker.save(ProgressState(learned=["天"], review=["地"], mastered=[]), GRADE)
        data = json.loads(store.get("learningProgress_一年级上册"))
        assert data["learned"] == ["天"]
        assert data["review"] == ["地"]
        assert data["mastered"] == []
        assert set(data) == {"learned", "review", "mastered", "lastUpdated"}

    def test_save_overwrites(self, tracker):
        tracker.save(ProgressState(learned=["天", "地"]), GRADE)
        tracker.save(ProgressState(learned=["人"]), GRADE)
        assert tracker.load(GRADE).learned == ["人"]

    def test_grades_are_separate(self, tracker):
        tracker.save(ProgressState(learned=["天"]), "一年级上册")
        tracker.save(ProgressState(learned=["春"]), "一年级下册")
        assert tracker.load("一年级上册").learned == ["天"]
        assert tracker.load("一年级下册").learned == ["春"]

    @pytest.mark.parametrize("raw", [
        "not json",
        "[1, 2, 3]",
        "null",
        '"text"',
    ])
    def test_malformed_is_empty(self, tracker, store, raw):
        store.set(progress_key(GRADE), raw)
        assert tracker.load(GRADE).same_membership(ProgressState())

    def test_partial_data(self, tracker, store):
        store.set(progress_key(GRADE), json.dumps({"learned": ["天", 3, None, "天"], "review": "地"}))
        state = tracker.load(GRADE)
        assert state.learned == ["天"]
        assert state.review == []
        assert state.mastered == []
        assert state.last_updated is None

    def test_javascript_timestamp(self, tracker, store):
        store.set(progress_key(GRADE), json.dumps({
            "learned": ["天"], "review": [], "mastered": [],
            "lastUpdated": "2024-03-01T08:30:00.000Z",
        }))
        state = tracker.load(GRADE)
        assert state.last_updated.year == 2024

    def test_reset(self, tracker):
        tracker.save(ProgressState(learned=["天"]), GRADE)
        tracker.reset(GRADE)
        assert tracker.load(GRADE).learned == []

    def test_tracked_grades(self, tracker):
        tracker.save(ProgressState(), "一年级上册")
        tracker.save(ProgressState(), "二年级上册")
        assert sorted(tracker.get_tracked_grades()) == sorted(["一年级上册", "二年级上册"])


class TestStatusChanges:
    """Test learned/review/mastered transitions."""

    def test_mark_learned(self, tracker):
        state = ProgressState()
        assert tracker.mark_learned(state, "天") is True
        assert tracker.mark_learned(state, "天") is False
        assert state.learned == ["天"]

    def test_mark_for_review(self, tracker):
        state = ProgressState()
        assert tracker.mark_for_review(state, "地") is True
        assert tracker.mark_for_review(state, "地") is False
        assert state.review == ["地"]
        assert state.learned == []

    def test_mark_for_review_removes_mastered(self, tracker):
        state = ProgressState(learned=["天"], mastered=["天"])
        tracker.mark_for_review(state, "天")
        assert state.review == ["天"]
        assert state.mastered == []
        assert state.learned == ["天"]

    def test_mark_mastered(self, tracker):
        state = ProgressState()
        assert tracker.mark_mastered(state, "天") is True
        assert tracker.mark_mastered(state, "天") is False
        assert state.mastered == ["天"]
        assert state.learned == ["天"]
        assert state.review == []

    def test_mark_mastered_removes_review(self, tracker):
        state = ProgressState(review=["地"])
        tracker.mark_mastered(state, "地")
        assert "地" in state.mastered
        assert "地" not in state.review

    def test_mark_mastered_keeps_learned_unique(self, tracker):
        state = ProgressState(learned=["天"])
        tracker.mark_mastered(state, "天")
        assert state.learned == ["天"]

    def test_review_and_mastered_stay_disjoint(self, tracker):
        # every sequence of up to four marks on the same character
        actions = [tracker.mark_for_review, tracker.mark_mastered]
        for length in range(1, 5):
            for sequence in itertools.product(actions, repeat=length):
                state = ProgressState()
                for action in sequence:
                    action(state, "天")
                    assert not set(state.review) & set(state.mastered)
                    assert set(state.mastered) <= set(state.learned)


class TestStatusOf:
    """Test status precedence."""

    def test_new(self, tracker):
        assert tracker.status_of(ProgressState(), "天") == CharacterStatus.NEW

    def test_learned(self, tracker):
        assert tracker.status_of(ProgressState(learned=["天"]), "天") == CharacterStatus.LEARNED

    def test_review_beats_learned(self, tracker):
        state = ProgressState(learned=["天"], review=["天"])
        assert tracker.status_of(state, "天") == CharacterStatus.REVIEW

    def test_mastered_beats_everything(self, tracker):
        state = ProgressState(learned=["天"], review=["天"], mastered=["天"])
        assert tracker.status_of(state, "天") == CharacterStatus.MASTERED


class TestSelectedGrade:
    """Test selected grade carryover."""

    def test_default(self, tracker):
        assert tracker.get_selected_grade() == DEFAULT_GRADE
        assert tracker.get_selected_grade("二年级上册") == "二年级上册"

    def test_set_and_get(self, tracker):
        tracker.set_selected_grade("一年级下册")
        assert tracker.get_selected_grade() == "一年级下册"


class TestStats:
    """Test display counters."""

    def test_counts(self, tracker):
        state = ProgressState(learned=["天", "地"], review=["人"], mastered=["天"])
        stats = tracker.get_stats(state, total=5)
        assert stats == {
            "total": 5,
            "learned": 2,
            "review": 1,
            "mastered": 1,
            "mastered_percent": 20.0,
        }

    def test_empty_deck(self, tracker):
        assert tracker.get_stats(ProgressState(), total=0)["mastered_percent"] == 0
