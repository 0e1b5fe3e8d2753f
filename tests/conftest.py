"""Shared fixtures for HanziCards tests."""

import json

import pytest

from hanzicards.classroom import DeckLoader, KeyValueStore, ProgressTracker


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(tmp_path / "progress.db")


@pytest.fixture
def tracker(store):
    return ProgressTracker(store)


@pytest.fixture
def data_file(tmp_path):
    """Deck source with two grades."""
    data = [
        {
            "grade": "一年级上册",
            "characters": [
                {"word": "天", "pinyin": "tiān", "words": ["天空", "今天"], "sentence": "蓝蓝的天空像大海。"},
                {"word": "地", "pinyin": "dì", "words": ["大地", "土地"], "sentence": "大地妈妈真温暖。"},
                {"word": "人", "pinyin": "rén", "words": ["人们", "好人"], "sentence": "人们都在努力工作。"},
            ],
        },
        {
            "grade": "一年级下册",
            "characters": [
                {"word": "春", "pinyin": "chūn", "words": ["春天"], "sentence": "春天来了。"},
            ],
        },
    ]
    path = tmp_path / "data.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def loader(data_file):
    return DeckLoader(data_file)
