"""HanziCards - Chinese character flashcards with per-grade progress tracking."""

__version__ = "0.1.0"
