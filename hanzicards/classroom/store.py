"""
KeyValueStore - Durable string key/value storage in ~/.hanzicards/progress.db.

Plays the role of browser local storage: whole values are written and read
by key, with no partial updates.
"""

import sqlite3
from pathlib import Path
from typing import Optional


DEFAULT_PROGRESS_DIR = Path.home() / ".hanzicards"
DEFAULT_PROGRESS_DB = DEFAULT_PROGRESS_DIR / "progress.db"


class KeyValueStore:
    """
    Key/value store backed by a single SQLite table.

    Each method opens its own connection, so instances are cheap to keep
    in Streamlit session state.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            db_path: Path to the SQLite file (default: ~/.hanzicards/progress.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_PROGRESS_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                );
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str):
        """Write a value, replacing whatever was stored under the key."""
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO kv (key, value) VALUES (?, ?)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value""",
                (key, value)
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str):
        """Remove a key. Missing keys are ignored."""
        conn = self._get_connection()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self, prefix: str = "") -> list[str]:
        """List stored keys starting with prefix."""
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT key FROM kv ORDER BY key")
            return [row["key"] for row in cursor.fetchall() if row["key"].startswith(prefix)]
        finally:
            conn.close()
