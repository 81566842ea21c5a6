"""
score_db.py: SQLite key/value store for the persisted best score.
"""

import logging
import os
import sqlite3
from typing import Optional

from .constants import DB_FILE

logger = logging.getLogger(__name__)


class ScoreStore:
    """Handles all interaction with the SQLite database. Use ":memory:" for a throwaway store."""

    def __init__(self, db_file: str = DB_FILE):
        self.db_file = db_file
        self._connect()
        try:
            self.setup()
        except sqlite3.DatabaseError as e:
            logger.warning("Unreadable score database %s (%s), starting fresh", db_file, e)
            self.conn.close()
            os.replace(db_file, db_file + ".corrupt")
            self._connect()
            self.setup()

    def _connect(self):
        self.conn = sqlite3.connect(self.db_file)
        self.cur = self.conn.cursor()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (key,))
        row = self.cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str):
        self.cur.execute(
            "INSERT INTO Settings (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (key, value))
        self.conn.commit()

    def load_best(self, key: str) -> int:
        """Reads the best score. Anything missing or unreadable counts as 0."""
        try:
            raw = self.get(key)
        except sqlite3.Error as e:
            logger.warning("Could not read best score: %s", e)
            return 0
        if raw is None:
            return 0
        try:
            best = int(raw.strip())
        except ValueError:
            logger.warning("Ignoring unparseable best score %r", raw)
            return 0
        return max(best, 0)

    def save_best(self, key: str, best: int):
        self.set(key, str(int(best)))

    def close(self):
        self.conn.close()
