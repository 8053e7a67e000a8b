import logging
import sqlite3
import threading
from typing import Any, Dict, List, Optional

from ..errors import StorageError
from ..models.bookmark import Bookmark

logger = logging.getLogger(__name__)

# Fields an update may overwrite. id and created_at are fixed at creation.
MUTABLE_FIELDS = ('url', 'title', 'description')


class BookmarkDatabase:
    """Single-table SQLite store shared by the whole process.

    One connection is opened at construction and every statement runs under
    a lock, so request threads never interleave on the connection.
    """

    def __init__(self, db_name: str = "bookmarks.db"):
        self.db_name = db_name
        self._lock = threading.Lock()
        try:
            self.conn = sqlite3.connect(self.db_name, check_same_thread=False)
        except sqlite3.Error as e:
            logger.error(f"DB connection error for {self.db_name}: {str(e)}")
            raise StorageError(str(e)) from e
        self.conn.row_factory = sqlite3.Row
        self.init_db()
        logger.info(f"SQLite connected: {self.db_name}")

    def _execute(self, query: str, params=()) -> sqlite3.Cursor:
        try:
            with self.conn:
                return self.conn.execute(query, params)
        except sqlite3.Error as e:
            logger.error(f"Database error running {query.split()[0]}: {str(e)}")
            raise StorageError(str(e)) from e

    def init_db(self):
        with self._lock:
            self._execute('''CREATE TABLE IF NOT EXISTS bookmarks
                             (id TEXT PRIMARY KEY,
                              url TEXT NOT NULL,
                              title TEXT NOT NULL,
                              description TEXT,
                              created_at TEXT NOT NULL)''')

    def add_bookmark(self, bookmark: Bookmark) -> Bookmark:
        with self._lock:
            self._execute("""
                INSERT INTO bookmarks (id, url, title, description, created_at)
                VALUES (?, ?, ?, ?, ?)
            """, (
                bookmark.id,
                bookmark.url,
                bookmark.title,
                bookmark.description,
                bookmark.created_at
            ))
        return bookmark

    def get_bookmarks(self) -> List[Bookmark]:
        with self._lock:
            rows = self._execute("SELECT * FROM bookmarks").fetchall()
        return [Bookmark.from_row(row) for row in rows]

    def get_bookmark(self, bookmark_id: str) -> Optional[Bookmark]:
        with self._lock:
            row = self._execute("SELECT * FROM bookmarks WHERE id = ?", (bookmark_id,)).fetchone()
        return Bookmark.from_row(row)

    def update_bookmark(self, bookmark_id: str, fields: Dict[str, Any]) -> Optional[Bookmark]:
        """Merge ``fields`` over the stored row and write it back.

        Keys missing from ``fields`` keep their stored value. Returns the
        merged bookmark, or None when no row has ``bookmark_id``.
        """
        with self._lock:
            row = self._execute("SELECT * FROM bookmarks WHERE id = ?", (bookmark_id,)).fetchone()
            bookmark = Bookmark.from_row(row)
            if bookmark is None:
                return None

            for field in MUTABLE_FIELDS:
                if field in fields:
                    setattr(bookmark, field, fields[field])

            self._execute("""
                UPDATE bookmarks
                SET url = ?, title = ?, description = ?
                WHERE id = ?
            """, (bookmark.url, bookmark.title, bookmark.description, bookmark_id))
        return bookmark

    def delete_bookmark(self, bookmark_id: str) -> bool:
        with self._lock:
            cursor = self._execute("DELETE FROM bookmarks WHERE id = ?", (bookmark_id,))
        return cursor.rowcount > 0

    def close(self):
        with self._lock:
            self.conn.close()
