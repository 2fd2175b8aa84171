"""
News Database
=============

Record store for news items. One SQLite connection is opened by
``initialize()`` and shared by every request for the life of the app.
"""

import sqlite3
import threading

from newsdesk.core.config import Config
from newsdesk.core.database import Database
from newsdesk.core.exceptions import StoreError

COLUMNS = ('id', 'title', 'content', 'image', 'date_posted')


class NewsStore:
    """Persistent storage for news rows"""

    def __init__(self, path, table=Config.NEWS_TABLE):
        self.path = path
        self.table = table
        self._conn = None
        self._lock = threading.Lock()

    def initialize(self):
        """Open the database file (creating it) and make sure the table exists"""
        try:
            self._conn = Database.connect(self.path, shared=True)
            with self._lock, self._conn:
                self._conn.execute(f'''
                    CREATE TABLE IF NOT EXISTS {self.table} (
                        id INTEGER PRIMARY KEY,
                        title TEXT,
                        content TEXT,
                        image TEXT,
                        date_posted TEXT
                    )
                ''')
        except (sqlite3.Error, OSError) as e:
            self._conn = None
            raise StoreError(f"Error opening database {self.path}: {e}") from e
        return self

    def close(self):
        if self._conn is not None:
            with self._lock:
                self._conn.close()
            self._conn = None

    def _connection(self):
        if self._conn is None:
            raise StoreError("News database is not open")
        return self._conn

    def list_all(self):
        """Get every news item, in insertion order"""
        conn = self._connection()
        try:
            with self._lock:
                rows = conn.execute(
                    f'SELECT {", ".join(COLUMNS)} FROM {self.table} ORDER BY id'
                ).fetchall()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return [dict(row) for row in rows]

    def get_by_id(self, news_id):
        """Get single news item by ID, or None"""
        conn = self._connection()
        try:
            with self._lock:
                row = conn.execute(
                    f'SELECT {", ".join(COLUMNS)} FROM {self.table} WHERE id = ?',
                    (news_id,)
                ).fetchone()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return dict(row) if row else None

    def insert(self, title, content, image, date_posted):
        """Add a news item and return its new id"""
        conn = self._connection()
        try:
            with self._lock, conn:
                cursor = conn.execute(
                    f'INSERT INTO {self.table} (title, content, image, date_posted) VALUES (?, ?, ?, ?)',
                    (title, content, image, date_posted)
                )
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return cursor.lastrowid
