import os
import sqlite3


class Database:

    @staticmethod
    def ensure_parent_dir(path):
        """Create the directory holding a database file (if there is one)"""
        db_dir = os.path.dirname(path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    @staticmethod
    def connect(path, shared=False):
        """
        Open a SQLite connection, creating the file if it does not exist.

        A shared connection may be used from any thread, so the caller is
        responsible for serialising access to it.
        """
        Database.ensure_parent_dir(path)
        conn = sqlite3.connect(path, check_same_thread=not shared)
        conn.row_factory = sqlite3.Row
        return conn
