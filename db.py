# db.py
import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from flask import current_app

FILE_COLUMNS = "id, name, mime, size, filename, createdAt"
EVENT_COLUMNS = "id, title, body, date, createdAt"


class Store:
    """SQLite storage handle. Each operation runs a single statement on its own connection."""

    def __init__(self, db_path):
        self.db_path = Path(db_path)

    @contextmanager
    def connect(self):
        """Yield a sqlite3 connection (row factory set), commit on success, always close."""
        con = sqlite3.connect(str(self.db_path))
        con.row_factory = sqlite3.Row
        try:
            with con:
                yield con
        finally:
            con.close()

    def init(self):
        """Create tables if missing (idempotent)."""
        with self.connect() as con:
            cur = con.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS files (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT,
                    mime TEXT,
                    size INTEGER,
                    filename TEXT,
                    createdAt INTEGER
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS events (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT,
                    body TEXT,
                    date TEXT,
                    createdAt INTEGER
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS profiles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user TEXT,
                    data TEXT,
                    updatedAt INTEGER
                )
                """
            )

    # files

    def list_files(self) -> list:
        with self.connect() as con:
            rows = con.execute(f"SELECT {FILE_COLUMNS} FROM files ORDER BY createdAt DESC").fetchall()
        return [dict(r) for r in rows]

    def get_file(self, file_id):
        with self.connect() as con:
            row = con.execute(f"SELECT {FILE_COLUMNS} FROM files WHERE id=?", (file_id,)).fetchone()
        return dict(row) if row else None

    def insert_file(self, name, mime, size, filename, created_at) -> int:
        with self.connect() as con:
            cur = con.execute(
                "INSERT INTO files (name, mime, size, filename, createdAt) VALUES (?, ?, ?, ?, ?)",
                (name, mime, size, filename, created_at),
            )
            return cur.lastrowid

    def delete_file(self, file_id) -> int:
        with self.connect() as con:
            return con.execute("DELETE FROM files WHERE id=?", (file_id,)).rowcount

    # events

    def list_events(self) -> list:
        with self.connect() as con:
            rows = con.execute(f"SELECT {EVENT_COLUMNS} FROM events ORDER BY date DESC").fetchall()
        return [dict(r) for r in rows]

    def insert_event(self, title, body, date, created_at) -> int:
        with self.connect() as con:
            cur = con.execute(
                "INSERT INTO events (title, body, date, createdAt) VALUES (?, ?, ?, ?)",
                (title, body, date, created_at),
            )
            return cur.lastrowid

    # profiles

    def insert_profile(self, user, data, updated_at) -> int:
        """Append a profile row; data is stored JSON-serialized."""
        with self.connect() as con:
            cur = con.execute(
                "INSERT INTO profiles (user, data, updatedAt) VALUES (?, ?, ?)",
                (user, json.dumps(data), updated_at),
            )
            return cur.lastrowid


def get_store() -> Store:
    """Return the storage handle bound to the running app."""
    return current_app.extensions["store"]
