"""Storage kept in an SQLite database, with links between languages and programmers."""

from __future__ import annotations

import sqlite3
from os import PathLike
from pathlib import Path
from types import TracebackType

from .models import Language, Programmer
from .storage import Storage

__all__ = ["SqliteStorage"]

DATABASE_FILE = "data.sqlite"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS lang (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    type TEXT,
    author TEXT,
    user_id INTEGER
);
CREATE TABLE IF NOT EXISTS prog (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    stage TEXT,
    date_of_start TEXT
);
CREATE TABLE IF NOT EXISTS links (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    FK_b INTEGER,
    FK_e INTEGER
);
"""


def _text(value) -> str:
    return "" if value is None else str(value)


def _integer(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _row_to_language(row: sqlite3.Row) -> Language:
    return Language(
        id=_integer(row["id"]),
        name=_text(row["name"]),
        type=_text(row["type"]),
        author=_text(row["author"]),
        user_id=_integer(row["user_id"]),
    )


def _row_to_programmer(row: sqlite3.Row) -> Programmer:
    return Programmer(
        id=_integer(row["id"]),
        name=_text(row["name"]),
        stage=_text(row["stage"]),
        date_of_start=_text(row["date_of_start"]),
    )


class SqliteStorage(Storage):
    """Languages, programmers and their links in one SQLite database file.

    The path names the database file; a path to an existing directory means
    the file ``data.sqlite`` inside it. Missing tables are created on load.
    """

    def __init__(self, path: str | PathLike[str]) -> None:
        path = Path(path)
        if path.is_dir():
            path = path / DATABASE_FILE
        self.path = path
        self._connection: sqlite3.Connection | None = None

    def __enter__(self) -> SqliteStorage:
        self.load()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def _db(self) -> sqlite3.Connection:
        if self._connection is None:
            raise RuntimeError(f"storage is not open: {self.path}")
        return self._connection

    def _write(self, sql: str, params=()) -> sqlite3.Cursor:
        with self._db as connection:
            return connection.execute(sql, params)

    def load(self):
        """Open the database connection, creating missing tables."""
        if self._connection is not None:
            return
        connection = sqlite3.connect(self.path)
        connection.row_factory = sqlite3.Row
        try:
            connection.executescript(_SCHEMA)
        except sqlite3.Error:
            connection.close()
            raise
        self._connection = connection

    def save(self):
        """Close the connection; every change is already committed."""
        self.close()

    def close(self):
        """Close the database connection if it is open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    # Languages

    def get_all_languages(self) -> list[Language]:
        rows = self._db.execute(
            "SELECT id, name, type, author, user_id FROM lang ORDER BY id"
        )
        return [_row_to_language(row) for row in rows]

    def get_language_by_id(self, language_id: int) -> Language | None:
        row = self._db.execute(
            "SELECT id, name, type, author, user_id FROM lang WHERE id = ?",
            (language_id,),
        ).fetchone()
        return None if row is None else _row_to_language(row)

    def update_language(self, language: Language):
        """Replace name, type and author of the language with the same id."""
        self._write(
            "UPDATE lang SET name = ?, type = ?, author = ? WHERE id = ?",
            (language.name, language.type, language.author, language.id),
        )

    def remove_language(self, language_id: int) -> bool:
        """Remove a language and its links; return whether it existed."""
        with self._db as connection:
            connection.execute("DELETE FROM links WHERE FK_b = ?", (language_id,))
            cursor = connection.execute("DELETE FROM lang WHERE id = ?", (language_id,))
        return cursor.rowcount > 0

    def insert_language(self, language: Language) -> int:
        cursor = self._write(
            "INSERT INTO lang (name, type, author, user_id) VALUES (?, ?, ?, ?)",
            (language.name, language.type, language.author, language.user_id),
        )
        return int(cursor.lastrowid)

    # Programmers

    def get_all_programmers(self) -> list[Programmer]:
        rows = self._db.execute(
            "SELECT id, name, stage, date_of_start FROM prog ORDER BY id"
        )
        return [_row_to_programmer(row) for row in rows]

    def get_programmer_by_id(self, programmer_id: int) -> Programmer | None:
        row = self._db.execute(
            "SELECT id, name, stage, date_of_start FROM prog WHERE id = ?",
            (programmer_id,),
        ).fetchone()
        return None if row is None else _row_to_programmer(row)

    def update_programmer(self, programmer: Programmer):
        self._write(
            "UPDATE prog SET name = ?, stage = ?, date_of_start = ? WHERE id = ?",
            (programmer.name, programmer.stage, programmer.date_of_start, programmer.id),
        )

    def remove_programmer(self, programmer_id: int) -> bool:
        cursor = self._write("DELETE FROM prog WHERE id = ?", (programmer_id,))
        return cursor.rowcount > 0

    def insert_programmer(self, programmer: Programmer) -> int:
        cursor = self._write(
            "INSERT INTO prog (name, stage, date_of_start) VALUES (?, ?, ?)",
            (programmer.name, programmer.stage, programmer.date_of_start),
        )
        return int(cursor.lastrowid)

    # Ownership and links

    def get_user_languages(self, user_id: int) -> list[Language]:
        """Return the languages owned by a user."""
        rows = self._db.execute(
            "SELECT id, name, type, author, user_id FROM lang "
            "WHERE user_id = ? ORDER BY id",
            (user_id,),
        )
        return [_row_to_language(row) for row in rows]

    def get_programmers_for_language(self, language: Language) -> list[Programmer]:
        """Return the programmers linked to a language."""
        rows = self._db.execute(
            "SELECT prog.id AS id, prog.name AS name, prog.stage AS stage, "
            "prog.date_of_start AS date_of_start "
            "FROM prog JOIN links ON prog.id = links.FK_e "
            "WHERE links.FK_b = ? ORDER BY links.id",
            (language.id,),
        )
        return [_row_to_programmer(row) for row in rows]

    def insert_programmer_to_language(
        self, language: Language, programmer: Programmer
    ) -> int:
        """Link a programmer to a language and return the link id."""
        cursor = self._write(
            "INSERT INTO links (FK_b, FK_e) VALUES (?, ?)",
            (language.id, programmer.id),
        )
        return int(cursor.lastrowid)

    def remove_programmer_from_language(
        self, language: Language, programmer: Programmer
    ) -> bool:
        """Unlink a programmer from a language; return whether a link was removed."""
        cursor = self._write(
            "DELETE FROM links WHERE FK_b = ? AND FK_e = ?",
            (language.id, programmer.id),
        )
        return cursor.rowcount > 0