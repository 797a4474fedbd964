"""Storage kept as two comma-separated files in a directory."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

from .csv_table import format_table, parse_table
from .models import Language, Programmer
from .storage import MemoryStorage

__all__ = ["CsvStorage"]

LANGUAGES_FILE = "lang.csv"
PROGRAMMERS_FILE = "prog.csv"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_id(value: str) -> int:
    """Read the integer at the start of a field, ignoring what follows it."""
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"invalid id: {value!r}")
    return int(match.group(1))


def _read_rows(path: Path) -> list[list[str]]:
    with path.open(encoding="utf-8", newline="") as file:
        text = file.read()
    if text and not text.endswith("\n"):
        text += "\n"
    rows = parse_table(text)
    for row in rows:
        if len(row) < 4:
            raise ValueError(f"{path}: expected 4 fields, got {len(row)}: {row!r}")
    return rows


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as file:
        file.write(text)


class CsvStorage(MemoryStorage):
    """Languages in ``lang.csv`` and programmers in ``prog.csv`` of one directory."""

    def __init__(self, directory: str | PathLike[str]) -> None:
        super().__init__()
        self.directory = Path(directory)

    @property
    def languages_path(self) -> Path:
        return self.directory / LANGUAGES_FILE

    @property
    def programmers_path(self) -> Path:
        return self.directory / PROGRAMMERS_FILE

    def load(self):
        """Append the records of both files to those already held."""
        self._languages.extend(
            Language(id=_parse_id(row[0]), name=row[1], type=row[2], author=row[3])
            for row in _read_rows(self.languages_path)
        )
        self._programmers.extend(
            Programmer(
                id=_parse_id(row[0]), name=row[1], stage=row[2], date_of_start=row[3]
            )
            for row in _read_rows(self.programmers_path)
        )

    def save(self):
        """Write both files, replacing what they held."""
        _write_text(
            self.languages_path,
            format_table(
                [str(lang.id), lang.name, lang.type, lang.author]
                for lang in self._languages
            ),
        )
        _write_text(
            self.programmers_path,
            format_table(
                [str(p.id), p.name, p.stage, p.date_of_start]
                for p in self._programmers
            ),
        )