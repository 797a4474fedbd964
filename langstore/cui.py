"""Interactive console menus over a storage, and the command that starts them."""

from __future__ import annotations

import argparse
import sqlite3
import subprocess
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from .csv_storage import CsvStorage
from .models import Language, Programmer
from .sqlite_storage import SqliteStorage
from .storage import Storage
from .xml_storage import XmlStorage

__all__ = ["format_language", "format_programmer", "Cui", "main"]

MAIN_MENU = "Menu:\n1 - Language storage\n2 - Programmers storage\n0 - Exit\nInput command: "
SECTION_MENU = (
    "Menu:\n1 - Print all elements\n2 - Work with one of elements\n"
    "3 - New element\n0 - Exit\nInput command: "
)
ELEMENT_MENU = "Menu:\n1 - Information\n2 - Update\n3 - Delete\n0 - Exit\nInput command: "
ID_PROMPT = "Input id: "
UPDATE_HEADER = "Updating, input new information: \n"

DEFAULT_PATHS = {
    "sqlite": "data/sqlite/",
    "xml": "data/xml/",
    "csv": "data/csv/",
}


def format_language(language: Language) -> str:
    """Render a language as one comma-separated line without a newline."""
    return f"{language.id},{language.name},{language.type},{language.author}"


def format_programmer(programmer: Programmer) -> str:
    """Render a programmer as one comma-separated line without a newline."""
    return (
        f"{programmer.id},{programmer.name},{programmer.stage},"
        f"{programmer.date_of_start}"
    )


@dataclass(frozen=True)
class _Section:
    title: str
    record: type
    fields: tuple[tuple[str, str], ...]
    list_all: Callable[[], list[Any]]
    get: Callable[[int], Any]
    update: Callable[[Any], Any]
    remove: Callable[[int], bool]
    insert: Callable[[Any], int]
    render: Callable[[Any], str]


def _terminal_clear() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


class Cui:
    """Console menus for browsing and editing languages and programmers.

    Input is read as whitespace-separated words. The storage is saved when
    the main menu is left, or when the input runs out.
    """

    def __init__(
        self,
        storage: Storage,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: Callable[[], None] | None = None,
    ) -> None:
        self.storage = storage
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout
        if clear_screen is None:
            clear_screen = self._default_clear
        self._clear = clear_screen
        self._tokens = self._token_stream()
        self._languages = _Section(
            title="Language",
            record=Language,
            fields=(("name", "Name: "), ("type", "Type: "), ("author", "Author: ")),
            list_all=storage.get_all_languages,
            get=storage.get_language_by_id,
            update=storage.update_language,
            remove=storage.remove_language,
            insert=storage.insert_language,
            render=format_language,
        )
        self._programmers = _Section(
            title="Programmer",
            record=Programmer,
            fields=(
                ("name", "Name: "),
                ("stage", "Stage: "),
                ("date_of_start", "Date of start (XX.XX.XXXX): "),
            ),
            list_all=storage.get_all_programmers,
            get=storage.get_programmer_by_id,
            update=storage.update_programmer,
            remove=storage.remove_programmer,
            insert=storage.insert_programmer,
            render=format_programmer,
        )

    def _default_clear(self) -> None:
        if self._out is sys.stdout and self._out.isatty():
            self._out.flush()
            _terminal_clear()

    def _token_stream(self) -> Iterator[str]:
        for line in self._in:
            yield from line.split()

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def _read_int(self) -> int | None:
        word = self._read_word()
        try:
            return int(word)
        except ValueError:
            return None

    def _ask(self, menu: str) -> int | None:
        self._write(menu)
        return self._read_int()

    def show(self) -> None:
        """Run the main menu until it is left, then save the storage."""
        self._clear()
        try:
            while True:
                command = self._ask(MAIN_MENU)
                if command == 1:
                    self._clear()
                    self._run_section(self._languages)
                elif command == 2:
                    self._clear()
                    self._run_section(self._programmers)
                self._clear()
                if command == 0:
                    break
        except EOFError:
            pass
        self.storage.save()

    def _run_section(self, section: _Section) -> None:
        while True:
            command = self._ask(SECTION_MENU)
            if command == 0:
                return
            if command == 1:
                self._clear()
                for record in section.list_all():
                    self._write(section.render(record) + "\n")
            elif command == 2:
                self._write(ID_PROMPT)
                self._clear()
                entity_id = self._read_int()
                if entity_id is not None:
                    self._run_element(section, entity_id)
                self._clear()
            elif command == 3:
                self._clear()
                self._write(f"Hello, input new {section.title}: \n")
                section.insert(section.record(**self._read_fields(section)))

    def _run_element(self, section: _Section, entity_id: int) -> None:
        while True:
            command = self._ask(ELEMENT_MENU)
            if command == 1:
                self._clear()
                record = section.get(entity_id)
                if record is None:
                    self._write(f"No element with id {entity_id}\n")
                else:
                    self._write(section.render(record) + "\n")
            elif command == 2:
                self._clear()
                self._write(UPDATE_HEADER)
                values = self._read_fields(section)
                section.update(section.record(id=entity_id, **values))
            elif command == 3:
                section.remove(entity_id)
                return
            elif command == 0:
                return

    def _read_fields(self, section: _Section) -> dict[str, str]:
        values = {}
        for name, prompt in section.fields:
            self._write(prompt)
            values[name] = self._read_word()
        return values


def _open_storage(kind: str, path: str) -> Storage:
    if kind == "sqlite":
        return SqliteStorage(path)
    if kind == "xml":
        return XmlStorage(path)
    return CsvStorage(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a storage, load it and run the console menus over it."""
    parser = argparse.ArgumentParser(
        prog="langstore",
        description="Browse and edit languages and programmers in a storage.",
    )
    parser.add_argument(
        "--format",
        choices=sorted(DEFAULT_PATHS),
        default="sqlite",
        help="kind of storage (default: sqlite)",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="storage directory, or SQLite database file",
    )
    args = parser.parse_args(argv)
    path = args.path if args.path is not None else DEFAULT_PATHS[args.format]

    storage = _open_storage(args.format, path)
    try:
        storage.load()
        Cui(storage).show()
    except (OSError, ValueError, sqlite3.Error) as error:
        print(f"langstore: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())