"""The storage interface and an in-memory implementation of it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import replace

from .models import Language, Programmer

__all__ = ["Storage", "MemoryStorage"]


class Storage(ABC):
    """Keeps languages and programmers, addressed by integer id."""

    @abstractmethod
    def load(self):
        """Read the stored records."""

    @abstractmethod
    def save(self):
        """Write the records back."""

    @abstractmethod
    def get_all_languages(self) -> list[Language]:
        """Return every language."""

    @abstractmethod
    def get_language_by_id(self, language_id: int) -> Language | None:
        """Return the language with this id, or None."""

    @abstractmethod
    def update_language(self, language: Language):
        """Replace the language that has the same id."""

    @abstractmethod
    def remove_language(self, language_id: int) -> bool:
        """Remove a language; return whether one was removed."""

    @abstractmethod
    def insert_language(self, language: Language) -> int:
        """Add a language under a new id and return that id."""

    @abstractmethod
    def get_all_programmers(self) -> list[Programmer]:
        """Return every programmer."""

    @abstractmethod
    def get_programmer_by_id(self, programmer_id: int) -> Programmer | None:
        """Return the programmer with this id, or None."""

    @abstractmethod
    def update_programmer(self, programmer: Programmer):
        """Replace the programmer that has the same id."""

    @abstractmethod
    def remove_programmer(self, programmer_id: int) -> bool:
        """Remove a programmer; return whether one was removed."""

    @abstractmethod
    def insert_programmer(self, programmer: Programmer) -> int:
        """Add a programmer under a new id and return that id."""


def _find(records, record_id):
    return next((replace(r) for r in records if r.id == record_id), None)


def _update(records, record):
    for index, current in enumerate(records):
        if current.id == record.id:
            records[index] = replace(record)


def _remove(records, record_id) -> bool:
    matches = [index for index, r in enumerate(records) if r.id == record_id]
    if not matches:
        return False
    del records[matches[-1]]
    return True


def _insert(records, record) -> int:
    new_id = max((r.id for r in records), default=0)
    new_id = max(new_id, 0) + 1
    records.append(replace(record, id=new_id))
    return new_id


class MemoryStorage(Storage):
    """Records held in lists; loading and saving do nothing."""

    def __init__(
        self,
        languages: Iterable[Language] = (),
        programmers: Iterable[Programmer] = (),
    ) -> None:
        self._languages: list[Language] = [replace(lang) for lang in languages]
        self._programmers: list[Programmer] = [replace(p) for p in programmers]

    def load(self):
        return None

    def save(self):
        return None

    def get_all_languages(self) -> list[Language]:
        return [replace(lang) for lang in self._languages]

    def get_language_by_id(self, language_id: int) -> Language | None:
        return _find(self._languages, language_id)

    def update_language(self, language: Language):
        _update(self._languages, language)

    def remove_language(self, language_id: int) -> bool:
        return _remove(self._languages, language_id)

    def insert_language(self, language: Language) -> int:
        return _insert(self._languages, language)

    def get_all_programmers(self) -> list[Programmer]:
        return [replace(p) for p in self._programmers]

    def get_programmer_by_id(self, programmer_id: int) -> Programmer | None:
        return _find(self._programmers, programmer_id)

    def update_programmer(self, programmer: Programmer):
        _update(self._programmers, programmer)

    def remove_programmer(self, programmer_id: int) -> bool:
        return _remove(self._programmers, programmer_id)

    def insert_programmer(self, programmer: Programmer) -> int:
        return _insert(self._programmers, programmer)