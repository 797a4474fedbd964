"""Storages kept as XML documents."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from os import PathLike
from pathlib import Path

from .models import Language, Programmer
from .storage import MemoryStorage

__all__ = [
    "language_to_element",
    "element_to_language",
    "programmer_to_element",
    "element_to_programmer",
    "XmlStorage",
    "XmlFileStorage",
]

log = logging.getLogger(__name__)

LANGUAGES_FILE = "lang.xml"
PROGRAMMERS_FILE = "prog.xml"
LANGUAGES_ROOT = "langs"
PROGRAMMERS_ROOT = "progs"
# Both record kinds are written as <lang> elements.
RECORD_TAG = "lang"

_INT = re.compile(r"\s*[+-]?\d+\s*")


def _attribute_int(element: ET.Element, name: str) -> int:
    value = element.get(name, "")
    return int(value) if _INT.fullmatch(value) else 0


def language_to_element(language: Language) -> ET.Element:
    """Build the element that stores a language."""
    return ET.Element(
        RECORD_TAG,
        {
            "id": str(language.id),
            "name": language.name,
            "type": language.type,
            "author": language.author,
        },
    )


def element_to_language(element: ET.Element) -> Language:
    """Read a language from its element; a missing or bad id reads as 0."""
    return Language(
        id=_attribute_int(element, "id"),
        name=element.get("name", ""),
        type=element.get("type", ""),
        author=element.get("author", ""),
    )


def programmer_to_element(programmer: Programmer) -> ET.Element:
    """Build the element that stores a programmer."""
    return ET.Element(
        RECORD_TAG,
        {
            "id": str(programmer.id),
            "name": programmer.name,
            "stage": programmer.stage,
            "date_of_start": programmer.date_of_start,
        },
    )


def element_to_programmer(element: ET.Element) -> Programmer:
    """Read a programmer from its element; a missing or bad id reads as 0."""
    return Programmer(
        id=_attribute_int(element, "id"),
        name=element.get("name", ""),
        stage=element.get("stage", ""),
        date_of_start=element.get("date_of_start", ""),
    )


def _read_root(path: Path) -> ET.Element | None:
    try:
        return ET.parse(path).getroot()
    except OSError as error:
        log.warning("file not opened: %s (%s)", path, error)
    except ET.ParseError as error:
        line, column = error.position
        log.warning(
            "error parsing XML text in %s: %s at line %d, column %d",
            path,
            error,
            line,
            column,
        )
    return None


def _write_document(path: Path, root_tag: str, elements) -> None:
    root = ET.Element(root_tag)
    root.extend(elements)
    ET.indent(root, space="    ")
    text = ET.tostring(root, encoding="unicode") + "\n"
    with path.open("w", encoding="utf-8") as file:
        file.write(text)


class XmlStorage(MemoryStorage):
    """Languages in ``lang.xml`` and programmers in ``prog.xml`` of one directory."""

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
        """Append the records of both files; unreadable files are logged and skipped."""
        root = _read_root(self.languages_path)
        if root is not None:
            self._languages.extend(element_to_language(el) for el in root)
        root = _read_root(self.programmers_path)
        if root is not None:
            self._programmers.extend(element_to_programmer(el) for el in root)

    def save(self):
        """Write both files, replacing what they held."""
        _write_document(
            self.languages_path,
            LANGUAGES_ROOT,
            (language_to_element(lang) for lang in self._languages),
        )
        _write_document(
            self.programmers_path,
            PROGRAMMERS_ROOT,
            (programmer_to_element(p) for p in self._programmers),
        )


class XmlFileStorage(MemoryStorage):
    """Languages kept in a single XML file; programmers live only in memory."""

    def __init__(self, path: str | PathLike[str]) -> None:
        super().__init__()
        self.path = Path(path)

    def load(self):
        """Append the languages of the file; a missing file loads nothing."""
        if not self.path.exists():
            log.warning("file does not exist: %s", self.path)
            return
        root = _read_root(self.path)
        if root is not None:
            self._languages.extend(element_to_language(el) for el in root)

    def save(self):
        """Write the languages to the file."""
        _write_document(
            self.path,
            LANGUAGES_ROOT,
            (language_to_element(lang) for lang in self._languages),
        )