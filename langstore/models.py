"""Records kept by the storages: languages, programmers and users."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Language", "Programmer", "User"]


@dataclass
class Language:
    """A programming language entry."""

    id: int = 0
    name: str = ""
    type: str = ""
    author: str = ""
    user_id: int = 0


@dataclass
class Programmer:
    """A programmer entry; ``date_of_start`` is free text such as ``01.09.2015``."""

    id: int = 0
    name: str = ""
    stage: str = ""
    date_of_start: str = ""


@dataclass
class User:
    """An account that owns languages."""

    id: int = 0
    username: str = ""
    password_hash: str = ""