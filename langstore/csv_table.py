"""Plain comma-separated tables without quoting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["parse_table", "format_table"]


def parse_table(text: str) -> list[list[str]]:
    """Split text into rows of fields.

    Only lines terminated by a newline become rows; anything after the last
    newline is dropped. Text after a NUL character is ignored.
    """
    text = text.split("\0", 1)[0]
    *lines, _unterminated = text.split("\n")
    return [line.split(",") for line in lines]


def format_table(table: Iterable[Sequence[str]]) -> str:
    """Join rows with newlines and fields with commas, with no trailing newline."""
    return "\n".join(",".join(row) for row in table)