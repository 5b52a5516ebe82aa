"""A matrix whose rows are each held as a linked list of column entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dskit.linked_list import LinkedList


@dataclass(frozen=True, slots=True)
class _Entry:
    column: int
    value: Any


class RowListMatrix:
    """Rows of varying length, each a linked list of (column, value) entries."""

    def __init__(self, rows):
        self._rows: list[LinkedList] = [
            LinkedList(_Entry(column, value) for column, value in enumerate(row))
            for row in rows
        ]

    def row(self, index):
        """The (column, value) pairs of row ``index`` in column order."""
        return [(entry.column, entry.value) for entry in self._rows[index]]

    def to_lists(self):
        """The values of every row as a list of lists."""
        return [[entry.value for entry in row] for row in self._rows]

    def __len__(self):
        return len(self._rows)

    def render(self):
        """Each row's values written together, one row per line."""
        return "\n".join(
            "".join(str(entry.value) for entry in row) for row in self._rows
        )