"""Edit builder — fold diff runs into a compact edit script.

Walks the diff output with a cursor in the original text.  Equal runs move
the cursor.  Deletes and inserts open an entry, or extend the previous one
when it ends exactly at the cursor, so:

    delete "bar", insert "qux"   ->  one substitution  [4, 7) -> "qux"
    delete "a", delete " b"      ->  one deletion      [0, 3) -> ""
    insert "x", insert "y"       ->  one insertion     [2, 2) -> "xy"
"""

from __future__ import annotations
from typing import Callable, Iterable

from .types import UNITS, DiffOp, EditEntry, EditScript, Unit


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


_MEASURES: dict[str, Callable[[str], int]] = {
    "byte": _utf8_len,
    "char": len,
}


class EditBuilder:
    """Accumulates edit entries from diff runs fed in differ order."""

    __slots__ = ("_cursor", "_unit", "_measure", "_edits")

    def __init__(self, start_offset: int = 0, *, unit: Unit = "byte") -> None:
        if unit not in UNITS:
            raise ValueError(f"unknown position unit: {unit!r}")
        self._cursor = start_offset
        self._unit = unit
        self._measure = _MEASURES[unit]
        # [start, end, replacement]; the last one may still grow
        self._edits: list[list] = []

    @property
    def cursor(self) -> int:
        return self._cursor

    def _abuts(self) -> bool:
        return bool(self._edits) and self._edits[-1][1] == self._cursor

    def feed(self, op: DiffOp) -> None:
        if op.tag == "equal":
            self._cursor += self._measure(op.text)

        elif op.tag == "delete":
            end = self._cursor + self._measure(op.text)
            if self._abuts():
                self._edits[-1][1] = end
            else:
                self._edits.append([self._cursor, end, ""])
            self._cursor = end

        elif op.tag == "insert":
            # Inserted text takes no room in the original; cursor stays put.
            if self._abuts():
                self._edits[-1][2] += op.text
            else:
                self._edits.append([self._cursor, self._cursor, op.text])

        else:
            raise ValueError(f"unknown diff tag: {op.tag!r}")

    def build(self) -> EditScript:
        return EditScript(
            (EditEntry(start, end, text) for start, end, text in self._edits),
            unit=self._unit,
        )


def build_edits(ops: Iterable[DiffOp], start_offset: int = 0, *, unit: Unit = "byte") -> EditScript:
    """Build an edit script from diff runs, positions shifted by ``start_offset``."""
    builder = EditBuilder(start_offset, unit=unit)
    for op in ops:
        builder.feed(op)
    return builder.build()
