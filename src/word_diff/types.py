"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable, Iterator, Literal

Tag = Literal["equal", "delete", "insert"]
Unit = Literal["byte", "char"]

UNITS: tuple[str, ...] = ("byte", "char")


class CharKind(IntEnum):
    """Class of a single character, used to find token boundaries."""
    WHITESPACE = 0
    PUNCTUATION = 1
    WORD = 2


@dataclass(frozen=True, slots=True)
class Token:
    """A view into ``source`` covering ``source[start:end]``."""
    source: str = field(repr=False, compare=False)
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class DiffOp:
    """A run of consecutive tokens sharing one diff tag."""
    tag: Tag
    text: str


@dataclass(frozen=True, slots=True)
class EditEntry:
    """Replace ``[start, end)`` of the original text with ``replacement``."""
    start: int
    end: int
    replacement: str

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    @property
    def is_deletion(self) -> bool:
        return self.start != self.end and not self.replacement


class EditScript:
    """Ordered, read-only collection of edit entries.

    Positions are measured in ``unit`` ("byte" for UTF-8 offsets, "char"
    for code points).  The ``start``/``end``/``data`` accessors mirror what
    a host binding needs and return None for an index out of range.
    """

    __slots__ = ("_entries", "_unit")

    def __init__(self, entries: Iterable[EditEntry] = (), *, unit: Unit = "byte") -> None:
        if unit not in UNITS:
            raise ValueError(f"unknown position unit: {unit!r}")
        self._entries: tuple[EditEntry, ...] = tuple(entries)
        self._unit = unit

    @property
    def unit(self) -> Unit:
        return self._unit

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EditEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> EditEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditScript):
            return NotImplemented
        return self._entries == other._entries and self._unit == other._unit

    def __hash__(self) -> int:
        return hash((self._entries, self._unit))

    def __repr__(self) -> str:
        return f"EditScript({list(self._entries)!r}, unit={self._unit!r})"

    # ------------------------------------------------------------------
    # Boundary accessors
    # ------------------------------------------------------------------

    def get(self, index: int) -> EditEntry | None:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def start(self, index: int) -> int | None:
        entry = self.get(index)
        return entry.start if entry is not None else None

    def end(self, index: int) -> int | None:
        entry = self.get(index)
        return entry.end if entry is not None else None

    def data(self, index: int) -> str | None:
        entry = self.get(index)
        return entry.replacement if entry is not None else None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_list(self) -> list[dict[str, Any]]:
        return [
            {"start": e.start, "end": e.end, "replacement": e.replacement}
            for e in self._entries
        ]

    @classmethod
    def from_list(cls, items: list[dict[str, Any]], *, unit: Unit = "byte") -> "EditScript":
        return cls(
            (EditEntry(int(d["start"]), int(d["end"]), str(d.get("replacement", "")))
             for d in items),
            unit=unit,
        )
