"""Bucket entries and the forward cursor used to walk a chained hash table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


@dataclass(eq=False)
class Entry:
    """One key/value pair in a bucket's singly linked chain."""

    key: Any
    value: Any
    next: Optional["Entry"] = None


class Cursor:
    """A forward position inside a bucket array.

    A cursor whose entry is ``None`` sits past the last element (the end).
    Two cursors are equal when they refer to the same entry.
    """

    __slots__ = ("_buckets", "_entry", "_bucket")

    def __init__(self, buckets: List[Optional[Entry]], entry: Optional[Entry], bucket: int):
        self._buckets = buckets
        self._entry = entry
        self._bucket = bucket

    def _require_entry(self) -> Entry:
        if self._entry is None:
            raise IndexError("cursor is at the end")
        return self._entry

    @property
    def key(self) -> Any:
        """Key of the element under the cursor."""
        return self._require_entry().key

    @property
    def value(self) -> Any:
        """Mapped value of the element under the cursor; assignable."""
        return self._require_entry().value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._require_entry().value = new_value

    @property
    def item(self) -> Tuple[Any, Any]:
        """The (key, value) pair under the cursor."""
        entry = self._require_entry()
        return entry.key, entry.value

    @property
    def at_end(self) -> bool:
        """Whether the cursor is past the last element."""
        return self._entry is None

    @property
    def entry(self) -> Optional[Entry]:
        """The entry under the cursor, or None at the end."""
        return self._entry

    @property
    def bucket(self) -> int:
        """Index of the bucket the cursor is in."""
        return self._bucket

    def advance(self) -> "Cursor":
        """Move to the next element, or to the end; returns this cursor."""
        entry = self._require_entry()
        self._entry = entry.next
        if self._entry is None:
            for index in range(self._bucket + 1, len(self._buckets)):
                head = self._buckets[index]
                self._bucket = index
                if head is not None:
                    self._entry = head
                    return self
            self._bucket = len(self._buckets)
        return self

    def copy(self) -> "Cursor":
        """An independent cursor at the same position."""
        return Cursor(self._buckets, self._entry, self._bucket)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._entry is other._entry

    def __hash__(self) -> int:
        return id(self._entry)

    def __repr__(self) -> str:
        if self._entry is None:
            return "Cursor(end)"
        return f"Cursor({self._entry.key!r}: {self._entry.value!r})"