"""A separately chained hash map with explicit buckets and cursors."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, List, Optional, TextIO, Tuple

from hashviz.cursor import Cursor, Entry

DEFAULT_BUCKETS = 10


class HashMap:
    """Hash map whose buckets are singly linked chains of entries.

    New entries go to the front of their bucket's chain. The map never
    rehashes by itself; call :meth:`rehash` to change the bucket count.
    Iteration yields ``(key, value)`` pairs bucket by bucket.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        bucket_count: int = DEFAULT_BUCKETS,
        hash_function: Callable[[Any], int] = hash,
    ):
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        self._hash = hash_function
        self._buckets: List[Optional[Entry]] = [None] * bucket_count
        self._size = 0

    # -- internals -----------------------------------------------------

    def _index_for(self, key: Any) -> int:
        return self._hash(key) % len(self._buckets)

    def _locate(self, key: Any) -> Tuple[int, Optional[Entry], Optional[Entry]]:
        """Return (bucket index, previous entry, matching entry)."""
        index = self._index_for(key)
        prev: Optional[Entry] = None
        entry = self._buckets[index]
        while entry is not None:
            if entry.key == key:
                return index, prev, entry
            prev, entry = entry, entry.next
        return index, None, None

    def _make_cursor(self, entry: Optional[Entry]) -> Cursor:
        if entry is None:
            return Cursor(self._buckets, None, len(self._buckets))
        return Cursor(self._buckets, entry, self._index_for(entry.key))

    # -- size and shape ------------------------------------------------

    def __len__(self) -> int:
        return self._size

    @property
    def bucket_count(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        """Elements per bucket."""
        return self._size / len(self._buckets)

    # -- lookup --------------------------------------------------------

    def __contains__(self, key: Any) -> bool:
        return self._locate(key)[2] is not None

    def __getitem__(self, key: Any) -> Any:
        entry = self._locate(key)[2]
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: Any, value: Any) -> None:
        cursor, _ = self.insert(key, value)
        cursor.value = value

    def __delitem__(self, key: Any) -> None:
        if not self.discard(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.key, entry.value
                entry = entry.next

    def index(self, key: Any, default: Any = None) -> Any:
        """Value for key, first inserting ``default`` if the key is absent."""
        cursor, _ = self.insert(key, default)
        return cursor.value

    def insert(self, key: Any, value: Any) -> Tuple[Cursor, bool]:
        """Add key/value unless key exists; return (cursor, whether added)."""
        index, _, entry = self._locate(key)
        if entry is not None:
            return self._make_cursor(entry), False
        entry = Entry(key, value, self._buckets[index])
        self._buckets[index] = entry
        self._size += 1
        return Cursor(self._buckets, entry, index), True

    def find(self, key: Any) -> Cursor:
        """Cursor at key's element, or the end cursor if absent."""
        return self._make_cursor(self._locate(key)[2])

    # -- removal -------------------------------------------------------

    def discard(self, key: Any) -> bool:
        """Remove key if present; return whether something was removed."""
        index, prev, entry = self._locate(key)
        if entry is None:
            return False
        if prev is None:
            self._buckets[index] = entry.next
        else:
            prev.next = entry.next
        self._size -= 1
        return True

    def erase_at(self, cursor: Cursor) -> Cursor:
        """Remove the element under cursor; return a cursor to the next one."""
        following = cursor.copy().advance()
        self.discard(cursor.key)
        return self._make_cursor(following.entry)

    # -- cursors -------------------------------------------------------

    def begin(self) -> Cursor:
        """Cursor at the first element, or the end cursor if empty."""
        for index, head in enumerate(self._buckets):
            if head is not None:
                return Cursor(self._buckets, head, index)
        return self.end()

    def end(self) -> Cursor:
        """Cursor past the last element."""
        return self._make_cursor(None)

    # -- bulk operations -----------------------------------------------

    def clear(self) -> None:
        """Remove every element, keeping the bucket count."""
        self._buckets[:] = [None] * len(self._buckets)
        self._size = 0

    def rehash(self, new_bucket_count: int) -> None:
        """Redistribute all entries over ``new_bucket_count`` buckets."""
        if new_bucket_count <= 0:
            raise ValueError("rehash: new_bucket_count must be positive")
        new_buckets: List[Optional[Entry]] = [None] * new_bucket_count
        for head in self._buckets:
            entry = head
            while entry is not None:
                following = entry.next
                index = self._hash(entry.key) % new_bucket_count
                entry.next = new_buckets[index]
                new_buckets[index] = entry
                entry = following
        # Replace in place so live cursors keep seeing this map's buckets.
        self._buckets[:] = new_buckets

    def debug(self, stream: Optional[TextIO] = None) -> None:
        """Print size, bucket count, load factor and every bucket's chain."""
        out = sys.stdout if stream is None else stream
        rule = "-" * 29 + "\n"
        out.write(rule)
        out.write("Printing debug information for your HashMap implementation\n")
        out.write(
            f"Size: {self._size}{'Buckets: ':>15}{self.bucket_count}"
            f"{'(load factor: ':>20}{self.load_factor:.2g}) \n\n"
        )
        for index, head in enumerate(self._buckets):
            parts = [f"[{index:>3}]:"]
            entry = head
            while entry is not None:
                parts.append(f" -> {entry.key}:{entry.value}")
                entry = entry.next
            parts.append(" /\n")
            out.write("".join(parts))
        out.write(rule)

    def copy(self) -> "HashMap":
        """Independent map with the same buckets, chains and hash function."""
        duplicate = HashMap(len(self._buckets), self._hash)
        for index, head in enumerate(self._buckets):
            tail: Optional[Entry] = None
            entry = head
            while entry is not None:
                node = Entry(entry.key, entry.value)
                if tail is None:
                    duplicate._buckets[index] = node
                else:
                    tail.next = node
                tail = node
                entry = entry.next
        duplicate._size = self._size
        return duplicate

    def __copy__(self) -> "HashMap":
        return self.copy()

    # -- comparison and display ----------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMap):
            return NotImplemented
        for key, value in self:
            entry = other._locate(key)[2]
            if entry is None or entry.value != value:
                return False
        return self._size == other._size

    def __str__(self) -> str:
        return "{" + ", ".join(f"{key}:{value}" for key, value in self) + "}"

    def __repr__(self) -> str:
        return f"HashMap({self}, bucket_count={self.bucket_count})"