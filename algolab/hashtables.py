"""Hash tables keyed by strings: chaining and open addressing with probe counts."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .hashing import hash1, hash2
from .rbtree import RedBlackTree

QUADRATIC_C1 = 5
QUADRATIC_C2 = 13


class HashType(enum.IntEnum):
    """Collision resolution strategy."""

    SEPARATE_CHAINING = 0
    LINEAR_PROBING = 1
    QUADRATIC_PROBING = 2
    DOUBLE_HASHING = 3

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class HashTable(ABC):
    """Common state of every table: its size, kind and probe counter."""

    def __init__(self, size: int, kind: HashType) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self.kind = HashType(kind)
        self.probe_count = 0

    def reset_probe_count(self) -> None:
        """Set the probe counter back to zero."""
        self.probe_count = 0

    @abstractmethod
    def search(self, key: str) -> Optional[Any]:
        """Return the value stored under key, or None."""

    @abstractmethod
    def insert(self, key: str, value: Any) -> bool:
        """Store value under key; return whether it was stored."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key if present."""


@dataclass
class _Entry:
    key: str
    value: Any


class SeparateChainingTable(HashTable):
    """Buckets of entries; new entries go to the front of their bucket."""

    def __init__(self, size: int) -> None:
        super().__init__(size, HashType.SEPARATE_CHAINING)
        self._buckets: list[deque[_Entry]] = [deque() for _ in range(size)]

    def _bucket(self, key: str) -> deque[_Entry]:
        return self._buckets[hash1(key) % self.size]

    def search(self, key: str) -> Optional[Any]:
        for entry in self._bucket(key):
            if entry.key == key:
                return entry.value
            self.probe_count += 1
        return None

    def insert(self, key: str, value: Any) -> bool:
        self._bucket(key).appendleft(_Entry(key, value))
        return True

    def remove(self, key: str) -> None:
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                return


class TreeChainingTable(HashTable):
    """Separate chaining where each bucket is a red-black tree."""

    def __init__(self, size: int) -> None:
        super().__init__(size, HashType.SEPARATE_CHAINING)
        self._trees = [RedBlackTree() for _ in range(size)]

    def _tree(self, key: str) -> RedBlackTree:
        return self._trees[hash1(key) % self.size]

    def search(self, key: str) -> Optional[Any]:
        return self._tree(key).get(key, None)

    def insert(self, key: str, value: Any) -> bool:
        tree = self._tree(key)
        tree.remove(key)
        return tree.insert(key, value)

    def remove(self, key: str) -> None:
        self._tree(key).remove(key)


@dataclass
class _Slot:
    key: str
    value: Any
    live: bool = True


class OpenAddressingTable(HashTable):
    """Open addressing with linear, quadratic or double-hash probing.

    Removed entries leave a tombstone so later searches keep probing past them.
    """

    def __init__(self, size: int, kind: HashType) -> None:
        super().__init__(size, kind)
        if self.kind is HashType.SEPARATE_CHAINING:
            raise ValueError("open addressing needs a probing strategy")
        if self.kind is HashType.DOUBLE_HASHING and size < 2:
            raise ValueError("double hashing needs a table size of at least 2")
        self._slots: list[Optional[_Slot]] = [None] * size

    def probe_index(self, key: str, attempt: int) -> int:
        """Slot index tried on the given attempt (counting from 0)."""
        return self._index(hash1(key), key, attempt)

    def _index(self, base: int, key: str, attempt: int) -> int:
        if self.kind is HashType.LINEAR_PROBING:
            return (base + attempt) % self.size
        if self.kind is HashType.QUADRATIC_PROBING:
            return (base + QUADRATIC_C1 * attempt + QUADRATIC_C2 * attempt * attempt) % self.size
        return (base + attempt * hash2(key, self.size)) % self.size

    def _probe_sequence(self, key: str) -> Iterator[int]:
        base = hash1(key)
        if self.kind is HashType.DOUBLE_HASHING:
            step = hash2(key, self.size)
            for attempt in range(self.size):
                yield (base + attempt * step) % self.size
        else:
            for attempt in range(self.size):
                yield self._index(base, key, attempt)

    def insert(self, key: str, value: Any) -> bool:
        for index in self._probe_sequence(key):
            slot = self._slots[index]
            if slot is None or not slot.live:
                self._slots[index] = _Slot(key, value)
                return True
            if slot.key == key:
                slot.value = value
                return True
        return False

    def search(self, key: str) -> Optional[Any]:
        for index in self._probe_sequence(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot.live and slot.key == key:
                return slot.value
            self.probe_count += 1
        return None

    def remove(self, key: str) -> None:
        for index in self._probe_sequence(key):
            slot = self._slots[index]
            if slot is not None and slot.live and slot.key == key:
                slot.live = False
                return


def make_table(kind: HashType, size: int) -> HashTable:
    """Build the table used for a strategy; separate chaining uses tree buckets."""
    kind = HashType(kind)
    if kind is HashType.SEPARATE_CHAINING:
        return TreeChainingTable(size)
    return OpenAddressingTable(size, kind)