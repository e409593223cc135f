"""Transition stores backing the Markov model."""

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


Key = Tuple[str, str]


class Cache(ABC):
    """Maps a pair of consecutive words to the words seen after it."""

    @abstractmethod
    def put(self, key: Key, value: str) -> None:
        """Append `value` to the successors of `key`."""

    @abstractmethod
    def get(self, key: Key) -> Optional[Sequence[str]]:
        """Return the successors of `key`, or None if it was never seen.

        The returned sequence is a snapshot; changing it leaves the store as is.
        """

    def has(self, key: Key) -> bool:
        return self.get(key) is not None


class HashMapCache(Cache):
    """Unbounded dict-backed store."""

    def __init__(self):
        self.table: Dict[Key, List[str]] = {}

    def put(self, key: Key, value: str) -> None:
        w1, w2 = key
        self.table.setdefault((w1, w2), []).append(value)

    def get(self, key: Key) -> Optional[Sequence[str]]:
        words = self.table.get(tuple(key))
        return list(words) if words is not None else None

    def items(self):
        return self.table.items()

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key) -> bool:
        return tuple(key) in self.table

    def __iter__(self) -> Iterator[Key]:
        return iter(self.table)


class LRUCache(HashMapCache):
    """Store holding at most `capacity` keys.

    Reads and writes mark a key as recently used; once the store is full the
    least recently used key is dropped together with its successors.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        super().__init__()
        self.capacity = capacity
        self.table: 'OrderedDict[Key, List[str]]' = OrderedDict()

    def put(self, key: Key, value: str) -> None:
        key = tuple(key)
        if key in self.table:
            self.table.move_to_end(key)
        elif len(self.table) >= self.capacity:
            self.table.popitem(last=False)
        super().put(key, value)

    def get(self, key: Key) -> Optional[Sequence[str]]:
        key = tuple(key)
        words = self.table.get(key)
        if words is None:
            return None
        self.table.move_to_end(key)
        return list(words)
