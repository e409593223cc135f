"""Sliding window over consecutive word triples."""

from collections import deque
from typing import Iterable, Iterator, Tuple, TypeVar


T = TypeVar('T')


class Triples(Iterator[Tuple[T, T, T]]):
    """Yield every window of three consecutive items from `iterable`.

    ``Triples(['a', 'b', 'c', 'd'])`` yields ``('a', 'b', 'c')`` then
    ``('b', 'c', 'd')``. The source is consumed once; an exhausted
    ``Triples`` stays exhausted.
    """

    def __init__(self, iterable: Iterable[T]):
        self.iter = iter(iterable)
        self.window = deque(maxlen=3)

    def __iter__(self) -> 'Triples[T]':
        return self

    def __next__(self) -> Tuple[T, T, T]:
        # fill the window on the first call, then slide by one
        while True:
            item = next(self.iter)
            self.window.append(item)
            if len(self.window) == 3:
                return tuple(self.window)


def triples(iterable: Iterable[T]) -> Triples[T]:
    return Triples(iterable)
