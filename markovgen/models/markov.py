"""Order-2 Markov chain text generator."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import torch

from markovgen.data.corpus import iter_batches
from markovgen.data.triples import Triples
from markovgen.models.cache import Cache, HashMapCache


logger = logging.getLogger(__name__)

# Words carried over from the previous batch so that trigrams spanning two
# feed calls are recorded exactly once.
BOUNDARY_WIDTH = 2


class MarkovError(Exception):
    """Base class for errors raised by the Markov model."""


class InsufficientCorpusError(MarkovError):
    """Raised when generation is requested before three words were fed."""

    def __init__(self, count: int):
        super().__init__(
            f"need at least 3 words to generate text, corpus has {count}"
        )
        self.count = count


class MarkovGenerator:
    """Trigram model fed incrementally with words.

    Example:
        >>> markov = MarkovGenerator(HashMapCache(), seed=0)
        >>> markov.feed(['Hello', 'world', 'my', 'name', 'is', 'Alice'])
        >>> text = markov.generate(15)
    """

    def __init__(
        self,
        cache: Optional[Cache] = None,
        rng: Optional[torch.Generator] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            cache: Transition store to fill (default: empty HashMapCache)
            rng: Random source used for generation
            seed: Seed for a new random source, ignored when `rng` is given
        """
        self.cache = cache if cache is not None else HashMapCache()
        self.words: List[str] = []
        if rng is None:
            rng = torch.Generator()
            if seed is None:
                rng.seed()
            else:
                rng.manual_seed(seed)
        self.rng = rng

    def feed(self, words: Sequence[str]) -> None:
        """Record every trigram of `words`, including those joining the previous batch."""
        words = list(words)
        if not words:
            return
        logger.debug("Collected words: %s", words)

        boundary = self.words[-BOUNDARY_WIDTH:]
        for w1, w2, w3 in Triples(boundary + words):
            self.cache.put((w1, w2), w3)

        self.words.extend(words)

    def feed_from_text_source(self, source: Iterable[str]) -> None:
        """Feed each line of `source` as its own batch."""
        for words in iter_batches(source):
            self.feed(words)

    def feed_from_file(self, path: Union[str, Path]) -> None:
        with open(path, 'r', encoding='utf-8') as f:
            before = len(self.words)
            self.feed_from_text_source(f)
        logger.info(f"Fed {len(self.words) - before} words from {path}")

    def _randint(self, high: int) -> int:
        return int(torch.randint(high, (1,), generator=self.rng).item())

    def generate(self, length: int) -> str:
        """Random walk of at most `length` words over the recorded trigrams.

        The walk starts at a uniformly chosen position of the corpus and stops
        early when the current pair of words has no recorded successor.
        """
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if len(self.words) < 3:
            raise InsufficientCorpusError(len(self.words))

        seed = self._randint(len(self.words) - 2)
        w1, w2 = self.words[seed], self.words[seed + 1]

        out: List[str] = []
        for _ in range(length):
            out.append(w1)
            successors = self.cache.get((w1, w2))
            if not successors:
                # chain exhausted, the pending word still followed w1
                if len(out) < length:
                    out.append(w2)
                logger.debug(f"No successor for ({w1!r}, {w2!r}), stopping")
                break
            w1, w2 = w2, successors[self._randint(len(successors))]

        return ' '.join(out)
