"""Configuration for text generation."""

from dataclasses import dataclass
from typing import Optional

from markovgen.models.cache import Cache, HashMapCache, LRUCache
from markovgen.models.markov import MarkovGenerator


@dataclass
class MarkovConfig:
    """Settings for building and sampling a MarkovGenerator."""
    length: int = 30
    seed: Optional[int] = None
    cache_capacity: Optional[int] = None

    def make_cache(self) -> Cache:
        if self.cache_capacity is None:
            return HashMapCache()
        return LRUCache(self.cache_capacity)

    def build(self) -> MarkovGenerator:
        return MarkovGenerator(self.make_cache(), seed=self.seed)
