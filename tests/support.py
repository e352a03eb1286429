"""Test doubles shared by the test modules."""

from mempass.errors import RandomSourceError
from mempass.random_cache import INT_SCALE
from mempass.random_source import RandomSource


def index_draw(k: int) -> float:
    """A float that RandomCache.next_int maps to `k` (for any max > k)."""
    return (k + 0.5) / INT_SCALE


class FixedRandomSource(RandomSource):
    """Hands out a fixed sequence of numbers, in order, and records each request."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def draw(self, n):
        self.calls.append(n)
        if n > len(self.values):
            raise RandomSourceError(f"only {len(self.values)} fixed numbers left, {n} requested")
        batch, self.values = self.values[:n], self.values[n:]
        return batch


class FailingRandomSource(RandomSource):
    def draw(self, n):
        raise RuntimeError("entropy pool on fire")
