"""
Batching front-end for a RandomSource.

The assembly pipeline consumes random numbers one at a time; sources are
cheapest when asked for many at once. The cache sits in between, refilling
itself with a batch whenever it runs dry and rejecting any batch that breaks
the source contract.
"""

from __future__ import annotations

import math
from collections import deque
from numbers import Real

from loguru import logger

from .errors import RandomSourceError
from .random_source import RandomSource

# next_int scales a float into this many buckets before reducing it.
INT_SCALE = 1_000_000


class RandomCache:
    def __init__(self, source: RandomSource, batch_size: int = 1, log=None) -> None:
        self._source = source
        self._queue: deque[float] = deque()
        self._log = log or logger
        self.batch_size = batch_size

    @property
    def source(self) -> RandomSource:
        return self._source

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @batch_size.setter
    def batch_size(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"batch size must be a positive integer, not {value!r}")
        self._batch_size = value

    def __len__(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()

    def _refill(self) -> None:
        n = self._batch_size
        self._log.debug("requesting {} random numbers from {}", n, self._source.name)
        try:
            batch = list(self._source.draw(n))
        except RandomSourceError:
            raise
        except Exception as exc:
            raise RandomSourceError(
                f"random source {self._source.name} failed to supply numbers: {exc}"
            ) from exc

        if len(batch) != n:
            raise RandomSourceError(
                f"random source {self._source.name} returned {len(batch)} numbers, {n} were requested"
            )
        for value in batch:
            if (
                isinstance(value, bool)
                or not isinstance(value, Real)
                or not math.isfinite(value)
                or not 0 <= value < 1
            ):
                raise RandomSourceError(
                    f"random source {self._source.name} returned {value!r}, "
                    "which is not a number in [0, 1)"
                )
        self._queue.extend(float(v) for v in batch)

    def next_float(self) -> float:
        """Next random number in [0, 1), fetching a new batch when empty."""
        if not self._queue:
            self._refill()
        return self._queue.popleft()

    def next_int(self, max_exclusive: int) -> int:
        """
        Random integer in [0, max_exclusive).

        Scales the next float onto `INT_SCALE` buckets and reduces it modulo
        `max_exclusive`, which reproduces historical password output exactly.
        Only `INT_SCALE` buckets exist, so a larger `max_exclusive` is refused
        rather than leaving its top values unreachable.
        """
        if isinstance(max_exclusive, bool) or not isinstance(max_exclusive, int) or max_exclusive < 1:
            raise ValueError(f"max_exclusive must be a positive integer, not {max_exclusive!r}")
        if max_exclusive > INT_SCALE:
            raise ValueError(f"max_exclusive must not exceed {INT_SCALE}, not {max_exclusive}")
        return int(self.next_float() * INT_SCALE) % max_exclusive
