"""
Random number sources.

Every source hands out batches of floats in [0, 1). The password pipeline
never talks to a source directly; it goes through RandomCache, which asks for
numbers in batches and checks everything it gets back.
"""

from __future__ import annotations

import os
import random
import re
from abc import ABC, abstractmethod

import httpx

from .errors import RandomSourceError


class RandomSource(ABC):
    """Contract for anything that can supply random numbers."""

    @abstractmethod
    def draw(self, n: int) -> list[float]:
        """Return exactly `n` floats, each in [0, 1)."""

    @property
    def name(self) -> str:
        return type(self).__name__


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"the number of random numbers requested must be a positive integer, not {n!r}")


class BasicRandomSource(RandomSource):
    """
    Python's Mersenne Twister. Cheap and reproducible when seeded, but not
    suitable where the passwords matter.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def draw(self, n: int) -> list[float]:
        _check_count(n)
        return [self._rng.random() for _ in range(n)]


class SystemRandomSource(RandomSource):
    """
    The operating system's entropy pool: four raw bytes per number, read as
    an unsigned 32-bit integer and scaled into [0, 1).
    """

    def draw(self, n: int) -> list[float]:
        _check_count(n)
        raw = os.urandom(4 * n)
        return [
            int.from_bytes(raw[i : i + 4], "big") / 4_294_967_296
            for i in range(0, len(raw), 4)
        ]


# ---------- random.org ----------

RDO_URL = "https://www.random.org/integers/"
RDO_MAX_INT = 100_000_000
# random.org refuses requests for more than this many integers at once.
RDO_MAX_PER_REQUEST = 10_000

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RandomDotOrgSource(RandomSource):
    """
    True random numbers from the random.org HTTP API.

    Every call is a network round-trip, so pair this source with a large
    `random_increment` in the config to fetch many numbers at once.
    random.org asks automated clients to identify themselves, hence the
    e-mail address, which goes into the User-Agent header.
    """

    def __init__(
        self,
        email: str,
        timeout: float = 180,
        client: httpx.Client | None = None,
    ) -> None:
        if not email or not _EMAIL_RE.match(email):
            raise ValueError("a valid email address is required to use random.org")
        self.email = email
        self.timeout = timeout
        self._client = client

    @property
    def user_agent(self) -> str:
        return f"mempass.RandomDotOrgSource (on behalf of {self.email})"

    def draw(self, n: int) -> list[float]:
        _check_count(n)
        numbers: list[float] = []
        remaining = n
        while remaining > 0:
            chunk = min(remaining, RDO_MAX_PER_REQUEST)
            numbers.extend(self._fetch(chunk))
            remaining -= chunk
        return numbers

    def _fetch(self, n: int) -> list[float]:
        params = {
            "num": n,
            "min": 0,
            "max": RDO_MAX_INT - 1,
            "col": 1,
            "base": 10,
            "format": "plain",
            "rnd": "new",
        }
        headers = {"User-Agent": self.user_agent}
        try:
            if self._client is not None:
                response = self._client.get(RDO_URL, params=params, headers=headers)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(RDO_URL, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RandomSourceError(
                f"random.org returned HTTP {exc.response.status_code}: {exc.response.text.strip()}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RandomSourceError(f"failed to reach random.org: {exc}") from exc

        lines = [line.strip() for line in response.text.splitlines() if line.strip()]
        if len(lines) != n:
            raise RandomSourceError(
                f"random.org returned {len(lines)} numbers, {n} were requested"
            )

        numbers = []
        for line in lines:
            if not line.isdigit():
                raise RandomSourceError(f"received invalid number from random.org ({line!r})")
            numbers.append(int(line) / RDO_MAX_INT)
        return numbers
