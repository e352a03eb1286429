"""
Word sources and the filtered word cache the generator samples from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .errors import DictionaryError
from .random_cache import INT_SCALE, RandomCache

# Words shorter than this are never used, whatever the config says.
MIN_WORD_LENGTH = 4
DEFAULT_MIN_WORDS = 100
SYSTEM_DICTIONARY_PATHS = ("/usr/share/dict/words", "/usr/dict/words")


# ---------- providers ----------


class DictionaryProvider(ABC):
    """Anything that can supply a list of candidate words."""

    @abstractmethod
    def word_list(self) -> list[str]:
        """Candidate words, comment and blank lines already removed."""

    @property
    def source(self) -> str:
        return type(self).__name__


class WordListDictionary(DictionaryProvider):
    def __init__(self, words: Iterable[str], source: str = "word list") -> None:
        self._words = list(words)
        self._source = source

    def word_list(self) -> list[str]:
        return list(self._words)

    @property
    def source(self) -> str:
        return self._source


def _read_word_file(path: Path, encoding: str) -> list[str]:
    try:
        text = path.read_text(encoding=encoding)
    except OSError as exc:
        raise DictionaryError(f"failed to read dictionary file '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DictionaryError(f"dictionary file '{path}' is not valid {encoding}") from exc

    words = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.append(line)
    return words


class FileDictionary(DictionaryProvider):
    """
    One word per line. Blank lines and lines starting with '#' are skipped.
    The file is read once, on construction.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self._words = _read_word_file(self.path, encoding)

    def word_list(self) -> list[str]:
        return list(self._words)

    @property
    def source(self) -> str:
        return f"file {self.path}"


class SystemDictionary(FileDictionary):
    """The Unix words file, wherever this system keeps it."""

    def __init__(self, paths: Sequence[str] = SYSTEM_DICTIONARY_PATHS, encoding: str = "utf-8") -> None:
        for candidate in paths:
            if Path(candidate).is_file():
                super().__init__(candidate, encoding=encoding)
                return
        raise DictionaryError(f"no system dictionary found (looked in {', '.join(paths)})")

    @property
    def source(self) -> str:
        return f"system dictionary {self.path}"


class DefaultDictionary(DictionaryProvider):
    """The English word list bundled with the package."""

    def word_list(self) -> list[str]:
        from .words import WORDS

        return list(WORDS)

    @property
    def source(self) -> str:
        return "bundled English dictionary"


# ---------- cache ----------


def distil_to_words(words: Iterable[str]) -> list[str]:
    """
    Drop duplicates (first occurrence wins) and anything that is not a
    purely alphabetic string of at least four characters.
    """
    out = []
    seen = set()
    for word in words:
        if not isinstance(word, str) or word in seen:
            continue
        seen.add(word)
        if len(word) >= MIN_WORD_LENGTH and word.isalpha():
            out.append(word)
    return out


@dataclass(frozen=True)
class DictionaryCache:
    """
    Distilled words plus the subset whose length fits the config.
    Build it with `DictionaryCache.build`.
    """

    words_all: tuple[str, ...]
    words_filtered: tuple[str, ...]
    min_length: int
    max_length: int
    source: str
    min_words: int = DEFAULT_MIN_WORDS

    @classmethod
    def build(
        cls,
        words: Iterable[str] | DictionaryProvider,
        min_len: int,
        max_len: int,
        min_words: int = DEFAULT_MIN_WORDS,
        source: str | None = None,
    ) -> DictionaryCache:
        if isinstance(words, DictionaryProvider):
            source = source or words.source
            words = words.word_list()
        if min_len > max_len:
            raise DictionaryError(
                f"minimum word length ({min_len}) cannot exceed the maximum ({max_len})"
            )

        distilled = tuple(distil_to_words(words))
        filtered = tuple(w for w in distilled if min_len <= len(w) <= max_len)
        if len(filtered) < min_words:
            raise DictionaryError(
                f"only {len(filtered)} words of between {min_len} and {max_len} letters "
                f"are available, at least {min_words} are required"
            )
        if len(filtered) > INT_SCALE:
            raise DictionaryError(
                f"{len(filtered)} words of between {min_len} and {max_len} letters "
                f"are available, at most {INT_SCALE} can be sampled"
            )
        return cls(
            words_all=distilled,
            words_filtered=filtered,
            min_length=min_len,
            max_length=max_len,
            source=source or "word list",
            min_words=min_words,
        )

    def refilter(self, min_len: int, max_len: int) -> DictionaryCache:
        """A new cache over the same words, filtered to new bounds."""
        return DictionaryCache.build(
            self.words_all, min_len, max_len, min_words=self.min_words, source=self.source
        )

    def __len__(self) -> int:
        return len(self.words_filtered)

    @property
    def percent_available(self) -> float:
        if not self.words_all:
            return 0.0
        return round(len(self.words_filtered) / len(self.words_all) * 100, 2)

    def sample(self, count: int, cache: RandomCache) -> list[str]:
        """
        `count` words drawn independently, with replacement, one random
        number each.
        """
        size = len(self.words_filtered)
        return [self.words_filtered[cache.next_int(size)] for _ in range(count)]
