"""
High-level password generator: owns a config, a dictionary cache, a random
cache and the entropy stats that go with them.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping

from loguru import logger

from .assembler import PasswordAssembler
from .config import (
    PasswordConfig,
    clone_config,
    config_from_json,
    config_statistics,
    config_to_string,
    has_multichar_substitutions,
    merge,
    random_batch_size,
    validate,
)
from .dictionary import DEFAULT_MIN_WORDS, DefaultDictionary, DictionaryCache, DictionaryProvider, WordListDictionary
from .entropy import EntropyStats, EntropyThresholds, calculate_entropy, render_bigint
from .errors import ConfigValidationError, PasswordGenerationError
from .presets import DEFAULT_CONFIG, preset_config
from .random_cache import RandomCache
from .random_source import RandomSource, SystemRandomSource


@dataclass(frozen=True)
class GeneratorStats:
    """Snapshot of a generator: config-derived figures plus usage counters."""

    # Password
    length_min: int
    length_max: int
    random_draws_required: int
    permutations_blind_min: int
    permutations_blind_max: int
    permutations_blind: int
    permutations_seen: int
    entropy_blind_min: float
    entropy_blind_max: float
    entropy_blind: float
    entropy_seen: float

    # Dictionary
    dictionary_source: str
    dictionary_words_total: int
    dictionary_words_filtered: int
    dictionary_words_percent_available: float
    dictionary_filter_length_min: int
    dictionary_filter_length_max: int

    # Usage
    passwords_generated: int
    random_numbers_cached: int
    random_numbers_source: str


def _as_provider(dictionary: DictionaryProvider | Iterable[str]) -> DictionaryProvider:
    if isinstance(dictionary, DictionaryProvider):
        return dictionary
    if isinstance(dictionary, str):
        raise TypeError("a dictionary must be a DictionaryProvider or a list of words, not a string")
    return WordListDictionary(dictionary)


class PasswordGenerator:
    """
    Generates memorable passwords.

    The config comes from, in order of precedence: `config` (a mapping, a
    PasswordConfig or a JSON string), the named `preset`, or the DEFAULT
    preset. `overrides` are merged on top of whichever was chosen.

    Any change of config or dictionary is all-or-nothing: if the new state
    fails validation the generator carries on exactly as before.
    """

    def __init__(
        self,
        config: PasswordConfig | Mapping[str, Any] | str | None = None,
        *,
        preset: str | None = None,
        overrides: Mapping[str, Any] | None = None,
        dictionary: DictionaryProvider | Iterable[str] | None = None,
        random_source: RandomSource | None = None,
        entropy_thresholds: EntropyThresholds | None = None,
        min_words: int = DEFAULT_MIN_WORDS,
        log=None,
    ) -> None:
        self._log = log or logger.bind(component="mempass")
        self._thresholds = entropy_thresholds or EntropyThresholds()
        self._min_words = min_words
        self._passwords_generated = 0

        if config is not None:
            resolved = self._resolve_config(config)
        elif preset is not None:
            resolved = preset_config(preset, log=self._log)
        else:
            resolved = DEFAULT_CONFIG
        if overrides:
            resolved = merge(resolved, overrides, log=self._log)

        self._random = RandomCache(
            random_source or SystemRandomSource(),
            batch_size=random_batch_size(resolved),
            log=self._log,
        )
        cache = DictionaryCache.build(
            _as_provider(dictionary if dictionary is not None else DefaultDictionary()),
            resolved.word_length_min,
            resolved.word_length_max,
            min_words=min_words,
        )
        self._config: PasswordConfig
        self._dictionary: DictionaryCache
        self._entropy: EntropyStats
        self._apply(resolved, cache)

    # ---------- state changes ----------

    def _resolve_config(self, config: PasswordConfig | Mapping[str, Any] | str) -> PasswordConfig:
        if isinstance(config, str):
            return config_from_json(config, log=self._log)
        if isinstance(config, (PasswordConfig, Mapping)):
            return validate(config)
        raise ConfigValidationError(
            f"a config must be a mapping, a PasswordConfig or a JSON string, not {type(config).__name__}"
        )

    def _apply(self, config: PasswordConfig, dictionary: DictionaryCache) -> None:
        """Swap in a new config/dictionary pair; both are already valid."""
        entropy = calculate_entropy(config, len(dictionary), self._thresholds)

        self._config = config
        self._dictionary = dictionary
        self._entropy = entropy
        self._random.batch_size = random_batch_size(config)

        self._log.debug(
            "loaded config with {} of {} words available ({})",
            len(dictionary),
            len(dictionary.words_all),
            dictionary.source,
        )
        for warning in entropy.warnings:
            self._log.warning("{}: {}", type(warning).__name__, warning)
        if has_multichar_substitutions(config):
            self._log.warning(
                "character substitutions replace single letters with multiple "
                "characters, so passwords may be longer than the computed maximum length"
            )

    def _refiltered(self, config: PasswordConfig) -> DictionaryCache:
        current = self._dictionary
        if (current.min_length, current.max_length) == (config.word_length_min, config.word_length_max):
            return current
        return current.refilter(config.word_length_min, config.word_length_max)

    def load_config(self, config: PasswordConfig | Mapping[str, Any] | str) -> None:
        """Replace the whole config."""
        resolved = self._resolve_config(config)
        self._apply(resolved, self._refiltered(resolved))

    def update_config(self, overrides: Mapping[str, Any]) -> None:
        """Merge `overrides` onto the current config."""
        merged = merge(self._config, overrides, log=self._log)
        self._apply(merged, self._refiltered(merged))

    def load_dictionary(self, dictionary: DictionaryProvider | Iterable[str]) -> None:
        cache = DictionaryCache.build(
            _as_provider(dictionary),
            self._config.word_length_min,
            self._config.word_length_max,
            min_words=self._min_words,
        )
        self._apply(self._config, cache)

    # ---------- accessors ----------

    @property
    def config(self) -> PasswordConfig:
        return clone_config(self._config)

    @property
    def dictionary(self) -> DictionaryCache:
        return self._dictionary

    @property
    def entropy(self) -> EntropyStats:
        return self._entropy

    @property
    def entropy_thresholds(self) -> EntropyThresholds:
        return self._thresholds

    @property
    def random_source(self) -> RandomSource:
        return self._random.source

    @random_source.setter
    def random_source(self, source: RandomSource) -> None:
        if not isinstance(source, RandomSource):
            raise TypeError(f"random source must be a RandomSource, not {type(source).__name__}")
        self._random = RandomCache(source, batch_size=random_batch_size(self._config), log=self._log)
        self._log.debug("random source set to {}, cache cleared", source.name)

    @property
    def passwords_generated(self) -> int:
        return self._passwords_generated

    # ---------- generation ----------

    def generate(self) -> str:
        assembler = PasswordAssembler(self._config, self._dictionary, self._random, log=self._log)
        try:
            password = assembler.assemble()
        except Exception as exc:
            raise PasswordGenerationError(f"failed to generate password: {exc}") from exc
        self._passwords_generated += 1
        return password

    def generate_many(self, n: int) -> list[str]:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"the number of passwords must be a positive integer, not {n!r}")
        return [self.generate() for _ in range(n)]

    # ---------- reporting ----------

    def stats(self) -> GeneratorStats:
        config_stats = config_statistics(self._config)
        entropy = self._entropy
        dictionary = self._dictionary
        return GeneratorStats(
            length_min=config_stats.length_min,
            length_max=config_stats.length_max,
            random_draws_required=config_stats.random_draws_required,
            permutations_blind_min=entropy.permutations_blind_min,
            permutations_blind_max=entropy.permutations_blind_max,
            permutations_blind=entropy.permutations_blind,
            permutations_seen=entropy.permutations_seen,
            entropy_blind_min=entropy.entropy_blind_min,
            entropy_blind_max=entropy.entropy_blind_max,
            entropy_blind=entropy.entropy_blind,
            entropy_seen=entropy.entropy_seen,
            dictionary_source=dictionary.source,
            dictionary_words_total=len(dictionary.words_all),
            dictionary_words_filtered=len(dictionary),
            dictionary_words_percent_available=dictionary.percent_available,
            dictionary_filter_length_min=dictionary.min_length,
            dictionary_filter_length_max=dictionary.max_length,
            passwords_generated=self._passwords_generated,
            random_numbers_cached=len(self._random),
            random_numbers_source=self._random.source.name,
        )

    def status(self) -> str:
        s = self.stats()
        out = [
            "*DICTIONARY*",
            f"Source: {s.dictionary_source}",
            f"# words: {s.dictionary_words_total}",
            f"# words of valid length: {s.dictionary_words_filtered} "
            f"({s.dictionary_words_percent_available}%)",
            "",
            "*CONFIG*",
            config_to_string(self._config).rstrip("\n"),
            "",
            "*RANDOM NUMBER CACHE*",
            f"Random Number Generator: {s.random_numbers_source}",
            f"# in cache: {s.random_numbers_cached}",
            "",
            "*PASSWORD STATISTICS*",
        ]
        if s.length_min == s.length_max:
            out.append(f"Password length: {s.length_max}")
            out.append(f"Permutations (brute-force): {render_bigint(s.permutations_blind_max)}")
        else:
            out.append(f"Password length: between {s.length_min} & {s.length_max}")
            out.append(
                f"Permutations (brute-force): between {render_bigint(s.permutations_blind_min)} & "
                f"{render_bigint(s.permutations_blind_max)} (average {render_bigint(s.permutations_blind)})"
            )
        out.append(f"Permutations (given dictionary & config): {render_bigint(s.permutations_seen)}")
        if s.length_min == s.length_max:
            out.append(f"Entropy (brute-force): {math.floor(s.entropy_blind_max)}bits")
        else:
            out.append(
                f"Entropy (brute-force): between {math.floor(s.entropy_blind_min)}bits and "
                f"{math.floor(s.entropy_blind_max)}bits (average {math.floor(s.entropy_blind)}bits)"
            )
        out.append(f"Entropy (given dictionary & config): {math.floor(s.entropy_seen)}bits")
        out.append(f"# Random Numbers needed per-password: {s.random_draws_required}")
        out.append(f"Passwords Generated: {s.passwords_generated}")
        return "\n".join(out) + "\n"

    def generate_json(self, n: int = 1) -> str:
        """`n` passwords plus their entropy figures, as a JSON object."""
        passwords = self.generate_many(n)
        s = asdict(self.stats())
        stats = {}
        for kind in ("blind", "blind_min", "blind_max", "seen"):
            stats[f"entropy_{kind}"] = math.floor(s[f"entropy_{kind}"])
            stats[f"permutations_{kind}"] = render_bigint(s[f"permutations_{kind}"])
        return json.dumps({"passwords": passwords, "stats": stats}, sort_keys=True)
