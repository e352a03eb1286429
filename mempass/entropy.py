"""
Entropy estimates for a config/dictionary combination.

Two attacker models are considered:
- blind: the attacker knows nothing and brute-forces a generic alphabet
- seen: the attacker knows the dictionary and the exact config

Permutation counts are plain Python ints; they overflow 64 bits for even
modest configs.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from .config import (
    NONE,
    RANDOM,
    SEPARATOR,
    CaseTransform,
    PaddingType,
    PasswordConfig,
    SubstitutionMode,
    config_statistics,
)
from .errors import BlindEntropyWarning, EntropyWarning, SeenEntropyWarning

# Alphabet size estimates used for the blind model.
LETTERS = 26
DIGITS = 10
SYMBOLS = 33
_MIXED_CASE = (
    CaseTransform.CAPITALISE,
    CaseTransform.INVERT,
    CaseTransform.ALTERNATE,
    CaseTransform.RANDOM,
)
_NON_ALPHANUMERIC = re.compile(r"[^0-9a-zA-Z]")


@dataclass(frozen=True)
class EntropyThresholds:
    """Minimum acceptable entropy in bits, and whether to warn below it."""

    min_blind: int = 78
    min_seen: int = 52
    warn_blind: bool = True
    warn_seen: bool = True


@dataclass(frozen=True)
class EntropyStats:
    permutations_blind_min: int
    permutations_blind_max: int
    permutations_blind: int
    permutations_seen: int
    entropy_blind_min: float
    entropy_blind_max: float
    entropy_blind: float
    entropy_seen: float
    warnings: tuple[EntropyWarning, ...] = field(default=())


def _emits_symbol(choice: str, alphabet: tuple[str, ...]) -> bool:
    if choice == RANDOM:
        return any(_NON_ALPHANUMERIC.match(c) for c in alphabet)
    return bool(_NON_ALPHANUMERIC.match(choice))


def passwords_will_contain_symbol(config: PasswordConfig) -> bool:
    """
    True when every password built from `config` is certain to hold at
    least one character that is neither a letter nor a digit.
    """
    separator = config.separator_character
    if separator != NONE and _emits_symbol(separator, config.separator_choices()):
        return True

    padding = config.padding_character
    if config.padding_type != PaddingType.NONE and padding not in (None, NONE, SEPARATOR):
        if _emits_symbol(padding, config.padding_choices()):
            return True
    return False


def blind_alphabet_size(config: PasswordConfig) -> int:
    size = LETTERS
    if config.case_transform in _MIXED_CASE:
        size += LETTERS
    if config.padding_digits_before > 0 or config.padding_digits_after > 0:
        size += DIGITS
    if passwords_will_contain_symbol(config):
        size += SYMBOLS
    return size


def seen_permutations(config: PasswordConfig, dictionary_size: int) -> int:
    words = config.num_words
    perms = dictionary_size**words
    if config.case_transform == CaseTransform.RANDOM:
        perms *= 2**words
    if config.separator_character == RANDOM:
        perms *= len(config.separator_choices())
    if config.padding_type != PaddingType.NONE and config.padding_character == RANDOM:
        perms *= len(config.padding_choices())
    perms *= 10 ** (config.padding_digits_before + config.padding_digits_after)
    if config.substitution_mode == SubstitutionMode.RANDOM and config.character_substitutions:
        perms *= 2 ** (words * len(config.character_substitutions))
    return perms


def _bits(permutations: int) -> float:
    return math.log2(permutations) if permutations > 0 else 0.0


def calculate_entropy(
    config: PasswordConfig,
    dictionary_size: int,
    thresholds: EntropyThresholds | None = None,
) -> EntropyStats:
    thresholds = thresholds or EntropyThresholds()
    stats = config_statistics(config)

    alphabet = blind_alphabet_size(config)
    # Half-way lengths round up.
    length_avg = (stats.length_min + stats.length_max + 1) // 2
    blind_min = alphabet**stats.length_min
    blind_max = alphabet**stats.length_max
    blind = alphabet**length_avg
    seen = seen_permutations(config, dictionary_size)

    entropy_blind_min = _bits(blind_min)
    entropy_seen = _bits(seen)

    warnings: list[EntropyWarning] = []
    if thresholds.warn_blind and entropy_blind_min < thresholds.min_blind:
        warnings.append(
            BlindEntropyWarning(
                f"for brute force attacks, the minimum entropy of {math.floor(entropy_blind_min)} "
                f"bits is below the recommended minimum of {thresholds.min_blind}"
            )
        )
    if thresholds.warn_seen and entropy_seen < thresholds.min_seen:
        warnings.append(
            SeenEntropyWarning(
                f"for attacks assuming full knowledge, the entropy of {math.floor(entropy_seen)} "
                f"bits is below the recommended minimum of {thresholds.min_seen}"
            )
        )

    return EntropyStats(
        permutations_blind_min=blind_min,
        permutations_blind_max=blind_max,
        permutations_blind=blind,
        permutations_seen=seen,
        entropy_blind_min=entropy_blind_min,
        entropy_blind_max=_bits(blind_max),
        entropy_blind=_bits(blind),
        entropy_seen=entropy_seen,
        warnings=tuple(warnings),
    )


def render_bigint(n: int) -> str:
    """Short scientific rendering of a huge int, e.g. 1.23x10^45."""
    digits = str(n)
    if len(digits) < 3:
        return digits
    return f"{digits[0]}.{digits[1:3]}x10^{len(digits) - 1}"
