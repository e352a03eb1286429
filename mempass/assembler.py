"""
Builds one password from a validated config, a dictionary cache and a
random cache.

Random numbers are consumed in a fixed order, so a fixed sequence of
draws always yields the same password:
- one per word
- one per word for RANDOM case
- one per (word, substitution) pair for RANDOM substitution
- one for a RANDOM separator
- one for a RANDOM padding character
- one per padding digit, leading digits first
"""

from __future__ import annotations

from typing import Mapping, Sequence

from loguru import logger

from .config import (
    NONE,
    RANDOM,
    SEPARATOR,
    CaseTransform,
    PaddingType,
    PasswordConfig,
    SubstitutionMode,
)
from .dictionary import DictionaryCache
from .random_cache import RandomCache


# ---------- transformations ----------


def transform_case(words: Sequence[str], mode: CaseTransform, random: RandomCache | None = None) -> list[str]:
    """
    Apply a case transform to each word. Only RANDOM consumes random
    numbers (one per word); ALTERNATE lower-cases even-indexed words and
    upper-cases odd-indexed ones.
    """
    if mode == CaseTransform.UPPER:
        return [w.upper() for w in words]
    if mode == CaseTransform.LOWER:
        return [w.lower() for w in words]
    if mode == CaseTransform.CAPITALISE:
        return [w[:1].upper() + w[1:].lower() for w in words]
    if mode == CaseTransform.INVERT:
        return [w[:1].lower() + w[1:].upper() for w in words]
    if mode == CaseTransform.ALTERNATE:
        return [w.lower() if i % 2 == 0 else w.upper() for i, w in enumerate(words)]
    if mode == CaseTransform.RANDOM:
        if random is None:
            raise ValueError("RANDOM case transform needs a random cache")
        return [w.upper() if random.next_int(2) == 0 else w.lower() for w in words]
    return list(words)


def substitute_characters(
    words: Sequence[str],
    substitutions: Mapping[str, str] | None,
    mode: SubstitutionMode = SubstitutionMode.ALWAYS,
    random: RandomCache | None = None,
) -> list[str]:
    """
    Replace every occurrence of each substituted letter, keys taken in
    sorted order. Matching is case-sensitive. In RANDOM mode each
    (word, letter) pair is a coin toss costing one random number.
    """
    if not substitutions or mode == SubstitutionMode.NEVER:
        return list(words)
    if mode == SubstitutionMode.RANDOM and random is None:
        raise ValueError("RANDOM substitution mode needs a random cache")

    out = []
    for word in words:
        for letter in sorted(substitutions):
            if mode == SubstitutionMode.RANDOM and random.next_int(100) >= 50:
                continue
            word = word.replace(letter, substitutions[letter])
        out.append(word)
    return out


def resolve_separator(config: PasswordConfig, random: RandomCache) -> str:
    separator = config.separator_character
    if separator == NONE:
        return ""
    if separator == RANDOM:
        choices = config.separator_choices()
        return choices[random.next_int(len(choices))]
    return separator


def resolve_padding_character(config: PasswordConfig, separator: str, random: RandomCache) -> str:
    if config.padding_type == PaddingType.NONE:
        return ""
    character = config.padding_character
    if character in (None, NONE):
        return ""
    if character == SEPARATOR:
        return separator
    if character == RANDOM:
        choices = config.padding_choices()
        return choices[random.next_int(len(choices))]
    return character


def random_digits(count: int, random: RandomCache) -> str:
    return "".join(str(random.next_int(10)) for _ in range(count))


def apply_padding(password: str, config: PasswordConfig, padding_character: str) -> str:
    """
    FIXED adds the configured number of padding characters at each end.
    ADAPTIVE pads the end up to `pad_to_length`, or cuts it back to it.
    """
    if config.padding_type == PaddingType.FIXED:
        before = padding_character * (config.padding_characters_before or 0)
        after = padding_character * (config.padding_characters_after or 0)
        return before + password + after
    if config.padding_type == PaddingType.ADAPTIVE:
        target = config.pad_to_length
        if len(password) > target:
            return password[:target]
        return password + padding_character * (target - len(password))
    return password


# ---------- assembler ----------


class PasswordAssembler:
    def __init__(
        self,
        config: PasswordConfig,
        dictionary: DictionaryCache,
        random: RandomCache,
        log=None,
    ) -> None:
        self.config = config
        self.dictionary = dictionary
        self.random = random
        self.log = log or logger

    def assemble(self) -> str:
        config = self.config
        random = self.random

        words = self.dictionary.sample(config.num_words, random)
        self.log.trace("got random words={}", words)
        words = transform_case(words, config.case_transform, random)
        words = substitute_characters(
            words, config.character_substitutions, config.substitution_mode, random
        )
        self.log.trace("transformed words={}", words)

        separator = resolve_separator(config, random)
        padding_character = resolve_padding_character(config, separator, random)
        self.log.trace("got separator={!r} padding character={!r}", separator, padding_character)

        password = separator.join(words)
        if config.padding_digits_before > 0:
            password = random_digits(config.padding_digits_before, random) + separator + password
        if config.padding_digits_after > 0:
            password = password + separator + random_digits(config.padding_digits_after, random)
        self.log.trace("added random digits: {}", password)

        password = apply_padding(password, config, padding_character)
        self.log.trace("added padding: {}", password)
        return password
