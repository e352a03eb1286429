"""
Exceptions and warnings raised by the memorable password generator.
"""

from __future__ import annotations


class MemPassError(Exception):
    """Generic mempass error."""


class ConfigValidationError(MemPassError):
    """
    A configuration failed validation.

    `key` names the offending config key (when there is one), `rule` names
    the broken interdependency rule, and `expects` carries the human-readable
    description of a valid value.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        rule: str | None = None,
        expects: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.rule = rule
        self.expects = expects


class DictionaryError(MemPassError):
    """The word source could not produce enough usable words."""


class RandomSourceError(MemPassError):
    """A random source returned a bad batch or failed to return one."""


class PasswordGenerationError(MemPassError):
    """Generating a single password failed; no partial password exists."""


class EntropyWarning(UserWarning):
    """Advisory: a config/dictionary combination is below a recommended entropy."""


class BlindEntropyWarning(EntropyWarning):
    """Brute-force entropy (attacker knows nothing) is below the minimum."""


class SeenEntropyWarning(EntropyWarning):
    """Entropy against an attacker who knows dictionary and config is below the minimum."""
