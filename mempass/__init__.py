"""
Memorable password generator: random dictionary words, transformed and
padded according to a validated config.
"""

from .config import PasswordConfig, merge, validate
from .dictionary import (
    DefaultDictionary,
    DictionaryCache,
    DictionaryProvider,
    FileDictionary,
    SystemDictionary,
    WordListDictionary,
)
from .entropy import EntropyStats, EntropyThresholds
from .errors import (
    ConfigValidationError,
    DictionaryError,
    EntropyWarning,
    MemPassError,
    PasswordGenerationError,
    RandomSourceError,
)
from .generator import GeneratorStats, PasswordGenerator
from .presets import DEFAULT_CONFIG, defined_presets, preset_config
from .random_source import BasicRandomSource, RandomDotOrgSource, RandomSource, SystemRandomSource
from .cli import generate_password

__all__ = [
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "validate",
    "merge",
    "preset_config",
    "defined_presets",
    "DictionaryProvider",
    "DictionaryCache",
    "WordListDictionary",
    "FileDictionary",
    "SystemDictionary",
    "DefaultDictionary",
    "RandomSource",
    "BasicRandomSource",
    "SystemRandomSource",
    "RandomDotOrgSource",
    "EntropyStats",
    "EntropyThresholds",
    "PasswordGenerator",
    "GeneratorStats",
    "generate_password",
    "MemPassError",
    "ConfigValidationError",
    "DictionaryError",
    "RandomSourceError",
    "PasswordGenerationError",
    "EntropyWarning",
]
