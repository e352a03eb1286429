"""
Configuration model for the memorable password generator.

A config is a flat mapping from a fixed set of key names to values. Each key
has a definition (required flag, value constraint, expectation string), and a
handful of rules tie keys together (e.g. a RANDOM separator needs an alphabet
to draw from). `validate` turns a candidate mapping into an immutable
`PasswordConfig`; every other way of changing a config goes through it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Literal, Mapping, Union

from loguru import logger
from pydantic import (
    AfterValidator,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from .errors import ConfigValidationError

# Special (non-literal) values shared by several keys.
NONE = "NONE"
RANDOM = "RANDOM"
SEPARATOR = "SEPARATOR"
AUTO = "AUTO"


class CaseTransform(str, Enum):
    NONE = "NONE"
    UPPER = "UPPER"
    LOWER = "LOWER"
    CAPITALISE = "CAPITALISE"
    INVERT = "INVERT"
    ALTERNATE = "ALTERNATE"
    RANDOM = "RANDOM"


class PaddingType(str, Enum):
    NONE = "NONE"
    FIXED = "FIXED"
    ADAPTIVE = "ADAPTIVE"


class SubstitutionMode(str, Enum):
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"
    RANDOM = "RANDOM"


# ---------- value types ----------


def is_symbol(value: object) -> bool:
    """True for a string of exactly one non-letter character."""
    return isinstance(value, str) and len(value) == 1 and not value.isalpha()


def _symbol(value: str) -> str:
    if not is_symbol(value):
        raise ValueError("must be exactly one non-letter character")
    return value


def _letter(value: str) -> str:
    if len(value) != 1 or not value.isalpha():
        raise ValueError("must be exactly one letter")
    return value


def _distinct_symbols(value: tuple[str, ...]) -> tuple[str, ...]:
    # Drop duplicates but keep the caller's order; indexes into the
    # alphabet must be reproducible.
    unique = tuple(dict.fromkeys(value))
    if len(unique) < 2:
        raise ValueError("must contain at least two distinct symbols")
    return unique


def _read_only(value: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(value)


def _separator_value(value: str) -> str:
    if value in (NONE, RANDOM) or is_symbol(value):
        return value
    raise ValueError("must be NONE, RANDOM or a single symbol")


def _padding_character_value(value: str) -> str:
    if value in (NONE, RANDOM, SEPARATOR) or is_symbol(value):
        return value
    raise ValueError("must be NONE, RANDOM, SEPARATOR or a single symbol")


Symbol = Annotated[StrictStr, AfterValidator(_symbol)]
Letter = Annotated[StrictStr, AfterValidator(_letter)]
SymbolAlphabet = Annotated[tuple[Symbol, ...], AfterValidator(_distinct_symbols)]
Substitutions = Annotated[dict[Letter, StrictStr], AfterValidator(_read_only)]
PositiveInteger = Annotated[StrictInt, Field(ge=0)]
WordLength = Annotated[StrictInt, Field(gt=3)]

POSITIVE_INTEGER_ENGLISH = "an integer greater than or equal to zero"
WORD_LENGTH_ENGLISH = "an integer greater than 3"
SYMBOL_ALPHABET_ENGLISH = "a list of distinct Symbols at least two long"


# ---------- key registry ----------


@dataclass(frozen=True)
class ConfigKeyDefinition:
    """One registered config key: its name, whether it is required, the
    pydantic type its value must satisfy, and a readable description of it."""

    name: str
    required: bool
    expects: str
    type_: Any
    _adapter: TypeAdapter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.type_))

    def check(self, value: Any) -> Any:
        """
        Return the normalised value (enums for modes, tuples for alphabets),
        or raise ConfigValidationError naming this key.
        """
        try:
            return self._adapter.validate_python(value)
        except ValidationError as exc:
            raise ConfigValidationError(
                f"{value!r} is not a valid value for the config key "
                f"'{self.name}' - must be {self.expects}",
                key=self.name,
                expects=self.expects,
            ) from exc


def _key(name: str, required: bool, expects: str, type_: Any) -> ConfigKeyDefinition:
    return ConfigKeyDefinition(name=name, required=required, expects=expects, type_=type_)


CONFIG_KEYS: Mapping[str, ConfigKeyDefinition] = {
    d.name: d
    for d in (
        _key("word_length_min", True, WORD_LENGTH_ENGLISH, WordLength),
        _key("word_length_max", True, WORD_LENGTH_ENGLISH, WordLength),
        _key(
            "num_words",
            True,
            "an integer greater than or equal to two",
            Annotated[StrictInt, Field(ge=2)],
        ),
        _key(
            "separator_character",
            True,
            "a single Symbol or one of the special values: 'NONE' or 'RANDOM'",
            Annotated[StrictStr, AfterValidator(_separator_value)],
        ),
        _key("padding_digits_before", True, POSITIVE_INTEGER_ENGLISH, PositiveInteger),
        _key("padding_digits_after", True, POSITIVE_INTEGER_ENGLISH, PositiveInteger),
        _key(
            "padding_type",
            True,
            "one of the values 'NONE', 'FIXED', or 'ADAPTIVE'",
            PaddingType,
        ),
        _key(
            "padding_character",
            False,
            "a single Symbol or one of the special values: 'NONE', 'RANDOM', or 'SEPARATOR'",
            Annotated[StrictStr, AfterValidator(_padding_character_value)],
        ),
        _key("padding_characters_before", False, POSITIVE_INTEGER_ENGLISH, PositiveInteger),
        _key("padding_characters_after", False, POSITIVE_INTEGER_ENGLISH, PositiveInteger),
        _key(
            "pad_to_length",
            False,
            "an integer greater than or equal to twelve",
            Annotated[StrictInt, Field(ge=12)],
        ),
        _key(
            "case_transform",
            False,
            "one of the values 'NONE', 'UPPER', 'LOWER', 'CAPITALISE', "
            "'INVERT', 'ALTERNATE', or 'RANDOM'",
            CaseTransform,
        ),
        _key(
            "character_substitutions",
            False,
            "a mapping of zero or more Letters to their replacement strings",
            Substitutions,
        ),
        _key(
            "substitution_mode",
            False,
            "one of the values 'ALWAYS', 'NEVER', or 'RANDOM'",
            SubstitutionMode,
        ),
        _key("symbol_alphabet", False, SYMBOL_ALPHABET_ENGLISH, SymbolAlphabet),
        _key("separator_alphabet", False, SYMBOL_ALPHABET_ENGLISH, SymbolAlphabet),
        _key("padding_alphabet", False, SYMBOL_ALPHABET_ENGLISH, SymbolAlphabet),
        _key(
            "random_increment",
            False,
            "an integer greater than zero or the special value 'AUTO'",
            Union[Literal["AUTO"], Annotated[StrictInt, Field(gt=0)]],
        ),
    )
}


def defined_config_keys() -> list[str]:
    """Sorted names of every registered config key."""
    return sorted(CONFIG_KEYS)


# ---------- the validated config ----------


@dataclass(frozen=True)
class PasswordConfig:
    """
    A validated configuration. Build it with `validate`, `merge` or a preset;
    constructing one directly skips every check.
    """

    # Words
    word_length_min: int
    word_length_max: int
    num_words: int

    # Separator between words: NONE, RANDOM or a literal symbol.
    separator_character: str

    # Random digits added before / after the words.
    padding_digits_before: int
    padding_digits_after: int

    # Symbol padding
    padding_type: PaddingType
    padding_character: str | None = None
    padding_characters_before: int | None = None
    padding_characters_after: int | None = None
    pad_to_length: int | None = None

    # Transformations
    case_transform: CaseTransform = CaseTransform.NONE
    # Read-only once validated.
    character_substitutions: Mapping[str, str] | None = field(default=None, hash=False)
    substitution_mode: SubstitutionMode = SubstitutionMode.ALWAYS

    # Alphabets used by RANDOM separator / padding characters.
    symbol_alphabet: tuple[str, ...] | None = None
    separator_alphabet: tuple[str, ...] | None = None
    padding_alphabet: tuple[str, ...] | None = None

    # How many random numbers to fetch each time the cache runs dry.
    random_increment: int | str = AUTO

    def separator_choices(self) -> tuple[str, ...]:
        """Alphabet a RANDOM separator is drawn from."""
        return self.separator_alphabet or self.symbol_alphabet or ()

    def padding_choices(self) -> tuple[str, ...]:
        """Alphabet a RANDOM padding character is drawn from."""
        return self.padding_alphabet or self.symbol_alphabet or ()


def as_dict(config: PasswordConfig) -> dict[str, Any]:
    """
    Plain-data form of a config: unset keys omitted, enums as their names,
    alphabets as lists. The result shares nothing with `config`.
    """
    out: dict[str, Any] = {}
    for f in fields(config):
        value = getattr(config, f.name)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, tuple):
            value = list(value)
        elif isinstance(value, Mapping):
            value = dict(value)
        out[f.name] = value
    return out


def _fail(rule: str, key: str, message: str) -> None:
    raise ConfigValidationError(message, key=key, rule=rule)


def _check_interdependencies(values: Mapping[str, Any]) -> None:
    if values["word_length_max"] < values["word_length_min"]:
        _fail(
            "word_length_order",
            "word_length_max",
            f"the config key 'word_length_max' ({values['word_length_max']}) cannot "
            f"be less than 'word_length_min' ({values['word_length_min']})",
        )

    separator = values["separator_character"]
    has_symbols = "symbol_alphabet" in values
    if separator == RANDOM and not (has_symbols or "separator_alphabet" in values):
        _fail(
            "separator_alphabet",
            "separator_character",
            "when the config key 'separator_character' is set to 'RANDOM', a symbol "
            "alphabet must be specified with one of the config keys "
            "'symbol_alphabet' or 'separator_alphabet'",
        )

    padding_type = values["padding_type"]
    padding_character = values.get("padding_character")
    if padding_type != PaddingType.NONE:
        if padding_character is None or padding_character == NONE:
            _fail(
                "padding_character",
                "padding_character",
                "when the config key 'padding_type' is not set to 'NONE', the config "
                "key 'padding_character' must be set to something other than 'NONE'",
            )
        if padding_character == RANDOM and not (has_symbols or "padding_alphabet" in values):
            _fail(
                "padding_alphabet",
                "padding_character",
                "when the config key 'padding_character' is set to 'RANDOM', a symbol "
                "alphabet must be specified with one of the config keys "
                "'symbol_alphabet' or 'padding_alphabet'",
            )
        if padding_character == SEPARATOR and separator == NONE:
            _fail(
                "padding_separator",
                "padding_character",
                "the config key 'padding_character' cannot be set to 'SEPARATOR' when "
                "the config key 'separator_character' is set to 'NONE'",
            )

    if padding_type == PaddingType.FIXED:
        before = values.get("padding_characters_before")
        after = values.get("padding_characters_after")
        if before is None or after is None:
            _fail(
                "fixed_padding_counts",
                "padding_characters_before" if before is None else "padding_characters_after",
                "when the config key 'padding_type' is set to 'FIXED', both the config "
                "keys 'padding_characters_before' and 'padding_characters_after' must be set",
            )
        if before + after <= 0:
            _fail(
                "fixed_padding_counts",
                "padding_characters_before",
                "when the config key 'padding_type' is set to 'FIXED', at least one of "
                "'padding_characters_before' and 'padding_characters_after' must be "
                "greater than zero (use padding_type 'NONE' for no symbol padding)",
            )

    if padding_type == PaddingType.ADAPTIVE and "pad_to_length" not in values:
        _fail(
            "adaptive_pad_length",
            "pad_to_length",
            "when the config key 'padding_type' is set to 'ADAPTIVE', the config key "
            "'pad_to_length' must be set",
        )


def validate(candidate: Mapping[str, Any] | PasswordConfig) -> PasswordConfig:
    """
    Validate a candidate config and return it as a PasswordConfig.

    Checks run in a fixed order and stop at the first problem:
    - undefined key names
    - missing required keys
    - each present key's value against its own definition
    - the rules that tie keys together
    Keys whose value is None count as unset.
    """
    if isinstance(candidate, PasswordConfig):
        candidate = as_dict(candidate)
    if not isinstance(candidate, Mapping):
        raise ConfigValidationError(
            f"a config must be a mapping of config keys to values, not {type(candidate).__name__}"
        )

    unknown = sorted(str(k) for k in candidate if k not in CONFIG_KEYS)
    if unknown:
        raise ConfigValidationError(
            f"'{unknown[0]}' is not a defined config key", key=unknown[0]
        )

    for name in defined_config_keys():
        definition = CONFIG_KEYS[name]
        if definition.required and candidate.get(name) is None:
            raise ConfigValidationError(
                f"the required config key '{name}' is missing",
                key=name,
                expects=definition.expects,
            )

    values: dict[str, Any] = {}
    for name in sorted(candidate):
        value = candidate[name]
        if value is None:
            continue
        values[name] = CONFIG_KEYS[name].check(value)

    _check_interdependencies(values)
    return PasswordConfig(**values)


def is_valid_config(candidate: Any) -> bool:
    try:
        validate(candidate)
    except ConfigValidationError:
        return False
    return True


def clone_config(config: PasswordConfig) -> PasswordConfig:
    """Copy equal to `config` that shares no containers with it."""
    substitutions = config.character_substitutions
    if substitutions is not None:
        substitutions = MappingProxyType(dict(substitutions))
    return replace(config, character_substitutions=substitutions)


def merge(
    base: PasswordConfig | Mapping[str, Any],
    overrides: Mapping[str, Any],
    log=None,
) -> PasswordConfig:
    """
    Apply overrides on top of a copy of `base` and validate the result.

    Overrides naming an undefined key, or carrying a value that fails its own
    key check, are skipped with a warning. A None value unsets an optional
    key. The merged config is validated as a whole, and a failure there
    raises ConfigValidationError.
    """
    log = log or logger
    if not isinstance(overrides, Mapping):
        raise ConfigValidationError("config overrides must be a mapping of config keys to values")
    if not isinstance(base, PasswordConfig):
        base = validate(base)

    merged = as_dict(base)
    for key in sorted(overrides, key=str):
        value = overrides[key]
        definition = CONFIG_KEYS.get(key)
        if definition is None:
            log.warning("skipping undefined config key '{}'", key)
            continue
        if value is None:
            if definition.required:
                log.warning("skipping attempt to unset required config key '{}'", key)
            else:
                merged.pop(key, None)
            continue
        try:
            merged[key] = definition.check(value)
        except ConfigValidationError as exc:
            log.warning("skipping config key '{}' because of an invalid value: {}", key, exc)
            continue
        log.debug("updated config key '{}'", key)

    return validate(merged)


# ---------- derived statistics ----------


@dataclass(frozen=True)
class ConfigStatistics:
    length_min: int
    length_max: int
    random_draws_required: int


def random_draws_required(config: PasswordConfig) -> int:
    """Number of random numbers consumed by one password under `config`."""
    draws = config.num_words
    if config.case_transform == CaseTransform.RANDOM:
        draws += config.num_words
    if config.separator_character == RANDOM:
        draws += 1
    if config.padding_type != PaddingType.NONE and config.padding_character == RANDOM:
        draws += 1
    draws += config.padding_digits_before + config.padding_digits_after
    if config.substitution_mode == SubstitutionMode.RANDOM and config.character_substitutions:
        draws += config.num_words * len(config.character_substitutions)
    return draws


def config_statistics(config: PasswordConfig) -> ConfigStatistics:
    """
    Length bounds and random-number cost of passwords built from `config`.

    Character substitutions are ignored, so multi-character replacements can
    push real passwords past `length_max` (see has_multichar_substitutions).
    """
    if config.padding_type == PaddingType.ADAPTIVE:
        length_min = length_max = config.pad_to_length
    else:
        has_separator = config.separator_character != NONE
        base = 0
        if config.padding_type == PaddingType.FIXED:
            base += config.padding_characters_before + config.padding_characters_after
        for digits in (config.padding_digits_before, config.padding_digits_after):
            if digits > 0:
                base += digits + (1 if has_separator else 0)
        if has_separator:
            base += config.num_words - 1
        length_min = base + config.num_words * config.word_length_min
        length_max = base + config.num_words * config.word_length_max

    return ConfigStatistics(
        length_min=length_min,
        length_max=length_max,
        random_draws_required=random_draws_required(config),
    )


def random_batch_size(config: PasswordConfig) -> int:
    """Refill size for the random cache: the fixed increment, or one password's worth for AUTO."""
    if config.random_increment == AUTO:
        return random_draws_required(config)
    return config.random_increment


def has_multichar_substitutions(config: PasswordConfig) -> bool:
    return any(len(v) > 1 for v in (config.character_substitutions or {}).values())


# ---------- serialisation ----------


def config_to_json(config: PasswordConfig) -> str:
    return json.dumps(as_dict(config), sort_keys=True)


def config_from_json(text: str, log=None) -> PasswordConfig:
    """
    Parse a JSON object into a validated config. Keys that are not config
    keys are dropped with a warning before validation.
    """
    log = log or logger
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigValidationError(f"failed to parse JSON config: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError("a JSON config must be an object")

    distilled = {}
    for key, value in raw.items():
        if key not in CONFIG_KEYS:
            log.warning("distilling out undefined config key '{}'", key)
            continue
        distilled[key] = value
    return validate(distilled)


def config_to_string(config: PasswordConfig) -> str:
    """One `key: value` line per set key, in key order."""
    lines = []
    data = as_dict(config)
    for key in defined_config_keys():
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, list):
            rendered = "[" + ", ".join(f"'{v}'" for v in value) + "]"
        elif isinstance(value, dict):
            rendered = "{" + ", ".join(f"{k}: '{value[k]}'" for k in sorted(value)) + "}"
        else:
            rendered = f"'{value}'"
        lines.append(f"{key}: {rendered}")
    return "\n".join(lines) + "\n"
