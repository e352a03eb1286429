"""
Named, shipped configurations usable as a starting point for overrides.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from .config import (
    PasswordConfig,
    as_dict,
    config_statistics,
    config_to_string,
    merge,
    validate,
)
from .errors import ConfigValidationError

_WEB_PADDING = ["!", "@", "$", "%", "^", "&", "*", "+", "=", ":", "|", "~", "?"]
_WEB_SEPARATORS = ["-", "+", "=", ".", "*", "_", "|", "~", ","]


@dataclass(frozen=True)
class Preset:
    name: str
    description: str
    config: PasswordConfig


_PRESET_SOURCES: dict[str, tuple[str, dict[str, Any]]] = {
    "DEFAULT": (
        "The default preset resulting in a password consisting of 3 random words of "
        "between 4 and 8 letters with alternating case separated by a random "
        "character, with two random digits before and after, and padded with two "
        "random characters front and back",
        {
            "symbol_alphabet": list("!@$%^&*-_+=:|~?/.;"),
            "word_length_min": 4,
            "word_length_max": 8,
            "num_words": 3,
            "separator_character": "RANDOM",
            "padding_digits_before": 2,
            "padding_digits_after": 2,
            "padding_type": "FIXED",
            "padding_character": "RANDOM",
            "padding_characters_before": 2,
            "padding_characters_after": 2,
            "case_transform": "ALTERNATE",
        },
    ),
    "WEB32": (
        "A preset for websites that allow passwords up to 32 characters long.",
        {
            "padding_alphabet": _WEB_PADDING,
            "separator_alphabet": _WEB_SEPARATORS,
            "word_length_min": 4,
            "word_length_max": 5,
            "num_words": 4,
            "separator_character": "RANDOM",
            "padding_digits_before": 2,
            "padding_digits_after": 2,
            "padding_type": "FIXED",
            "padding_character": "RANDOM",
            "padding_characters_before": 1,
            "padding_characters_after": 1,
            "case_transform": "ALTERNATE",
        },
    ),
    "WEB16": (
        "A preset for websites that insist passwords not be longer than 16 characters.",
        {
            "padding_alphabet": _WEB_PADDING,
            "separator_alphabet": _WEB_SEPARATORS,
            "word_length_min": 4,
            "word_length_max": 4,
            "num_words": 3,
            "separator_character": "RANDOM",
            "padding_digits_before": 0,
            "padding_digits_after": 0,
            "padding_type": "FIXED",
            "padding_character": "RANDOM",
            "padding_characters_before": 1,
            "padding_characters_after": 1,
            "case_transform": "RANDOM",
        },
    ),
    "WIFI": (
        "A preset for generating 63 character long WPA2 keys (most routers allow 64 "
        "characters, but some only 63, hence the odd length).",
        {
            "padding_alphabet": _WEB_PADDING,
            "separator_alphabet": _WEB_SEPARATORS,
            "word_length_min": 4,
            "word_length_max": 8,
            "num_words": 6,
            "separator_character": "RANDOM",
            "padding_digits_before": 4,
            "padding_digits_after": 4,
            "padding_type": "ADAPTIVE",
            "padding_character": "RANDOM",
            "pad_to_length": 63,
            "case_transform": "RANDOM",
        },
    ),
    "APPLEID": (
        "A preset respecting the many prerequisites Apple places on Apple ID "
        "passwords. It also limits itself to symbols found on the iOS letter and "
        "number keyboards.",
        {
            "padding_alphabet": ["!", "?", "@", "&"],
            "separator_alphabet": ["-", ":", ".", ","],
            "word_length_min": 5,
            "word_length_max": 7,
            "num_words": 3,
            "separator_character": "RANDOM",
            "padding_digits_before": 2,
            "padding_digits_after": 2,
            "padding_type": "FIXED",
            "padding_character": "RANDOM",
            "padding_characters_before": 1,
            "padding_characters_after": 1,
            "case_transform": "RANDOM",
        },
    ),
    "NTLM": (
        "A preset for 14 character Windows NTLMv1 passwords. WARNING - only use this "
        "preset if you have to, it is too short to be acceptably secure and will "
        "always generate entropy warnings for the case where the config and "
        "dictionary are known.",
        {
            "padding_alphabet": _WEB_PADDING,
            "separator_alphabet": _WEB_SEPARATORS,
            "word_length_min": 5,
            "word_length_max": 5,
            "num_words": 2,
            "separator_character": "RANDOM",
            "padding_digits_before": 1,
            "padding_digits_after": 0,
            "padding_type": "FIXED",
            "padding_character": "RANDOM",
            "padding_characters_before": 0,
            "padding_characters_after": 1,
            "case_transform": "INVERT",
        },
    ),
    "SECURITYQ": (
        "A preset for creating fake answers to security questions.",
        {
            "word_length_min": 4,
            "word_length_max": 8,
            "num_words": 6,
            "separator_character": " ",
            "padding_digits_before": 0,
            "padding_digits_after": 0,
            "padding_type": "FIXED",
            "padding_character": "RANDOM",
            "padding_alphabet": [".", "!", "?"],
            "padding_characters_before": 0,
            "padding_characters_after": 1,
            "case_transform": "NONE",
        },
    ),
    "XKCD": (
        "A preset for generating passwords similar to the example in the original "
        "XKCD cartoon, but with a dash to separate the four random words, and the "
        "capitalisation randomised to add sufficient entropy to avoid warnings.",
        {
            "word_length_min": 4,
            "word_length_max": 8,
            "num_words": 4,
            "separator_character": "-",
            "padding_digits_before": 0,
            "padding_digits_after": 0,
            "padding_type": "NONE",
            "case_transform": "RANDOM",
        },
    ),
}

# Validated once at import; a broken preset is a packaging bug and fails loudly.
PRESETS: Mapping[str, Preset] = {
    name: Preset(name=name, description=description, config=validate(raw))
    for name, (description, raw) in _PRESET_SOURCES.items()
}


def defined_presets() -> list[str]:
    return sorted(PRESETS)


def get_preset(name: str = "DEFAULT") -> Preset:
    """Look up a preset by name (case-insensitive)."""
    key = str(name).upper()
    try:
        return PRESETS[key]
    except KeyError:
        raise ConfigValidationError(
            f"'{name}' is not a defined preset (defined presets: {', '.join(defined_presets())})"
        ) from None


def preset_description(name: str = "DEFAULT") -> str:
    return get_preset(name).description


def preset_config(
    name: str = "DEFAULT",
    overrides: Mapping[str, Any] | None = None,
    log=None,
) -> PasswordConfig:
    """
    Config for the named preset, with optional overrides merged on top.
    The preset itself is never modified.
    """
    base = get_preset(name).config
    if not overrides:
        return base
    return merge(base, overrides, log=log)


def presets_to_string() -> str:
    out = []
    for name in defined_presets():
        preset = PRESETS[name]
        stats = config_statistics(preset.config)
        out.append(f"{name}\n===\n{preset.description}\n")
        out.append(f"\nConfig:\n---\n{config_to_string(preset.config)}")
        out.append("\nStatistics:\n---\n")
        if stats.length_min == stats.length_max:
            out.append(f"Length (fixed): {stats.length_min} characters\n")
        else:
            out.append(
                f"Length (variable): between {stats.length_min} & {stats.length_max} characters\n"
            )
        out.append(f"Random Numbers Needed Per-Password: {stats.random_draws_required}\n\n")
    return "".join(out)


def presets_json() -> str:
    names = defined_presets()
    return json.dumps(
        {
            "defined_presets": names,
            "presets": {n: as_dict(PRESETS[n].config) for n in names},
            "preset_descriptions": {n: PRESETS[n].description for n in names},
        },
        sort_keys=True,
    )


DEFAULT_CONFIG = PRESETS["DEFAULT"].config
