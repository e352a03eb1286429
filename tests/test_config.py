"""Tests for the config model: key checks, interdependency rules, merge and statistics."""

import json

import pytest

from mempass.config import (
    CONFIG_KEYS,
    WORD_LENGTH_ENGLISH,
    CaseTransform,
    PaddingType,
    PasswordConfig,
    SubstitutionMode,
    as_dict,
    clone_config,
    config_from_json,
    config_statistics,
    config_to_json,
    config_to_string,
    defined_config_keys,
    has_multichar_substitutions,
    is_valid_config,
    merge,
    random_batch_size,
    validate,
)
from mempass.errors import ConfigValidationError
from mempass.presets import DEFAULT_CONFIG, get_preset


class TestValidate:
    def test_returns_typed_config(self, fixed_padding_config):
        config = validate(fixed_padding_config)
        assert isinstance(config, PasswordConfig)
        assert config.padding_type is PaddingType.FIXED
        assert config.case_transform is CaseTransform.NONE
        assert config.substitution_mode is SubstitutionMode.ALWAYS
        assert config.random_increment == "AUTO"

    def test_unknown_key_is_rejected(self, fixed_padding_config):
        fixed_padding_config["colour"] = "blue"
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.key == "colour"

    def test_unknown_keys_reported_in_sorted_order(self, fixed_padding_config):
        fixed_padding_config.update({"zebra": 1, "aardvark": 2})
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.key == "aardvark"

    def test_missing_required_key(self, fixed_padding_config):
        del fixed_padding_config["num_words"]
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.key == "num_words"

    def test_none_counts_as_missing(self, fixed_padding_config):
        fixed_padding_config["separator_character"] = None
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.key == "separator_character"

    def test_bad_value_names_key_and_expectation(self, fixed_padding_config):
        fixed_padding_config["word_length_min"] = 3
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.key == "word_length_min"
        assert exc_info.value.expects == WORD_LENGTH_ENGLISH

    @pytest.mark.parametrize(
        "key,value",
        [
            ("num_words", 1),
            ("num_words", True),
            ("num_words", "3"),
            ("num_words", 3.0),
            ("separator_character", "ab"),
            ("separator_character", "a"),
            ("padding_type", "fixed"),
            ("padding_character", "x"),
            ("pad_to_length", 11),
            ("case_transform", "SHOUTY"),
            ("character_substitutions", {"ab": "x"}),
            ("character_substitutions", {"a": 1}),
            ("substitution_mode", "SOMETIMES"),
            ("symbol_alphabet", ["!", "!"]),
            ("symbol_alphabet", ["!", "a"]),
            ("symbol_alphabet", "!@"),
            ("random_increment", 0),
            ("random_increment", "auto"),
        ],
    )
    def test_invalid_values(self, fixed_padding_config, key, value):
        fixed_padding_config[key] = value
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.key == key

    def test_alphabet_duplicates_dropped_in_order(self, fixed_padding_config):
        fixed_padding_config["symbol_alphabet"] = ["@", "!", "@", "#"]
        config = validate(fixed_padding_config)
        assert config.symbol_alphabet == ("@", "!", "#")

    def test_digits_and_space_are_symbols(self, fixed_padding_config):
        fixed_padding_config["separator_character"] = " "
        fixed_padding_config["padding_character"] = "7"
        config = validate(fixed_padding_config)
        assert config.separator_character == " "
        assert config.padding_character == "7"

    def test_random_increment(self, fixed_padding_config):
        fixed_padding_config["random_increment"] = 25
        assert validate(fixed_padding_config).random_increment == 25

    def test_word_length_min_may_equal_max(self, fixed_padding_config):
        fixed_padding_config.update({"word_length_min": 6, "word_length_max": 6})
        assert is_valid_config(fixed_padding_config)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigValidationError):
            validate(["word_length_min", 4])

    def test_revalidating_config_is_stable(self):
        assert validate(DEFAULT_CONFIG) == DEFAULT_CONFIG


class TestInterdependencyRules:
    """Each mutation breaks exactly one rule of an otherwise valid config."""

    @pytest.mark.parametrize(
        "mutation,rule",
        [
            ({"word_length_min": 9}, "word_length_order"),
            ({"separator_character": "RANDOM"}, "separator_alphabet"),
            ({"padding_character": "NONE"}, "padding_character"),
            ({"padding_character": None}, "padding_character"),
            ({"padding_character": "RANDOM"}, "padding_alphabet"),
            ({"separator_character": "NONE", "padding_character": "SEPARATOR"}, "padding_separator"),
            ({"padding_characters_after": None}, "fixed_padding_counts"),
            ({"padding_characters_before": 0, "padding_characters_after": 0}, "fixed_padding_counts"),
            ({"padding_type": "ADAPTIVE"}, "adaptive_pad_length"),
        ],
    )
    def test_rule_violation(self, fixed_padding_config, mutation, rule):
        fixed_padding_config.update(mutation)
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(fixed_padding_config)
        assert exc_info.value.rule == rule

    def test_random_separator_with_separator_alphabet(self, fixed_padding_config):
        fixed_padding_config.update({"separator_character": "RANDOM", "separator_alphabet": ["-", "+"]})
        config = validate(fixed_padding_config)
        assert config.separator_choices() == ("-", "+")

    def test_random_padding_falls_back_to_symbol_alphabet(self, fixed_padding_config):
        fixed_padding_config.update({"padding_character": "RANDOM", "symbol_alphabet": ["!", "?"]})
        assert validate(fixed_padding_config).padding_choices() == ("!", "?")

    def test_padding_type_none_needs_no_padding_character(self, blue_frog_config):
        assert validate(blue_frog_config).padding_character is None

    def test_adaptive_with_length(self, fixed_padding_config):
        fixed_padding_config.update({"padding_type": "ADAPTIVE", "pad_to_length": 30})
        assert validate(fixed_padding_config).pad_to_length == 30


class TestCloneAndSerialise:
    def test_clone_is_equal_but_independent(self, fixed_padding_config):
        fixed_padding_config["character_substitutions"] = {"e": "3"}
        config = validate(fixed_padding_config)
        clone = clone_config(config)
        assert clone == config
        assert validate(clone) == validate(config)
        assert clone.character_substitutions is not config.character_substitutions
        assert clone.character_substitutions == {"e": "3"}
        assert hash(clone) == hash(config)

    def test_substitutions_are_read_only(self, fixed_padding_config):
        substitutions = {"e": "3"}
        fixed_padding_config["character_substitutions"] = substitutions
        config = validate(fixed_padding_config)
        with pytest.raises(TypeError):
            config.character_substitutions["o"] = "0"
        substitutions["o"] = "0"
        assert config.character_substitutions == {"e": "3"}
        assert as_dict(config)["character_substitutions"] == {"e": "3"}
        assert {config: "usable as a key"}[clone_config(config)] == "usable as a key"

    def test_as_dict_omits_unset_keys(self, blue_frog_config):
        data = as_dict(validate(blue_frog_config))
        assert "padding_character" not in data
        assert data["padding_type"] == "NONE"

    def test_json_round_trip(self):
        assert config_from_json(config_to_json(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_json_drops_unknown_keys(self, blue_frog_config, log_records):
        blue_frog_config["favourite_colour"] = "green"
        config = config_from_json(json.dumps(blue_frog_config))
        assert config.num_words == 2
        assert any("favourite_colour" in r["message"] for r in log_records)

    @pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
    def test_json_malformed(self, text):
        with pytest.raises(ConfigValidationError):
            config_from_json(text)

    def test_to_string(self):
        text = config_to_string(DEFAULT_CONFIG)
        assert "num_words: '3'\n" in text
        assert "case_transform: 'ALTERNATE'\n" in text

    def test_to_string_keeps_alphabet_order(self, blue_frog_config):
        blue_frog_config.update({"separator_character": "RANDOM", "separator_alphabet": ["@", "!", "-"]})
        text = config_to_string(validate(blue_frog_config))
        assert "separator_alphabet: ['@', '!', '-']\n" in text

    def test_defined_keys(self):
        assert defined_config_keys() == sorted(CONFIG_KEYS)
        assert "random_increment" in defined_config_keys()


class TestMerge:
    def test_overrides_applied(self):
        merged = merge(DEFAULT_CONFIG, {"num_words": 5, "case_transform": "UPPER"})
        assert merged.num_words == 5
        assert merged.case_transform is CaseTransform.UPPER
        assert DEFAULT_CONFIG.num_words == 3

    def test_unknown_key_skipped_with_warning(self, log_records):
        merged = merge(DEFAULT_CONFIG, {"num_words": 4, "bogus": 1})
        assert merged.num_words == 4
        warnings = [r for r in log_records if r["level"].name == "WARNING"]
        assert any("bogus" in r["message"] for r in warnings)

    def test_invalid_value_skipped_with_warning(self, log_records):
        merged = merge(DEFAULT_CONFIG, {"num_words": 1})
        assert merged.num_words == 3
        assert any(r["level"].name == "WARNING" and "num_words" in r["message"] for r in log_records)

    def test_none_unsets_optional_key(self):
        merged = merge(DEFAULT_CONFIG, {"case_transform": None})
        assert merged.case_transform is CaseTransform.NONE

    def test_none_on_required_key_is_skipped(self):
        merged = merge(DEFAULT_CONFIG, {"num_words": None})
        assert merged.num_words == 3

    def test_invalid_whole_raises(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            merge(DEFAULT_CONFIG, {"padding_characters_before": None})
        assert exc_info.value.rule == "fixed_padding_counts"

    def test_base_may_be_mapping(self, blue_frog_config):
        merged = merge(blue_frog_config, {"separator_character": "+"})
        assert merged.separator_character == "+"


class TestStatistics:
    def test_default_preset(self):
        stats = config_statistics(DEFAULT_CONFIG)
        # 2+2 padding, 2 digits + separator each side, 2 word separators
        assert stats.length_min == 12 + 3 * 4
        assert stats.length_max == 12 + 3 * 8
        # 3 words, separator, padding character, 4 digits
        assert stats.random_draws_required == 9

    def test_adaptive_length_is_fixed(self):
        stats = config_statistics(get_preset("WIFI").config)
        assert stats.length_min == stats.length_max == 63

    def test_no_separator(self, blue_frog_config):
        blue_frog_config.update({"separator_character": "NONE", "padding_digits_before": 2})
        stats = config_statistics(validate(blue_frog_config))
        assert stats.length_min == stats.length_max == 10

    def test_random_case_and_substitutions_cost_draws(self, blue_frog_config):
        blue_frog_config.update(
            {
                "case_transform": "RANDOM",
                "character_substitutions": {"e": "3", "o": "0"},
                "substitution_mode": "RANDOM",
            }
        )
        # 2 words + 2 case decisions + 2 words x 2 substitutions
        assert config_statistics(validate(blue_frog_config)).random_draws_required == 8

    def test_batch_size(self):
        assert random_batch_size(DEFAULT_CONFIG) == 9
        assert random_batch_size(merge(DEFAULT_CONFIG, {"random_increment": 50})) == 50

    def test_multichar_substitutions(self, blue_frog_config):
        blue_frog_config["character_substitutions"] = {"e": "3"}
        assert not has_multichar_substitutions(validate(blue_frog_config))
        blue_frog_config["character_substitutions"] = {"m": "/\\/\\"}
        assert has_multichar_substitutions(validate(blue_frog_config))
