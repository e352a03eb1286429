import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Every loguru record emitted while the test runs."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def blue_frog_config():
    return {
        "word_length_min": 4,
        "word_length_max": 4,
        "num_words": 2,
        "separator_character": "-",
        "padding_digits_before": 0,
        "padding_digits_after": 0,
        "padding_type": "NONE",
        "case_transform": "NONE",
    }


@pytest.fixture
def fixed_padding_config():
    return {
        "word_length_min": 4,
        "word_length_max": 8,
        "num_words": 3,
        "separator_character": "-",
        "padding_digits_before": 2,
        "padding_digits_after": 2,
        "padding_type": "FIXED",
        "padding_character": "*",
        "padding_characters_before": 1,
        "padding_characters_after": 1,
    }
