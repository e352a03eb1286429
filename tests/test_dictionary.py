"""Tests for word providers and the filtered dictionary cache."""

from itertools import islice, product

import pytest

from mempass.dictionary import (
    DefaultDictionary,
    DictionaryCache,
    FileDictionary,
    SystemDictionary,
    WordListDictionary,
    distil_to_words,
)
from mempass.errors import DictionaryError
from mempass.random_cache import RandomCache

from .support import FixedRandomSource, index_draw


def made_up_words(count, length=4):
    return ["".join(letters) for letters in islice(product("abcdefgh", repeat=length), count)]


class TestDistil:
    def test_dedupes_and_keeps_order(self):
        assert distil_to_words(["frog", "blue", "frog"]) == ["frog", "blue"]

    def test_shape_check(self):
        words = ["cat", "blue", "ab1c", "half-way", "two words", "", "tree", 1234]
        assert distil_to_words(words) == ["blue", "tree"]


class TestDictionaryCache:
    def test_filters_by_length(self):
        cache = DictionaryCache.build(["blue", "frog", "apple", "elephant"], 4, 5, min_words=2)
        assert cache.words_filtered == ("blue", "frog", "apple")
        assert cache.words_all == ("blue", "frog", "apple", "elephant")
        assert len(cache) == 3

    def test_filtered_words_fit_bounds(self):
        words = made_up_words(60, 4) + made_up_words(60, 6) + made_up_words(60, 9) + ["abc", "x1yz"]
        cache = DictionaryCache.build(words, 5, 8, min_words=10)
        assert len(cache) == 60
        assert all(5 <= len(w) <= 8 and w.isalpha() for w in cache.words_filtered)

    def test_filtering_twice_gives_same_words(self):
        words = made_up_words(150) + made_up_words(150)
        first = DictionaryCache.build(words, 4, 8)
        second = DictionaryCache.build(words, 4, 8)
        assert first.words_filtered == second.words_filtered
        assert len(set(first.words_filtered)) == len(first.words_filtered) == 150

    def test_too_few_words(self):
        with pytest.raises(DictionaryError):
            DictionaryCache.build(made_up_words(50), 4, 8, min_words=100)

    def test_bad_bounds(self):
        with pytest.raises(DictionaryError):
            DictionaryCache.build(made_up_words(10), 6, 5, min_words=1)

    def test_too_many_words_to_sample(self, monkeypatch):
        monkeypatch.setattr("mempass.dictionary.INT_SCALE", 100)
        with pytest.raises(DictionaryError):
            DictionaryCache.build(made_up_words(101), 4, 4)
        assert len(DictionaryCache.build(made_up_words(100), 4, 4)) == 100

    def test_refilter(self):
        words = made_up_words(120, 4) + made_up_words(110, 5)
        cache = DictionaryCache.build(words, 4, 5, source="test words")
        narrowed = cache.refilter(5, 5)
        assert len(narrowed) == 110
        assert narrowed.source == "test words"
        assert narrowed.words_all == cache.words_all
        with pytest.raises(DictionaryError):
            cache.refilter(6, 8)

    def test_percent_available(self):
        cache = DictionaryCache.build(["blue", "frog", "apple", "elephant"], 4, 4, min_words=1)
        assert cache.percent_available == 50.0

    def test_sample_with_replacement(self):
        cache = DictionaryCache.build(["blue", "frog", "tree"], 4, 4, min_words=3)
        random = RandomCache(FixedRandomSource([index_draw(2), index_draw(0), index_draw(2)]))
        assert cache.sample(3, random) == ["tree", "blue", "tree"]

    def test_build_from_provider(self):
        cache = DictionaryCache.build(WordListDictionary(["blue", "frog"], source="pond"), 4, 4, min_words=2)
        assert cache.source == "pond"


class TestProviders:
    def test_word_list_is_copied(self):
        words = ["blue", "frog"]
        provider = WordListDictionary(words)
        provider.word_list().append("tree")
        assert provider.word_list() == ["blue", "frog"]

    def test_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# comment\n\nblue\n  frog  \n#tree\n", encoding="utf-8")
        provider = FileDictionary(path)
        assert provider.word_list() == ["blue", "frog"]
        assert str(path) in provider.source

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryError):
            FileDictionary(tmp_path / "missing.txt")

    def test_system_dictionary(self, tmp_path):
        path = tmp_path / "words"
        path.write_text("blue\nfrog\n", encoding="utf-8")
        provider = SystemDictionary(paths=[str(tmp_path / "nope"), str(path)])
        assert provider.word_list() == ["blue", "frog"]

    def test_no_system_dictionary(self, tmp_path):
        with pytest.raises(DictionaryError):
            SystemDictionary(paths=[str(tmp_path / "nope")])

    @pytest.mark.parametrize("bounds", [(4, 4), (5, 5), (4, 8), (5, 7)])
    def test_default_dictionary_supports_preset_bounds(self, bounds):
        cache = DictionaryCache.build(DefaultDictionary(), *bounds)
        assert len(cache) >= 100
