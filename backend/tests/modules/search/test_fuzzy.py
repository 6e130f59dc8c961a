"""Tests for modules/search/fuzzy.py."""

import pytest

from modules.search.fuzzy import (
    create_fuzzy_search_terms,
    generate_typo_variations,
    matches,
)


class TestGenerateTypoVariations:
    def test_original_word_first(self):
        assert generate_typo_variations("canvas")[0] == "canvas"

    def test_single_character_unchanged(self):
        assert generate_typo_variations("x") == ["x"]

    def test_no_duplicates(self):
        variations = generate_typo_variations("abba")
        assert len(variations) == len(set(variations))

    def test_missing_letter(self):
        assert "whiskey" in generate_typo_variations("wiskey")

    def test_extra_letter(self):
        assert "wiskey" in generate_typo_variations("whiskey")

    def test_transposition(self):
        assert "paint" in generate_typo_variations("piant")

    def test_similar_letters(self):
        variations = generate_typo_variations("photo")
        assert "foto" in variations
        assert "phata" not in variations

    def test_split_word(self):
        assert "sun set" in generate_typo_variations("sunset")

    def test_ey_ending(self):
        assert "whisky" in generate_typo_variations("whiskey")
        assert "whiskey" in generate_typo_variations("whisky")

    def test_minimum_length(self):
        word = "portrait"
        assert all(len(v) >= len(word) - 2 for v in generate_typo_variations(word))

    def test_short_words_keep_two_characters(self):
        assert all(len(v) >= 2 for v in generate_typo_variations("ab"))


class TestCreateFuzzySearchTerms:
    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query(self, query):
        assert create_fuzzy_search_terms(query) == []

    def test_normalises_case_and_whitespace(self):
        terms = create_fuzzy_search_terms("  Blue   Sky ")
        assert terms[0] == "blue   sky"
        assert "bluesky" in terms
        assert "blue sky" in terms

    def test_single_character_words_not_expanded(self):
        assert create_fuzzy_search_terms("a") == ["a"]

    def test_expands_each_word(self):
        terms = create_fuzzy_search_terms("wiskey painting")
        assert "whiskey" in terms
        assert "painting" in terms

    def test_no_duplicates(self):
        terms = create_fuzzy_search_terms("moon moon")
        assert len(terms) == len(set(terms))


class TestMatches:
    def test_typo_finds_title(self):
        assert matches("Old Whiskey Still Life", create_fuzzy_search_terms("wiskey"))

    def test_reverse_typo(self):
        assert matches("Wiskey bottle study", create_fuzzy_search_terms("whiskey"))

    def test_case_insensitive(self):
        assert matches("SUNSET OVER THE BAY", ["sunset"])

    def test_no_match(self):
        assert not matches("Seascape", create_fuzzy_search_terms("portrait"))

    @pytest.mark.parametrize("text,terms", [(None, ["a"]), ("", ["a"]), ("text", [])])
    def test_empty_inputs(self, text, terms):
        assert matches(text, terms) is False
