"""Tests for splitting words into stems and trailing punctuation."""

import pytest

from punktcore import PunktLanguageVars, WordPair, split_word, split_words


class TestSplitWord:
    """Tests for the precedence of the splitting rules."""

    def test_plain_word(self, lang_vars: PunktLanguageVars):
        """A word without punctuation is left whole."""
        assert split_word("hello", lang_vars) == WordPair("hello", "")

    def test_internal_hyphens_not_split(self, lang_vars: PunktLanguageVars):
        """Single hyphens are not multi-character punctuation."""
        assert split_word("state-of-the-art", lang_vars) == ("state-of-the-art", "")

    def test_trailing_comma(self, lang_vars: PunktLanguageVars):
        """A final comma is split off."""
        assert split_word("well-known,", lang_vars) == ("well-known", ",")

    def test_non_word_character(self, lang_vars: PunktLanguageVars):
        """The word is split at the first non-word character."""
        assert split_word("really?", lang_vars) == ("really", "?")
        assert split_word("don't", lang_vars) == ("don", "'t")

    def test_non_word_then_period(self, lang_vars: PunktLanguageVars):
        """Everything from the non-word character onwards is trailing punctuation."""
        assert split_word("word).", lang_vars) == ("word", ").")

    def test_leading_non_word_character(self, lang_vars: PunktLanguageVars):
        """A word starting with a non-word character has an empty stem."""
        assert split_word("(see", lang_vars) == ("", "(see")

    def test_period_final_words_are_not_split(self, lang_vars: PunktLanguageVars):
        """A single trailing period stays attached to its word."""
        assert split_word("Dr.", lang_vars) == ("Dr.", "")
        assert split_word("U.S.A.", lang_vars) == ("U.S.A.", "")
        assert split_word("3.14", lang_vars) == ("3.14", "")

    def test_trailing_ellipsis(self, lang_vars: PunktLanguageVars):
        """A multi-char run at the end of the word becomes the second part."""
        assert split_word("Wait...", lang_vars) == ("Wait", "...")
        assert split_word("x..", lang_vars) == ("x", "..")

    def test_trailing_dashes(self, lang_vars: PunktLanguageVars):
        assert split_word("end--", lang_vars) == ("end", "--")

    def test_internal_dashes(self, lang_vars: PunktLanguageVars):
        """A multi-char run inside the word splits after the run."""
        assert split_word("foo--bar", lang_vars) == ("foo--", "bar")
        assert split_word("a..b", lang_vars) == ("a..", "b")

    def test_multi_char_run_then_period(self, lang_vars: PunktLanguageVars):
        """A period after an inner multi-char run is split off on its own."""
        assert split_word("end--.", lang_vars) == ("end--", ".")
        assert split_word("--.", lang_vars) == ("--", ".")

    def test_multi_char_run_overrides_comma(self, lang_vars: PunktLanguageVars):
        """The multi-char rule is applied last and wins over the comma rule."""
        assert split_word("Hmm...,", lang_vars) == ("Hmm...", ",")

    def test_bare_ellipsis_word(self, lang_vars: PunktLanguageVars):
        """A run spanning the whole word keeps its final period apart."""
        assert split_word("...", lang_vars) == ("..", ".")
        assert split_word("....", lang_vars) == ("...", ".")

    @pytest.mark.parametrize(
        "word",
        [
            "hello",
            "well-known,",
            "really?",
            "(see",
            "word).",
            "Wait...",
            "foo--bar",
            "end--.",
            "Hmm...,",
            "...",
            '"quoted"',
            "naïve!",
        ],
    )
    def test_parts_rejoin_to_word(self, lang_vars: PunktLanguageVars, word: str):
        """first + second reproduces the word for every rule."""
        pair = split_word(word, lang_vars)
        assert pair.first + pair.second == word


class TestSplitWords:
    """Tests for splitting a whole line."""

    def test_single_character_words_skipped(self, lang_vars: PunktLanguageVars):
        assert split_words("I saw a cat.", lang_vars) == [("saw", ""), ("cat.", "")]

    def test_only_single_character_words(self, lang_vars: PunktLanguageVars):
        assert split_words("a b ? c", lang_vars) == []

    def test_any_whitespace_separates_words(self, lang_vars: PunktLanguageVars):
        assert split_words("one\ttwo  three\r", lang_vars) == [
            ("one", ""),
            ("two", ""),
            ("three", ""),
        ]

    def test_custom_non_word_characters(self):
        """Non-word characters come from the language variables."""
        lang_vars = PunktLanguageVars(re_non_word_chars=r"(?:[%])")
        assert split_words("50% done?", lang_vars) == [("50", "%"), ("done?", "")]
