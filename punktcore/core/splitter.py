"""
Word splitter module for punktcore.

Splits a whitespace-delimited word into a stem and the punctuation that
trails it. The rules are applied in a fixed order and later rules override
earlier ones; that order decides the result whenever the non-word match and
the multi-character punctuation match disagree.
"""

from typing import List, NamedTuple

from punktcore.core.language_vars import PunktLanguageVars


class WordPair(NamedTuple):
    """A word split into its stem and trailing punctuation (possibly empty)."""

    first: str
    second: str


def split_word(word: str, lang_vars: PunktLanguageVars) -> WordPair:
    """
    Split one word (containing no whitespace) into a WordPair.

    ``first + second`` always reproduces ``word``.

    Args:
        word: The word to split
        lang_vars: Language variables providing the split patterns

    Returns:
        The (first, second) pair
    """
    first, second = word, ""

    punct_in_word = lang_vars.split_pattern.search(word)
    if punct_in_word is not None:
        first, second = word[: punct_in_word.start()], word[punct_in_word.start():]

    if word.endswith(","):
        first, second = word[:-1], ","

    multipunct = lang_vars.multi_char_pattern.search(word)
    if multipunct is not None:
        start, end = multipunct.span()
        # start + end is compared against the length, not end alone; a run
        # starting the word and ending in "." therefore keeps the dot apart.
        if word.endswith(".") and (end != len(word) or start + end == len(word)):
            first, second = word[:-1], "."
        elif end == len(word):
            first, second = word[:start], word[start:]
        else:
            first, second = word[:end], word[end:]

    return WordPair(first, second)


def split_words(line: str, lang_vars: PunktLanguageVars) -> List[WordPair]:
    """
    Split every whitespace-delimited word of a line.

    Single-character words are skipped.

    Args:
        line: A single line of text
        lang_vars: Language variables providing the split patterns

    Returns:
        The WordPairs, in order
    """
    return [split_word(word, lang_vars) for word in line.split() if len(word) > 1]
