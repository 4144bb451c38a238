"""
Language variables module for punktcore.

This module provides the PunktLanguageVars class, which holds the character
classes and compiled patterns that parameterize word splitting and
first-pass annotation. Patterns are compiled once, at construction, and the
instance is read-only afterwards so it can be shared between documents.
"""

import logging
import re
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Tuple

from punktcore.core.constants import (
    INTERNAL_PUNCTUATION,
    PERIOD_CONTEXT_FMT,
    RE_ELLIPSIS,
    RE_MULTI_CHAR_PUNCT,
    RE_NON_WORD_CHARS,
    RE_WORD_START,
    SENT_END_CHARS,
    WORD_TOKENIZE_FMT,
)
from punktcore.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _as_char_tuple(name: str, chars: Iterable[str]) -> Tuple[str, ...]:
    """Normalize a string or iterable of single characters to a tuple."""
    result = tuple(chars)
    for char in result:
        if not isinstance(char, str) or len(char) != 1:
            raise ConfigurationError(f"{name} must contain single characters, got {char!r}")
    return result


def _compile(name: str, pattern: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise ConfigurationError(f"Invalid {name} pattern {pattern!r}: {e}") from e


class PunktLanguageVars:
    """
    Stores language-specific variables for the Punkt word tokenizer.

    Args:
        sent_end_chars: Characters that can terminate a sentence
        internal_punctuation: Sentence-internal punctuation characters
        re_non_word_chars: Character class of characters that cannot appear within words
        re_multi_char_punct: Pattern for runs of hyphens, periods or spaced periods
        re_word_start: Character class of characters that may start a word

    Raises:
        ConfigurationError: If a pattern does not compile or the options are inconsistent
    """

    def __init__(
        self,
        sent_end_chars: Iterable[str] = SENT_END_CHARS,
        internal_punctuation: Iterable[str] = INTERNAL_PUNCTUATION,
        re_non_word_chars: str = RE_NON_WORD_CHARS,
        re_multi_char_punct: str = RE_MULTI_CHAR_PUNCT,
        re_word_start: str = RE_WORD_START,
    ) -> None:
        self._sent_end_chars = _as_char_tuple("sent_end_chars", sent_end_chars)
        self._internal_punctuation = _as_char_tuple("internal_punctuation", internal_punctuation)
        if not self._sent_end_chars:
            raise ConfigurationError("sent_end_chars must not be empty")
        overlap = set(self._sent_end_chars) & set(self._internal_punctuation)
        if overlap:
            raise ConfigurationError(
                f"Characters {sorted(overlap)} cannot be both sentence-ending and internal punctuation"
            )

        self._re_non_word_chars = re_non_word_chars
        self._re_multi_char_punct = re_multi_char_punct
        self._re_word_start = re_word_start

        self._non_word_pattern = _compile("non-word", re_non_word_chars)
        self._multi_char_pattern = _compile("multi-char punctuation", re_multi_char_punct)
        if self._multi_char_pattern.fullmatch("") is not None:
            raise ConfigurationError("Multi-char punctuation pattern must not match the empty string")

        self._split_pattern = _compile(
            "word split", "|".join([re_non_word_chars, re_multi_char_punct])
        )
        self._ellipsis_pattern = _compile("ellipsis", RE_ELLIPSIS)
        self._sent_end_chars_pattern = _compile(
            "sentence-end", "[%s]" % re.escape("".join(self._sent_end_chars))
        )
        self._word_tokenize_pattern = _compile(
            "word tokenizer",
            WORD_TOKENIZE_FMT
            % {
                "NonWord": re_non_word_chars,
                "MultiChar": re_multi_char_punct,
                "WordStart": re_word_start,
            },
            re.UNICODE | re.VERBOSE,
        )
        self._period_context_pattern = _compile(
            "period context",
            PERIOD_CONTEXT_FMT
            % {
                "NonWord": re_non_word_chars,
                "SentEndChars": self._sent_end_chars_pattern.pattern,
            },
            re.UNICODE | re.VERBOSE,
        )
        logger.debug(
            "Compiled language variables (sent_end_chars=%r, internal_punctuation=%r)",
            "".join(self._sent_end_chars),
            "".join(self._internal_punctuation),
        )

    @property
    def sent_end_chars(self) -> Tuple[str, ...]:
        """Characters that are candidates for sentence boundaries."""
        return self._sent_end_chars

    @property
    def internal_punctuation(self) -> Tuple[str, ...]:
        """Sentence-internal punctuation characters."""
        return self._internal_punctuation

    @property
    def re_non_word_chars(self) -> str:
        return self._re_non_word_chars

    @property
    def re_multi_char_punct(self) -> str:
        return self._re_multi_char_punct

    @property
    def re_word_start(self) -> str:
        return self._re_word_start

    @property
    def non_word_pattern(self) -> re.Pattern[str]:
        return self._non_word_pattern

    @property
    def multi_char_pattern(self) -> re.Pattern[str]:
        return self._multi_char_pattern

    @property
    def split_pattern(self) -> re.Pattern[str]:
        """Non-word characters or multi-character punctuation."""
        return self._split_pattern

    @property
    def ellipsis_pattern(self) -> re.Pattern[str]:
        return self._ellipsis_pattern

    @property
    def sent_end_chars_pattern(self) -> re.Pattern[str]:
        """Character class matching any sentence-ending character."""
        return self._sent_end_chars_pattern

    @property
    def word_tokenize_pattern(self) -> re.Pattern[str]:
        return self._word_tokenize_pattern

    @property
    def period_context_pattern(self) -> re.Pattern[str]:
        """
        Pattern matching a token that ends in a potential sentence break.

        The following token is captured in a lookahead, as group ``after_tok``
        and, when separated by whitespace, ``next_tok``.
        """
        return self._period_context_pattern

    def is_ellipsis(self, tok: str) -> bool:
        """Check whether a token ends in an ellipsis."""
        return self._ellipsis_pattern.search(tok) is not None

    def word_tokenize(self, s: str) -> List[str]:
        """
        Tokenize a string to split off punctuation other than periods.

        Args:
            s: The text to tokenize

        Returns:
            The word tokens, in order
        """
        return self._word_tokenize_pattern.findall(s)

    def period_contexts(self, text: str) -> List[str]:
        """
        Find all tokens that end in a potential sentence break.

        Args:
            text: The text to search

        Returns:
            The matched tokens, including their sentence-ending character
        """
        return [match.group(0) for match in self._period_context_pattern.finditer(text)]

    def to_json(self) -> Dict[str, Any]:
        """Convert the language variables to a JSON-serializable dictionary."""
        return {
            "sent_end_chars": "".join(self._sent_end_chars),
            "internal_punctuation": "".join(self._internal_punctuation),
            "re_non_word_chars": self._re_non_word_chars,
            "re_multi_char_punct": self._re_multi_char_punct,
            "re_word_start": self._re_word_start,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PunktLanguageVars":
        """Create a PunktLanguageVars instance from a JSON dictionary."""
        return cls(
            sent_end_chars=data.get("sent_end_chars", SENT_END_CHARS),
            internal_punctuation=data.get("internal_punctuation", INTERNAL_PUNCTUATION),
            re_non_word_chars=data.get("re_non_word_chars", RE_NON_WORD_CHARS),
            re_multi_char_punct=data.get("re_multi_char_punct", RE_MULTI_CHAR_PUNCT),
            re_word_start=data.get("re_word_start", RE_WORD_START),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sent_end_chars={''.join(self._sent_end_chars)!r}, "
            f"internal_punctuation={''.join(self._internal_punctuation)!r})"
        )


@lru_cache(maxsize=1)
def default_language_vars() -> PunktLanguageVars:
    """Get the default language variables, compiling them only once."""
    return PunktLanguageVars()


def resolve_language_vars(lang_vars: Optional[PunktLanguageVars]) -> PunktLanguageVars:
    return lang_vars if lang_vars is not None else default_language_vars()
