"""
Base module for punktcore.

This module provides word tokenization with paragraph and line-start
information, and the first-pass annotation of tokens. Both are plain
functions taking their language variables (and abbreviation oracle)
explicitly; PunktBase bundles one configuration for repeated use.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Type

from punktcore.core.language_vars import PunktLanguageVars, resolve_language_vars
from punktcore.core.parameters import AbbreviationOracle, PunktParameters
from punktcore.core.splitter import WordPair, split_words
from punktcore.core.tokens import PunktToken, TokenLabel
from punktcore.exceptions import ConfigurationError, OracleFailure
from punktcore.utils.iteration import TokenPair, token_pairs

logger = logging.getLogger(__name__)


@dataclass
class FirstPassResult:
    """
    Output of first-pass annotation.

    ``failures`` holds (index, error) for every token the oracle could not
    classify; those tokens keep ``TokenLabel.NONE``.
    """
    tokens: List[PunktToken]
    failures: List[Tuple[int, OracleFailure]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _pair_to_tokens(
    pair: WordPair,
    lang_vars: PunktLanguageVars,
    parastart: bool,
    linestart: bool,
    token_cls: Type[PunktToken] = PunktToken,
) -> List[PunktToken]:
    """Turn one WordPair into one or two tokens, the first carrying the flags."""
    first, second = pair
    if second and (lang_vars.split_pattern.search(second) or second.endswith(",")):
        if not first:
            return [token_cls(second, parastart=parastart, linestart=linestart)]
        return [token_cls(first, parastart=parastart, linestart=linestart), token_cls(second)]
    return [token_cls(first + second, parastart=parastart, linestart=linestart)]


def iter_tokenize_words(
    plaintext: str,
    lang_vars: Optional[PunktLanguageVars] = None,
    token_cls: Type[PunktToken] = PunktToken,
) -> Iterator[PunktToken]:
    """
    Tokenize text into words, maintaining paragraph and line-start information.

    Args:
        plaintext: The text to tokenize
        lang_vars: Language variables (the defaults if None)
        token_cls: The token class to use

    Yields:
        PunktToken instances for each token
    """
    lang_vars = resolve_language_vars(lang_vars)
    parastart = False

    for line in plaintext.split("\n"):
        # Blank lines mark the start of a paragraph
        if not line.strip():
            parastart = True
            continue

        for index, pair in enumerate(split_words(line, lang_vars)):
            if index == 0:
                yield from _pair_to_tokens(pair, lang_vars, parastart, True, token_cls)
                parastart = False
            else:
                yield from _pair_to_tokens(pair, lang_vars, False, False, token_cls)


def tokenize_words(
    plaintext: str,
    lang_vars: Optional[PunktLanguageVars] = None,
    token_cls: Type[PunktToken] = PunktToken,
) -> List[PunktToken]:
    """Tokenize text into a list of words. See iter_tokenize_words."""
    tokens = list(iter_tokenize_words(plaintext, lang_vars, token_cls))
    logger.debug("Tokenized %d characters into %d tokens", len(plaintext), len(tokens))
    return tokens


def _query_oracle(oracle: AbbreviationOracle, token: PunktToken, stem: str, last: str) -> bool:
    try:
        answer = oracle(stem, last)
    except Exception as e:
        raise OracleFailure(f"Abbreviation lookup failed for {token.tok!r}: {e}", token) from e
    if not isinstance(answer, bool):
        raise OracleFailure(
            f"Abbreviation lookup for {token.tok!r} returned {type(answer).__name__}, expected bool",
            token,
        )
    return answer


def first_pass_annotation(
    token: PunktToken,
    lang_vars: PunktLanguageVars,
    oracle: AbbreviationOracle,
) -> None:
    """
    Annotate a token with sentence breaks, abbreviations, and ellipses.

    Decisions are based purely on the token's own text:
        - a token equal to a sentence-ending character is a sentence break.
        - a run of two or more periods is an ellipsis.
        - a word ending in '.' that the oracle knows is an abbreviation.
        - any other word ending in a single '.' is a sentence break.

    Args:
        token: The token to annotate
        lang_vars: Language variables
        oracle: Abbreviation oracle, called as oracle(stem, last_hyphen_segment)

    Raises:
        OracleFailure: If the oracle raises or returns a non-bool
    """
    tok = token.tok
    if tok in lang_vars.sent_end_chars:
        token.label = TokenLabel.SENTENCE_BREAK
    elif lang_vars.is_ellipsis(tok):
        token.label = TokenLabel.ELLIPSIS
    elif token.period_final and not tok.endswith(".."):
        stem = tok[:-1].lower()
        last = stem.split("-")[-1]
        if _query_oracle(oracle, token, stem, last):
            token.label = TokenLabel.ABBREVIATION
        else:
            token.label = TokenLabel.SENTENCE_BREAK


def annotate_first_pass(
    tokens: Iterable[PunktToken],
    lang_vars: PunktLanguageVars,
    oracle: AbbreviationOracle,
    strict: bool = True,
) -> FirstPassResult:
    """
    Perform first-pass annotation on tokens, in place.

    Args:
        tokens: The tokens to annotate
        lang_vars: Language variables
        oracle: Abbreviation oracle
        strict: Propagate the first oracle failure instead of collecting it

    Returns:
        The annotated tokens and any collected failures

    Raises:
        OracleFailure: In strict mode, if the oracle fails for any token
    """
    result = FirstPassResult(tokens=list(tokens))
    for index, token in enumerate(result.tokens):
        try:
            first_pass_annotation(token, lang_vars, oracle)
        except OracleFailure as e:
            if strict:
                raise
            logger.debug("Leaving token %d (%r) unannotated: %s", index, token.tok, e)
            result.failures.append((index, e))
    return result


class PunktBase:
    """
    Holds one configuration of the Punkt word tokenizer and first-pass classifier.

    Args:
        lang_vars: Language variables (the defaults if None)
        oracle: Abbreviation oracle; defaults to an empty PunktParameters
        token_cls: The token class to use

    Raises:
        ConfigurationError: If the oracle is not callable
    """

    def __init__(
        self,
        lang_vars: Optional[PunktLanguageVars] = None,
        oracle: Optional[AbbreviationOracle] = None,
        token_cls: Type[PunktToken] = PunktToken,
    ) -> None:
        if oracle is not None and not callable(oracle):
            raise ConfigurationError(f"Abbreviation oracle must be callable, got {type(oracle).__name__}")
        self._lang_vars = resolve_language_vars(lang_vars)
        self._oracle = oracle if oracle is not None else PunktParameters()
        self._Token = token_cls

    @property
    def lang_vars(self) -> PunktLanguageVars:
        return self._lang_vars

    @property
    def oracle(self) -> AbbreviationOracle:
        return self._oracle

    def split_words(self, line: str) -> List[WordPair]:
        return split_words(line, self._lang_vars)

    def tokenize_words(self, plaintext: str) -> List[PunktToken]:
        return tokenize_words(plaintext, self._lang_vars, self._Token)

    def annotate_first_pass(self, tokens: Iterable[PunktToken], strict: bool = True) -> FirstPassResult:
        return annotate_first_pass(tokens, self._lang_vars, self._oracle, strict=strict)

    def annotate(self, plaintext: str, strict: bool = True) -> FirstPassResult:
        """
        Tokenize text and annotate the tokens in one step.

        Args:
            plaintext: The text to annotate
            strict: Propagate the first oracle failure instead of collecting it

        Returns:
            The first-pass result
        """
        return self.annotate_first_pass(self.tokenize_words(plaintext), strict=strict)

    def pair_tokens(self, tokens: List[PunktToken]) -> List[TokenPair]:
        """Pair annotated tokens for a second-pass classifier."""
        return token_pairs(tokens)
