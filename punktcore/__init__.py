"""
punktcore implements the local decision engine of the Punkt sentence boundary algorithm.

It splits raw text into word tokens, separating trailing punctuation from word
stems, and annotates every period-final token as a sentence break, an
abbreviation or an ellipsis using only the token itself and an abbreviation
lookup. Adjacent tokens are then paired for a statistics-based second pass.
"""

import logging
from typing import Iterable, List, Optional

from punktcore._version import __version__
from punktcore.core.base import (
    FirstPassResult,
    PunktBase,
    annotate_first_pass,
    first_pass_annotation,
    iter_tokenize_words,
    tokenize_words,
)
from punktcore.core.language_vars import PunktLanguageVars, default_language_vars
from punktcore.core.parameters import AbbreviationOracle, PunktParameters
from punktcore.core.splitter import WordPair, split_word, split_words
from punktcore.core.tokens import PunktToken, TokenLabel
from punktcore.exceptions import ConfigurationError, EmptyInputError, OracleFailure, PunktError
from punktcore.utils.iteration import TokenPair, pair_iter, token_pairs

logging.getLogger(__name__).addHandler(logging.NullHandler())


def annotate(
    text: str,
    abbreviations: Optional[Iterable[str]] = None,
    lang_vars: Optional[PunktLanguageVars] = None,
) -> List[PunktToken]:
    """
    Tokenize text and run first-pass annotation against a list of abbreviations.

    Args:
        text: The text to annotate
        abbreviations: Known abbreviations, without their final period
        lang_vars: Language variables (the defaults if None)

    Returns:
        The annotated tokens

    Example:
        >>> [str(t) for t in annotate("Dr. Smith left.", ["dr"])]
        ['Dr.<A>', 'Smith', 'left.<S>']
    """
    params = PunktParameters()
    if abbreviations is not None:
        params.update_abbreviations(abbreviations)
    return PunktBase(lang_vars, params).annotate(text).tokens


__all__ = [
    "__version__",
    "AbbreviationOracle",
    "ConfigurationError",
    "EmptyInputError",
    "FirstPassResult",
    "OracleFailure",
    "PunktBase",
    "PunktError",
    "PunktLanguageVars",
    "PunktParameters",
    "PunktToken",
    "TokenLabel",
    "TokenPair",
    "WordPair",
    "annotate",
    "annotate_first_pass",
    "default_language_vars",
    "first_pass_annotation",
    "iter_tokenize_words",
    "pair_iter",
    "split_word",
    "split_words",
    "token_pairs",
    "tokenize_words",
]
