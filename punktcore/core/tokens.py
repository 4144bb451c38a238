"""
Token module for punktcore.

This module provides the PunktToken class, which represents a token
in the Punkt algorithm and calculates various derived properties.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from punktcore.core.constants import NUMBER_TYPE
from punktcore.core.language_vars import default_language_vars

_NUMBER_RE = re.compile(r"^-?[\.,]?\d[\d,\.-]*\.?$")
_INITIAL_RE = re.compile(r"[^\W\d]\.")


class TokenLabel(Enum):
    """First-pass classification of a token."""

    NONE = "none"
    SENTENCE_BREAK = "sentbreak"
    ABBREVIATION = "abbr"
    ELLIPSIS = "ellipsis"


@dataclass
class PunktToken:
    """
    Represents a token in the Punkt algorithm.

    The boundary decision is held in a single ``label``. The ``sentbreak``,
    ``abbr`` and ``ellipsis`` flags are views over it, so at most one of them
    is ever true.
    """
    tok: str
    parastart: bool = False
    linestart: bool = False
    label: TokenLabel = TokenLabel.NONE

    # Derived attributes (set in __post_init__)
    period_final: bool = field(init=False)

    def __post_init__(self) -> None:
        self.period_final = self.tok.endswith(".")

    def _get_flag(self, label: TokenLabel) -> bool:
        return self.label is label

    def _set_flag(self, label: TokenLabel, value: bool) -> None:
        if value:
            self.label = label
        elif self.label is label:
            self.label = TokenLabel.NONE

    @property
    def sentbreak(self) -> bool:
        return self._get_flag(TokenLabel.SENTENCE_BREAK)

    @sentbreak.setter
    def sentbreak(self, value: bool) -> None:
        self._set_flag(TokenLabel.SENTENCE_BREAK, value)

    @property
    def abbr(self) -> bool:
        return self._get_flag(TokenLabel.ABBREVIATION)

    @abbr.setter
    def abbr(self, value: bool) -> None:
        self._set_flag(TokenLabel.ABBREVIATION, value)

    @property
    def ellipsis(self) -> bool:
        return self._get_flag(TokenLabel.ELLIPSIS)

    @ellipsis.setter
    def ellipsis(self, value: bool) -> None:
        self._set_flag(TokenLabel.ELLIPSIS, value)

    @property
    def type(self) -> str:
        """Get the normalized type of the token (##number## for numbers, lowercase otherwise)."""
        if _NUMBER_RE.match(self.tok):
            return NUMBER_TYPE
        return self.tok.lower()

    @property
    def type_no_period(self) -> str:
        """Get the token type without a trailing period."""
        typ = self.type
        return typ[:-1] if typ.endswith(".") and len(typ) > 1 else typ

    @property
    def first_upper(self) -> bool:
        return bool(self.tok) and self.tok[0].isupper()

    @property
    def first_lower(self) -> bool:
        return bool(self.tok) and self.tok[0].islower()

    @property
    def is_ellipsis(self) -> bool:
        """Check if the token ends in an ellipsis (``...``, ``. . .`` or ``\\u2026``)."""
        return default_language_vars().is_ellipsis(self.tok)

    @property
    def is_number(self) -> bool:
        return self.type == NUMBER_TYPE

    @property
    def is_initial(self) -> bool:
        """Check if the token is an initial (single letter followed by a period)."""
        return _INITIAL_RE.fullmatch(self.tok) is not None

    def __str__(self) -> str:
        """Get a string representation of the token with annotation flags."""
        s = self.tok
        if self.abbr:
            s += "<A>"
        if self.ellipsis:
            s += "<E>"
        if self.sentbreak:
            s += "<S>"
        return s
