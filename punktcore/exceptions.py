"""
Exceptions raised by punktcore.

Splitting and word tokenization never fail; only the configuration and the
abbreviation lookup used by first-pass annotation can.
"""

from typing import Any, Optional


class PunktError(Exception):
    """Base class for all punktcore errors."""


class ConfigurationError(PunktError, ValueError):
    """Raised when language variables or the abbreviation oracle are unusable."""


class EmptyInputError(PunktError, ValueError):
    """Raised when a token sequence that must be non-empty is empty."""


class OracleFailure(PunktError):
    """
    Raised when the abbreviation oracle fails for a token.

    The token is left unannotated. The original exception, if any, is chained
    as ``__cause__``.
    """

    def __init__(self, message: str, token: Optional[Any] = None) -> None:
        super().__init__(message)
        self.token = token
