"""
PunktParameters module - Contains the abbreviation parameters consulted during first-pass annotation.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Set

# Answers whether a lower-cased, period-stripped token is a known abbreviation.
# Called as oracle(stem, last_hyphen_segment).
AbbreviationOracle = Callable[[str, str], bool]


@dataclass
class PunktParameters:
    """
    Stores the abbreviation types that Punkt uses for first-pass annotation.

    Instances are callable, so they can be passed anywhere an
    ``AbbreviationOracle`` is expected. Learning ``abbrev_types`` from a
    corpus is left to an external trainer.
    """
    abbrev_types: Set[str] = field(default_factory=set)

    def add_abbreviation(self, abbrev: str) -> None:
        """
        Add a known abbreviation.

        Args:
            abbrev: The abbreviation, without its final period (case-insensitive)
        """
        self.abbrev_types.add(abbrev.lower().rstrip("."))

    def update_abbreviations(self, abbrevs: Iterable[str]) -> None:
        for abbrev in abbrevs:
            self.add_abbreviation(abbrev)

    def is_abbr(self, stem: str, last_segment: str) -> bool:
        """
        Check whether a token stem is a known abbreviation.

        Args:
            stem: The lower-cased token without its final period
            last_segment: The part of the stem after its last hyphen

        Returns:
            True if either the whole stem or its last hyphen segment is known
        """
        return stem in self.abbrev_types or last_segment in self.abbrev_types

    __call__ = is_abbr

    def to_json(self) -> Dict[str, Any]:
        """Convert parameters to a JSON-serializable dictionary."""
        return {"abbrev_types": sorted(self.abbrev_types)}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PunktParameters":
        """Create a PunktParameters instance from a JSON dictionary."""
        params = cls()
        params.update_abbreviations(data.get("abbrev_types", []))
        return params
