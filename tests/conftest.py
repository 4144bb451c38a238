"""Pytest configuration for punktcore tests."""

from typing import List, Tuple

import pytest

from punktcore import PunktBase, PunktLanguageVars, PunktParameters


@pytest.fixture
def sample_text() -> str:
    """Return a sample text for testing."""
    return """
    This is a sample text. It contains abbreviations like Dr. Johnson and Mr. Smith.
    The U.S.A. is a country... or so they say? It has numbers like 3.14, which aren't abbreviations!

    Prof. Jones works at the ex-univ. hospital. She has a Ph.D. in state-of-the-art science.
    """


@pytest.fixture
def lang_vars() -> PunktLanguageVars:
    """Return default language variables."""
    return PunktLanguageVars()


@pytest.fixture
def punkt_params() -> PunktParameters:
    """Return a basic PunktParameters object for testing."""
    params = PunktParameters()
    params.update_abbreviations(["dr", "mr", "prof", "univ", "u.s.a", "ph.d", "etc"])
    return params


@pytest.fixture
def punkt_base(punkt_params) -> PunktBase:
    """Return a PunktBase configured with the test abbreviations."""
    return PunktBase(oracle=punkt_params)


class RecordingOracle:
    """Abbreviation oracle that records every query."""

    def __init__(self, known=()):
        self.known = set(known)
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, stem: str, last_segment: str) -> bool:
        self.calls.append((stem, last_segment))
        return stem in self.known


@pytest.fixture
def recording_oracle() -> RecordingOracle:
    """Return an oracle that knows 'dr' and records its queries."""
    return RecordingOracle(known=["dr"])
