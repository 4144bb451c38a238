"""Tests for the PunktParameters abbreviation oracle."""

import pytest

from punktcore import ConfigurationError, PunktBase, PunktParameters


class TestPunktParameters:
    """Tests for abbreviation lookups."""

    def test_add_abbreviation_normalizes(self):
        params = PunktParameters()
        params.add_abbreviation("Dr.")
        assert params.abbrev_types == {"dr"}

    def test_is_abbr_checks_stem_and_last_segment(self, punkt_params: PunktParameters):
        assert punkt_params.is_abbr("dr", "dr")
        assert punkt_params.is_abbr("ex-prof", "prof")
        assert not punkt_params.is_abbr("talk", "talk")

    def test_callable_as_oracle(self, punkt_params: PunktParameters):
        assert punkt_params("etc", "etc") is True
        assert punkt_params("end", "end") is False

    def test_json_round_trip(self, punkt_params: PunktParameters):
        data = punkt_params.to_json()
        assert data["abbrev_types"] == sorted(punkt_params.abbrev_types)
        assert PunktParameters.from_json(data) == punkt_params

    def test_from_empty_json(self):
        assert PunktParameters.from_json({}).abbrev_types == set()


class TestOracleConfiguration:
    """Tests for oracles handed to PunktBase."""

    def test_non_callable_oracle_rejected(self):
        with pytest.raises(ConfigurationError):
            PunktBase(oracle={"dr"})

    def test_any_callable_accepted(self):
        base = PunktBase(oracle=lambda stem, last: stem == "etc")
        assert base.annotate("Apples, pears etc. are fruit.").tokens[3].abbr

    def test_default_oracle(self):
        assert isinstance(PunktBase().oracle, PunktParameters)
