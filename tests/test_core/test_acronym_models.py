# tests/test_core/test_acronym_models.py
"""
Tests for A_core/A01_acronym_models.py.

Tests cover:
- Construction and key defaulting
- Required-field validation and its error report
- Occurrence counting and first-use detection
- describe() rendering
"""

from __future__ import annotations

import pytest

from A_core.A01_acronym_models import Acronym, metadata_to_str
from A_core.A02_exceptions import AcronymsError, ValidationError


class TestConstruction:

    def test_key_defaults_to_shortname(self):
        acronym = Acronym(shortname="RL", longname="Reinforcement Learning")
        assert acronym.key == "RL"

    def test_explicit_key_is_kept(self):
        acronym = Acronym(key="rl", shortname="RL", longname="Reinforcement Learning")
        assert acronym.key == "rl"

    def test_empty_key_defaults_to_shortname(self):
        acronym = Acronym(key="", shortname="RL", longname="Reinforcement Learning")
        assert acronym.key == "RL"

    def test_plurals_unset_by_default(self, rl_acronym):
        assert rl_acronym.shortplural is None
        assert rl_acronym.longplural is None

    def test_counters_start_unset(self, rl_acronym):
        assert rl_acronym.occurrences == 0
        assert rl_acronym.definition_order is None
        assert rl_acronym.usage_order is None


class TestValidation:

    def test_missing_longname(self):
        with pytest.raises(ValidationError) as exc_info:
            Acronym(shortname="RL")
        assert exc_info.value.missing_fields == ["longname"]

    def test_missing_both_lists_both(self):
        with pytest.raises(ValidationError) as exc_info:
            Acronym(key="RL")
        assert exc_info.value.missing_fields == ["shortname", "longname"]

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            Acronym(shortname="", longname="Reinforcement Learning")
        assert exc_info.value.missing_fields == ["shortname"]

    def test_reports_unexpected_fields(self):
        record = {"short": "RL", "long": "Reinforcement Learning"}
        with pytest.raises(ValidationError) as exc_info:
            Acronym.from_metadata(record)
        error = exc_info.value
        assert error.missing_fields == ["shortname", "longname"]
        assert error.unexpected_fields == ["short", "long"]
        assert error.definition == "{short: RL, long: Reinforcement Learning}"

    def test_unexpected_fields_tolerated_when_valid(self):
        record = {"shortname": "RL", "longname": "Reinforcement Learning", "note": "x"}
        acronym = Acronym.from_metadata(record)
        assert acronym.key == "RL"
        assert acronym.original_metadata == record

    def test_constructor_tolerates_extra_fields(self):
        acronym = Acronym(shortname="RL", longname="Reinforcement Learning", note="x")
        assert acronym.key == "RL"
        assert acronym.original_metadata == {
            "shortname": "RL",
            "longname": "Reinforcement Learning",
            "note": "x",
        }

    def test_constructor_reports_extra_fields_when_invalid(self):
        with pytest.raises(ValidationError) as exc_info:
            Acronym(shortname="RL", note="x")
        assert exc_info.value.missing_fields == ["longname"]
        assert exc_info.value.unexpected_fields == ["note"]

    @pytest.mark.parametrize(
        "fields, invalid",
        [
            ({"key": "RL", "shortname": ["RL"], "longname": "Reinforcement Learning"}, ["shortname"]),
            ({"shortname": "RL", "longname": "Reinforcement Learning", "occurrences": -1}, ["occurrences"]),
        ],
    )
    def test_wrong_types_raise_validation_error(self, fields, invalid):
        with pytest.raises(AcronymsError) as exc_info:
            Acronym(**fields)
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.invalid_fields == invalid


class TestUsageCounters:

    def test_first_use_until_incremented(self, rl_acronym):
        assert rl_acronym.is_first_use()
        rl_acronym.increment_occurrences()
        assert rl_acronym.occurrences == 1
        assert not rl_acronym.is_first_use()

    def test_first_use_never_reverts(self, rl_acronym):
        for _ in range(5):
            rl_acronym.increment_occurrences()
            assert not rl_acronym.is_first_use()
        assert rl_acronym.occurrences == 5


class TestDescribe:

    def test_omits_unset_plurals(self, rl_acronym):
        assert rl_acronym.describe() == (
            "Acronym{key=RL;short=RL;long=Reinforcement Learning;"
            "occurrences=0;definition_order=None;usage_order=None}"
        )

    def test_includes_plurals(self, mouse_acronym):
        described = mouse_acronym.describe()
        assert "shortplural=mm.;" in described
        assert "longplural=mice;" in described

    def test_str_matches_describe(self, rl_acronym):
        assert str(rl_acronym) == rl_acronym.describe()

    def test_metadata_to_str(self):
        assert metadata_to_str({"shortname": "RL", "longname": "RL long"}) == (
            "{shortname: RL, longname: RL long}"
        )
