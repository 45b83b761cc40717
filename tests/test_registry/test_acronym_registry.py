# tests/test_registry/test_acronym_registry.py
"""
Tests for B_registry/B01_acronym_registry.py.

Tests cover:
- Definition order assignment
- Duplicate-key policies (replace, keep, warn, error)
- Usage order assignment through resolve_usage
- Unknown key handling and reset
"""

from __future__ import annotations

import pytest

from A_core.A01_acronym_models import Acronym
from A_core.A02_exceptions import ConfigurationError, DuplicateKeyError, UnknownKeyError
from B_registry.B01_acronym_registry import AcronymRegistry, AddOutcome, DuplicatePolicy


def _make(short: str, long: str = "", key: str = None) -> Acronym:
    return Acronym(key=key, shortname=short, longname=long or f"{short} long form")


# =============================================================================
# Lookup
# =============================================================================


class TestLookup:

    def test_get_missing_returns_none(self, registry):
        assert registry.get("RL") is None
        assert not registry.contains("RL")

    def test_get_after_add(self, registry, rl_acronym):
        registry.add(rl_acronym, "warn")
        assert registry.get("RL") is rl_acronym
        assert registry.contains("RL")
        assert "RL" in registry
        assert len(registry) == 1

    def test_require_unknown_raises(self, registry):
        with pytest.raises(UnknownKeyError) as exc_info:
            registry.require("XYZ")
        assert exc_info.value.key == "XYZ"


# =============================================================================
# Definition order
# =============================================================================


class TestDefinitionOrder:

    def test_follows_position_of_addition(self, registry):
        acronyms = [_make(s) for s in ("RL", "NLP", "CNN", "GAN")]
        for acronym in acronyms:
            assert registry.add(acronym, DuplicatePolicy.ERROR) is AddOutcome.INSERTED
        assert [a.definition_order for a in acronyms] == [1, 2, 3, 4]
        assert registry.current_definition_order == 4

    def test_iteration_in_definition_order(self, registry):
        for short in ("b", "a", "c"):
            registry.add(_make(short), "keep")
        assert [a.key for a in registry] == ["b", "a", "c"]


# =============================================================================
# Duplicate policies
# =============================================================================


class TestDuplicatePolicies:

    @pytest.fixture
    def original(self, registry) -> Acronym:
        acronym = _make("RL", "Reinforcement Learning")
        registry.add(acronym, "error")
        registry.add(_make("NLP"), "error")
        return acronym

    def test_keep_retains_original(self, registry, original):
        duplicate = _make("RL", "Robot Learning")
        assert registry.add(duplicate, "keep") is AddOutcome.KEPT
        assert registry.get("RL") is original
        assert original.longname == "Reinforcement Learning"
        assert original.definition_order == 1
        assert duplicate.definition_order is None

    def test_replace_uses_new_entity_with_fresh_order(self, registry, original):
        duplicate = _make("RL", "Robot Learning")
        assert registry.add(duplicate, "replace") is AddOutcome.REPLACED
        assert registry.get("RL") is duplicate
        assert registry.get("RL").longname == "Robot Learning"
        assert duplicate.definition_order == 3
        assert len(registry) == 2

    def test_warn_retains_original_and_logs(self, registry, original, capture_logs):
        assert registry.add(_make("RL", "Robot Learning"), "warn") is AddOutcome.WARNED
        assert registry.get("RL") is original
        warnings = [r for r in capture_logs.records if r.levelname == "WARNING"]
        assert len(warnings) == 1
        assert "duplicate key: RL" in warnings[0].getMessage()

    def test_error_aborts_and_keeps_original(self, registry, original):
        with pytest.raises(DuplicateKeyError) as exc_info:
            registry.add(_make("RL", "Robot Learning"), DuplicatePolicy.ERROR)
        assert exc_info.value.key == "RL"
        assert registry.get("RL") is original
        assert registry.current_definition_order == 2

    @pytest.mark.parametrize("policy", ["replace", "keep", "warn", "error"])
    def test_policy_irrelevant_for_new_keys(self, registry, policy):
        assert registry.add(_make("RL"), policy) is AddOutcome.INSERTED

    def test_unknown_policy_is_rejected(self, registry, rl_acronym):
        with pytest.raises(ConfigurationError):
            registry.add(rl_acronym, "ignore")
        assert len(registry) == 0

    def test_missing_policy_is_rejected(self, registry, rl_acronym):
        with pytest.raises(ConfigurationError):
            registry.add(rl_acronym, None)

    def test_missing_acronym_is_rejected(self, registry):
        with pytest.raises(ConfigurationError):
            registry.add(None, "warn")


# =============================================================================
# Usage order
# =============================================================================


class TestResolveUsage:

    @pytest.fixture
    def populated(self, registry) -> AcronymRegistry:
        for short in ("RL", "NLP", "CNN"):
            registry.add(_make(short), "error")
        return registry

    def _reference(self, registry: AcronymRegistry, key: str) -> bool:
        acronym, is_first_use = registry.resolve_usage(key)
        acronym.increment_occurrences()
        return is_first_use

    def test_first_reference_assigns_usage_order(self, populated):
        assert self._reference(populated, "CNN") is True
        assert self._reference(populated, "RL") is True
        assert self._reference(populated, "CNN") is False
        assert self._reference(populated, "RL") is False

        assert populated.get("CNN").usage_order == 1
        assert populated.get("RL").usage_order == 2
        assert populated.get("NLP").usage_order is None
        assert populated.current_usage_order == 2

    def test_does_not_increment_occurrences(self, populated):
        acronym, is_first_use = populated.resolve_usage("RL")
        assert is_first_use
        assert acronym.occurrences == 0

    def test_repeated_resolution_before_increment_is_idempotent(self, populated):
        populated.resolve_usage("RL")
        acronym, is_first_use = populated.resolve_usage("RL")
        assert is_first_use
        assert acronym.usage_order == 1
        assert populated.current_usage_order == 1

    def test_occurrences_counted(self, populated):
        for _ in range(3):
            self._reference(populated, "NLP")
        assert populated.get("NLP").occurrences == 3

    def test_unknown_key_raises(self, populated):
        with pytest.raises(UnknownKeyError):
            populated.resolve_usage("XYZ")
        assert populated.current_usage_order == 0

    def test_set_usage_order_requires_acronym(self, populated):
        with pytest.raises(ConfigurationError):
            populated.set_usage_order(None)


class TestReset:

    def test_reset_empties_registry_and_counters(self, registry, rl_acronym):
        registry.add(rl_acronym, "warn")
        registry.resolve_usage("RL")
        registry.reset()
        assert len(registry) == 0
        assert registry.current_definition_order == 0
        assert registry.current_usage_order == 0


class TestDuplicatePolicyParse:

    def test_accepts_enum_and_string(self):
        assert DuplicatePolicy.parse("replace") is DuplicatePolicy.REPLACE
        assert DuplicatePolicy.parse(DuplicatePolicy.KEEP) is DuplicatePolicy.KEEP

    def test_rejects_unknown(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DuplicatePolicy.parse("overwrite")
        assert exc_info.value.config_key == "on_duplicate"
