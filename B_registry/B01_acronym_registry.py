# B_registry/B01_acronym_registry.py
"""
Acronym registry for one document-processing run.

Owns every Acronym defined for the document, indexed by key, together with
the two ordering counters:
- definition order, assigned when an acronym is added
- usage order, assigned the first time an acronym is referenced

A registry is created empty, populated by the ingestion adapters, then
queried and mutated while the document is rendered. Create a new registry
(or call ``reset``) for every run.

Usage:
    from B_registry.B01_acronym_registry import AcronymRegistry, DuplicatePolicy

    registry = AcronymRegistry()
    registry.add(Acronym(shortname="RL", longname="Reinforcement Learning"), DuplicatePolicy.WARN)

    acronym, is_first_use = registry.resolve_usage("RL")
    # ... render ...
    acronym.increment_occurrences()
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional, Tuple, Union

from A_core.A00_logging import get_logger
from A_core.A01_acronym_models import Acronym
from A_core.A02_exceptions import (
    ConfigurationError,
    DuplicateKeyError,
    UnknownKeyError,
)

logger = get_logger(__name__)


class DuplicatePolicy(str, Enum):
    """What to do when an acronym is added under a key that already exists."""

    REPLACE = "replace"  # new acronym wins, with a fresh definition order
    KEEP = "keep"  # existing acronym is retained silently
    WARN = "warn"  # existing acronym is retained, a warning is reported
    ERROR = "error"  # abort with DuplicateKeyError

    @classmethod
    def parse(cls, value: Union["DuplicatePolicy", str, None]) -> "DuplicatePolicy":
        if value is None:
            raise ConfigurationError(
                "The on_duplicate policy must be specified",
                config_key="on_duplicate",
                expected=", ".join(p.value for p in cls),
            )
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                "Unrecognized on_duplicate policy",
                config_key="on_duplicate",
                expected=", ".join(p.value for p in cls),
                actual_value=value,
            ) from None


class AddOutcome(str, Enum):
    """Result of ``AcronymRegistry.add``; WARNED is the non-fatal warning."""

    INSERTED = "inserted"
    REPLACED = "replaced"
    KEPT = "kept"
    WARNED = "warned"


class AcronymRegistry:
    """
    Mapping of key to Acronym plus the ordering counters of one run.

    Attributes:
        current_definition_order: Last definition order handed out.
        current_usage_order: Last usage order handed out.
    """

    def __init__(self) -> None:
        self._acronyms: Dict[str, Acronym] = {}
        self.current_definition_order = 0
        self.current_usage_order = 0

    def reset(self) -> None:
        """Empty the registry and rewind both counters for a new run."""
        self._acronyms.clear()
        self.current_definition_order = 0
        self.current_usage_order = 0

    def get(self, key: str) -> Optional[Acronym]:
        """Return the acronym stored under ``key``, or None."""
        return self._acronyms.get(key)

    def require(self, key: str) -> Acronym:
        """Return the acronym stored under ``key``; raise UnknownKeyError if absent."""
        acronym = self._acronyms.get(key)
        if acronym is None:
            raise UnknownKeyError(key)
        return acronym

    def contains(self, key: str) -> bool:
        return key in self._acronyms

    def add(
        self,
        acronym: Acronym,
        on_duplicate: Union[DuplicatePolicy, str],
    ) -> AddOutcome:
        """
        Register an acronym, applying ``on_duplicate`` if its key is taken.

        Args:
            acronym: The acronym to register.
            on_duplicate: One of replace, keep, warn, error.

        Returns:
            What happened to the acronym. ``AddOutcome.WARNED`` signals the
            non-fatal duplicate warning to the caller.

        Raises:
            DuplicateKeyError: Key already present under the error policy.
            ConfigurationError: Missing acronym or unrecognized policy.
        """
        if acronym is None:
            raise ConfigurationError("The acronym to add must not be None")
        policy = DuplicatePolicy.parse(on_duplicate)

        outcome = AddOutcome.INSERTED
        if self.contains(acronym.key):
            logger.debug(f"Found an acronym with a duplicate key: {acronym.key}")
            if policy is DuplicatePolicy.KEEP:
                return AddOutcome.KEPT
            if policy is DuplicatePolicy.WARN:
                logger.warning(f"Found an acronym with a duplicate key: {acronym.key}")
                return AddOutcome.WARNED
            if policy is DuplicatePolicy.ERROR:
                logger.error(f"Found an acronym with a duplicate key: {acronym.key}")
                raise DuplicateKeyError(acronym.key)
            outcome = AddOutcome.REPLACED

        self.current_definition_order += 1
        acronym.definition_order = self.current_definition_order
        self._acronyms[acronym.key] = acronym
        logger.debug(f"Registered {acronym.describe()}")
        return outcome

    def set_usage_order(self, acronym: Acronym) -> None:
        """Give ``acronym`` the next usage order."""
        if acronym is None:
            raise ConfigurationError("The acronym must not be None")
        self.current_usage_order += 1
        acronym.usage_order = self.current_usage_order

    def resolve_usage(self, key: str) -> Tuple[Acronym, bool]:
        """
        Reference the acronym stored under ``key``.

        On the first reference the acronym receives its usage order. The
        occurrence counter is NOT incremented here: the caller increments it
        once the reference has been rendered successfully, so a failing style
        leaves no partial state behind.

        Returns:
            ``(acronym, is_first_use)``

        Raises:
            UnknownKeyError: ``key`` was never registered.
        """
        acronym = self.require(key)
        is_first_use = acronym.is_first_use()
        if is_first_use and acronym.usage_order is None:
            self.set_usage_order(acronym)
        return acronym, is_first_use

    def __contains__(self, key: object) -> bool:
        return key in self._acronyms

    def __len__(self) -> int:
        return len(self._acronyms)

    def __iter__(self) -> Iterator[Acronym]:
        """Iterate over acronyms in definition order."""
        return iter(sorted(self._acronyms.values(), key=lambda a: a.definition_order or 0))
