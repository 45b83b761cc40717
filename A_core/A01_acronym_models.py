# A_core/A01_acronym_models.py
"""
Domain model for a single acronym definition.

An Acronym carries its identity (key), its textual forms (short/long and the
optional plural forms) and the usage counters updated while a document is
rendered. Ordering fields are left unset at construction and only assigned
by the AcronymRegistry.

Example:
    >>> from A_core.A01_acronym_models import Acronym
    >>> rl = Acronym(shortname="RL", longname="Reinforcement Learning")
    >>> rl.key
    'RL'
    >>> rl.is_first_use()
    True
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from A_core.A02_exceptions import ValidationError

REQUIRED_FIELDS = ("shortname", "longname")

# Fields an author may set on a definition record
DEFINITION_FIELDS = ("key", "shortname", "longname", "shortplural", "longplural")


def metadata_to_str(metadata: Mapping[str, Any]) -> str:
    """Render a raw definition record for diagnostics, e.g. ``{shortname: RL}``."""
    parts = [f"{k}: {v}" for k, v in metadata.items()]
    return "{" + ", ".join(parts) + "}"


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class Acronym(BaseModel):
    """
    One acronym and its usage state within a document run.

    ``definition_order`` and ``usage_order`` are written by the registry;
    ``occurrences`` only ever grows.
    """

    key: str
    shortname: str = Field(..., min_length=1)
    longname: str = Field(..., min_length=1)
    shortplural: Optional[str] = None
    longplural: Optional[str] = None

    occurrences: int = Field(default=0, ge=0)
    definition_order: Optional[int] = Field(default=None, ge=1)
    usage_order: Optional[int] = Field(default=None, ge=1)

    # Raw record as written by the author, kept for error messages only
    original_metadata: Dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(extra="forbid")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            invalid = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ValidationError(
                "Invalid acronym definition",
                invalid_fields=invalid,
                definition=metadata_to_str(data.get("original_metadata") or data),
            ) from e

    @model_validator(mode="before")
    @classmethod
    def _check_required_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        original = data.get("original_metadata") or {
            k: v
            for k, v in data.items()
            if k != "original_metadata" and not _is_blank(v)
        }

        missing = [name for name in REQUIRED_FIELDS if _is_blank(data.get(name))]
        if missing:
            unexpected = [k for k in original if k not in cls.model_fields]
            raise ValidationError(
                "Both `shortname` and `longname` must be specified",
                missing_fields=missing,
                unexpected_fields=unexpected,
                definition=metadata_to_str(original),
            )

        # Unrecognized fields are tolerated, only kept in original_metadata
        if any(k not in cls.model_fields for k in data):
            data = {k: v for k, v in data.items() if k in cls.model_fields}
            data["original_metadata"] = original

        # The key defaults to the short form
        if _is_blank(data.get("key")):
            data = {**data, "key": data["shortname"]}
        return data

    @classmethod
    def from_metadata(cls, record: Mapping[str, Any]) -> "Acronym":
        """
        Build an acronym from a raw definition record.

        Unrecognized fields are tolerated and kept in ``original_metadata``;
        they are only reported if the record turns out to be invalid. The
        constructor treats extra keyword arguments the same way.
        """
        fields = {name: record.get(name) for name in DEFINITION_FIELDS}
        return cls(**fields, original_metadata=dict(record))

    def increment_occurrences(self) -> None:
        self.occurrences += 1

    def is_first_use(self) -> bool:
        return self.occurrences == 0

    def describe(self) -> str:
        """Deterministic one-line rendering of all fields, for diagnostics."""
        parts: List[str] = [
            f"key={self.key}",
            f"short={self.shortname}",
            f"long={self.longname}",
        ]
        if self.shortplural is not None:
            parts.append(f"shortplural={self.shortplural}")
        if self.longplural is not None:
            parts.append(f"longplural={self.longplural}")
        parts.append(f"occurrences={self.occurrences}")
        parts.append(f"definition_order={self.definition_order}")
        parts.append(f"usage_order={self.usage_order}")
        return "Acronym{" + ";".join(parts) + "}"

    def __str__(self) -> str:
        return self.describe()
