# A_core/A02_exceptions.py
"""
Exception hierarchy for the acronyms engine.

Hierarchy:
    AcronymsError (base)
    ├── ConfigurationError       # Invalid options, unknown duplicate policy
    │   └── UnknownStyleError    # Style name not in the catalog, or no acronym
    ├── ParsingError             # Malformed metadata or definition files
    ├── ValidationError          # Acronym construction failures
    ├── DuplicateKeyError        # Duplicate key under the "error" policy
    └── UnknownKeyError          # Lookup of a key absent from the registry

Usage:
    from A_core.A02_exceptions import UnknownKeyError

    try:
        acronym, is_first_use = registry.resolve_usage(key)
    except UnknownKeyError as e:
        logger.warning(f"Undefined acronym: {e.key}")
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


class AcronymsError(Exception):
    """
    Base exception for all acronyms engine errors.

    Attributes:
        message: Human-readable error description.
        context: Additional context data for debugging.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigurationError(AcronymsError):
    """
    Raised when an option is invalid.

    Examples:
        - Unknown ``on_duplicate`` policy
        - ``insert_links`` given as something other than a boolean
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual_value: Optional[Any] = None,
    ):
        context = {}
        if config_key:
            context["key"] = config_key
        if expected:
            context["expected"] = expected
        if actual_value is not None:
            context["actual"] = repr(actual_value)

        super().__init__(message, context)
        self.config_key = config_key
        self.expected = expected
        self.actual_value = actual_value


class UnknownStyleError(ConfigurationError):
    """
    Raised when a style cannot be applied.

    Either the style name is not part of the style catalog, or there is no
    acronym to apply the style to.
    """

    def __init__(
        self,
        style_name: Any,
        available: Iterable[str] = (),
        message: Optional[str] = None,
    ):
        available = list(available)
        super().__init__(
            message or f"Style {style_name!r} does not exist",
            config_key="style",
            expected=", ".join(available) if available else None,
            actual_value=style_name,
        )
        self.style_name = style_name
        self.available = available


class ParsingError(AcronymsError):
    """
    Raised when acronym metadata cannot be read.

    Examples:
        - ``acronyms.keys`` is not a list
        - A definition file does not decode to a mapping
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        context = {}
        if file_path:
            context["file"] = file_path
        if field_name:
            context["field"] = field_name

        super().__init__(message, context)
        self.file_path = file_path
        self.field_name = field_name


class ValidationError(AcronymsError):
    """
    Raised when an acronym cannot be constructed.

    Both ``shortname`` and ``longname`` are required; the error lists the
    missing ones, any unrecognized field names, and the original record.
    Fields holding a value of the wrong type are listed in ``invalid_fields``.
    """

    def __init__(
        self,
        message: str,
        missing_fields: Iterable[str] = (),
        unexpected_fields: Iterable[str] = (),
        definition: Optional[str] = None,
        invalid_fields: Iterable[str] = (),
    ):
        missing_fields = list(missing_fields)
        unexpected_fields = list(unexpected_fields)
        invalid_fields = list(invalid_fields)

        context: Dict[str, Any] = {}
        if missing_fields:
            context["missing"] = ",".join(missing_fields)
        if unexpected_fields:
            context["unexpected"] = ",".join(unexpected_fields)
        if invalid_fields:
            context["invalid"] = ",".join(invalid_fields)
        if definition:
            context["defined_as"] = definition

        super().__init__(message, context)
        self.missing_fields = missing_fields
        self.unexpected_fields = unexpected_fields
        self.invalid_fields = invalid_fields
        self.definition = definition


class DuplicateKeyError(AcronymsError):
    """Raised when a key is registered twice under the ``error`` policy."""

    def __init__(self, key: str):
        super().__init__("Found an acronym with a duplicate key", {"key": key})
        self.key = key


class UnknownKeyError(AcronymsError):
    """Raised when a key is absent from the registry."""

    def __init__(self, key: str):
        super().__init__("Acronym key is not defined", {"key": key})
        self.key = key


__all__ = [
    "AcronymsError",
    "ConfigurationError",
    "UnknownStyleError",
    "ParsingError",
    "ValidationError",
    "DuplicateKeyError",
    "UnknownKeyError",
]
