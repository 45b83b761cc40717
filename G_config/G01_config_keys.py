# G_config/G01_config_keys.py
"""
Option key constants for the acronyms engine.

Each key carries its default value and a description, so that option
lookups never repeat string literals or defaults:

    style = get_config(options, OptionKey.STYLE)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional


class ConfigKeyBase(str, Enum):
    """
    Base class for configuration key enums.

    Inherits from str to allow direct use as dictionary keys.
    """

    _default: Any
    _description: str

    def __new__(cls, key: str, default: Any = None, description: str = "") -> "ConfigKeyBase":
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj._default = default
        obj._description = description
        return obj

    @property
    def default(self) -> Any:
        return self._default

    @property
    def description(self) -> str:
        return self._description


class OptionKey(ConfigKeyBase):
    """Keys read from the ``acronyms`` section of the document metadata."""

    KEYS = ("keys", (), "In-document list of acronym definitions")
    STYLE = ("style", "long-short", "Default rendering style")
    INSERT_LINKS = ("insert_links", True, "Wrap rendered acronyms in cross-references")
    ON_DUPLICATE = ("on_duplicate", "warn", "Duplicate key policy: replace, keep, warn, error")
    FROMFILE = ("fromfile", (), "External YAML files with more definitions")
    NON_EXISTING = ("non_existing", "key", "Rendering of undefined keys: key, ??, ??key, error")


def get_config(
    config: Mapping[str, Any],
    key: ConfigKeyBase,
    default: Optional[Any] = None,
) -> Any:
    """
    Get a configuration value with type-safe key.

    Args:
        config: Configuration mapping.
        key: Configuration key enum.
        default: Override default value.

    Returns:
        Configuration value or default.
    """
    return config.get(key.value, default if default is not None else key.default)


__all__ = [
    "ConfigKeyBase",
    "OptionKey",
    "get_config",
]
