# G_config/acronyms_config.py
"""
Rendering options for one document.

Options live next to the acronym definitions in the ``acronyms`` section of
the document metadata, or in a standalone YAML file:

    acronyms:
      style: short-footnote
      insert_links: false
      on_duplicate: error
      fromfile:
        - shared/acronyms.yml
      non_existing: "??key"

Usage:
    from G_config.acronyms_config import AcronymsConfig

    config = AcronymsConfig.from_metadata(metadata)
    config = AcronymsConfig.from_yaml(Path("acronyms_options.yml"))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml

from A_core.A00_logging import get_logger
from A_core.A02_exceptions import ConfigurationError, ParsingError
from A_core.A03_yaml_loader import load_yaml
from B_registry.B01_acronym_registry import DuplicatePolicy
from C_styles.C03_style_engine import get_style
from G_config.G01_config_keys import OptionKey, get_config

logger = get_logger(__name__)


class NonExistingPolicy(str, Enum):
    """How a reference to an undefined key is rendered."""

    KEY = "key"  # the key itself
    QUESTION_MARKS = "??"
    QUESTION_MARKS_KEY = "??key"
    ERROR = "error"  # raise UnknownKeyError

    def render(self, key: str) -> str:
        if self is NonExistingPolicy.KEY:
            return key
        if self is NonExistingPolicy.QUESTION_MARKS:
            return "??"
        if self is NonExistingPolicy.QUESTION_MARKS_KEY:
            return f"??{key}"
        raise ConfigurationError("The error policy has no rendering", config_key="non_existing")


def _option(options: Mapping[str, Any], key: OptionKey) -> Any:
    value = get_config(options, key)
    return key.default if value is None else value


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ConfigurationError(
        f"Option `{name}` must be a boolean",
        config_key=name,
        expected="true or false",
        actual_value=value,
    )


def _parse_file_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (str, Path)):
        return [str(value)]
    if isinstance(value, (list, tuple)) and all(isinstance(v, (str, Path)) for v in value):
        return [str(v) for v in value]
    raise ConfigurationError(
        "Option `fromfile` must be a path or a list of paths",
        config_key=OptionKey.FROMFILE.value,
        actual_value=value,
    )


@dataclass
class AcronymsConfig:
    """Validated options controlling ingestion and rendering."""

    style: str = OptionKey.STYLE.default
    insert_links: bool = OptionKey.INSERT_LINKS.default
    on_duplicate: DuplicatePolicy = DuplicatePolicy(OptionKey.ON_DUPLICATE.default)
    fromfile: List[str] = field(default_factory=list)
    non_existing: NonExistingPolicy = NonExistingPolicy(OptionKey.NON_EXISTING.default)

    def __post_init__(self) -> None:
        # Reject unknown styles at load time rather than on the first reference
        get_style(self.style)
        self.style = str(getattr(self.style, "value", self.style))
        self.on_duplicate = DuplicatePolicy.parse(self.on_duplicate)
        try:
            self.non_existing = NonExistingPolicy(self.non_existing)
        except ValueError:
            raise ConfigurationError(
                "Unrecognized non_existing policy",
                config_key=OptionKey.NON_EXISTING.value,
                expected=", ".join(p.value for p in NonExistingPolicy),
                actual_value=self.non_existing,
            ) from None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "AcronymsConfig":
        """
        Build a config from a flat mapping of option keys.

        An option set to null (``style:`` with no value) takes its default.
        """
        return cls(
            style=str(_option(options, OptionKey.STYLE)),
            insert_links=_parse_bool(
                OptionKey.INSERT_LINKS.value, _option(options, OptionKey.INSERT_LINKS)
            ),
            on_duplicate=_option(options, OptionKey.ON_DUPLICATE),
            fromfile=_parse_file_list(_option(options, OptionKey.FROMFILE)),
            non_existing=_option(options, OptionKey.NON_EXISTING),
        )

    @classmethod
    def from_metadata(cls, metadata: Optional[Mapping[str, Any]]) -> "AcronymsConfig":
        """Read options from the ``acronyms`` section of document metadata."""
        section = (metadata or {}).get("acronyms") or {}
        if not isinstance(section, Mapping):
            raise ConfigurationError(
                "The `acronyms` metadata should be a mapping",
                config_key="acronyms",
                actual_value=section,
            )
        return cls.from_options(section)

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "AcronymsConfig":
        """
        Load options from a YAML file.

        The file may hold the options at top level or under ``acronyms``.
        A missing file yields the defaults.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load_yaml(f) or {}
        except yaml.YAMLError as e:
            raise ParsingError(f"Invalid YAML in config file: {e}", file_path=str(config_path)) from e

        if not isinstance(data, Mapping):
            raise ParsingError("Config file should contain a YAML mapping", file_path=str(config_path))
        if "acronyms" in data:
            return cls.from_metadata(data)
        return cls.from_options(data)


def load_config(config_path: Union[str, Path]) -> AcronymsConfig:
    """Load rendering options from ``config_path``."""
    return AcronymsConfig.from_yaml(config_path)
