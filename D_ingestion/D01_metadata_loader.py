# D_ingestion/D01_metadata_loader.py
"""
Ingestion adapters: turn raw acronym metadata into registered Acronyms.

Two raw formats are accepted:

1. The list format, under ``acronyms.keys``:

    acronyms:
      keys:
        - shortname: RL
          longname: Reinforcement Learning
        - key: qa
          shortname: Q&A
          longname: question and answer
          longplural: questions and answers

2. The simplified format, a plain ``shortname: longname`` mapping
   (no key or plural support), only accepted in definition files:

    RL: Reinforcement Learning
    NLP: Natural Language Processing

Files are read with YAML 1.2 booleans, so ``NO: nitric oxide`` keeps ``NO``
as a shortname. Only the first YAML document of a file is read.

Records are registered in document order so that definition orders follow
the order in which authors wrote them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from A_core.A00_logging import LogContext, get_logger
from A_core.A01_acronym_models import DEFINITION_FIELDS, Acronym
from A_core.A02_exceptions import ParsingError
from A_core.A03_yaml_loader import load_first_document
from B_registry.B01_acronym_registry import AcronymRegistry, AddOutcome, DuplicatePolicy
from G_config.G01_config_keys import OptionKey

logger = get_logger(__name__)

PolicyLike = Union[DuplicatePolicy, str]


def stringify(value: Any) -> Optional[str]:
    """Flatten a metadata value to plain text; None stays None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(s for s in (stringify(v) for v in value) if s)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def _register(registry: AcronymRegistry, acronym: Acronym, on_duplicate: PolicyLike) -> bool:
    outcome = registry.add(acronym, on_duplicate)
    return outcome in (AddOutcome.INSERTED, AddOutcome.REPLACED)


def parse_from_metadata(
    registry: AcronymRegistry,
    metadata: Optional[Mapping[str, Any]],
    on_duplicate: PolicyLike,
) -> int:
    """
    Register every acronym listed under ``metadata["acronyms"]["keys"]``.

    Returns:
        Number of acronyms inserted or replaced.

    Raises:
        ParsingError: ``acronyms.keys`` is not a list of mappings.
        ValidationError: A record lacks ``shortname`` or ``longname``.
    """
    section = (metadata or {}).get("acronyms")
    if not isinstance(section, Mapping) or section.get(OptionKey.KEYS.value) is None:
        return 0

    records = section[OptionKey.KEYS.value]
    if not isinstance(records, list):
        raise ParsingError("The `acronyms.keys` metadata should be a list", field_name="acronyms.keys")

    count = 0
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ParsingError(
                f"Acronym definition #{index + 1} should be a mapping, got {type(record).__name__}",
                field_name="acronyms.keys",
            )
        fields = {name: stringify(record.get(name)) for name in DEFINITION_FIELDS}
        acronym = Acronym(**fields, original_metadata=dict(record))
        if _register(registry, acronym, on_duplicate):
            count += 1
    logger.debug(f"Parsed {count} acronym(s) from metadata")
    return count


def parse_simplified_format(
    registry: AcronymRegistry,
    metadata: Mapping[Any, Any],
    on_duplicate: PolicyLike,
) -> int:
    """Register each ``shortname: longname`` pair, in mapping order."""
    count = 0
    for shortname, longname in metadata.items():
        original = {"shortname": shortname, "longname": longname}
        acronym = Acronym(
            shortname=stringify(shortname),
            longname=stringify(longname),
            original_metadata=original,
        )
        if _register(registry, acronym, on_duplicate):
            count += 1
    return count


def _read_yaml_mapping(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    try:
        # Front-matter files: the markdown body after the closing "---" is never parsed
        document = load_first_document(content)
    except yaml.YAMLError as e:
        raise ParsingError(f"Invalid YAML in acronyms file: {e}", file_path=str(path)) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ParsingError("Acronyms file should contain a YAML mapping", file_path=str(path))
    return document


def parse_from_yaml_file(
    registry: AcronymRegistry,
    filepath: Union[str, Path],
    on_duplicate: PolicyLike,
) -> int:
    """
    Register the acronyms defined in an external YAML file.

    A file that cannot be read is reported as a warning and skipped. The
    list format is used when the file has an ``acronyms.keys`` section,
    otherwise the whole mapping is read as the simplified format.

    Returns:
        Number of acronyms inserted or replaced.
    """
    if filepath is None:
        raise ParsingError("A file path is required to parse an acronyms file")
    path = Path(filepath)

    if not path.is_file():
        logger.warning(f"File {path} could not be read! (does not exist?)")
        return 0

    with LogContext(logger, f"loading acronyms from {path}"):
        metadata = _read_yaml_mapping(path)
        acronyms_section = metadata.get("acronyms")
        if isinstance(acronyms_section, Mapping) and OptionKey.KEYS.value in acronyms_section:
            return parse_from_metadata(registry, metadata, on_duplicate)
        return parse_simplified_format(registry, metadata, on_duplicate)
