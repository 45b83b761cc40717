"""
D_ingestion: Adapters feeding raw acronym metadata into the registry.

Provides:
- parse_from_metadata: the ``acronyms.keys`` list format
- parse_simplified_format: a ``shortname: longname`` mapping
- parse_from_yaml_file: external definition files in either format
"""

from .D01_metadata_loader import (
    parse_from_metadata,
    parse_from_yaml_file,
    parse_simplified_format,
    stringify,
)

__all__ = [
    "parse_from_metadata",
    "parse_from_yaml_file",
    "parse_simplified_format",
    "stringify",
]
