"""
B_registry: The acronym registry of one document-processing run.

Provides:
- AcronymRegistry: key lookup, duplicate-key policy, definition and usage order
- DuplicatePolicy: replace / keep / warn / error
- AddOutcome: what ``AcronymRegistry.add`` did with an acronym
"""

from .B01_acronym_registry import AcronymRegistry, AddOutcome, DuplicatePolicy

__all__ = [
    "AcronymRegistry",
    "AddOutcome",
    "DuplicatePolicy",
]
