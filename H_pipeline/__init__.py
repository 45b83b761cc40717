"""
H_pipeline: Rendering orchestration.

Provides:
- AcronymRenderer: load a document's acronyms, then render each reference
"""

from .H01_acronym_renderer import AcronymRenderer

__all__ = ["AcronymRenderer"]
