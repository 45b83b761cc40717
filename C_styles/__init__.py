"""
C_styles: Rendering styles for acronym references.

Provides:
- Output node shapes (Text, Span, Note, CrossRef)
- select_form: the text-selection rule shared by every style
- resolve: dispatch into the fixed style catalog
"""

from .C01_output_nodes import CrossRef, Note, OutputNode, Span, Text
from .C02_text_forms import capitalize_first, key_to_link, select_form
from .C03_style_engine import (
    DEFAULT_STYLE,
    STYLES,
    StyleName,
    available_styles,
    get_style,
    resolve,
)

__all__ = [
    "CrossRef",
    "Note",
    "OutputNode",
    "Span",
    "Text",
    "capitalize_first",
    "key_to_link",
    "select_form",
    "DEFAULT_STYLE",
    "STYLES",
    "StyleName",
    "available_styles",
    "get_style",
    "resolve",
]
