# C_styles/C01_output_nodes.py
"""
Output nodes produced by the rendering styles.

The host document model owns the real node types; styles only produce one of
these shapes and leave the conversion to the caller:
- Text: plain inline text
- Span: inline text with an attached side-note (footnote)
- CrossRef: text or span wrapped as a cross-reference to an acronym key
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict

from C_styles.C02_text_forms import key_to_link


class Text(BaseModel):
    text: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    def stringify(self) -> str:
        return self.text


class Note(BaseModel):
    """Side-note content. Never cross-referenced."""

    text: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class Span(BaseModel):
    """Inline text followed by a side-note."""

    text: str
    note: Note

    model_config = ConfigDict(frozen=True, extra="forbid")

    def stringify(self) -> str:
        # The note is rendered out of line, so it is not part of the inline text
        return self.text


class CrossRef(BaseModel):
    """Content linked back to the definition of the acronym ``target``."""

    content: Union[Text, Span]
    target: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def href(self) -> str:
        return key_to_link(self.target)

    @property
    def note(self) -> Union[Note, None]:
        return self.content.note if isinstance(self.content, Span) else None

    def stringify(self) -> str:
        return self.content.stringify()


OutputNode = Union[Text, Span, CrossRef]
