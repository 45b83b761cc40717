# C_styles/C02_text_forms.py
"""
Text-selection helpers shared by every rendering style.

select_form decides which of the four textual forms of an acronym to show
(short/long, singular/plural) and whether to capitalize it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from A_core.A01_acronym_models import Acronym

PLURAL_SUFFIX = "s"
LINK_PREFIX = "#acronyms_"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; ``str.capitalize`` would lower the rest."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def key_to_link(key: str) -> str:
    """Anchor of the definition an acronym cross-reference points at."""
    return f"{LINK_PREFIX}{key}"


def _pluralize(explicit: Optional[str], base: Optional[str]) -> str:
    if explicit is not None:
        return explicit
    if base:
        return base + PLURAL_SUFFIX
    return ""


def select_form(
    acronym: "Acronym",
    is_plural: bool = False,
    is_first: bool = False,
    is_capital: bool = False,
) -> str:
    """
    Select the text to display for an acronym.

    Args:
        acronym: The acronym being rendered.
        is_plural: Use the plural form (explicit, else base form + "s").
        is_first: Use the long form, otherwise the short form.
        is_capital: Capitalize the first character of the result.

    Returns:
        The selected text; may be empty when no base form exists.
    """
    if is_plural:
        if is_first:
            text = _pluralize(acronym.longplural, acronym.longname)
        else:
            text = _pluralize(acronym.shortplural, acronym.shortname)
    else:
        text = acronym.longname if is_first else acronym.shortname

    if is_capital:
        text = capitalize_first(text)
    return text
