# C_styles/C03_style_engine.py
"""
Style resolution: the fixed catalog of rendering strategies.

A style decides what to show for one reference to an acronym, depending on
whether it is the acronym's first use. Styles follow the abbreviation styles
of the LaTeX ``glossaries`` package:

    long-short      first: Reinforcement Learning (RL)   next: RL
    short-long      first: RL (Reinforcement Learning)   next: RL
    long-long       always: Reinforcement Learning
    short-footnote  first: RL[^Reinforcement Learning]   next: RL

Every style is a pure function of the acronym and the usage flags. When
cross-references are requested the produced text or span is wrapped in a
CrossRef pointing at the acronym key.

Usage:
    from C_styles.C03_style_engine import resolve

    node = resolve(acronym, "long-short", insert_links=True, is_first_use=True)
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from A_core.A01_acronym_models import Acronym
from A_core.A02_exceptions import UnknownStyleError
from C_styles.C01_output_nodes import CrossRef, Note, OutputNode, Span, Text
from C_styles.C02_text_forms import select_form


class StyleName(str, Enum):
    LONG_SHORT = "long-short"
    SHORT_LONG = "short-long"
    LONG_LONG = "long-long"
    SHORT_FOOTNOTE = "short-footnote"


DEFAULT_STYLE = StyleName.LONG_SHORT

StyleFunction = Callable[[Acronym, bool, bool, bool, bool], OutputNode]


def _create_element(
    content: Union[str, Text, Span],
    key: str,
    insert_links: bool,
) -> OutputNode:
    if isinstance(content, str):
        content = Text(text=content)
    if insert_links:
        return CrossRef(content=content, target=key)
    return content


def _long_short(
    acronym: Acronym,
    insert_links: bool,
    is_first_use: bool,
    is_plural: bool,
    is_capital: bool,
) -> OutputNode:
    short = select_form(acronym, is_plural, False, is_capital)
    if is_first_use:
        main = select_form(acronym, is_plural, True, is_capital)
        text = f"{main} ({short})"
    else:
        text = short
    return _create_element(text, acronym.key, insert_links)


def _short_long(
    acronym: Acronym,
    insert_links: bool,
    is_first_use: bool,
    is_plural: bool,
    is_capital: bool,
) -> OutputNode:
    short = select_form(acronym, is_plural, False, is_capital)
    if is_first_use:
        main = select_form(acronym, is_plural, True, is_capital)
        text = f"{short} ({main})"
    else:
        text = short
    return _create_element(text, acronym.key, insert_links)


def _long_long(
    acronym: Acronym,
    insert_links: bool,
    is_first_use: bool,
    is_plural: bool,
    is_capital: bool,
) -> OutputNode:
    text = select_form(acronym, is_plural, True, is_capital)
    return _create_element(text, acronym.key, insert_links)


def _short_footnote(
    acronym: Acronym,
    insert_links: bool,
    is_first_use: bool,
    is_plural: bool,
    is_capital: bool,
) -> OutputNode:
    main = select_form(acronym, is_plural, False, is_capital)
    if is_first_use:
        footnote = select_form(acronym, is_plural, True, is_capital)
        span = Span(text=main, note=Note(text=footnote))
        return _create_element(span, acronym.key, insert_links)
    return _create_element(main, acronym.key, insert_links)


STYLES: Dict[str, StyleFunction] = {
    StyleName.LONG_SHORT.value: _long_short,
    StyleName.SHORT_LONG.value: _short_long,
    StyleName.LONG_LONG.value: _long_long,
    StyleName.SHORT_FOOTNOTE.value: _short_footnote,
}


def available_styles() -> List[str]:
    return list(STYLES)


def get_style(style_name: Union[StyleName, str, None]) -> StyleFunction:
    """Look up a style, rejecting names outside the catalog."""
    if isinstance(style_name, StyleName):
        style_name = style_name.value
    style = STYLES.get(style_name) if isinstance(style_name, str) else None
    if style is None:
        raise UnknownStyleError(style_name, available_styles())
    return style


def resolve(
    acronym: Acronym,
    style_name: Union[StyleName, str],
    insert_links: bool,
    is_first_use: Optional[bool] = None,
    is_plural: bool = False,
    is_capital: bool = False,
) -> OutputNode:
    """
    Render one reference to ``acronym`` with the named style.

    Args:
        acronym: A registered acronym; unknown keys must be handled before.
        style_name: One of the catalog names, see ``available_styles``.
        insert_links: Wrap the output in a CrossRef to the acronym key.
        is_first_use: Defaults to ``acronym.is_first_use()``. This does not
            assign a usage order; use ``AcronymRegistry.resolve_usage`` for that.
        is_plural: Render the plural forms.
        is_capital: Capitalize the first character of each rendered form.

    Raises:
        UnknownStyleError: ``style_name`` is not in the catalog, or
            ``acronym`` is None.
    """
    style = get_style(style_name)
    if acronym is None:
        raise UnknownStyleError(style_name, message="The acronym must not be None")

    if is_first_use is None:
        is_first_use = acronym.is_first_use()
    return style(acronym, insert_links, is_first_use, is_plural, is_capital)
