# H_pipeline/H01_acronym_renderer.py
"""
Rendering control flow for one document.

Ties the registry, the ingestion adapters and the style engine together:

1. ``load`` populates the registry once, in document order, from the
   in-document definitions and then from every ``fromfile`` definition file.
2. ``render`` is called for each reference to a key while the document is
   walked. It resolves the usage (assigning the usage order on first use),
   renders the reference with the selected style, and only then increments
   the occurrence counter.

Usage:
    from H_pipeline.H01_acronym_renderer import AcronymRenderer

    renderer = AcronymRenderer.from_metadata(metadata, base_dir=doc_dir)
    node = renderer.render("RL")               # Reinforcement Learning (RL)
    node = renderer.render("RL", plural=True)  # RLs
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from A_core.A00_logging import LogContext, get_logger
from A_core.A02_exceptions import UnknownKeyError
from B_registry.B01_acronym_registry import AcronymRegistry
from C_styles.C01_output_nodes import OutputNode, Text
from C_styles.C03_style_engine import StyleName, get_style, resolve
from D_ingestion.D01_metadata_loader import parse_from_metadata, parse_from_yaml_file
from G_config.acronyms_config import AcronymsConfig, NonExistingPolicy

logger = get_logger(__name__)


class AcronymRenderer:
    """
    Renders acronym references for a single document-processing run.

    Attributes:
        config: Options of the document.
        registry: The acronyms defined for the document.
        base_dir: Directory relative ``fromfile`` paths are resolved against.
    """

    def __init__(
        self,
        config: Optional[AcronymsConfig] = None,
        registry: Optional[AcronymRegistry] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self.config = config or AcronymsConfig()
        self.registry = registry if registry is not None else AcronymRegistry()
        self.base_dir = Path(base_dir) if base_dir else None

    @classmethod
    def from_metadata(
        cls,
        metadata: Optional[Mapping[str, Any]],
        base_dir: Optional[Union[str, Path]] = None,
    ) -> "AcronymRenderer":
        """Read the options from ``metadata`` and load its acronyms."""
        renderer = cls(AcronymsConfig.from_metadata(metadata), base_dir=base_dir)
        renderer.load(metadata)
        return renderer

    def _resolve_path(self, filepath: str) -> Path:
        path = Path(filepath)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def load(self, metadata: Optional[Mapping[str, Any]]) -> int:
        """
        Populate the registry from the document metadata.

        Returns:
            Number of acronyms inserted or replaced.
        """
        policy = self.config.on_duplicate
        with LogContext(logger, "loading acronyms"):
            count = parse_from_metadata(self.registry, metadata, policy)
            for filepath in self.config.fromfile:
                count += parse_from_yaml_file(self.registry, self._resolve_path(filepath), policy)
        logger.debug(f"{len(self.registry)} acronym(s) defined")
        return count

    def reset(self) -> None:
        """Forget every acronym and counter before processing another document."""
        self.registry.reset()

    def render(
        self,
        key: str,
        style: Optional[Union[StyleName, str]] = None,
        insert_links: Optional[bool] = None,
        plural: bool = False,
        capital: bool = False,
    ) -> OutputNode:
        """
        Render one reference to ``key``.

        Args:
            key: The acronym key referenced in the document.
            style: Overrides the configured style for this reference.
            insert_links: Overrides the configured cross-reference setting.
            plural: Render the plural forms.
            capital: Capitalize the first character.

        Raises:
            UnknownKeyError: ``key`` is undefined and ``non_existing`` is error.
            UnknownStyleError: ``style`` is not in the catalog.
        """
        if not self.registry.contains(key):
            policy = self.config.non_existing
            if policy is NonExistingPolicy.ERROR:
                raise UnknownKeyError(key)
            logger.warning(f"Acronym key: {key} not recognized")
            return Text(text=policy.render(key))

        style_name = style or self.config.style
        # Unknown styles must fail before the usage order is assigned
        get_style(style_name)

        acronym, is_first_use = self.registry.resolve_usage(key)
        node = resolve(
            acronym,
            style_name,
            self.config.insert_links if insert_links is None else insert_links,
            is_first_use=is_first_use,
            is_plural=plural,
            is_capital=capital,
        )
        acronym.increment_occurrences()
        return node
