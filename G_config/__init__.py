"""
Configuration module for the acronyms engine.

Options are read from the ``acronyms`` section of the document metadata:

    from G_config import AcronymsConfig

    config = AcronymsConfig.from_metadata(metadata)
    print(config.style, config.on_duplicate)
"""

from .acronyms_config import AcronymsConfig, NonExistingPolicy, load_config
from .G01_config_keys import OptionKey, get_config

__all__ = [
    "AcronymsConfig",
    "NonExistingPolicy",
    "OptionKey",
    "get_config",
    "load_config",
]
