# A_core/A03_yaml_loader.py
"""
YAML loading shared by definition files and option files.

PyYAML resolves plain scalars with the YAML 1.1 rules, under which ``NO``,
``ON``, ``OFF``, ``YES``, ``Y`` and ``N`` are booleans. Those are ordinary
acronyms, so ``AcronymsYamlLoader`` only treats the YAML 1.2 spellings
(``true``/``false`` in lower, title or upper case) as booleans.

Usage:
    from A_core.A03_yaml_loader import load_first_document, load_yaml

    metadata = load_first_document(text)   # front matter, body ignored
    options = load_yaml(stream)
"""

from __future__ import annotations

import re
from typing import IO, Any, Union

import yaml

BOOL_TAG = "tag:yaml.org,2002:bool"

BOOL_PATTERN = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


class AcronymsYamlLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans."""


# Copy the resolver table so the SafeLoader class itself is left untouched
AcronymsYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
AcronymsYamlLoader.add_implicit_resolver(BOOL_TAG, BOOL_PATTERN, list("tTfF"))


def load_yaml(stream: Union[str, IO[str]]) -> Any:
    """Load a single YAML document."""
    return yaml.load(stream, Loader=AcronymsYamlLoader)


def load_first_document(stream: Union[str, IO[str]]) -> Any:
    """
    Load only the first document of a stream.

    Documents are parsed lazily, so whatever follows the first closing
    ``---`` (e.g. the markdown body after a front-matter block) is never read.
    """
    return next(iter(yaml.load_all(stream, Loader=AcronymsYamlLoader)), None)


__all__ = ["AcronymsYamlLoader", "load_yaml", "load_first_document"]
