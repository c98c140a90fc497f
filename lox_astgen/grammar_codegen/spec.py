"""Load and normalize a grammar specification document.

A grammar document is YAML with the keys ``base_name``, ``visitor_name``,
``module``, ``imports`` and ``node_types``. Only ``node_types`` is required;
it maps node type names to their field lists, in emission order.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from lox_astgen.grammar.model import Grammar, GrammarError

_GRAMMAR_PACKAGE = "lox_astgen.grammar"
_GRAMMAR_FILENAME = "specification.yml"

_OPTION_KEYS = ("base_name", "visitor_name", "module", "imports")

logger = logging.getLogger("lox_astgen.codegen")


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects repeated mapping keys.

    ``yaml.SafeLoader`` keeps the last value for a repeated key, which would
    silently drop a node type declared twice.
    """

    def construct_mapping(self, node, deep=False):
        seen: set[Any] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                # left for SafeLoader to report as an unhashable key
                continue
            if isinstance(key_node, yaml.ScalarNode) and not isinstance(key, str):
                raise GrammarError(
                    f"Key '{key_node.value}' at line "
                    f"{key_node.start_mark.line + 1} loads as {key!r}, not a "
                    "string; quote it"
                )
            if key in seen:
                raise GrammarError(
                    f"Duplicate key '{key}' at line {key_node.start_mark.line + 1}"
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load_grammar(path: str | Path | None = None) -> Grammar:
    """Load a grammar from ``path``, or the packaged default when ``None``.

    Raises:
        GrammarError: If the file cannot be read or describes a malformed
            grammar.
    """
    if path is None:
        source = resources.files(_GRAMMAR_PACKAGE) / _GRAMMAR_FILENAME
        label = f"{_GRAMMAR_PACKAGE}/{_GRAMMAR_FILENAME}"
    else:
        source = Path(path)
        label = str(source)
    logger.debug("Loading grammar from %s", label)
    try:
        with source.open("r", encoding="utf-8") as handle:
            data = yaml.load(handle, Loader=UniqueKeyLoader)
    except OSError as exc:
        raise GrammarError(f"Cannot read grammar '{label}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise GrammarError(f"Grammar '{label}' is not valid YAML: {exc}") from exc
    return grammar_from_document(data)


def grammar_from_document(data: Any) -> Grammar:
    """Build a :class:`Grammar` from an already-parsed YAML document."""
    if not isinstance(data, Mapping):
        raise GrammarError("Grammar document must be a mapping")
    node_types = data.get("node_types")
    if not isinstance(node_types, Mapping) or not node_types:
        raise GrammarError("Grammar document must declare a non-empty 'node_types'")

    unknown = sorted(set(data) - {"node_types", *_OPTION_KEYS})
    if unknown:
        raise GrammarError(f"Unknown grammar keys: {', '.join(map(str, unknown))}")

    options: dict[str, Any] = {
        key: data[key] for key in _OPTION_KEYS if data.get(key) is not None
    }
    if "imports" in options:
        options["imports"] = tuple(_as_list(options["imports"]))

    grammar = Grammar.from_mapping(node_types, **options)
    logger.debug(
        "Loaded grammar '%s' with %d node types", grammar.base_name, len(grammar)
    )
    return grammar


def _as_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list | tuple):
        return [str(item) for item in value]
    raise GrammarError("'imports' must be a string or a list of strings")


__all__ = ["UniqueKeyLoader", "grammar_from_document", "load_grammar"]
