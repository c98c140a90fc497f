"""Grammar model for AST generation.

The packaged ``specification.yml`` holds the default expression grammar; the
loader lives in :mod:`lox_astgen.grammar_codegen.spec`.
"""

from __future__ import annotations

from .model import (
    RECURSIVE_TOKEN,
    Grammar,
    GrammarError,
    NamedKind,
    NodeField,
    NodeType,
    RecursiveKind,
    parse_fields,
)

__all__ = [
    "RECURSIVE_TOKEN",
    "Grammar",
    "GrammarError",
    "NamedKind",
    "NodeField",
    "NodeType",
    "RecursiveKind",
    "parse_fields",
]
