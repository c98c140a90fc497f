"""Shared pytest fixtures for AST generation tests."""

from pathlib import Path

import pytest

from lox_astgen.grammar.model import Grammar
from lox_astgen.grammar_codegen.spec import load_grammar

# Binary/Literal grammar used by the worked examples.
WORKED_NODE_TYPES = {
    "Binary": "left base, operator Token, right base",
    "Literal": "value LiteralType",
}

DEFAULT_GRAMMAR_YAML = """\
base_name: Expr
imports:
  - "crate::token::{LiteralType, Token}"
node_types:
  Binary: left base, operator Token, right base
  Grouping: expression base
  Literal: value LiteralType
  Unary: operator Token, right base
"""


@pytest.fixture
def worked_grammar() -> Grammar:
    return Grammar.from_mapping(WORKED_NODE_TYPES)


@pytest.fixture
def default_grammar_yaml() -> str:
    return DEFAULT_GRAMMAR_YAML


@pytest.fixture
def default_grammar() -> Grammar:
    """The packaged expression grammar."""
    return load_grammar()


@pytest.fixture
def write_grammar(tmp_path: Path):
    """Write YAML text to a grammar file under ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "grammar.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    path = tmp_path / "src"
    path.mkdir()
    return path
