"""End-to-end tests for the generation entry points."""

from pathlib import Path

import pytest

from lox_astgen.grammar import GrammarError
from lox_astgen.grammar_codegen import (
    OperationSpec,
    generate_ast,
    generate_operation,
    load_grammar,
    main,
    render_ast_module,
    render_operation_stub,
)
from lox_astgen.paths import OutputPaths


def test_generate_ast_writes_module(default_grammar, src_dir: Path):
    paths = OutputPaths(src_dir)
    assert generate_ast(default_grammar, paths) is True
    written = (src_dir / "ast.rs").read_text(encoding="utf-8")
    assert written == render_ast_module(default_grammar)
    assert written.startswith("use crate::token::{LiteralType, Token};\n\npub enum Expr {")


def test_two_runs_produce_identical_files(default_grammar, src_dir: Path):
    paths = OutputPaths(src_dir)
    generate_ast(default_grammar, paths)
    first = paths.ast_path.read_bytes()
    generate_ast(load_grammar(), paths)
    assert paths.ast_path.read_bytes() == first


def test_generate_operation_writes_stub(default_grammar, src_dir: Path):
    printer = OperationSpec.create("Printer", "String", "printer.rs")
    assert generate_operation(default_grammar, printer, OutputPaths(src_dir))
    written = (src_dir / "printer.rs").read_text(encoding="utf-8")
    assert written == render_operation_stub(default_grammar, printer)
    assert written.count("-> String {}") == 4


def test_generate_operation_rejects_escaping_file_name(default_grammar, src_dir: Path):
    sneaky = OperationSpec.create("Printer", "String", "../printer.rs")
    with pytest.raises(ValueError):
        generate_operation(default_grammar, sneaky, OutputPaths(src_dir))
    assert not (src_dir.parent / "printer.rs").exists()


def test_write_failure_does_not_raise(default_grammar, tmp_path: Path):
    paths = OutputPaths(tmp_path / "does-not-exist")
    assert generate_ast(default_grammar, paths) is False
    assert not paths.ast_path.exists()


def test_malformed_grammar_aborts_before_writing(write_grammar, src_dir: Path):
    path = write_grammar("node_types:\n  Binary: left base, operator\n")
    with pytest.raises(GrammarError, match="Malformed field 'operator'"):
        generate_ast(load_grammar(path), OutputPaths(src_dir))
    assert list(src_dir.iterdir()) == []


def test_main_regenerates_packaged_grammar(src_dir: Path):
    assert main(src_dir) is True
    assert "pub trait Visitor<T> {" in (src_dir / "ast.rs").read_text(encoding="utf-8")
