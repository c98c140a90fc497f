"""AST command: regenerate the node enum, visitor trait and accept impl."""

from __future__ import annotations

from pathlib import Path

import click

from lox_astgen.grammar_codegen.emit import render_ast_module
from lox_astgen.grammar_codegen.generate import generate_ast
from lox_astgen.paths import OutputPaths

from .options import fail, generation_options, load_or_exit, report_write


@click.command("ast")
@generation_options
def ast_cmd(grammar_path: Path | None, src_dir: Path | None, dry_run: bool) -> None:
    """Generate the AST module (default: src/ast.rs) from the grammar.

    The enum, the visitor trait and the exhaustive ``accept`` match are
    written together; an existing file is overwritten.
    """
    grammar = load_or_exit(grammar_path)
    try:
        paths = OutputPaths(src_dir, module=grammar.module)
    except ValueError as exc:
        fail(str(exc))

    if dry_run:
        click.echo(render_ast_module(grammar), nl=False)
        return
    report_write(generate_ast(grammar, paths), paths.ast_path)


__all__ = ["ast_cmd"]
