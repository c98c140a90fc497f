"""Operation command: scaffold an empty visitor implementation."""

from __future__ import annotations

from pathlib import Path

import click

from lox_astgen.grammar_codegen.generate import generate_operation
from lox_astgen.grammar_codegen.operation import OperationSpec, render_operation_stub
from lox_astgen.paths import OutputPaths

from .options import fail, generation_options, load_or_exit, report_write


@click.command("operation")
@click.argument("operation_name")
@click.argument("result_type")
@click.argument("file_name")
@generation_options
def operation_cmd(
    operation_name: str,
    result_type: str,
    file_name: str,
    grammar_path: Path | None,
    src_dir: Path | None,
    dry_run: bool,
) -> None:
    """Generate an empty ``impl Visitor<RESULT_TYPE>`` for a new operation.

    OPERATION_NAME: struct implementing the visitor (e.g. AstPrinter).
    RESULT_TYPE: the visitor's generic result type (e.g. String).
    FILE_NAME: output file, relative to the source directory.

    Every method body is left empty; fill each one in before the crate
    compiles.
    """
    grammar = load_or_exit(grammar_path)
    try:
        operation = OperationSpec.create(operation_name, result_type, file_name)
        paths = OutputPaths(src_dir, module=grammar.module)
        target = paths.resolve(operation.file_name)
    except ValueError as exc:
        fail(str(exc))

    if dry_run:
        click.echo(render_operation_stub(grammar, operation), nl=False)
        return
    report_write(generate_operation(grammar, operation, paths), target)


__all__ = ["operation_cmd"]
