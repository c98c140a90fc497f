"""Generate the AST module and operation stubs from a grammar.

Both entry points render the complete text in memory first and only then
hand it to the writer, so a malformed grammar never leaves a partial file
behind. Running this module directly regenerates ``src/ast.rs`` from the
packaged grammar.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lox_astgen.grammar.model import Grammar
from lox_astgen.paths import OutputPaths

from .emit import render_ast_module
from .operation import OperationSpec, render_operation_stub
from .spec import load_grammar
from .writer import write_source

logger = logging.getLogger("lox_astgen.codegen")


def generate_ast(grammar: Grammar, paths: OutputPaths) -> bool:
    """Render the AST module for ``grammar`` and write it to ``paths.ast_path``."""
    text = render_ast_module(grammar)
    logger.debug(
        "Rendered %d variants of %s (%d bytes)",
        len(grammar),
        grammar.base_name,
        len(text),
    )
    return write_source(paths.ast_path, text)


def generate_operation(
    grammar: Grammar, operation: OperationSpec, paths: OutputPaths
) -> bool:
    """Render the stub for ``operation`` and write it under ``paths.src_dir``."""
    target = paths.resolve(operation.file_name)
    text = render_operation_stub(grammar, operation)
    logger.debug(
        "Rendered %s stub for %s<%s> (%d methods)",
        operation.name,
        grammar.visitor_name,
        operation.result_type,
        len(grammar),
    )
    return write_source(target, text)


def main(src: str | Path | None = None) -> bool:
    """Regenerate the AST module from the packaged grammar."""
    grammar = load_grammar()
    return generate_ast(grammar, OutputPaths(src, module=grammar.module))


if __name__ == "__main__":  # pragma: no cover
    logging.basicConfig(
        level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s"
    )
    main()
