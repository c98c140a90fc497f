"""Grammar-to-source generation: AST module, visitor trait and stubs.

Renderers are pure functions of the grammar; the only side effect lives in
:mod:`.writer`.
"""

from __future__ import annotations

from .emit import (
    render_accept_impl,
    render_ast_module,
    render_sum_type,
    render_visitor_trait,
    visit_method_name,
)
from .generate import generate_ast, generate_operation, main
from .operation import OperationSpec, render_operation_stub
from .spec import grammar_from_document, load_grammar
from .writer import write_source

__all__ = [
    "OperationSpec",
    "generate_ast",
    "generate_operation",
    "grammar_from_document",
    "load_grammar",
    "main",
    "render_accept_impl",
    "render_ast_module",
    "render_operation_stub",
    "render_sum_type",
    "render_visitor_trait",
    "visit_method_name",
    "write_source",
]
