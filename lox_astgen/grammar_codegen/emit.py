"""Render the AST module: sum type, visitor trait and accept dispatch.

Every renderer is a pure function of the :class:`Grammar`; the three parts
iterate the same node types in the same order, so the trait and the match
in ``accept`` always cover exactly the variants of the enum.
"""

from __future__ import annotations

from lox_astgen.grammar.model import Grammar, NodeField, NodeType

INDENT = "    "


def visit_method_name(grammar: Grammar, node: NodeType) -> str:
    """Return the visitor method for ``node``, e.g. ``visit_binary_expr``."""
    return f"visit_{node.name.lower()}_{grammar.base_name.lower()}"


def member_type(grammar: Grammar, field: NodeField) -> str:
    """Type of a field inside the enum variant (recursive edges are boxed)."""
    if field.is_recursive:
        return f"Box<{grammar.base_name}>"
    return field.kind.type_name


def parameter_type(grammar: Grammar, field: NodeField) -> str:
    """Type of a field as a visitor parameter; always a plain reference."""
    if field.is_recursive:
        return f"&{grammar.base_name}"
    return f"&{field.kind.type_name}"


def visit_signature(grammar: Grammar, node: NodeType, result_type: str) -> str:
    """Return ``fn visit_x(&mut self, a: &A, ...) -> R`` without terminator."""
    params = ["&mut self"]
    params.extend(
        f"{field.name}: {parameter_type(grammar, field)}" for field in node.fields
    )
    return (
        f"fn {visit_method_name(grammar, node)}({', '.join(params)}) -> {result_type}"
    )


def render_use_lines(paths: tuple[str, ...] | list[str]) -> str:
    return "".join(f"use {path};\n" for path in paths)


def render_sum_type(grammar: Grammar) -> str:
    """Render ``pub enum <Base>`` with one struct-like variant per node type."""
    lines = [f"pub enum {grammar.base_name} {{"]
    for node in grammar.node_types:
        if not node.fields:
            lines.append(f"{INDENT}{node.name} {{}},")
            continue
        lines.append(f"{INDENT}{node.name} {{")
        for field in node.fields:
            lines.append(f"{INDENT * 2}{field.name}: {member_type(grammar, field)},")
        lines.append(f"{INDENT}}},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_visitor_trait(grammar: Grammar) -> str:
    """Render the generic visitor trait; methods have no default bodies."""
    lines = [f"pub trait {grammar.visitor_name}<T> {{"]
    for node in grammar.node_types:
        lines.append(f"{INDENT}{visit_signature(grammar, node, 'T')};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _match_arm(grammar: Grammar, node: NodeType) -> str:
    names = [field.name for field in node.fields]
    pattern = f"{grammar.base_name}::{node.name} {{"
    pattern += f" {', '.join(names)} }}" if names else "}"
    call = f"visitor.{visit_method_name(grammar, node)}({', '.join(names)})"
    return f"{pattern} => {call},"


def render_accept_impl(grammar: Grammar) -> str:
    """Render ``impl <Base> { pub fn accept ... }`` with an exhaustive match."""
    lines = [
        f"impl {grammar.base_name} {{",
        f"{INDENT}pub fn accept<T>(&self, visitor: &mut dyn "
        f"{grammar.visitor_name}<T>) -> T {{",
        f"{INDENT * 2}match self {{",
    ]
    for node in grammar.node_types:
        lines.append(f"{INDENT * 3}{_match_arm(grammar, node)}")
    lines.extend([f"{INDENT * 2}}}", f"{INDENT}}}", "}"])
    return "\n".join(lines) + "\n"


def render_ast_module(grammar: Grammar) -> str:
    """Concatenate imports, enum, trait and accept impl into one module."""
    parts = []
    if grammar.imports:
        parts.append(render_use_lines(grammar.imports))
    parts.append(render_sum_type(grammar))
    parts.append(render_visitor_trait(grammar))
    parts.append(render_accept_impl(grammar))
    return "\n".join(parts)


__all__ = [
    "member_type",
    "parameter_type",
    "render_accept_impl",
    "render_ast_module",
    "render_sum_type",
    "render_use_lines",
    "render_visitor_trait",
    "visit_method_name",
    "visit_signature",
]
