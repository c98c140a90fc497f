"""Render a visitor implementation stub for a new tree operation.

The stub mirrors the generated trait exactly (same methods, order and
parameter lists) and leaves every body empty. For any result type other than
``()`` the empty bodies fail to type-check until the operation is written;
that is the intended way of making sure no node kind is forgotten.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from lox_astgen.grammar.model import (
    IDENTIFIER_PATTERN,
    Grammar,
    GrammarError,
    describe_validation_error,
)

from .emit import INDENT, render_use_lines, visit_signature


class OperationSpec(BaseModel):
    """Operation name, generic result type and output file name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    result_type: str
    file_name: str

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not IDENTIFIER_PATTERN.fullmatch(value):
            msg = f"operation name '{value}' is not a valid identifier"
            raise ValueError(msg)
        return value

    @field_validator("result_type", "file_name")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def create(cls, name: str, result_type: str, file_name: str) -> OperationSpec:
        """Validate the three stub arguments, raising :class:`GrammarError`."""
        try:
            return cls(name=name, result_type=result_type, file_name=file_name)
        except ValidationError as exc:
            raise GrammarError(describe_validation_error(exc)) from exc


def render_operation_stub(grammar: Grammar, operation: OperationSpec) -> str:
    """Render ``pub struct <Op> {}`` and its empty ``impl Visitor<R>``."""
    own = f"{grammar.base_name}, {grammar.visitor_name}"
    uses = [f"crate::{grammar.module}::{{{own}}}", *grammar.imports]
    implemented = f"{grammar.visitor_name}<{operation.result_type}>"

    methods = [
        f"{INDENT}{visit_signature(grammar, node, operation.result_type)} {{}}\n"
        for node in grammar.node_types
    ]
    lines = [
        render_use_lines(uses),
        f"pub struct {operation.name} {{}}\n",
        f"impl {implemented} for {operation.name} {{",
        "\n".join(methods).rstrip("\n"),
        "}\n",
    ]
    return "\n".join(lines)


__all__ = ["OperationSpec", "render_operation_stub"]
