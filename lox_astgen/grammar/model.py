"""Grammar model: node types, their fields and the field kinds.

This module holds the hand-written Pydantic models that every emitter reads.
Models are frozen; a grammar is built once at generation time and never
mutated afterwards.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

# Kind token reserved for self-referential fields ("left base").
RECURSIVE_TOKEN = "base"

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

DEFAULT_IMPORTS = ("crate::token::{LiteralType, Token}",)

# Names taken by the receiver and the visitor argument of `accept`.
RESERVED_FIELD_NAMES = frozenset({"self", "visitor"})


class GrammarError(ValueError):
    """Raised when a grammar description is malformed."""


def _check_identifier(value: str, what: str) -> str:
    if not IDENTIFIER_PATTERN.fullmatch(value):
        msg = f"{what} '{value}' is not a valid identifier"
        raise ValueError(msg)
    return value


class RecursiveKind(BaseModel):
    """Tree edge back into the sum type itself."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["recursive"] = "recursive"


class NamedKind(BaseModel):
    """Externally defined leaf type, emitted verbatim."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["named"] = "named"
    type_name: str

    @field_validator("type_name")
    @classmethod
    def _validate_type_name(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            msg = f"type name '{value}' must be a single non-empty token"
            raise ValueError(msg)
        return value


FieldKind = Annotated[RecursiveKind | NamedKind, Field(discriminator="kind")]


class NodeField(BaseModel):
    """One member of a node type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    kind: FieldKind

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if value in RESERVED_FIELD_NAMES:
            msg = f"field name '{value}' is reserved"
            raise ValueError(msg)
        return _check_identifier(value, "field name")

    @property
    def is_recursive(self) -> bool:
        return isinstance(self.kind, RecursiveKind)

    @classmethod
    def parse(cls, raw: str) -> NodeField:
        """Build a field from its ``"<name> <kind-token>"`` text.

        The token ``base`` marks a recursive field; any other token is taken
        as an external type name.

        Raises:
            GrammarError: If the text does not hold exactly two tokens.
        """
        tokens = raw.split()
        if len(tokens) < 2:
            msg = (
                f"Malformed field '{raw.strip()}': expected '<name> <type>' "
                "but the type token is missing"
            )
            raise GrammarError(msg)
        if len(tokens) > 2:
            msg = (
                f"Malformed field '{raw.strip()}': expected '<name> <type>' "
                f"but found {len(tokens)} tokens"
            )
            raise GrammarError(msg)
        name, token = tokens
        try:
            if token == RECURSIVE_TOKEN:
                return cls(name=name, kind=RecursiveKind())
            return cls(name=name, kind=NamedKind(type_name=token))
        except ValidationError as exc:
            raise GrammarError(describe_validation_error(exc)) from exc


def parse_fields(raw: str | Sequence[str] | None) -> tuple[NodeField, ...]:
    """Parse a node's field list.

    Accepts the comma-separated form (``"left base, operator Token"``) or a
    sequence of raw field strings. An empty string or sequence declares a
    node type without fields.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        if not raw.strip():
            return ()
        pieces: Sequence[str] = raw.split(",")
    elif isinstance(raw, Sequence):
        pieces = raw
    else:
        msg = f"Field list {raw!r} must be a string or a list of strings"
        raise GrammarError(msg)
    fields = []
    for piece in pieces:
        if not isinstance(piece, str):
            msg = f"Field description {piece!r} must be a string"
            raise GrammarError(msg)
        fields.append(NodeField.parse(piece))
    return tuple(fields)


class NodeType(BaseModel):
    """One variant of the generated sum type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    fields: tuple[NodeField, ...] = ()

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _check_identifier(value, "node type name")

    @model_validator(mode="after")
    def _check_unique_fields(self) -> NodeType:
        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                msg = f"Duplicate field '{field.name}' in node type '{self.name}'"
                raise ValueError(msg)
            seen.add(field.name)
        return self


class Grammar(BaseModel):
    """Ordered set of node types sharing one base (sum type) name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_name: str = "Expr"
    visitor_name: str = "Visitor"
    module: str = "ast"
    imports: tuple[str, ...] = DEFAULT_IMPORTS
    node_types: tuple[NodeType, ...]

    @field_validator("base_name", "visitor_name", "module")
    @classmethod
    def _validate_identifiers(cls, value: str, info: ValidationInfo) -> str:
        return _check_identifier(value, info.field_name.replace("_", " "))

    @field_validator("imports")
    @classmethod
    def _validate_imports(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(item.strip() for item in value)
        if any(not item for item in cleaned):
            raise ValueError("import paths must be non-empty")
        return cleaned

    @model_validator(mode="after")
    def _check_node_types(self) -> Grammar:
        if not self.node_types:
            raise ValueError("Grammar must declare at least one node type")
        seen: set[str] = set()
        for node in self.node_types:
            if node.name in seen:
                msg = f"Duplicate node type '{node.name}'"
                raise ValueError(msg)
            seen.add(node.name)
        return self

    @property
    def node_type_map(self) -> Mapping[str, NodeType]:
        """Return node types indexed by name, in grammar order."""
        return MappingProxyType({node.name: node for node in self.node_types})

    def __len__(self) -> int:
        return len(self.node_types)

    @classmethod
    def from_mapping(
        cls,
        node_types: Mapping[str, str | Sequence[str] | None],
        **options,
    ) -> Grammar:
        """Build a grammar from ``{node name: field list}`` in mapping order.

        Raises:
            GrammarError: For malformed fields, duplicate names, invalid
                identifiers or an empty grammar.
        """
        for name in node_types:
            if not isinstance(name, str):
                msg = f"Node type name {name!r} must be a string"
                raise GrammarError(msg)
        try:
            nodes = tuple(
                NodeType(name=name, fields=parse_fields(raw))
                for name, raw in node_types.items()
            )
            return cls(node_types=nodes, **options)
        except ValidationError as exc:
            raise GrammarError(describe_validation_error(exc)) from exc


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line per problem."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        message = error["msg"].removeprefix("Value error, ")
        lines.append(f"{location}: {message}" if location else message)
    return "Invalid grammar: " + "; ".join(lines)


__all__ = [
    "DEFAULT_IMPORTS",
    "RECURSIVE_TOKEN",
    "FieldKind",
    "Grammar",
    "GrammarError",
    "NamedKind",
    "NodeField",
    "NodeType",
    "RecursiveKind",
    "describe_validation_error",
    "parse_fields",
]
