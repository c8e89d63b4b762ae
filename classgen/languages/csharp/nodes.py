"""Syntax node shapes consumed by the extractor.

The extractor does not parse source code itself. It reads nodes that expose
the attributes described by the protocols below. ``parser.py`` produces the
record classes defined here from a tree-sitter tree, and tests build them by
hand.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence, runtime_checkable


class SyntaxKind(str, Enum):
    """Kinds of nodes the extractor distinguishes."""

    NAMESPACE = "namespace"
    CLASS = "class"
    INTERFACE = "interface"
    STRUCT = "struct"
    RECORD = "record"
    METHOD = "method"
    PROPERTY = "property"
    OTHER = "other"


@runtime_checkable
class SyntaxNode(Protocol):
    """Anything with a kind."""

    kind: SyntaxKind


@runtime_checkable
class NamedScopeNode(Protocol):
    """A namespace exposing its dotted name."""

    kind: SyntaxKind
    name: str


@runtime_checkable
class AttributeNode(Protocol):
    """An attribute; ``arguments`` is None when there is no argument list."""

    name: str
    arguments: Optional[Sequence[str]]


@runtime_checkable
class ParameterNode(Protocol):
    identifier: str
    type: str


@runtime_checkable
class MethodNode(Protocol):
    kind: SyntaxKind
    identifier: str
    parameters: Sequence[ParameterNode]
    return_type: str
    attribute_lists: Sequence[Sequence[AttributeNode]]


@runtime_checkable
class PropertyNode(Protocol):
    kind: SyntaxKind
    identifier: str
    type: str


@runtime_checkable
class TypeDeclarationNode(Protocol):
    """A class-like declaration with its members and enclosing scope."""

    kind: SyntaxKind
    identifier: str
    attribute_lists: Sequence[Sequence[AttributeNode]]
    base_list: Optional[Sequence[str]]
    members: Sequence[SyntaxNode]
    parent: Optional[SyntaxNode]


# Plain records implementing the protocols


@dataclass
class ScopeSyntax:
    name: str
    kind: SyntaxKind = SyntaxKind.NAMESPACE


@dataclass
class AttributeSyntax:
    name: str
    arguments: Optional[List[str]] = None


@dataclass
class ParameterSyntax:
    identifier: str
    type: str


@dataclass
class MethodSyntax:
    identifier: str
    return_type: str
    parameters: List[ParameterSyntax] = field(default_factory=list)
    attribute_lists: List[List[AttributeSyntax]] = field(default_factory=list)
    kind: SyntaxKind = SyntaxKind.METHOD


@dataclass
class PropertySyntax:
    identifier: str
    type: str
    kind: SyntaxKind = SyntaxKind.PROPERTY


@dataclass
class MemberSyntax:
    """A member the extractor skips (field, constructor, event...)."""

    identifier: str = ""
    kind: SyntaxKind = SyntaxKind.OTHER


@dataclass
class TypeDeclarationSyntax:
    identifier: str
    kind: SyntaxKind = SyntaxKind.CLASS
    attribute_lists: List[List[AttributeSyntax]] = field(default_factory=list)
    base_list: Optional[List[str]] = None
    members: List[SyntaxNode] = field(default_factory=list)
    parent: Optional[SyntaxNode] = None
