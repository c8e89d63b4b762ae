"""C# source parsing using tree-sitter.

Turns tree-sitter C# syntax trees into the node records the extractor reads.
Both block-scoped (``namespace A { ... }``) and file-scoped
(``namespace A;``) namespaces are recognised as enclosing scopes.
"""

from typing import List, Optional, Sequence

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser

from ...logging_config import get_logger
from .extractor import extract_declaration
from .model import ClassDeclaration
from .nodes import (
    AttributeSyntax,
    MemberSyntax,
    MethodSyntax,
    ParameterSyntax,
    PropertySyntax,
    ScopeSyntax,
    SyntaxKind,
    TypeDeclarationSyntax,
)

logger = get_logger(__name__)

_DEFAULT_ENCODING = "utf-8"

_TYPE_DECLARATION_KINDS = {
    "class_declaration": SyntaxKind.CLASS,
    "interface_declaration": SyntaxKind.INTERFACE,
    "struct_declaration": SyntaxKind.STRUCT,
    "record_declaration": SyntaxKind.RECORD,
    "record_struct_declaration": SyntaxKind.RECORD,
}
_NAMESPACE_TYPES = frozenset(
    {"namespace_declaration", "file_scoped_namespace_declaration"}
)
_ATTRIBUTE_LIST_TYPE = "attribute_list"
_ATTRIBUTE_TYPE = "attribute"
_ATTRIBUTE_ARGUMENT_LIST_TYPE = "attribute_argument_list"
_ATTRIBUTE_ARGUMENT_TYPE = "attribute_argument"
_BASE_LIST_TYPE = "base_list"
_DECLARATION_LIST_TYPE = "declaration_list"
_METHOD_TYPE = "method_declaration"
_PROPERTY_TYPE = "property_declaration"
_PARAMETER_LIST_TYPE = "parameter_list"
_PARAMETER_TYPE = "parameter"


class ParserError(Exception):
    """Raised when C# source cannot be parsed."""

    pass


CSHARP_LANGUAGE = Language(tree_sitter_c_sharp.language())


class CSharpSourceParser:
    """Parser for C# source code using tree-sitter."""

    def __init__(self) -> None:
        self.parser = Parser()
        self.parser.language = CSHARP_LANGUAGE

    def parse(self, source_code: str) -> Node:
        """Parse source code and return the root node.

        Args:
            source_code: C# source text

        Returns:
            Root ``compilation_unit`` node

        Raises:
            ParserError: If the source contains syntax errors

        """
        tree = self.parser.parse(bytes(source_code, _DEFAULT_ENCODING))
        root = tree.root_node
        if root.has_error:
            raise ParserError("C# source contains syntax errors")
        return root

    def type_declarations(self, source_code: str) -> List[TypeDeclarationSyntax]:
        """Return every class-like declaration in document order.

        Nested declarations are included; their parent is the enclosing
        type rather than a namespace.
        """
        root = self.parse(source_code)
        source_bytes = source_code.encode(_DEFAULT_ENCODING)

        declarations: List[TypeDeclarationSyntax] = []
        for node in _walk(root):
            if node.type in _TYPE_DECLARATION_KINDS:
                declarations.append(_convert_type(node, source_bytes))

        logger.debug("Found %d type declarations", len(declarations))
        return declarations


def extract_declarations_from_source(
    source_code: str, imports: Sequence[str] = ()
) -> List[ClassDeclaration]:
    """Parse C# source and extract every type declared directly in a namespace.

    Args:
        source_code: C# source text
        imports: Using directives to seed each declaration with

    Returns:
        One ClassDeclaration per namespace-level type

    """
    parser = CSharpSourceParser()
    declarations = []
    for node in parser.type_declarations(source_code):
        if node.parent is None or node.parent.kind != SyntaxKind.NAMESPACE:
            logger.debug("Skipping '%s': not declared in a namespace", node.identifier)
            continue
        declarations.append(extract_declaration(node, imports))
    return declarations


def _walk(node: Node):
    """Yield a node and its descendants depth-first."""
    yield node
    for child in node.children:
        yield from _walk(child)


def _text(node: Optional[Node], source_bytes: bytes) -> str:
    if node is None:
        return ""
    return source_bytes[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)


def _field(node: Node, *names: str) -> Optional[Node]:
    """Return the first child found under any of the given field names."""
    for name in names:
        child = node.child_by_field_name(name)
        if child is not None:
            return child
    return None


def _children_of_type(node: Node, node_type: str) -> List[Node]:
    return [child for child in node.children if child.type == node_type]


def _child_of_type(node: Node, node_type: str) -> Optional[Node]:
    for child in node.children:
        if child.type == node_type:
            return child
    return None


def _convert_type(node: Node, source_bytes: bytes) -> TypeDeclarationSyntax:
    base_list_node = _child_of_type(node, _BASE_LIST_TYPE)
    base_list = None
    if base_list_node is not None:
        base_list = [_text(child, source_bytes) for child in base_list_node.named_children]

    body = _field(node, "body") or _child_of_type(node, _DECLARATION_LIST_TYPE)
    members = []
    if body is not None:
        members = [_convert_member(child, source_bytes) for child in body.named_children]

    return TypeDeclarationSyntax(
        identifier=_text(_field(node, "name"), source_bytes),
        kind=_TYPE_DECLARATION_KINDS[node.type],
        attribute_lists=_convert_attribute_lists(node, source_bytes),
        base_list=base_list,
        members=members,
        parent=_enclosing_scope(node, source_bytes),
    )


def _enclosing_scope(node: Node, source_bytes: bytes) -> Optional[ScopeSyntax]:
    parent = node.parent
    if parent is not None and parent.type == _DECLARATION_LIST_TYPE:
        parent = parent.parent
    if parent is None:
        return None

    if parent.type in _NAMESPACE_TYPES:
        return ScopeSyntax(name=_text(_field(parent, "name"), source_bytes))

    if parent.type in _TYPE_DECLARATION_KINDS:
        return ScopeSyntax(
            name=_text(_field(parent, "name"), source_bytes),
            kind=_TYPE_DECLARATION_KINDS[parent.type],
        )

    # Older grammars keep file-scoped namespace members as its siblings
    sibling = node.prev_named_sibling
    while sibling is not None:
        if sibling.type == "file_scoped_namespace_declaration":
            return ScopeSyntax(name=_text(_field(sibling, "name"), source_bytes))
        sibling = sibling.prev_named_sibling

    return ScopeSyntax(name="", kind=SyntaxKind.OTHER)


def _convert_attribute_lists(
    node: Node, source_bytes: bytes
) -> List[List[AttributeSyntax]]:
    attribute_lists = []
    for attribute_list in _children_of_type(node, _ATTRIBUTE_LIST_TYPE):
        attributes = []
        for attribute in _children_of_type(attribute_list, _ATTRIBUTE_TYPE):
            argument_list = _child_of_type(attribute, _ATTRIBUTE_ARGUMENT_LIST_TYPE)
            arguments = None
            if argument_list is not None:
                arguments = [
                    _text(argument, source_bytes)
                    for argument in _children_of_type(
                        argument_list, _ATTRIBUTE_ARGUMENT_TYPE
                    )
                ]
            attributes.append(
                AttributeSyntax(
                    name=_text(_field(attribute, "name"), source_bytes),
                    arguments=arguments,
                )
            )
        attribute_lists.append(attributes)
    return attribute_lists


def _convert_member(node: Node, source_bytes: bytes):
    if node.type == _METHOD_TYPE:
        parameter_list = _field(node, "parameters") or _child_of_type(
            node, _PARAMETER_LIST_TYPE
        )
        parameters = []
        if parameter_list is not None:
            parameters = [
                ParameterSyntax(
                    identifier=_text(_field(parameter, "name"), source_bytes),
                    type=_text(_field(parameter, "type"), source_bytes),
                )
                for parameter in _children_of_type(parameter_list, _PARAMETER_TYPE)
            ]
        return MethodSyntax(
            identifier=_text(_field(node, "name"), source_bytes),
            # "returns" in current grammars, "type" in older ones
            return_type=_text(_field(node, "returns", "type"), source_bytes),
            parameters=parameters,
            attribute_lists=_convert_attribute_lists(node, source_bytes),
        )

    if node.type == _PROPERTY_TYPE:
        return PropertySyntax(
            identifier=_text(_field(node, "name"), source_bytes),
            type=_text(_field(node, "type"), source_bytes),
        )

    return MemberSyntax(identifier=_text(_field(node, "name"), source_bytes))
