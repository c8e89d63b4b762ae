"""
Build declaration models from parsed C# type declarations.

Only methods and properties are carried over. Every extracted member is made
public and methods get an empty body, so the result describes the public
surface of the source type rather than a copy of it.
"""

from typing import List, Optional, Sequence

from ...logging_config import get_logger
from .model import Attribute, ClassDeclaration, Method, Parameter, Property
from .nodes import (
    AttributeNode,
    MethodNode,
    NamedScopeNode,
    PropertyNode,
    SyntaxKind,
    TypeDeclarationNode,
)
from .syntax import CSharpKeyword, CSharpSyntax, strip_quotes

logger = get_logger(__name__)


class ExtractionError(Exception):
    """Raised when a syntax node does not have the required shape."""

    pass


def extract_declaration(
    node: TypeDeclarationNode, imports: Sequence[str]
) -> ClassDeclaration:
    """
    Create a ClassDeclaration from a type declaration node.

    Args:
        node: Type declaration whose parent is a namespace
        imports: Using directives already known to the caller; the
            enclosing namespace is appended to a copy of this list

    Returns:
        ClassDeclaration with attributes, methods and properties

    Raises:
        ExtractionError: If the node is not directly inside a namespace
    """
    scope = _enclosing_scope(node)

    new_imports = list(imports)
    new_imports.append(scope.name)

    implementations = None
    if node.base_list is not None:
        implementations = CSharpSyntax.COMMA.value.join(node.base_list)

    declaration = ClassDeclaration(
        name=node.identifier,
        namespace="",
        imports=new_imports,
        keywords=[CSharpKeyword.PUBLIC.value],
        attributes=_extract_attributes(node.attribute_lists),
        implementations=implementations,
        methods=_extract_methods(node),
        properties=_extract_properties(node),
    )

    logger.info(
        "Extracted '%s' from namespace '%s': %d methods, %d properties",
        declaration.name,
        scope.name,
        len(declaration.methods),
        len(declaration.properties),
    )
    return declaration


def _enclosing_scope(node: TypeDeclarationNode) -> NamedScopeNode:
    parent = node.parent
    if (
        parent is None
        or not isinstance(parent, NamedScopeNode)
        or parent.kind != SyntaxKind.NAMESPACE
    ):
        logger.error("Type '%s' is not declared inside a namespace", node.identifier)
        raise ExtractionError(
            f"Cannot determine the namespace of '{node.identifier}': "
            f"parent is {_describe(parent)}, expected a namespace"
        )
    return parent


def _describe(parent: object) -> str:
    if parent is None:
        return "missing"
    kind = getattr(parent, "kind", None)
    if kind is None:
        return type(parent).__name__
    return f"a {getattr(kind, 'value', kind)} node"


def _extract_attributes(
    attribute_lists: Optional[Sequence[Sequence[AttributeNode]]],
) -> List[Attribute]:
    """Flatten attribute lists, dropping quote characters from arguments."""
    attributes = []
    for attribute_list in attribute_lists or []:
        for attribute in attribute_list:
            arguments = None
            if attribute.arguments is not None:
                arguments = [strip_quotes(arg) for arg in attribute.arguments]
            attributes.append(Attribute(name=attribute.name, arguments=arguments))
    return attributes


def _extract_methods(node: TypeDeclarationNode) -> List[Method]:
    methods = []
    for member in node.members:
        if member.kind != SyntaxKind.METHOD:
            continue
        method: MethodNode = member
        logger.debug("Extracting method %s.%s", node.identifier, method.identifier)
        methods.append(
            Method(
                name=method.identifier,
                return_type=method.return_type,
                keywords=[CSharpKeyword.PUBLIC.value],
                parameters=[
                    Parameter(name=p.identifier, type=p.type)
                    for p in method.parameters
                ],
                body=[],
                attributes=_extract_attributes(method.attribute_lists),
            )
        )
    return methods


def _extract_properties(node: TypeDeclarationNode) -> List[Property]:
    properties = []
    for member in node.members:
        if member.kind != SyntaxKind.PROPERTY:
            continue
        prop: PropertyNode = member
        properties.append(
            Property(
                name=prop.identifier,
                type=prop.type,
                access=CSharpKeyword.PUBLIC.value,
            )
        )
    return properties
