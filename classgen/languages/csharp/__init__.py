"""
C# code generator module.

Renders C# class and interface declarations from a declaration model and
builds models from parsed C# source.
"""

from .generator import CSharpGenerator, create_csharp_generator
from .extractor import ExtractionError, extract_declaration
from .model import (
    Attribute,
    ClassDeclaration,
    Constant,
    Method,
    Parameter,
    Property,
    Variable,
)
from .nodes import (
    AttributeSyntax,
    MemberSyntax,
    MethodSyntax,
    ParameterSyntax,
    PropertySyntax,
    ScopeSyntax,
    SyntaxKind,
    TypeDeclarationNode,
    TypeDeclarationSyntax,
)
from .syntax import CSharpKeyword, CSharpSyntax, CSharpType, add_quotes

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    # Declaration model
    "Attribute",
    "ClassDeclaration",
    "Constant",
    "Method",
    "Parameter",
    "Property",
    "Variable",
    # Extraction
    "ExtractionError",
    "extract_declaration",
    "AttributeSyntax",
    "MemberSyntax",
    "MethodSyntax",
    "ParameterSyntax",
    "PropertySyntax",
    "ScopeSyntax",
    "SyntaxKind",
    "TypeDeclarationNode",
    "TypeDeclarationSyntax",
    # Vocabulary
    "CSharpKeyword",
    "CSharpSyntax",
    "CSharpType",
    "add_quotes",
]
