"""
classgen - C# class declaration generator.

Renders C# classes and interfaces from a declaration model and extracts
models from existing C# source.
"""

from typing import Optional, Sequence

from .core import GeneratorConfig, GeneratorError, RenderError, load_config
from .languages.csharp import (
    Attribute,
    ClassDeclaration,
    Constant,
    CSharpGenerator,
    ExtractionError,
    Method,
    Parameter,
    Property,
    extract_declaration,
)
from .logging_config import get_logger, setup_logging

# Version info
__version__ = "0.1.0"


def render_declaration(
    declaration: ClassDeclaration,
    starting_depth: int = 0,
    config: Optional[GeneratorConfig] = None,
) -> str:
    """
    Render a declaration to C# source.

    Args:
        declaration: Declaration model to render
        starting_depth: Indentation depth of the outermost block
        config: Generator configuration, defaults to the C# defaults

    Returns:
        Generated source text
    """
    return CSharpGenerator(config).generate(declaration, starting_depth)


def extract_declarations_from_source(
    source_code: str, imports: Sequence[str] = ()
) -> list:
    """
    Parse C# source and extract its namespace-level type declarations.

    Args:
        source_code: C# source text
        imports: Using directives to seed each declaration with

    Returns:
        List of ClassDeclaration
    """
    # tree-sitter is only loaded when source parsing is requested
    from .languages.csharp.parser import extract_declarations_from_source as extract

    return extract(source_code, imports)


# Export main interfaces
__all__ = [
    "Attribute",
    "ClassDeclaration",
    "Constant",
    "CSharpGenerator",
    "ExtractionError",
    "GeneratorConfig",
    "GeneratorError",
    "Method",
    "Parameter",
    "Property",
    "RenderError",
    "extract_declaration",
    "extract_declarations_from_source",
    "get_logger",
    "load_config",
    "render_declaration",
    "setup_logging",
]
