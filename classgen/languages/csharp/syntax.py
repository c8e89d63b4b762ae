"""
C# vocabulary used by the generator and extractor.

Keywords, punctuation and a few well-known type names as string enums, so
they can be joined and compared like plain strings.
"""

from enum import Enum


class CSharpKeyword(str, Enum):
    """Reserved words emitted by the generator."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"
    OVERRIDE = "override"
    SEALED = "sealed"
    STATIC = "static"
    PARTIAL = "partial"
    ASYNC = "async"
    NAMESPACE = "namespace"
    USING = "using"
    CLASS = "class"
    INTERFACE = "interface"
    GET = "get"
    SET = "set"
    VOID = "void"
    CONST = "const"
    THIS = "this"
    BASE = "base"

    def __str__(self) -> str:
        return self.value


class CSharpSyntax(str, Enum):
    """Punctuation tokens."""

    SPACE = " "
    COMMA = ","
    COLON = ":"
    STATEMENT_TERMINATOR = ";"
    OPEN_CODE_BLOCK = "{"
    CLOSE_CODE_BLOCK = "}"
    OPEN_BRACKET = "("
    CLOSE_BRACKET = ")"
    OPEN_SQUARE_BRACKET = "["
    CLOSE_SQUARE_BRACKET = "]"
    OPEN_ANGLE_BRACKET = "<"
    CLOSE_ANGLE_BRACKET = ">"
    QUOTE = '"'

    def __str__(self) -> str:
        return self.value


class CSharpType(str, Enum):
    """Built-in type aliases commonly used when building models by hand."""

    STRING = "string"
    INT = "int"
    BOOLEAN = "bool"

    def __str__(self) -> str:
        return self.value


def add_quotes(value: str) -> str:
    """Wrap a value in double quotes, e.g. for a string constant's value."""
    return f"{CSharpSyntax.QUOTE.value}{value}{CSharpSyntax.QUOTE.value}"


def strip_quotes(value: str) -> str:
    """Remove every double quote character from a value."""
    return value.replace(CSharpSyntax.QUOTE.value, "")
