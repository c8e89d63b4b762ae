"""
Declaration model for C# classes and interfaces.

Plain data objects describing a type declaration and its members. The
generator turns a ClassDeclaration into source text and the extractor builds
one from a parsed syntax tree. Names, types and values are opaque strings.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .syntax import CSharpSyntax


@dataclass
class Attribute:
    """An attribute (annotation) such as ``[Obsolete]``."""

    name: str
    arguments: Optional[List[str]] = None

    def __str__(self) -> str:
        """
        Render the attribute to its literal form.

        All arguments are joined with a plain comma inside a single quoted
        string: ``[Name("a,b")]``. Without arguments: ``[Name]``.
        """
        if self.arguments:
            joined = CSharpSyntax.COMMA.value.join(self.arguments)
            return f'[{self.name}("{joined}")]'
        return f"[{self.name}]"


@dataclass
class Variable:
    """Name and type shared by properties, parameters and constants."""

    name: str
    type: str


@dataclass
class Property(Variable):
    """An auto-property or an expression-bodied property."""

    access: str = "public"
    is_expression_bodied: bool = False
    expression: Optional[str] = None


@dataclass
class Constant(Variable):
    access: str = "public"
    value: str = ""


@dataclass
class Parameter(Variable):
    """A method parameter; the receiver of an extension method when flagged."""

    is_extension_receiver: bool = False


@dataclass
class Method:
    """
    A method or constructor.

    An empty ``name`` marks a constructor: the header is then built from the
    keywords and ``return_type`` only, where ``return_type`` holds the name of
    the declaring type.
    """

    name: str
    return_type: str
    keywords: List[str] = field(default_factory=list)
    parameters: List[Parameter] = field(default_factory=list)
    body: List[str] = field(default_factory=list)
    attributes: Optional[List[Attribute]] = None
    base_constructor_arguments: Optional[List[str]] = None

    @property
    def is_constructor(self) -> bool:
        return not self.name


@dataclass
class ClassDeclaration:
    """
    A class or interface declaration.

    Nested declarations are listed in ``inner_classes`` and rendered inside
    the body of their parent. A nested declaration never emits the
    auto-generation comment, imports or namespace.
    """

    name: str
    namespace: str = ""
    imports: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)
    implementations: Optional[str] = None
    properties: Optional[List[Property]] = None
    constants: Optional[List[Constant]] = None
    methods: Optional[List[Method]] = None
    inner_classes: Optional[List["ClassDeclaration"]] = None
    is_interface: bool = False
    is_nested: bool = False
