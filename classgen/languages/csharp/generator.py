"""
C# code generator implementation.

Renders a ClassDeclaration into tab-indented C# source: the auto-generation
comment, using directives, the namespace block and the class or interface
body with its nested declarations, constants, properties and methods.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig, load_config
from ...core.emitter import CodeEmitter
from ...core.generator import CodeGenerator, RenderError
from ...logging_config import get_logger
from .model import Attribute, ClassDeclaration, Constant, Method, Parameter, Property
from .syntax import CSharpKeyword, CSharpSyntax

logger = get_logger(__name__)

CONSTANT_TEMPLATE = "constant.cs.j2"
PROPERTY_TEMPLATE = "property.cs.j2"
METHOD_HEADER_TEMPLATE = "method_header.cs.j2"


class CSharpGenerator(CodeGenerator):
    """Code generator for C# classes and interfaces."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)

    def get_template_directory(self) -> Optional[Path]:
        """Return the C# templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def generate(self, declaration: ClassDeclaration, starting_depth: int = 0) -> str:
        """
        Render a declaration to source text.

        Args:
            declaration: Declaration to render
            starting_depth: Indentation depth of the declaration header

        Returns:
            The rendered source, every line terminated by the configured
            line ending

        Raises:
            RenderError: If a required collection of the model is None
        """
        logger.debug(
            "Rendering %s '%s' at depth %d",
            self._declaration_kind(declaration),
            declaration.name,
            starting_depth,
        )

        emitter = self.create_emitter(starting_depth)
        self._render_declaration(emitter, declaration, declaration.is_nested)

        return emitter.render()

    def _render_declaration(
        self, emitter: CodeEmitter, declaration: ClassDeclaration, nested: bool
    ) -> None:
        """Emit one declaration, wrapped in a namespace block unless nested."""
        self._require(declaration.imports, "imports", declaration.name)
        self._require(declaration.keywords, "keywords", declaration.name)
        self._require(declaration.attributes, "attributes", declaration.name)

        if nested:
            emitter.emit_blank_line()
            self._render_type(emitter, declaration)
            return

        self._render_file_header(emitter, declaration)
        emitter.emit_line(f"{CSharpKeyword.NAMESPACE} {declaration.namespace}", 0)
        with emitter.block():
            self._render_type(emitter, declaration)

    def _render_file_header(
        self, emitter: CodeEmitter, declaration: ClassDeclaration
    ) -> None:
        """Emit the auto-generation comment and using directives."""
        emitter.emit_line(self.config.auto_generation_comment, 0)
        emitter.emit_blank_line()

        if declaration.imports:
            for statement in declaration.imports:
                emitter.emit_line(
                    f"{CSharpKeyword.USING} {statement}"
                    f"{CSharpSyntax.STATEMENT_TERMINATOR}",
                    0,
                )
            emitter.emit_blank_line()

    def _render_type(self, emitter: CodeEmitter, declaration: ClassDeclaration) -> None:
        """Emit attributes, header and body of a class or interface."""
        self._render_attributes(emitter, declaration.attributes)
        emitter.emit_line(self._declaration_header(declaration))

        with emitter.block():
            self._render_inner_classes(emitter, declaration.inner_classes)
            self._render_constants(emitter, declaration.constants)
            self._render_properties(emitter, declaration.properties)
            self._render_methods(emitter, declaration)

    def _declaration_header(self, declaration: ClassDeclaration) -> str:
        kind = self._declaration_kind(declaration)
        parts = [*declaration.keywords, kind, declaration.name]

        if declaration.implementations is not None:
            parts.extend([CSharpSyntax.COLON, declaration.implementations])

        return CSharpSyntax.SPACE.value.join(str(part) for part in parts)

    @staticmethod
    def _declaration_kind(declaration: ClassDeclaration) -> CSharpKeyword:
        if declaration.is_interface:
            return CSharpKeyword.INTERFACE
        return CSharpKeyword.CLASS

    def _render_attributes(
        self, emitter: CodeEmitter, attributes: Optional[List[Attribute]]
    ) -> None:
        for attribute in attributes or []:
            emitter.emit_line(str(attribute))

    def _render_inner_classes(
        self, emitter: CodeEmitter, inner_classes: Optional[List[ClassDeclaration]]
    ) -> None:
        if not inner_classes:
            return

        for inner_class in inner_classes:
            logger.debug("Rendering nested declaration '%s'", inner_class.name)
            self._render_declaration(emitter, inner_class, nested=True)
            emitter.emit_blank_line()

    def _render_constants(
        self, emitter: CodeEmitter, constants: Optional[List[Constant]]
    ) -> None:
        if not constants:
            return

        for constant in constants:
            emitter.emit_line(
                self.render_template(
                    CONSTANT_TEMPLATE,
                    {
                        "access": constant.access,
                        "type": constant.type,
                        "name": constant.name,
                        "value": constant.value,
                    },
                )
            )

    def _render_properties(
        self, emitter: CodeEmitter, properties: Optional[List[Property]]
    ) -> None:
        if not properties:
            return

        for prop in properties:
            emitter.emit_line(
                self.render_template(
                    PROPERTY_TEMPLATE,
                    {
                        "access": prop.access,
                        "type": prop.type,
                        "name": prop.name,
                        "is_expression_bodied": prop.is_expression_bodied,
                        "expression": prop.expression,
                    },
                )
            )

    def _render_methods(
        self, emitter: CodeEmitter, declaration: ClassDeclaration
    ) -> None:
        """Emit every method; interfaces get signatures only."""
        methods = declaration.methods
        if not methods:
            return

        emitter.emit_blank_line()

        for method in methods:
            self._require(method.keywords, "keywords", self._method_label(method))
            self._require(method.parameters, "parameters", self._method_label(method))

            self._render_attributes(emitter, method.attributes)
            emitter.emit_line(self._method_header(method, declaration.is_interface))

            if not declaration.is_interface:
                self._require(method.body, "body", self._method_label(method))
                with emitter.block():
                    emitter.emit_lines(method.body)

            emitter.emit_blank_line()

    def _method_header(self, method: Method, is_interface: bool) -> str:
        """Build the signature line of a method or constructor."""
        if method.is_constructor:
            signature_parts = [*method.keywords, method.return_type]
        else:
            signature_parts = [*method.keywords, method.return_type, method.name]

        context: Dict[str, Any] = {
            "signature": CSharpSyntax.SPACE.value.join(
                str(part) for part in signature_parts
            ),
            "parameters": [self._format_parameter(p) for p in method.parameters],
            "base_arguments": method.base_constructor_arguments,
            "is_interface": is_interface,
        }
        return self.render_template(METHOD_HEADER_TEMPLATE, context)

    @staticmethod
    def _format_parameter(parameter: Parameter) -> str:
        if parameter.is_extension_receiver:
            return f"{CSharpKeyword.THIS} {parameter.type} {parameter.name}"
        return f"{parameter.type} {parameter.name}"

    @staticmethod
    def _method_label(method: Method) -> str:
        return method.name or f"{method.return_type} constructor"

    @staticmethod
    def _require(value: Any, field_name: str, owner: str) -> None:
        """Fail fast on a required collection that is None."""
        if value is None:
            logger.error("Required '%s' is missing on '%s'", field_name, owner)
            raise RenderError(f"'{owner}' has no {field_name} (None is not allowed)")


def create_csharp_generator(
    config: Optional[GeneratorConfig] = None, **overrides: Any
) -> CSharpGenerator:
    """
    Create a C# generator.

    Args:
        config: Base configuration, defaults to the C# defaults
        **overrides: GeneratorConfig fields to override, e.g. ``line_ending="\\n"``

    Returns:
        Configured CSharpGenerator
    """
    if overrides:
        base = asdict(config) if config else {}
        config = load_config("csharp", custom_config={**base, **overrides})

    return CSharpGenerator(config)
