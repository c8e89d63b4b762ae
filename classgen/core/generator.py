"""
Base generator interface for all code generation targets.

Defines the contract that language generators implement and the errors
they raise.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from pathlib import Path

from .config import GeneratorConfig, load_config
from .emitter import CodeEmitter
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class RenderError(GeneratorError):
    """Raised when a model violates a rendering precondition."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config(self.language_name)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)
        for name, content in self.get_builtin_templates().items():
            self._template_engine.add_template(name, content)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses may override this to load templates from disk. Return
        None to use in-memory templates only.

        Returns:
            Path to template directory or None
        """
        return None

    def get_builtin_templates(self) -> Dict[str, str]:
        """Return in-memory templates registered at startup, keyed by name."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def create_emitter(self, starting_depth: int = 0) -> CodeEmitter:
        """Create a fresh emitter configured from this generator's settings."""
        return CodeEmitter(
            indent=self.config.indent,
            line_ending=self.config.line_ending,
            depth=starting_depth,
        )

    @abstractmethod
    def generate(self, declaration: Any, starting_depth: int = 0) -> str:
        """
        Generate source code for a single declaration.

        Args:
            declaration: Model object to render
            starting_depth: Indentation depth of the outermost line

        Returns:
            Generated code as a string
        """
        pass

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
