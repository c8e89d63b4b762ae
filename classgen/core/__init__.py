"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .emitter import CodeEmitter
from .generator import CodeGenerator, GeneratorError, RenderError
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Line emission
    "CodeEmitter",
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "RenderError",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
