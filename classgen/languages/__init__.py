"""
Language-specific generators.

Each language package provides its model, generator and extractor.
"""

from . import csharp

__all__ = ["csharp"]
