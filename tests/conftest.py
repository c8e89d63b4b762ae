import pytest

from classgen.core.config import load_config
from classgen.languages.csharp import CSharpGenerator


@pytest.fixture
def generator():
    """C# generator with deterministic line endings."""
    return CSharpGenerator(load_config("csharp", custom_config={"line_ending": "\n"}))
