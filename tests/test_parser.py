"""Tests for extracting declarations from real C# source."""

import pytest

pytest.importorskip("tree_sitter_c_sharp")

from classgen import extract_declarations_from_source  # noqa: E402
from classgen.languages.csharp import (  # noqa: E402
    Attribute,
    ExtractionError,
    SyntaxKind,
    extract_declaration,
)
from classgen.languages.csharp.parser import (  # noqa: E402
    CSharpSourceParser,
    ParserError,
)

PERSON_SOURCE = """using System;

namespace Demo.Models
{
    [Serializable]
    [Table("people")]
    public class Person : Entity, IPerson
    {
        private int _age;

        public string Name { get; set; }

        internal int Age { get; private set; }

        public Person() { }

        [Obsolete("use Greet")]
        protected string Hello(string name, int times)
        {
            return name;
        }

        private void Reset()
        {
        }
    }
}
"""

FILE_SCOPED_SOURCE = """namespace Demo.Contracts;

public interface IRunner
{
    void Run(int count);
}
"""

NESTED_SOURCE = """namespace Demo
{
    public class Outer
    {
        public class Inner
        {
        }
    }
}
"""


@pytest.fixture
def parser():
    return CSharpSourceParser()


def test_type_declaration_shape(parser):
    (node,) = parser.type_declarations(PERSON_SOURCE)

    assert node.identifier == "Person"
    assert node.kind == SyntaxKind.CLASS
    assert node.parent.kind == SyntaxKind.NAMESPACE
    assert node.parent.name == "Demo.Models"
    assert node.base_list == ["Entity", "IPerson"]


def test_extract_from_block_scoped_namespace(parser):
    (node,) = parser.type_declarations(PERSON_SOURCE)

    declaration = extract_declaration(node, ["System"])

    assert declaration.imports == ["System", "Demo.Models"]
    assert declaration.implementations == "Entity,IPerson"
    assert declaration.attributes == [
        Attribute("Serializable", None),
        Attribute("Table", ["people"]),
    ]
    assert [p.name for p in declaration.properties] == ["Name", "Age"]
    assert [p.type for p in declaration.properties] == ["string", "int"]
    assert all(p.access == "public" for p in declaration.properties)


def test_methods_are_extracted_without_constructors(parser):
    (node,) = parser.type_declarations(PERSON_SOURCE)

    declaration = extract_declaration(node, [])

    assert [m.name for m in declaration.methods] == ["Hello", "Reset"]
    hello = declaration.methods[0]
    assert hello.return_type == "string"
    assert hello.keywords == ["public"]
    assert hello.body == []
    assert [(p.name, p.type) for p in hello.parameters] == [
        ("name", "string"),
        ("times", "int"),
    ]
    assert hello.attributes == [Attribute("Obsolete", ["use Greet"])]


def test_file_scoped_namespace(parser):
    (node,) = parser.type_declarations(FILE_SCOPED_SOURCE)

    assert node.kind == SyntaxKind.INTERFACE
    declaration = extract_declaration(node, [])
    assert declaration.imports == ["Demo.Contracts"]
    assert [m.name for m in declaration.methods] == ["Run"]


def test_nested_type_is_not_extractable(parser):
    outer, inner = parser.type_declarations(NESTED_SOURCE)

    assert outer.identifier == "Outer"
    assert inner.parent.kind == SyntaxKind.CLASS
    assert inner.parent.name == "Outer"
    with pytest.raises(ExtractionError):
        extract_declaration(inner, [])


def test_extract_declarations_from_source_skips_nested_types():
    declarations = extract_declarations_from_source(NESTED_SOURCE, ["System"])

    assert [d.name for d in declarations] == ["Outer"]
    assert declarations[0].imports == ["System", "Demo"]


def test_type_without_namespace_is_rejected(parser):
    (node,) = parser.type_declarations("public class Loose { }")

    with pytest.raises(ExtractionError):
        extract_declaration(node, [])


def test_syntax_errors_raise(parser):
    with pytest.raises(ParserError):
        parser.parse("namespace Demo { public class { ")
