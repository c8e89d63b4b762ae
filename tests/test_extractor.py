import pytest

from classgen.languages.csharp import (
    Attribute,
    AttributeSyntax,
    ExtractionError,
    MemberSyntax,
    MethodSyntax,
    ParameterSyntax,
    PropertySyntax,
    ScopeSyntax,
    SyntaxKind,
    TypeDeclarationSyntax,
    extract_declaration,
)


@pytest.fixture
def person_node():
    return TypeDeclarationSyntax(
        identifier="Person",
        attribute_lists=[
            [AttributeSyntax("Serializable")],
            [AttributeSyntax("Table", ['"people"', '"main"'])],
        ],
        base_list=["Entity", "IPerson"],
        members=[
            MemberSyntax("_age"),
            PropertySyntax("Name", "string"),
            MethodSyntax(
                identifier="Greet",
                return_type="string",
                parameters=[ParameterSyntax("other", "Person")],
                attribute_lists=[[AttributeSyntax("Obsolete", ['"use Hello"'])]],
            ),
            PropertySyntax("Age", "int"),
            MethodSyntax(identifier="Reset", return_type="void"),
        ],
        parent=ScopeSyntax("Demo.Models"),
    )


def test_namespace_is_appended_to_a_copy_of_imports(person_node):
    imports = ["System"]

    declaration = extract_declaration(person_node, imports)

    assert declaration.imports == ["System", "Demo.Models"]
    assert imports == ["System"]
    assert declaration.namespace == ""


def test_header_fields(person_node):
    declaration = extract_declaration(person_node, [])

    assert declaration.name == "Person"
    assert declaration.keywords == ["public"]
    assert declaration.implementations == "Entity,IPerson"
    assert not declaration.is_interface
    assert declaration.constants is None
    assert declaration.inner_classes is None


def test_attributes_are_flattened_and_unquoted(person_node):
    declaration = extract_declaration(person_node, [])

    assert declaration.attributes == [
        Attribute("Serializable", None),
        Attribute("Table", ["people", "main"]),
    ]
    assert str(declaration.attributes[1]) == '[Table("people,main")]'


def test_methods_are_public_with_empty_bodies(person_node):
    declaration = extract_declaration(person_node, [])

    assert [m.name for m in declaration.methods] == ["Greet", "Reset"]
    greet = declaration.methods[0]
    assert greet.keywords == ["public"]
    assert greet.return_type == "string"
    assert greet.body == []
    assert [(p.name, p.type) for p in greet.parameters] == [("other", "Person")]
    assert not greet.parameters[0].is_extension_receiver
    assert greet.attributes == [Attribute("Obsolete", ["use Hello"])]
    assert declaration.methods[1].attributes == []


def test_properties_are_public_auto_properties(person_node):
    declaration = extract_declaration(person_node, [])

    assert [(p.name, p.type, p.access) for p in declaration.properties] == [
        ("Name", "string", "public"),
        ("Age", "int", "public"),
    ]
    assert not any(p.is_expression_bodied for p in declaration.properties)


def test_missing_base_list_gives_no_implementations():
    node = TypeDeclarationSyntax(identifier="Plain", parent=ScopeSyntax("Demo"))

    declaration = extract_declaration(node, [])

    assert declaration.implementations is None
    assert declaration.methods == []
    assert declaration.properties == []


def test_extracted_declaration_renders(person_node, generator):
    declaration = extract_declaration(person_node, ["System"])

    lines = generator.generate(declaration).split("\n")
    assert "using Demo.Models;" in lines
    assert "\tpublic class Person : Entity,IPerson" in lines
    assert "\t\tpublic string Greet(Person other)" in lines


@pytest.mark.parametrize(
    "parent",
    [
        None,
        ScopeSyntax("Outer", kind=SyntaxKind.CLASS),
        MemberSyntax("Outer"),
    ],
)
def test_type_outside_namespace_is_rejected(parent):
    node = TypeDeclarationSyntax(identifier="Inner", parent=parent)

    with pytest.raises(ExtractionError, match="Inner"):
        extract_declaration(node, [])
