from classgen.languages.csharp import (
    Attribute,
    CSharpKeyword,
    CSharpType,
    Method,
    Property,
    add_quotes,
)


class TestAttribute:
    def test_without_arguments(self):
        assert str(Attribute("Obsolete")) == "[Obsolete]"

    def test_with_empty_arguments(self):
        assert str(Attribute("Obsolete", [])) == "[Obsolete]"

    def test_arguments_are_joined_into_one_quoted_string(self):
        assert str(Attribute("Obsolete", ["a", "b"])) == '[Obsolete("a,b")]'


def test_method_with_empty_name_is_constructor():
    assert Method(name="", return_type="Foo").is_constructor
    assert not Method(name="Run", return_type="void").is_constructor


def test_collections_default_to_independent_lists():
    first = Method(name="A", return_type="void")
    second = Method(name="B", return_type="void")
    first.body.append("return;")
    assert second.body == []


def test_property_defaults_to_public_auto_property():
    prop = Property(name="Id", type=CSharpType.INT)
    assert prop.access == "public"
    assert not prop.is_expression_bodied


def test_vocabulary_behaves_like_strings():
    assert f"{CSharpKeyword.PUBLIC} {CSharpType.STRING}" == "public string"
    assert " ".join([CSharpKeyword.STATIC, CSharpKeyword.CLASS]) == "static class"


def test_add_quotes():
    assert add_quotes("hello") == '"hello"'
