import pytest

from sprig import QualifiedName, parse_document, parse_tree
from sprig.exceptions import (
    DuplicateAttribute,
    ExcessiveNesting,
    FailedDocumentLoading,
    MissingRequiredAttribute,
    ParsingError,
    ParsingValidityError,
    SprigBaseException,
    TagMismatch,
    UnexpectedInput,
)


@pytest.mark.parametrize(
    "exception_type",
    (
        DuplicateAttribute,
        ExcessiveNesting,
        MissingRequiredAttribute,
        TagMismatch,
        UnexpectedInput,
    ),
)
def test_hierarchy(exception_type):
    assert issubclass(exception_type, ParsingError)
    assert issubclass(exception_type, SprigBaseException)


def test_validity_errors():
    for exception_type in (DuplicateAttribute, MissingRequiredAttribute, TagMismatch):
        assert issubclass(exception_type, ParsingValidityError)
    assert not issubclass(UnexpectedInput, ParsingValidityError)
    assert not issubclass(ExcessiveNesting, ParsingValidityError)


@pytest.mark.parametrize(
    ("expected", "message"),
    (
        ((), "Unexpected input."),
        (("`>`",), "Expected `>`."),
        (("identifier", "`>`", "`>`"), "Expected one of `>`, identifier."),
    ),
)
def test_unexpected_input_message(expected, message):
    assert UnexpectedInput(expected=expected).message == message


def test_message_without_position():
    assert (
        str(MissingRequiredAttribute("version"))
        == 'Parsing error: Required attribute "version" was omitted.'
    )
    assert (
        str(TagMismatch(QualifiedName(None, "a"), QualifiedName("x", "b"), text="…"))
        == "Parsing error: Expected </a> closing tag, got </x:b> instead."
    )


def test_message_with_long_snippet():
    error = UnexpectedInput(
        text="<root>" + "abcdefghijklmnopqrstuvwxyz", position=6, expected=("`<`",)
    )
    assert str(error) == (
        "Parsing error at character 6 (`abcdefghijklmnop…`): Expected `<`."
    )


def test_message_at_end_of_input():
    with pytest.raises(UnexpectedInput) as excinfo:
        parse_tree("<a>")

    error = excinfo.value
    assert error.position == 3
    assert str(error).startswith("Parsing error at character 3: Expected ")


def test_unexpected_input_str():
    with pytest.raises(UnexpectedInput) as excinfo:
        parse_document("<>")

    assert str(excinfo.value) == (
        "Parsing error at character 1 (`>`): Expected tag name."
    )


def test_duplicate_attribute_message():
    assert str(DuplicateAttribute("id", text='<a id="1" id="2"/>', position=10)) == (
        'Parsing error at character 10 (`id="2"/>`): '
        'Attribute "id" is defined more than once.'
    )


def test_failed_document_loading():
    error = FailedDocumentLoading(0, {print: "Nope."})
    assert str(error).startswith("Couldn't load 0 with these loaders: {")
    assert error.source == 0
    assert error.excuses == {print: "Nope."}


def test_excessive_nesting_message():
    error = ExcessiveNesting(1000, text="<a>")
    assert error.recursion_limit == 1000
    assert str(error) == (
        "Parsing error: Elements are nested deeper than the recursion limit of 1000 "
        "allows."
    )
