import pytest

from sprig import parse_tree
from sprig.utils import TreeDifferenceKind, compare_trees


@pytest.mark.parametrize(
    ("a", "b", "kind"),
    (
        ("<node/>", "<mode/>", TreeDifferenceKind.TagLocalName),
        ("<node/>", "<x:node/>", TreeDifferenceKind.TagNamespace),
        ("<node a=''/>", "<node b=''/>", TreeDifferenceKind.TagAttributes),
        ("<node a=''/>", "<node p:a=''/>", TreeDifferenceKind.TagAttributes),
        ("<node>foo</node>", "<node>bar</node>", TreeDifferenceKind.NodeContent),
        ("<node>foo</node>", "<node><foo/></node>", TreeDifferenceKind.NodeType),
        (
            "<node><a/></node>",
            "<node><a/><a/></node>",
            TreeDifferenceKind.TagChildrenSize,
        ),
        (
            "<node><a/><b/></node>",
            "<node><a/><a/></node>",
            TreeDifferenceKind.TagLocalName,
        ),
    ),
)
def test_compare_unequal_trees(a, b, kind):
    result = compare_trees(parse_tree(a), parse_tree(b))
    assert not result
    assert result.difference_kind is kind
    assert str(result)


def test_compare_equal_trees():
    result = compare_trees(
        parse_tree("<a x='1'>\n  <b>text</b>\n</a>"),
        parse_tree('<a x="1"><b>text</b></a>'),
    )
    assert result
    assert str(result) == "Trees are equal."


def test_difference_location():
    result = compare_trees(
        parse_tree("<a><b/><c><d>one</d></c></a>"),
        parse_tree("<a><b/><c><d>two</d></c></a>"),
    )

    assert result.path == (1, 0, 0)
    assert str(result) == "Nodes' content differ at /1/0/0:\n'one'\n'two'"


def test_difference_of_names():
    result = compare_trees(parse_tree("<a><b/></a>"), parse_tree("<a><c/></a>"))
    assert str(result) == "Local names of elements at /0 differ: b != c"
