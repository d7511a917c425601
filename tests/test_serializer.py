import json

import pytest

from sprig import Attribute, parse_attributes, parse_document, to_data, to_json


def test_document():
    document = parse_document(
        '<?xml version="1.0"?><svg:g id="a"><rect disabled/>text</svg:g>'
    )

    assert to_data(document) == {
        "declaration": {"version": "1.0"},
        "root": {
            "name": "g",
            "ns": "svg",
            "attributes": {"id": {"value": "a", "property": "id", "ns": None}},
            "children": [
                {
                    "name": "rect",
                    "ns": None,
                    "attributes": {
                        "disabled": {
                            "value": "disabled",
                            "property": "disabled",
                            "ns": None,
                        }
                    },
                    "children": [],
                },
                "text",
            ],
        },
    }


def test_document_without_declaration():
    assert to_data(parse_document("<a/>"))["declaration"] is None


def test_ordered_attributes():
    attributes = parse_attributes('b="1" xlink:a="2" b="3"')

    assert to_data(attributes) == {
        "b": {"value": "3", "property": "b", "ns": None},
        "xlink:a": {"value": "2", "property": "a", "ns": "xlink"},
    }
    assert to_data(attributes, ordered_attributes=True) == [
        {"value": "1", "property": "b", "ns": None},
        {"value": "2", "property": "a", "ns": "xlink"},
        {"value": "3", "property": "b", "ns": None},
    ]


def test_ordered_attributes_in_nested_elements():
    data = to_data(
        parse_document('<a x="1"><b y="2"/></a>').root, ordered_attributes=True
    )

    assert data["attributes"] == [{"value": "1", "property": "x", "ns": None}]
    assert data["children"][0]["attributes"] == [
        {"value": "2", "property": "y", "ns": None}
    ]


def test_to_json():
    document = parse_document('<p class="x">Hello <b>world</b></p>')

    assert json.loads(to_json(document)) == to_data(document)
    assert (
        to_json(Attribute(None, "a", "b"), indent=None)
        == '{"value": "b", "property": "a", "ns": null}'
    )
    assert "\n    " in to_json(document, indent=4)


def test_unsupported_type():
    with pytest.raises(TypeError):
        to_data(42)
