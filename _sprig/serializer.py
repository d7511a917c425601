# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Converts parsed values into structures of builtin types that can be dumped as JSON.
The shapes are:

- documents: ``{"declaration": {…} | None, "root": {…}}``
- elements: ``{"name": …, "ns": …, "attributes": {…}, "children": […]}``
- attributes: ``{"value": …, "property": …, "ns": …}``, attribute collections are
  objects with the qualified attribute names as keys, unless ``ordered_attributes``
  is requested, then these are arrays of all attributes in document order
- text: strings
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from _sprig.nodes import Attribute, Attributes, Document, Element


def _attribute_to_dict(attribute: Attribute) -> dict[str, Any]:
    return {
        "value": attribute.value,
        "property": attribute.property,
        "ns": attribute.namespace,
    }


def _attributes_to_data(
    attributes: Attributes, ordered_attributes: bool
) -> dict[str, Any] | list[Any]:
    if ordered_attributes:
        return [_attribute_to_dict(a) for a in attributes.ordered]
    return {k: _attribute_to_dict(v) for k, v in attributes.items()}


def _element_to_dict(element: Element, ordered_attributes: bool) -> dict[str, Any]:
    return {
        "name": element.local_name,
        "ns": element.namespace,
        "attributes": _attributes_to_data(element.attributes, ordered_attributes),
        "children": [
            c if isinstance(c, str) else _element_to_dict(c, ordered_attributes)
            for c in element.children
        ],
    }


def to_data(value: Any, ordered_attributes: bool = False) -> Any:
    """
    Converts a :class:`Document`, :class:`Element`, :class:`Attributes`,
    :class:`Attribute`, declaration mapping or text into builtin types.

    >>> to_data(Attribute(None, "disabled", "disabled"))
    {'value': 'disabled', 'property': 'disabled', 'ns': None}
    """
    if isinstance(value, Document):
        return {
            "declaration": (
                None if value.declaration is None else dict(value.declaration)
            ),
            "root": _element_to_dict(value.root, ordered_attributes),
        }
    if isinstance(value, Element):
        return _element_to_dict(value, ordered_attributes)
    if isinstance(value, Attribute):
        return _attribute_to_dict(value)
    if isinstance(value, Attributes):
        return _attributes_to_data(value, ordered_attributes)
    if isinstance(value, Mapping):
        # declarations
        return dict(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Can't convert objects of type {type(value)}.")


def to_json(
    value: Any, indent: int | None = 2, ordered_attributes: bool = False
) -> str:
    """Serializes the :func:`to_data` representation of ``value`` as JSON."""
    return json.dumps(to_data(value, ordered_attributes), indent=indent)


__all__ = (to_data.__name__, to_json.__name__)
