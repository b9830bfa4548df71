# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""SPARQL XML result walking and materialization into result objects.

Reads the ``application/sparql-results+xml`` layout::

    results > result > binding[@name] > (uri | literal | bnode)

Tags are matched by local name, so documents with or without the
SPARQL results namespace are both accepted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from lxml import etree

from wikidata_query.ids import local_name
from wikidata_query.logger import get_logger

if TYPE_CHECKING:
    from wikidata_query.client import WikidataClient
    from wikidata_query.model import ResultShape

log = get_logger(__name__)


def _tag(element: etree._Element) -> str:
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def _children(element: etree._Element, tag: str) -> Iterator[etree._Element]:
    for child in element:
        if _tag(child) == tag:
            yield child


def iter_rows(results: etree._Element) -> Iterator[etree._Element]:
    """Yield each ``<result>`` row of a ``<results>`` element."""
    return _children(results, "result")


def iter_bindings(row: etree._Element) -> Iterator[etree._Element]:
    """Yield each ``<binding>`` of a result row."""
    return _children(row, "binding")


def binding_name(binding: etree._Element) -> str:
    return binding.get("name", "")


def binding_value(binding: etree._Element) -> str:
    """Text of the binding's first value element, or ``""``."""
    for value in binding:
        if isinstance(value.tag, str):
            return value.text or ""
    return ""


def materialize(
    results: etree._Element,
    shape: ResultShape,
    binding_to_field: dict[str, str],
    client: WikidataClient | None = None,
) -> list[Any]:
    """Instantiate one ``shape.cls`` object per result row.

    ``item`` bindings set the entity ID (for entity shapes); other bindings
    are routed to fields through ``binding_to_field``. Unknown bindings are
    ignored and all values stay text.
    """
    objects: list[Any] = []
    for row in iter_rows(results):
        obj = shape.new()
        if shape.is_entity:
            obj.client = client
        for binding in iter_bindings(row):
            name = binding_name(binding)
            if name == "item" and shape.is_entity:
                obj.id = local_name(binding_value(binding))
                continue
            target = binding_to_field.get(name)
            if target is None:
                continue
            setter = shape.setters.get(target)
            if setter is None:
                log.debug("No field '%s' on %s, skipping", target, shape.cls.__name__)
                continue
            setter(obj, binding_value(binding))
        objects.append(obj)
    return objects
