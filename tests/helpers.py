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

"""Fake transport and SPARQL XML fixtures shared by the test modules."""

from __future__ import annotations

from lxml import etree

from wikidata_query.client import WikidataClient
from wikidata_query.config import ClientConfig
from wikidata_query.resolver import ResolverState
from wikidata_query.result import Fail, Result
from wikidata_query.sparql.transport import parse_results

SPARQL_NS = "http://www.w3.org/2005/sparql-results#"
ENTITY = "http://www.wikidata.org/entity/"

Row = dict[str, str]


def results_doc(rows: list[Row], namespace: str | None = SPARQL_NS) -> bytes:
    """Serialize rows as a SPARQL XML results document."""

    def tag(name: str) -> str:
        return f"{{{namespace}}}{name}" if namespace else name

    nsmap = {None: namespace} if namespace else None
    root = etree.Element(tag("sparql"), nsmap=nsmap)
    variables = sorted({key for row in rows for key in row})
    head = etree.SubElement(root, tag("head"))
    for var in variables:
        etree.SubElement(head, tag("variable"), name=var)
    results = etree.SubElement(root, tag("results"))
    for row in rows:
        result = etree.SubElement(results, tag("result"))
        for key, value in row.items():
            binding = etree.SubElement(result, tag("binding"), name=key)
            kind = "uri" if value.startswith("http") else "literal"
            etree.SubElement(binding, tag(kind)).text = value
    return etree.tostring(root, xml_declaration=True, encoding="utf-8")


def results_element(rows: list[Row], namespace: str | None = SPARQL_NS) -> etree._Element:
    result = parse_results(results_doc(rows, namespace))
    assert result.ok, result
    return result.data


class FakeTransport:
    """Records queries; answers with the rows of the first matching rule.

    A rule matches when every needle is a substring of the query text.
    Unmatched queries get an empty result set.
    """

    def __init__(self) -> None:
        self.queries: list[str] = []
        self.rules: list[tuple[tuple[str, ...], list[Row]]] = []
        self.fail = False

    def respond(self, needles: str | tuple[str, ...], rows: list[Row]) -> None:
        if isinstance(needles, str):
            needles = (needles,)
        self.rules.append((needles, rows))

    def count(self, needle: str) -> int:
        return sum(1 for q in self.queries if needle in q)

    def __call__(self, sparql: str) -> Result[etree._Element]:
        self.queries.append(sparql)
        if self.fail:
            return Fail(error="SPARQL connection error: refused", code="transport")
        for needles, rows in self.rules:
            if all(n in sparql for n in needles):
                return parse_results(results_doc(rows))
        return parse_results(results_doc([]))


def make_client(
    transport: FakeTransport | None = None,
    state: ResolverState | None = None,
    **config: object,
) -> WikidataClient:
    return WikidataClient(
        ClientConfig(**config),  # type: ignore[arg-type]
        transport=transport if transport is not None else FakeTransport(),
        state=state,
    )


def known_ids() -> ResolverState:
    """Resolver state with the names used across tests already cached."""
    return ResolverState(
        properties={"population": "P1082", "point in time": "P585", "area": "P2046", "country": "P17"},
        units={"square kilometre": "Q712226"},
        categories={"Europe": "(wd:Q46)", "city": "(wd:Q515)(wd:Q1549591)"},
    )
