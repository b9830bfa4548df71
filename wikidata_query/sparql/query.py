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

"""Fluent SPARQL query builder for Wikidata item searches.

A Query accumulates WHERE clauses, projected variables and sort
directives. ``render_sparql`` merges the bindings declared by a result
type and produces the query text; ``get_list`` / ``execute`` run it and
materialize the rows. Mutators return the query itself so calls chain::

    client.find("city", "Springfield").bind("population", "pop").sort_desc("pop")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from lxml import etree

from wikidata_query.errors import UnsupportedError, WikidataError
from wikidata_query.ids import INSTANCE_OF, PART_OF, SUBCLASS_OF, is_native_id
from wikidata_query.logger import get_logger
from wikidata_query.model import Entity, ResultShape, shape_of
from wikidata_query.result import Ok, Result
from wikidata_query.sparql.binder import apply_shape
from wikidata_query.sparql.results import materialize

if TYPE_CHECKING:
    from wikidata_query.client import WikidataClient

log = get_logger(__name__)

T = TypeVar("T")


def _literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


class Query:
    def __init__(self, client: WikidataClient) -> None:
        self.client = client
        self.filters: list[str] = []
        self.bindings: list[str] = []
        self.binding_to_field: dict[str, str] = {}
        self.name_filter = ""
        self.name_filter_case = True
        self.name_filter_exact = True
        # subject under analysis: "item" for searches, a statement variable
        # for Entity.query
        self.analyze_var = "item"
        self.analyze_prop = ""
        self.sort_clauses: list[str] = []
        self._merged: set[type] = set()
        self._where_count = 0

    # ── Filters ────────────────────────────────────────────────

    def _values_filter(self, var: str, name: str, triple: str) -> None:
        ids = self.client.category_id_list(name)
        self.filters.append(f"VALUES (?{var}) {{ {ids} }}")
        self.filters.append(f"{triple} ?{var}")

    def is_instance_of(self, category: str) -> Query:
        """Keep items that are instances of ``category`` or of a subclass."""
        path = f"?item (wdt:{INSTANCE_OF}/wdt:{SUBCLASS_OF}*)"
        if is_native_id(category):
            self.filters.append(f"{path} wd:{category}")
        else:
            self._values_filter("categories", category, path)
        return self

    def is_part_of(self, what: str) -> Query:
        """Keep items whose "part of" property is ``what``."""
        if is_native_id(what):
            self.filters.append(f"?item wdt:{PART_OF} wd:{what}")
        else:
            self._values_filter("partOf", what, f"?item wdt:{PART_OF}")
        return self

    def where(self, prop: str, value: str) -> Query:
        """Keep items whose property ``prop`` has the item ``value``."""
        pid = self.client.property_id(prop)
        if is_native_id(value):
            self.filters.append(f"?item wdt:{pid} wd:{value}")
        else:
            var = f"where{self._where_count}"
            self._where_count += 1
            self._values_filter(var, value, f"?item wdt:{pid}")
        return self

    def match_name(self, name: str, case_sensitive: bool = True, allow_contain: bool = False) -> Query:
        """Set the pending label filter, applied at the next render."""
        self.name_filter = name
        self.name_filter_case = case_sensitive
        self.name_filter_exact = not allow_contain
        return self

    # ── Bindings ───────────────────────────────────────────────

    def bind(self, prop: str, to: str | None = None, unit: str = "") -> Query:
        """Project a variable, optionally fed by a property.

        ``bind("?itemDescription")`` projects a raw variable.
        ``bind("population", "pop")`` binds the property value to ``?pop``
        and projects ``?popLabel``. With ``unit``, only quantities in that
        unit are matched and their amount is bound.
        """
        if to is None:
            if unit:
                raise TypeError("bind() with a unit needs a target variable")
            return self._bind_var(prop)
        if unit:
            return self._bind_quantity(prop, unit, to)
        return self._bind_property(prop, to)

    def _bind_var(self, name: str) -> Query:
        if not name.startswith("?"):
            name = "?" + name
        self.bindings.append(name)
        return self

    def _bind_property(self, prop: str, to: str) -> Query:
        pid = self.client.property_id(prop)
        if self.analyze_var == "item":
            self.filters.append(f"?item wdt:{pid} ?{to}")
        elif pid == self.analyze_prop:
            self.filters.append(f"?{self.analyze_var} ps:{pid} ?{to}")
        else:
            self.filters.append(f"?{self.analyze_var} pq:{pid} ?{to}")
        return self._bind_var(to + "Label")

    def _bind_quantity(self, prop: str, unit: str, to: str) -> Query:
        if self.analyze_var != "item":
            raise UnsupportedError("Filtering sub-properties by unit is not supported")
        pid = self.client.property_id(prop)
        uid = self.client.unit_id(unit)
        self.filters.append(
            f"?item p:{pid}/psv:{pid} [ wikibase:quantityAmount ?{to}; wikibase:quantityUnit wd:{uid}; ]"
        )
        return self._bind_var(to + "Label")

    # ── Sorting ────────────────────────────────────────────────

    def sort_asc(self, var: str) -> Query:
        self.sort_clauses.append(f"ASC(?{var})")
        return self

    def sort_desc(self, var: str) -> Query:
        self.sort_clauses.append(f"DESC(?{var})")
        return self

    # ── Rendering ──────────────────────────────────────────────

    def _consume_name_filter(self, language: str) -> None:
        if not self.name_filter:
            return
        name = _literal(self.name_filter)
        if self.name_filter_case:
            self.filters.append(f'?item ?label "{name}"@{language}')
            if self.name_filter_exact:
                self.filters.append("?item rdfs:label ?name")
                self.filters.append(f'FILTER regex(?name, "^{name}$")')
        else:
            self.filters.append("?item rdfs:label ?name")
            if self.name_filter_exact:
                self.filters.append(f'FILTER regex(?name, "^{name}$", "i")')
            else:
                self.filters.append(f'FILTER regex(?name, "{name}", "i")')
        self.name_filter = ""

    def _apply_atomically(self, shape: ResultShape) -> None:
        filters, bindings = list(self.filters), list(self.bindings)
        table = dict(self.binding_to_field)
        try:
            apply_shape(self, shape)
        except WikidataError:
            self.filters, self.bindings, self.binding_to_field = filters, bindings, table
            raise

    def render_sparql(self, result_type: type = Entity, data_language: str = "") -> str:
        """Return the SPARQL text for this query materialized as ``result_type``.

        Consumes the pending name filter and merges the bindings declared by
        ``result_type`` (once per type). Does not touch the network unless
        a binding needs a name resolved.
        """
        language = data_language or self.client.config.data_language
        self._consume_name_filter(language)

        shape = shape_of(result_type)
        if result_type not in self._merged:
            self._apply_atomically(shape)
            self._merged.add(result_type)

        head = ["SELECT REDUCED"]
        if shape.is_entity:
            head.append("?item")
        head.extend(self.bindings)

        where = "".join(f"{f}. " for f in self.filters)
        languages = f"{language},{self.client.config.coding_language}"
        label = f'SERVICE wikibase:label {{ bd:serviceParam wikibase:language "{languages}". }}'

        sparql = f"{' '.join(head)} WHERE {{ {where}{label} }}"
        if self.sort_clauses:
            sparql += " ORDER BY " + " ".join(self.sort_clauses)
        return sparql

    # ── Execution ──────────────────────────────────────────────

    def fetch_xml(self, result_type: type = Entity, data_language: str = "") -> Result[etree._Element]:
        """Render and run the query, returning the raw ``<results>`` element."""
        return self.client.raw_query(self.render_sparql(result_type, data_language))

    def execute(self, result_type: type[T] = Entity, data_language: str = "") -> Result[list[T]]:  # type: ignore[assignment]
        """Run the query; a transport failure is returned as a Fail."""
        xml = self.fetch_xml(result_type, data_language)
        if not xml.ok:
            return xml  # type: ignore[return-value]
        objects: list[Any] = materialize(
            xml.data, shape_of(result_type), self.binding_to_field, client=self.client
        )
        return Ok(data=objects)

    def get_list(self, result_type: type[T] = Entity, data_language: str = "") -> list[T]:  # type: ignore[assignment]
        """Run the query; a transport failure yields an empty list."""
        result = self.execute(result_type, data_language)
        if not result.ok:
            log.warning("Query returned no results: %s", result.error)
            return []
        return result.data
