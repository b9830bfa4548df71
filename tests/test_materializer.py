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

import unittest
from dataclasses import dataclass

from lxml import etree

from tests.helpers import ENTITY, results_element
from wikidata_query.model import Entity, NamedEntity, shape_of, wikidata_prop
from wikidata_query.sparql.results import binding_value, materialize


@dataclass
class Town(Entity):
    population: str = wikidata_prop("population")


@dataclass
class Reading:
    item: str = wikidata_prop("?item")
    value: str = wikidata_prop("?value")


class MaterializeTests(unittest.TestCase):
    def test_entity_id_and_bound_field(self) -> None:
        results = results_element([{"item": ENTITY + "Q42", "populationLabel": "1000"}])
        [town] = materialize(results, shape_of(Town), {"populationLabel": "population"})
        self.assertEqual(town.id, "Q42")
        self.assertEqual(town.population, "1000")

    def test_rows_keep_order_and_unknown_bindings_are_ignored(self) -> None:
        results = results_element([
            {"item": ENTITY + "Q1", "itemLabel": "Universe", "extra": "x"},
            {"item": ENTITY + "Q2", "itemLabel": "Earth"},
        ])
        items = materialize(results, shape_of(NamedEntity), {"itemLabel": "name"})
        self.assertEqual([(i.id, i.name) for i in items], [("Q1", "Universe"), ("Q2", "Earth")])

    def test_missing_binding_leaves_default(self) -> None:
        results = results_element([{"item": ENTITY + "Q3"}])
        [town] = materialize(results, shape_of(Town), {"populationLabel": "population"})
        self.assertEqual(town.population, "")

    def test_empty_results(self) -> None:
        self.assertEqual(materialize(results_element([]), shape_of(Town), {}), [])

    def test_non_entity_routes_item_through_table(self) -> None:
        results = results_element([{"item": ENTITY + "Q5", "value": "12"}])
        [reading] = materialize(results, shape_of(Reading), {"item": "item", "value": "value"})
        self.assertEqual(reading.item, ENTITY + "Q5")
        self.assertEqual(reading.value, "12")

    def test_documents_without_namespace(self) -> None:
        results = results_element([{"item": ENTITY + "Q9", "populationLabel": "7"}], namespace=None)
        [town] = materialize(results, shape_of(Town), {"populationLabel": "population"})
        self.assertEqual((town.id, town.population), ("Q9", "7"))

    def test_objects_are_bound_to_client(self) -> None:
        marker = object()
        results = results_element([{"item": ENTITY + "Q1"}])
        [town] = materialize(results, shape_of(Town), {}, client=marker)  # type: ignore[arg-type]
        self.assertIs(town.client, marker)

    def test_binding_value_of_empty_binding(self) -> None:
        self.assertEqual(binding_value(etree.Element("binding", name="x")), "")
