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

from wikidata_query.ids import is_native_id, local_name


class NativeIdTests(unittest.TestCase):
    def test_item_and_property_ids(self) -> None:
        for name in ("Q42", "P31", "Q18616576", "L1"):
            self.assertTrue(is_native_id(name), name)

    def test_names_are_not_ids(self) -> None:
        for name in ("", "Q", "q42", "population", "Q42a", "QQ1", "Q 1", "P-1", "Q١٢"):
            self.assertFalse(is_native_id(name), name)

    def test_local_name(self) -> None:
        self.assertEqual(local_name("http://www.wikidata.org/entity/Q42"), "Q42")
        self.assertEqual(local_name("Q42"), "Q42")
