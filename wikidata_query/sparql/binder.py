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

"""Merges a result type's declared field bindings into a query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wikidata_query.logger import get_logger
from wikidata_query.model import ResultShape

if TYPE_CHECKING:
    from wikidata_query.sparql.query import Query

log = get_logger(__name__)


def apply_shape(query: Query, shape: ResultShape) -> None:
    """Add the projections, filters and binding-table entries of ``shape``.

    Bindings are applied base type first, so a field re-declared by a
    subclass overwrites the table entry of its base.
    """
    for b in shape.bindings:
        log.debug("Auto-bind %s → %s.%s", b.prop, shape.cls.__name__, b.field)
        if b.prop.startswith("?"):
            query.bind(b.prop)
            query.binding_to_field[b.prop[1:]] = b.field
        elif not b.unit:
            query.bind(b.prop, b.field)
            query.binding_to_field[b.field + "Label"] = b.field
        else:
            query.bind(b.prop, b.field, unit=b.unit)
            query.binding_to_field[b.field + "Label"] = b.field
