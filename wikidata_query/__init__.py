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

"""Typed Wikidata SPARQL client — fluent queries materialized into dataclasses."""

from wikidata_query.client import WikidataClient
from wikidata_query.config import ClientConfig, load_config
from wikidata_query.errors import NotFoundError, TransportError, UnsupportedError, WikidataError
from wikidata_query.ids import is_native_id
from wikidata_query.model import Entity, FieldBinding, NamedEntity, shape_of, wikidata_prop
from wikidata_query.resolver import IdentifierResolver, ResolverState
from wikidata_query.result import Fail, Ok, Result
from wikidata_query.sparql.query import Query

__all__ = [
    "ClientConfig",
    "Entity",
    "Fail",
    "FieldBinding",
    "IdentifierResolver",
    "NamedEntity",
    "NotFoundError",
    "Ok",
    "Query",
    "ResolverState",
    "Result",
    "TransportError",
    "UnsupportedError",
    "WikidataClient",
    "WikidataError",
    "is_native_id",
    "load_config",
    "shape_of",
    "wikidata_prop",
]
