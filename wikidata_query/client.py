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

"""Wikidata client — entry point of the query API.

Owns the configuration, the transport, the identifier caches and the
operation counters. Every Query and bound Entity refers back to it.
"""

from __future__ import annotations

from lxml import etree

from wikidata_query.config import ClientConfig
from wikidata_query.errors import unwrap
from wikidata_query.logger import QuerySummary, get_logger
from wikidata_query.model import Entity
from wikidata_query.resolver import IdentifierResolver, ResolverState
from wikidata_query.result import Ok, Result
from wikidata_query.sparql.query import Query
from wikidata_query.sparql.transport import HttpTransport, Transport

log = get_logger(__name__)


class WikidataClient:
    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        state: ResolverState | None = None,
    ) -> None:
        self.config = config if config is not None else ClientConfig()
        self.transport = transport if transport is not None else HttpTransport(self.config)
        self.summary = QuerySummary()
        self.resolver = IdentifierResolver(self._lookup, state, self.summary)

    # ── Queries ────────────────────────────────────────────────

    def new_query(self) -> Query:
        return Query(self)

    def find(
        self,
        category: str = "",
        name: str = "",
        case_sensitive: bool = True,
        allow_contain: bool = False,
    ) -> Query:
        """Start a search for items of ``category`` whose label matches ``name``.

        ``category`` may be a native ID or a name; names resolve to every
        matching item. ``name`` matches the whole label unless
        ``allow_contain`` is set.
        """
        q = self.new_query()
        if category:
            q.is_instance_of(category)
        if name:
            q.match_name(name, case_sensitive, allow_contain)
        return q

    def entity(self, qid: str) -> Entity:
        """An Entity for a known ID, bound to this client."""
        return Entity(id=qid, client=self)

    def raw_query(self, sparql: str) -> Result[etree._Element]:
        """Send SPARQL text through the transport and count the outcome.

        In verbose mode the query text and the returned results are logged.
        """
        verbose = self.config.verbose
        counter = self.summary.counter("query")
        if verbose:
            log.info("SPARQL query:\n%s", sparql)
        result = self.transport(sparql)
        if not result.ok:
            counter.failed += 1
            if verbose:
                log.warning("SPARQL query failed: %s", result.error)
            return result
        counter.ok += 1
        if verbose:
            log.info("SPARQL response:\n%s", etree.tostring(result.data, encoding="unicode"))
        return result

    def _lookup(self, category: str, name: str) -> Result[list[str]]:
        found = self.find(category, name).execute(Entity, self.config.coding_language)
        if not found.ok:
            return found  # type: ignore[return-value]
        return Ok(data=[item.id for item in found.data])

    # ── Identifier resolution ──────────────────────────────────

    def property_id(self, name: str) -> str:
        """Native property ID for ``name``; raises NotFoundError if unknown."""
        return unwrap(self.resolver.property_id(name))

    def unit_id(self, name: str) -> str:
        """Native unit ID for ``name``; raises NotFoundError if unknown."""
        return unwrap(self.resolver.unit_id(name))

    def category_id_list(self, name: str, category: str = "") -> str:
        """``(wd:Q..)`` rows of every item named ``name``; raises NotFoundError."""
        return unwrap(self.resolver.category_id_list(name, category))
