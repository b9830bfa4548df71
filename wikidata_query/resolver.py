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

"""Resolution of human-readable names to native Wikidata IDs.

Property and unit names resolve to the first matching item; category
names resolve to every match, rendered as ``VALUES`` rows. Each kind has
its own cache in ResolverState. Caches are filled lazily and never
invalidated; nothing is cached on failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from wikidata_query.ids import PROPERTY_CATEGORY, UNIT_CATEGORY, is_native_id
from wikidata_query.logger import OperationCounter, QuerySummary, get_logger
from wikidata_query.result import Fail, Ok, Result

log = get_logger(__name__)

# (category, name) -> IDs of the items found
Lookup = Callable[[str, str], Result[list[str]]]


@dataclass
class ResolverState:
    """The three name → ID caches of one client."""

    properties: dict[str, str] = field(default_factory=dict)
    units: dict[str, str] = field(default_factory=dict)
    categories: dict[str, str] = field(default_factory=dict)


class IdentifierResolver:
    def __init__(
        self,
        lookup: Lookup,
        state: ResolverState | None = None,
        summary: QuerySummary | None = None,
    ) -> None:
        self.lookup = lookup
        self.state = state if state is not None else ResolverState()
        self.summary = summary if summary is not None else QuerySummary()

    def _counter(self) -> OperationCounter:
        return self.summary.counter("resolve")

    def _search(self, category: str, name: str, kind: str) -> Result[list[str]]:
        found = self.lookup(category, name)
        if not found.ok:
            self._counter().failed += 1
            return Fail(
                error=f"Could not look up {kind} '{name}': {found.error}",
                context=name,
                code="transport",
            )
        if not found.data:
            self._counter().failed += 1
            return Fail(error=f"{kind} '{name}' does not exist", context=name, code="not_found")
        self._counter().ok += 1
        return found

    def _resolve_one(
        self, name: str, category: str, cache: dict[str, str], kind: str
    ) -> Result[str]:
        if is_native_id(name):
            return Ok(data=name)
        if name in cache:
            self._counter().cached += 1
            return Ok(data=cache[name])

        found = self._search(category, name, kind)
        if not found.ok:
            return found  # type: ignore[return-value]
        cache[name] = found.data[0]
        log.info("Resolved %s '%s' → %s", kind.lower(), name, found.data[0])
        return Ok(data=found.data[0])

    def property_id(self, name: str) -> Result[str]:
        """Resolve a property name (e.g. ``"population"``) to ``P<digits>``."""
        return self._resolve_one(name, PROPERTY_CATEGORY, self.state.properties, "Property")

    def unit_id(self, name: str) -> Result[str]:
        """Resolve a unit name (e.g. ``"metre"``) to ``Q<digits>``."""
        return self._resolve_one(name, UNIT_CATEGORY, self.state.units, "Unit")

    def category_id_list(self, name: str, category: str = "") -> Result[str]:
        """Resolve ``name`` to all matching items as ``(wd:Q1)(wd:Q2)...``.

        The cache is keyed by ``name`` only: a later call with the same name
        and another ``category`` returns the first call's list.
        """
        cache = self.state.categories
        if name in cache:
            self._counter().cached += 1
            return Ok(data=cache[name])

        found = self._search(category, name, "Item")
        if not found.ok:
            return found  # type: ignore[return-value]
        rendered = "".join(f"(wd:{qid})" for qid in found.data)
        cache[name] = rendered
        log.info("Resolved '%s' → %d item(s)", name, len(found.data))
        return Ok(data=rendered)
