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

"""Result types and their declarative Wikidata binding tables.

A result type is a dataclass whose fields are declared with
``wikidata_prop``::

    @dataclass
    class City(NamedEntity):
        population: str = wikidata_prop("population")
        area: str = wikidata_prop("area", unit="square kilometre")
        description: str = wikidata_prop("?itemDescription")

``shape_of`` turns such a class into a ResultShape once: the ordered list
of FieldBinding descriptors (base classes first) and an explicit
field-name → setter table used by the materializer.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from wikidata_query.sparql.results import binding_name, binding_value, iter_bindings, iter_rows

if TYPE_CHECKING:
    from wikidata_query.client import WikidataClient
    from wikidata_query.sparql.query import Query

_METADATA_KEY = "wikidata"

Setter = Callable[[Any, str], None]


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """One field of a result type and the Wikidata source feeding it.

    ``prop`` is a property name or ID; a leading ``?`` makes it a raw SPARQL
    variable instead. ``unit`` restricts a quantity property to one unit.
    """

    field: str
    prop: str
    unit: str = ""


def wikidata_prop(prop: str, unit: str = "") -> Any:
    """Declare a string field filled from a Wikidata property or variable."""
    return field(default="", metadata={_METADATA_KEY: (prop, unit)})


def _make_setter(name: str) -> Setter:
    def setter(obj: Any, value: str) -> None:
        setattr(obj, name, value)

    return setter


@dataclass(frozen=True)
class ResultShape:
    """Binding table and setters of one result type."""

    cls: type
    bindings: tuple[FieldBinding, ...]
    setters: dict[str, Setter]
    is_entity: bool

    def new(self) -> Any:
        return self.cls()


@functools.cache
def shape_of(cls: type) -> ResultShape:
    """Build the ResultShape of ``cls``, walking base classes first."""
    bindings: list[FieldBinding] = []
    for klass in reversed(cls.__mro__):
        if not dataclasses.is_dataclass(klass):
            continue
        declared = klass.__dataclass_fields__
        for name in inspect.get_annotations(klass):
            meta = declared[name].metadata.get(_METADATA_KEY) if name in declared else None
            if meta is None:
                continue
            prop, unit = meta
            bindings.append(FieldBinding(field=name, prop=prop, unit=unit))

    return ResultShape(
        cls=cls,
        bindings=tuple(bindings),
        setters={b.field: _make_setter(b.field) for b in bindings},
        is_entity=issubclass(cls, Entity),
    )


@dataclass
class Entity:
    """A Wikidata item, identified by its native ID (``Q<digits>``).

    Entities produced by a client keep a reference to it so that ``get``
    and ``query`` can issue follow-up requests.
    """

    id: str = ""
    client: WikidataClient | None = field(default=None, repr=False, compare=False)

    def _client(self) -> WikidataClient:
        if self.client is None:
            raise RuntimeError(f"Entity {self.id!r} is not bound to a WikidataClient")
        return self.client

    def get(self, prop: str, var: str = "val") -> str:
        """Return the first value of ``prop`` on this item, or ``""``."""
        client = self._client()
        pid = client.property_id(prop)
        result = client.raw_query(f"SELECT ?{var} WHERE {{ wd:{self.id} wdt:{pid} ?{var}. }}")
        if not result.ok:
            return ""
        for row in iter_rows(result.data):
            for binding in iter_bindings(row):
                if binding_name(binding) == var:
                    return binding_value(binding)
        return ""

    def query(self, prop: str, subject_var: str = "prop") -> Query:
        """Start a query over the statements of ``prop`` on this item.

        Subsequent ``bind`` calls on the returned query read the statement
        value when given ``prop`` itself, and qualifiers otherwise.
        """
        client = self._client()
        pid = client.property_id(prop)
        q = client.new_query()
        q.filters.append(f"wd:{self.id} p:{pid} ?{subject_var}")
        q.analyze_var = subject_var
        q.analyze_prop = pid
        return q


@dataclass
class NamedEntity(Entity):
    """Entity with its label in the data language."""

    name: str = wikidata_prop("?itemLabel")
