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

"""Exception taxonomy for the fluent query API."""

from __future__ import annotations

from typing import TypeVar

from wikidata_query.result import Result

T = TypeVar("T")


class WikidataError(Exception):
    """Base class for all errors raised by this package."""


class NotFoundError(WikidataError):
    """A property, unit or category name has no match on Wikidata."""


class UnsupportedError(WikidataError):
    """The requested query shape cannot be expressed."""


class TransportError(WikidataError):
    """The endpoint could not be reached while resolving an identifier."""


_BY_CODE: dict[str, type[WikidataError]] = {
    "not_found": NotFoundError,
    "unsupported": UnsupportedError,
    "transport": TransportError,
}


def unwrap(result: Result[T]) -> T:
    """Return the data of an Ok, raise the matching error for a Fail."""
    if result.ok:
        return result.data
    raise _BY_CODE.get(result.code, WikidataError)(result.error)
