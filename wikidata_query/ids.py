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

"""Native Wikidata identifiers and the fixed IDs generated SPARQL relies on."""

from __future__ import annotations

import re

# "Wikidata property" and "unit of measurement" classes
PROPERTY_CATEGORY = "Q18616576"
UNIT_CATEGORY = "Q47574"

INSTANCE_OF = "P31"
SUBCLASS_OF = "P279"
PART_OF = "P361"

_NATIVE_ID = re.compile(r"[A-Z][0-9]+")


def is_native_id(name: str) -> bool:
    """True for ``Q42``, ``P1082`` and the like; purely syntactic."""
    return _NATIVE_ID.fullmatch(name) is not None


def local_name(uri: str) -> str:
    """Final path segment of an entity URI (``.../entity/Q42`` → ``Q42``)."""
    return uri.rsplit("/", 1)[-1]
