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

"""Client configuration: typed dataclass plus a YAML loader.

Pure loader — no validation beyond structure and types.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from wikidata_query.result import Fail, Ok, Result

WIKIDATA_SPARQL = "https://query.wikidata.org/sparql"
DEFAULT_USER_AGENT = "wikidata-query/0.1 (https://www.wikidata.org/wiki/Wikidata:Data_access)"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Endpoint and language settings shared by every query of a client.

    ``data_language`` is used for name matching and returned labels,
    ``coding_language`` for resolving property, unit and category names.
    """

    endpoint: str = WIKIDATA_SPARQL
    timeout: int = 30
    user_agent: str = DEFAULT_USER_AGENT
    data_language: str = "en"
    coding_language: str = "en"
    verbose: bool = False


_TYPES: dict[str, type] = {"timeout": int, "verbose": bool}


def _check_types(raw: dict[str, Any]) -> str | None:
    known = {f.name for f in fields(ClientConfig)}
    for key, value in raw.items():
        if key not in known:
            return f"unknown key '{key}'"
        expected = _TYPES.get(key, str)
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            return f"'{key}' must be {expected.__name__}, got {type(value).__name__}"
    return None


def load_config(path: Path) -> Result[ClientConfig]:
    """Load a YAML file into ClientConfig.

    Keys may sit at top level or under a ``wikidata:`` mapping; absent keys
    keep their defaults.
    """
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if raw is None:
        return Ok(data=ClientConfig())
    if isinstance(raw, dict) and isinstance(raw.get("wikidata"), dict):
        raw = raw["wikidata"]
    if not isinstance(raw, dict):
        return Fail(error="Config structure error: expected a mapping", context=str(path))

    problem = _check_types(raw)
    if problem is not None:
        return Fail(error=f"Config structure error: {problem}", context=str(path))

    return Ok(data=ClientConfig(**raw))
