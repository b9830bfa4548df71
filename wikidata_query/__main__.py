# SPDX-License-Identifier: MIT
"""
█████╗ ██████╗  █████╗ ███████╗
██╔══██╗██╔══██╗██╔══██╗██╔════╝
███████║██████╔╝███████║███████╗
██╔══██║██╔══██╗██╔══██║╚════██║
██║  ██║██║  ██║██║  ██║███████║
╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>

Licensed under the MIT License.
See LICENSE and THIRD_PARTY_LICENSES for details.

Wikidata Query — command line

Lists Wikidata items of a category whose label matches a name, with
their description and, optionally, the value of some properties.

Usage: python -m wikidata_query "geographic region" Springfield --get population
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from dataclasses import dataclass
from pathlib import Path

from wikidata_query.client import WikidataClient
from wikidata_query.config import ClientConfig, load_config
from wikidata_query.errors import WikidataError
from wikidata_query.logger import get_logger
from wikidata_query.model import NamedEntity, wikidata_prop

log = get_logger("wikidata_query")


@dataclass
class DescribedEntity(NamedEntity):
    description: str = wikidata_prop("?itemDescription")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wikidata-query",
        description="Search Wikidata items by category and name",
    )
    parser.add_argument("category", help="Category name or ID (e.g. 'city' or Q515)")
    parser.add_argument("name", nargs="?", default="", help="Label to match")
    parser.add_argument("--contains", action="store_true", help="Match labels containing NAME")
    parser.add_argument("--ignore-case", action="store_true", help="Case-insensitive label match")
    parser.add_argument("--language", default="", help="Data language (default from config)")
    parser.add_argument(
        "--get",
        action="append",
        default=[],
        metavar="PROP",
        help="Print the value of PROP for each item (repeatable)",
    )
    parser.add_argument("--config", type=Path, help="YAML client configuration")
    parser.add_argument("--verbose", action="store_true", help="Log queries and responses")
    args = parser.parse_args(argv)

    config = ClientConfig()
    if args.config is not None:
        cfg_result = load_config(args.config.resolve())
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return 1
        config = cfg_result.data
    if args.verbose:
        config = dataclasses.replace(config, verbose=True)

    client = WikidataClient(config)

    try:
        query = client.find(
            args.category,
            args.name,
            case_sensitive=not args.ignore_case,
            allow_contain=args.contains,
        )
        result = query.execute(DescribedEntity, args.language)
        if not result.ok:
            log.error("Query failed: %s", result.error)
            return 1

        for item in result.data:
            print(f"{item.id}\t{item.name}\t{item.description}")
            for prop in args.get:
                print(f"  {prop}: {item.get(prop)}")
    except WikidataError as exc:
        log.error("%s", exc)
        return 1

    log.info(client.summary.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
