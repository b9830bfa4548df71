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

"""Wikidata SPARQL HTTP transport using urllib.

Sends GET requests to the SPARQL endpoint, asks for XML results and
returns the parsed ``<results>`` element. No query logic — pure transport
layer. Any failure comes back as a Fail with code ``"transport"``.
Query text and raw responses are logged at DEBUG; the client logs them
at INFO in verbose mode.
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Callable

import certifi
from lxml import etree

from wikidata_query.config import ClientConfig
from wikidata_query.logger import get_logger
from wikidata_query.result import Fail, Ok, Result

log = get_logger(__name__)

Transport = Callable[[str], Result[etree._Element]]

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


def find_results(root: etree._Element) -> etree._Element | None:
    """Return the ``<results>`` child of a SPARQL XML document root."""
    for child in root:
        if isinstance(child.tag, str) and etree.QName(child).localname == "results":
            return child
    return None


def parse_results(raw: bytes) -> Result[etree._Element]:
    """Parse a SPARQL XML response body down to its ``<results>`` element."""
    try:
        root = etree.fromstring(raw)  # noqa: S320
    except etree.XMLSyntaxError as exc:
        return Fail(error=f"SPARQL XML parse error: {exc}", context=raw[:500], code="transport")

    results = find_results(root)
    if results is None:
        return Fail(error="SPARQL response has no <results> element", context=raw[:500], code="transport")
    return Ok(data=results)


class HttpTransport:
    """Callable transport bound to one endpoint configuration."""

    def __init__(self, config: ClientConfig) -> None:
        self.endpoint = config.endpoint
        self.timeout = config.timeout
        self.user_agent = config.user_agent

    def __call__(self, sparql: str) -> Result[etree._Element]:
        url = f"{self.endpoint}?{urllib.parse.urlencode({'query': sparql})}"
        req = urllib.request.Request(
            url,
            headers={
                "Accept": "application/sparql-results+xml",
                "User-Agent": self.user_agent,
            },
            method="GET",
        )

        log.debug("SPARQL query → %s\n%s", self.endpoint, sparql)

        try:
            with urllib.request.urlopen(req, timeout=self.timeout, context=_ssl_ctx) as resp:
                raw: bytes = resp.read()
        except urllib.error.HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace")[:500]
            return Fail(error=f"SPARQL HTTP {exc.code}: {exc.reason}", context=body, code="transport")
        except urllib.error.URLError as exc:
            return Fail(error=f"SPARQL connection error: {exc.reason}", code="transport")
        except TimeoutError:
            return Fail(error=f"SPARQL timeout after {self.timeout}s", code="transport")
        except (OSError, http.client.HTTPException) as exc:
            return Fail(error=f"SPARQL connection error: {exc!r}", code="transport")

        log.debug("SPARQL response (%d bytes)\n%s", len(raw), raw.decode("utf-8", errors="replace"))
        return parse_results(raw)
