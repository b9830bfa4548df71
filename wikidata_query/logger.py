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

"""Structured logger with per-operation counters and a summary report.

Counts successful, failed and cache-served operations (SPARQL queries,
identifier resolutions) so a caller can print a summary at the end.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class OperationCounter:
    """Tracks outcome counts for a single kind of operation."""

    name: str
    ok: int = 0
    failed: int = 0
    cached: int = 0


@dataclass
class QuerySummary:
    """Accumulates counters across all operations of a client."""

    operations: dict[str, OperationCounter] = field(default_factory=dict)

    def counter(self, name: str) -> OperationCounter:
        """Get or create a counter for a named operation."""
        if name not in self.operations:
            self.operations[name] = OperationCounter(name=name)
        return self.operations[name]

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Wikidata Summary", "=" * 40]
        for op in self.operations.values():
            parts = [f"{op.name}: {op.ok} ok"]
            if op.cached:
                parts.append(f"{op.cached} cached")
            if op.failed:
                parts.append(f"{op.failed} failed")
            lines.append("  ".join(parts))
        lines.append("=" * 40)
        return "\n".join(lines)
