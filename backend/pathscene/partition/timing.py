"""Server-reported partitioning time from response headers."""

from __future__ import annotations

import re
from collections.abc import Mapping

SERVER_TIMING_HEADER = "Server-Timing"

# Metric names the partition service reports its own work under
PARTITION_METRICS = frozenset({"partition", "partitioning"})

_DUR_RE = re.compile(r"dur\s*=\s*\"?([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)")
# Older servers send ``Partitioning=12.5``
_LEGACY_RE = re.compile(r"^\s*[A-Za-z_-]+\s*=\s*([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)\s*$")


def _metric_name(metric: str) -> str:
    return re.split(r"[;=]", metric, maxsplit=1)[0].strip().lower()


def parse_server_timing(headers: Mapping[str, str]) -> float:
    """Milliseconds reported by the server, or 0.0 if absent or unparseable.

    A ``partition``/``Partitioning`` metric wins; otherwise the first metric
    carrying a duration is used.
    """
    value = headers.get(SERVER_TIMING_HEADER)
    if value is None:
        value = headers.get(SERVER_TIMING_HEADER.lower())
    if not value:
        return 0.0

    first: float | None = None
    for metric in value.split(","):
        m = _DUR_RE.search(metric) or _LEGACY_RE.match(metric)
        if m is None:
            continue
        duration = float(m.group(1))
        if _metric_name(metric) in PARTITION_METRICS:
            return duration
        if first is None:
            first = duration
    return first if first is not None else 0.0
