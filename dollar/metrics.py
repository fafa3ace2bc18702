"""Prometheus metrics helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

VALIDATE_LATENCY = Histogram(
    "dollar_validate_latency_seconds",
    "Latency of scan and parse runs",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.02, 0.04, 0.08, 0.16),
    registry=REGISTRY,
)

VALIDATIONS_TOTAL = Counter(
    "dollar_validations_total",
    "Number of validations grouped by outcome",
    labelnames=("outcome",),
    registry=REGISTRY,
)

NODES_TOTAL = Counter(
    "dollar_nodes_total",
    "Number of nodes produced grouped by kind",
    labelnames=("kind",),
    registry=REGISTRY,
)


def observe_success(*, latency_ms: float, nodes: Sequence[Any]) -> None:
    VALIDATE_LATENCY.observe(latency_ms / 1000.0)
    VALIDATIONS_TOTAL.labels(outcome="ok").inc()
    for node in nodes:
        kind = getattr(node, "kind", None)
        NODES_TOTAL.labels(kind=getattr(kind, "value", "unknown")).inc()


def observe_failure(*, latency_ms: float, origin: str) -> None:
    VALIDATE_LATENCY.observe(latency_ms / 1000.0)
    VALIDATIONS_TOTAL.labels(outcome=f"{origin}_error").inc()


def render_metrics() -> tuple[bytes, str]:
    payload = generate_latest(REGISTRY)
    return payload, CONTENT_TYPE_LATEST
