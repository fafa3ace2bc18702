"""Scan-then-parse orchestration behind :func:`validate`."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

import structlog

from dollar import metrics, parser, scanner
from dollar.errors import DollarError, ParseError, ScanError
from dollar.parser import Node, NodeKind
from dollar.settings import Settings, get_settings

LOGGER = structlog.get_logger(__name__)


@dataclass(slots=True)
class ParsedDocument:
    source: str
    nodes: list[Node] = field(default_factory=list)
    latency_ms: float = 0.0

    @property
    def expressions(self) -> list[str]:
        return [node.text for node in self.nodes if node.kind is NodeKind.DOLLAR_EXP]

    def asdict(self) -> dict[str, Any]:
        return {
            "nodes": [node.asdict() for node in self.nodes],
            "expressions": self.expressions,
            "latency_ms": self.latency_ms,
        }


def validate(text: str, *, settings: Settings | None = None) -> ParsedDocument:
    """Scan and parse ``text`` into an ordered node list.

    Raises :class:`ParseError` on the first violation. A scan failure is
    re-raised as ``ParseError`` chained to the original, keeping
    ``origin == "scan"``.
    """

    settings = settings or get_settings()
    start = perf_counter()
    LOGGER.debug("validate.start", length=len(text))

    try:
        try:
            tokens = scanner.scan(text)
        except ScanError as exc:
            raise ParseError.from_scan_error(exc) from exc
        nodes = parser.parse(tokens)
    except DollarError as exc:
        latency_ms = (perf_counter() - start) * 1000
        if settings.metrics_enabled:
            metrics.observe_failure(latency_ms=latency_ms, origin=exc.origin)
        LOGGER.info("validate.error", origin=exc.origin, error=exc.message, latency_ms=latency_ms)
        raise

    latency_ms = (perf_counter() - start) * 1000
    if settings.metrics_enabled:
        metrics.observe_success(latency_ms=latency_ms, nodes=nodes)
    LOGGER.debug("validate.end", tokens=len(tokens), nodes=len(nodes), latency_ms=latency_ms)

    return ParsedDocument(source=text, nodes=nodes, latency_ms=latency_ms)
