"""FastAPI application exposing the validator over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Any

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from pydantic import BaseModel

from dollar import metrics
from dollar.errors import DollarError
from dollar.pipeline import validate
from dollar.settings import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]

_logger = structlog.get_logger("http")


def configure_logging(log_level: str) -> None:
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class ValidateRequestModel(BaseModel):
    text: str


class NodeModel(BaseModel):
    kind: str
    text: str


class ValidateResponseModel(BaseModel):
    nodes: list[NodeModel]
    expressions: list[str]
    latency_ms: float


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Dollar Validator", version=settings.service_version)
    app.dependency_overrides[get_settings] = lambda: settings
    semaphore = asyncio.Semaphore(settings.max_concurrent_requests)

    @app.middleware("http")
    async def enforce_limits(request: Request, call_next):
        if request.url.path == "/validate":
            limit = settings.max_request_size_bytes
            content_length = request.headers.get("content-length")
            if content_length:
                try:
                    size = int(content_length)
                    if size > limit:
                        _logger.warning(
                            "request_rejected",
                            path=str(request.url.path),
                            reason="body_too_large",
                            size=size,
                            limit=limit,
                        )
                        return Response(
                            content="request too large",
                            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                            media_type="text/plain",
                        )
                except ValueError:
                    pass  # malformed header, let the body parser decide
        return await call_next(request)

    @app.get("/healthz", response_class=Response)
    async def healthz() -> Response:
        return Response(content="ok\n", media_type="text/plain")

    @app.post("/validate", response_model=ValidateResponseModel)
    async def validate_endpoint(
        request: ValidateRequestModel,
        settings: SettingsDep,
    ) -> dict[str, Any]:
        async with semaphore:
            try:
                document = await asyncio.wait_for(
                    asyncio.to_thread(validate, request.text, settings=settings),
                    timeout=settings.request_timeout_seconds,
                )
            except DollarError as exc:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail={"error": exc.message, "origin": exc.origin},
                ) from exc
            except asyncio.TimeoutError:
                _logger.warning(
                    "request_timeout",
                    path="/validate",
                    timeout_seconds=settings.request_timeout_seconds,
                )
                raise HTTPException(
                    status_code=status.HTTP_408_REQUEST_TIMEOUT,
                    detail="request timeout",
                ) from None
        return document.asdict()

    @app.get("/metrics")
    async def metrics_endpoint(settings: SettingsDep) -> Response:
        if not settings.metrics_enabled:
            raise HTTPException(status_code=404, detail="metrics disabled")
        payload, content_type = metrics.render_metrics()
        return Response(content=payload, media_type=content_type)

    return app
