"""Dependency wiring for routes."""

from __future__ import annotations

from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Request

from vtapi.adapters.conductor import ConductorClient
from vtapi.core.config import Settings, get_settings
from vtapi.services.jobs import JobService


def _request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id")
    if correlation_id:
        request.state.correlation_id = correlation_id
        return correlation_id

    generated = f"req-{uuid4()}"
    request.state.correlation_id = generated
    return generated


def get_request_correlation_id(request: Request) -> str:
    return _request_correlation_id(request)


def get_conductor_client(request: Request) -> ConductorClient:
    return request.app.state.conductor_client


def get_job_service(
    client: Annotated[ConductorClient, Depends(get_conductor_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JobService:
    return JobService(client, settings)
