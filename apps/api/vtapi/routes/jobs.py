"""Job routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from vtapi.routes.dependencies import get_job_service, get_request_correlation_id
from vtapi.schemas.error import (
    ErrorResponse,
    PresetMappingError,
    ProviderUnhealthyError,
    UnknownProviderError,
    UpstreamProviderError,
)
from vtapi.schemas.job import CreateJobRequest, Job, ProviderJobStatus
from vtapi.services.jobs import JobService

router = APIRouter(tags=["Jobs"])


@router.post(
    "/jobs",
    response_model=Job,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": PresetMappingError},
        404: {"model": UnknownProviderError},
        500: {"model": ErrorResponse},
        502: {"model": UpstreamProviderError},
        503: {"model": ProviderUnhealthyError},
    },
)
async def create_job(
    payload: CreateJobRequest,
    correlation_id: Annotated[str, Depends(get_request_correlation_id)],
    service: Annotated[JobService, Depends(get_job_service)],
) -> Job:
    return service.create_job(payload=payload, correlation_id=correlation_id)


@router.get(
    "/jobs/{jobId}",
    response_model=ProviderJobStatus,
    responses={404: {"model": UnknownProviderError}, 502: {"model": UpstreamProviderError}},
)
async def get_job_status(
    job_id: Annotated[str, Path(alias="jobId")],
    service: Annotated[JobService, Depends(get_job_service)],
    provider: Annotated[str | None, Query()] = None,
) -> ProviderJobStatus:
    return service.get_job_status(job_id=job_id, provider_name=provider)


@router.post(
    "/jobs/{jobId}/cancel",
    response_model=ProviderJobStatus,
    responses={404: {"model": UnknownProviderError}, 502: {"model": UpstreamProviderError}},
)
async def cancel_job(
    job_id: Annotated[str, Path(alias="jobId")],
    correlation_id: Annotated[str, Depends(get_request_correlation_id)],
    service: Annotated[JobService, Depends(get_job_service)],
    provider: Annotated[str | None, Query()] = None,
) -> ProviderJobStatus:
    return service.cancel_job(job_id=job_id, provider_name=provider, correlation_id=correlation_id)
