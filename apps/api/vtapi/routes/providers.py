"""Provider routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from vtapi.adapters.provider import list_providers
from vtapi.routes.dependencies import get_job_service
from vtapi.schemas.error import ErrorResponse, UnknownProviderError
from vtapi.schemas.provider import ProviderDescription
from vtapi.services.jobs import JobService

router = APIRouter(prefix="/providers", tags=["Providers"])


@router.get("", response_model=list[str])
async def get_providers() -> list[str]:
    return list_providers()


@router.get(
    "/{name}",
    response_model=ProviderDescription,
    responses={404: {"model": UnknownProviderError}, 500: {"model": ErrorResponse}},
)
async def describe_provider(
    name: Annotated[str, Path()],
    service: Annotated[JobService, Depends(get_job_service)],
) -> ProviderDescription:
    return service.describe_provider(name=name)
