"""API error response schemas."""

from typing import Any
from typing import Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class PresetMappingErrorDetails(BaseModel):
    preset_name: str
    provider_name: str


class PresetMappingError(BaseModel):
    code: Literal["PRESET_MAP_NOT_FOUND"]
    message: str
    details: PresetMappingErrorDetails


class ProviderUnhealthyErrorDetails(BaseModel):
    required: int
    found: int


class ProviderUnhealthyError(BaseModel):
    code: Literal["PROVIDER_UNHEALTHY"]
    message: str
    details: ProviderUnhealthyErrorDetails


class UnknownProviderError(BaseModel):
    code: Literal["PROVIDER_NOT_FOUND"]
    message: str


class UpstreamProviderError(BaseModel):
    code: Literal["PROVIDER_REQUEST_FAILED"]
    message: str
    details: dict[str, Any] | None = None
