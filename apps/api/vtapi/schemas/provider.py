"""Provider description schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class Capabilities(BaseModel):
    input_formats: list[str] = Field(default_factory=list)
    output_formats: list[str] = Field(default_factory=list)
    destinations: list[str] = Field(default_factory=list)


class ProviderHealth(BaseModel):
    status: Literal["ok", "unhealthy"]
    message: str | None = None


class ProviderDescription(BaseModel):
    name: str
    capabilities: Capabilities
    health: ProviderHealth
