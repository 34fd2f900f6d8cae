"""Job API schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class JobStatus(str, Enum):
    """Canonical job state shared by every provider."""

    QUEUED = "queued"
    STARTED = "started"
    FINISHED = "finished"
    CANCELED = "canceled"
    FAILED = "failed"
    UNKNOWN = "unknown"


class OutputOptions(BaseModel):
    extension: str = ""


class PresetMap(BaseModel):
    """A named preset and the name each provider knows it by."""

    name: str = Field(min_length=1)
    provider_mapping: dict[str, str] = Field(default_factory=dict)
    output_opts: OutputOptions = Field(default_factory=OutputOptions)


def _ensure_unique_preset_names(presets: list[PresetMap]) -> list[PresetMap]:
    seen: set[str] = set()
    for preset in presets:
        if preset.name in seen:
            raise ValueError(f"duplicate preset name {preset.name!r}")
        seen.add(preset.name)
    return presets


class StreamingParams(BaseModel):
    protocol: str = ""
    segment_duration: int = Field(default=0, ge=0)


class TranscodeProfile(BaseModel):
    """Provider-neutral description of what to transcode.

    Preset order is significant: it decides the stream numbering of the
    resulting job.
    """

    source_media: str
    presets: list[PresetMap]
    streaming_params: StreamingParams = Field(default_factory=StreamingParams)

    @field_validator("presets")
    @classmethod
    def unique_preset_names(cls, presets: list[PresetMap]) -> list[PresetMap]:
        return _ensure_unique_preset_names(presets)


class ProviderJobStatus(BaseModel):
    provider_name: str
    provider_job_id: str
    progress: float = 0.0
    status: JobStatus
    provider_status: dict[str, Any] = Field(default_factory=dict)
    output_destination: str | None = None


class CreateJobRequest(BaseModel):
    provider: str | None = None
    source: str = Field(min_length=1)
    presets: list[PresetMap] = Field(min_length=1)
    streaming_params: StreamingParams = Field(default_factory=StreamingParams)

    @field_validator("presets")
    @classmethod
    def unique_preset_names(cls, presets: list[PresetMap]) -> list[PresetMap]:
        return _ensure_unique_preset_names(presets)


class Job(BaseModel):
    id: str
    provider_name: str
    provider_job_id: str
    status: JobStatus
    streaming_params: StreamingParams | None = None
    created_at: datetime
