"""Elemental Conductor job, node and cloud configuration documents."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class OutputGroupType(str, Enum):
    FILE = "file_group_settings"
    APPLE_LIVE = "apple_live_group_settings"


class Container(str, Enum):
    MPEG4 = "mpeg4"
    WEBM = "webm"
    APPLE_HTTP_LIVE_STREAMING = "m3u8"


class NodeProduct(str, Enum):
    CONDUCTOR_FILE = "Elemental Conductor File"
    SERVER = "Elemental Server"


class Location(BaseModel):
    uri: str
    username: str = ""
    password: str = ""


class Input(BaseModel):
    file_input: Location


class FileGroupSettings(BaseModel):
    destination: Location


class AppleLiveGroupSettings(BaseModel):
    destination: Location
    segment_duration: int = 0


class Output(BaseModel):
    stream_assembly_name: str
    name_modifier: str
    order: int
    container: Container | Literal[""] = ""


class OutputGroup(BaseModel):
    order: int
    type: OutputGroupType
    file_group_settings: FileGroupSettings | None = None
    apple_live_group_settings: AppleLiveGroupSettings | None = None
    outputs: list[Output] = Field(default_factory=list)

    @property
    def destination(self) -> Location | None:
        if self.type is OutputGroupType.APPLE_LIVE and self.apple_live_group_settings is not None:
            return self.apple_live_group_settings.destination
        if self.file_group_settings is not None:
            return self.file_group_settings.destination
        return None


class StreamAssembly(BaseModel):
    name: str
    preset: str


class ConductorJob(BaseModel):
    """A job document as submitted to, and returned by, the backend.

    ``href``, ``status``, ``percent_complete`` and ``submitted`` are filled in
    by the backend and stay unset on a freshly assembled job.
    """

    input: Input
    priority: int = 50
    output_groups: list[OutputGroup] = Field(default_factory=list)
    stream_assemblies: list[StreamAssembly] = Field(default_factory=list)

    href: str | None = None
    status: str | None = None
    percent_complete: int = 0
    submitted: datetime | None = None

    @property
    def id(self) -> str:
        return (self.href or "").rstrip("/").rsplit("/", 1)[-1]


class Node(BaseModel):
    product: str
    status: str


class CloudConfig(BaseModel):
    min_nodes: int = 0
