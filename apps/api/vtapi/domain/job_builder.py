"""Elemental Conductor job assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from vtapi.errors import PresetMapNotFoundError
from vtapi.schemas.conductor import (
    AppleLiveGroupSettings,
    ConductorJob,
    Container,
    FileGroupSettings,
    Input,
    Location,
    Output,
    OutputGroup,
    OutputGroupType,
    StreamAssembly,
)
from vtapi.schemas.job import PresetMap, TranscodeProfile

DEFAULT_JOB_PRIORITY = 50

# Extensions delivered as segmented HTTP Live Streaming; matched exactly.
_ADAPTIVE_EXTENSIONS: frozenset[str] = frozenset({"hls", "ts", "m3u8", ".ts"})

_FILE_CONTAINERS: dict[str, Container] = {
    "mp4": Container.MPEG4,
    "webm": Container.WEBM,
}


@dataclass(slots=True)
class PresetPartition:
    adaptive_outputs: list[Output] = field(default_factory=list)
    file_outputs: list[Output] = field(default_factory=list)
    stream_assemblies: list[StreamAssembly] = field(default_factory=list)


def is_adaptive_extension(extension: str) -> bool:
    return extension in _ADAPTIVE_EXTENSIONS


def container_for(extension: str) -> Container | Literal[""]:
    """Container for a progressive output; unknown extensions leave it unset."""
    return _FILE_CONTAINERS.get(extension, "")


def stream_name(index: int) -> str:
    return f"stream_{index}"


def _provider_preset(preset: PresetMap, provider_name: str) -> str:
    provider_preset = preset.provider_mapping.get(provider_name)
    if provider_preset is None:
        raise PresetMapNotFoundError(preset_name=preset.name, provider_name=provider_name)
    return provider_preset


def partition_presets(presets: list[PresetMap], provider_name: str) -> PresetPartition:
    """Split presets into adaptive and file outputs.

    Stream indexes follow the original preset order, so ``stream_<i>`` always
    points at the i-th preset no matter which group its output lands in.
    """
    partition = PresetPartition()
    for index, preset in enumerate(presets):
        name = stream_name(index)
        partition.stream_assemblies.append(
            StreamAssembly(name=name, preset=_provider_preset(preset, provider_name))
        )

        extension = preset.output_opts.extension
        if is_adaptive_extension(extension):
            partition.adaptive_outputs.append(
                Output(
                    stream_assembly_name=name,
                    name_modifier=f"_{preset.name}",
                    order=index,
                    container=Container.APPLE_HTTP_LIVE_STREAMING,
                )
            )
        else:
            partition.file_outputs.append(
                Output(
                    stream_assembly_name=name,
                    name_modifier=f"_{preset.name}",
                    order=index,
                    container=container_for(extension),
                )
            )
    return partition


def job_destination(destination: str, job_id: str) -> str:
    return f"{destination.rstrip('/')}/{job_id}/video"


def build_conductor_job(
    job_id: str,
    profile: TranscodeProfile,
    *,
    provider_name: str,
    access_key_id: str,
    secret_access_key: str,
    destination: str,
) -> ConductorJob:
    """Assemble the backend job for a transcode profile.

    Raises ``PresetMapNotFoundError`` before anything is built when any preset
    lacks a mapping for ``provider_name``.
    """
    partition = partition_presets(profile.presets, provider_name)

    def location(uri: str) -> Location:
        return Location(uri=uri, username=access_key_id, password=secret_access_key)

    output_uri = job_destination(destination, job_id)
    output_groups: list[OutputGroup] = []
    if partition.adaptive_outputs:
        output_groups.append(
            OutputGroup(
                order=len(output_groups) + 1,
                type=OutputGroupType.APPLE_LIVE,
                apple_live_group_settings=AppleLiveGroupSettings(
                    destination=location(output_uri),
                    segment_duration=profile.streaming_params.segment_duration,
                ),
                outputs=partition.adaptive_outputs,
            )
        )
    if partition.file_outputs:
        output_groups.append(
            OutputGroup(
                order=len(output_groups) + 1,
                type=OutputGroupType.FILE,
                file_group_settings=FileGroupSettings(destination=location(output_uri)),
                outputs=partition.file_outputs,
            )
        )

    return ConductorJob(
        input=Input(file_input=location(profile.source_media)),
        priority=DEFAULT_JOB_PRIORITY,
        output_groups=output_groups,
        stream_assemblies=partition.stream_assemblies,
    )
