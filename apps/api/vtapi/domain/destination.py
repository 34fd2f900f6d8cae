"""Output destination reporting."""

from vtapi.schemas.conductor import ConductorJob


def output_destination(job: ConductorJob) -> str | None:
    """Return the directory holding the job's outputs.

    Every output group of an assembled job shares one destination base, so
    the first group's destination stands for the whole job.
    """
    if not job.output_groups:
        return None

    location = job.output_groups[0].destination
    if location is None:
        return None

    return "/".join(location.uri.split("/")[:-1])
