from __future__ import annotations

from typing import Sequence

from schedlab.model import JobSpec


class ConfigurationError(ValueError):
    pass


class MalformedInputError(ValueError):
    pass


def validate_processor_count(processors: int) -> None:
    if processors < 1:
        raise ConfigurationError(
            f"processor count must be >= 1 (got {processors})"
        )


def validate_job_specs(specs: Sequence[JobSpec]) -> None:
    seen: set[int] = set()
    for spec in specs:
        if spec.arrival < 0:
            raise MalformedInputError(
                f"job {spec.job_id} arrival time must be >= 0 (got {spec.arrival})"
            )
        if spec.exec_time < 1:
            raise MalformedInputError(
                f"job {spec.job_id} execution time must be >= 1 (got {spec.exec_time})"
            )
        if spec.job_id in seen:
            raise MalformedInputError(f"duplicate job id {spec.job_id}")
        seen.add(spec.job_id)
