from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class JobSpec:
    arrival: int
    job_id: int
    exec_time: int
    parallel: bool = False


@dataclass(eq=False)
class SubUnit:
    """One schedulable fragment of a job; the thing a processor runs."""

    local_id: int
    exec_time: int
    job: "Job" = field(repr=False)
    worked: int = 0
    completion_time: int | None = None

    @property
    def remaining(self) -> int:
        return self.exec_time - self.worked

    @property
    def finished(self) -> bool:
        return self.remaining == 0

    def advance(self, now: int) -> bool:
        """Work one tick and report whether the sub-unit is finished after the call.

        Advancing a finished sub-unit changes nothing and reports ``True``.
        """

        if self.worked < self.exec_time:
            self.worked += 1
            if self.worked == self.exec_time:
                self.completion_time = now
        return self.finished

    def waiting_time(self, now: int) -> int:
        return now - self.job.arrival - self.worked


@dataclass(eq=False)
class Job:
    job_id: int
    arrival: int
    exec_time: int
    parallel: bool
    sub_units: tuple[SubUnit, ...] = ()

    @staticmethod
    def create(
        *,
        arrival: int,
        job_id: int,
        exec_time: int,
        parallel: bool,
        processors: int,
    ) -> "Job":
        job = Job(job_id=job_id, arrival=arrival, exec_time=exec_time, parallel=parallel)

        if parallel:
            # Each fragment gets one extra tick as a synchronisation buffer, so
            # the fragments together over-allocate the job's declared time.
            if processors <= exec_time:
                count = processors
                sub_exec = 1 + math.ceil(exec_time / processors)
            else:
                count = exec_time
                sub_exec = 1 + 1
            job.sub_units = tuple(
                SubUnit(local_id=i, exec_time=sub_exec, job=job) for i in range(count)
            )
        else:
            job.sub_units = (SubUnit(local_id=0, exec_time=exec_time, job=job),)

        return job

    @staticmethod
    def from_spec(spec: JobSpec, *, processors: int) -> "Job":
        return Job.create(
            arrival=spec.arrival,
            job_id=spec.job_id,
            exec_time=spec.exec_time,
            parallel=spec.parallel,
            processors=processors,
        )

    @property
    def remaining(self) -> int:
        return sum(s.remaining for s in self.sub_units)

    @property
    def finished(self) -> bool:
        return self.remaining == 0

    @property
    def is_split(self) -> bool:
        return len(self.sub_units) > 1

    @property
    def first_exec_time(self) -> int:
        return self.sub_units[0].exec_time

    @property
    def completion_time(self) -> int | None:
        if not self.finished:
            return None
        return max(s.completion_time or 0 for s in self.sub_units)

    def turnaround_time(self) -> int:
        completion = self.completion_time
        if completion is None:
            raise ValueError(f"job {self.job_id} has not finished")
        return completion - self.arrival + 1

    def overhead(self) -> float:
        return self.turnaround_time() / self.exec_time
