from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from schedlab.model import Job
from schedlab.processor import Processor
from schedlab.validate import ConfigurationError

DEFAULT = "default"
ALTERNATE = "alternate"


class Scheduler(Protocol):
    name: str

    def schedule(
        self,
        *,
        jobs: Sequence[Job],
        processors: Sequence[Processor],
        now: int,
    ) -> int:
        """Place jobs arriving at ``now``; return how many arrived."""
        raise NotImplementedError


@dataclass(frozen=True)
class DefaultScheduler:
    name: str = DEFAULT

    def schedule(
        self,
        *,
        jobs: Sequence[Job],
        processors: Sequence[Processor],
        now: int,
    ) -> int:
        from schedlab.sched_default import schedule

        return schedule(jobs=jobs, processors=processors, now=now)


@dataclass(frozen=True)
class AlternateScheduler:
    name: str = ALTERNATE

    def schedule(
        self,
        *,
        jobs: Sequence[Job],
        processors: Sequence[Processor],
        now: int,
    ) -> int:
        from schedlab.sched_alternate import schedule

        return schedule(jobs=jobs, processors=processors, now=now)


def scheduler_for_name(name: str) -> Scheduler:
    if name == DEFAULT:
        return DefaultScheduler()
    if name == ALTERNATE:
        return AlternateScheduler()
    raise ConfigurationError(f"Unsupported scheduling strategy: {name!r}")


def scheduler_for(*, alternate: bool) -> Scheduler:
    return scheduler_for_name(ALTERNATE if alternate else DEFAULT)
