from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from schedlab.model import Job


class RunState(Enum):
    RUNNING = "running"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class FinishedEvent:
    tick: int
    job_id: int
    unfinished: int  # jobs still unfinished after this tick's completions


@dataclass(frozen=True)
class RunningEvent:
    tick: int
    job_id: int
    sub_unit: int | None  # None for jobs that were not split
    remaining_time: int  # displayed value: remaining after the tick, plus one
    cpu: int


TraceEvent = Union[FinishedEvent, RunningEvent]


@dataclass(frozen=True)
class SimulationResult:
    jobs: tuple[Job, ...]
    events: tuple[TraceEvent, ...]
    makespan: int
    processors: int
    strategy: str
