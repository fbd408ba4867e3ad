from __future__ import annotations

# Tick-driven simulation loop. Each tick: the scheduler places arrivals, the
# driver snapshots completions, every processor steps, then events go out.

import logging
from typing import Callable, Sequence

from schedlab.container import OrderedList
from schedlab.model import Job, JobSpec, SubUnit
from schedlab.processor import Processor
from schedlab.strategies import Scheduler, scheduler_for_name
from schedlab.types import (
    FinishedEvent,
    RunningEvent,
    RunState,
    SimulationResult,
    TraceEvent,
)
from schedlab.validate import validate_job_specs, validate_processor_count

logger = logging.getLogger(__name__)

EventSink = Callable[[TraceEvent], None]


class ResourceExhaustionError(RuntimeError):
    pass


class Simulation:
    def __init__(
        self,
        *,
        specs: Sequence[JobSpec],
        processors: int,
        scheduler: Scheduler | None = None,
        sink: EventSink | None = None,
    ) -> None:
        validate_processor_count(processors)
        validate_job_specs(specs)

        self.scheduler = scheduler if scheduler is not None else scheduler_for_name("default")
        self._sink = sink

        try:
            self.jobs: tuple[Job, ...] = tuple(
                Job.from_spec(spec, processors=processors) for spec in specs
            )
            self.processors: tuple[Processor, ...] = tuple(
                Processor(i) for i in range(processors)
            )
        except MemoryError as exc:
            # Nothing partially built escapes; the tuples above are never bound.
            raise ResourceExhaustionError(
                f"out of memory building {len(specs)} jobs on {processors} processors"
            ) from exc

        self.unfinished = 0
        self.finished = 0
        self.events: list[TraceEvent] = []

    def tick(self, now: int) -> RunState:
        self.unfinished += self.scheduler.schedule(
            jobs=self.jobs, processors=self.processors, now=now
        )

        # Completion is judged on the state left by the previous tick, before
        # any processor releases its finished sub-unit.
        done: list[Job] = []
        for processor in self.processors:
            current = processor.current
            if current is None:
                continue
            job = current.job
            if job.remaining == 0 and not any(j is job for j in done):
                done.append(job)
                self.unfinished -= 1
                self.finished += 1

        running: OrderedList[SubUnit] = OrderedList.filled(len(self.processors))
        for processor in self.processors:
            processor.step(now, running)

        for job in done:
            logger.debug("t=%d: job %d finished", now, job.job_id)
            self._emit(FinishedEvent(tick=now, job_id=job.job_id, unfinished=self.unfinished))

        for cpu, sub in enumerate(running):
            if sub is None:
                continue
            self._emit(
                RunningEvent(
                    tick=now,
                    job_id=sub.job.job_id,
                    sub_unit=sub.local_id if sub.job.is_split else None,
                    remaining_time=sub.remaining + 1,
                    cpu=cpu,
                )
            )

        if self.finished == len(self.jobs):
            return RunState.TERMINAL
        return RunState.RUNNING

    def run(self) -> SimulationResult:
        logger.info(
            "simulating %d jobs on %d processors (%s strategy)",
            len(self.jobs),
            len(self.processors),
            self.scheduler.name,
        )

        now = 0
        while self.tick(now) is RunState.RUNNING:
            now += 1

        logger.info("all jobs finished at t=%d", now)
        return SimulationResult(
            jobs=self.jobs,
            events=tuple(self.events),
            makespan=now,
            processors=len(self.processors),
            strategy=self.scheduler.name,
        )

    def _emit(self, event: TraceEvent) -> None:
        self.events.append(event)
        if self._sink is not None:
            self._sink(event)


def simulate(
    *,
    specs: Sequence[JobSpec],
    processors: int,
    scheduler: Scheduler | None = None,
    sink: EventSink | None = None,
) -> SimulationResult:
    return Simulation(
        specs=specs, processors=processors, scheduler=scheduler, sink=sink
    ).run()
