from __future__ import annotations

# Default strategy: shortest job first for arrivals, least loaded processor
# first for placement, and a shortest-remaining pending queue with preemption.

import logging
from typing import Sequence

from schedlab.container import OrderedList
from schedlab.model import Job, SubUnit
from schedlab.processor import Processor

logger = logging.getLogger(__name__)


def rank_arrivals(jobs: Sequence[Job], now: int) -> OrderedList[Job]:
    """Jobs arriving at ``now``, ordered by (first sub-unit exec time, job id)."""

    arriving: OrderedList[Job] = OrderedList()
    fastest = slowest = 0

    for job in jobs:
        if job.arrival != now:
            continue

        exec_time = job.first_exec_time
        count = arriving.count()

        if count == 0:
            insert = 0
            fastest = slowest = exec_time
        elif exec_time < fastest:
            insert = 0
            fastest = exec_time
        elif exec_time > slowest:
            insert = count
            slowest = exec_time
        else:
            for insert in range(count):
                other = arriving.get(insert)
                assert other is not None
                other_exec = other.first_exec_time
                if exec_time < other_exec:
                    break
                if exec_time == other_exec and job.job_id < other.job_id:
                    break
            else:
                insert = count

        arriving.insert_at(insert, job)

    return arriving


def rank_processors(processors: Sequence[Processor]) -> OrderedList[Processor]:
    """Processors ordered by (remaining work, processor id)."""

    ranked: OrderedList[Processor] = OrderedList()
    for processor in processors:
        remaining = processor.remaining_time()
        insert = ranked.count()
        for i, other in enumerate(ranked):
            assert other is not None
            other_remaining = other.remaining_time()
            if remaining < other_remaining:
                insert = i
                break
            if remaining == other_remaining and processor.processor_id < other.processor_id:
                insert = i
                break
        ranked.insert_at(insert, processor)
    return ranked


def _runs_before(incoming: SubUnit, other: SubUnit) -> bool:
    if incoming.exec_time != other.remaining:
        return incoming.exec_time < other.remaining
    return incoming.job.job_id < other.job.job_id


def place(processor: Processor, sub: SubUnit) -> None:
    current = processor.current
    if current is not None and _runs_before(sub, current):
        logger.debug(
            "cpu %d: job %d.%d preempts job %d.%d",
            processor.processor_id,
            sub.job.job_id,
            sub.local_id,
            current.job.job_id,
            current.local_id,
        )
        processor.preempt(sub)
        return

    pending = processor.pending
    insert = pending.count()
    for i, queued in enumerate(pending):
        assert queued is not None
        if _runs_before(sub, queued):
            insert = i
            break
    pending.insert_at(insert, sub)


def schedule(*, jobs: Sequence[Job], processors: Sequence[Processor], now: int) -> int:
    arriving = rank_arrivals(jobs, now)

    for job in arriving:
        assert job is not None
        # The ranking is rebuilt per job so earlier placements this tick count.
        ranked = rank_processors(processors)
        targets: list[int] = []
        for i, sub in enumerate(job.sub_units):
            target = ranked.get(i)
            assert target is not None
            place(target, sub)
            targets.append(target.processor_id)
        logger.debug("t=%d: job %d placed on cpus %s", now, job.job_id, targets)

    return arriving.count()
