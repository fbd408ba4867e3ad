from __future__ import annotations

# Alternate strategy, selected with -c.
#
# Shortest-job-first starves long jobs when short work keeps arriving. This
# strategy never preempts, balances processors by how long their queued work
# has already waited, and keeps long-waiting sub-units ahead of new arrivals.

import logging
from typing import Sequence

from schedlab.container import OrderedList
from schedlab.model import Job, SubUnit
from schedlab.processor import Processor

logger = logging.getLogger(__name__)


def rank_arrivals(jobs: Sequence[Job], now: int) -> OrderedList[Job]:
    arriving: OrderedList[Job] = OrderedList()
    for job in jobs:
        if job.arrival != now:
            continue
        exec_time = job.first_exec_time
        insert = arriving.count()
        for i, other in enumerate(arriving):
            assert other is not None
            other_exec = other.first_exec_time
            if exec_time < other_exec:
                insert = i
                break
            if exec_time == other_exec and job.job_id < other.job_id:
                insert = i
                break
        arriving.insert_at(insert, job)
    return arriving


def _lighter(processor: Processor, other: Processor, now: int) -> bool:
    # Waiting sums are recomputed on every comparison, not cached per tick.
    waiting = processor.queued_waiting_time(now)
    other_waiting = other.queued_waiting_time(now)
    if waiting != other_waiting:
        return waiting < other_waiting

    remaining = processor.remaining_time()
    other_remaining = other.remaining_time()
    if remaining != other_remaining:
        return remaining < other_remaining

    return processor.processor_id < other.processor_id


def rank_processors(processors: Sequence[Processor], now: int) -> OrderedList[Processor]:
    """Processors ordered by (queued waiting time, remaining work, processor id)."""

    ranked: OrderedList[Processor] = OrderedList()
    for processor in processors:
        insert = ranked.count()
        for i, other in enumerate(ranked):
            assert other is not None
            if _lighter(processor, other, now):
                insert = i
                break
        ranked.insert_at(insert, processor)
    return ranked


def _queue_position(pending: OrderedList[SubUnit], sub: SubUnit, now: int) -> int:
    waiting = 0  # a fresh arrival has not waited yet
    for i, queued in enumerate(pending):
        assert queued is not None
        queued_waiting = queued.waiting_time(now)
        if waiting > queued_waiting:
            return i
        if waiting == queued_waiting:
            if sub.remaining < queued.remaining:
                return i
            if sub.remaining == queued.remaining and sub.job.job_id < queued.job.job_id:
                return i
    return pending.count()


def schedule(*, jobs: Sequence[Job], processors: Sequence[Processor], now: int) -> int:
    arriving = rank_arrivals(jobs, now)

    for job in arriving:
        assert job is not None
        ranked = rank_processors(processors, now)
        targets: list[int] = []
        for i, sub in enumerate(job.sub_units):
            target = ranked.get(i)
            assert target is not None
            target.pending.insert_at(_queue_position(target.pending, sub, now), sub)
            targets.append(target.processor_id)
        logger.debug("t=%d: job %d queued on cpus %s", now, job.job_id, targets)

    return arriving.count()
