from __future__ import annotations

from schedlab.container import OrderedList
from schedlab.model import SubUnit


class Processor:
    """One simulated execution lane: a current sub-unit plus a pending queue."""

    def __init__(self, processor_id: int) -> None:
        self.processor_id = processor_id
        self.current: SubUnit | None = None
        self.pending: OrderedList[SubUnit] = OrderedList()

    def step(self, now: int, running: OrderedList[SubUnit]) -> None:
        """Advance one tick.

        A sub-unit that finished on the previous tick is released first. When
        the lane is free the pending head is dispatched and recorded in
        ``running`` at this processor's own index; no other slot is touched.
        """

        if self.current is not None and self.current.remaining == 0:
            self.current = None

        if self.current is not None:
            self.current.advance(now)
            return

        if self.pending.count() > 0:
            self.current = self.pending.remove_at(0)
            assert self.current is not None
            self.current.advance(now)
            running.set_at(self.processor_id, self.current)

    def preempt(self, incoming: SubUnit) -> None:
        """Put ``incoming`` at the head of the queue, the displaced sub-unit behind it."""

        if self.current is not None:
            self.pending.insert_at(0, self.current)
        self.pending.insert_at(0, incoming)
        self.current = None

    def remaining_time(self) -> int:
        total = self.current.remaining if self.current is not None else 0
        for sub in self.pending:
            total += sub.remaining
        return total

    def queued_waiting_time(self, now: int) -> int:
        return sum(sub.waiting_time(now) for sub in self.pending)

    def nearest_deadline(self) -> int:
        # Despite the name this is the farthest deadline across the lane.
        deadlines = [s.job.arrival + s.exec_time for s in self._held()]
        return max(deadlines) if deadlines else 0

    def holds(self, sub: SubUnit) -> bool:
        return self.current is sub or sub in self.pending

    def _held(self) -> list[SubUnit]:
        held = [self.current] if self.current is not None else []
        held.extend(s for s in self.pending if s is not None)
        return held

    def __repr__(self) -> str:
        return f"Processor(id={self.processor_id}, current={self.current!r}, pending={len(self.pending)})"
