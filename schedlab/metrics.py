from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from schedlab.model import Job
from schedlab.types import SimulationResult


def _round2(value: float) -> float:
    # Half away from zero, matching C's roundf rather than NumPy's banker's rounding.
    return float(np.floor(value * 100.0 + 0.5) / 100.0)


def job_rows(jobs: Sequence[Job]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for job in jobs:
        rows.append(
            {
                "job_id": job.job_id,
                "arrival": job.arrival,
                "exec_time": job.exec_time,
                "parallel": job.parallel,
                "sub_units": len(job.sub_units),
                "completion_time": job.completion_time,
                "turnaround_time": job.turnaround_time(),
                "overhead": job.overhead(),
            }
        )
    return rows


def aggregate_jobs(*, result: SimulationResult) -> dict[str, Any]:
    """Report figures for a finished run.

    Mean turnaround is rounded up to a whole tick; overheads (turnaround over
    declared execution time) are rounded to two decimals.
    """

    rows = job_rows(result.jobs)

    if rows:
        turnaround = np.array([r["turnaround_time"] for r in rows], dtype=float)
        exec_times = np.array([r["exec_time"] for r in rows], dtype=float)
        overhead = turnaround / exec_times
        mean_turnaround = float(np.ceil(turnaround.mean()))
        max_overhead = _round2(float(overhead.max()))
        mean_overhead = _round2(float(overhead.mean()))
    else:
        mean_turnaround = max_overhead = mean_overhead = 0.0

    return {
        "jobs": len(rows),
        "processors": result.processors,
        "strategy": result.strategy,
        "makespan": result.makespan,
        "turnaround_time": {"mean": mean_turnaround},
        "overhead": {"max": max_overhead, "mean": mean_overhead},
        "per_job": rows,
    }
