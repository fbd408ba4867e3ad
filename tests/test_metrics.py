from __future__ import annotations

import pytest

from schedlab.io import format_report
from schedlab.metrics import _round2, aggregate_jobs, job_rows
from schedlab.model import JobSpec
from schedlab.sim import simulate


def _spec(arrival: int, job_id: int, exec_time: int, parallel: bool = False) -> JobSpec:
    return JobSpec(arrival=arrival, job_id=job_id, exec_time=exec_time, parallel=parallel)


def test_summary_for_two_queued_jobs() -> None:
    result = simulate(specs=[_spec(0, 2, 3), _spec(0, 1, 3)], processors=1)
    summary = aggregate_jobs(result=result)

    # Turnarounds 3 and 6: mean 4.5 rounds up; overheads 1.0 and 2.0.
    assert summary["turnaround_time"] == {"mean": 5.0}
    assert summary["overhead"] == {"max": 2.0, "mean": 1.5}
    assert summary["makespan"] == 6
    assert summary["jobs"] == 2
    assert summary["processors"] == 1
    assert summary["strategy"] == "default"
    assert format_report(summary) == [
        "Turnaround time 5",
        "Time overhead 2 1.5",
        "Makespan 6",
    ]


def test_parallel_job_overhead_can_drop_below_one() -> None:
    result = simulate(specs=[_spec(0, 1, 8, parallel=True)], processors=4)
    (row,) = job_rows(result.jobs)

    # Four fragments of 1 + ceil(8 / 4) ticks finish at t=2.
    assert row["sub_units"] == 4
    assert row["completion_time"] == 2
    assert row["turnaround_time"] == 3
    assert row["overhead"] == pytest.approx(3 / 8)
    assert aggregate_jobs(result=result)["overhead"] == {"max": 0.38, "mean": 0.38}


def test_empty_run_reports_zeros() -> None:
    summary = aggregate_jobs(result=simulate(specs=[], processors=1))
    assert summary["per_job"] == []
    assert format_report(summary) == [
        "Turnaround time 0",
        "Time overhead 0 0",
        "Makespan 0",
    ]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.125, 0.13), (2 / 3, 0.67), (1.0, 1.0), (1.234, 1.23)],
)
def test_round2_rounds_half_away_from_zero(value: float, expected: float) -> None:
    assert _round2(value) == pytest.approx(expected)
