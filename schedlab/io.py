from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from schedlab.model import JobSpec
from schedlab.types import FinishedEvent, RunningEvent, TraceEvent
from schedlab.validate import ConfigurationError, MalformedInputError

logger = logging.getLogger(__name__)

PARALLEL_TAG = "p"


def parse_job_line(line: str, *, source: str = "<input>", lineno: int = 0) -> JobSpec:
    """Parse ``<arrival> <pid> <exec_time> <tag>``; tag ``p`` marks a parallel job."""

    parts = line.split()
    if len(parts) != 4:
        raise MalformedInputError(
            f"{source}:{lineno}: expected 4 fields '<arrival> <pid> <exec> <tag>', got {len(parts)}"
        )

    values: list[int] = []
    for name, raw in zip(("arrival", "pid", "exec"), parts[:3]):
        # int() alone would also take "+5", "1_0" and non-ASCII digits.
        if not (raw.isascii() and raw.isdigit()):
            raise MalformedInputError(
                f"{source}:{lineno}: {name} must be an unsigned integer (got {raw!r})"
            )
        values.append(int(raw))

    arrival, job_id, exec_time = values
    return JobSpec(
        arrival=arrival,
        job_id=job_id,
        exec_time=exec_time,
        parallel=parts[3] == PARALLEL_TAG,
    )


def parse_job_lines(lines: Iterable[str], *, source: str = "<input>") -> list[JobSpec]:
    specs: list[JobSpec] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        specs.append(parse_job_line(line, source=source, lineno=lineno))
    return specs


def load_job_specs(path: Path) -> list[JobSpec]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read process list {path}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(
            f"{path}: not valid UTF-8 (byte offset {exc.start})"
        ) from exc

    specs = parse_job_lines(text.splitlines(), source=str(path))
    logger.info("loaded %d jobs from %s", len(specs), path)
    return specs


def format_event(event: TraceEvent) -> str:
    if isinstance(event, FinishedEvent):
        return f"{event.tick},FINISHED,pid={event.job_id},proc_remaining={event.unfinished}"
    pid = str(event.job_id) if event.sub_unit is None else f"{event.job_id}.{event.sub_unit}"
    return f"{event.tick},RUNNING,pid={pid},remaining_time={event.remaining_time},cpu={event.cpu}"


def format_report(summary: dict[str, Any]) -> list[str]:
    return [
        f"Turnaround time {summary['turnaround_time']['mean']:g}",
        f"Time overhead {summary['overhead']['max']:g} {summary['overhead']['mean']:g}",
        f"Makespan {summary['makespan']}",
    ]


def write_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, sort_keys=True), encoding="utf-8")


def write_trace_csv(path: Path, events: Iterable[TraceEvent]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(
            [
                "tick",
                "event",
                "job_id",
                "sub_unit",
                "remaining_time",
                "cpu",
                "unfinished",
            ]
        )
        for e in events:
            if isinstance(e, RunningEvent):
                w.writerow(
                    [
                        e.tick,
                        "RUNNING",
                        e.job_id,
                        "" if e.sub_unit is None else e.sub_unit,
                        e.remaining_time,
                        e.cpu,
                        "",
                    ]
                )
            else:
                w.writerow([e.tick, "FINISHED", e.job_id, "", "", "", e.unfinished])
