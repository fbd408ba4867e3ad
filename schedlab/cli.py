from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from schedlab.io import (
    format_event,
    format_report,
    load_job_specs,
    write_summary_json,
    write_trace_csv,
)
from schedlab.metrics import aggregate_jobs
from schedlab.sim import ResourceExhaustionError, Simulation
from schedlab.strategies import scheduler_for
from schedlab.types import TraceEvent
from schedlab.validate import (
    ConfigurationError,
    MalformedInputError,
    validate_processor_count,
)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="schedlab", description="Multi-processor scheduling simulator"
    )
    p.add_argument("-f", dest="process_file", required=True, type=Path, help="Process list file")
    p.add_argument("-p", dest="processors", required=True, type=int, help="Number of processors")
    p.add_argument(
        "-c",
        dest="alternate",
        action="store_true",
        help="Use the waiting-time aware scheduler instead of shortest-job-first",
    )
    p.add_argument("--out-trace", required=False, type=Path, help="Also write the trace as CSV")
    p.add_argument("--out-summary", required=False, type=Path, help="Also write the report as JSON")
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for per-tick detail)",
    )
    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_event(event: TraceEvent) -> None:
    print(format_event(event))


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        validate_processor_count(args.processors)
        specs = load_job_specs(args.process_file)
        simulation = Simulation(
            specs=specs,
            processors=args.processors,
            scheduler=scheduler_for(alternate=args.alternate),
            sink=_print_event,
        )
    except (ConfigurationError, MalformedInputError, ResourceExhaustionError) as e:
        sys.stderr.write(f"schedlab: {e}\n")
        return 1

    result = simulation.run()
    summary = aggregate_jobs(result=result)
    for line in format_report(summary):
        print(line)

    if args.out_trace:
        write_trace_csv(args.out_trace, result.events)
    if args.out_summary:
        write_summary_json(args.out_summary, summary)

    return 0
