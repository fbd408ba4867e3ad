"""Discrete-time multi-processor scheduling simulator."""

from schedlab.model import Job, JobSpec, SubUnit
from schedlab.processor import Processor
from schedlab.sim import Simulation, simulate
from schedlab.strategies import AlternateScheduler, DefaultScheduler, scheduler_for

__all__ = [
    "AlternateScheduler",
    "DefaultScheduler",
    "Job",
    "JobSpec",
    "Processor",
    "Simulation",
    "SubUnit",
    "scheduler_for",
    "simulate",
]
