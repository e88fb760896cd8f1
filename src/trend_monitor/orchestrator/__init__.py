"""Orchestrator module for running monitors."""

from .models import MonitorOutcome, MonitorStatus, RunSummary
from .monitor_runner import MonitorRunner

__all__ = [
    "MonitorOutcome",
    "MonitorRunner",
    "MonitorStatus",
    "RunSummary",
]
