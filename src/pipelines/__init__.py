"""Batch orchestration for the component cluster report."""

from .cluster_report import ReportOutcome, ReportRequest, build_report, run_cluster_report

__all__ = [
    "ReportOutcome",
    "ReportRequest",
    "build_report",
    "run_cluster_report",
]
