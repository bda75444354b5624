"""Report outputs for sorted clusters."""

from .markdown import cluster_lines, render_report
from .summary import cluster_summary, write_cluster_summary

__all__ = [
    "cluster_lines",
    "cluster_summary",
    "render_report",
    "write_cluster_summary",
]
