"""High-level orchestration: load sources, build and sort clusters, render the report."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from src.clustering import Cluster, ClusterResult, build_clusters, sort_clusters
from src.lexicon import load_catalog, load_vocabulary_index
from src.reporting import render_report, write_cluster_summary


@dataclass(frozen=True)
class ReportRequest:
    """Describe which inputs to read and where the outputs go."""

    vocabulary_path: Path
    decomposition_path: Path
    output_path: Optional[Path] = None
    summary_path: Optional[Path] = None
    order_ties: bool = False
    verbose: bool = True


@dataclass(frozen=True)
class ReportOutcome:
    """Everything a run produced; ``result.isolated`` is kept for callers but never rendered."""

    result: ClusterResult
    clusters: List[Cluster]
    report: str


def build_report(request: ReportRequest) -> ReportOutcome:
    """
    Run the full pipeline without writing anything.

    Both sources are loaded before any clustering starts, so a malformed row
    aborts the run before a report exists.
    """
    vocabulary_index = load_vocabulary_index(request.vocabulary_path, verbose=request.verbose)
    catalog = load_catalog(request.decomposition_path, verbose=request.verbose)

    result = build_clusters(catalog, vocabulary_index, verbose=request.verbose)
    clusters = sort_clusters(result.clusters, order_ties=request.order_ties)
    return ReportOutcome(result=result, clusters=clusters, report=render_report(clusters))


def run_cluster_report(request: ReportRequest) -> ReportOutcome:
    """Build the report, then write it to ``output_path`` or standard output."""
    outcome = build_report(request)

    if request.output_path is not None:
        request.output_path.parent.mkdir(parents=True, exist_ok=True)
        request.output_path.write_text(outcome.report, encoding="utf-8")
        if request.verbose:
            print(f"[report] Saved {len(outcome.clusters)} clusters → {request.output_path}", file=sys.stderr)
    else:
        sys.stdout.write(outcome.report)

    if request.summary_path is not None:
        write_cluster_summary(outcome.clusters, request.summary_path)
        if request.verbose:
            print(f"[report] Saved cluster summary → {request.summary_path}", file=sys.stderr)

    return outcome


__all__ = ["ReportOutcome", "ReportRequest", "build_report", "run_cluster_report"]
