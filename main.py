from pathlib import Path
from typing import Optional

import typer

from src.lexicon import MalformedRecordError
from src.pipelines import ReportRequest, run_cluster_report

app = typer.Typer(add_completion=False)


@app.command()
def report(
    vocabulary_path: Path = typer.Argument(
        ...,
        dir_okay=False,
        help="Comma-separated vocabulary file: term, pinyin, part of speech, translation.",
    ),
    decomposition_path: Path = typer.Argument(
        ...,
        dir_okay=False,
        help="Tab-separated character decomposition database (10 columns, no header).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Write the Markdown report here instead of standard output.",
    ),
    summary_csv: Optional[Path] = typer.Option(
        None,
        "--summary-csv",
        dir_okay=False,
        help="Also write a one-row-per-cluster CSV summary.",
    ),
    order_ties: bool = typer.Option(
        False,
        "--order-ties",
        help="Order equal-size clusters by component, then position.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress progress messages on stderr."),
) -> None:
    """
    Group characters that share a component in the same position and list the vocabulary using them.
    """
    request = ReportRequest(
        vocabulary_path=vocabulary_path,
        decomposition_path=decomposition_path,
        output_path=output,
        summary_path=summary_csv,
        order_ties=order_ties,
        verbose=not quiet,
    )
    try:
        run_cluster_report(request)
    except MalformedRecordError as exc:
        typer.echo(f"error: malformed record: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
