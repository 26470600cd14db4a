"""
Command-line interface for Site Ranker.

Analyzes a page, a directory of pages, or a URL and prints the
optimization score and ranked recommendations.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .extraction import AnalysisError
from .models import AnalysisProfile, OptimizationReport, Priority
from .pipeline import AnalysisPipeline, BatchAnalysis
from .scoring import ScoringError
from .sources import (
    ContentLoadError,
    find_main_file,
    is_url,
    load_directory,
    load_markup,
)

console = Console()

PRIORITY_STYLES = {
    Priority.CRITICAL: "bold red",
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "dim",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command()
@click.argument("source", type=str)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the profile and report as JSON.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Also write the JSON result to this file.",
)
@click.option(
    "--workers",
    type=int,
    default=1,
    help="Threads used when analyzing a directory (default: 1).",
)
@click.option(
    "--max-depth",
    type=int,
    default=5,
    help="Deepest level of HTML files returned; root files are level 1 (default: 5).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    source: str,
    as_json: bool,
    output: Optional[Path],
    workers: int,
    max_depth: int,
    verbose: bool,
) -> None:
    """
    Site Ranker - Analyze pages for SEO opportunities.

    SOURCE may be an HTML file, a directory of HTML files, or a URL.

    Examples:

        site-ranker index.html

        site-ranker ./public --workers 4 -o report.json

        site-ranker https://example.com --json
    """
    _configure_logging(verbose)
    pipeline = AnalysisPipeline.default()
    batch: Optional[BatchAnalysis] = None

    try:
        if not is_url(source) and Path(source).is_dir():
            documents = load_directory(source, max_depth=max_depth)
            if not documents:
                console.print(f"[red]Error:[/red] No HTML files found in directory: {source}")
                sys.exit(1)
            batch = pipeline.analyze_documents(documents, max_workers=workers)
            batch.main_file = find_main_file(documents)
            if not batch.profiles:
                console.print("[red]Error:[/red] No document could be analyzed")
                _display_failures(batch)
                sys.exit(1)
            profile = batch.merged_profile
        else:
            profile = pipeline.run(load_markup(source))

        report = pipeline.score(profile)

    except ContentLoadError as e:
        console.print(f"[red]Content loading error:[/red] {e}")
        sys.exit(1)
    except AnalysisError as e:
        console.print(f"[red]Analysis error:[/red] {e}")
        sys.exit(1)
    except ScoringError as e:
        console.print(f"[red]Scoring error:[/red] {e}")
        sys.exit(1)

    result = _result_dict(profile, report, batch)

    if output:
        output.write_text(json.dumps(result, indent=2))

    if as_json:
        click.echo(json.dumps(result, indent=2))
    else:
        _display_summary(profile, report, batch)
        if output:
            console.print(f"\n[bold green]Saved:[/bold green] {output}")


def _result_dict(
    profile: AnalysisProfile,
    report: OptimizationReport,
    batch: Optional[BatchAnalysis],
) -> dict:
    result = {"profile": profile.to_dict(), "report": report.to_dict()}
    if batch is not None:
        result["files"] = list(batch.profiles)
        result["main_file"] = batch.main_file
        result["failures"] = {name: str(error) for name, error in batch.failures.items()}
    return result


def _display_failures(batch: BatchAnalysis) -> None:
    for name, error in batch.failures.items():
        console.print(f"  [yellow]Skipped[/yellow] {name}: {error}")


def _display_summary(
    profile: AnalysisProfile,
    report: OptimizationReport,
    batch: Optional[BatchAnalysis],
) -> None:
    """Display analysis summary."""
    console.print(Panel.fit(
        f"[bold blue]Optimization score: {report.optimization_score}/100[/bold blue]\n"
        f"Business category: {profile.business_category.value}"
        f" | Language: {profile.language or 'unknown'}"
        f" | SEO completeness: {profile.existing_seo.completeness_score()}%",
        border_style="blue",
    ))

    if batch is not None:
        console.print(f"Analyzed {batch.succeeded} file(s)")
        if batch.main_file:
            console.print(f"Main file: {batch.main_file}")
        _display_failures(batch)

    kw_table = Table(title="Top Keywords", show_header=True)
    kw_table.add_column("Keyword", style="green")
    kw_table.add_column("Frequency", justify="right")
    kw_table.add_column("Score", justify="right")
    for kw in profile.top_keywords(10):
        kw_table.add_row(kw.word, str(kw.frequency), f"{kw.score:.2f}")
    console.print(kw_table)

    if report.sentiment is not None:
        console.print(
            f"[cyan]Sentiment:[/cyan] {report.sentiment.label.value} "
            f"({report.sentiment.score:+.2f}, confidence {report.sentiment.confidence:.2f})"
        )
    if report.keyword_density is not None:
        density = report.keyword_density
        stuffed = " [red](stuffed)[/red]" if density.is_stuffed else ""
        console.print(f"[cyan]Keyword density:[/cyan] {density.density:.2f}%{stuffed}")

    if report.recommendations:
        rec_table = Table(title="Recommendations", show_header=True)
        rec_table.add_column("Priority")
        rec_table.add_column("Category", style="cyan")
        rec_table.add_column("Issue")
        rec_table.add_column("Action")
        for rec in report.recommendations:
            style = PRIORITY_STYLES[rec.priority]
            rec_table.add_row(
                f"[{style}]{rec.priority.label}[/{style}]",
                rec.category.value,
                rec.message,
                rec.action,
            )
        console.print(rec_table)


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
