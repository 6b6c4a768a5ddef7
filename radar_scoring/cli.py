"""CLI interface for radar chart scoring."""

import csv
import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from radar_scoring.consts import DEFAULT_DATA_DIR
from radar_scoring.errors import ScoringError
from radar_scoring.models.model_chart import Project, RadarChart
from radar_scoring.scoring import (
    compute_dimension_scores,
    compute_timeline_scores,
    compute_vendor_total_scores,
    validate_chart_weights,
)
from radar_scoring.scoring.integrity import check_chart_structure
from radar_scoring.storage.file_manager import FileManager

app = typer.Typer(
    name="radar-score",
    help="Radar scoring - Rank vendors on weighted radar chart dimensions",
)

console = Console()


def _get_score_color(score: float) -> str:
    """Get color for score display (0-10 scale)."""
    if score >= 7:
        return "green"
    elif score >= 5:
        return "yellow"
    else:
        return "red"


def _load_document(path: Path) -> Project | RadarChart:
    """Load a project or chart snapshot, exiting with an error message on failure."""
    try:
        document = FileManager().load_document(path)
    except Exception as e:
        console.print(f"[red]Error reading {path}:[/red] {e}")
        raise typer.Exit(1)

    if document is None:
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return document


def _select_chart(document: Project | RadarChart, chart_id: str | None) -> RadarChart:
    """Pick the chart to score from a loaded snapshot."""
    if isinstance(document, RadarChart):
        if chart_id and chart_id != document.id:
            console.print(f"[red]Error:[/red] Chart '{chart_id}' not found")
            raise typer.Exit(1)
        return document

    if chart_id:
        chart = document.get_chart(chart_id)
        if not isinstance(chart, RadarChart):
            console.print(f"[red]Error:[/red] Chart '{chart_id}' not found or is a timeline")
            raise typer.Exit(1)
        return chart

    charts = document.regular_charts()
    if not charts:
        console.print("[red]Error:[/red] Project has no regular charts")
        raise typer.Exit(1)
    return charts[0]


def _load_chart(path: Path, chart_id: str | None) -> RadarChart:
    return _select_chart(_load_document(path), chart_id)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def rank(
    path: Path = typer.Argument(..., help="Chart or project JSON snapshot"),
    chart_id: str = typer.Option(None, "--chart", "-c", help="Chart ID inside a project"),
) -> None:
    """Show vendors ranked by weighted total score."""
    chart = _load_chart(path, chart_id)

    try:
        totals = compute_vendor_total_scores(chart)
    except ScoringError as e:
        console.print(f"[red]Chart data corrupted:[/red] {e}")
        raise typer.Exit(1)

    if not totals:
        console.print("[yellow]No visible vendors to rank.[/yellow]")
        return

    names = {d.id: d.name for d in chart.dimensions}

    table = Table(title=f"Ranking for '{chart.name}'")
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Vendor", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("Driven by", style="dim")

    for total in totals:
        color = _get_score_color(total.total_score)
        dominant = total.analysis.dominant_dimension_id
        driven_by = names.get(dominant, dominant) if dominant else "balanced"
        table.add_row(
            str(total.rank),
            total.vendor_name,
            f"[{color}]{total.total_score:.2f}[/{color}]",
            driven_by,
        )

    console.print(table)


@app.command()
def dimensions(
    path: Path = typer.Argument(..., help="Chart or project JSON snapshot"),
    chart_id: str = typer.Option(None, "--chart", "-c", help="Chart ID inside a project"),
) -> None:
    """Show raw and weighted scores per dimension."""
    chart = _load_chart(path, chart_id)

    try:
        dimension_scores = compute_dimension_scores(chart)
    except ScoringError as e:
        console.print(f"[red]Chart data corrupted:[/red] {e}")
        raise typer.Exit(1)

    if not dimension_scores:
        console.print("[yellow]Chart has no dimensions.[/yellow]")
        return

    table = Table(title=f"Dimension Scores for '{chart.name}'")
    table.add_column("Dimension", style="cyan")
    table.add_column("Weight", justify="right", style="magenta")
    table.add_column("Vendor", style="bold")
    table.add_column("Raw", justify="right")
    table.add_column("Weighted", justify="right", style="dim")

    for dimension_score in dimension_scores:
        for i, vendor_score in enumerate(dimension_score.vendor_scores):
            color = _get_score_color(vendor_score.raw_score)
            table.add_row(
                dimension_score.dimension_name if i == 0 else "",
                f"{dimension_score.weight:g}%" if i == 0 else "",
                vendor_score.vendor_name,
                f"[{color}]{vendor_score.raw_score:.2f}[/{color}]",
                f"{vendor_score.weighted_score:.2f}",
            )

    console.print(table)


@app.command()
def breakdown(
    path: Path = typer.Argument(..., help="Chart or project JSON snapshot"),
    vendor: str = typer.Argument(..., help="Vendor ID or name"),
    chart_id: str = typer.Option(None, "--chart", "-c", help="Chart ID inside a project"),
) -> None:
    """Explain one vendor's total dimension by dimension."""
    chart = _load_chart(path, chart_id)

    try:
        totals = compute_vendor_total_scores(chart)
    except ScoringError as e:
        console.print(f"[red]Chart data corrupted:[/red] {e}")
        raise typer.Exit(1)

    match = next((t for t in totals if vendor in (t.vendor_id, t.vendor_name)), None)
    if match is None:
        console.print(f"[red]Error:[/red] Vendor '{vendor}' not found or hidden")
        raise typer.Exit(1)

    table = Table(title=f"{match.vendor_name}: {match.total_score:.2f} (rank {match.rank})")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Weight", justify="right", style="magenta")
    table.add_column("Contribution", justify="right", style="green")

    for item in match.dimension_breakdown:
        table.add_row(
            item.dimension_name,
            f"{item.score:.1f}",
            f"{item.weight:g}%",
            f"{item.contribution:.2f}",
        )

    console.print(table)


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Chart or project JSON snapshot"),
) -> None:
    """Check chart structure and sibling weights."""
    document = _load_document(path)
    charts = [document] if isinstance(document, RadarChart) else document.regular_charts()

    corrupted = 0
    for chart in charts:
        try:
            check_chart_structure(chart)
        except ScoringError as e:
            console.print(f"[red]✗ {chart.name}:[/red] {e}")
            corrupted += 1
            continue

        issues = validate_chart_weights(chart)
        if not issues:
            console.print(f"[green]✓ {chart.name}[/green]")
            continue

        console.print(f"[yellow]! {chart.name}[/yellow]")
        for issue in issues:
            console.print(f"  [dim]{issue.label}:[/dim] weights sum to {issue.sum:g}, expected 100")

    if corrupted:
        raise typer.Exit(1)


@app.command()
def timeline(
    path: Path = typer.Argument(..., help="Project JSON snapshot"),
    timeline_id: str = typer.Argument(..., help="Timeline chart ID"),
) -> None:
    """Show vendor totals across the dated charts of a timeline."""
    document = _load_document(path)
    if not isinstance(document, Project):
        console.print("[red]Error:[/red] Timelines require a project snapshot")
        raise typer.Exit(1)

    try:
        result = compute_timeline_scores(document, timeline_id)
    except ScoringError as e:
        console.print(f"[red]Chart data corrupted:[/red] {e}")
        raise typer.Exit(1)

    if result is None:
        console.print(f"[red]Error:[/red] '{timeline_id}' is not a timeline with dated charts")
        raise typer.Exit(1)

    table = Table(title=f"Timeline '{timeline_id}'")
    table.add_column("Vendor", style="bold")
    for point in result.time_points:
        table.add_column(point.time_marker.label(), justify="right")

    for name, series in result.vendor_series.items():
        cells = [f"{value:.2f}" if value is not None else "-" for value in series]
        table.add_row(name, *cells)

    console.print(table)


@app.command()
def export(
    path: Path = typer.Argument(..., help="Chart or project JSON snapshot"),
    chart_id: str = typer.Option(None, "--chart", "-c", help="Chart ID inside a project"),
    format: str = typer.Option("json", "--format", "-f", help="Export format (json, csv)"),
    output: str = typer.Option("scores.json", "--output", "-o", help="Output file path"),
) -> None:
    """Export ranked vendor totals to a file."""
    chart = _load_chart(path, chart_id)
    output_path = Path(output)

    try:
        totals = compute_vendor_total_scores(chart)

        if format == "json":
            data = [total.model_dump(mode="json", by_alias=True) for total in totals]
            output_path.write_text(json.dumps(data, indent=2), encoding="utf-8")

        elif format == "csv":
            dimension_ids = [d.dimension_id for d in totals[0].dimension_breakdown] if totals else []
            with output_path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)

                # Header
                writer.writerow(["rank", "vendor_id", "vendor_name", "total_score", *dimension_ids])

                # Data
                for total in totals:
                    writer.writerow([
                        total.rank,
                        total.vendor_id,
                        total.vendor_name,
                        f"{total.total_score:.4f}",
                        *(f"{b.contribution:.4f}" for b in total.dimension_breakdown),
                    ])

        else:
            console.print(f"[red]Error:[/red] Unsupported format '{format}'. Use 'json' or 'csv'.")
            raise typer.Exit(1)

        console.print(f"[green]Exported {len(totals)} vendors to {output_path}[/green]")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error exporting:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def save(
    path: Path = typer.Argument(..., help="Chart or project JSON snapshot"),
    data_dir: Path = typer.Option(DEFAULT_DATA_DIR, "--data-dir", help="Root directory for score files"),
) -> None:
    """Compute and store scores for every regular chart of a snapshot."""
    document = _load_document(path)
    charts = [document] if isinstance(document, RadarChart) else document.regular_charts()
    file_manager = FileManager(data_dir)

    failed = 0
    for chart in charts:
        try:
            saved = file_manager.save_scores(chart)
        except (ScoringError, ValueError) as e:
            console.print(f"[red]✗ {chart.name}:[/red] {e}")
            failed += 1
            continue
        console.print(f"[green]Saved {chart.name} → {saved}[/green]")

    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
