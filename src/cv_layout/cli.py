"""CLI interface using typer + rich."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cv_layout.config import load_config
from cv_layout.layout.classifier import is_splittable, resolve_title
from cv_layout.layout.single_column import usable_items
from cv_layout.layout.strategy import SUPPORTED_LAYOUTS
from cv_layout.measurement.provider import DefaultMeasurementProvider
from cv_layout.parsers.profile_data import get_section_data
from cv_layout.parsers.profile_parser import parse_profile
from cv_layout.pipeline.orchestrator import PaginationOrchestrator, resolve_layout
from cv_layout.templates.loader import CVTemplate, list_templates, load_template, resolve_template

app = typer.Typer(
    name="cv-layout",
    help="Paginate CV sections onto fixed-size pages",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_inputs(template: str, profile: Path) -> tuple[CVTemplate, dict]:
    if not profile.exists():
        console.print(f"[red]Profile file not found: {escape(str(profile))}[/red]")
        raise typer.Exit(1)
    try:
        tmpl = resolve_template(template)
        data = parse_profile(profile)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    return tmpl, data


@app.command()
def paginate(
    template: str = typer.Argument(help="Template preset name or YAML file"),
    profile: Path = typer.Argument(help="Employee profile (JSON/YAML)"),
    orientation: str = typer.Option(None, "--orientation", help="portrait or landscape"),
    max_pages: int = typer.Option(None, "--max-pages", min=1, help="Page cap"),
    layout: str = typer.Option(None, "--layout", "-l", help="single-column, two-column or sidebar"),
    as_json: bool = typer.Option(False, "--json", help="Print pages as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Lay out a profile's CV sections across pages."""
    _setup_logging(verbose)
    tmpl, data = _load_inputs(template, profile)

    orchestrator = PaginationOrchestrator(load_config())
    result = orchestrator.run(
        tmpl, data, orientation=orientation, max_pages=max_pages, layout=layout
    )

    if as_json:
        payload = {
            "layout": result.layout,
            "orientation": result.orientation,
            "content_height": result.content_height,
            "pages": [page.model_dump(mode="json") for page in result.pages],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    table = Table(title=f"{tmpl.name}: {result.page_count} page(s), {result.layout}")
    table.add_column("Page", justify="right")
    table.add_column("Section")
    table.add_column("Column")
    table.add_column("Items", justify="right")
    table.add_column("Range")

    for page in result.pages:
        if not page.sections:
            table.add_row(str(page.page_number), "[dim](empty)[/dim]", "", "", "")
        for section in page.sections:
            record = page.partial_sections.get(section.id)
            if record is None:
                title, items, span = resolve_title(section, tmpl.field_mappings), "", ""
            else:
                title = record.title
                items = str(len(record.items))
                span = f"{record.start_index + 1}-{record.end_index} of {record.total_items}"
            table.add_row(
                str(page.page_number), title, section.placement.value, items, span
            )

    console.print(table)
    if verbose:
        console.print(f"[dim]Content height: {result.content_height:.1f}px, "
                      f"took {result.elapsed_seconds * 1000:.1f}ms[/dim]")


@app.command()
def measure(
    template: str = typer.Argument(help="Template preset name or YAML file"),
    profile: Path = typer.Argument(help="Employee profile (JSON/YAML)"),
    orientation: str = typer.Option("portrait", "--orientation", help="portrait or landscape"),
    layout: str = typer.Option(None, "--layout", "-l", help="single-column, two-column or sidebar"),
) -> None:
    """Show estimated section heights for a profile."""
    tmpl, data = _load_inputs(template, profile)
    config = load_config()
    provider = DefaultMeasurementProvider(config.measurement)
    effective_layout = resolve_layout(layout or tmpl.layout, tmpl.sections)

    table = Table(title=f"{tmpl.name} ({effective_layout}, {orientation})")
    table.add_column("Section")
    table.add_column("Items", justify="right")
    table.add_column("Flat height", justify="right")
    table.add_column("Layout height", justify="right")
    table.add_column("Splittable")

    for section in sorted(tmpl.sections, key=lambda s: s.display_order):
        if section.is_page_break:
            table.add_row("[dim]page break[/dim]", "", "", "", "")
            continue
        items = usable_items(section, get_section_data(data, section.section_type))
        if not items:
            continue
        placement = section.placement.value if effective_layout != "single-column" else "main"
        flat = provider.estimate_height(section.section_type, items, orientation)
        aware = provider.estimate_section_height(
            section.section_type, items, effective_layout, placement, orientation
        )
        table.add_row(
            resolve_title(section, tmpl.field_mappings),
            str(len(items)),
            f"{flat:.1f}",
            f"{aware:.1f}",
            "yes" if is_splittable(section.section_type) else "no",
        )

    console.print(table)
    console.print(f"[dim]Page content height: {config.page.content_height(orientation):.1f}px[/dim]")


@app.command()
def templates() -> None:
    """List the bundled CV template presets."""
    names = list_templates()
    if not names:
        console.print("[yellow]No templates found.[/yellow]")
        return

    for name in sorted(names):
        tmpl = load_template(name)
        sections = ", ".join(s.section_type for s in tmpl.sections)
        console.print(f"  [bold]{name}[/bold]: {tmpl.name} ({tmpl.layout or 'auto'}) - {sections}")


@app.command()
def layouts() -> None:
    """List the supported layout kinds."""
    for kind in SUPPORTED_LAYOUTS:
        console.print(f"  {kind}")


if __name__ == "__main__":
    app()
