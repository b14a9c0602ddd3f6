from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adapters.filesystem.json_utils import dump_json_bytes
from adapters.filesystem.layout_config_repository import FileSystemLayoutConfigRepository
from adapters.filesystem.svg_repository import FileSystemSvgRepository
from adapters.svg.sink import SvgRenderingSink
from app.config import LayoutSettings, load_settings
from domain.errors import ChartLayoutError
from domain.models import ChartLayoutConfig
from domain.services.chart_layout import ChartLayout
from domain.services.label_placement import plan_labels
from domain.services.render_chart_layout import ChartLayoutRenderer

app = typer.Typer(no_args_is_help=True)
console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load_layout(
    config_path: Path | None,
    layout_path: Path | None,
) -> tuple[LayoutSettings, ChartLayoutConfig]:
    if layout_path is not None and not layout_path.exists():
        console.print(f"[red]File not found:[/] {layout_path}")
        raise typer.Exit(code=1)
    try:
        settings = load_settings(config_path).layout
        if layout_path is None:
            return settings, settings.to_layout_config()
        return settings, FileSystemLayoutConfigRepository().load_by_path(layout_path)
    except ValueError as exc:
        console.print(f"[red]Invalid layout file:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _build_layout(config: ChartLayoutConfig) -> ChartLayout:
    try:
        return ChartLayout(config)
    except ChartLayoutError as exc:
        console.print(f"[red]Invalid layout:[/] {exc}")
        raise typer.Exit(code=1) from exc


@app.command("render")
def render(
    config_path: Path | None = typer.Option(None, "--config", help="Settings YAML file."),
    layout_path: Path | None = typer.Option(
        None, "--layout", help="JSON layout file overriding the settings layout.",
    ),
    output: Path | None = typer.Option(None, help="Where to write the SVG file."),
    margins: float | None = typer.Option(
        None, help="Uniform margin, whole percent (>= 1) or fraction (< 1).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _configure_logging(verbose)
    settings, config = _load_layout(config_path, layout_path)
    if margins is not None:
        config = config.model_copy(update={"margins": margins})
    layout = _build_layout(config)

    sink = SvgRenderingSink()
    renderer = ChartLayoutRenderer(layout, sink)
    renderer.create_chart_layout(settings.container, settings.svg_class)

    target_path = output or settings.output_path
    FileSystemSvgRepository().save(sink.to_string(), target_path)
    logger.info("Rendered %sx%s chart layout", layout.width, layout.height)
    console.print(f"[green]Wrote[/] {target_path}")


@app.command("regions")
def regions(
    config_path: Path | None = typer.Option(None, "--config", help="Settings YAML file."),
    layout_path: Path | None = typer.Option(None, "--layout", help="JSON layout file."),
    as_json: bool = typer.Option(False, "--json", help="Print regions as JSON."),
) -> None:
    _, config = _load_layout(config_path, layout_path)
    layout = _build_layout(config)
    areas = layout.areas()

    if as_json:
        payload = {region.value: asdict(area) for region, area in areas.items()}
        typer.echo(dump_json_bytes(payload).decode("utf-8"))
        return

    table = Table(title=f"Chart layout {layout.width:g}x{layout.height:g}")
    for column in ("region", "x", "y", "width", "height"):
        table.add_column(column, justify="left" if column == "region" else "right")
    for region, area in areas.items():
        table.add_row(
            region.value,
            f"{area.x:g}",
            f"{area.y:g}",
            f"{area.width:g}",
            f"{area.height:g}",
        )
    console.print(table)


@app.command("labels")
def labels(
    config_path: Path | None = typer.Option(None, "--config", help="Settings YAML file."),
    layout_path: Path | None = typer.Option(None, "--layout", help="JSON layout file."),
) -> None:
    _, config = _load_layout(config_path, layout_path)
    layout = _build_layout(config)
    drawings = plan_labels(layout)
    if not drawings:
        console.print("[yellow]No labels to draw[/]")
        raise typer.Exit(code=0)

    table = Table(title="Label placements")
    for column in ("label", "region", "x", "y", "font size", "rotation"):
        table.add_column(column)
    for drawing in drawings:
        placement = drawing.placement
        table.add_row(
            drawing.label.id,
            drawing.region.value,
            f"{placement.x:g}",
            f"{placement.y:g}",
            f"{placement.font_size:g}",
            f"{placement.rotation:g}",
        )
    console.print(table)


@app.command("validate")
def validate(input_path: Path = typer.Argument(..., help="JSON layout file to validate.")) -> None:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)

    try:
        config = FileSystemLayoutConfigRepository().load_by_path(input_path)
        ChartLayout(config.model_copy(update={"strict": True}))
    except ValueError as exc:
        console.print(f"[red]Validation failed:[/] {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]Valid layout file:[/] {input_path}")


if __name__ == "__main__":
    app()
