"""Command line interface for world-graph."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from ..config.settings import PresentationConfig, get_presentation
from ..core.events import load_events
from ..core.exceptions import WorldGraphError
from ..core.layout import tier_of
from ..core.models import Graph
from ..core.session import ViewportSession, render_graph
from ..io.loader import load_graph
from ..renderers import render_json, render_svg

console = Console(stderr=True)

app = typer.Typer(
    name="world-graph",
    help="🌐 Lay out and render world graphs (entities, actions, risks, outcomes)",
    add_completion=False,
    no_args_is_help=True,
)

_OUTPUT_FORMATS = ("svg", "json")


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logger.enable("world_graph")
        logger.info("Verbose logging enabled")


def _resolve_config(mode: str, config_file: Path | None) -> PresentationConfig:
    if config_file is not None:
        return PresentationConfig.load(config_file)
    return get_presentation(mode)


def _load_or_exit(graph_file: Path) -> Graph:
    graph = load_graph(graph_file)
    if graph is None:
        console.print("[yellow]No Graph Data Available[/yellow]")
        console.print("[dim]Run an analysis to generate a World Graph.[/dim]")
        raise typer.Exit(1)
    return graph


GraphArgument = typer.Argument(
    ...,
    help="Graph JSON: {nodes, edges} or an analysis result with 'knowledgeGraph'",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)
ModeOption = typer.Option(
    "full-screen",
    "--mode",
    "-m",
    help="Presentation mode: compact or full-screen",
)
ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="YAML presentation config (overrides --mode)",
    exists=True,
    dir_okay=False,
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose output")


@app.command()
def layout(
    graph_file: Path = GraphArgument,
    mode: str = ModeOption,
    config_file: Path | None = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """📐 Print the computed node positions as a table."""
    _setup_logging(verbose)

    try:
        config = _resolve_config(mode, config_file)
        graph = _load_or_exit(graph_file)
        with ViewportSession(graph, config) as session:
            positioned = session.positioned
    except WorldGraphError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(
        title=f"Layout ({config.mode}, {config.canvas.width:g}x{config.canvas.height:g})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("ID", style="bold")
    table.add_column("Label")
    table.add_column("Category")
    table.add_column("Tier", justify="right")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")

    for pn in positioned:
        table.add_row(
            pn.id,
            pn.label,
            pn.type or str(pn.category),
            str(tier_of(pn.category)),
            f"{pn.x:.1f}",
            f"{pn.y:.1f}",
        )

    Console().print(table)


@app.command()
def render(
    graph_file: Path = GraphArgument,
    mode: str = ModeOption,
    config_file: Path | None = ConfigOption,
    output_format: str = typer.Option(
        "svg", "--format", "-f", help="Output format: svg or json"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (defaults to stdout)"
    ),
    hover: str | None = typer.Option(
        None, "--hover", help="Node id to render in hovered state"
    ),
    events_file: Path | None = typer.Option(
        None,
        "--events",
        "-e",
        help="JSON event script (wheel, pointer, hover, zoom) to replay first",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = VerboseOption,
) -> None:
    """🖼️  Render a graph to SVG or JSON.

    [bold cyan]Examples:[/bold cyan]

    [green]Full-screen SVG:[/green]
        $ world-graph render analysis.json -o graph.svg

    [green]Compact preview with a hovered node:[/green]
        $ world-graph render analysis.json --mode compact --hover a

    [green]Replay pan/zoom events and dump the scene:[/green]
        $ world-graph render analysis.json --events events.json --format json
    """
    _setup_logging(verbose)

    output_format = output_format.lower()
    if output_format not in _OUTPUT_FORMATS:
        console.print(
            f"[red]Error:[/red] Invalid format '{output_format}'. "
            f"Must be one of: {', '.join(_OUTPUT_FORMATS)}"
        )
        raise typer.Exit(1)

    try:
        config = _resolve_config(mode, config_file)
        graph = _load_or_exit(graph_file)
        events = load_events(events_file) if events_file is not None else []
        scene = render_graph(graph, config, hover=hover, events=events)
    except WorldGraphError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    renderer = render_svg if output_format == "svg" else render_json
    content = renderer(scene, output)

    if output is None:
        typer.echo(content)
    else:
        console.print(
            f"[green]✓[/green] Wrote {output_format} to {output} "
            f"({scene.node_count} nodes, {scene.edge_count} edges)"
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
