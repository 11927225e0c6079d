"""CLI interface for depdot using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from depdot import __description__, __version__
from depdot.config import DepdotConfig, GeneratorConfig, LogLevel, load_config
from depdot.graph import DotGenerator
from depdot.parser import GraphDocumentParser

app = typer.Typer(
    name="depdot",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"depdot version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """depdot - Dependency graph to Graphviz DOT generator."""


def _configure_logging(config: DepdotConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else _LOG_LEVELS[LogLevel(config.logging.level).value]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _select_generators(config: DepdotConfig, names: list[str] | None) -> list[GeneratorConfig]:
    if not names:
        return list(config.generators)
    try:
        return [config.get_generator(name) for name in names]
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def generate(
    document: Annotated[
        Path,
        typer.Argument(help="Path to the resolved dependency graph JSON document")
    ],
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output directory (default: output.dir from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .depdot.json)")
    ] = None,
    generator_names: Annotated[
        Optional[list[str]],
        typer.Option("--generator", "-g", help="Generator to run (can be used multiple times, default: all)")
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print DOT to stdout instead of writing files")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate DOT dependency graphs from a resolved graph document."""
    try:
        depdot_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _configure_logging(depdot_config, verbose)

    try:
        projects = GraphDocumentParser.parse_file(document)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    selected = _select_generators(depdot_config, generator_names)

    if stdout:
        for generator_config in selected:
            content = DotGenerator(projects, generator_config.to_generator()).generate_content()
            typer.echo(content, nl=False)
        return

    output_dir = (out or Path(depdot_config.output.dir)).resolve()
    output_dir.mkdir(parents=True, exist_ok=True)

    table = Table(title="Generated dependency graphs")
    table.add_column("Generator", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Lines", justify="right")

    for generator_config in selected:
        generator = generator_config.to_generator()
        content = DotGenerator(projects, generator).generate_content()
        output_file = output_dir / generator.output_file_name
        output_file.write_text(content, encoding="utf-8")
        table.add_row(generator.name or "<default>", str(output_file), str(content.count("\n")))

    console.print(table)
    console.print(f"[green]OK[/green] Generated {len(selected)} graph(s) for {len(projects)} project(s)")
