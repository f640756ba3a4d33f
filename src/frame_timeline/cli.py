"""CLI interface for frame-timeline."""

import logging
import sys

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import TimelineConfig
from .errors import ExportError, ValidationError
from .output import DEFAULT_OUTPUT_FORMAT, supported_output_formats
from .scene_loader import SceneDocument, SceneFormatError, load_scene_file
from .timeline.timeline import TimelineBundle
from .timeline_pipeline import build_bundles, export_bundles

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats())


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    scene: str = typer.Argument(None, help="Scene document (JSON) describing nodes and frames"),
    output_dir: str = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for generated timelines (defaults to the scene's output location)",
    ),
    output_format: str = typer.Option(
        DEFAULT_OUTPUT_FORMAT,
        "--format",
        "-f",
        help=f"Output format ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    name: str = typer.Option(
        None,
        "--name",
        "-n",
        help="Override the animation name from the scene document",
    ),
    total_steps: int | None = typer.Option(
        None,
        "--total-steps",
        help="Discrete step budget of each clip",
    ),
    frame_rate: float | None = typer.Option(
        None,
        "--frame-rate",
        help="Playback rate in Hz",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """
    Generate step keyframe timelines from a sequence of appearance frames.

    One frame yields _on/_off timelines, two frames yield _A/_B, three or
    more frames yield a single _lin timeline across the step budget.

    Examples:
      # Write JSON timelines next to the scene's output location
      frame-timeline outfit.json

      # Render dope-sheet previews into a directory
      frame-timeline outfit.json --format png --output-dir previews
    """
    _configure_logging(verbose)
    try:
        if not scene:
            raise CLIError("Scene file is required")
        if output_format.lower() not in supported_output_formats():
            raise CLIError(
                f"Unsupported format '{output_format}'. Choose from: {SUPPORTED_OUTPUT_FORMATS_TEXT}"
            )

        config = _resolve_config(total_steps, frame_rate)
        document = _load_document(scene)
        bundles = _generate(document, config, name)

        for bundle in bundles:
            _display_bundle(bundle)

        _export(bundles, output_format, output_dir)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_config(total_steps: int | None, frame_rate: float | None) -> TimelineConfig:
    """Environment settings, overridden by any command-line values."""
    try:
        env_config = TimelineConfig.from_env()
        return TimelineConfig(
            total_steps=total_steps if total_steps is not None else env_config.total_steps,
            frame_rate=frame_rate if frame_rate is not None else env_config.frame_rate,
        )
    except ValueError as e:
        raise CLIError(f"Invalid configuration: {e}")


def _load_document(file_path: str) -> SceneDocument:
    console.print(f"[bold blue]Loading scene from {file_path}...[/bold blue]")
    try:
        return load_scene_file(file_path)
    except SceneFormatError as e:
        raise CLIError(str(e))


def _generate(
    document: SceneDocument, config: TimelineConfig, name: str | None
) -> list[TimelineBundle]:
    try:
        return build_bundles(document, config, name=name)
    except ValidationError as e:
        raise CLIError(f"Cannot generate timelines: {e.message} ({e.code})")


def _display_bundle(bundle: TimelineBundle) -> None:
    table = Table(title=f"{bundle.mode.value} timelines")
    table.add_column("Timeline", style="cyan")
    table.add_column("Curves", justify="right")
    table.add_column("Keys", justify="right")
    table.add_column("Duration", justify="right")
    for timeline in bundle:
        keys = sum(len(curve) for _, curve in timeline.items())
        table.add_row(timeline.name, str(len(timeline)), str(keys), f"{timeline.duration:.3f}s")
    console.print(table)

    for warning in bundle.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def _export(bundles: list[TimelineBundle], output_format: str, output_dir: str | None) -> None:
    console.print(f"\n[bold blue]Exporting {output_format.upper()} timelines...[/bold blue]")
    try:
        written = export_bundles(bundles, output_format, output_dir)
    except ExportError as e:
        raise CLIError(str(e))
    for path in written:
        console.print(f"[green]✓[/green] Saved {path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
