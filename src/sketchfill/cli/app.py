"""CLI application entry point for sketchfill.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from sketchfill import __version__
from sketchfill.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_drawing_info,
    print_error,
    print_fill_info,
    print_header,
    print_processing_info,
    print_step,
    print_success,
)
from sketchfill.config import (
    FillConfig,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    RendererKind,
    SketchfillSettings,
)
from sketchfill.core import DrawingProcessor
from sketchfill.domain import ShapeKind
from sketchfill.exceptions import (
    DrawingLoadError,
    OutputSaveError,
    ProcessingCancelledError,
    SketchfillError,
)
from sketchfill.io import DrawingReader, SvgWriter

# Create the Typer app
app = typer.Typer(
    name="sketchfill",
    help="Fill the polygons and ellipses of a drawing with hand-drawn hachure lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Sketchfill[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def fill(
    input_drawing: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON drawing document",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: {name}-hachure.svg)",
        ),
    ] = None,
    angle: Annotated[
        float | None,
        typer.Option(
            "--angle",
            "-a",
            help="Hachure angle in degrees, measured from the vertical axis",
        ),
    ] = None,
    gap: Annotated[
        float | None,
        typer.Option(
            "--gap",
            "-g",
            help="Distance between hachure lines (<= 0 uses 4x stroke width)",
        ),
    ] = None,
    fill_weight: Annotated[
        float | None,
        typer.Option(
            "--fill-weight",
            help="Thickness of fill lines (< 0 uses half the stroke width)",
        ),
    ] = None,
    stroke_width: Annotated[
        float | None,
        typer.Option(
            "--stroke-width",
            help="Outline stroke width used to derive default gap and weight",
            min=0.001,
        ),
    ] = None,
    roughness: Annotated[
        float | None,
        typer.Option(
            "--roughness",
            "-r",
            help="How far strokes wander from the ideal line (0-10)",
            min=0.0,
            max=10.0,
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed for reproducible stroke jitter",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Fill shapes in this many worker processes (default: serial)",
            min=1,
        ),
    ] = None,
    connect_ends: Annotated[
        bool,
        typer.Option(
            "--connect-ends",
            help="Join consecutive fill rows with connecting strokes",
        ),
    ] = False,
    straight: Annotated[
        bool,
        typer.Option(
            "--straight",
            help="Draw exact straight fill lines instead of sketchy ones",
        ),
    ] = False,
    outline: Annotated[
        bool,
        typer.Option(
            "--outline",
            help="Also draw the plain shape outlines",
        ),
    ] = False,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            help="Stroke color of the fill lines",
        ),
    ] = "#000000",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Fill every shape of a drawing with sketchy hachure lines and save it as SVG.

    Fill options given here are the base style; "fill" blocks inside the
    drawing document, at drawing or shape level, override them.

    Example:
        sketchfill drawing.json --angle 45 --gap 6 --seed 7

    This will create drawing-hachure.svg next to the input document.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_drawing.exists():
        print_error(
            f"Input file not found: {input_drawing}",
            details=f"The file '{input_drawing}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_drawing.is_file():
        print_error(
            f"Input path is not a file: {input_drawing}",
            details="Please provide a path to a JSON drawing document.",
        )
        raise typer.Exit(code=1)

    fill_values: dict[str, Any] = {
        "hachure_angle": angle,
        "hachure_gap": gap,
        "fill_weight": fill_weight,
        "stroke_width": stroke_width,
        "roughness": roughness,
        "seed": seed,
    }

    try:
        fill_config = FillConfig(**{k: v for k, v in fill_values.items() if v is not None})
    except ValueError as e:
        print_error("Invalid fill options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = SketchfillSettings(
        fill=fill_config,
        processing=ProcessingConfig(
            max_workers=workers,
            connect_ends=connect_ends,
            renderer=RendererKind.STRAIGHT if straight else RendererKind.SKETCH,
        ),
        output=OutputConfig(
            stroke_color=color,
            draw_outline=outline,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    output_path = output if output is not None else SvgWriter.get_output_path(input_drawing)

    try:
        if not quiet:
            print_step("Loading drawing")

        drawing = DrawingReader(input_drawing).load()

        if not quiet:
            kinds = [spec.shape.kind for spec in drawing.shapes]
            print_drawing_info(
                drawing_path=str(input_drawing),
                width=drawing.width,
                height=drawing.height,
                polygons=kinds.count(ShapeKind.POLYGON),
                ellipses=kinds.count(ShapeKind.ELLIPSE),
            )
            print_fill_info(
                angle=fill_config.hachure_angle,
                gap=fill_config.effective_gap(),
                fill_weight=fill_config.effective_fill_weight(),
                renderer=settings.processing.renderer.value,
            )

        if drawing.is_empty():
            if not quiet:
                console.print("\nNo shapes found. Writing an empty drawing.")

        if not quiet:
            print_step("Filling")
            print_processing_info(workers)

        processor = DrawingProcessor(settings)

        try:
            if not quiet and not drawing.is_empty():
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Filling {drawing.shape_count} shapes",
                        total=drawing.shape_count,
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    result = processor.process(
                        drawing,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                result = processor.process(drawing, max_workers=workers)
        except ProcessingCancelledError as e:
            if not quiet:
                print_cancellation_summary(
                    processed=e.processed_count,
                    cancelled=e.pending_count,
                )
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if verbose:
            for label, message in result.stats.errors:
                console.print(f"  [red]{label}[/red]: {message}")

        writer = SvgWriter(output_path, settings.output)
        writer.write(
            result.drawing,
            result.op_sets,
            [filled.config for filled in result.shapes],
        )

        if not quiet:
            stats = result.stats
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                ops=stats.ops_generated,
                errors=stats.error_count,
                avg_time_ms=stats.avg_shape_time_ms,
                min_time_ms=stats.min_shape_time_ms,
                max_time_ms=stats.max_shape_time_ms,
            )

        if result.stats.error_count:
            raise typer.Exit(code=1)

    except DrawingLoadError as e:
        print_error(f"Could not load drawing: {e.reason}")
        raise typer.Exit(code=1)
    except OutputSaveError as e:
        print_error(f"Could not save output: {e.reason}")
        raise typer.Exit(code=1)
    except SketchfillError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_summary(processed=0, cancelled=0)
        raise typer.Exit(code=130) from None
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
