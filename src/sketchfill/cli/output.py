"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for shape filling.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sketchfill[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_drawing_info(
    drawing_path: str,
    width: float,
    height: float,
    polygons: int,
    ellipses: int,
) -> None:
    """Print drawing information.

    Args:
        drawing_path: Path to the drawing document
        width: Canvas width
        height: Canvas height
        polygons: Number of polygons in the drawing
        ellipses: Number of ellipses in the drawing
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(drawing_path)
    line1.append(f" ({width:g} × {height:g})")
    console.print(line1)
    console.print(f"  {polygons} polygons {SYM_DOT} {ellipses} ellipses")


def print_fill_info(angle: float, gap: float, fill_weight: float, renderer: str) -> None:
    """Print the base fill configuration.

    Args:
        angle: Hachure angle in degrees
        gap: Effective hachure gap
        fill_weight: Effective fill weight
        renderer: Stroke renderer name
    """
    console.print(
        f"  angle {angle:g}° {SYM_DOT} gap {gap:g} {SYM_DOT} "
        f"weight {fill_weight:g} {SYM_DOT} {renderer} strokes"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int | None) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers (None or 1 = serial)
    """
    if workers is None or workers <= 1:
        console.print(f"  serial {SYM_DOT} Ctrl+C to cancel")
    else:
        console.print(f"  {workers} workers {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    processed: int,
    ops: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        processed: Number of shapes filled
        ops: Total number of drawing operations generated
        errors: Number of errors encountered
        avg_time_ms: Average fill time per shape in milliseconds
        min_time_ms: Minimum fill time per shape in milliseconds
        max_time_ms: Maximum fill time per shape in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} shapes {SYM_DOT} {ops:,} ops {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.1f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.1f}–{max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of shapes filled before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} shapes completed {SYM_DOT} {cancelled} tasks cancelled")
    console.print("  No output file created")
