"""Drawing processing orchestration.

This module fills every shape of a drawing document, serially by default or
across worker processes when explicitly requested.

Key components:
- fill_shape: Top-level picklable function for parallel execution
- resolve_fill_config: Layer fill overrides on top of a base configuration
- DrawingProcessor: Main orchestrator class for drawing processing
"""

import random
import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from sketchfill.config import FillConfig, RendererKind, SketchfillSettings
from sketchfill.core.filler import HachureFiller
from sketchfill.core.renderer import SketchRenderer, StraightRenderer, StrokeRenderer
from sketchfill.domain import Drawing, OpSet, Polygon, ShapeSpec
from sketchfill.exceptions import ProcessingCancelledError
from sketchfill.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass
class FilledShape:
    """A shape together with the configuration and operations of its fill.

    Attributes:
        spec: The shape that was filled
        config: Fully resolved fill configuration used for it
        op_set: Generated operations (empty if the fill failed)
        error: Error message if the fill failed
    """

    spec: ShapeSpec
    config: FillConfig
    op_set: OpSet = field(default_factory=OpSet)
    error: str | None = None


@dataclass
class ProcessingResult:
    """Result of filling a whole drawing.

    Attributes:
        drawing: The drawing that was processed
        shapes: One entry per drawing shape, in document order
        stats: Counts, timing and error details
    """

    drawing: Drawing
    shapes: list[FilledShape]
    stats: ProcessingStats

    @property
    def op_sets(self) -> list[OpSet]:
        """Operation sets in document order."""
        return [filled.op_set for filled in self.shapes]


def resolve_fill_config(base: FillConfig, *overrides: dict[str, Any]) -> FillConfig:
    """Apply fill overrides on top of a base configuration.

    Later overrides win. The merged values are validated again.

    Args:
        base: Base fill configuration
        *overrides: Dictionaries of FillConfig field values

    Returns:
        New FillConfig with all overrides applied

    Raises:
        pydantic.ValidationError: If an override has an invalid value
    """
    merged = base.model_dump()
    for override in overrides:
        merged.update(override)
    return FillConfig(**merged)


def shape_seed(base_seed: int | None, index: int) -> int | None:
    """Derive the jitter seed for one shape of a drawing.

    Each shape gets its own seed so the output does not depend on whether
    shapes were filled serially or in parallel.
    """
    if base_seed is None:
        return None
    return base_seed + index


def build_renderer(kind: RendererKind, seed: int | None) -> StrokeRenderer:
    """Create the stroke renderer for one shape."""
    if kind == RendererKind.STRAIGHT:
        return StraightRenderer()
    return SketchRenderer(random.Random(seed))


def fill_shape(
    spec_dict: dict[str, Any],
    config_dict: dict[str, Any],
    connect_ends: bool,
    renderer_kind: str,
    seed: int | None = None,
) -> dict[str, Any]:
    """Fill a single shape.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the shape, fills it and returns the serialized result.

    Args:
        spec_dict: Serialized shape spec (from ShapeSpec.to_dict())
        config_dict: Serialized, fully resolved fill configuration
        connect_ends: Join consecutive fill rows
        renderer_kind: Value of a RendererKind
        seed: Seed for the stroke jitter

    Returns:
        Dictionary containing either:
        - Success: {"op_set": op_set_dict, "duration_ms": float}
        - Error: {"error": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        spec = ShapeSpec.from_dict(spec_dict)
        config = FillConfig(**config_dict)
        renderer = build_renderer(RendererKind(renderer_kind), seed)

        op_set = HachureFiller(renderer).fill(spec.shape, config, connect_ends=connect_ends)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "op_set": op_set.to_dict(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class DrawingProcessor:
    """Orchestrates hachure filling for a whole drawing.

    Manages the complete workflow:
    1. Resolve the fill configuration of every shape
    2. Fill shapes serially, or in worker processes when max_workers > 1
    3. Collect results in document order and update statistics

    Parallel filling is opt-in. Results are always reassembled in document
    order, and every shape is seeded independently, so a seeded drawing
    produces identical operations either way.

    Example:
        settings = SketchfillSettings()
        processor = DrawingProcessor(settings)
        result = processor.process(drawing, max_workers=4)
    """

    def __init__(self, config: SketchfillSettings) -> None:
        """Initialize drawing processor with configuration.

        Args:
            config: Sketchfill settings containing fill and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )

    def process(
        self,
        drawing: Drawing,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> ProcessingResult:
        """Fill every shape of a drawing.

        Args:
            drawing: Drawing to process
            max_workers: Worker processes (None = config default; <= 1 = serial)
            progress_callback: Optional callback(completed, total)

        Returns:
            ProcessingResult with one FilledShape per drawing shape

        Raises:
            ProcessingCancelledError: If processing is cancelled by user
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info(
            "Starting drawing processing",
            shapes=drawing.shape_count,
            max_workers=max_workers,
        )

        filled = self._prepare(drawing)
        tasks: dict[int, FilledShape] = {}
        for index, item in enumerate(filled):
            label = self._label(item.spec, index)
            if item.error is not None:
                processing_logger.log_shape_error(label, ValueError(item.error))
                continue
            if isinstance(item.spec.shape, Polygon) and item.spec.shape.is_empty():
                processing_logger.log_shape_skipped(label, "empty polygon")
                continue
            tasks[index] = item

        if not tasks:
            self.logger.info("No shapes to fill")
        elif max_workers is not None and max_workers > 1 and len(tasks) > 1:
            self._process_parallel(tasks, max_workers, processing_logger, progress_callback)
        else:
            self._process_serial(tasks, processing_logger, progress_callback)

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            ops=stats.ops_generated,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return ProcessingResult(drawing=drawing, shapes=filled, stats=stats)

    def _prepare(self, drawing: Drawing) -> list[FilledShape]:
        """Resolve the fill configuration of every shape in the drawing.

        A shape whose overrides do not validate keeps the drawing-level
        configuration and is marked with an error instead of aborting the run.
        """
        base = resolve_fill_config(self.config.fill, drawing.fill)
        filled: list[FilledShape] = []
        for spec in drawing.shapes:
            try:
                filled.append(FilledShape(spec=spec, config=resolve_fill_config(base, spec.fill)))
            except ValidationError as e:
                filled.append(FilledShape(spec=spec, config=base, error=str(e)))
        return filled

    def _task_args(self, index: int, item: FilledShape) -> tuple[Any, ...]:
        connect_ends = item.spec.connect_ends
        if connect_ends is None:
            connect_ends = self.config.processing.connect_ends
        return (
            item.spec.to_dict(),
            item.config.model_dump(),
            connect_ends,
            self.config.processing.renderer.value,
            shape_seed(item.config.seed, index),
        )

    def _record(
        self,
        index: int,
        item: FilledShape,
        result: dict[str, Any],
        processing_logger: ProcessingLogger,
    ) -> None:
        label = self._label(item.spec, index)
        if "error" in result:
            item.error = result["error"]
            processing_logger.log_shape_error(
                shape_label=label,
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )
            return

        item.op_set = OpSet.from_dict(result["op_set"])
        processing_logger.log_shape_complete(
            shape_label=label,
            op_count=len(item.op_set.ops),
            duration_ms=result.get("duration_ms", 0.0),
        )

    def _process_serial(
        self,
        tasks: dict[int, FilledShape],
        processing_logger: ProcessingLogger,
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        total = len(tasks)
        for completed, (index, item) in enumerate(tasks.items(), start=1):
            processing_logger.log_shape_start(
                self._label(item.spec, index), item.spec.shape.kind.value
            )
            result = fill_shape(*self._task_args(index, item))
            self._record(index, item, result, processing_logger)
            if progress_callback is not None:
                progress_callback(completed, total)

    def _process_parallel(
        self,
        tasks: dict[int, FilledShape],
        max_workers: int,
        processing_logger: ProcessingLogger,
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        """Fill shapes in worker processes.

        Results are written back into their FilledShape slot, so the
        document order is preserved whatever order workers finish in.
        """
        stats = processing_logger.stats
        total = len(tasks)
        completed = 0
        pending_futures: dict = {}

        self.logger.info(
            "Starting parallel processing",
            shape_count=total,
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, item in tasks.items():
                future = executor.submit(fill_shape, *self._task_args(index, item))
                pending_futures[future] = index

            try:
                for future in as_completed(pending_futures):
                    index = pending_futures.pop(future)
                    item = tasks[index]

                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error
                        result = {"error": str(e), "traceback": traceback.format_exc()}

                    self._record(index, item, result, processing_logger)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(
                    processed_count=stats.processed_count,
                    pending_count=stats.cancelled_count,
                ) from None

    @staticmethod
    def _label(spec: ShapeSpec, index: int) -> str:
        return spec.name or f"{spec.shape.kind.value}[{index}]"
