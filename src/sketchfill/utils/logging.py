"""Logging utilities for Sketchfill."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

CONSOLE_HANDLER_NAME = "sketchfill-console"
FILE_HANDLER_NAME = "sketchfill-file"


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    ops_generated: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    shape_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_shape_time_ms(self) -> float | None:
        """Average fill time per shape, None if nothing was timed."""
        if not self.shape_timings_ms:
            return None
        return sum(self.shape_timings_ms) / len(self.shape_timings_ms)

    @property
    def min_shape_time_ms(self) -> float | None:
        """Fastest shape fill time."""
        return min(self.shape_timings_ms) if self.shape_timings_ms else None

    @property
    def max_shape_time_ms(self) -> float | None:
        """Slowest shape fill time."""
        return max(self.shape_timings_ms) if self.shape_timings_ms else None


def _replace_handler(root_logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    for existing in list(root_logger.handlers):
        if existing.get_name() == name:
            root_logger.removeHandler(existing)
            existing.close()
    handler.set_name(name)
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Repeated calls replace the handlers installed by earlier calls instead
    of stacking them.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _replace_handler(root_logger, file_handler, FILE_HANDLER_NAME)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _replace_handler(root_logger, console_handler, CONSOLE_HANDLER_NAME)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sketchfill")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_shape_start(self, shape_label: str, kind: str) -> None:
        """Log start of shape filling."""
        self._logger.debug("Filling shape", shape=shape_label, kind=kind)

    def log_shape_complete(
        self,
        shape_label: str,
        op_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful shape fill."""
        self._logger.info(
            "Shape filled",
            shape=shape_label,
            ops=op_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.ops_generated += op_count
        self._stats.shape_timings_ms.append(duration_ms)

    def log_shape_skipped(self, shape_label: str, reason: str) -> None:
        """Log skipped shape."""
        self._logger.debug("Shape skipped", shape=shape_label, reason=reason)
        self._stats.skipped_count += 1

    def log_shape_error(
        self,
        shape_label: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log shape fill error."""
        self._logger.error(
            "Shape fill failed",
            shape=shape_label,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((shape_label, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
