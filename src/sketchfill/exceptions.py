"""Exception hierarchy for Sketchfill."""


class SketchfillError(Exception):
    """Base exception for all Sketchfill errors."""

    pass


class DrawingError(SketchfillError):
    """Errors related to drawing document loading."""

    pass


class DrawingLoadError(DrawingError):
    """Error loading a drawing document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load drawing '{path}': {reason}")


class DrawingFormatError(DrawingError):
    """Drawing document has an invalid structure."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid drawing format '{path}': {details}")


class ShapeError(SketchfillError):
    """Errors related to individual shapes."""

    pass


class ShapeFormatError(ShapeError):
    """A shape entry could not be interpreted."""

    def __init__(self, index: int, details: str) -> None:
        self.index = index
        self.details = details
        super().__init__(f"Invalid shape at index {index}: {details}")


class OutputError(SketchfillError):
    """Errors related to writing output."""

    pass


class OutputSaveError(OutputError):
    """Error saving an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save output '{path}': {reason}")


class ProcessingCancelledError(SketchfillError):
    """Processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
