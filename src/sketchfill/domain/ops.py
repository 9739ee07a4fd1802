"""Drawing operation types produced by the fillers.

Fillers never draw anything themselves. They emit an ordered list of
abstract path operations that a downstream renderer (SVG, canvas, plotter)
turns into actual strokes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OpType(str, Enum):
    """Path operation type."""

    MOVE = "move"
    BCURVE_TO = "bcurveTo"
    LINE_TO = "lineTo"


class OpSetKind(str, Enum):
    """Tag describing what an operation set draws."""

    FILL_SKETCH = "fillSketch"


@dataclass(frozen=True, slots=True)
class Op:
    """A single path operation.

    Attributes:
        op: Operation type
        data: Flat coordinates; 2 values for move/lineTo, 6 for bcurveTo
    """

    op: OpType
    data: tuple[float, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"op": self.op.value, "data": list(self.data)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Op":
        """Deserialize from dictionary."""
        return cls(op=OpType(data["op"]), data=tuple(data["data"]))


@dataclass
class OpSet:
    """An ordered, append-only collection of drawing operations.

    Attributes:
        kind: What the operations draw
        ops: Operations in drawing order
    """

    kind: OpSetKind = OpSetKind.FILL_SKETCH
    ops: list[Op] = field(default_factory=list)

    def extend(self, ops: list[Op]) -> None:
        """Append operations to the end of the set."""
        self.ops.extend(ops)

    def is_empty(self) -> bool:
        """Check if the set holds no operations."""
        return not self.ops

    def count(self, op_type: OpType) -> int:
        """Count operations of the given type."""
        return sum(1 for op in self.ops if op.op == op_type)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "type": self.kind.value,
            "ops": [op.to_dict() for op in self.ops],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OpSet":
        """Deserialize from dictionary."""
        return cls(
            kind=OpSetKind(data["type"]),
            ops=[Op.from_dict(op) for op in data["ops"]],
        )
