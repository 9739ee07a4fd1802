"""Unit tests for the polygon and ellipse hachure fillers."""

import math
import random

import pytest

from sketchfill.config import FillConfig
from sketchfill.core.filler import HachureFiller, ellipse_affine, polygon_intersections
from sketchfill.core.geometry import hachure_angle
from sketchfill.core.hachure import hachure_lines
from sketchfill.core.renderer import SketchRenderer, StraightRenderer
from sketchfill.domain import Ellipse, Op, OpSetKind, OpType, Point, Polygon

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


class RecordingRenderer:
    """Renderer stub that records every segment and offset request."""

    def __init__(self) -> None:
        self.segments: list[tuple[float, float, float, float]] = []
        self.offsets: list[tuple[float, float]] = []

    def offset(self, min_value: float, max_value: float, config: FillConfig) -> float:
        self.offsets.append((min_value, max_value))
        return 0.0

    def double_line(
        self, x1: float, y1: float, x2: float, y2: float, config: FillConfig
    ) -> list[Op]:
        self.segments.append((x1, y1, x2, y2))
        return [Op(OpType.MOVE, (x1, y1)), Op(OpType.LINE_TO, (x2, y2))]


@pytest.fixture
def recorder() -> RecordingRenderer:
    """Create a recording renderer."""
    return RecordingRenderer()


class TestPolygonIntersections:
    """Tests for polygon_intersections."""

    def test_square(self) -> None:
        """Test a vertical line through a square."""
        crossings = polygon_intersections((4, -1, 4, 11), SQUARE)
        assert [p.to_tuple() for p in crossings] == [
            (4, pytest.approx(0)),
            (4, pytest.approx(10)),
        ]

    def test_edge_visiting_order(self) -> None:
        """Test that crossings come back in edge order, not sorted along the line."""
        # U shape whose first edge is the right side of the notch
        u_shape = [
            Point(7, 10),
            Point(7, 3),
            Point(3, 3),
            Point(3, 10),
            Point(0, 10),
            Point(0, 0),
            Point(10, 0),
            Point(10, 10),
        ]
        crossings = polygon_intersections((-1, 6, 11, 6), u_shape)
        assert [p.x for p in crossings] == pytest.approx([7, 3, 0, 10])

    def test_miss(self) -> None:
        """Test a line that misses the polygon."""
        assert polygon_intersections((20, -1, 20, 11), SQUARE) == []


class TestEllipseAffine:
    """Tests for ellipse_affine."""

    def test_identity_at_zero_angle_circle(self) -> None:
        """Test that a circle at angle zero is left untouched."""
        p = ellipse_affine(3, 4, 1, 2, 0.0, 1.0, 1.0)
        assert p.to_tuple() == (pytest.approx(3), pytest.approx(4))

    def test_center_is_fixed(self) -> None:
        """Test that the center maps onto itself."""
        sin_a, cos_a = math.sin(0.7), math.cos(0.7)
        p = ellipse_affine(50, 40, 50, 40, sin_a, cos_a, 0.5)
        assert p.to_tuple() == (pytest.approx(50), pytest.approx(40))


class TestFillPolygon:
    """Tests for HachureFiller.fill_polygon."""

    def test_square_vertical(self, recorder: RecordingRenderer) -> None:
        """Test a square filled at 0 degrees with gap 5."""
        op_set = HachureFiller(recorder).fill_polygon(
            SQUARE, FillConfig(hachure_angle=0, hachure_gap=5)
        )

        assert op_set.kind == OpSetKind.FILL_SKETCH
        assert recorder.segments == [
            (4, pytest.approx(0), 4, pytest.approx(10)),
            (9, pytest.approx(0), 9, pytest.approx(10)),
        ]
        assert len(op_set.ops) == 4

    def test_square_horizontal(self, recorder: RecordingRenderer) -> None:
        """Test a square filled at 90 degrees with gap 5."""
        HachureFiller(recorder).fill_polygon(SQUARE, FillConfig(hachure_angle=90, hachure_gap=5))

        assert len(recorder.segments) == 2
        ys = [(seg[1], seg[3]) for seg in recorder.segments]
        assert ys == [
            (pytest.approx(4), pytest.approx(4)),
            (pytest.approx(9), pytest.approx(9)),
        ]
        for x1, _, x2, _ in recorder.segments:
            assert sorted([x1, x2]) == [pytest.approx(0), pytest.approx(10)]

    def test_accepts_polygon(self, recorder: RecordingRenderer) -> None:
        """Test that a Polygon can be passed instead of a point list."""
        HachureFiller(recorder).fill_polygon(
            Polygon(points=SQUARE), FillConfig(hachure_angle=0, hachure_gap=5)
        )
        assert len(recorder.segments) == 2

    @pytest.mark.parametrize("points", [[], [Point(3, 3)]])
    def test_degenerate_polygons(self, recorder: RecordingRenderer, points: list[Point]) -> None:
        """Test that empty and single-point polygons produce nothing."""
        op_set = HachureFiller(recorder).fill_polygon(points, FillConfig(hachure_gap=1))
        assert op_set.is_empty()
        assert op_set.kind == OpSetKind.FILL_SKETCH

    def test_convex_crossings_pair_up(self) -> None:
        """Test that every sweep line hits a convex polygon 0 or 2 times."""
        triangle = [Point(0.3, 0.7), Point(17.1, 2.9), Point(6.4, 13.3)]
        angle = hachure_angle(37)
        counts = {
            len(polygon_intersections(line, triangle))
            for line in hachure_lines(-0.3, 14.3, -0.7, 18.1, 2.5, angle)
        }
        assert counts <= {0, 2}
        assert 2 in counts

    def test_odd_crossing_dropped(self, recorder: RecordingRenderer) -> None:
        """Test that a third crossing through a vertex is left unpaired."""
        triangle = [Point(0, 0), Point(10, 0), Point(5, 10)]
        HachureFiller(recorder).fill_polygon(triangle, FillConfig(hachure_angle=0, hachure_gap=6))

        assert recorder.segments == [(5, pytest.approx(0), 5, pytest.approx(10))]

    def test_unsorted_pairing_on_concave_polygon(self, recorder: RecordingRenderer) -> None:
        """Test that concave crossings pair in edge order."""
        u_shape = [
            Point(7, 10),
            Point(7, 3),
            Point(3, 3),
            Point(3, 10),
            Point(0, 10),
            Point(0, 0),
            Point(10, 0),
            Point(10, 10),
        ]
        HachureFiller(recorder).fill_polygon(u_shape, FillConfig(hachure_angle=90, hachure_gap=5))

        xs = [(seg[0], seg[2]) for seg in recorder.segments]
        assert xs == [
            (pytest.approx(7), pytest.approx(3)),
            (pytest.approx(0), pytest.approx(10)),
            (pytest.approx(7), pytest.approx(3)),
            (pytest.approx(0), pytest.approx(10)),
        ]

    def test_connect_ends(self, recorder: RecordingRenderer) -> None:
        """Test that connect mode joins each exit point to the next entry point."""
        HachureFiller(recorder).fill_polygon(
            SQUARE, FillConfig(hachure_angle=0, hachure_gap=5), connect_ends=True
        )

        assert len(recorder.segments) == 3
        assert recorder.segments[2] == (
            4,
            pytest.approx(10),
            9,
            pytest.approx(0),
        )

    def test_angle_periodicity(self) -> None:
        """Test that a and a + 180 produce the same fill."""
        triangle = [Point(0, 0), Point(20, 3), Point(8, 15)]
        filler = HachureFiller(StraightRenderer())
        fills = [
            filler.fill_polygon(triangle, FillConfig(hachure_angle=a, hachure_gap=2)).ops
            for a in (30, 210, -150)
        ]
        assert fills[0] == fills[1] == fills[2]
        assert fills[0]

    def test_seeded_output_is_reproducible(self) -> None:
        """Test that the same seed gives identical operations."""
        config = FillConfig(hachure_angle=-41, hachure_gap=3)
        a = HachureFiller(SketchRenderer(random.Random(7))).fill_polygon(SQUARE, config)
        b = HachureFiller(SketchRenderer(random.Random(7))).fill_polygon(SQUARE, config)
        assert a.ops == b.ops
        assert a.count(OpType.MOVE) == a.count(OpType.BCURVE_TO) > 0

    def test_default_gap(self, recorder: RecordingRenderer) -> None:
        """Test that a non-positive gap falls back to 4x the stroke width."""
        HachureFiller(recorder).fill_polygon(
            SQUARE, FillConfig(hachure_angle=0, hachure_gap=0, stroke_width=1.25)
        )
        assert [seg[0] for seg in recorder.segments] == pytest.approx([4, 9])

    @pytest.mark.parametrize("degrees", [-41, 0, 30, 45, 90, 135])
    def test_segments_stay_near_bounding_box(
        self, recorder: RecordingRenderer, degrees: float
    ) -> None:
        """Test that no stroke reaches more than one unit past the polygon bounds."""
        pentagon = [Point(2, 1), Point(19, 4), Point(16, 15), Point(7, 18), Point(0, 9)]
        HachureFiller(recorder).fill_polygon(
            pentagon, FillConfig(hachure_angle=degrees, hachure_gap=1.5)
        )

        assert recorder.segments
        for x1, y1, x2, y2 in recorder.segments:
            for x, y in ((x1, y1), (x2, y2)):
                assert -1 <= x <= 20
                assert 0 <= y <= 19

    @pytest.mark.parametrize(
        "points",
        [
            [Point(0, 0), Point(math.inf, 0), Point(10, 10)],
            [Point(0, 0), Point(10, 0), Point(10, -math.inf)],
            [Point(0, 0), Point(10, math.nan), Point(10, 10)],
        ],
    )
    def test_unbounded_polygon_yields_nothing(
        self, recorder: RecordingRenderer, points: list[Point]
    ) -> None:
        """Test that a vertex at infinity or NaN produces an empty fill."""
        op_set = HachureFiller(recorder).fill_polygon(points, FillConfig(hachure_gap=1))
        assert op_set.is_empty()
        assert recorder.segments == []


class TestFillEllipse:
    """Tests for HachureFiller.fill_ellipse."""

    def test_circle_chords(self, recorder: RecordingRenderer) -> None:
        """Test a circle of radius 10 filled at 0 degrees with gap 2."""
        HachureFiller(recorder).fill_ellipse(0, 0, 20, 20, FillConfig(hachure_angle=0, hachure_gap=2))

        xs = [seg[0] for seg in recorder.segments]
        assert xs == pytest.approx([-8, -6, -4, -2, 0, 2, 4, 6, 8])
        for x1, y1, x2, y2 in recorder.segments:
            assert x1 == pytest.approx(x2)
            assert y1 == pytest.approx(-math.sqrt(100 - x1 * x1))
            assert y2 == pytest.approx(math.sqrt(100 - x1 * x1))

    def test_radius_jitter_requested(self, recorder: RecordingRenderer) -> None:
        """Test that both radii are jittered by up to 5%."""
        HachureFiller(recorder).fill_ellipse(0, 0, 20, 10, FillConfig(hachure_gap=1))

        assert recorder.offsets[:2] == [
            (pytest.approx(-0.5), pytest.approx(0.5)),
            (pytest.approx(-0.25), pytest.approx(0.25)),
        ]

    @pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (0, 0)])
    def test_zero_radius(self, recorder: RecordingRenderer, width: float, height: float) -> None:
        """Test that a degenerate ellipse yields no chords."""
        op_set = HachureFiller(recorder).fill_ellipse(5, 5, width, height, FillConfig())
        assert op_set.is_empty()

    @pytest.mark.parametrize(
        ("cx", "width"), [(0, math.inf), (0, math.nan), (math.inf, 10), (math.nan, 10)]
    )
    def test_unbounded_ellipse_yields_nothing(
        self, recorder: RecordingRenderer, cx: float, width: float
    ) -> None:
        """Test that an infinite or NaN ellipse produces an empty fill."""
        op_set = HachureFiller(recorder).fill_ellipse(cx, 0, width, 10, FillConfig(hachure_gap=1))
        assert op_set.is_empty()

    def test_negative_size(self, recorder: RecordingRenderer) -> None:
        """Test that negative sizes are treated by magnitude."""
        config = FillConfig(hachure_angle=0, hachure_gap=2)
        HachureFiller(recorder).fill_ellipse(0, 0, -20, -20, config)
        assert len(recorder.segments) == 9

    def test_horizontal_chords(self) -> None:
        """Test that 90 degrees yields horizontal chords."""
        op_set = HachureFiller(StraightRenderer()).fill_ellipse(
            50, 50, 40, 20, FillConfig(hachure_angle=90, hachure_gap=2)
        )

        assert not op_set.is_empty()
        for move, line in zip(op_set.ops[::2], op_set.ops[1::2]):
            assert move.data[1] == pytest.approx(line.data[1], abs=1e-6)

    @pytest.fixture
    def tilted_ellipse_ops(self) -> list[Op]:
        """Straight fill of a 60x30 ellipse at 30 degrees with gap 3."""
        op_set = HachureFiller(StraightRenderer()).fill_ellipse(
            50, 40, 60, 30, FillConfig(hachure_angle=30, hachure_gap=3)
        )
        return op_set.ops

    def test_endpoints_on_ellipse(self, tilted_ellipse_ops: list[Op]) -> None:
        """Test that every chord ends on the ellipse boundary."""
        assert tilted_ellipse_ops
        for op in tilted_ellipse_ops:
            x, y = op.data
            assert ((x - 50) / 30) ** 2 + ((y - 40) / 15) ** 2 == pytest.approx(1.0)

    def test_chord_direction(self, tilted_ellipse_ops: list[Op]) -> None:
        """Test that chords run along (sin, cos) of the hachure angle."""
        angle = hachure_angle(30)
        for move, line in zip(tilted_ellipse_ops[::2], tilted_ellipse_ops[1::2]):
            dx = line.data[0] - move.data[0]
            dy = line.data[1] - move.data[1]
            assert dx * angle.cos - dy * angle.sin == pytest.approx(0.0, abs=1e-9)

    def test_chord_spacing(self, tilted_ellipse_ops: list[Op]) -> None:
        """Test that chords are one gap apart after the transform."""
        angle = hachure_angle(30)
        starts = [op.data for op in tilted_ellipse_ops[::2]]
        for a, b in zip(starts, starts[1:]):
            distance = (b[0] - a[0]) * angle.cos - (b[1] - a[1]) * angle.sin
            assert abs(distance) == pytest.approx(3.0)

    def test_connect_ends(self, recorder: RecordingRenderer) -> None:
        """Test that connect mode adds one connector between consecutive chords."""
        config = FillConfig(hachure_angle=0, hachure_gap=2)
        HachureFiller(recorder).fill_ellipse(0, 0, 20, 20, config, connect_ends=True)

        assert len(recorder.segments) == 9 + 8
        chord, connector = recorder.segments[0], recorder.segments[2]
        assert connector[:2] == (chord[2], chord[3])


class TestFillDispatch:
    """Tests for HachureFiller.fill."""

    def test_dispatch_polygon(self, recorder: RecordingRenderer) -> None:
        """Test polygon dispatch."""
        HachureFiller(recorder).fill(Polygon(points=SQUARE), FillConfig(hachure_angle=0, hachure_gap=5))
        assert len(recorder.segments) == 2

    def test_dispatch_ellipse(self, recorder: RecordingRenderer) -> None:
        """Test ellipse dispatch."""
        HachureFiller(recorder).fill(
            Ellipse(cx=0, cy=0, width=20, height=20), FillConfig(hachure_angle=0, hachure_gap=2)
        )
        assert len(recorder.segments) == 9
