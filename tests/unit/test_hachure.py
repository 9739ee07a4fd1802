"""Unit tests for sweep-line generation."""

import math
import types

import pytest

from sketchfill.core.geometry import hachure_angle
from sketchfill.core.hachure import hachure_lines


class TestHachureLines:
    """Tests for hachure_lines."""

    def test_vertical_lines_at_zero_degrees(self) -> None:
        """Test that 0 degrees yields vertical lines stepped from the left edge."""
        lines = list(hachure_lines(-1, 11, -1, 11, 5, hachure_angle(0)))

        assert [line[0] for line in lines] == pytest.approx([-1, 4, 9])
        for x1, y1, x2, y2 in lines:
            assert x1 == pytest.approx(x2)
            assert y1 == pytest.approx(-1)
            assert y2 == pytest.approx(11)

    def test_horizontal_lines_at_ninety_degrees(self) -> None:
        """Test that 90 degrees yields horizontal lines stepped from the top edge."""
        lines = list(hachure_lines(-1, 11, -1, 11, 5, hachure_angle(90)))

        assert [line[1] for line in lines] == pytest.approx([-1, 4, 9])
        for _, y1, _, y2 in lines:
            assert y1 == pytest.approx(y2)

    @pytest.mark.parametrize("degrees", [0, 30, 45, 90, 135, 170])
    def test_line_count(self, degrees: float) -> None:
        """Test that the family covers the projected box extent exactly."""
        top, bottom, left, right, gap = 0.0, 13.0, 0.0, 20.0, 3.0
        angle = hachure_angle(degrees)
        span = (right - left) * abs(angle.cos) + (bottom - top) * abs(angle.sin)

        lines = list(hachure_lines(top, bottom, left, right, gap, angle))

        assert len(lines) == math.ceil(span / gap)

    @pytest.mark.parametrize("degrees", [0, 30, 45, 90, 135, 170])
    def test_spacing_equals_gap(self, degrees: float) -> None:
        """Test that consecutive lines are exactly one gap apart."""
        angle = hachure_angle(degrees)
        lines = list(hachure_lines(0, 13, 0, 20, 3, angle))

        for a, b in zip(lines, lines[1:]):
            dx, dy = b[0] - a[0], b[1] - a[1]
            # Distance measured across the lines, whichever way the sweep walks
            assert abs(dx * angle.cos - dy * angle.sin) == pytest.approx(3.0)

    @pytest.mark.parametrize("degrees", [0, 30, 45, 90, 135, 170])
    def test_lines_run_along_direction(self, degrees: float) -> None:
        """Test that every line is parallel to (sin, cos)."""
        angle = hachure_angle(degrees)
        for x1, y1, x2, y2 in hachure_lines(0, 13, 0, 20, 3, angle):
            cross = (x2 - x1) * angle.cos - (y2 - y1) * angle.sin
            assert cross == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("degrees", [30, 45, 135])
    def test_lines_span_box(self, degrees: float) -> None:
        """Test that each line reaches past the box along its direction."""
        angle = hachure_angle(degrees)
        corners = [(0, 0), (20, 0), (20, 13), (0, 13)]
        along = [x * angle.sin + y * angle.cos for x, y in corners]

        for x1, y1, x2, y2 in hachure_lines(0, 13, 0, 20, 3, angle):
            start = x1 * angle.sin + y1 * angle.cos
            end = x2 * angle.sin + y2 * angle.cos
            assert start == pytest.approx(min(along))
            assert end == pytest.approx(max(along))

    def test_lazy_and_restartable(self) -> None:
        """Test that lines are produced lazily and the call can be repeated."""
        angle = hachure_angle(45)
        lines = hachure_lines(0, 100, 0, 100, 1, angle)

        assert isinstance(lines, types.GeneratorType)
        first = next(lines)
        assert first == next(hachure_lines(0, 100, 0, 100, 1, angle))
        assert list(hachure_lines(0, 10, 0, 10, 2, angle)) == list(
            hachure_lines(0, 10, 0, 10, 2, angle)
        )

    @pytest.mark.parametrize("degrees", [1e-9, 89.9999999, 90, 179.9999999])
    def test_near_axis_angles_are_finite(self, degrees: float) -> None:
        """Test that no division blows up near the axes."""
        lines = list(hachure_lines(0, 10, 0, 10, 2, hachure_angle(degrees)))

        assert lines
        for line in lines:
            assert all(math.isfinite(v) for v in line)

    def test_degenerate_box(self) -> None:
        """Test that a zero-size box yields no lines."""
        assert list(hachure_lines(5, 5, 5, 5, 1, hachure_angle(0))) == []

    @pytest.mark.parametrize("degrees", [0, 30, 60, 120, 150])
    def test_steep_lines_sweep_left_to_right(self, degrees: float) -> None:
        """Test that non-horizontal families are stepped in ascending x."""
        lines = list(hachure_lines(0, 13, 0, 20, 3, hachure_angle(degrees)))

        starts = [x1 for x1, _, _, _ in lines]
        assert starts == sorted(starts)
        assert starts[0] < starts[-1]

    @pytest.mark.parametrize("degrees", [90, 89.999, 90.001])
    def test_horizontal_lines_sweep_top_to_bottom(self, degrees: float) -> None:
        """Test that near-horizontal families are stepped in ascending y."""
        lines = list(hachure_lines(-1, 11, -1, 11, 2, hachure_angle(degrees)))

        rows = [(y1 + y2) / 2 for _, y1, _, y2 in lines]
        assert rows == sorted(rows)
        assert rows[0] < rows[-1]

    def test_horizontal_rows_in_ascending_y(self) -> None:
        """Test the row positions of a 90 degree family with gap 2."""
        lines = list(hachure_lines(-1, 11, -1, 11, 2, hachure_angle(90)))

        assert [y1 for _, y1, _, _ in lines] == pytest.approx([-1, 1, 3, 5, 7, 9])

    @pytest.mark.parametrize(
        ("top", "bottom", "left", "right", "gap"),
        [
            (0, 10, 0, math.inf, 1),
            (-math.inf, 10, 0, 10, 1),
            (0, math.nan, 0, 10, 1),
            (0, 10, 0, 10, math.inf),
            (0, 10, 0, 10, math.nan),
            (0, 10, 0, 10, 0),
            (0, 10, -1e308, 1e308, 1),
        ],
    )
    def test_non_finite_input_yields_nothing(
        self, top: float, bottom: float, left: float, right: float, gap: float
    ) -> None:
        """Test that an unbounded box or unusable gap ends the sweep at once."""
        assert list(hachure_lines(top, bottom, left, right, gap, hachure_angle(0))) == []
