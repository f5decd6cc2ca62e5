import itertools
import os
import random
import sys
import unittest
from unittest.mock import MagicMock, patch

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from PySide6.QtGui import QColor

from drawing_context import DrawingContext
from drawing_surface import (
    DEFAULT_SHAPE_SIZE,
    DrawingSurface,
    DrawMode,
    SurfaceStatus,
)
from shape import Circle, FreehandStroke, Point, Square


class TestDrawingSurface(unittest.TestCase):
    def setUp(self):
        self.surface = DrawingSurface()
        self.repaints = []
        self.committed = []
        self.modes = []
        self.surface.repaint_requested.connect(lambda: self.repaints.append(True))
        self.surface.shape_committed.connect(self.committed.append)
        self.surface.mode_changed.connect(self.modes.append)

    def _stroke(self, points: list[Point]) -> None:
        self.surface.pointer_down(points[0])
        for p in points[1:-1]:
            self.surface.pointer_move(p)
        self.surface.pointer_up(points[-1])

    def test_initialization(self):
        self.assertEqual(self.surface.shapes, [])
        self.assertIsNone(self.surface.current_shape)
        self.assertEqual(self.surface.status, SurfaceStatus.IDLE)
        self.assertEqual(self.surface.mode, DrawMode.PLAIN)
        self.assertEqual(self.surface.color, QColor(0, 0, 0))
        self.assertEqual(self.surface.shape_size, DEFAULT_SHAPE_SIZE)
        self.assertEqual(self.surface.erase_color, QColor(255, 255, 255))

    def test_modes_are_mutually_exclusive(self):
        setters = {
            DrawMode.PLAIN: lambda: self.surface.set_color(QColor("red")),
            DrawMode.RAINBOW: self.surface.enable_rainbow,
            DrawMode.ERASER: self.surface.enable_eraser,
            DrawMode.STAMP_CIRCLE: self.surface.enable_stamp_circle,
            DrawMode.STAMP_SQUARE: self.surface.enable_stamp_square,
        }
        for sequence in itertools.permutations(setters.keys(), 3):
            for mode in sequence:
                setters[mode]()
                self.assertEqual(self.surface.mode, mode)

    def test_mode_changed_emitted_only_on_change(self):
        self.surface.enable_eraser()
        self.surface.enable_eraser()
        self.surface.set_color(QColor("red"))
        self.assertEqual(self.modes, [DrawMode.ERASER, DrawMode.PLAIN])

    def test_set_color_invalid_keeps_color_but_selects_plain(self):
        self.surface.enable_rainbow()
        with self.assertLogs("drawing_surface", level="WARNING"):
            self.surface.set_color(QColor())
        self.assertEqual(self.surface.mode, DrawMode.PLAIN)
        self.assertEqual(self.surface.color, QColor(0, 0, 0))

    def test_stamp_circle(self):
        self.surface.set_color(QColor("blue"))
        self.surface.enable_stamp_circle()
        self.surface.pointer_down(Point(40, 50))

        self.assertIsNone(self.surface.current_shape)
        self.assertEqual(self.surface.status, SurfaceStatus.IDLE)
        self.assertEqual(len(self.surface.shapes), 1)
        circle = self.surface.shapes[0]
        self.assertIsInstance(circle, Circle)
        self.assertEqual(circle.center, Point(40, 50))
        self.assertEqual(circle.radius, DEFAULT_SHAPE_SIZE)
        self.assertEqual(circle.color, QColor("blue"))
        self.assertEqual(self.committed, [circle])
        self.assertEqual(len(self.repaints), 1)

        context = MagicMock(spec=DrawingContext)
        self.surface.render(context)
        context.draw_filled_circle.assert_called_once_with(
            Point(40, 50), DEFAULT_SHAPE_SIZE, QColor("blue")
        )

    def test_stamp_square_uses_configured_size(self):
        self.surface.shape_size = 20
        self.surface.enable_stamp_square()
        self.surface.pointer_down(Point(1, 2))
        # Moves and releases don't touch stamped shapes
        self.surface.pointer_move(Point(5, 5))
        self.surface.pointer_up(Point(6, 6))

        self.assertEqual(self.surface.shapes, [Square(Point(1, 2), 20, QColor(0, 0, 0))])

    def test_shape_size_change_does_not_affect_committed(self):
        self.surface.enable_stamp_circle()
        self.surface.pointer_down(Point(0, 0))
        self.surface.shape_size = 10
        self.surface.pointer_down(Point(0, 0))
        radii = [shape.radius for shape in self.surface.shapes]
        self.assertEqual(radii, [DEFAULT_SHAPE_SIZE, 10])

    def test_plain_stroke_has_n_plus_two_points(self):
        moves = [Point(i, i * 2) for i in range(1, 6)]
        self.surface.pointer_down(Point(0, 0))
        self.assertEqual(self.surface.status, SurfaceStatus.STROKING)
        self.assertEqual(self.surface.shapes, [])
        for p in moves:
            self.surface.pointer_move(p)
        self.surface.pointer_up(Point(9, 9))

        self.assertIsNone(self.surface.current_shape)
        self.assertEqual(len(self.surface.shapes), 1)
        stroke = self.surface.shapes[0]
        self.assertEqual(stroke.points, [Point(0, 0)] + moves + [Point(9, 9)])
        self.assertEqual(self.committed, [stroke])
        # down + 5 moves + up
        self.assertEqual(len(self.repaints), 7)

    def test_green_stroke_scenario(self):
        self.surface.set_color(QColor(0, 255, 0))
        self._stroke([Point(10, 10), Point(20, 10), Point(30, 10)])

        self.assertEqual(len(self.surface.shapes), 1)
        stroke = self.surface.shapes[0]
        self.assertIsInstance(stroke, FreehandStroke)
        self.assertEqual(stroke.points, [Point(10, 10), Point(20, 10), Point(30, 10)])
        self.assertEqual(stroke.color, QColor(0, 255, 0))
        self.assertFalse(stroke.rainbow)

    def test_click_stroke_has_two_identical_points(self):
        self.surface.pointer_down(Point(3, 3))
        self.surface.pointer_up(Point(3, 3))
        stroke = self.surface.shapes[0]
        self.assertEqual(stroke.points, [Point(3, 3), Point(3, 3)])

    def test_plain_stroke_color_never_changes(self):
        self.surface.set_color(QColor("red"))
        self.surface.pointer_down(Point(0, 0))
        for i in range(20):
            self.surface.pointer_move(Point(i, i))
        self.assertEqual(self.surface.current_shape.color, QColor("red"))
        self.surface.pointer_up(Point(30, 30))
        self.assertEqual(self.surface.shapes[0].color, QColor("red"))

    def test_rainbow_stroke_changes_color(self):
        self.surface.set_color(QColor("red"))
        self.surface.enable_rainbow()
        with patch("shape.random", random.Random(1234)):
            self.surface.pointer_down(Point(0, 0))
            stroke = self.surface.current_shape
            self.assertTrue(stroke.rainbow)
            initial = stroke.color
            self.assertEqual(initial, QColor("red"))
            for i in range(5):
                self.surface.pointer_move(Point(i, i))
            self.surface.pointer_up(Point(10, 10))
        self.assertNotEqual(self.surface.shapes[0].color, initial)

    def test_rainbow_refresh_happens_before_append(self):
        self.surface.enable_rainbow()
        self.surface.pointer_down(Point(0, 0))
        stroke = self.surface.current_shape
        calls = []
        with (
            patch.object(stroke, "refresh_rainbow_color", side_effect=lambda: calls.append("refresh")),
            patch.object(stroke, "append_point", side_effect=lambda p: calls.append("append")),
        ):
            self.surface.pointer_move(Point(1, 1))
        self.assertEqual(calls, ["refresh", "append"])

    def test_eraser_uses_erase_color(self):
        self.surface.set_color(QColor("red"))
        self.surface.enable_eraser()
        self._stroke([Point(0, 0), Point(1, 1), Point(2, 2)])
        stroke = self.surface.shapes[0]
        self.assertEqual(stroke.color, QColor(255, 255, 255))
        self.assertFalse(stroke.rainbow)

    def test_eraser_color_is_configurable(self):
        self.surface.erase_color = QColor("gray")
        self.surface.enable_eraser()
        self._stroke([Point(0, 0), Point(1, 1)])
        self.assertEqual(self.surface.shapes[0].color, QColor("gray"))

    def test_mode_change_mid_stroke_keeps_stroke_mode(self):
        self.surface.set_color(QColor("red"))
        self.surface.pointer_down(Point(0, 0))
        self.surface.enable_rainbow()
        self.surface.set_color(QColor("blue"))
        self.surface.pointer_move(Point(1, 1))
        self.surface.pointer_up(Point(2, 2))
        stroke = self.surface.shapes[0]
        self.assertEqual(stroke.color, QColor("red"))
        self.assertFalse(stroke.rainbow)

    def test_stamp_mode_set_mid_stroke(self):
        self.surface.pointer_down(Point(0, 0))
        self.surface.enable_stamp_circle()
        self.surface.pointer_move(Point(1, 1))
        self.surface.pointer_up(Point(2, 2))
        self.assertEqual(len(self.surface.shapes), 1)
        self.assertIsInstance(self.surface.shapes[0], FreehandStroke)
        self.assertEqual(len(self.surface.shapes[0].points), 3)

    def test_idle_move_and_up_are_noops(self):
        self.surface.pointer_move(Point(1, 1))
        self.surface.pointer_up(Point(2, 2))
        self.assertEqual(self.surface.shapes, [])
        self.assertEqual(self.repaints, [])

    def test_down_while_stroking_commits_previous(self):
        self.surface.pointer_down(Point(0, 0))
        self.surface.pointer_move(Point(1, 1))
        first = self.surface.current_shape
        self.surface.pointer_down(Point(5, 5))
        self.assertEqual(self.surface.shapes, [first])
        self.assertIsNot(self.surface.current_shape, first)
        self.surface.pointer_up(Point(6, 6))
        self.assertEqual(len(self.surface.shapes), 2)
        # Both strokes were finished by a release at their last point
        self.assertEqual(self.surface.shapes[0].points, [Point(0, 0), Point(1, 1), Point(1, 1)])

    def test_down_while_stroking_without_moves_commits_two_points(self):
        self.surface.pointer_down(Point(0, 0))
        with self.assertLogs("drawing_surface", level="WARNING"):
            self.surface.pointer_down(Point(5, 5))
        self.assertEqual(len(self.surface.shapes), 1)
        stroke = self.surface.shapes[0]
        self.assertGreaterEqual(len(stroke.points), 2)
        self.assertEqual(stroke.points, [Point(0, 0), Point(0, 0)])
        self.assertEqual(self.surface.current_shape.points, [Point(5, 5)])
        self.assertEqual(self.committed, [stroke])

    def test_render_order_committed_then_in_progress(self):
        self.surface.enable_stamp_square()
        self.surface.pointer_down(Point(0, 0))
        self.surface.enable_stamp_circle()
        self.surface.pointer_down(Point(1, 1))
        self.surface.set_color(QColor("red"))
        self.surface.pointer_down(Point(2, 2))
        self.surface.pointer_move(Point(3, 3))

        context = MagicMock(spec=DrawingContext)
        self.surface.render(context)
        names = [c[0] for c in context.method_calls]
        self.assertEqual(names, ["draw_filled_rectangle", "draw_filled_circle", "draw_polyline"])

    def test_render_is_idempotent(self):
        self.surface.enable_rainbow()
        self._stroke([Point(0, 0), Point(4, 4), Point(8, 0)])
        self.surface.enable_stamp_circle()
        self.surface.pointer_down(Point(20, 20))
        self.surface.set_color(QColor("blue"))
        self.surface.pointer_down(Point(30, 30))
        self.surface.pointer_move(Point(31, 31))

        first = MagicMock(spec=DrawingContext)
        second = MagicMock(spec=DrawingContext)
        self.surface.render(first)
        self.surface.render(second)
        self.assertEqual(first.method_calls, second.method_calls)
        self.assertEqual(len(first.method_calls), 3)

    def test_shapes_property_is_a_copy(self):
        self.surface.enable_stamp_circle()
        self.surface.pointer_down(Point(0, 0))
        self.surface.shapes.clear()
        self.assertEqual(len(self.surface.shapes), 1)


if __name__ == "__main__":
    unittest.main()
