# Doodle
# Copyright 2025 - Ricardo Quesada

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from PySide6.QtGui import QColor

# Pen width used for freehand strokes, in canvas units.
STROKE_WIDTH = 2


@dataclass(frozen=True)
class Point:
    """Represents a point in 2D space, in surface-local coordinates.

    Using a frozen dataclass makes instances immutable, hashable, and
    provides an __eq__ method automatically.
    """

    x: int
    y: int


class Shape(ABC):
    """An abstract base class for all shape types.

    Every shape has immutable geometry and a mutable color. The color is read
    at render time, so changing it never affects what was already rendered.
    By setting __hash__ = None, we make all subclasses unhashable.
    """

    __hash__ = None

    def __init__(self, color: QColor):
        self._color = QColor(color)

    @abstractmethod
    def __eq__(self, other):
        """All subclasses must implement equality comparison."""
        raise NotImplementedError

    @abstractmethod
    def render(self, context) -> None:
        """Issues the drawing primitive for this shape on a DrawingContext."""
        raise NotImplementedError

    def set_color(self, color: QColor) -> None:
        self._color = QColor(color)

    @property
    def color(self) -> QColor:
        return QColor(self._color)


class Circle(Shape):
    """A filled circle with a fixed center and radius."""

    def __init__(self, center: Point, radius: int, color: QColor):
        super().__init__(color)
        self._center = center
        self._radius = radius

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return (
            self._center == other._center
            and self._radius == other._radius
            and self._color == other._color
        )

    def __repr__(self):
        return f"Circle(center={self._center}, radius={self._radius}, color={self._color.name()})"

    def render(self, context) -> None:
        context.draw_filled_circle(self._center, self._radius, self._color)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> int:
        return self._radius


class Square(Shape):
    """A filled, axis-aligned square anchored at its top-left corner."""

    def __init__(self, top_left: Point, side: int, color: QColor):
        super().__init__(color)
        self._top_left = top_left
        self._side = side

    def __eq__(self, other):
        if not isinstance(other, Square):
            return NotImplemented
        return (
            self._top_left == other._top_left
            and self._side == other._side
            and self._color == other._color
        )

    def __repr__(self):
        return f"Square(top_left={self._top_left}, side={self._side}, color={self._color.name()})"

    def render(self, context) -> None:
        context.draw_filled_rectangle(self._top_left, self._side, self._color)

    @property
    def top_left(self) -> Point:
        return self._top_left

    @property
    def side(self) -> int:
        return self._side


class FreehandStroke(Shape):
    """An append-only sequence of points drawn as one connected polyline.

    When created in rainbow mode, the stroke picks a new random color every
    time refresh_rainbow_color() is called. The whole polyline is drawn with
    the latest color.
    """

    def __init__(self, color: QColor, rainbow: bool = False, rng: random.Random | None = None):
        super().__init__(color)
        self._points: list[Point] = []
        self._rainbow = rainbow
        self._rng = rng if rng is not None else random

    def __eq__(self, other):
        if not isinstance(other, FreehandStroke):
            return NotImplemented
        return (
            self._points == other._points
            and self._color == other._color
            and self._rainbow == other._rainbow
        )

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return (
            f"FreehandStroke(points={len(self._points)}, color={self._color.name()}, "
            f"rainbow={self._rainbow})"
        )

    def append_point(self, point: Point) -> None:
        """Appends a point to the end of the stroke. Duplicates are kept."""
        self._points.append(point)

    def refresh_rainbow_color(self) -> None:
        """Picks a new random color. Does nothing unless the stroke is a rainbow one."""
        if not self._rainbow:
            return
        self._color = QColor(
            self._rng.randint(0, 255),
            self._rng.randint(0, 255),
            self._rng.randint(0, 255),
        )

    def render(self, context) -> None:
        # A single point has no segment to draw
        if len(self._points) <= 1:
            return
        context.draw_polyline(list(self._points), self._color, STROKE_WIDTH)

    @property
    def points(self) -> list[Point]:
        return list(self._points)

    @property
    def rainbow(self) -> bool:
        return self._rainbow
