# Doodle
# Copyright 2025 - Ricardo Quesada

"""Drawing primitives used by shapes to render themselves."""

from abc import ABC, abstractmethod
from typing import override

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen

from shape import Point


class DrawingContext(ABC):
    """
    The set of primitives a shape can issue when rendered.

    Shapes never talk to a painter directly; they call into a DrawingContext
    so the surface can be rendered on any backend.
    """

    @abstractmethod
    def draw_filled_circle(self, center: Point, radius: int, color: QColor) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_filled_rectangle(self, top_left: Point, size: int, color: QColor) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_polyline(self, points: list[Point], color: QColor, width: int) -> None:
        raise NotImplementedError


class QPainterDrawingContext(DrawingContext):
    """A DrawingContext that draws with an active QPainter."""

    def __init__(self, painter: QPainter):
        self._painter = painter

    def fill_background(self, color: QColor) -> None:
        """Fills the whole paint device with the given color."""
        device = self._painter.device()
        self._painter.fillRect(QRectF(0, 0, device.width(), device.height()), color)

    @override
    def draw_filled_circle(self, center: Point, radius: int, color: QColor) -> None:
        painter = self._painter
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(color, Qt.BrushStyle.SolidPattern))
        painter.drawEllipse(QPointF(center.x, center.y), radius, radius)
        painter.restore()

    @override
    def draw_filled_rectangle(self, top_left: Point, size: int, color: QColor) -> None:
        painter = self._painter
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(color, Qt.BrushStyle.SolidPattern))
        painter.drawRect(QRectF(top_left.x, top_left.y, size, size))
        painter.restore()

    @override
    def draw_polyline(self, points: list[Point], color: QColor, width: int) -> None:
        if len(points) < 2:
            return
        painter = self._painter
        painter.save()
        pen = QPen(
            color,
            width,
            Qt.PenStyle.SolidLine,
            Qt.PenCapStyle.RoundCap,
            Qt.PenJoinStyle.RoundJoin,
        )
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPolyline([QPointF(p.x, p.y) for p in points])
        painter.restore()
