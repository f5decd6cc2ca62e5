# Doodle
# Copyright 2024 Ricardo Quesada

"""The main canvas widget for the application."""

import logging
from typing import override

from PySide6.QtCore import QSize, Qt, Signal, Slot
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPaintDevice, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from drawing_context import QPainterDrawingContext
from drawing_surface import DrawingSurface
from preferences import get_global_preferences
from shape import Point

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_SIZE = QSize(800, 600)


class Canvas(QWidget):
    """
    The drawing area of the Doodle application.

    It forwards left-button mouse events to a DrawingSurface and paints the
    surface every time it asks for a repaint.
    """

    position_changed = Signal(Point)

    def __init__(self, surface: DrawingSurface):
        """
        Initializes the Canvas.

        Args:
            surface: The drawing surface to edit and display.
        """
        super().__init__()
        self._surface = None

        preferences = get_global_preferences()
        self._cached_background_color = QColor(preferences.get_canvas_background_color_name())
        preferences.canvas_background_color_changed.connect(
            self._on_canvas_background_color_changed
        )

        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.surface = surface

    def _paint_to_device(self, device: QPaintDevice) -> None:
        """
        Renders the background and the surface to a QPaintDevice.

        Args:
            device: The QPaintDevice to render to.
        """
        painter = QPainter(device)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        context = QPainterDrawingContext(painter)
        context.fill_background(self._cached_background_color)
        if self._surface is not None:
            self._surface.render(context)
        painter.end()

    @staticmethod
    def _event_point(event: QMouseEvent) -> Point:
        pos = event.position()
        return Point(int(pos.x()), int(pos.y()))

    #
    # Slots
    #
    @Slot()
    def _on_repaint_requested(self):
        self.update()

    @Slot(str)
    def _on_canvas_background_color_changed(self, color: str):
        self._cached_background_color = QColor(color)
        self.update()

    #
    # Pyside6 events
    #
    @override
    def paintEvent(self, event: QPaintEvent) -> None:
        self._paint_to_device(self)

    @override
    def mousePressEvent(self, event: QMouseEvent):
        if self._surface is None or event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        event.accept()
        self._surface.pointer_down(self._event_point(event))

    @override
    def mouseMoveEvent(self, event: QMouseEvent):
        point = self._event_point(event)
        self.position_changed.emit(point)
        if self._surface is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            event.ignore()
            return
        event.accept()
        self._surface.pointer_move(point)

    @override
    def mouseReleaseEvent(self, event: QMouseEvent):
        if self._surface is None or event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        event.accept()
        self._surface.pointer_up(self._event_point(event))

    @override
    def sizeHint(self) -> QSize:
        return DEFAULT_CANVAS_SIZE

    #
    # Public
    #
    def render_to_qimage(self) -> QImage:
        """
        Renders the canvas to a QImage the size of the widget.

        Returns:
            The rendered QImage.
        """
        size = self.size() if not self.size().isEmpty() else self.sizeHint()
        qimage = QImage(size, QImage.Format.Format_ARGB32)
        self._paint_to_device(qimage)
        return qimage

    @property
    def surface(self) -> DrawingSurface | None:
        """The drawing surface shown by the canvas."""
        return self._surface

    @surface.setter
    def surface(self, value: DrawingSurface | None) -> None:
        if self._surface is not None:
            self._surface.repaint_requested.disconnect(self._on_repaint_requested)
        self._surface = value
        if self._surface is not None:
            self._surface.repaint_requested.connect(self._on_repaint_requested)
        self.update()
