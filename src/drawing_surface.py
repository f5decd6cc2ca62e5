# Doodle
# Copyright 2025 - Ricardo Quesada

import logging
from enum import IntEnum, auto

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor

from shape import Circle, FreehandStroke, Point, Shape, Square

logger = logging.getLogger(__name__)

DEFAULT_SHAPE_SIZE = 50
DEFAULT_COLOR = QColor(0, 0, 0)
DEFAULT_ERASE_COLOR = QColor(255, 255, 255)


class DrawMode(IntEnum):
    """What a pointer-down creates. Exactly one mode is active at a time."""

    PLAIN = auto()
    RAINBOW = auto()
    ERASER = auto()
    STAMP_CIRCLE = auto()
    STAMP_SQUARE = auto()


class SurfaceStatus(IntEnum):
    IDLE = auto()
    STROKING = auto()


class DrawingSurface(QObject):
    """
    Owns the shapes drawn by the user and the mode they are drawn with.

    Shapes are committed in the order they were created and are never removed
    or reordered. A freehand stroke lives in `current_shape` between a
    pointer-down and its pointer-up, then it is moved into the committed list.
    Stamped circles and squares are committed on pointer-down.
    """

    # Triggered after every change that alters what render() would draw.
    repaint_requested = Signal()
    # Triggered when a shape enters the committed list.
    shape_committed = Signal(object)
    # Triggered when a setter selects a different mode.
    mode_changed = Signal(DrawMode)

    def __init__(
        self,
        color: QColor = DEFAULT_COLOR,
        shape_size: int = DEFAULT_SHAPE_SIZE,
        erase_color: QColor = DEFAULT_ERASE_COLOR,
    ):
        super().__init__()
        self._shapes: list[Shape] = []
        self._current_shape: FreehandStroke | None = None
        self._color = QColor(color)
        self._erase_color = QColor(erase_color)
        self._shape_size = shape_size
        self._mode = DrawMode.PLAIN

    #
    # Pointer events
    #
    def pointer_down(self, point: Point) -> None:
        if self._current_shape is not None:
            # The host lost the release event. Finish the dangling stroke as a
            # release at its last point would.
            logger.warning("pointer_down while stroking. Committing the previous stroke")
            self.pointer_up(self._current_shape.points[-1])

        match self._mode:
            case DrawMode.STAMP_CIRCLE:
                self._commit(Circle(point, self._shape_size, self._color))
            case DrawMode.STAMP_SQUARE:
                self._commit(Square(point, self._shape_size, self._color))
            case DrawMode.ERASER:
                self._current_shape = FreehandStroke(self._erase_color, rainbow=False)
                self._current_shape.append_point(point)
            case _:
                self._current_shape = FreehandStroke(
                    self._color, rainbow=self._mode == DrawMode.RAINBOW
                )
                self._current_shape.append_point(point)
        self.repaint_requested.emit()

    def pointer_move(self, point: Point) -> None:
        if self._current_shape is None:
            return
        self._current_shape.refresh_rainbow_color()
        self._current_shape.append_point(point)
        self.repaint_requested.emit()

    def pointer_up(self, point: Point) -> None:
        if self._current_shape is None:
            return
        self._current_shape.append_point(point)
        self._commit(self._current_shape)
        self._current_shape = None
        self.repaint_requested.emit()

    def render(self, context) -> None:
        """Renders the committed shapes in order, then the stroke in progress, if any."""
        for shape in self._shapes:
            shape.render(context)
        if self._current_shape is not None:
            self._current_shape.render(context)

    #
    # Mode setters
    #
    def set_color(self, color: QColor) -> None:
        """Sets the draw color and goes back to plain drawing."""
        if QColor(color).isValid():
            self._color = QColor(color)
        else:
            logger.warning(f"set_color: ignoring invalid color {color}. Keeping the current one")
        self._set_mode(DrawMode.PLAIN)

    def enable_rainbow(self) -> None:
        self._set_mode(DrawMode.RAINBOW)

    def enable_eraser(self) -> None:
        self._set_mode(DrawMode.ERASER)

    def enable_stamp_circle(self) -> None:
        self._set_mode(DrawMode.STAMP_CIRCLE)

    def enable_stamp_square(self) -> None:
        self._set_mode(DrawMode.STAMP_SQUARE)

    #
    # Properties
    #
    @property
    def shapes(self) -> list[Shape]:
        return list(self._shapes)

    @property
    def current_shape(self) -> FreehandStroke | None:
        return self._current_shape

    @property
    def status(self) -> SurfaceStatus:
        if self._current_shape is None:
            return SurfaceStatus.IDLE
        return SurfaceStatus.STROKING

    @property
    def mode(self) -> DrawMode:
        return self._mode

    @property
    def color(self) -> QColor:
        return QColor(self._color)

    @property
    def shape_size(self) -> int:
        return self._shape_size

    @shape_size.setter
    def shape_size(self, size: int) -> None:
        self._shape_size = size

    @property
    def erase_color(self) -> QColor:
        return QColor(self._erase_color)

    @erase_color.setter
    def erase_color(self, color: QColor) -> None:
        self._erase_color = QColor(color)

    #
    # Private
    #
    def _set_mode(self, mode: DrawMode) -> None:
        if self._mode == mode:
            return
        logger.debug(f"Mode changed: {self._mode.name} -> {mode.name}")
        self._mode = mode
        self.mode_changed.emit(mode)

    def _commit(self, shape: Shape) -> None:
        self._shapes.append(shape)
        logger.debug(f"Committed {shape}. Total shapes: {len(self._shapes)}")
        self.shape_committed.emit(shape)
