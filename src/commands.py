# Doodle
# Copyright 2025 - Ricardo Quesada

"""Commands that menus and toolbars send to a DrawingSurface."""

import logging
from enum import IntEnum, auto

from PySide6.QtGui import QColor

from drawing_surface import DrawingSurface, DrawMode

logger = logging.getLogger(__name__)


class SurfaceCommand(IntEnum):
    COLOR_RED = auto()
    COLOR_GREEN = auto()
    COLOR_BLUE = auto()

    MODE_RAINBOW = auto()
    MODE_ERASER = auto()
    MODE_STAMP_CIRCLE = auto()
    MODE_STAMP_SQUARE = auto()


COMMAND_COLORS = {
    SurfaceCommand.COLOR_RED: QColor(255, 0, 0),
    SurfaceCommand.COLOR_GREEN: QColor(0, 255, 0),
    SurfaceCommand.COLOR_BLUE: QColor(0, 0, 255),
}

_MODE_COMMANDS = {
    DrawMode.RAINBOW: SurfaceCommand.MODE_RAINBOW,
    DrawMode.ERASER: SurfaceCommand.MODE_ERASER,
    DrawMode.STAMP_CIRCLE: SurfaceCommand.MODE_STAMP_CIRCLE,
    DrawMode.STAMP_SQUARE: SurfaceCommand.MODE_STAMP_SQUARE,
}


def dispatch_command(surface: DrawingSurface, command: SurfaceCommand | int) -> None:
    """
    Applies a command to the surface.

    Args:
        surface: The surface that receives the command.
        command: A SurfaceCommand, or its integer value as stored in QAction.data().
    """
    try:
        command = SurfaceCommand(command)
    except ValueError:
        logger.error(f"dispatch_command: unknown command {command}")
        return

    logger.debug(f"Dispatching {command.name}")
    match command:
        case SurfaceCommand.COLOR_RED | SurfaceCommand.COLOR_GREEN | SurfaceCommand.COLOR_BLUE:
            surface.set_color(COMMAND_COLORS[command])
        case SurfaceCommand.MODE_RAINBOW:
            surface.enable_rainbow()
        case SurfaceCommand.MODE_ERASER:
            surface.enable_eraser()
        case SurfaceCommand.MODE_STAMP_CIRCLE:
            surface.enable_stamp_circle()
        case SurfaceCommand.MODE_STAMP_SQUARE:
            surface.enable_stamp_square()


def command_for_mode(mode: DrawMode) -> SurfaceCommand | None:
    """Returns the command that selects the given mode. Plain drawing has none."""
    return _MODE_COMMANDS.get(mode)
