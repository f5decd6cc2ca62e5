# Doodle
# Copyright 2025 - Ricardo Quesada
import logging
import typing

from PySide6.QtCore import QObject, QSettings, Signal

from drawing_surface import DEFAULT_SHAPE_SIZE

logger = logging.getLogger(__name__)


class Preferences(QObject):
    STATE_VERSION = 1

    shape_size_changed = Signal(int)
    erase_color_changed = Signal(str)
    canvas_background_color_changed = Signal(str)

    def __init__(self):
        super().__init__()
        self._settings = QSettings()

    def get_window_geometry(self) -> typing.Any:
        return self._settings.value("main_window/window_geometry", defaultValue=None)

    def get_window_state(self) -> typing.Any:
        return self._settings.value("main_window/window_state", defaultValue=None)

    def set_window_geometry(self, geometry: typing.Any) -> None:
        self._settings.setValue("main_window/window_geometry", geometry)

    def set_window_state(self, state: typing.Any) -> None:
        self._settings.setValue("main_window/window_state", state)

    def get_default_window_geometry(self) -> typing.Any:
        return self._settings.value("main_window/default_window_geometry", defaultValue=None)

    def get_default_window_state(self) -> typing.Any:
        return self._settings.value("main_window/default_window_state", defaultValue=None)

    def set_default_window_geometry(self, geometry: typing.Any) -> None:
        self._settings.setValue("main_window/default_window_geometry", geometry)

    def set_default_window_state(self, state: typing.Any) -> None:
        self._settings.setValue("main_window/default_window_state", state)

    def get_shape_size(self) -> int:
        value = self._settings.value("drawing/shape_size", defaultValue=DEFAULT_SHAPE_SIZE)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid shape size in settings: {value}. Using default")
            return DEFAULT_SHAPE_SIZE

    def set_shape_size(self, size: int) -> None:
        current = self.get_shape_size()
        if current != size:
            self._settings.setValue("drawing/shape_size", size)
            self.shape_size_changed.emit(size)

    def get_color_name(self) -> str:
        return str(self._settings.value("drawing/color", defaultValue="#ff000000"))

    def set_color_name(self, color: str) -> None:
        self._settings.setValue("drawing/color", color)

    def get_erase_color_name(self) -> str:
        return str(self._settings.value("drawing/erase_color", defaultValue="#ffffffff"))

    def set_erase_color_name(self, color: str) -> None:
        current = self.get_erase_color_name()
        if current != color:
            self._settings.setValue("drawing/erase_color", color)
            self.erase_color_changed.emit(color)

    def get_canvas_background_color_name(self) -> str:
        return str(self._settings.value("canvas/background_color", defaultValue="#ffffffff"))

    def set_canvas_background_color_name(self, color: str) -> None:
        current = self.get_canvas_background_color_name()
        if current != color:
            self._settings.setValue("canvas/background_color", color)
            self.canvas_background_color_changed.emit(color)


_global_preferences = None


# Singleton
def get_global_preferences() -> Preferences:
    # Using a function to return the global instance so that we can delay
    # the creation of QSettings() after QApplication.setOrganizationName() is called
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = Preferences()
    return _global_preferences
