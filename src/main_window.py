# Doodle
# Copyright 2024 Ricardo Quesada

import logging
import sys

from PySide6.QtCore import QSize, Slot
from PySide6.QtGui import QAction, QActionGroup, QCloseEvent, QColor, QIcon, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QMenu,
    QStatusBar,
    QToolBar,
)

from about_dialog import AboutDialog
from canvas import Canvas
from commands import SurfaceCommand, command_for_mode, dispatch_command
from drawing_surface import DEFAULT_COLOR, DEFAULT_ERASE_COLOR, DrawingSurface, DrawMode
from preference_dialog import PreferenceDialog
from preferences import get_global_preferences
from shape import Point, Shape

logger = logging.getLogger(__name__)  # __name__ gets the current module's name

ICON_SIZE = 22

MODE_NAMES = {
    DrawMode.PLAIN: "Draw",
    DrawMode.RAINBOW: "Rainbow Brush",
    DrawMode.ERASER: "Eraser",
    DrawMode.STAMP_CIRCLE: "Draw Circle",
    DrawMode.STAMP_SQUARE: "Draw Square",
}


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()

        self._surface = self._create_surface()
        self._setup_ui()
        self._connect_surface()

        self._save_default_settings()
        self._load_settings()

        prefs = get_global_preferences()
        prefs.shape_size_changed.connect(self._on_shape_size_changed_from_preferences)
        prefs.erase_color_changed.connect(self._on_erase_color_changed_from_preferences)

        self.setWindowTitle("Interactive Paint App")
        self._update_statusbar()

    def _setup_ui(self):
        self._setup_menu()
        self._setup_toolbar()
        self._setup_central_widget()
        self._setup_statusbar()

    def _setup_menu(self):
        menu_bar = self.menuBar()
        file_menu = QMenu(self.tr("&File"), self)
        menu_bar.addMenu(file_menu)

        self._new_action = QAction(QIcon.fromTheme("document-new"), self.tr("New Drawing"), self)
        self._new_action.setShortcut(QKeySequence("Ctrl+N"))
        self._new_action.triggered.connect(self._on_new_drawing)
        file_menu.addAction(self._new_action)

        file_menu.addSeparator()

        self._exit_action = QAction(QIcon.fromTheme("application-exit"), self.tr("Exit"), self)
        self._exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        self._exit_action.triggered.connect(self._on_exit_application)
        file_menu.addAction(self._exit_action)

        edit_menu = QMenu(self.tr("&Edit"), self)
        menu_bar.addMenu(edit_menu)

        self._preferences_action = QAction(
            QIcon.fromTheme("preferences-system"), self.tr("&Preferences"), self
        )
        self._preferences_action.triggered.connect(self._on_preferences)
        edit_menu.addAction(self._preferences_action)

        view_menu = QMenu(self.tr("&View"), self)
        menu_bar.addMenu(view_menu)

        self._reset_layout_action = QAction(self.tr("Reset Layout"), self)
        self._reset_layout_action.triggered.connect(self._on_reset_layout)
        view_menu.addAction(self._reset_layout_action)

        color_menu = QMenu(self.tr("&Colors"), self)
        menu_bar.addMenu(color_menu)

        colors = [
            (SurfaceCommand.COLOR_RED, self.tr("Red")),
            (SurfaceCommand.COLOR_GREEN, self.tr("Green")),
            (SurfaceCommand.COLOR_BLUE, self.tr("Blue")),
        ]
        self._color_actions = {}
        for command, text in colors:
            action = QAction(text, self)
            action.setData(command)
            action.triggered.connect(self._on_surface_command)
            self._color_actions[command] = action
            color_menu.addAction(action)

        mode_menu = QMenu(self.tr("Fun &Modes"), self)
        menu_bar.addMenu(mode_menu)

        modes = [
            (SurfaceCommand.MODE_RAINBOW, self.tr("Rainbow Brush")),
            (SurfaceCommand.MODE_ERASER, self.tr("Eraser")),
            (SurfaceCommand.MODE_STAMP_CIRCLE, self.tr("Draw Circle")),
            (SurfaceCommand.MODE_STAMP_SQUARE, self.tr("Draw Square")),
        ]
        # Plain drawing has no entry, so no action is checked while it is active
        self._mode_action_group = QActionGroup(self)
        self._mode_action_group.setExclusionPolicy(
            QActionGroup.ExclusionPolicy.ExclusiveOptional
        )
        self._mode_actions = {}
        for command, text in modes:
            action = QAction(text, self)
            action.setCheckable(True)
            action.setData(command)
            action.triggered.connect(self._on_surface_command)
            self._mode_action_group.addAction(action)
            self._mode_actions[command] = action
            mode_menu.addAction(action)

        help_menu = QMenu(self.tr("&Help"), self)
        menu_bar.addMenu(help_menu)

        self.about_action = QAction(self.tr("About"), self)
        self.about_action.triggered.connect(self._on_show_about_dialog)
        help_menu.addAction(self.about_action)

    def _setup_toolbar(self):
        self._toolbar = QToolBar(self.tr("Tools"))
        self._toolbar.setObjectName("main_window_toolbar")
        self._toolbar.setIconSize(QSize(ICON_SIZE, ICON_SIZE))
        self.addToolBar(self._toolbar)

        self._toolbar.addAction(self._new_action)
        self._toolbar.addSeparator()

        for action in self._color_actions.values():
            self._toolbar.addAction(action)
        self._toolbar.addSeparator()

        for action in self._mode_actions.values():
            self._toolbar.addAction(action)

    def _setup_central_widget(self):
        self._canvas = Canvas(self._surface)
        self._canvas.position_changed.connect(self._on_position_changed_from_canvas)
        self.setCentralWidget(self._canvas)

    def _setup_statusbar(self):
        # Status Bar
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._mode_label = QLabel()
        self._total_shapes_label = QLabel()
        self._position_label = QLabel()
        self._statusbar.addPermanentWidget(self._mode_label)
        self._statusbar.addPermanentWidget(self._total_shapes_label)
        self._statusbar.addPermanentWidget(self._position_label)

    def _update_statusbar(self):
        self._mode_label.setText(self.tr(f"Mode: {MODE_NAMES[self._surface.mode]}"))
        self._total_shapes_label.setText(self.tr(f"Total Shapes: {len(self._surface.shapes)}"))

    def _update_mode_actions(self):
        checked = command_for_mode(self._surface.mode)
        for command, action in self._mode_actions.items():
            action.setChecked(command == checked)

    def _create_surface(self) -> DrawingSurface:
        prefs = get_global_preferences()
        return DrawingSurface(
            color=self._valid_color(prefs.get_color_name(), DEFAULT_COLOR),
            shape_size=prefs.get_shape_size(),
            erase_color=self._valid_color(prefs.get_erase_color_name(), DEFAULT_ERASE_COLOR),
        )

    @staticmethod
    def _valid_color(name: str, default: QColor) -> QColor:
        color = QColor(name)
        if not color.isValid():
            logger.warning(f"Invalid color in preferences: {name}. Using default")
            return QColor(default)
        return color

    def _connect_surface(self):
        self._surface.mode_changed.connect(self._on_mode_changed_from_surface)
        self._surface.shape_committed.connect(self._on_shape_committed_from_surface)

    def _cleanup_surface(self):
        self._surface.mode_changed.disconnect(self._on_mode_changed_from_surface)
        self._surface.shape_committed.disconnect(self._on_shape_committed_from_surface)

    def _load_settings(self):
        prefs = get_global_preferences()
        geometry = prefs.get_window_geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)
        state = prefs.get_window_state()
        if state is not None:
            self.restoreState(state)

    def _save_default_settings(self):
        # Save defaults before restoring saved settings. needed for "reset layout"
        prefs = get_global_preferences()
        prefs.set_default_window_geometry(self.saveGeometry())
        prefs.set_default_window_state(self.saveState(prefs.STATE_VERSION))

    def _save_settings(self):
        prefs = get_global_preferences()
        prefs.set_window_geometry(self.saveGeometry())
        prefs.set_window_state(self.saveState(prefs.STATE_VERSION))

    #
    # pyside6 events
    #
    def closeEvent(self, event: QCloseEvent):
        logger.info("Closing Doodle")
        self._save_settings()
        super().closeEvent(event)

    #
    # Slots (callbacks, events):
    #
    @Slot()
    def _on_new_drawing(self) -> None:
        logger.info(f"New drawing. Discarding {len(self._surface.shapes)} shapes")
        self._cleanup_surface()
        self._surface = self._create_surface()
        self._connect_surface()
        self._canvas.surface = self._surface
        self._update_mode_actions()
        self._update_statusbar()

    @Slot()
    def _on_exit_application(self) -> None:
        QApplication.quit()

    @Slot()
    def _on_preferences(self) -> None:
        dialog = PreferenceDialog()
        dialog.exec()

    @Slot()
    def _on_reset_layout(self) -> None:
        prefs = get_global_preferences()
        geometry = prefs.get_default_window_geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)
        state = prefs.get_default_window_state()
        if state is not None:
            self.restoreState(state)

    @Slot()
    def _on_show_about_dialog(self) -> None:
        dialog = AboutDialog()
        dialog.exec()

    @Slot()
    def _on_surface_command(self) -> None:
        s = self.sender()
        dispatch_command(self._surface, s.data())
        # A checked mode entry can be unchecked by the user. Re-sync with the surface.
        self._update_mode_actions()

    @Slot(object)
    def _on_mode_changed_from_surface(self, mode: DrawMode):
        self._update_mode_actions()
        self._update_statusbar()

    @Slot(object)
    def _on_shape_committed_from_surface(self, shape: Shape):
        self._update_statusbar()

    @Slot(object)
    def _on_position_changed_from_canvas(self, point: Point):
        self._position_label.setText(f"X: {point.x}, Y: {point.y}")

    @Slot(int)
    def _on_shape_size_changed_from_preferences(self, size: int):
        self._surface.shape_size = size

    @Slot(str)
    def _on_erase_color_changed_from_preferences(self, color: str):
        self._surface.erase_color = self._valid_color(color, DEFAULT_ERASE_COLOR)


if __name__ == "__main__":
    app = QApplication(sys.argv)
    app.setApplicationName("Doodle")
    app.setOrganizationName("RetroMoe")
    app.setOrganizationDomain("retro.moe")
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
