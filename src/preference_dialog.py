# Doodle
# Copyright 2025 - Ricardo Quesada

import functools
import logging
import sys
from enum import IntEnum, auto
from typing import override

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QApplication,
    QColorDialog,
    QDialog,
    QDialogButtonBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from preferences import get_global_preferences

logger = logging.getLogger(__name__)  # __name__ gets the current module's name

MAX_SHAPE_SIZE = 500


class ColorType(IntEnum):
    DRAW_COLOR = auto()
    ERASE_COLOR = auto()
    CANVAS_BACKGROUND = auto()


class PreferenceDialog(QDialog):
    def __init__(self):
        super().__init__()

        prefs = get_global_preferences()
        self._colors = {
            ColorType.DRAW_COLOR: {"color": QColor(prefs.get_color_name())},
            ColorType.ERASE_COLOR: {"color": QColor(prefs.get_erase_color_name())},
            ColorType.CANVAS_BACKGROUND: {
                "color": QColor(prefs.get_canvas_background_color_name())
            },
        }

        self.setWindowTitle(self.tr("Preference Dialog"))

        # Stamp Properties
        stamp_group_box = QGroupBox(self.tr("Stamps"))
        stamp_hlayout = QHBoxLayout()
        self._shape_size_spinbox = QSpinBox()
        self._shape_size_spinbox.setRange(1, MAX_SHAPE_SIZE)
        self._shape_size_spinbox.setValue(prefs.get_shape_size())
        stamp_hlayout.addWidget(QLabel(self.tr("Circle radius / square side")))
        stamp_hlayout.addWidget(self._shape_size_spinbox)
        stamp_group_box.setLayout(stamp_hlayout)

        # Colors
        color_group_box = QGroupBox(self.tr("Colors"))
        color_vlayout = QVBoxLayout()
        labels = {
            ColorType.DRAW_COLOR: self.tr("Initial draw color"),
            ColorType.ERASE_COLOR: self.tr("Eraser color"),
            ColorType.CANVAS_BACKGROUND: self.tr("Canvas background color"),
        }
        for color_type, text in labels.items():
            hlayout = QHBoxLayout()
            label = QLabel(text)
            button = QPushButton()
            button.clicked.connect(functools.partial(self._on_choose_color, color_type))
            hlayout.addWidget(label)
            hlayout.addWidget(button)
            self._colors[color_type]["label"] = label
            self._colors[color_type]["button"] = button
            self._update_color_label(color_type)
            color_vlayout.addLayout(hlayout)
        color_group_box.setLayout(color_vlayout)

        # Buttons
        self._button_box = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel | QDialogButtonBox.Apply
        )
        self._button_box.accepted.connect(self.accept)
        self._button_box.rejected.connect(self.reject)
        self._button_box.clicked.connect(self._on_buttonbox_button_clicked)

        # Main layout
        main_layout = QVBoxLayout()
        main_layout.addWidget(stamp_group_box)
        main_layout.addWidget(color_group_box)
        main_layout.addWidget(self._button_box)

        self.setLayout(main_layout)

    def _apply(self) -> None:
        prefs = get_global_preferences()
        prefs.set_shape_size(self._shape_size_spinbox.value())
        prefs.set_color_name(self._colors[ColorType.DRAW_COLOR]["color"].name(QColor.HexArgb))
        prefs.set_erase_color_name(
            self._colors[ColorType.ERASE_COLOR]["color"].name(QColor.HexArgb)
        )
        prefs.set_canvas_background_color_name(
            self._colors[ColorType.CANVAS_BACKGROUND]["color"].name(QColor.HexArgb)
        )

    def _update_color_label(self, color_type: ColorType):
        self._colors[color_type]["button"].setStyleSheet(
            f"background-color: {self._colors[color_type]['color'].name()};"
        )
        self._colors[color_type]["button"].setText(
            self._colors[color_type]["color"].name(QColor.HexArgb)
        )

    @override
    def accept(self) -> None:
        self._apply()
        super().accept()

    @Slot()
    def _on_buttonbox_button_clicked(self, button: QPushButton):
        # Ignore "Cancel" and "Ok" which have their own slots
        if button == self._button_box.button(QDialogButtonBox.Apply):
            self._apply()

    @Slot()
    def _on_choose_color(self, color_type: ColorType):
        color = QColorDialog.getColor(self._colors[color_type]["color"], self)
        if color.isValid():
            self._colors[color_type]["color"] = color
            self._update_color_label(color_type)
        else:
            logger.debug(f"Color selection cancelled for {color_type.name}")


if __name__ == "__main__":
    app = QApplication(sys.argv)
    dialog = PreferenceDialog()
    if dialog.exec() == QDialog.Accepted:
        print("Dialog was accepted")
    sys.exit(0)
