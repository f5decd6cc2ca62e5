#!/usr/bin/env python3
# Doodle
# Copyright 2024 Ricardo Quesada

import logging
import sys

from PySide6.QtWidgets import QApplication

from main_window import MainWindow

logger = logging.getLogger(__name__)  # __name__ gets the current module's name


def main():
    # Configure logging (do this once, ideally at the start of your application)
    logging.basicConfig(
        # filename="doodle.log",
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",  # Customize the date format
    )

    app = QApplication(sys.argv)
    # Must be set before the preferences singleton creates its QSettings
    app.setApplicationName("Doodle")
    app.setApplicationDisplayName("Interactive Paint App")
    app.setOrganizationName("RetroMoe")
    app.setOrganizationDomain("retro.moe")
    logger.info("Starting Doodle")

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
