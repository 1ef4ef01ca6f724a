"""
Main entry point for Livshjulet.

This module provides the main() function that launches the PyQt6 GUI application.
"""

import sys

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt


def main():
    """
    Main entry point for Livshjulet.

    Sets up logging, creates the application and shows the main window.
    """
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.Round
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Livshjulet")
    app.setApplicationVersion("1.0.0")
    app.setOrganizationName("Livshjulet")

    from lifewheel.utils import setup_logging
    setup_logging()

    # Import after logging so module loggers pick up the handlers
    from lifewheel.gui import MainWindow

    main_window = MainWindow()
    main_window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
