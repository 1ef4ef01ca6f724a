"""
Main window for Livshjulet.

Single-page layout:
- Header: title and short instructions
- Body: the life wheel, wrapped in an error boundary
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QLabel,
    QMessageBox,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence

from lifewheel.core.settings import Settings, get_settings
from lifewheel.gui.error_boundary import ErrorBoundary
from lifewheel.gui.widgets.life_wheel import LifeWheelWidget


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level Livshjulet window."""

    TITLE = "Livshjulet"
    INSTRUCTIONS = (
        "Pek på et felt og klikk for å sette en verdi fra 0 til 10. "
        "Jo lenger ut fra midten, desto høyere verdi."
    )

    def __init__(self, settings: Optional[Settings] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._settings = settings or get_settings()

        self.setWindowTitle(self.TITLE)
        self.setMinimumSize(600, 700)
        self._restore_geometry()

        self._init_ui()
        self._init_menu_bar()

        logger.info("Main window created")

    def _init_ui(self) -> None:
        """Build the central widget."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.setSpacing(12)

        title = QLabel(self.TITLE)
        title.setStyleSheet("font-size: 22pt; font-weight: bold;")
        title.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(title)

        instructions = QLabel(self.INSTRUCTIONS)
        instructions.setWordWrap(True)
        instructions.setStyleSheet("color: #6b7280;")
        instructions.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(instructions)

        self._boundary = ErrorBoundary(lambda: LifeWheelWidget(settings=self._settings))
        layout.addWidget(self._boundary, 1)

        self.setCentralWidget(central)

    def _init_menu_bar(self) -> None:
        """Initialize the menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&Fil")

        self._reset_action = QAction("&Nullstill hjulet", self)
        self._reset_action.setShortcut(QKeySequence("Ctrl+R"))
        self._reset_action.setStatusTip("Sett alle verdier tilbake til 0")
        self._reset_action.triggered.connect(self._on_reset)
        self._reset_action.setEnabled(self.life_wheel is not None)
        file_menu.addAction(self._reset_action)

        self._reset_settings_action = QAction("Tilbakestill &innstillinger", self)
        self._reset_settings_action.setStatusTip("Gjenopprett standardinnstillinger for hjulet og knappene")
        self._reset_settings_action.triggered.connect(self._on_reset_settings)
        file_menu.addAction(self._reset_settings_action)

        file_menu.addSeparator()

        self._exit_action = QAction("&Avslutt", self)
        self._exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        self._exit_action.triggered.connect(self.close)
        file_menu.addAction(self._exit_action)

        help_menu = menu_bar.addMenu("&Hjelp")
        about_action = QAction("&Om Livshjulet", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    @property
    def life_wheel(self) -> Optional[LifeWheelWidget]:
        """The life wheel, or None if it failed to initialize."""
        return self._boundary.child

    # =========================================================================
    # Actions
    # =========================================================================

    def _on_reset(self) -> None:
        if self.life_wheel is not None:
            self.life_wheel.reset()

    def _on_reset_settings(self) -> None:
        for category in ("wheel", "export", "buttons"):
            self._settings.reset_to_defaults(category)
        self._settings.save()

    def _on_about(self) -> None:
        from lifewheel import __version__
        QMessageBox.about(
            self,
            "Om Livshjulet",
            f"<h3>Livshjulet {__version__}</h3>"
            "<p>Vurder åtte livsområder på en skala fra 0 til 10, "
            "og last ned eller kopier hjulet som bilde.</p>",
        )

    # =========================================================================
    # Window Geometry
    # =========================================================================

    def _restore_geometry(self) -> None:
        window = self._settings.window
        self.setGeometry(
            window.window_x, window.window_y,
            window.window_width, window.window_height
        )
        if window.window_maximized:
            self.showMaximized()

    def _save_geometry(self) -> None:
        window = self._settings.window
        window.window_maximized = self.isMaximized()
        if not self.isMaximized():
            geometry = self.geometry()
            window.window_x = geometry.x()
            window.window_y = geometry.y()
            window.window_width = geometry.width()
            window.window_height = geometry.height()
        self._settings.save()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def closeEvent(self, event) -> None:
        """Handle window close event."""
        if self.life_wheel is not None:
            self.life_wheel.dispose()
        self._save_geometry()
        event.accept()
