"""
Integration tests for the main window and error boundary.
"""

import sys

from PyQt6.QtWidgets import QLabel, QWidget

from lifewheel.gui import MainWindow, ErrorBoundary
from lifewheel.utils import WidgetInitializationFault


class TestErrorBoundary:
    """Test fallback on initialization faults."""

    def test_child_built(self, qapp):
        """Test a working factory shows its widget."""
        label = QLabel("ok")
        boundary = ErrorBoundary(lambda: label)

        assert not boundary.has_error
        assert boundary.child is label
        assert boundary.fallback_text() is None

    def test_fallback_on_fault(self, qapp):
        """Test a failing factory shows the static fallback message."""
        def broken():
            raise RuntimeError("no render surface")

        boundary = ErrorBoundary(broken)

        assert boundary.has_error
        assert boundary.child is None
        assert boundary.fallback_text() == "Det oppstod en feil."
        assert isinstance(boundary.error, WidgetInitializationFault)

    def test_fallback_on_paint_fault(self, qapp):
        """Test a widget that fails on its first paint is replaced by the fallback."""
        disposed = []

        class UnpaintableWidget(QWidget):
            def paintEvent(self, event):
                raise RuntimeError("paint device lost")

            def dispose(self):
                disposed.append(True)

        boundary = ErrorBoundary(UnpaintableWidget)

        assert boundary.has_error
        assert boundary.child is None
        assert boundary.fallback_text() == "Det oppstod en feil."
        assert isinstance(boundary.error, WidgetInitializationFault)
        assert "paint device lost" in str(boundary.error)
        assert disposed == [True]

    def test_excepthook_restored(self, qapp):
        """Test the first paint leaves the interpreter's exception hook in place."""
        hook = sys.excepthook

        ErrorBoundary(lambda: QLabel("ok"))

        assert sys.excepthook is hook


class TestMainWindow:
    """Test the main window."""

    def test_window_hosts_wheel(self, settings):
        """Test the window title and that the wheel was built."""
        window = MainWindow(settings=settings)
        window.show()

        assert window.windowTitle() == "Livshjulet"
        assert window.life_wheel is not None
        assert len(window.life_wheel.categories) == 8

        window.close()
        window.deleteLater()

    def test_close_saves_geometry(self, settings):
        """Test closing disposes the wheel and saves window settings."""
        window = MainWindow(settings=settings)
        window.show()
        wheel = window.life_wheel

        window.close()

        assert wheel.is_disposed()
        assert settings.settings_file.exists()
        window.deleteLater()

    def test_reset_settings_action(self, settings):
        """Test the menu action restores defaults and applies them to the wheel."""
        window = MainWindow(settings=settings)
        settings.set_setting("buttons", "copy_label", "Kopier")
        assert window.life_wheel.copy_button.text() == "Kopier"

        window._reset_settings_action.trigger()

        assert settings.buttons.copy_label == "Kopier til utklippstavle"
        assert window.life_wheel.copy_button.text() == "Kopier til utklippstavle"
        assert settings.settings_file.exists()

        window.close()
        window.deleteLater()
