"""
GUI package for Livshjulet.

PyQt6-based interface around the life wheel.
"""

from lifewheel.gui.main_window import MainWindow
from lifewheel.gui.error_boundary import ErrorBoundary

__all__ = ["MainWindow", "ErrorBoundary"]
