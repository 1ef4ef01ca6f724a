"""
Error boundary for Livshjulet widgets.

Builds a child widget from a factory and renders it once off-screen. If
either construction or that first paint fails, a static fallback message
is shown in its place instead of letting the fault take down the window.
Faults raised by later repaints are not caught here.
"""

import logging
import sys
from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel

from lifewheel.utils.error_handler import LifeWheelError, WidgetInitializationFault


logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_MESSAGE = WidgetInitializationFault.user_message


class ErrorBoundary(QWidget):
    """
    Container that isolates initialization faults of its child.

    Example:
        boundary = ErrorBoundary(lambda: LifeWheelWidget())
        if boundary.has_error:
            ...
    """

    def __init__(
        self,
        factory: Callable[[], QWidget],
        fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
        parent: Optional[QWidget] = None,
    ):
        """
        Initialize the boundary and build its child.

        Args:
            factory: Callable building the child widget
            fallback_message: Text shown when the child cannot be built
            parent: Parent widget
        """
        super().__init__(parent)
        self._child: Optional[QWidget] = None
        self._error: Optional[BaseException] = None

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

        try:
            self._child = factory()
        except Exception as e:
            self._error = e
            logger.exception(f"Widget initialization failed: {e}")

        if self._child is not None:
            fault = self._first_paint(self._child)
            if fault is not None:
                self._error = fault
                logger.error(
                    f"Widget failed to paint: {fault}",
                    exc_info=(type(fault), fault, fault.__traceback__),
                )
                dispose = getattr(self._child, "dispose", None)
                if callable(dispose):
                    dispose()
                self._child.deleteLater()
                self._child = None

        if self._child is not None:
            self._layout.addWidget(self._child)
        else:
            self._fallback = QLabel(fallback_message)
            self._fallback.setObjectName("errorBoundaryFallback")
            self._fallback.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._fallback.setStyleSheet("color: #b91c1c; font-size: 14pt;")
            self._layout.addWidget(self._fallback)

    @staticmethod
    def _first_paint(widget: QWidget) -> Optional[BaseException]:
        """
        Render the widget once and collect any exception its paint raised.

        Exceptions raised inside Qt virtual overrides are reported through
        sys.excepthook rather than propagated, so the hook is swapped for a
        collector for the duration of the render.
        """
        faults = []

        def collect(exc_type, exc_value, exc_tb):
            faults.append(exc_value)

        previous_hook = sys.excepthook
        sys.excepthook = collect
        try:
            widget.grab()
        except Exception as e:
            faults.append(e)
        finally:
            sys.excepthook = previous_hook

        return faults[0] if faults else None

    @property
    def child(self) -> Optional[QWidget]:
        return self._child

    @property
    def has_error(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> Optional[LifeWheelError]:
        """The initialization fault, wrapped as a WidgetInitializationFault."""
        if self._error is None:
            return None
        if isinstance(self._error, WidgetInitializationFault):
            return self._error
        return WidgetInitializationFault(str(self._error))

    def fallback_text(self) -> Optional[str]:
        """Get the fallback message, or None if the child was built."""
        if self._child is not None:
            return None
        return self._fallback.text()
