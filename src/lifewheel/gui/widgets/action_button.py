"""
Action button widget for Livshjulet.

A push button bound to an ActionButtonState. The button shows a small
painted indicator for the current phase and flashes on completion:

- IDLE: action glyph (download arrow or clipboard)
- BUSY: spinning dashed circle, button disabled
- SUCCESS: green check mark, button disabled
- FAILURE: red cross, button disabled
"""

import logging
from enum import Enum
from typing import Optional

from PyQt6.QtCore import (
    Qt,
    QTimer,
    QPropertyAnimation,
    QEasingCurve,
    QPointF,
    QRectF,
    pyqtProperty,
)
from PyQt6.QtWidgets import QPushButton, QWidget
from PyQt6.QtGui import (
    QPainter,
    QPainterPath,
    QColor,
    QPen,
    QBrush,
    QPaintEvent,
)

from lifewheel.core.button_state import ActionButtonState, ButtonPhase


# Module logger
logger = logging.getLogger(__name__)


class ActionGlyph(Enum):
    """Idle glyph drawn on an action button."""
    DOWNLOAD = "download"
    CLIPBOARD = "clipboard"


# Indicator colors
ICON_IDLE_COLOR = QColor("#9ca3af")      # Gray
ICON_SUCCESS_COLOR = QColor("#22c55e")   # Green
ICON_FAILURE_COLOR = QColor("#ef4444")   # Red


class ActionButton(QPushButton):
    """
    Push button driven by an ActionButtonState.

    The button's enabled state and text follow the state machine; clicks
    are forwarded by the owner, which invokes the action through the
    same state machine.
    """

    ICON_SIZE = 18
    SPINNER_INTERVAL_MS = 50

    def __init__(
        self,
        state: ActionButtonState,
        glyph: ActionGlyph,
        parent: Optional[QWidget] = None,
    ):
        """
        Initialize action button.

        Args:
            state: State machine this button displays
            glyph: Glyph drawn while idle
            parent: Parent widget
        """
        super().__init__(state.label, parent)
        self._state = state
        self._glyph = glyph
        self._spinner_angle = 0
        self._flash_color: Optional[QColor] = None
        self._flash_opacity = 0.0

        self.setMinimumHeight(36)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        # Busy spinner
        self._spinner_timer = QTimer(self)
        self._spinner_timer.setInterval(self.SPINNER_INTERVAL_MS)
        self._spinner_timer.timeout.connect(self._on_spinner_tick)

        # Completion flash
        self._flash_animation = QPropertyAnimation(self, b"flashOpacity", self)
        self._flash_animation.setDuration(500)
        self._flash_animation.setEasingCurve(QEasingCurve.Type.OutCubic)

        state.phase_changed.connect(self._on_phase_changed)
        state.label_changed.connect(self.setText)
        self._on_phase_changed(state.phase)

    @property
    def state(self) -> ActionButtonState:
        return self._state

    @pyqtProperty(float)
    def flashOpacity(self) -> float:
        return self._flash_opacity

    @flashOpacity.setter
    def flashOpacity(self, value: float) -> None:
        self._flash_opacity = value
        self.update()

    def _on_phase_changed(self, phase: ButtonPhase) -> None:
        """Sync enabled state, spinner and flash with the state machine."""
        self.setEnabled(phase == ButtonPhase.IDLE)

        if phase == ButtonPhase.BUSY:
            self._spinner_angle = 0
            self._spinner_timer.start()
        else:
            self._spinner_timer.stop()

        if phase == ButtonPhase.SUCCESS:
            self._flash(ICON_SUCCESS_COLOR)
        elif phase == ButtonPhase.FAILURE:
            self._flash(ICON_FAILURE_COLOR)

        self.update()

    def _flash(self, color: QColor) -> None:
        self._flash_color = color
        self._flash_animation.stop()
        self._flash_animation.setStartValue(0.4)
        self._flash_animation.setEndValue(0.0)
        self._flash_animation.start()

    def _on_spinner_tick(self) -> None:
        self._spinner_angle = (self._spinner_angle + 15) % 360
        self.update()

    # =========================================================================
    # Painting
    # =========================================================================

    def paintEvent(self, event: QPaintEvent) -> None:
        """Paint background, phase indicator and label."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rect = self.rect()
        radius = 6

        if not self.isEnabled():
            bg_color = QColor("#3f3f46")
            text_color = QColor("#d4d4d8")
        elif self.isDown():
            bg_color = QColor("#09090b")
            text_color = QColor("#ffffff")
        elif self.underMouse():
            bg_color = QColor("#27272a")
            text_color = QColor("#ffffff")
        else:
            bg_color = QColor("#18181b")
            text_color = QColor("#fafafa")

        painter.setBrush(QBrush(bg_color))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRoundedRect(QRectF(rect), radius, radius)

        if self._flash_color is not None and self._flash_opacity > 0:
            flash = QColor(self._flash_color)
            flash.setAlphaF(self._flash_opacity)
            painter.setBrush(QBrush(flash))
            painter.drawRoundedRect(QRectF(rect), radius, radius)

        # Indicator and text centered together
        text_width = painter.fontMetrics().horizontalAdvance(self.text())
        total_width = self.ICON_SIZE + 8 + text_width
        icon_x = (rect.width() - total_width) / 2
        icon_rect = QRectF(
            icon_x, (rect.height() - self.ICON_SIZE) / 2,
            self.ICON_SIZE, self.ICON_SIZE
        )
        self._draw_indicator(painter, icon_rect)

        painter.setPen(text_color)
        text_rect = QRectF(icon_x + self.ICON_SIZE + 8, 0, text_width + 2, rect.height())
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
            self.text()
        )

    def _draw_indicator(self, painter: QPainter, rect: QRectF) -> None:
        """Draw the phase indicator inside rect."""
        phase = self._state.phase
        inset = rect.adjusted(2, 2, -2, -2)

        if phase == ButtonPhase.BUSY:
            pen = QPen(ICON_IDLE_COLOR, 2)
            pen.setStyle(Qt.PenStyle.DashLine)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawArc(inset, self._spinner_angle * 16, 300 * 16)

        elif phase == ButtonPhase.SUCCESS:
            painter.setPen(QPen(ICON_SUCCESS_COLOR, 2))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawEllipse(inset)
            check = QPainterPath()
            check.moveTo(inset.left() + inset.width() * 0.28, inset.center().y())
            check.lineTo(inset.left() + inset.width() * 0.45, inset.bottom() - inset.height() * 0.3)
            check.lineTo(inset.right() - inset.width() * 0.25, inset.top() + inset.height() * 0.32)
            painter.drawPath(check)

        elif phase == ButtonPhase.FAILURE:
            painter.setPen(QPen(ICON_FAILURE_COLOR, 2))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawEllipse(inset)
            d = inset.width() * 0.22
            c = inset.center()
            painter.drawLine(QPointF(c.x() - d, c.y() - d), QPointF(c.x() + d, c.y() + d))
            painter.drawLine(QPointF(c.x() - d, c.y() + d), QPointF(c.x() + d, c.y() - d))

        elif self._glyph == ActionGlyph.DOWNLOAD:
            painter.setPen(QPen(QColor("#fafafa"), 2))
            cx = inset.center().x()
            painter.drawLine(QPointF(cx, inset.top()), QPointF(cx, inset.bottom() - 5))
            painter.drawLine(QPointF(cx - 4, inset.bottom() - 9), QPointF(cx, inset.bottom() - 5))
            painter.drawLine(QPointF(cx + 4, inset.bottom() - 9), QPointF(cx, inset.bottom() - 5))
            painter.drawLine(QPointF(inset.left(), inset.bottom()), QPointF(inset.right(), inset.bottom()))

        else:
            painter.setPen(QPen(ICON_IDLE_COLOR, 2))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRoundedRect(inset.adjusted(1, 2, -1, 0), 2, 2)
            painter.drawRect(QRectF(inset.center().x() - 3, inset.top(), 6, 3))
