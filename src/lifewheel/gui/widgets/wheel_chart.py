"""
Radial wheel chart for Livshjulet.

Draws one pie wedge per category whose length is proportional to the
category's committed score, with a translucent hover layer on top that
shows the live score under the pointer.

The chart is the rendering side of the wheel:
- Per-wedge appearance override (hovered vs rest opacity)
- Resolving pointer positions to (category, radial position)
- Rate-limited pointer move handling (one sample per frame)
- Still-image snapshots of the committed state for export
"""

import logging
import math
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional, Sequence

from PyQt6.QtWidgets import (
    QGraphicsView,
    QGraphicsScene,
    QGraphicsItem,
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsSimpleTextItem,
)
from PyQt6.QtCore import (
    Qt,
    QObject,
    QRectF,
    QPointF,
    QTimer,
    pyqtSignal,
)
from PyQt6.QtGui import (
    QPainter,
    QPainterPath,
    QColor,
    QPen,
    QBrush,
    QFont,
    QImage,
)

from lifewheel.core.categories import Category
from lifewheel.core.geometry import WheelGeometry, DEFAULT_LEAVE_TOLERANCE


logger = logging.getLogger(__name__)


# =============================================================================
# Wedge Item
# =============================================================================


class WedgeItem(QGraphicsItem):
    """
    A single category wedge, drawn from the wheel center outwards.

    The wedge length is value / max_value of the full radius. A value of 0
    draws nothing.
    """

    def __init__(
        self,
        index: int,
        color: QColor,
        full_radius: float,
        start_angle: float,
        span_angle: float,
        max_value: int,
    ):
        """
        Initialize wedge item.

        Args:
            index: Category index
            color: Fill color
            full_radius: Radius of a wedge at max_value
            start_angle: Clockwise start angle in degrees from twelve o'clock
            span_angle: Angular span of the wedge in degrees
            max_value: Score that fills the full radius
        """
        super().__init__()

        self.index = index
        self.full_radius = full_radius
        self.start_angle = start_angle
        self.span_angle = span_angle

        self._color = QColor(color)
        self._max_value = max(1, max_value)
        self._value = 0
        self._path = QPainterPath()

    @property
    def value(self) -> int:
        return self._value

    def outer_radius(self) -> float:
        """Radius of the wedge at its current value."""
        return self.full_radius * self._value / self._max_value

    def set_value(self, value: int) -> None:
        """Set the wedge value and rebuild its outline."""
        if value == self._value:
            return
        self.prepareGeometryChange()
        self._value = value
        self._path = self._create_wedge_path()
        self.update()

    def _create_wedge_path(self) -> QPainterPath:
        """Create the pie-slice path for the current value."""
        path = QPainterPath()
        radius = self.outer_radius()
        if radius <= 0:
            return path

        rect = QRectF(-radius, -radius, radius * 2, radius * 2)

        # Qt arcs run counter-clockwise from three o'clock
        qt_start = 90.0 - self.start_angle
        path.moveTo(0.0, 0.0)
        path.arcTo(rect, qt_start, -self.span_angle)
        path.closeSubpath()
        return path

    def boundingRect(self) -> QRectF:
        return self._path.boundingRect()

    def shape(self) -> QPainterPath:
        return self._path

    def paint(self, painter: QPainter, option, widget=None) -> None:
        """Paint the wedge."""
        if self._path.isEmpty():
            return
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(self._color))
        painter.drawPath(self._path)


# =============================================================================
# Pointer Move Coalescing
# =============================================================================


class PointerMoveCoalescer(QObject):
    """
    Trailing-edge rate limiter for pointer samples.

    The first sample of an interval starts a single-shot timer; later
    samples replace the pending one. When the timer fires only the most
    recent sample is delivered. Intermediate samples are dropped.
    """

    def __init__(
        self,
        callback: Callable[[QPointF], None],
        interval_ms: int = 16,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._callback = callback
        self._pending: Optional[QPointF] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.flush)

    def push(self, pos: QPointF) -> None:
        """Queue a sample, replacing any pending one."""
        self._pending = QPointF(pos)
        if not self._timer.isActive():
            self._timer.start()

    def flush(self) -> None:
        """Deliver the pending sample now, if there is one."""
        self._timer.stop()
        pos, self._pending = self._pending, None
        if pos is not None:
            self._callback(pos)

    def cancel(self) -> None:
        """Drop the pending sample without delivering it."""
        self._timer.stop()
        self._pending = None

    def has_pending(self) -> bool:
        return self._pending is not None


# =============================================================================
# Snapshots
# =============================================================================


class WheelSnapshotter:
    """
    Export capability of a wheel chart.

    Attached by the chart once its scene is fully built and detached on
    teardown; export code treats a missing snapshotter as "renderer not
    ready".
    """

    def __init__(self, chart: "WheelChart"):
        self._chart = chart

    def snapshot(self, size: int, background: QColor) -> QImage:
        """
        Render the committed state of the wheel into an image.

        The hover layer and hover highlight are excluded.

        Args:
            size: Width and height of the image in pixels
            background: Fill color (the image is never transparent)

        Returns:
            Rendered image
        """
        image = QImage(size, size, QImage.Format.Format_ARGB32)
        image.fill(background)

        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
            with self._chart.rest_appearance(), self._chart.background(background):
                self._chart.scene.render(
                    painter,
                    QRectF(0, 0, size, size),
                    self._chart.scene.sceneRect(),
                    Qt.AspectRatioMode.KeepAspectRatio,
                )
        finally:
            painter.end()

        return image


# =============================================================================
# Wheel Chart
# =============================================================================


class WheelChart(QGraphicsView):
    """
    Radial chart of the life wheel categories.

    Implements the wedge appearance interface used by the hover state
    machine (set_highlight, set_live_value) and reports pointer activity
    through signals.

    Signals:
        pointer_moved(int, float): Pointer over a wedge (index, radial position)
        pointer_left_region(): Pointer moved beyond the interaction region
        wheel_clicked(): Left click inside the interaction region
    """

    pointer_moved = pyqtSignal(int, float)
    pointer_left_region = pyqtSignal()
    wheel_clicked = pyqtSignal()

    # Layout constants (scene coordinates, wheel centered on the origin)
    RADIUS = 300
    LABEL_GAP = 18
    MARGIN = 120

    GRID_COLOR = QColor(200, 200, 200)
    LABEL_COLOR = QColor(60, 60, 60)
    BACKGROUND_COLOR = QColor(255, 255, 255)

    def __init__(
        self,
        categories: Sequence[Category],
        max_value: int = 10,
        leave_tolerance: float = DEFAULT_LEAVE_TOLERANCE,
        pointer_interval_ms: int = 16,
        rest_opacity: float = 0.8,
        hover_opacity: float = 0.3,
        hover_layer_opacity: float = 0.5,
        show_grid: bool = True,
        parent=None,
    ):
        """
        Initialize the wheel chart.

        Args:
            categories: Categories in wheel order
            max_value: Score that fills a wedge to the outer edge
            leave_tolerance: Hover clears beyond radius * tolerance
            pointer_interval_ms: Pointer move coalescing interval
            rest_opacity: Committed wedge opacity when not hovered
            hover_opacity: Committed wedge opacity while hovered
            hover_layer_opacity: Opacity of the live-score wedges
            show_grid: Whether to draw score rings and spokes
            parent: Parent widget
        """
        super().__init__(parent)

        if not categories:
            raise ValueError("WheelChart needs at least one category")

        self._categories = list(categories)
        self._max_value = max_value
        self._leave_tolerance = leave_tolerance
        self._rest_opacity = rest_opacity
        self._hover_opacity = hover_opacity
        self._hover_layer_opacity = hover_layer_opacity
        self._show_grid = show_grid
        self._disposed = False

        self.wheel_geometry = WheelGeometry(
            center_x=0.0,
            center_y=0.0,
            radius=self.RADIUS,
            category_count=len(self._categories),
        )

        self.snapshotter: Optional[WheelSnapshotter] = None

        # Create scene
        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)
        self.scene.setBackgroundBrush(QBrush(self.BACKGROUND_COLOR))

        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QGraphicsView.Shape.NoFrame)
        self.setMouseTracking(True)
        self.viewport().setMouseTracking(True)
        self.setMinimumSize(460, 460)

        self._wedges: List[WedgeItem] = []
        self._hover_wedges: List[WedgeItem] = []
        self._highlighted: Dict[int, bool] = {}

        self._create_grid()
        self._create_wedges()
        self._create_labels()

        extent = self.RADIUS + self.MARGIN
        self.scene.setSceneRect(-extent, -extent, extent * 2, extent * 2)
        self.fitInView(self.scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._coalescer = PointerMoveCoalescer(
            self.process_pointer_sample, pointer_interval_ms, self
        )

        # Scene complete: exporting is now possible
        self.snapshotter = WheelSnapshotter(self)

    # =========================================================================
    # Scene Construction
    # =========================================================================

    def _create_grid(self) -> None:
        """Create score rings and category spokes."""
        if not self._show_grid:
            return

        pen = QPen(self.GRID_COLOR, 1)
        pen.setCosmetic(True)
        for step in range(1, self._max_value + 1):
            r = self.RADIUS * step / self._max_value
            ring = QGraphicsEllipseItem(-r, -r, r * 2, r * 2)
            ring.setPen(pen)
            ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            ring.setZValue(-10)
            self.scene.addItem(ring)

        for index in range(len(self._categories)):
            angle = math.radians(self.wheel_geometry.wedge_start_angle(index))
            spoke = QGraphicsLineItem(
                0.0, 0.0,
                self.RADIUS * math.sin(angle),
                -self.RADIUS * math.cos(angle),
            )
            spoke.setPen(pen)
            spoke.setZValue(-10)
            self.scene.addItem(spoke)

    def _create_wedges(self) -> None:
        """Create the committed and hover wedge for each category."""
        span = self.wheel_geometry.span_angle

        for category in self._categories:
            start = self.wheel_geometry.wedge_start_angle(category.index)
            color = QColor(category.color)

            wedge = WedgeItem(category.index, color, self.RADIUS, start, span, self._max_value)
            wedge.setOpacity(self._rest_opacity)
            wedge.setZValue(0)
            wedge.setToolTip(f"{category.label}: 0")
            self.scene.addItem(wedge)
            self._wedges.append(wedge)

            hover_wedge = WedgeItem(category.index, color, self.RADIUS, start, span, self._max_value)
            hover_wedge.setOpacity(self._hover_layer_opacity)
            hover_wedge.setZValue(10)
            hover_wedge.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
            self.scene.addItem(hover_wedge)
            self._hover_wedges.append(hover_wedge)

            self._highlighted[category.index] = False

    def _create_labels(self) -> None:
        """Place category labels around the outer edge."""
        font = QFont()
        font.setPointSize(11)
        label_radius = self.RADIUS + self.LABEL_GAP

        for category in self._categories:
            mid = self.wheel_geometry.wedge_start_angle(category.index) + \
                self.wheel_geometry.span_angle / 2
            angle = math.radians(mid)
            x = label_radius * math.sin(angle)
            y = -label_radius * math.cos(angle)

            label = QGraphicsSimpleTextItem(category.label)
            label.setFont(font)
            label.setBrush(QBrush(self.LABEL_COLOR))
            label.setZValue(20)

            # Anchor the label on the side facing the wheel
            rect = label.boundingRect()
            sx, cy = math.sin(angle), math.cos(angle)
            dx = -rect.width() / 2 + sx * rect.width() / 2
            dy = -rect.height() / 2 - cy * rect.height() / 2
            label.setPos(x + dx, y + dy)
            self.scene.addItem(label)

    # =========================================================================
    # Public API - Values and Appearance
    # =========================================================================

    @property
    def categories(self) -> List[Category]:
        return list(self._categories)

    def set_committed_value(self, index: int, value: int) -> None:
        """Show a committed score on a category wedge."""
        wedge = self._wedges[index]
        wedge.set_value(value)
        wedge.setToolTip(f"{self._categories[index].label}: {value}")

    def committed_value(self, index: int) -> int:
        """Get the score currently drawn on a committed wedge."""
        return self._wedges[index].value

    def set_highlight(self, index: int, hovered: bool) -> None:
        """Switch a committed wedge between hovered and rest opacity."""
        self._highlighted[index] = hovered
        opacity = self._hover_opacity if hovered else self._rest_opacity
        self._wedges[index].setOpacity(opacity)

    def is_highlighted(self, index: int) -> bool:
        return self._highlighted.get(index, False)

    def wedge_opacity(self, index: int) -> float:
        return self._wedges[index].opacity()

    def set_live_value(self, index: int, value: int) -> None:
        """Show a live score on a category's hover wedge."""
        self._hover_wedges[index].set_value(value)

    def live_value(self, index: int) -> int:
        """Get the score currently drawn on a hover wedge."""
        return self._hover_wedges[index].value

    def apply_appearance(
        self,
        rest_opacity: float,
        hover_opacity: float,
        hover_layer_opacity: float,
        leave_tolerance: float,
    ) -> None:
        """Update opacities and the leave tolerance of a live chart."""
        self._rest_opacity = rest_opacity
        self._hover_opacity = hover_opacity
        self._hover_layer_opacity = hover_layer_opacity
        self._leave_tolerance = leave_tolerance
        for wedge in self._wedges:
            self.set_highlight(wedge.index, self.is_highlighted(wedge.index))
        for hover_wedge in self._hover_wedges:
            hover_wedge.setOpacity(hover_layer_opacity)

    @contextmanager
    def background(self, color: QColor):
        """Temporarily paint the scene background in another color."""
        previous = self.scene.backgroundBrush()
        self.scene.setBackgroundBrush(QBrush(color))
        try:
            yield
        finally:
            self.scene.setBackgroundBrush(previous)

    @contextmanager
    def rest_appearance(self):
        """
        Temporarily show only the committed state.

        Hides the hover layer and restores rest opacity on every wedge,
        then puts the live appearance back.
        """
        hidden = [w for w in self._hover_wedges if w.isVisible()]
        opacities = [w.opacity() for w in self._wedges]
        try:
            for wedge in hidden:
                wedge.setVisible(False)
            for wedge in self._wedges:
                wedge.setOpacity(self._rest_opacity)
            yield
        finally:
            for wedge in hidden:
                wedge.setVisible(True)
            for wedge, opacity in zip(self._wedges, opacities):
                wedge.setOpacity(opacity)

    # =========================================================================
    # Pointer Handling
    # =========================================================================

    def process_pointer_sample(self, scene_pos: QPointF) -> None:
        """
        Turn one pointer sample into a move or leave notification.

        Args:
            scene_pos: Pointer position in scene coordinates
        """
        if self._disposed:
            return

        x, y = scene_pos.x(), scene_pos.y()
        if self.wheel_geometry.is_outside_region(x, y, self._leave_tolerance):
            self.pointer_left_region.emit()
            return

        resolved = self.wheel_geometry.resolve(x, y)
        if resolved is None:
            return
        index, radial = resolved
        self.pointer_moved.emit(index, radial)

    def is_inside_region(self, scene_pos: QPointF) -> bool:
        """Check whether a scene position is within the interaction region."""
        return not self.wheel_geometry.is_outside_region(
            scene_pos.x(), scene_pos.y(), self._leave_tolerance
        )

    def process_click(self, scene_pos: QPointF) -> None:
        """
        Handle a click at a scene position.

        The click position is applied as a pointer sample first so that the
        value committed is the one under the pointer.
        """
        if self._disposed:
            return
        self._coalescer.cancel()
        self.process_pointer_sample(scene_pos)
        if self.is_inside_region(scene_pos):
            self.wheel_clicked.emit()

    def mouseMoveEvent(self, event) -> None:
        """Queue a pointer sample for the next coalescing interval."""
        if not self._disposed:
            self._coalescer.push(self.mapToScene(event.position().toPoint()))
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event) -> None:
        """Commit on left click inside the wheel."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.process_click(self.mapToScene(event.position().toPoint()))
        super().mousePressEvent(event)

    def leaveEvent(self, event) -> None:
        """Treat leaving the widget as leaving the interaction region."""
        if not self._disposed:
            self._coalescer.cancel()
            self.pointer_left_region.emit()
        super().leaveEvent(event)

    def resizeEvent(self, event) -> None:
        """Keep the whole wheel in view."""
        super().resizeEvent(event)
        self.fitInView(self.scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    # =========================================================================
    # Teardown
    # =========================================================================

    def dispose(self) -> None:
        """
        Release the render surface.

        Stops pointer handling, detaches the export capability and clears
        the scene.
        """
        if self._disposed:
            return
        self._disposed = True
        self._coalescer.cancel()
        self.snapshotter = None
        self.scene.clear()
        self._wedges.clear()
        self._hover_wedges.clear()
        logger.debug("Wheel chart disposed")

    def is_disposed(self) -> bool:
        return self._disposed
