"""
Life wheel widget for Livshjulet.

Composes the wheel chart with the interaction engine and the two export
actions:

    [Kopier til utklippstavle] [Last ned bilde]
    +--------------------------------------------+
    |                 wheel chart                |
    +--------------------------------------------+

Pointer samples from the chart drive the hover state machine; a click
commits the hovered score. The download and copy buttons each run their
action under their own ActionButtonState, so the two never block each
other and neither can be re-entered while busy or dwelling.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QFrame,
    QHBoxLayout,
    QVBoxLayout,
)

from lifewheel.core.button_state import ActionButtonState, Scheduler, qt_scheduler
from lifewheel.core.categories import Category, default_categories
from lifewheel.core.commit_store import CommitStore
from lifewheel.core.hover import HoverStateMachine
from lifewheel.core.settings import Settings, get_settings
from lifewheel.gui.export_pipeline import (
    ExportPipeline,
    ImageDownloader,
    ClipboardWriter,
    LocationProvider,
    download_image,
    copy_image,
)
from lifewheel.gui.widgets.action_button import ActionButton, ActionGlyph
from lifewheel.gui.widgets.wheel_chart import WheelChart


logger = logging.getLogger(__name__)


class LifeWheelWidget(QWidget):
    """
    Interactive life wheel with image download and clipboard copy.

    Signals:
        value_committed(int, int): A category score was committed (index, value)
    """

    value_committed = pyqtSignal(int, int)

    def __init__(
        self,
        categories: Optional[Sequence[Category]] = None,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
        location_provider: Optional[LocationProvider] = None,
        clipboard_provider: Optional[Callable] = None,
        parent: Optional[QWidget] = None,
    ):
        """
        Initialize the life wheel.

        Args:
            categories: Wheel categories (defaults to the eight standard ones)
            settings: Settings instance (defaults to the global settings)
            scheduler: Delayed-callback scheduler for button timers
            location_provider: Override for choosing the download directory
            clipboard_provider: Override for the clipboard
            parent: Parent widget
        """
        super().__init__(parent)

        self._settings = settings or get_settings()
        self._scheduler = scheduler or qt_scheduler
        self._categories: List[Category] = list(categories or default_categories())
        self._disposed = False

        wheel = self._settings.wheel
        export = self._settings.export
        buttons = self._settings.buttons

        # Interaction engine
        self.store = CommitStore(len(self._categories), wheel.max_value)
        self.chart = WheelChart(
            self._categories,
            max_value=wheel.max_value,
            leave_tolerance=wheel.leave_tolerance,
            pointer_interval_ms=wheel.pointer_interval_ms,
            rest_opacity=wheel.rest_opacity,
            hover_opacity=wheel.hover_opacity,
            hover_layer_opacity=wheel.hover_layer_opacity,
            show_grid=wheel.show_grid,
        )
        self.hover = HoverStateMachine(self.store, self.chart)

        self.chart.pointer_moved.connect(self.hover.pointer_move)
        self.chart.pointer_left_region.connect(self.hover.pointer_leave_region)
        self.chart.wheel_clicked.connect(self._on_wheel_clicked)
        self.store.add_listener(self._on_value_committed)

        # Export
        self.pipeline = ExportPipeline(self.chart, export)
        self.downloader = ImageDownloader(export, location_provider, parent=self)
        self.clipboard_writer = ClipboardWriter(clipboard_provider)

        # Action buttons
        self.download_state = ActionButtonState(
            "download",
            idle_label=buttons.download_label,
            dwell_ms=buttons.dwell_ms,
            scheduler=self._scheduler,
            parent=self,
        )
        self.copy_state = ActionButtonState(
            "copy",
            idle_label=buttons.copy_label,
            success_label=buttons.copy_success_label,
            failure_label=buttons.copy_failure_label,
            dwell_ms=buttons.dwell_ms,
            scheduler=self._scheduler,
            parent=self,
        )

        self._setup_ui()

        self._settings.signals.category_changed.connect(self._on_settings_changed)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        toolbar = QFrame()
        toolbar.setObjectName("lifeWheelToolbar")
        toolbar.setStyleSheet("""
            QFrame#lifeWheelToolbar {
                background-color: #f3f4f6;
                border-radius: 6px;
            }
        """)
        toolbar.setMinimumHeight(80)
        toolbar_layout = QHBoxLayout(toolbar)
        toolbar_layout.setContentsMargins(16, 8, 16, 8)
        toolbar_layout.setSpacing(8)

        self.copy_button = ActionButton(self.copy_state, ActionGlyph.CLIPBOARD)
        self.copy_button.setFixedWidth(208)
        self.copy_button.clicked.connect(self.request_copy)

        self.download_button = ActionButton(self.download_state, ActionGlyph.DOWNLOAD)
        self.download_button.clicked.connect(self.request_download)

        toolbar_layout.addStretch()
        toolbar_layout.addWidget(self.copy_button)
        toolbar_layout.addWidget(self.download_button)

        layout.addWidget(toolbar)
        layout.addWidget(self.chart, 1)

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def categories(self) -> List[Category]:
        return list(self._categories)

    def values(self) -> Dict[int, int]:
        """Get a snapshot of the committed score of every category."""
        return self.store.read()

    def reset(self) -> None:
        """Reset every committed score and clear the hover state."""
        self.hover.reset()
        self.store.reset()

    def request_download(self) -> bool:
        """
        Start the download action.

        Returns:
            True if the action started, False if the button was not idle
        """
        return self.download_state.invoke(self._run_download, defer=self._scheduler)

    def request_copy(self) -> bool:
        """
        Start the copy-to-clipboard action.

        Returns:
            True if the action started, False if the button was not idle
        """
        return self.copy_state.invoke(self._run_copy, defer=self._scheduler)

    # =========================================================================
    # Actions
    # =========================================================================

    def _run_download(self) -> bool:
        return download_image(self.pipeline, self.downloader)

    def _run_copy(self) -> bool:
        return copy_image(self.pipeline, self.clipboard_writer)

    # =========================================================================
    # Settings
    # =========================================================================

    def _on_settings_changed(self, category: str) -> None:
        """Apply a changed settings category to the running wheel."""
        if self._disposed:
            return

        if category == "wheel":
            wheel = self._settings.wheel
            self.chart.apply_appearance(
                wheel.rest_opacity,
                wheel.hover_opacity,
                wheel.hover_layer_opacity,
                wheel.leave_tolerance,
            )
        elif category == "export":
            self.pipeline.settings = self._settings.export
            self.downloader.settings = self._settings.export
        elif category == "buttons":
            buttons = self._settings.buttons
            self.download_state.configure(buttons.download_label, dwell_ms=buttons.dwell_ms)
            self.copy_state.configure(
                buttons.copy_label,
                buttons.copy_success_label,
                buttons.copy_failure_label,
                buttons.dwell_ms,
            )

    # =========================================================================
    # Engine Callbacks
    # =========================================================================

    def _on_wheel_clicked(self) -> None:
        self.hover.commit()

    def _on_value_committed(self, index: int, value: int) -> None:
        self.chart.set_committed_value(index, value)
        self.value_committed.emit(index, value)

    # =========================================================================
    # Teardown
    # =========================================================================

    def dispose(self) -> None:
        """
        Tear down the wheel.

        Disconnects pointer handling, cancels pending button timers and
        releases the render surface.
        """
        if self._disposed:
            return
        self._disposed = True

        self.chart.pointer_moved.disconnect(self.hover.pointer_move)
        self.chart.pointer_left_region.disconnect(self.hover.pointer_leave_region)
        self.chart.wheel_clicked.disconnect(self._on_wheel_clicked)
        self.store.remove_listener(self._on_value_committed)
        self._settings.signals.category_changed.disconnect(self._on_settings_changed)

        self.download_state.dispose()
        self.copy_state.dispose()
        self.chart.dispose()
        logger.debug("Life wheel disposed")

    def is_disposed(self) -> bool:
        return self._disposed

    def closeEvent(self, event) -> None:
        """Dispose on close."""
        self.dispose()
        super().closeEvent(event)
