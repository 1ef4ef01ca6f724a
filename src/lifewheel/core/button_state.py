"""
Action button state machine for the life wheel.

Each user-facing action (download image, copy to clipboard) owns one
instance of ActionButtonState:

    IDLE -> BUSY -> (SUCCESS | FAILURE) -> IDLE

The terminal phase is held for a fixed dwell time before the button
returns to IDLE. Any invocation while not IDLE is rejected outright -
there is no queuing and the running dwell timer is never interrupted.
"""

import logging
from enum import Enum, auto
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)

# Default dwell time for SUCCESS/FAILURE before returning to IDLE
DEFAULT_DWELL_MS = 2000

# Scheduler signature: (delay in ms, callback)
Scheduler = Callable[[int, Callable[[], None]], None]


class ButtonPhase(Enum):
    """Phases of an action button."""
    IDLE = auto()      # Ready, control enabled
    BUSY = auto()      # Action running, control disabled
    SUCCESS = auto()   # Action succeeded, dwelling
    FAILURE = auto()   # Action failed, dwelling


def qt_scheduler(delay_ms: int, callback: Callable[[], None]) -> None:
    """Schedule a callback on the Qt event loop."""
    QTimer.singleShot(delay_ms, callback)


class ActionButtonState(QObject):
    """
    Busy/success/failure tracking for one action, with timed auto-reset.

    The same class backs both the download and the copy buttons; only the
    labels differ. A label of None for success/failure means the button
    text stays unchanged in that phase.

    Signals:
        phase_changed(object): Emitted with the new ButtonPhase
        label_changed(str): Emitted when the display label changes
    """

    phase_changed = pyqtSignal(object)
    label_changed = pyqtSignal(str)

    def __init__(
        self,
        name: str,
        idle_label: str,
        success_label: Optional[str] = None,
        failure_label: Optional[str] = None,
        dwell_ms: int = DEFAULT_DWELL_MS,
        scheduler: Optional[Scheduler] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the button state.

        Args:
            name: Action name used in log messages (e.g. "download")
            idle_label: Label shown while idle or busy
            success_label: Label shown after success, or None to keep idle label
            failure_label: Label shown after failure, or None to keep idle label
            dwell_ms: Time to hold SUCCESS/FAILURE before returning to IDLE
            scheduler: Delayed-callback scheduler (defaults to QTimer)
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.name = name
        self._idle_label = idle_label
        self._success_label = success_label
        self._failure_label = failure_label
        self._dwell_ms = dwell_ms
        self._scheduler = scheduler or qt_scheduler

        self._phase = ButtonPhase.IDLE
        self._label = idle_label
        # Bumped on dispose so stale dwell callbacks do nothing
        self._generation = 0
        self._disposed = False

    # =========================================================================
    # State Access
    # =========================================================================

    @property
    def phase(self) -> ButtonPhase:
        return self._phase

    @property
    def label(self) -> str:
        return self._label

    @property
    def dwell_ms(self) -> int:
        return self._dwell_ms

    def is_idle(self) -> bool:
        """Check if the action can be invoked."""
        return self._phase == ButtonPhase.IDLE

    def is_enabled(self) -> bool:
        """Check if the corresponding control should be enabled."""
        return self._phase == ButtonPhase.IDLE and not self._disposed

    def configure(
        self,
        idle_label: str,
        success_label: Optional[str] = None,
        failure_label: Optional[str] = None,
        dwell_ms: int = DEFAULT_DWELL_MS,
    ) -> None:
        """
        Replace labels and dwell time.

        The shown label follows immediately; a dwell already running keeps
        its original duration.
        """
        self._idle_label = idle_label
        self._success_label = success_label
        self._failure_label = failure_label
        self._dwell_ms = dwell_ms

        label = idle_label
        if self._phase == ButtonPhase.SUCCESS and success_label is not None:
            label = success_label
        elif self._phase == ButtonPhase.FAILURE and failure_label is not None:
            label = failure_label
        self._set_label(label)

    # =========================================================================
    # Transitions
    # =========================================================================

    def begin(self) -> bool:
        """
        Try to start the action.

        Returns:
            True if the button moved to BUSY, False if the invocation was
            rejected because the button is not idle
        """
        if self._disposed or self._phase != ButtonPhase.IDLE:
            logger.debug(f"{self.name}: invocation rejected ({self._phase.name})")
            return False

        self._set_phase(ButtonPhase.BUSY)
        return True

    def finish(self, success: bool) -> None:
        """
        Record the outcome of the running action and start the dwell timer.

        Args:
            success: Whether the action produced its result
        """
        if self._phase != ButtonPhase.BUSY:
            logger.warning(f"{self.name}: finish() called while {self._phase.name}")
            return

        if success:
            self._set_phase(ButtonPhase.SUCCESS)
            if self._success_label is not None:
                self._set_label(self._success_label)
        else:
            self._set_phase(ButtonPhase.FAILURE)
            if self._failure_label is not None:
                self._set_label(self._failure_label)

        generation = self._generation
        self._scheduler(self._dwell_ms, lambda: self._return_to_idle(generation))

    def invoke(self, action: Callable[[], bool], defer: Optional[Scheduler] = None) -> bool:
        """
        Run an action under this button's guard.

        The action returns True on success. An exception raised by the
        action is logged and counted as a failure.

        Args:
            action: Callable performing the work
            defer: Scheduler used to run the action on a later event loop
                turn, so the BUSY state is shown first; None runs it now

        Returns:
            True if the invocation was accepted, False if it was rejected
        """
        if not self.begin():
            return False

        if defer is None:
            self._run(action)
        else:
            defer(0, lambda: self._run(action))
        return True

    def _run(self, action: Callable[[], bool]) -> None:
        if self._disposed:
            return
        try:
            success = bool(action())
        except Exception as e:
            logger.error(f"{self.name} failed: {e}")
            success = False
        self.finish(success)

    def dispose(self) -> None:
        """Cancel any pending return to IDLE and refuse further invocations."""
        self._disposed = True
        self._generation += 1

    def _return_to_idle(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._set_label(self._idle_label)
        self._set_phase(ButtonPhase.IDLE)

    def _set_phase(self, phase: ButtonPhase) -> None:
        if phase == self._phase:
            return
        logger.debug(f"{self.name}: {self._phase.name} -> {phase.name}")
        self._phase = phase
        self.phase_changed.emit(phase)

    def _set_label(self, label: str) -> None:
        if label == self._label:
            return
        self._label = label
        self.label_changed.emit(label)
