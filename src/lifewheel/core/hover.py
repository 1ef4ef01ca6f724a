"""
Hover state machine for the life wheel.

Tracks which wedge the pointer is over and the live (uncommitted) score it
points at. Visual feedback goes through an appearance sink so this module
stays free of any rendering code:

- Resting: no active category, nothing highlighted
- Hovering: one active category, highlighted, with a live score

Updates to the sink are kept to a minimum: the highlight is only touched
when the active wedge changes, and the live score only when it changes.
"""

import logging
from typing import Optional, Protocol, List

from lifewheel.core.commit_store import CommitStore
from lifewheel.core.quantizer import quantize


logger = logging.getLogger(__name__)


class WedgeAppearance(Protocol):
    """Visual side of the hover state (implemented by the wheel chart)."""

    def set_highlight(self, index: int, hovered: bool) -> None:
        """Switch a wedge between its hovered and rest appearance."""

    def set_live_value(self, index: int, value: int) -> None:
        """Show a live (uncommitted) score on a wedge's hover layer."""


class HoverStateMachine:
    """
    Converts pointer samples into live scores and commits them on click.

    Attributes:
        store: Commit store receiving clicked values
        appearance: Sink for highlight and live-score updates
    """

    def __init__(self, store: CommitStore, appearance: WedgeAppearance):
        self.store = store
        self.appearance = appearance

        self._active_index: Optional[int] = None
        self._highlighted = False
        self._live_values: List[int] = [0] * store.category_count

    # =========================================================================
    # State Access
    # =========================================================================

    @property
    def active_index(self) -> Optional[int]:
        """Index of the hovered category, or None at rest."""
        return self._active_index

    @property
    def live_value(self) -> int:
        """Live score of the active category (0 at rest)."""
        if self._active_index is None:
            return 0
        return self._live_values[self._active_index]

    @property
    def is_highlighted(self) -> bool:
        """Check if the active wedge currently shows the hovered appearance."""
        return self._highlighted

    def live_values(self) -> List[int]:
        """Get a copy of the live score of every category."""
        return list(self._live_values)

    # =========================================================================
    # Transitions
    # =========================================================================

    def pointer_move(self, index: int, radial_position: float) -> None:
        """
        Handle a pointer sample inside the interaction region.

        Args:
            index: Category index under the pointer
            radial_position: Normalized distance from the center
        """
        if not 0 <= index < len(self._live_values):
            logger.warning(f"Ignoring pointer sample for unknown category {index}")
            return

        if index != self._active_index or not self._highlighted:
            previous = self._active_index
            if previous is not None and previous != index:
                self._set_live(previous, 0)
                self.appearance.set_highlight(previous, False)
            self.appearance.set_highlight(index, True)
            self._active_index = index
            self._highlighted = True

        new_value = quantize(radial_position, self.store.max_value)
        if new_value != self._live_values[index]:
            self._set_live(index, new_value)

    def pointer_leave_region(self) -> None:
        """
        Handle the pointer moving beyond the interaction region.

        Zeroes the live score of the last active category and restores its
        rest appearance. The active index is kept so that returning to the
        same wedge resumes hovering it.
        """
        if self._active_index is None or not self._highlighted:
            return

        self._set_live(self._active_index, 0)
        self.appearance.set_highlight(self._active_index, False)
        self._highlighted = False

    def commit(self) -> bool:
        """
        Commit the live score of the active category.

        Returns:
            True if a value was committed, False if no category is active
        """
        if self._active_index is None:
            return False

        self.store.commit(self._active_index, self.live_value)
        return True

    def reset(self) -> None:
        """Return to rest, clearing every live score and highlight."""
        for index, value in enumerate(self._live_values):
            if value != 0:
                self._set_live(index, 0)
        if self._active_index is not None and self._highlighted:
            self.appearance.set_highlight(self._active_index, False)
        self._active_index = None
        self._highlighted = False

    def _set_live(self, index: int, value: int) -> None:
        self._live_values[index] = value
        self.appearance.set_live_value(index, value)
