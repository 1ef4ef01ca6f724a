"""
Committed values for the life wheel.

Holds the score the user has settled on for each category. Values are
only changed by an explicit commit (a click on the wheel) or by a reset.
"""

import logging
from typing import Callable, Dict, List


logger = logging.getLogger(__name__)

# Listener signature: (category index, new value)
CommitListener = Callable[[int, int], None]


class CommitStore:
    """
    Per-category committed scores.

    Every category starts at 0. Values are kept in [0, max_value] at all
    times; out-of-range input is clamped rather than rejected.
    """

    def __init__(self, category_count: int, max_value: int = 10):
        """
        Initialize the commit store.

        Args:
            category_count: Number of categories on the wheel
            max_value: Upper bound of the score range

        Raises:
            ValueError: If category_count < 1 or max_value < 0
        """
        if category_count < 1:
            raise ValueError(f"category_count must be >= 1, got {category_count}")
        if max_value < 0:
            raise ValueError(f"max_value must be >= 0, got {max_value}")

        self._max_value = max_value
        self._values: List[int] = [0] * category_count
        self._listeners: List[CommitListener] = []

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def category_count(self) -> int:
        return len(self._values)

    def add_listener(self, listener: CommitListener) -> None:
        """Register a callback invoked after every committed change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: CommitListener) -> None:
        """Unregister a change callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def commit(self, index: int, value: int) -> None:
        """
        Overwrite the committed value for a category.

        Args:
            index: Category index
            value: New score

        Raises:
            IndexError: If index is not a valid category index
        """
        if not 0 <= index < len(self._values):
            raise IndexError(f"Category index {index} out of range")

        value = max(0, min(self._max_value, int(value)))
        self._values[index] = value
        logger.debug(f"Committed category {index} = {value}")
        self._notify(index, value)

    def value(self, index: int) -> int:
        """Get the committed value for a single category."""
        return self._values[index]

    def read(self) -> Dict[int, int]:
        """
        Get a snapshot of all committed values.

        Returns:
            New dict mapping category index to score
        """
        return dict(enumerate(self._values))

    def reset(self) -> None:
        """Reset every category back to 0."""
        for index in range(len(self._values)):
            self._values[index] = 0
            self._notify(index, 0)
        logger.debug("Committed values reset")

    def _notify(self, index: int, value: int) -> None:
        for listener in list(self._listeners):
            listener(index, value)
