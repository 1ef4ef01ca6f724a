"""
Core interaction engine for Livshjulet.

Rendering-independent logic: categories, wheel geometry, score
quantization, hover tracking, committed values, action button state
and settings.
"""

from lifewheel.core.categories import (
    Category,
    DEFAULT_LABELS,
    DEFAULT_COLORS,
    build_categories,
    default_categories,
)
from lifewheel.core.geometry import (
    WheelGeometry,
    DEFAULT_LEAVE_TOLERANCE,
)
from lifewheel.core.quantizer import quantize
from lifewheel.core.commit_store import CommitStore
from lifewheel.core.hover import HoverStateMachine, WedgeAppearance
from lifewheel.core.button_state import (
    ActionButtonState,
    ButtonPhase,
    DEFAULT_DWELL_MS,
)

__all__ = [
    # Categories
    "Category",
    "DEFAULT_LABELS",
    "DEFAULT_COLORS",
    "build_categories",
    "default_categories",

    # Geometry and quantization
    "WheelGeometry",
    "DEFAULT_LEAVE_TOLERANCE",
    "quantize",

    # State
    "CommitStore",
    "HoverStateMachine",
    "WedgeAppearance",
    "ActionButtonState",
    "ButtonPhase",
    "DEFAULT_DWELL_MS",
]
