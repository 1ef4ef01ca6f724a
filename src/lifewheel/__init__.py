"""
Livshjulet - interactive life wheel.

Rate eight areas of life on a 0-10 scale by pointing into a radial chart,
then download the result as livshjulet.png or copy it to the clipboard.
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Re-export main entry point
from lifewheel.main import main

from lifewheel.core import (
    Category,
    default_categories,
    WheelGeometry,
    quantize,
    CommitStore,
    HoverStateMachine,
    ActionButtonState,
    ButtonPhase,
)

__all__ = [
    "main",
    "__version__",

    # Engine
    "Category",
    "default_categories",
    "WheelGeometry",
    "quantize",
    "CommitStore",
    "HoverStateMachine",
    "ActionButtonState",
    "ButtonPhase",
]
