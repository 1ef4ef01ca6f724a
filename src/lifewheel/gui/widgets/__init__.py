"""
Custom widgets for Livshjulet.

- Wheel chart: radial chart with hover layer and snapshot export
- Action buttons: download/copy buttons driven by ActionButtonState
- Life wheel: composition of chart, interaction engine and actions
"""

from lifewheel.gui.widgets.wheel_chart import (
    WheelChart,
    WedgeItem,
    PointerMoveCoalescer,
    WheelSnapshotter,
)
from lifewheel.gui.widgets.action_button import ActionButton, ActionGlyph
from lifewheel.gui.widgets.life_wheel import LifeWheelWidget

__all__ = [
    "WheelChart",
    "WedgeItem",
    "PointerMoveCoalescer",
    "WheelSnapshotter",
    "ActionButton",
    "ActionGlyph",
    "LifeWheelWidget",
]
