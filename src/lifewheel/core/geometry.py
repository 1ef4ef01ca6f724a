"""
Wheel geometry for the life wheel.

Converts widget-local pointer coordinates into wheel coordinates:
which category wedge the pointer is over and how far out along the
radius it sits.

Layout conventions:
- Category 0 starts at twelve o'clock and categories proceed clockwise
- All wedges have the same angular span (360 / N degrees)
- Screen coordinates have y pointing down
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple


# Pointer may drift this far past the wheel edge before hover is cleared
DEFAULT_LEAVE_TOLERANCE = 1.1


@dataclass(frozen=True)
class WheelGeometry:
    """
    Geometry of a wheel laid out in widget-local coordinates.

    Attributes:
        center_x: X coordinate of the wheel center
        center_y: Y coordinate of the wheel center
        radius: Interaction radius (outer edge of a full-score wedge)
        category_count: Number of wedges on the wheel
    """
    center_x: float
    center_y: float
    radius: float
    category_count: int

    @property
    def span_angle(self) -> float:
        """Angular span of a single wedge in degrees."""
        return 360.0 / self.category_count

    def distance(self, x: float, y: float) -> float:
        """Get the distance of a point from the wheel center."""
        return math.hypot(x - self.center_x, y - self.center_y)

    def angle_of(self, x: float, y: float) -> float:
        """
        Get the clockwise angle of a point measured from twelve o'clock.

        Returns:
            Angle in degrees in [0, 360)
        """
        dx = x - self.center_x
        dy = y - self.center_y
        # atan2 is measured from three o'clock; y-down makes it clockwise
        angle = math.degrees(math.atan2(dy, dx)) + 90.0
        return angle % 360.0

    def wedge_start_angle(self, index: int) -> float:
        """Get the clockwise start angle (from twelve o'clock) of a wedge."""
        return index * self.span_angle

    def resolve(self, x: float, y: float) -> Optional[Tuple[int, float]]:
        """
        Resolve a pointer position to wheel coordinates.

        Args:
            x: Pointer X in widget-local coordinates
            y: Pointer Y in widget-local coordinates

        Returns:
            Tuple of (category index, normalized radial position), or None
            if the geometry is degenerate (no wedges or zero radius).
            The radial position is 0.0 at the center and 1.0 at the edge;
            it is not clamped, so points outside the wheel exceed 1.0.
        """
        if self.category_count <= 0 or self.radius <= 0:
            return None

        index = int(self.angle_of(x, y) // self.span_angle)
        # Guard against float rounding right at 360 degrees
        index = min(index, self.category_count - 1)
        return index, self.distance(x, y) / self.radius

    def is_outside_region(
        self, x: float, y: float, tolerance: float = DEFAULT_LEAVE_TOLERANCE
    ) -> bool:
        """
        Check whether a point lies beyond the interaction region.

        Args:
            x: Pointer X in widget-local coordinates
            y: Pointer Y in widget-local coordinates
            tolerance: Multiple of the radius treated as still inside

        Returns:
            True if the point is farther than tolerance * radius from the center
        """
        return self.distance(x, y) > self.radius * tolerance
