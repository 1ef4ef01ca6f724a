"""
Value quantizer for the life wheel.

Maps a normalized radial position (0.0 at the center, 1.0 at the outer
edge of the wheel) to an integer score in the range [0, max_value].
"""

import math


def quantize(normalized_radius: float, max_value: int) -> int:
    """
    Quantize a normalized radial position to an integer score.

    The score is ``min(ceil(r * max_value), max_value)``, so any position
    past the center counts as at least 1 and positions beyond the outer
    edge saturate at max_value.

    Args:
        normalized_radius: Radial position, 0.0 = center, 1.0 = outer edge
        max_value: Upper bound of the score range (>= 0)

    Returns:
        Integer score in [0, max_value]

    Raises:
        ValueError: If max_value is negative

    Example:
        >>> quantize(0.65, 10)
        7
        >>> quantize(1.05, 10)
        10
    """
    if max_value < 0:
        raise ValueError(f"max_value must be >= 0, got {max_value}")

    # NaN fails this comparison too
    if not normalized_radius > 0:
        return 0

    if math.isinf(normalized_radius):
        return max_value

    # Round away float noise first so that quantize(v / max, max) == v
    scaled = round(normalized_radius * max_value, 9)
    return min(math.ceil(scaled), max_value)
