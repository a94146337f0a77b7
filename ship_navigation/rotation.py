from __future__ import annotations

import math

QUARTER_TURN = 90


def rotate(x: int, y: int, degrees: int) -> tuple[int, int]:
    """
    Rotate the integer vector (x, y) clockwise by degrees.

    degrees must be a multiple of 90; negative values rotate counter-clockwise.
    Each clockwise quarter turn maps (x, y) -> (y, -x), so the result is exact.
    """
    if degrees % QUARTER_TURN != 0:
        raise ValueError(f"rotation must be a multiple of {QUARTER_TURN} degrees (got {degrees})")

    # Python's modulo keeps this in [0, 3] for negative degrees too.
    turns = (degrees // QUARTER_TURN) % 4
    for _ in range(turns):
        x, y = y, -x
    return x, y


def rotate_polar(x: int, y: int, degrees: int) -> tuple[int, int]:
    """
    Rotate through polar coordinates and round back to integers.

    Reference form of rotate(); both agree for integer vectors and multiples of 90.
    """
    r = math.hypot(x, y)
    theta = math.atan2(y, x) - math.radians(degrees)
    return int(round(r * math.cos(theta))), int(round(r * math.sin(theta)))
