"""Exceptions raised by the cropping operations."""

from __future__ import annotations

import numbers


class InvalidDimensions(ValueError):
    """Requested crop size is not positive or cannot be reached.

    Parameters
    ----------
    width, height
        The requested size.
    reason
        Human readable explanation.
    """

    def __init__(self, width: int, height: int, reason: str) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Invalid target size {width}x{height}: {reason}")


def check_positive(width: int, height: int) -> None:
    """Raise ``InvalidDimensions`` unless both sides are positive integers."""

    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidDimensions(width, height, "sizes must be integers")
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height, "sizes must be positive")
