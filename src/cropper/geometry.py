"""Rectangle value type shared by the trimming and gravity modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rectangle:
    """Retained area of an image in pixel coordinates.

    ``right`` and ``bottom`` are exclusive, matching Pillow crop boxes.
    """

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        if self.left < 0 or self.top < 0:
            raise ValueError(f"Negative rectangle origin: {self}")
        if self.right <= self.left or self.bottom <= self.top:
            raise ValueError(f"Empty rectangle: {self}")

    @classmethod
    def full(cls, width: int, height: int) -> "Rectangle":
        return cls(0, 0, width, height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow crop box ``(left, upper, right, lower)``."""
        return (self.left, self.top, self.right, self.bottom)
