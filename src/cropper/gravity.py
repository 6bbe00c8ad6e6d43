"""Directional bias derived from where the interesting area sits."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple

from .geometry import Rectangle

logger = logging.getLogger(__name__)


class Gravity(Enum):
    """Nine-way gravity.

    Each value is the ``centering`` pair ``ImageOps.fit`` expects, i.e. the
    relative position of the crop window along x and y.
    """

    CENTER = (0.5, 0.5)
    NORTH = (0.5, 0.0)
    SOUTH = (0.5, 1.0)
    EAST = (1.0, 0.5)
    WEST = (0.0, 0.5)
    NORTH_EAST = (1.0, 0.0)
    NORTH_WEST = (0.0, 0.0)
    SOUTH_EAST = (1.0, 1.0)
    SOUTH_WEST = (0.0, 1.0)

    @property
    def centering(self) -> Tuple[float, float]:
        return self.value


def classify(area: Rectangle, image_width: int, image_height: int) -> Gravity:
    """Map an area of interest to a gravity.

    An edge is flagged when the area reaches into the outer quarter on that
    side (strict comparisons). Four flags mean the area spans the image and
    gives ``CENTER``; corner pairs win over single edges.
    """

    left = area.left < 0.25 * image_width
    top = area.top < 0.25 * image_height
    right = area.right > 0.75 * image_width
    bottom = area.bottom > 0.75 * image_height
    logger.debug(
        "gravity flags for %s: left=%s top=%s right=%s bottom=%s",
        area,
        left,
        top,
        right,
        bottom,
    )

    if left and top and right and bottom:
        return Gravity.CENTER

    if left and top:
        return Gravity.NORTH_WEST
    if right and top:
        return Gravity.NORTH_EAST
    if left and bottom:
        return Gravity.SOUTH_WEST
    if right and bottom:
        return Gravity.SOUTH_EAST

    if top:
        return Gravity.NORTH
    if bottom:
        return Gravity.SOUTH
    if left:
        return Gravity.WEST
    if right:
        return Gravity.EAST

    return Gravity.CENTER
