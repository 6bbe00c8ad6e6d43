"""Entropy based edge trimming.

The trimming passes shave strips off the two ends of one axis, always dropping
the strip with the lower entropy, until the rectangle reaches the requested
extent. ``find_rectangle`` runs the horizontal pass and then the vertical pass
starting from the full image.
"""

from __future__ import annotations

import logging

from PIL import Image

from .entropy import region_entropy
from .errors import check_positive
from .geometry import Rectangle

logger = logging.getLogger(__name__)


def compute_step_size(
    image_width: int,
    image_height: int,
    target_width: int,
    target_height: int,
    steps: int = 10,
) -> int:
    """Width in pixels of each trimmed strip.

    Derived from the axis that needs the largest reduction, split over the
    two edges and the ``steps`` iteration budget. A result of 0 or less means
    no trimming is possible.
    """

    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    reduction = max(image_height - target_height, image_width - target_width)
    return reduction // 2 // steps


def trim_horizontal(
    quantized: Image.Image, rect: Rectangle, target_width: int, step_size: int
) -> Rectangle:
    """Narrow ``rect`` to ``target_width`` by dropping low entropy columns."""

    if step_size <= 0:
        return rect

    left, right = rect.left, rect.right
    width = right - left
    while width > target_width:
        slice_width = min(width - target_width, step_size)

        left_entropy = region_entropy(
            quantized, left, rect.top, slice_width, rect.height
        )
        right_entropy = region_entropy(
            quantized, right - slice_width, rect.top, slice_width, rect.height
        )

        if left_entropy < right_entropy:
            left += slice_width
        else:
            right -= slice_width
        logger.debug(
            "horizontal slice %d: left=%.4f right=%.4f -> [%d, %d)",
            slice_width,
            left_entropy,
            right_entropy,
            left,
            right,
        )
        width = right - left

    return Rectangle(left, rect.top, right, rect.bottom)


def trim_vertical(
    quantized: Image.Image,
    rect: Rectangle,
    target_height: int,
    step_size: int,
    legacy: bool = False,
) -> Rectangle:
    """Shorten ``rect`` to ``target_height`` by dropping low entropy rows.

    Parameters
    ----------
    quantized
        Palette image entropy is measured on.
    rect
        Current retained area; strips span its current width, not the full
        image width, so columns already dropped by the horizontal pass do
        not influence which rows are kept.
    target_height
        Requested height.
    step_size
        Maximum strip height.
    legacy
        Use the early-exit variant: slices are
        ``min(height - step_size, step_size)`` tall and the loop stops as soon
        as one full ``step_size`` slice was removed, which can leave the
        rectangle taller than ``target_height``.

    Returns
    -------
    Rectangle
        The trimmed rectangle.
    """

    if step_size <= 0:
        return rect

    top, bottom = rect.top, rect.bottom
    height = bottom - top
    while height > target_height:
        if legacy:
            slice_height = min(height - step_size, step_size)
            if slice_height <= 0:
                break
        else:
            slice_height = min(height - target_height, step_size)

        top_entropy = region_entropy(
            quantized, rect.left, top, rect.width, slice_height
        )
        bottom_entropy = region_entropy(
            quantized, rect.left, bottom - slice_height, rect.width, slice_height
        )

        if top_entropy < bottom_entropy:
            top += slice_height
        else:
            bottom -= slice_height
        logger.debug(
            "vertical slice %d: top=%.4f bottom=%.4f -> [%d, %d)",
            slice_height,
            top_entropy,
            bottom_entropy,
            top,
            bottom,
        )

        if legacy and slice_height == step_size:
            break
        height = bottom - top

    return Rectangle(rect.left, top, rect.right, bottom)


def find_rectangle(
    quantized: Image.Image,
    target_width: int,
    target_height: int,
    steps: int = 10,
    legacy_vertical: bool = False,
) -> Rectangle:
    """Find the most interesting ``target_width`` x ``target_height`` area.

    Parameters
    ----------
    quantized
        Palette-reduced image (see ``entropy.quantize_image``).
    target_width, target_height
        Requested extent. Axes already at or below the request are left
        untouched.
    steps
        Iteration budget for the step size.
    legacy_vertical
        Passed to ``trim_vertical`` as ``legacy``.

    Returns
    -------
    Rectangle
        Retained area in image coordinates.
    """

    check_positive(target_width, target_height)

    rect = Rectangle.full(quantized.width, quantized.height)
    step_size = compute_step_size(
        quantized.width, quantized.height, target_width, target_height, steps
    )
    logger.debug(
        "trimming %dx%d to %dx%d with step size %d",
        quantized.width,
        quantized.height,
        target_width,
        target_height,
        step_size,
    )
    if step_size <= 0:
        return rect

    rect = trim_horizontal(quantized, rect, target_width, step_size)
    rect = trim_vertical(
        quantized, rect, target_height, step_size, legacy=legacy_vertical
    )
    logger.debug("retained area %s", rect)
    return rect
