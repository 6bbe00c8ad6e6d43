"""Histogram entropy used as the measure of visual interest.

Entropy is always evaluated on a palette-reduced copy of the source image so
histograms stay bounded in size and comparable between strips of the same
image.
"""

from __future__ import annotations

import math
from typing import Iterable

from PIL import Image


def quantize_image(image: Image.Image, colors: int = 256) -> Image.Image:
    """Return a palette ("P" mode) copy of ``image`` with at most ``colors`` entries.

    Parameters
    ----------
    image
        Source image in any mode.
    colors
        Maximum palette size.

    Returns
    -------
    Image.Image
        Quantized image of the same size.
    """

    if colors < 1 or colors > 256:
        raise ValueError(f"Palette size must be within 1..256, got {colors}")
    return image.convert("RGB").quantize(colors=colors)


def entropy_from_histogram(histogram: Iterable[int]) -> float:
    """Compute ``-sum(p * log2(p))`` over the nonzero bins of a histogram.

    An empty histogram (total count of zero) has entropy 0.
    """

    counts = [count for count in histogram if count > 0]
    total = float(sum(counts))
    if total == 0:
        return 0.0
    entropy = -sum((c / total) * math.log2(c / total) for c in counts)
    # a single bin yields -0.0
    return abs(entropy)


def image_entropy(image: Image.Image) -> float:
    """Entropy of an image's histogram.

    Zero-area images are degenerate and return 0.
    """

    if image.width == 0 or image.height == 0:
        return 0.0
    return entropy_from_histogram(image.histogram())


def region_entropy(
    quantized: Image.Image, x: int, y: int, width: int, height: int
) -> float:
    """Entropy of the ``width`` x ``height`` region at ``(x, y)`` of a quantized image."""

    if width <= 0 or height <= 0:
        return 0.0
    region = quantized.crop((x, y, x + width, y + height))
    return image_entropy(region)
