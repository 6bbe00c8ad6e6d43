"""Pixel operations the smart cropper delegates to Pillow.

Every function returns a new image; callers that model in-place mutation
replace their handle with the result.
"""

from __future__ import annotations

from typing import Tuple

from PIL import Image, ImageOps

from .geometry import Rectangle
from .gravity import Gravity
from .io_utils import map_resample


def crop_to_box(image: Image.Image, x: int, y: int, width: int, height: int) -> Image.Image:
    """Crop ``width`` x ``height`` pixels at ``(x, y)``.

    The window is clipped to the image bounds, so an oversized request yields
    a smaller image instead of a padded one.
    """

    rect = Rectangle(
        x, y, min(x + width, image.width), min(y + height, image.height)
    )
    return image.crop(rect.box)


def resize_to_exact(
    image: Image.Image, size: Tuple[int, int], resample: str = "lanczos"
) -> Image.Image:
    """Scale to an exact size, ignoring the aspect ratio.

    Parameters
    ----------
    image
        Source image.
    size
        Target size (width, height).
    resample
        Resampling method name.

    Returns
    -------
    Image.Image
        Resized image.
    """

    if image.size == tuple(size):
        return image.copy()
    return image.resize(size, map_resample(resample))


def resize_to_fill(
    image: Image.Image,
    size: Tuple[int, int],
    gravity: Gravity = Gravity.CENTER,
    resample: str = "lanczos",
) -> Image.Image:
    """Scale to cover ``size`` and crop the overflow, anchored by ``gravity``.

    Parameters
    ----------
    image
        Source image.
    size
        Target (width, height).
    gravity
        Which part of the scaled image is kept.
    resample
        Resampling method name.

    Returns
    -------
    Image.Image
        Image of exactly ``size`` with the source aspect ratio preserved.
    """

    return ImageOps.fit(
        image, size, method=map_resample(resample), centering=gravity.centering
    )
