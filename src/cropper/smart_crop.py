"""Content-aware crop operations.

``SmartCropper`` owns one image and the palette-reduced copy entropy is
measured on. Operations replace the owned image with their result and return
it, so a cropper behaves like a mutable image handle.

Example
-------
>>> cropper = SmartCropper.from_file("photo.jpg")  # doctest: +SKIP
>>> thumb = cropper.zoom_crop(200, 200)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from .entropy import quantize_image
from .errors import InvalidDimensions, check_positive
from .geometry import Rectangle
from .gravity import Gravity, classify
from .io_utils import load_image_with_exif
from .resize import crop_to_box, resize_to_exact, resize_to_fill
from .trim import find_rectangle as trim_to_rectangle

logger = logging.getLogger(__name__)


class SmartCropper:
    """Entropy driven cropper for a single image.

    Parameters
    ----------
    image
        Image to crop. The cropper takes ownership of the handle.
    steps
        Iteration budget for the trim step size.
    colors
        Palette size used for entropy measurement.
    legacy_vertical
        Stop the vertical pass after its first full-size slice.
    resample
        Resampling method name for scaling operations.
    """

    def __init__(
        self,
        image: Image.Image,
        steps: int = 10,
        colors: int = 256,
        legacy_vertical: bool = False,
        resample: str = "lanczos",
    ) -> None:
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        self.image = image
        self.steps = steps
        self.colors = colors
        self.legacy_vertical = legacy_vertical
        self.resample = resample
        self.exif: Optional[bytes] = None

        self._quantized: Optional[Image.Image] = None
        self._quantized_source: Optional[Image.Image] = None

    @classmethod
    def from_file(cls, image_path: Path, **kwargs) -> "SmartCropper":
        """Open an image from disk; its EXIF bytes are kept on ``exif``."""

        image, exif = load_image_with_exif(Path(image_path))
        cropper = cls(image, **kwargs)
        cropper.exif = exif
        return cropper

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def quantized(self) -> Image.Image:
        """Palette copy of the current image, rebuilt whenever the image changes."""

        if self._quantized is None or self._quantized_source is not self.image:
            self._quantized = quantize_image(self.image, self.colors)
            self._quantized_source = self.image
        return self._quantized

    def find_rectangle(self, width: int, height: int) -> Rectangle:
        """Most interesting ``width`` x ``height`` area of the current image."""

        return trim_to_rectangle(
            self.quantized,
            width,
            height,
            steps=self.steps,
            legacy_vertical=self.legacy_vertical,
        )

    # alias
    square = find_rectangle

    def smart_gravity(self, width: int, height: int) -> Gravity:
        """Gravity of the area of interest for a ``width`` x ``height`` request."""

        area = self.find_rectangle(width, height)
        return classify(area, self.width, self.height)

    def check_fixed_size(self, width: int, height: int) -> None:
        """Raise ``InvalidDimensions`` unless ``fixed_crop(width, height)`` can succeed."""

        check_positive(width, height)
        if width > self.width or height > self.height:
            raise InvalidDimensions(
                width,
                height,
                f"larger than the {self.width}x{self.height} source",
            )

    def fixed_crop(self, width: int, height: int) -> Image.Image:
        """Crop to exactly ``width`` x ``height`` around the busiest content.

        The crop is anchored at the found rectangle's top-left corner and uses
        the requested size, not the rectangle's own extent.
        """

        self.check_fixed_size(width, height)
        rect = self.find_rectangle(width, height)
        self.image = crop_to_box(self.image, rect.left, rect.top, width, height)
        return self.image

    def smart_square(self) -> Image.Image:
        """Crop to a square on the shorter side, dropping the dullest edges.

        Already square images are returned unchanged.
        """

        if self.width != self.height:
            side = min(self.width, self.height)
            rect = self.find_rectangle(side, side)
            logger.debug("squaring %dx%d to %s", self.width, self.height, rect)
            self.image = crop_to_box(self.image, rect.left, rect.top, side, side)
        return self.image

    def zoom_crop(self, width: int, height: int) -> Image.Image:
        """Square the image, then fill ``width`` x ``height`` preserving aspect.

        The fill is anchored by the gravity of the area of interest, measured
        on the image as it was before squaring.
        """

        check_positive(width, height)
        gravity = self.smart_gravity(width, height)
        logger.debug("zoom crop to %dx%d with %s", width, height, gravity.name)
        self.smart_square()
        self.image = resize_to_fill(
            self.image, (width, height), gravity, resample=self.resample
        )
        return self.image

    def crop_and_scale(self, width: int, height: int) -> Image.Image:
        """Square the image, then scale it to ``width`` x ``height``.

        Non-square targets distort the result.
        """

        check_positive(width, height)
        self.smart_square()
        self.image = resize_to_exact(
            self.image, (width, height), resample=self.resample
        )
        return self.image
