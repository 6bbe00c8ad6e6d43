"""I/O utilities and helpers for image processing.

Helpers to enumerate input images, open images together with their raw EXIF
bytes, write results back out, and map resampling method names to Pillow
constants.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator, Optional, Tuple

import piexif
from PIL import Image

try:
    import pillow_avif  # noqa: F401
except Exception:  # noqa: BLE001
    # AVIF support is optional; installed with the ``avif`` extra
    pass

from config import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)

# Modes Pillow cannot write as JPEG
_JPEG_UNSAFE_MODES = {"P", "RGBA", "LA", "PA", "I", "F", "I;16"}


def iter_image_paths(input_path: Path) -> Generator[Path, None, None]:
    """Yield image file paths from a file or directory.

    Directories are walked recursively in sorted order. Files whose suffix is
    not listed in ``config.IMAGE_EXTENSIONS`` are ignored.
    """

    path = Path(input_path)
    if path.is_file():
        if path.suffix.lower() in IMAGE_EXTENSIONS:
            yield path
        return
    if path.is_dir():
        for p in sorted(path.rglob("*")):
            if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS:
                yield p


def load_image_with_exif(image_path: Path) -> Tuple[Image.Image, Optional[bytes]]:
    """Load an image and return it with raw EXIF bytes if available.

    Multi-frame files (animated GIF, multi-page TIFF) are positioned on their
    last frame. The pixel data is loaded eagerly so the file handle is
    released before any cropping happens.

    Parameters
    ----------
    image_path
        Path to the image file.

    Returns
    -------
    tuple
        A tuple of (PIL.Image, exif_bytes or None).
    """

    img = Image.open(image_path)
    n_frames = getattr(img, "n_frames", 1)
    if n_frames > 1:
        img.seek(n_frames - 1)
    img.load()
    exif_bytes = img.info.get("exif") or None
    return img, exif_bytes


def _exif_for_output(original_exif: bytes, size: Tuple[int, int]) -> bytes:
    """Rewrite the pixel dimension tags of ``original_exif`` to the new size.

    Falls back to the untouched bytes when the block cannot be parsed.
    """

    try:
        exif = piexif.load(original_exif)
        exif.setdefault("Exif", {})
        exif["Exif"][piexif.ExifIFD.PixelXDimension] = size[0]
        exif["Exif"][piexif.ExifIFD.PixelYDimension] = size[1]
        # The embedded thumbnail shows the uncropped image
        exif["thumbnail"] = None
        exif["1st"] = {}
        return piexif.dump(exif)
    except Exception:  # noqa: BLE001
        logger.debug("could not rewrite EXIF block, keeping it verbatim")
        return original_exif


def save_image(
    image: Image.Image,
    dest_path: Path,
    keep_metadata: bool = True,
    original_exif: Optional[bytes] = None,
    quality: Optional[int] = None,
) -> None:
    """Save a cropped image, optionally carrying over EXIF metadata.

    Parameters
    ----------
    image
        PIL image to save.
    dest_path
        Destination path; the format follows its suffix.
    keep_metadata
        Whether to attempt preserving EXIF metadata.
    original_exif
        EXIF bytes captured when the source was loaded. Pixel dimension tags
        are updated to the cropped size.
    quality
        Encoder quality for lossy formats.
    """

    dest_path = Path(dest_path)
    dest_path.parent.mkdir(parents=True, exist_ok=True)

    params = {}
    if keep_metadata and original_exif:
        params["exif"] = _exif_for_output(original_exif, image.size)

    ext = dest_path.suffix.lower()
    if ext in {".jpg", ".jpeg"}:
        if image.mode in _JPEG_UNSAFE_MODES:
            image = image.convert("RGB")
        params.update({"quality": quality or 95, "subsampling": 0, "optimize": True})
    elif ext == ".png":
        params.update({"optimize": True})
    elif ext == ".webp":
        params.update({"quality": quality or 95})
    elif ext == ".avif":
        params.update({"quality": quality or 90})

    image.save(dest_path, **params)
    logger.debug("wrote %s (%dx%d)", dest_path, image.width, image.height)


def map_resample(name: str) -> int:
    """Map a resample name to a Pillow constant.

    Unknown names map to Lanczos.
    """

    return {
        "nearest": Image.Resampling.NEAREST,
        "bilinear": Image.Resampling.BILINEAR,
        "bicubic": Image.Resampling.BICUBIC,
    }.get((name or "").lower(), Image.Resampling.LANCZOS)
