"""Batch smart-cropping workflows.

Applies one ``SmartCropper`` operation to every image under a path and writes
the results to an output directory, keeping file names.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from PIL import Image

from config import CONFIG, Behavior, Cropping
from .errors import InvalidDimensions, check_positive
from .io_utils import iter_image_paths, save_image
from .smart_crop import SmartCropper

logger = logging.getLogger(__name__)

MODES = ("crop", "zoom", "scale", "square")


def apply_mode(
    cropper: SmartCropper, mode: str, size: Optional[Tuple[int, int]]
) -> Image.Image:
    """Run the operation named ``mode`` on ``cropper``.

    Parameters
    ----------
    cropper
        Cropper owning the image.
    mode
        One of ``MODES``: ``crop`` (fixed crop), ``zoom`` (zoom crop),
        ``scale`` (crop and scale) or ``square``.
    size
        Target (width, height); ignored for ``square``.

    Returns
    -------
    Image.Image
        The processed image.
    """

    if mode == "square":
        return cropper.smart_square()
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")
    if size is None:
        raise ValueError(f"Mode '{mode}' requires a target size")

    width, height = size
    operations = {
        "crop": cropper.fixed_crop,
        "zoom": cropper.zoom_crop,
        "scale": cropper.crop_and_scale,
    }
    return operations[mode](width, height)


def check_request(
    cropper: SmartCropper, mode: str, size: Optional[Tuple[int, int]]
) -> None:
    """Raise ``InvalidDimensions`` if ``apply_mode`` would reject the request."""

    if mode == "square" or size is None:
        return
    if mode == "crop":
        cropper.check_fixed_size(*size)
    else:
        check_positive(*size)


def process_smart_crop_batch(
    input_path: Path,
    output_dir: Path,
    mode: str,
    size: Optional[Tuple[int, int]] = None,
    cropping: Optional[Cropping] = None,
    behavior: Optional[Behavior] = None,
) -> List[Path]:
    """Smart-crop a single image or a directory of images.

    Parameters
    ----------
    input_path
        Path to a single image or a directory.
    output_dir
        Destination directory for processed images.
    mode
        Operation name, see ``apply_mode``.
    size
        Target (width, height).
    cropping
        Trimming parameters; defaults to ``CONFIG.cropping``.
    behavior
        Overwrite / dry-run / metadata / resample settings; defaults to
        ``CONFIG.behavior``.

    Returns
    -------
    list of Path
        Destination paths that were written (or would be, on a dry run).
        Images whose size cannot satisfy the request are skipped with a
        warning, in dry runs as well.
    """

    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")

    cropping = cropping or CONFIG.cropping
    behavior = behavior or CONFIG.behavior
    out_dir = Path(output_dir)
    if not behavior.dry_run:
        out_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for src in iter_image_paths(Path(input_path)):
        dest = out_dir / src.name
        if dest.exists() and not behavior.overwrite:
            logger.info("skipping %s, %s exists", src, dest)
            continue

        cropper = SmartCropper.from_file(
            src,
            steps=cropping.steps,
            colors=cropping.colors,
            legacy_vertical=cropping.legacy_vertical_trim,
            resample=behavior.resample,
        )
        try:
            check_request(cropper, mode, size)
        except InvalidDimensions as exc:
            logger.warning("skipping %s: %s", src, exc)
            continue

        if behavior.dry_run:
            logger.info("would %s %s -> %s", mode, src, dest)
            written.append(dest)
            continue

        result = apply_mode(cropper, mode, size)
        save_image(
            result,
            dest,
            keep_metadata=behavior.keep_metadata,
            original_exif=cropper.exif,
        )
        logger.info("%s %s -> %s (%dx%d)", mode, src, dest, result.width, result.height)
        written.append(dest)

    return written


def gravity_report(
    input_path: Path, size: Tuple[int, int], cropping: Optional[Cropping] = None
) -> Dict[Path, str]:
    """Map every image under ``input_path`` to the name of its smart gravity."""

    cropping = cropping or CONFIG.cropping
    report: Dict[Path, str] = {}
    for src in iter_image_paths(Path(input_path)):
        cropper = SmartCropper.from_file(
            src,
            steps=cropping.steps,
            colors=cropping.colors,
            legacy_vertical=cropping.legacy_vertical_trim,
        )
        report[src] = cropper.smart_gravity(*size).name
    return report
