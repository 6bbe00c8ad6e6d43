"""Global configuration for the smart cropping toolkit.

This module centralizes defaults and user-tunable settings for:
- recognizing input image files
- entropy trimming granularity and palette size
- resampling and output behavior

All values can be overridden via CLI flags or direct imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Supported file extensions for images
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff", ".gif", ".avif"}


RESAMPLE_METHOD = "lanczos"  # one of {nearest, bilinear, bicubic, lanczos}


@dataclass
class Cropping:
    """Entropy trimming parameters.

    Attributes
    ----------
    steps
        Iteration budget used to derive the trim step size. The step size is
        ``max(rows - target_height, columns - target_width) // 2 // steps``.
    colors
        Palette size of the quantized image entropy is measured on.
    legacy_vertical_trim
        If True, the vertical pass stops after its first full-size slice and
        may leave the area taller than requested. Otherwise it converges like the
        horizontal pass.
    """

    steps: int = 10
    colors: int = 256
    legacy_vertical_trim: bool = False


@dataclass
class Behavior:
    """Processing behavior toggles.

    Attributes
    ----------
    overwrite
        Whether to overwrite files in the output directory.
    dry_run
        If True, do not write outputs; only log planned actions.
    keep_metadata
        If True, attempt to preserve EXIF metadata where possible.
    resample
        Resampling method for scaling operations. One of: 'nearest',
        'bilinear', 'bicubic', 'lanczos'.
    """

    overwrite: bool = False
    dry_run: bool = False
    keep_metadata: bool = True
    resample: str = RESAMPLE_METHOD


@dataclass
class ProjectConfig:
    """Top-level configuration container."""

    cropping: Cropping = field(default_factory=Cropping)
    behavior: Behavior = field(default_factory=Behavior)


# Default singleton-style config instance used by CLI unless overridden
CONFIG = ProjectConfig()
