"""CLI for entropy based smart cropping.

Commands:
  - crop: Fixed-size crop around the busiest content
  - zoom: Square, then fill the target size anchored by smart gravity
  - thumbnail: Square, then scale to the target size
  - square: Crop to a square on the shorter side
  - gravity: Print the smart gravity of each image
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Optional, Tuple

import click
from config import CONFIG, Cropping
from src.cropper.batch import gravity_report, process_smart_crop_batch

_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


def _parse_size(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[Tuple[int, int]]:
    if value is None:
        return None
    match = _SIZE_RE.match(value)
    if not match:
        raise click.BadParameter(f"Expected WIDTHxHEIGHT, got '{value}'")
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise click.BadParameter(f"Size must be positive, got '{value}'")
    return width, height


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cropping_options(func):
    """Options shared by every command that runs the trimmer."""

    options = [
        click.option(
            "--steps",
            type=click.IntRange(min=1),
            default=CONFIG.cropping.steps,
            show_default=True,
            help="Iteration budget for the trim step size",
        ),
        click.option(
            "--colors",
            type=click.IntRange(1, 256),
            default=CONFIG.cropping.colors,
            show_default=True,
            help="Palette size entropy is measured on",
        ),
        click.option(
            "--legacy-vertical/--no-legacy-vertical",
            default=CONFIG.cropping.legacy_vertical_trim,
            help="Stop the vertical pass after its first full step",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _output_options(func):
    """Options shared by every command that writes images."""

    options = [
        click.option(
            "--input-path", type=click.Path(path_type=Path, exists=True), required=True
        ),
        click.option("--output-dir", type=click.Path(path_type=Path), required=True),
        click.option("--overwrite/--no-overwrite", default=CONFIG.behavior.overwrite),
        click.option(
            "--keep-metadata/--no-keep-metadata", default=CONFIG.behavior.keep_metadata
        ),
        click.option("--dry-run/--no-dry-run", default=CONFIG.behavior.dry_run),
        click.option(
            "--resample",
            type=click.Choice(
                ["nearest", "bilinear", "bicubic", "lanczos"], case_sensitive=False
            ),
            default=CONFIG.behavior.resample,
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return _cropping_options(func)


def _run(mode: str, size: Optional[Tuple[int, int]], **kwargs) -> None:
    cropping = replace(
        CONFIG.cropping,
        steps=kwargs["steps"],
        colors=kwargs["colors"],
        legacy_vertical_trim=kwargs["legacy_vertical"],
    )
    behavior = replace(
        CONFIG.behavior,
        overwrite=kwargs["overwrite"],
        keep_metadata=kwargs["keep_metadata"],
        dry_run=kwargs["dry_run"],
        resample=kwargs["resample"].lower(),
    )
    written = process_smart_crop_batch(
        input_path=kwargs["input_path"],
        output_dir=kwargs["output_dir"],
        mode=mode,
        size=size,
        cropping=cropping,
        behavior=behavior,
    )
    click.echo(f"{len(written)} image(s) processed")


@click.group()
@click.option("-v", "--verbose", count=True, help="-v for progress, -vv for trim details")
def cli(verbose: int) -> None:
    """Entropy based smart cropping toolkit."""

    _configure_logging(verbose)


@cli.command(name="crop")
@_output_options
@click.option("--size", callback=_parse_size, required=True, help="WIDTHxHEIGHT")
def cmd_crop(size: Tuple[int, int], **kwargs) -> None:
    """Crop to exactly the given size, keeping the busiest content."""

    _run("crop", size, **kwargs)


@cli.command(name="zoom")
@_output_options
@click.option("--size", callback=_parse_size, required=True, help="WIDTHxHEIGHT")
def cmd_zoom(size: Tuple[int, int], **kwargs) -> None:
    """Square each image, then fill the size anchored by its smart gravity."""

    _run("zoom", size, **kwargs)


@cli.command(name="thumbnail")
@_output_options
@click.option("--size", callback=_parse_size, required=True, help="WIDTHxHEIGHT")
def cmd_thumbnail(size: Tuple[int, int], **kwargs) -> None:
    """Square each image, then scale it to the size (may distort)."""

    _run("scale", size, **kwargs)


@cli.command(name="square")
@_output_options
def cmd_square(**kwargs) -> None:
    """Crop each image to a square on its shorter side."""

    _run("square", None, **kwargs)


@cli.command(name="gravity")
@click.option(
    "--input-path", type=click.Path(path_type=Path, exists=True), required=True
)
@click.option("--size", callback=_parse_size, required=True, help="WIDTHxHEIGHT")
@_cropping_options
def cmd_gravity(
    input_path: Path,
    size: Tuple[int, int],
    steps: int,
    colors: int,
    legacy_vertical: bool,
) -> None:
    """Print the smart gravity each image would be zoom-cropped with."""

    cropping = Cropping(
        steps=steps, colors=colors, legacy_vertical_trim=legacy_vertical
    )
    report = gravity_report(input_path, size, cropping=cropping)
    for path, gravity in report.items():
        click.echo(f"{path}\t{gravity}")


if __name__ == "__main__":
    cli()
