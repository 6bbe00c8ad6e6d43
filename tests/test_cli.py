import pytest
from click.testing import CliRunner
from PIL import Image

from main import cli

from .images import noise, with_busy_box


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def images(tmp_path):
    src = tmp_path / "in"
    src.mkdir()
    with_busy_box(100, 60, (80, 0, 100, 60)).save(src / "strip.png")
    noise(80, 80).save(src / "noise.png")
    return src


def test_crop_command(runner, images, tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(
        cli,
        [
            "crop",
            "--input-path", str(images),
            "--output-dir", str(out),
            "--size", "60x60",
            "--steps", "4",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "2 image(s) processed" in result.output
    with Image.open(out / "strip.png") as img:
        assert img.size == (60, 60)


@pytest.mark.parametrize("command", ["zoom", "thumbnail"])
def test_resizing_commands(runner, images, tmp_path, command):
    out = tmp_path / "out"
    result = runner.invoke(
        cli,
        [
            command,
            "--input-path", str(images),
            "--output-dir", str(out),
            "--size", "32X24",
            "--resample", "BILINEAR",
        ],
    )
    assert result.exit_code == 0, result.output
    for name in ("strip.png", "noise.png"):
        with Image.open(out / name) as img:
            assert img.size == (32, 24)


def test_square_command_respects_overwrite(runner, images, tmp_path):
    out = tmp_path / "out"
    args = ["square", "--input-path", str(images), "--output-dir", str(out)]

    assert runner.invoke(cli, args).exit_code == 0
    with Image.open(out / "strip.png") as img:
        assert img.size == (60, 60)

    again = runner.invoke(cli, args)
    assert "0 image(s) processed" in again.output
    forced = runner.invoke(cli, args + ["--overwrite"])
    assert "2 image(s) processed" in forced.output


def test_dry_run(runner, images, tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(
        cli,
        ["-v", "square", "--input-path", str(images), "--output-dir", str(out), "--dry-run"],
    )
    assert result.exit_code == 0, result.output
    assert not out.exists()


@pytest.mark.parametrize("size", ["60", "60by60", "0x10", "axb"])
def test_bad_size_is_a_usage_error(runner, images, tmp_path, size):
    result = runner.invoke(
        cli,
        ["crop", "--input-path", str(images), "--output-dir", str(tmp_path), "--size", size],
    )
    assert result.exit_code == 2


def test_oversized_crop_skips_every_image(runner, images, tmp_path):
    result = runner.invoke(
        cli,
        [
            "crop",
            "--input-path", str(images),
            "--output-dir", str(tmp_path / "out"),
            "--size", "500x500",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "0 image(s) processed" in result.output
    assert not any((tmp_path / "out").iterdir())


def test_gravity_command(runner, images):
    result = runner.invoke(
        cli,
        ["gravity", "--input-path", str(images / "strip.png"), "--size", "60x60", "--steps", "4"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip().endswith("NORTH_EAST")


def test_invalid_steps(runner, images):
    result = runner.invoke(
        cli, ["gravity", "--input-path", str(images), "--size", "10x10", "--steps", "0"]
    )
    assert result.exit_code == 2
