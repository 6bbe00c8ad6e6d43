import math

import pytest
from PIL import Image

from src.cropper.entropy import (
    entropy_from_histogram,
    image_entropy,
    quantize_image,
    region_entropy,
)

from .images import checkerboard, noise, uniform


def test_uniform_region_has_zero_entropy():
    quantized = quantize_image(uniform(40, 30))
    assert image_entropy(quantized) == 0.0
    assert region_entropy(quantized, 5, 5, 10, 10) == 0.0


@pytest.mark.parametrize("k", [2, 4, 8, 16])
def test_equiprobable_colors_give_log2_k(k):
    # k vertical bands of equal width, one gray level each
    img = Image.new("L", (k * 4, 3))
    img.putdata([(x // 4) * 10 for _ in range(3) for x in range(k * 4)])
    assert image_entropy(img) == pytest.approx(math.log2(k))


def test_histogram_entropy_skips_empty_bins():
    assert entropy_from_histogram([0, 5, 0, 5]) == pytest.approx(1.0)
    assert entropy_from_histogram([1] * 8) == pytest.approx(3.0)


def test_degenerate_histogram_is_zero():
    assert entropy_from_histogram([]) == 0.0
    assert entropy_from_histogram([0, 0, 0]) == 0.0


def test_zero_area_region_is_zero():
    quantized = quantize_image(checkerboard(10, 10))
    assert region_entropy(quantized, 3, 3, 0, 5) == 0.0
    assert region_entropy(quantized, 3, 3, 5, 0) == 0.0


def test_checkerboard_region_has_one_bit():
    quantized = quantize_image(checkerboard(10, 10))
    assert region_entropy(quantized, 0, 0, 4, 4) == pytest.approx(1.0)


def test_quantize_bounds_palette():
    quantized = quantize_image(noise(32, 32), colors=16)
    assert quantized.mode == "P"
    assert quantized.size == (32, 32)
    assert len([c for c in quantized.histogram() if c]) <= 16


def test_quantize_accepts_alpha_and_gray():
    rgba = Image.new("RGBA", (8, 8), (10, 20, 30, 128))
    gray = Image.new("L", (8, 8), 200)
    assert quantize_image(rgba).mode == "P"
    assert quantize_image(gray).mode == "P"


def test_quantize_rejects_bad_palette_size():
    with pytest.raises(ValueError):
        quantize_image(uniform(4, 4), colors=0)
