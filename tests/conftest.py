import pytest

from .images import noise, with_busy_box


@pytest.fixture
def busy_right_strip():
    """100x60 image whose columns [80, 100) are the only busy content."""
    return with_busy_box(100, 60, (80, 0, 100, 60))


@pytest.fixture
def busy_bottom_strip():
    """60x100 image whose rows [80, 100) are the only busy content."""
    return with_busy_box(60, 100, (0, 80, 60, 100))


@pytest.fixture
def noisy():
    return noise(64, 48)
