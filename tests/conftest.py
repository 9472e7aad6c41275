import pytest

from stopgradient import ColorRGB, Gradient


@pytest.fixture
def grayscale():
    """Black to white over [0, 100], no outlier colors."""
    return Gradient(0, 100, [ColorRGB((0, 0, 0)), ColorRGB((255, 255, 255))])
