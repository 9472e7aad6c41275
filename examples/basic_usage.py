"""Basic stopgradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from stopgradient import (
    RGB,
    Gradient,
    InvalidConfiguration,
    heat_gradient,
)


def demonstrate_gradient() -> None:
    # Three stops spread over [0, 100]; values outside use dedicated colors.
    traffic = Gradient(
        0,
        100,
        [RGB((0, 200, 0)), RGB("#ffd700"), RGB((220, 0, 0))],
        min_outlier_color=RGB((128, 128, 128)),
        max_outlier_color=RGB((80, 0, 0)),
    )
    for value in (-10, 0, 25, 50, 75, 100, 140):
        color = traffic.get_rgb(value)
        print(f"{value:>4} -> {color.hex} {color.value}")

    print("Legend:", [c.hex for c in traffic.sample(5)])


def demonstrate_late_initialization() -> None:
    # A gradient can be declared first and configured later.
    grad = Gradient()
    grad.initialize(0x000F, 0xFFF0, [RGB((255, 255, 255)), RGB((75, 25, 150))])
    print("Uninitialized then initialized:", grad.get_rgb(0x8000))

    try:
        grad.initialize(10, 10, [RGB((0, 0, 0))])
    except InvalidConfiguration as e:
        print("Rejected:", e)


def demonstrate_arrays() -> None:
    # Vectorized lookup for heatmaps.
    grad = heat_gradient()
    field = np.linspace(0, 0xFFFF, 12).reshape(3, 4)
    print("Heatmap pixels shape:", grad.get_rgb_array(field).shape)


if __name__ == "__main__":
    demonstrate_gradient()
    demonstrate_late_initialization()
    demonstrate_arrays()
