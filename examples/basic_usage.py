"""Basic chromalerp usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromalerp import (
    RGB,
    calculate_gradient,
    find_y,
    get_channels,
    rgb_from_sequence,
)


def demonstrate_colors() -> None:
    # Colors are signed 8-bit; rgb_from_sequence truncates and wraps.
    accent = RGB((12, 16, 24))
    print("Literal color:", accent)
    print("Narrowed from floats:", rgb_from_sequence([25.8, -3.9, 127.2]))

    channels = get_channels([accent, RGB((42, 14, 44))])
    print("Split into channels:", channels)


def demonstrate_interpolation() -> None:
    knots = [12, 23, 30, 49, 53, 54, 41, 32, 29]
    for x in (0, 1.4, 2.2, 3.8):
        print(f"find_y({x}) =", find_y(x, knots))


def demonstrate_gradients() -> None:
    strip = calculate_gradient([RGB((127, 0, 0)), RGB((0, 0, 127))])
    print("Two-anchor gradient sample:", strip[:3])

    dawn = calculate_gradient([RGB((0, 0, 40)), RGB((90, 30, 60)), RGB((127, 100, 20))])
    print("Three-anchor gradient, every 20th color:")
    for color in dawn[::20]:
        print("   ", color)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_interpolation()
    demonstrate_gradients()
