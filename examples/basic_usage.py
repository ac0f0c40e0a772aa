"""Basic paintcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from paintcolor import Color, InvalidHex, color


def demonstrate_construction() -> None:
    # The same orange written four ways.
    print("from_hex:   ", Color.from_hex("#ff8800"))
    print("from_rgb8:  ", Color.from_rgb8(255, 136, 0))
    print("literal:    ", color(0xFF8800))
    print("short code: ", color(0xF80))

    try:
        Color.from_hex("#orange")
    except InvalidHex as exc:
        print("rejected:   ", exc)


def demonstrate_linear_blend() -> None:
    # Average two colors in linear light, then return to sRGB.
    a = Color.from_hex("#ff0000").into_linear()
    b = Color.from_hex("#00ff00").into_linear()
    mixed = Color.from_linear_rgba(*((x + y) / 2 for x, y in zip(a, b)))
    print("linear mix: ", mixed.into_rgba8())


def demonstrate_manipulation() -> None:
    accent = Color.from_rgb(0.2, 0.4, 0.8)
    print("inverse:    ", accent.inverse().into_rgba8())
    print("half alpha: ", accent.scale_alpha(0.5).into_rgba8())


if __name__ == "__main__":
    demonstrate_construction()
    demonstrate_linear_blend()
    demonstrate_manipulation()
