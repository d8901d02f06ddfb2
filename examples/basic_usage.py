"""Basic huepath usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from huepath import (
    hex_to_rgb,
    rgb_to_hsv,
    hsv_to_hex,
    gradient,
    transition,
    swatch_html,
)


def demonstrate_conversions() -> None:
    # Round-trip a color through RGB and HSV.
    rgb = hex_to_rgb("#ff8800")
    print("HEX -> RGB:", rgb)

    hsv = rgb_to_hsv(*rgb)
    print("RGB -> HSV:", hsv)
    print("HSV -> HEX:", hsv_to_hex(*hsv))


def demonstrate_gradients() -> None:
    # Hue walks the short way round the wheel from orange to periwinkle.
    colors = gradient("#ff8800", "#8899dd", 5)
    print("Gradient:", colors)
    print(swatch_html(colors))

    # Clockwise hue direction takes the long way instead.
    print("Clockwise:", gradient("#ff8800", "#8899dd", 5, hue_mode="cw"))


def demonstrate_transitions() -> None:
    # Ten colors through four stops; extra colors land in the rightmost gaps.
    stops = ["#ff0000", "#ffff00", "#00ff00", "#0000ff"]
    print("RGB transition:", transition(stops, 10))
    print("HSV transition:", transition(stops, 10, space="hsv"))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_gradients()
    demonstrate_transitions()
