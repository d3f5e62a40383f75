"""Basic cssgradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from cssgradient import FormatType, parse_color, parse_gradient, render_to_buffer
from cssgradient.export import save


def demonstrate_colors() -> None:
    # Every supported notation ends up as the same Color model.
    for token in ("#f0a", "rgba(255,255,255,.2)", "hsl(120,100%,50%)", "cornflowerblue"):
        print(f"{token:>24} ->", parse_color(token).rgba)


def demonstrate_gradients() -> None:
    gradient = parse_gradient("linear-gradient(to right, #000, #fff, #f00 80%, #00f)")
    print("Direction:", gradient.direction.value)
    print("Resolved at 100px:", [stop.position for stop in gradient.resolve(100)])

    buffer = render_to_buffer(gradient, 100, 20)
    print("Pixel at x=40:", buffer.pixel(40, 0))

    unit = buffer.to_format(FormatType.FLOAT)
    print("Same pixel as floats:", unit.pixel(40, 0))


def demonstrate_export() -> None:
    # Pillow does the encoding.
    stripes = parse_gradient(
        "linear-gradient(top, rgba(255,255,255,.2), rgba(255,255,255,.2) 1px, "
        "rgba(255,255,255,.05) 1px, rgba(255,255,255,0) 50%, rgba(0,0,0,0) 50%, rgba(0,0,0,.05))"
    )
    save(render_to_buffer(stripes, 40, 40), "stripes.png")
    print("Wrote stripes.png")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
    demonstrate_export()
