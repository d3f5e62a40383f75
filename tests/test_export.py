import io

import numpy as np
import pytest
from PIL import Image

from cssgradient import parse_gradient, render_to_buffer
from cssgradient.export import image_format, render_image, save, to_image


@pytest.fixture
def buffer():
    gradient = parse_gradient("linear-gradient(to right, rgba(255,0,0,1), rgba(0,0,255,.5))")
    return render_to_buffer(gradient, 8, 4)


def test_to_image(buffer):
    image = to_image(buffer)
    assert image.mode == "RGBA"
    assert image.size == (8, 4)
    assert np.array_equal(np.asarray(image), buffer.value)


def test_png_round_trip(buffer):
    stream = io.BytesIO()
    save(buffer, stream, format="png")
    stream.seek(0)
    with Image.open(stream) as image:
        assert image.format == "PNG"
        assert np.array_equal(np.asarray(image.convert("RGBA")), buffer.value)


@pytest.mark.parametrize("name, expected", [
    ("jpg", "JPEG"), ("jpeg", "JPEG"), ("jpe", "JPEG"), ("gif", "GIF"),
    ("png", "PNG"), ("PNG", "PNG"), ("bmp", "PNG"), (None, "PNG"),
])
def test_image_format(name, expected):
    assert image_format(name) == expected


@pytest.mark.parametrize("name, pil_format", [("jpg", "JPEG"), ("gif", "GIF")])
def test_other_formats(buffer, name, pil_format):
    stream = io.BytesIO()
    save(buffer, stream, format=name)
    stream.seek(0)
    with Image.open(stream) as image:
        assert image.format == pil_format
        assert image.size == (8, 4)


def test_render_image_to_path(tmp_path):
    target = tmp_path / "gradient.png"
    render_image("linear-gradient(#f00)", 5, 3, target)
    with Image.open(target) as image:
        pixels = np.asarray(image.convert("RGBA"))
    assert pixels.shape == (3, 5, 4)
    assert np.all(pixels == [255, 0, 0, 255])
