import pytest

from ppmrw.models.image_model import Header, Image, Pixel, Variant


@pytest.fixture
def sample_image() -> Image:
    # 3x2, includes bytes that look like whitespace and '#'
    pixels = (
        Pixel(10, 32, 35),
        Pixel(255, 0, 0),
        Pixel(0, 255, 0),
        Pixel(0, 0, 255),
        Pixel(9, 13, 12),
        Pixel(200, 100, 50),
    )
    return Image(width=3, height=2, max_channel_value=255, pixels=pixels)


@pytest.fixture
def p6_header() -> Header:
    return Header(variant=Variant.BINARY, width=2, height=1, max_channel_value=255)


@pytest.fixture
def p3_header() -> Header:
    return Header(variant=Variant.ASCII, width=1, height=1, max_channel_value=255)
