import io

import pytest

from ppmrw.models.errors import (
    ChannelOutOfRangeError,
    EmptyPayloadError,
    MalformedTokenError,
    MissingTokenError,
    PayloadTooShortError,
    TrailingDataError,
)
from ppmrw.models.image_model import Header, Variant
from ppmrw.services.pixel_service import PixelService


@pytest.fixture
def service() -> PixelService:
    return PixelService()


# ---- P6 ----
def test_p6_decodes_row_major(service, p6_header):
    image = service.read_p6_data(io.BytesIO(bytes([255, 0, 0, 0, 255, 0])), p6_header)

    assert (image.width, image.height, image.max_channel_value) == (2, 1, 255)
    assert image.pixels == ((255, 0, 0), (0, 255, 0))


def test_p6_two_rows():
    header = Header(variant=Variant.BINARY, width=2, height=2, max_channel_value=255)
    image = PixelService().read_p6_data(io.BytesIO(bytes(range(12))), header)

    assert image.pixel_at(0, 1) == (3, 4, 5)
    assert image.pixel_at(1, 0) == (6, 7, 8)


def test_p6_empty_payload(service, p6_header):
    with pytest.raises(EmptyPayloadError):
        service.read_p6_data(io.BytesIO(b""), p6_header)


def test_p6_one_byte_short(service, p6_header):
    with pytest.raises(PayloadTooShortError):
        service.read_p6_data(io.BytesIO(bytes(5)), p6_header)


def test_p6_one_byte_extra(service, p6_header):
    with pytest.raises(TrailingDataError):
        service.read_p6_data(io.BytesIO(bytes(7)), p6_header)


def test_p6_channel_above_declared_max(service):
    header = Header(variant=Variant.BINARY, width=2, height=1, max_channel_value=100)
    with pytest.raises(ChannelOutOfRangeError) as info:
        service.read_p6_data(io.BytesIO(bytes([100, 100, 100, 0, 101, 0])), header)
    assert info.value.value == 101
    assert info.value.index == 1


def test_p6_channel_equal_to_max_is_accepted(service):
    header = Header(variant=Variant.BINARY, width=1, height=1, max_channel_value=100)
    image = service.read_p6_data(io.BytesIO(bytes([100, 0, 100])), header)
    assert image.pixels == ((100, 0, 100),)


# ---- P3 ----
def test_p3_decodes_single_pixel(service, p3_header):
    image = service.read_p3_data(io.BytesIO(b"10 20 30\n"), p3_header)
    assert image.pixels == ((10, 20, 30),)


def test_p3_arbitrary_whitespace(service):
    header = Header(variant=Variant.ASCII, width=2, height=1, max_channel_value=255)
    image = service.read_p3_data(io.BytesIO(b"\n  1\t2\r\n3\n\n4 5    6   \n\n"), header)
    assert image.pixels == ((1, 2, 3), (4, 5, 6))


def test_p3_last_token_at_end_of_payload(service, p3_header):
    image = service.read_p3_data(io.BytesIO(b"10 20 30"), p3_header)
    assert image.pixels == ((10, 20, 30),)


def test_p3_empty_payload(service, p3_header):
    with pytest.raises(EmptyPayloadError):
        service.read_p3_data(io.BytesIO(b""), p3_header)


def test_p3_missing_final_token(service, p3_header):
    with pytest.raises(MissingTokenError):
        service.read_p3_data(io.BytesIO(b"10 20\n"), p3_header)


def test_p3_whitespace_only_payload(service, p3_header):
    with pytest.raises(MissingTokenError):
        service.read_p3_data(io.BytesIO(b"\n\n"), p3_header)


def test_p3_extra_token(service, p3_header):
    with pytest.raises(TrailingDataError):
        service.read_p3_data(io.BytesIO(b"10 20 30 40\n"), p3_header)


@pytest.mark.parametrize("payload", [b"1000 0 0\n", b"1a 0 0\n", b"10 x 0\n", b"0255 0 0\n"])
def test_p3_malformed_token(service, p3_header, payload):
    with pytest.raises(MalformedTokenError):
        service.read_p3_data(io.BytesIO(payload), p3_header)


def test_p3_channel_above_declared_max(service):
    header = Header(variant=Variant.ASCII, width=1, height=1, max_channel_value=15)
    with pytest.raises(ChannelOutOfRangeError):
        service.read_p3_data(io.BytesIO(b"15 16 0\n"), header)


def test_p3_negative_channel(service, p3_header):
    with pytest.raises(ChannelOutOfRangeError):
        service.read_p3_data(io.BytesIO(b"-1 0 0\n"), p3_header)


def test_p6_returns_row_major_image_with_header_max(service):
    header = Header(variant=Variant.BINARY, width=1, height=2, max_channel_value=9)
    image = service.read_p6_data(io.BytesIO(bytes([1, 2, 3, 7, 8, 9])), header)
    assert image.max_channel_value == 9
    assert image.pixel_at(1, 0) == (7, 8, 9)
