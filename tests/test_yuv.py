import pytest

from eyecam.colorconvert.codec import CodecError, CodecErrorKind, Parameters
from eyecam.colorconvert.yuv import YuvBlueprint, YuvCodec, yuv422_to_rgb, yuv444_to_rgb
from eyecam.hal.format import ImageFormat, PixelFormat

YUYV = PixelFormat.custom("YUYV")
RGB = PixelFormat.rgb(24)


def test_formats():
    bp = YuvBlueprint()
    assert bp.src_fmts() == [YUYV]
    assert bp.dst_fmts() == [RGB]


def test_limited_range_black():
    out = yuv444_to_rgb(bytes([16, 128, 128]), ImageFormat(1, 1, YUYV))
    assert out == bytes([0, 0, 0])


def test_limited_range_white():
    out = yuv444_to_rgb(bytes([235, 128, 128]), ImageFormat(1, 1, YUYV))
    assert out == bytes([255, 255, 255])


@pytest.mark.parametrize("luma", [16, 50, 100, 180, 235])
def test_neutral_chroma_gives_gray(luma):
    r, g, b = yuv444_to_rgb(bytes([luma, 128, 128]), ImageFormat(1, 1, YUYV))
    assert r == g == b


def test_luma_is_monotonic():
    fmt = ImageFormat(1, 1, YUYV)
    values = [yuv444_to_rgb(bytes([y, 128, 128]), fmt)[0] for y in range(16, 236, 10)]
    assert values == sorted(values)


def test_yuv422_matches_yuv444_with_shared_chroma():
    y0, u, y1, v = 81, 90, 145, 240
    packed = yuv422_to_rgb(bytes([y0, u, y1, v]), ImageFormat(2, 1, YUYV))
    full = yuv444_to_rgb(bytes([y0, u, v, y1, u, v]), ImageFormat(2, 1, YUYV))
    assert packed == full


def test_yuv422_output_length():
    out = yuv422_to_rgb(bytes(4 * 2 * 2), ImageFormat(4, 2, YUYV))
    assert len(out) == 4 * 2 * 3


@pytest.mark.parametrize("length", [0, 3, 6])
def test_yuv422_rejects_wrong_length(length):
    with pytest.raises(CodecError) as info:
        yuv422_to_rgb(bytes(length), ImageFormat(2, 1, YUYV))
    assert info.value.kind is CodecErrorKind.INVALID_BUFFER


@pytest.mark.parametrize("length", [0, 4, 9])
def test_yuv444_rejects_wrong_length(length):
    with pytest.raises(CodecError) as info:
        yuv444_to_rgb(bytes(length), ImageFormat(2, 1, YUYV))
    assert info.value.kind is CodecErrorKind.INVALID_BUFFER


def test_codec_decode_through_blueprint():
    codec = YuvBlueprint().instantiate(Parameters(YUYV, 2, 1), Parameters(RGB, 2, 1))
    src = bytes([16, 128, 235, 128])
    assert codec.decode(src) == yuv422_to_rgb(src, ImageFormat(2, 1, YUYV))
    assert codec.decode(src)[:3] == bytes([0, 0, 0])


def test_instantiate_rejects_other_custom_format():
    with pytest.raises(CodecError) as info:
        YuvBlueprint().instantiate(
            Parameters(PixelFormat.custom("NV12"), 2, 1), Parameters(RGB, 2, 1)
        )
    assert info.value.kind is CodecErrorKind.UNSUPPORTED_FORMAT


def test_instantiate_rejects_size_mismatch():
    with pytest.raises(CodecError) as info:
        YuvBlueprint().instantiate(Parameters(YUYV, 2, 1), Parameters(RGB, 4, 1))
    assert info.value.kind is CodecErrorKind.INVALID_PARAM


def test_direct_codec_rejects_other_custom_format():
    codec = YuvCodec(Parameters(PixelFormat.custom("UYVY"), 2, 1), Parameters(RGB, 2, 1))
    with pytest.raises(CodecError) as info:
        codec.decode(bytes(4))
    assert info.value.kind is CodecErrorKind.UNSUPPORTED_FORMAT


def test_direct_codec_rejects_non_custom_input():
    codec = YuvCodec(Parameters(PixelFormat.gray(8), 2, 1), Parameters(RGB, 2, 1))
    with pytest.raises(CodecError) as info:
        codec.decode(bytes(4))
    assert info.value.kind is CodecErrorKind.UNSUPPORTED_FORMAT