"""YUV to RGB conversion codec."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from eyecam.colorconvert.codec import Blueprint, Codec, CodecError, CodecErrorKind, Parameters
from eyecam.hal.format import ImageFormat, PixelFormat, PixelFormatKind

_YUYV = PixelFormat.custom("YUYV")
_RGB24 = PixelFormat.rgb(24)


class YuvBlueprint(Blueprint):
    """Blueprint for converting packed YUYV (YUV 4:2:2) into 24-bit RGB."""

    def src_fmts(self) -> list[PixelFormat]:
        return [_YUYV]

    def dst_fmts(self) -> list[PixelFormat]:
        return [_RGB24]

    def _build(self, inparams: Parameters, outparams: Parameters) -> YuvCodec:
        return YuvCodec(inparams, outparams)


class YuvCodec(Codec):
    """Converts YUYV frames to RGB24."""

    def decode(self, inbuf: bytes) -> bytes:
        inp = self.inparams.pixfmt
        if inp.kind is PixelFormatKind.CUSTOM and self.outparams.pixfmt == _RGB24:
            if inp.value != "YUYV":
                raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)
            fmt = ImageFormat(self.inparams.width, self.inparams.height, inp)
            return yuv422_to_rgb(inbuf, fmt)
        raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)


def _clamp(value: int) -> int:
    return 0 if value < 0 else 255 if value > 255 else value


def _pixel_to_rgb(y: int, u: int, v: int) -> tuple[int, int, int]:
    c = y - 16
    d = u - 128
    e = v - 128
    r = (298 * c + 409 * e + 128) >> 8
    g = (298 * c - 100 * d - 208 * e + 128) >> 8
    b = (298 * c + 516 * d + 128) >> 8
    return _clamp(r), _clamp(g), _clamp(b)


def _to_rgb_bytes(pixels: Iterable[tuple[int, int, int]], dst_len: int) -> bytes:
    out = bytearray(dst_len)
    converted = bytes(channel for pixel in pixels for channel in _pixel_to_rgb(*pixel))
    out[: len(converted)] = converted
    return bytes(out)


def yuv444_to_rgb(src: bytes, src_fmt: ImageFormat) -> bytes:
    """Convert a packed YUV 4:4:4 frame to RGB24."""
    pixel_count = src_fmt.width * src_fmt.height
    if len(src) != pixel_count * 3:
        raise CodecError(CodecErrorKind.INVALID_BUFFER)
    src = bytes(src)
    return _to_rgb_bytes(zip(src[0::3], src[1::3], src[2::3]), pixel_count * 3)


def _yuyv_pixels(src: bytes) -> Iterator[tuple[int, int, int]]:
    for y0, u, y1, v in zip(src[0::4], src[1::4], src[2::4], src[3::4]):
        yield y0, u, v
        yield y1, u, v


def yuv422_to_rgb(src: bytes, src_fmt: ImageFormat) -> bytes:
    """Convert a packed YUYV (YUV 4:2:2) frame to RGB24."""
    pixel_count = src_fmt.width * src_fmt.height
    if len(src) != pixel_count * 2:
        raise CodecError(CodecErrorKind.INVALID_BUFFER)
    return _to_rgb_bytes(_yuyv_pixels(bytes(src)), pixel_count * 3)