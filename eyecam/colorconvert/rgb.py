"""RGB to BGR conversion codec."""

from __future__ import annotations

from eyecam.colorconvert.codec import Blueprint, Codec, CodecError, CodecErrorKind, Parameters
from eyecam.hal.format import ImageFormat, PixelFormat

_RGB24 = PixelFormat.rgb(24)
_BGR24 = PixelFormat.bgr(24)


class RgbBlueprint(Blueprint):
    """Blueprint for converting 24-bit RGB into 24-bit BGR."""

    def src_fmts(self) -> list[PixelFormat]:
        return [_RGB24]

    def dst_fmts(self) -> list[PixelFormat]:
        return [_BGR24]

    def _build(self, inparams: Parameters, outparams: Parameters) -> RgbCodec:
        return RgbCodec(inparams, outparams)


class RgbCodec(Codec):
    """Swaps the red and blue channel of each pixel."""

    def decode(self, inbuf: bytes) -> bytes:
        if self.inparams.pixfmt == _RGB24 and self.outparams.pixfmt == _BGR24:
            fmt = ImageFormat(self.inparams.width, self.inparams.height, self.inparams.pixfmt)
            return convert_to_bgr(inbuf, fmt)
        raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)


def convert_to_bgr(src: bytes, src_fmt: ImageFormat) -> bytes:
    """Convert a packed RGB24 frame to BGR24."""
    expected = src_fmt.width * src_fmt.height * 3
    if len(src) != expected:
        raise CodecError(CodecErrorKind.INVALID_BUFFER)
    src = bytes(src)
    out = bytearray(src)
    out[0::3] = src[2::3]
    out[2::3] = src[0::3]
    return bytes(out)