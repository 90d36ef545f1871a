"""JPEG to RGB decoding codec."""

from __future__ import annotations

import io

from PIL import Image

from eyecam.colorconvert.codec import Blueprint, Codec, CodecError, CodecErrorKind, Parameters
from eyecam.hal.format import PixelFormat

_JPEG = PixelFormat.jpeg()
_RGB24 = PixelFormat.rgb(24)


class JpegBlueprint(Blueprint):
    """Blueprint for decoding JPEG frames into 24-bit RGB."""

    def src_fmts(self) -> list[PixelFormat]:
        return [_JPEG]

    def dst_fmts(self) -> list[PixelFormat]:
        return [_RGB24]

    def _build(self, inparams: Parameters, outparams: Parameters) -> JpegCodec:
        return JpegCodec(inparams, outparams)


class JpegCodec(Codec):
    """Decodes JPEG frames to RGB24."""

    def decode(self, inbuf: bytes) -> bytes:
        if self.inparams.pixfmt == _JPEG and self.outparams.pixfmt == _RGB24:
            return convert_to_rgb(inbuf)
        raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)


def convert_to_rgb(src: bytes) -> bytes:
    """Decode a JPEG image into packed RGB24 pixels."""
    try:
        with Image.open(io.BytesIO(bytes(src))) as image:
            if image.format != "JPEG":
                raise CodecError(CodecErrorKind.OTHER, "failed to decode JPEG")
            image.load()
            if image.mode != "RGB":
                raise CodecError(CodecErrorKind.OTHER, "cannot handle JPEG format")
            return image.tobytes()
    except CodecError:
        raise
    except (OSError, ValueError, SyntaxError) as exc:
        raise CodecError(CodecErrorKind.OTHER, "failed to decode JPEG") from exc