"""Pixel and image format descriptions, plus fourcc mapping."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class PixelFormatKind(enum.Enum):
    """Family of a pixel format."""

    CUSTOM = "Custom"
    DEPTH = "Depth"
    GRAY = "Gray"
    BGR = "Bgr"
    RGB = "Rgb"
    JPEG = "Jpeg"


_WITH_BITS = {
    PixelFormatKind.DEPTH,
    PixelFormatKind.GRAY,
    PixelFormatKind.BGR,
    PixelFormatKind.RGB,
}

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _quote(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


@dataclass(frozen=True)
class PixelFormat:
    """Describes image pixels.

    Uncompressed formats carry the depth of a whole pixel in bits; custom
    formats carry an application-defined name; JPEG carries nothing.
    """

    kind: PixelFormatKind
    value: int | str | None = None

    def __post_init__(self) -> None:
        if self.kind is PixelFormatKind.CUSTOM:
            if not isinstance(self.value, str):
                raise TypeError("custom pixel format needs a string name")
        elif self.kind is PixelFormatKind.JPEG:
            if self.value is not None:
                raise TypeError("jpeg pixel format takes no value")
        elif isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 0:
            raise TypeError(f"{self.kind.value} pixel format needs a bit depth")

    @classmethod
    def custom(cls, name: str) -> PixelFormat:
        return cls(PixelFormatKind.CUSTOM, name)

    @classmethod
    def depth(cls, bits: int) -> PixelFormat:
        return cls(PixelFormatKind.DEPTH, bits)

    @classmethod
    def gray(cls, bits: int) -> PixelFormat:
        return cls(PixelFormatKind.GRAY, bits)

    @classmethod
    def bgr(cls, bits: int) -> PixelFormat:
        return cls(PixelFormatKind.BGR, bits)

    @classmethod
    def rgb(cls, bits: int) -> PixelFormat:
        return cls(PixelFormatKind.RGB, bits)

    @classmethod
    def jpeg(cls) -> PixelFormat:
        return cls(PixelFormatKind.JPEG)

    def bits(self) -> int | None:
        """Return the number of bits of a whole pixel, or None if unknown."""
        if self.kind in _WITH_BITS:
            return self.value  # type: ignore[return-value]
        return None

    def __str__(self) -> str:
        if self.kind is PixelFormatKind.JPEG:
            return self.kind.value
        if self.kind is PixelFormatKind.CUSTOM:
            return f"{self.kind.value}({_quote(self.value)})"  # type: ignore[arg-type]
        return f"{self.kind.value}({self.value})"


_FROM_FOURCC: dict[bytes, PixelFormat] = {
    b"GREY": PixelFormat.gray(8),
    b"Y16 ": PixelFormat.gray(16),
    b"Z16 ": PixelFormat.depth(16),
    b"BGR3": PixelFormat.bgr(24),
    b"RGB3": PixelFormat.rgb(24),
    b"MJPG": PixelFormat.jpeg(),
}

_TO_FOURCC: dict[PixelFormat, bytes] = {
    PixelFormat.gray(8): b"GREY",
    PixelFormat.gray(16): b"Y16 ",
    PixelFormat.depth(16): b"Z16 ",
    PixelFormat.bgr(24): b"BGR3",
    PixelFormat.rgb(24): b"RGB3",
    PixelFormat.rgb(32): b"AB24",
    PixelFormat.jpeg(): b"MJPG",
}


def from_fourcc(fourcc: bytes | str) -> PixelFormat:
    """Map a four character code to a pixel format.

    Unknown codes become custom formats named after the code.
    """
    raw = fourcc.encode("utf-8") if isinstance(fourcc, str) else bytes(fourcc)
    if len(raw) != 4:
        raise ValueError(f"fourcc must be 4 bytes, got {len(raw)}")
    known = _FROM_FOURCC.get(raw)
    if known is not None:
        return known
    try:
        name = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("fourcc is not valid UTF-8") from exc
    return PixelFormat.custom(name)


def to_fourcc(pixfmt: PixelFormat) -> bytes:
    """Map a pixel format to its four character code.

    Raises ValueError if the format has no four character code.
    """
    if pixfmt.kind is PixelFormatKind.CUSTOM:
        raw = str(pixfmt.value).encode("utf-8")
        if len(raw) != 4:
            raise ValueError(f"cannot map {pixfmt} to a fourcc")
        return raw
    try:
        return _TO_FOURCC[pixfmt]
    except KeyError:
        raise ValueError(f"cannot map {pixfmt} to a fourcc") from None


@dataclass(frozen=True)
class ImageFormat:
    """Image buffer format: size, pixel format and row length in bytes."""

    width: int
    height: int
    pixfmt: PixelFormat
    stride: int | None = None

    @classmethod
    def of(cls, width: int, height: int, pixfmt: PixelFormat) -> ImageFormat:
        """Build a format, deriving the stride from the pixel depth if known."""
        bits = pixfmt.bits()
        stride = width * (bits // 8) if bits is not None else None
        return cls(width, height, pixfmt, stride)

    def with_stride(self, stride: int) -> ImageFormat:
        """Return a copy with the given row length in bytes."""
        return replace(self, stride=stride)