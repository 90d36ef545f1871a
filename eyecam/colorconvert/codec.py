"""Codec interfaces used for transparent pixel format conversion."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

from eyecam.hal.format import PixelFormat


class CodecErrorKind(enum.Enum):
    """Broad category of a :class:`CodecError`."""

    INVALID_BUFFER = "invalid buffer"
    INVALID_PARAM = "invalid parameter"
    UNSUPPORTED_FORMAT = "unsupported format"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class CodecError(Exception):
    """Raised when a codec cannot be created or fails to convert a buffer."""

    def __init__(self, kind: CodecErrorKind, error: str | BaseException | None = None) -> None:
        super().__init__(kind, error)
        self.kind = kind
        self.error = error

    def __str__(self) -> str:
        if self.error is None:
            return str(self.kind)
        return str(self.error)


@dataclass(frozen=True)
class Parameters:
    """Codec parameters used for instantiation."""

    pixfmt: PixelFormat
    width: int
    height: int


class Codec(abc.ABC):
    """A configured converter from one pixel format to another."""

    def __init__(self, inparams: Parameters, outparams: Parameters) -> None:
        self.inparams = inparams
        self.outparams = outparams

    @abc.abstractmethod
    def decode(self, inbuf: bytes) -> bytes:
        """Convert the input buffer and return the converted frame."""


class Blueprint(abc.ABC):
    """Describes a codec's capabilities and creates instances of it."""

    @abc.abstractmethod
    def src_fmts(self) -> list[PixelFormat]:
        """Return all supported input formats."""

    @abc.abstractmethod
    def dst_fmts(self) -> list[PixelFormat]:
        """Return all supported output formats."""

    @abc.abstractmethod
    def _build(self, inparams: Parameters, outparams: Parameters) -> Codec:
        """Create the codec once the parameters have been validated."""

    def instantiate(self, inparams: Parameters, outparams: Parameters) -> Codec:
        """Create a codec for the given input and output parameters."""
        if inparams.pixfmt not in self.src_fmts() or outparams.pixfmt not in self.dst_fmts():
            raise CodecError(CodecErrorKind.UNSUPPORTED_FORMAT)
        if inparams.width != outparams.width or inparams.height != outparams.height:
            raise CodecError(CodecErrorKind.INVALID_PARAM)
        return self._build(inparams, outparams)