"""A stream that converts the frames of another stream."""

from __future__ import annotations

from eyecam.colorconvert.codec import Codec
from eyecam.hal.traits import Stream


class CodecStream(Stream):
    """Reads frames from ``inner`` and passes each through ``codec``.

    Errors raised by the inner stream propagate unchanged; conversion
    failures raise :class:`~eyecam.colorconvert.codec.CodecError`.
    """

    def __init__(self, inner: Stream, codec: Codec) -> None:
        self.inner = inner
        self.codec = codec

    def __iter__(self) -> CodecStream:
        return self

    def __next__(self) -> bytes:
        frame = next(self.inner)
        return self.codec.decode(frame)