"""A device wrapper that emulates pixel formats through codecs."""

from __future__ import annotations

from dataclasses import replace

from eyecam.colorconvert.blueprints import blueprints
from eyecam.colorconvert.codec import CodecError, Parameters
from eyecam.colorconvert.stream import CodecStream
from eyecam.hal.control import Descriptor as ControlDescriptor
from eyecam.hal.device import StreamDescriptor
from eyecam.hal.errors import ErrorKind, EyeError
from eyecam.hal.platform import PlatformStream, all_contexts
from eyecam.hal.traits import Device


class ConvertingDevice(Device):
    """Wraps a platform device and transparently converts frame formats."""

    def __init__(self, inner: Device) -> None:
        self.inner = inner

    @classmethod
    def with_uri(cls, uri: str) -> ConvertingDevice:
        """Open ``uri`` through the first available platform context."""
        ctx = next(all_contexts(), None)
        if ctx is None:
            raise EyeError(ErrorKind.OTHER, "no platform context available")
        return cls(ctx.open_device(uri))

    def streams(self) -> list[StreamDescriptor]:
        """Return native streams plus those that can be emulated."""
        streams = list(self.inner.streams())
        for blueprint in blueprints():
            for src, dst in zip(blueprint.src_fmts(), blueprint.dst_fmts()):
                formats = {stream.pixfmt for stream in streams}
                if src in formats and dst not in formats:
                    sources = [stream for stream in streams if stream.pixfmt == src]
                    streams.extend(replace(stream, pixfmt=dst) for stream in sources)
        return streams

    def start_stream(self, desc: StreamDescriptor) -> PlatformStream:
        native_formats = [stream.pixfmt for stream in self.inner.streams()]
        if desc.pixfmt in native_formats:
            stream = self.inner.start_stream(desc)
            return stream if isinstance(stream, PlatformStream) else PlatformStream(stream)

        candidates = [bp for bp in blueprints() if desc.pixfmt in bp.dst_fmts()]
        src_fmt = next(
            (
                pixfmt
                for bp in candidates
                for pixfmt in bp.src_fmts()
                if pixfmt in native_formats
            ),
            None,
        )
        if src_fmt is None:
            raise EyeError(ErrorKind.OTHER, "no codec blueprint for native pixfmt")

        blueprint = next((bp for bp in candidates if src_fmt in bp.src_fmts()), None)
        if blueprint is None:
            raise EyeError(
                ErrorKind.OTHER, f"no codec blueprint for {src_fmt} -> {desc.pixfmt}"
            )

        try:
            codec = blueprint.instantiate(
                Parameters(src_fmt, desc.width, desc.height),
                Parameters(desc.pixfmt, desc.width, desc.height),
            )
        except CodecError as exc:
            raise EyeError(ErrorKind.OTHER, "failed to create codec instance") from exc

        native_stream = self.inner.start_stream(replace(desc, pixfmt=src_fmt))
        return PlatformStream(CodecStream(native_stream, codec))

    def controls(self) -> list[ControlDescriptor]:
        return self.inner.controls()

    def control(self, control_id: int) -> None | str | bool | float:
        return self.inner.control(control_id)

    def set_control(self, control_id: int, value: None | str | bool | float) -> None:
        self.inner.set_control(control_id, value)