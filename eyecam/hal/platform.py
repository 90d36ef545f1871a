"""Platform wrappers and the registry of available contexts.

The wrappers delegate to the backend they hold in ``inner``, so callers that
need backend-specific features can reach it directly.
"""

from __future__ import annotations

from collections.abc import Iterator

from eyecam.hal.control import Descriptor as ControlDescriptor
from eyecam.hal.device import DeviceDescription, StreamDescriptor
from eyecam.hal.errors import ErrorKind, EyeError
from eyecam.hal.traits import Context, Device, Stream


class PlatformStream(Stream):
    """A stream that reads frames from a backend stream."""

    def __init__(self, inner: Stream) -> None:
        self.inner = inner

    def __iter__(self) -> PlatformStream:
        return self

    def __next__(self) -> bytes:
        return next(self.inner)


class PlatformDevice(Device):
    """A device handle that delegates to a backend device."""

    def __init__(self, inner: Device) -> None:
        self.inner = inner

    def streams(self) -> list[StreamDescriptor]:
        return self.inner.streams()

    def start_stream(self, desc: StreamDescriptor) -> PlatformStream:
        stream = self.inner.start_stream(desc)
        return stream if isinstance(stream, PlatformStream) else PlatformStream(stream)

    def controls(self) -> list[ControlDescriptor]:
        return self.inner.controls()

    def control(self, control_id: int) -> None | str | bool | float:
        return self.inner.control(control_id)

    def set_control(self, control_id: int, value: None | str | bool | float) -> None:
        self.inner.set_control(control_id, value)


class PlatformContext(Context):
    """A context that delegates to a backend context."""

    def __init__(self, inner: Context) -> None:
        self.inner = inner

    def devices(self) -> list[DeviceDescription]:
        return self.inner.devices()

    def open_device(self, uri: str) -> PlatformDevice:
        device = self.inner.open_device(uri)
        return device if isinstance(device, PlatformDevice) else PlatformDevice(device)


_registry: list[Context] = []


def register_context(context: Context) -> None:
    """Make a backend context available through :func:`all_contexts`."""
    if not any(existing is context for existing in _registry):
        _registry.append(context)


def unregister_context(context: Context) -> None:
    """Remove a previously registered context."""
    for index, existing in enumerate(_registry):
        if existing is context:
            del _registry[index]
            return
    raise ValueError("context is not registered")


def all_contexts() -> Iterator[PlatformContext]:
    """Yield every registered context, in registration order."""
    for ctx in list(_registry):
        yield ctx if isinstance(ctx, PlatformContext) else PlatformContext(ctx)


def default_context() -> PlatformContext:
    """Return the first registered context."""
    ctx = next(all_contexts(), None)
    if ctx is None:
        raise EyeError(ErrorKind.OTHER, "no contexts available for this platform")
    return ctx