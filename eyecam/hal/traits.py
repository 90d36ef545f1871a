"""Abstract interfaces implemented by platform backends."""

from __future__ import annotations

import abc
from collections.abc import Iterator

from eyecam.hal.control import Descriptor as ControlDescriptor
from eyecam.hal.device import DeviceDescription, StreamDescriptor


class Stream(Iterator[bytes]):
    """A source of frames, one at a time.

    Iteration ends when the stream dies; capture failures raise
    :class:`~eyecam.hal.errors.EyeError`.
    """

    def __iter__(self) -> Stream:
        return self

    @abc.abstractmethod
    def __next__(self) -> bytes:
        """Return the next frame."""


class Device(abc.ABC):
    """A capture device handle."""

    @abc.abstractmethod
    def streams(self) -> list[StreamDescriptor]:
        """Return the supported streams."""

    @abc.abstractmethod
    def start_stream(self, desc: StreamDescriptor) -> Stream:
        """Start a stream that produces images."""

    @abc.abstractmethod
    def controls(self) -> list[ControlDescriptor]:
        """Return the supported controls."""

    @abc.abstractmethod
    def control(self, control_id: int) -> None | str | bool | float:
        """Return the current value of a control."""

    @abc.abstractmethod
    def set_control(self, control_id: int, value: None | str | bool | float) -> None:
        """Set a control value; raise for incompatible value types."""


class Context(abc.ABC):
    """A platform context used to find and open devices."""

    @abc.abstractmethod
    def devices(self) -> list[DeviceDescription]:
        """Return all devices currently available."""

    @abc.abstractmethod
    def open_device(self, uri: str) -> Device:
        """Open a device handle."""