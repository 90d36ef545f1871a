"""Device and stream descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from eyecam.hal.format import PixelFormat


@dataclass(frozen=True)
class DeviceDescription:
    """A capture device as seen by a platform context."""

    uri: str
    product: str


@dataclass(frozen=True)
class StreamDescriptor:
    """An image stream a device can produce."""

    width: int
    height: int
    pixfmt: PixelFormat
    interval: timedelta

    def fps(self) -> float:
        """Return the frame rate implied by the frame interval."""
        seconds = self.interval.total_seconds()
        if seconds <= 0:
            raise ValueError("frame interval must be positive")
        return 1.0 / seconds