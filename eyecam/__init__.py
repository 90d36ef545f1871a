"""Camera capture and control abstractions with transparent pixel format conversion."""

__version__ = "0.1.0"
__all__ = ["hal", "colorconvert", "cli"]