"""Hardware abstraction layer: contexts, devices, streams, formats and controls."""

__all__ = ["errors", "control", "format", "device", "traits", "platform"]