"""Frame format conversion: codecs, converting streams and a converting device."""

__all__ = ["codec", "rgb", "yuv", "jpeg", "blueprints", "stream", "device"]