"""Registry of the codec blueprints available for format conversion."""

from __future__ import annotations

from eyecam.colorconvert.codec import Blueprint
from eyecam.colorconvert.jpeg import JpegBlueprint
from eyecam.colorconvert.rgb import RgbBlueprint
from eyecam.colorconvert.yuv import YuvBlueprint


def blueprints() -> list[Blueprint]:
    """Return all available blueprints, in the order they are tried."""
    return [RgbBlueprint(), JpegBlueprint(), YuvBlueprint()]