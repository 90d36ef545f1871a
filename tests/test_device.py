from datetime import timedelta

import pytest

from eyecam.hal.device import DeviceDescription, StreamDescriptor
from eyecam.hal.format import PixelFormat


def _desc(interval_ms, width=640, height=480, pixfmt=None):
    return StreamDescriptor(
        width=width,
        height=height,
        pixfmt=pixfmt or PixelFormat.rgb(24),
        interval=timedelta(milliseconds=interval_ms),
    )


def test_fps_from_interval():
    assert _desc(40).fps() == pytest.approx(25.0)


def test_fps_inverse_of_interval():
    desc = _desc(50)
    assert desc.fps() * desc.interval.total_seconds() == pytest.approx(1.0)


def test_zero_interval_rejected():
    with pytest.raises(ValueError):
        _desc(0).fps()


def test_descriptors_sort_by_interval():
    items = [_desc(100), _desc(33), _desc(66)]
    ordered = sorted(items, key=lambda d: d.interval)
    assert [d.interval for d in ordered] == sorted(d.interval for d in items)
    assert ordered[0] == items[1]


def test_descriptors_are_hashable_and_comparable():
    assert len({_desc(40), _desc(40), _desc(40, pixfmt=PixelFormat.jpeg())}) == 2


def test_device_description_fields():
    desc = DeviceDescription(uri="fake://0", product="Test Camera")
    assert desc.uri == "fake://0"
    assert desc == DeviceDescription("fake://0", "Test Camera")