import io
from datetime import timedelta

import pytest
from PIL import Image

from eyecam.colorconvert.device import ConvertingDevice
from eyecam.colorconvert.rgb import convert_to_bgr
from eyecam.colorconvert.yuv import yuv422_to_rgb
from eyecam.hal.control import Boolean, Descriptor, Flags
from eyecam.hal.device import DeviceDescription, StreamDescriptor
from eyecam.hal.errors import ErrorKind, EyeError
from eyecam.hal.format import ImageFormat, PixelFormat
from eyecam.hal.platform import register_context, unregister_context
from eyecam.hal.traits import Context, Device, Stream

YUYV = PixelFormat.custom("YUYV")
RGB = PixelFormat.rgb(24)
BGR = PixelFormat.bgr(24)
JPEG = PixelFormat.jpeg()
INTERVAL = timedelta(milliseconds=40)


class FakeStream(Stream):
    def __init__(self, frames):
        self._frames = iter(frames)

    def __next__(self):
        return next(self._frames)


class FakeDevice(Device):
    def __init__(self, streams, frames=(), values=None):
        self._streams = list(streams)
        self._frames = list(frames)
        self.values = dict(values or {})
        self.started = []

    def streams(self):
        return list(self._streams)

    def start_stream(self, desc):
        self.started.append(desc)
        return FakeStream(self._frames)

    def controls(self):
        return [Descriptor(1, "Auto Focus", Boolean(), Flags.READ | Flags.WRITE)]

    def control(self, control_id):
        if control_id not in self.values:
            raise EyeError(ErrorKind.OTHER, "unknown control ID")
        return self.values[control_id]

    def set_control(self, control_id, value):
        self.values[control_id] = value


class FakeContext(Context):
    def __init__(self, device):
        self.device = device
        self.opened = []

    def devices(self):
        return [DeviceDescription("fake://0", "Fake Camera")]

    def open_device(self, uri):
        self.opened.append(uri)
        return self.device


def _desc(pixfmt, width=2, height=1):
    return StreamDescriptor(width, height, pixfmt, INTERVAL)


def test_streams_emulate_rgb_from_jpeg_once():
    dev = ConvertingDevice(FakeDevice([_desc(YUYV), _desc(JPEG, 4, 2)]))
    streams = dev.streams()
    assert streams[:2] == [_desc(YUYV), _desc(JPEG, 4, 2)]
    assert streams[2:] == [_desc(RGB, 4, 2)]


def test_streams_emulate_rgb_from_yuyv():
    dev = ConvertingDevice(FakeDevice([_desc(YUYV), _desc(YUYV, 4, 4)]))
    rgb = [s for s in dev.streams() if s.pixfmt == RGB]
    assert [(s.width, s.height) for s in rgb] == [(2, 1), (4, 4)]


def test_streams_add_bgr_when_rgb_native():
    dev = ConvertingDevice(FakeDevice([_desc(RGB)]))
    assert dev.streams() == [_desc(RGB), _desc(BGR)]


def test_streams_chain_emulation_in_blueprint_order():
    # RGB is tried before YUYV, so BGR is not derived from the emulated RGB streams
    dev = ConvertingDevice(FakeDevice([_desc(YUYV)]))
    assert BGR not in {s.pixfmt for s in dev.streams()}


def test_native_stream_passes_frames_through():
    inner = FakeDevice([_desc(YUYV)], frames=[b"\x10\x80\x10\x80"])
    stream = ConvertingDevice(inner).start_stream(_desc(YUYV))
    assert next(stream) == b"\x10\x80\x10\x80"
    assert inner.started == [_desc(YUYV)]


def test_yuyv_stream_converted_to_rgb():
    frame = b"\x51\x5a\x91\xf0"
    inner = FakeDevice([_desc(YUYV)], frames=[frame])
    stream = ConvertingDevice(inner).start_stream(_desc(RGB))
    assert next(stream) == yuv422_to_rgb(frame, ImageFormat(2, 1, YUYV))
    assert inner.started == [_desc(YUYV)]


def test_rgb_stream_converted_to_bgr():
    frame = bytes(range(6))
    inner = FakeDevice([_desc(RGB)], frames=[frame])
    stream = ConvertingDevice(inner).start_stream(_desc(BGR))
    assert list(stream) == [convert_to_bgr(frame, ImageFormat(2, 1, RGB))]


def test_jpeg_stream_decoded_to_rgb():
    buf = io.BytesIO()
    Image.new("RGB", (4, 2), (200, 10, 10)).save(buf, format="JPEG")
    inner = FakeDevice([_desc(JPEG, 4, 2)], frames=[buf.getvalue()])
    stream = ConvertingDevice(inner).start_stream(_desc(RGB, 4, 2))
    frame = next(stream)
    assert len(frame) == 4 * 2 * 3
    assert inner.started[0].pixfmt == JPEG


def test_start_stream_without_blueprint():
    dev = ConvertingDevice(FakeDevice([_desc(YUYV)]))
    with pytest.raises(EyeError) as info:
        dev.start_stream(_desc(PixelFormat.gray(8)))
    assert str(info.value) == "no codec blueprint for native pixfmt"
    assert info.value.kind is ErrorKind.OTHER


def test_controls_delegate():
    inner = FakeDevice([], values={1: True})
    dev = ConvertingDevice(inner)
    assert [c.name for c in dev.controls()] == ["Auto Focus"]
    assert dev.control(1) is True
    dev.set_control(1, False)
    assert inner.values[1] is False
    with pytest.raises(EyeError):
        dev.control(99)


def test_with_uri_uses_first_context():
    inner = FakeDevice([_desc(RGB)])
    ctx = FakeContext(inner)
    register_context(ctx)
    try:
        dev = ConvertingDevice.with_uri("fake://0")
    finally:
        unregister_context(ctx)
    assert ctx.opened == ["fake://0"]
    assert dev.streams() == [_desc(RGB), _desc(BGR)]


def test_with_uri_without_contexts():
    with pytest.raises(EyeError, match="no platform context available"):
        ConvertingDevice.with_uri("fake://0")