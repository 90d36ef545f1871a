# eyecam

Camera capture and control abstractions for Python, with transparent pixel
format conversion.

`eyecam` has two layers:

- `eyecam.hal` – the hardware abstraction layer. It defines what a platform
  context, a device and a stream are (`eyecam.hal.traits`), together with the
  descriptions they exchange: device descriptions and stream descriptors
  (`eyecam.hal.device`), pixel and image formats (`eyecam.hal.format`) and
  control descriptors (`eyecam.hal.control`).
- `eyecam.colorconvert` – `ConvertingDevice`, a device wrapper that offers
  extra stream formats by converting frames on the fly: YUYV → RGB24,
  RGB24 → BGR24 and JPEG → RGB24.

## Installation

```
pip install eyecam
```

Pillow is installed with it and is used to decode JPEG frames.

## What is not included

`eyecam` ships no camera backends. It does not talk to any operating-system
capture interface by itself, and no context is registered when the package
is imported. To capture frames you implement `eyecam.hal.traits.Context`,
`Device` and `Stream` for your source and register the context with
`eyecam.hal.platform.register_context`. Everything else in the package —
format conversion, stream selection, the listings of the command line tool —
works on top of whatever contexts have been registered.

## Concepts

A **context** (`eyecam.hal.traits.Context`) enumerates devices with
`devices()` and opens one by URI with `open_device(uri)`. Contexts are
registered with `register_context(context)`, removed with
`unregister_context(context)`, and queried with `all_contexts()`, which
yields them in registration order wrapped in `PlatformContext`, or with
`default_context()`, which returns the first one and raises `EyeError` if
none is registered.

A **device** (`eyecam.hal.traits.Device`) reports the streams it supports
(`streams()`), its controls (`controls()`), reads and writes control values
(`control(control_id)`, `set_control(control_id, value)`) and starts a
stream for a chosen `StreamDescriptor` (`start_stream(desc)`).

A **stream** is a Python iterator that yields one frame (`bytes`) at a time.

Control values are plain Python values: `None`, `str`, `bool` or `float`.
A control `Descriptor` has an `id`, a `name`, a type (`Stateless`,
`Boolean`, `Number`, `String`, `Bitmask` or `Menu`) and `Flags`;
`readable()` and `writable()` check the flags.

Failures raise `eyecam.hal.errors.EyeError`, which carries an `ErrorKind`
(`NOT_SUPPORTED` or `OTHER`). Conversion failures raise
`eyecam.colorconvert.codec.CodecError`, which carries a `CodecErrorKind`
(`INVALID_BUFFER`, `INVALID_PARAM`, `UNSUPPORTED_FORMAT` or `OTHER`).

## Example

```python
from eyecam.hal.platform import default_context
from eyecam.hal.format import PixelFormat
from eyecam.colorconvert.device import ConvertingDevice

ctx = default_context()          # needs a registered context
devices = ctx.devices()
for desc in devices:
    print(desc.uri, desc.product)

dev = ConvertingDevice(ctx.open_device(devices[0].uri))

# Native streams plus the ones that can be produced by conversion.
rgb = [s for s in dev.streams() if s.pixfmt == PixelFormat.rgb(24)]
stream = dev.start_stream(rgb[0])

for frame in stream:
    print(len(frame), "bytes")
    break
```

`ConvertingDevice.with_uri(uri)` opens a device through the first registered
context. When the requested pixel format is offered natively, the native
stream is started unchanged; otherwise a codec from
`eyecam.colorconvert.blueprints.blueprints()` is chosen and the native
stream's frames are converted through a `CodecStream`.

## Pixel formats

`PixelFormat` values are built with `PixelFormat.custom(name)`,
`PixelFormat.depth(bits)`, `PixelFormat.gray(bits)`, `PixelFormat.bgr(bits)`,
`PixelFormat.rgb(bits)` and `PixelFormat.jpeg()`. `bits()` returns the
depth of a whole pixel, or `None` for custom and JPEG formats.

`from_fourcc` and `to_fourcc` map between pixel formats and four character
codes such as `b"RGB3"`, `b"GREY"` or `b"MJPG"`. Unknown codes become custom
formats; formats without a code raise `ValueError`.

`ImageFormat.of(width, height, pixfmt)` describes an image buffer and derives
its row stride from the pixel depth; `with_stride(stride)` returns a copy
with the stride overridden.

The conversion functions can also be used directly on packed buffers:
`eyecam.colorconvert.rgb.convert_to_bgr`,
`eyecam.colorconvert.yuv.yuv422_to_rgb`,
`eyecam.colorconvert.yuv.yuv444_to_rgb` and
`eyecam.colorconvert.jpeg.convert_to_rgb`.

## Command line

The `eyecam` command lists what the registered contexts offer:

```
eyecam              # devices of every context, with product names
eyecam controls     # controls of each device of the first context
eyecam streams      # streams of each device of the first context
eyecam --help
```

Since the package registers no context of its own, a plain run prints no
devices, and `controls` or `streams` report "no platform context" and exit
with status 1. The formatting helpers `format_devices`, `format_controls` and
`format_streams` in `eyecam.cli` return the listing lines for use from code
that has registered its own contexts.

## Running the tests

```
pip install -e ".[test]"
pytest
```