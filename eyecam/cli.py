"""Command line tool that lists devices, their controls and their streams."""

from __future__ import annotations

import argparse
import itertools
import math
import sys
from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal

from eyecam.hal.control import Bitmask, Boolean, Descriptor, Menu, Number, Stateless, String
from eyecam.hal.device import StreamDescriptor
from eyecam.hal.errors import EyeError
from eyecam.hal.platform import all_contexts
from eyecam.hal.traits import Context


def _fmt_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        sign = "-" if math.copysign(1.0, value) < 0 and value == 0 else ""
        return f"{sign}{int(value)}"
    return format(Decimal(repr(value)), "f")


def _fmt_decimal(integer: int, fraction: int, divisor: int, suffix: str) -> str:
    digits = []
    while fraction > 0 and divisor > 0:
        digits.append(str(fraction // divisor))
        fraction %= divisor
        divisor //= 10
    if digits:
        return f"{integer}.{''.join(digits)}{suffix}"
    return f"{integer}{suffix}"


def _fmt_duration(interval: timedelta) -> str:
    total_ns = (interval // timedelta(microseconds=1)) * 1000
    secs, nanos = divmod(total_ns, 1_000_000_000)
    if secs > 0:
        return _fmt_decimal(secs, nanos, 100_000_000, "s")
    if nanos >= 1_000_000:
        return _fmt_decimal(nanos // 1_000_000, nanos % 1_000_000, 100_000, "ms")
    if nanos >= 1_000:
        return _fmt_decimal(nanos // 1_000, nanos % 1_000, 100, "µs")
    return _fmt_decimal(nanos, 0, 1, "ns")


def format_devices(contexts: Iterable[Context]) -> list[str]:
    """Return the listing lines for every device of every context."""
    lines = []
    for ctx in contexts:
        for desc in ctx.devices():
            lines.append(desc.uri)
            lines.append(f"  product : {desc.product}")
    return lines


def format_controls(controls: Iterable[Descriptor]) -> list[str]:
    """Return the listing lines describing a device's controls."""
    lines = ["  Controls:"]
    for ctrl in controls:
        lines.append(f"    * {ctrl.name}")
        typ = ctrl.typ
        if isinstance(typ, Stateless):
            lines.append("      Type    : Button")
        elif isinstance(typ, Boolean):
            lines.append("      Type    : Boolean")
        elif isinstance(typ, Number):
            low, high = typ.range
            lines.append("      Type    : Number")
            lines.append(f"      Range   : ({_fmt_float(low)}, {_fmt_float(high)})")
            lines.append(f"      Step    : {_fmt_float(typ.step)}")
        elif isinstance(typ, String):
            lines.append("      Type    : String")
        elif isinstance(typ, Bitmask):
            lines.append("      Type    : Bitmask")
        elif isinstance(typ, Menu):
            lines.append("      Type    : Menu ==>")
            for item in typ.items:
                text = item if isinstance(item, str) else _fmt_float(float(item))
                lines.append(f"       - {text}")
    return lines


def format_streams(streams: Iterable[StreamDescriptor]) -> list[str]:
    """Return the listing lines describing a device's streams.

    Consecutive streams sharing a pixel format are grouped; within a group,
    resolutions are listed smallest width first and intervals smallest first.
    """
    lines = ["  Streams:"]
    for pixfmt, group in itertools.groupby(streams, key=lambda s: s.pixfmt):
        lines.append("")
        lines.append(f"    Pixelformat : {pixfmt}")
        by_width = sorted(group, key=lambda s: s.width)
        for (width, height), same_res in itertools.groupby(
            by_width, key=lambda s: (s.width, s.height)
        ):
            intervals = "".join(
                f"{_fmt_duration(s.interval)}, "
                for s in sorted(same_res, key=lambda s: s.interval)
            )
            lines.append(f"      {width}x{height} : [{intervals}]")
    return lines


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def main(argv: list[str] | None = None) -> int:
    """List capture devices, their controls or their streams."""
    parser = argparse.ArgumentParser(
        prog="eyecam", description="List capture devices and their capabilities."
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="devices",
        choices=("devices", "controls", "streams"),
        help="what to list (default: devices)",
    )
    args = parser.parse_args(argv)

    try:
        if args.command == "devices":
            _print_lines(format_devices(all_contexts()))
            return 0

        ctx = next(all_contexts(), None)
        if ctx is None:
            print("no platform context", file=sys.stderr)
            return 1

        for desc in ctx.devices():
            print(desc.uri)
            dev = ctx.open_device(desc.uri)
            if args.command == "controls":
                _print_lines(format_controls(dev.controls()))
            else:
                _print_lines(format_streams(dev.streams()))
    except EyeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())