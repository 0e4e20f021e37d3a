"""Color math and the per-part color bindings.

Channel scaling runs in single precision: the ratio, the scale factor and
the product are each rounded to a 32-bit float before rounding half up, so
exact ties such as 85 * 0.7 = 59.5 round up rather than down.
"""

import math
import struct

from .renderer import Binding, Producer


def _channels(color: str) -> tuple[int, int, int]:
    return (
        int(color[1:3], 16),
        int(color[3:5], 16),
        int(color[5:7], 16),
    )


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scale(channel: int, factor: float) -> int:
    # Round half up on the single-precision product
    return math.floor(_float32(channel * factor) + 0.5)


def _encode(r: int, g: int, b: int) -> str:
    r, g, b = (max(0, min(255, c)) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def lighten(color: str, ratio: float) -> str:
    """Scale each channel of a #rrggbb color by (1 + ratio), capped at 255."""
    factor = _float32(1 + _float32(ratio))
    return _encode(*(_scale(c, factor) for c in _channels(color)))


def darken(color: str, ratio: float) -> str:
    """Scale each channel of a #rrggbb color by (1 - ratio), floored at 0."""
    factor = _float32(1 - _float32(ratio))
    return _encode(*(_scale(c, factor) for c in _channels(color)))


def _parse_ratio(function: str, arg: str | None) -> float:
    if arg is None:
        raise ValueError(f"{function}() needs a ratio argument, e.g. {{{{{function}(0.2)}}}}")
    try:
        return float(arg)
    except ValueError as e:
        raise ValueError(f"{function}() ratio is not a number: {arg!r}") from e


def color_bindings(color: str, **extra: str | Producer) -> list[Binding]:
    """Bindings every part template receives for its resolved color.

    Provides `color`, `lighten(ratio)` and `darken(ratio)`, followed by any
    extra bindings given as keyword arguments (e.g. secondaryColor).
    """
    bindings = [
        Binding("color", color),
        Binding("lighten", lambda arg: lighten(color, _parse_ratio("lighten", arg))),
        Binding("darken", lambda arg: darken(color, _parse_ratio("darken", arg))),
    ]
    bindings.extend(Binding(name, value) for name, value in extra.items())
    return bindings
