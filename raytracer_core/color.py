#
# PROJECT: raytracer-core
# MODULE: raytracer_core/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import float_eq, ieee_div


class Color:
    """RGB triple with float channels.

    Channels are not clamped: values below 0 or above 1 are legal while
    colors are being combined. Conversion to bytes happens only on export
    (see channel_to_byte).
    """
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0.0, 0.0, 0.0)

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b})"

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (float_eq(self.r, other.r) and float_eq(self.g, other.g)
                and float_eq(self.b, other.b))

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __neg__(self):
        return Color(-self.r, -self.g, -self.b)

    def __mul__(self, other):
        if isinstance(other, Color):
            return self.blend(other)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Color(ieee_div(self.r, scalar), ieee_div(self.g, scalar),
                         ieee_div(self.b, scalar))
        return NotImplemented

    def blend(self, other: 'Color') -> 'Color':
        """Per-channel product, e.g. light filtered by a surface color."""
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def to_bytes(self, max_value: int = 255):
        return (channel_to_byte(self.r, max_value),
                channel_to_byte(self.g, max_value),
                channel_to_byte(self.b, max_value))


def channel_to_byte(value: float, max_value: int = 255) -> int:
    """Scale a [0, 1] channel to [0, max_value], rounding half up.
    Out-of-range input is clamped; nan maps to 0."""
    scaled = value * max_value + 0.5
    if not scaled >= 0:
        return 0
    if scaled >= max_value:
        return max_value
    return int(scaled)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to a Color with channels in [0, 1].
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: Color, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
    except ValueError:
        return None
    return Color(r / 255, g / 255, b / 255)
