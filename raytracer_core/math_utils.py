#
# PROJECT: raytracer-core
# MODULE: raytracer_core/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

FLOAT_EQ_EPS = 1e-5


def float_eq(a: float, b: float, eps: float = FLOAT_EQ_EPS) -> bool:
    """Tolerance comparison shared by every value type in the package."""
    return abs(a - b) < eps


def ieee_div(a: float, b: float) -> float:
    """Divide like IEEE-754 hardware: x/0 gives +-inf, 0/0 gives nan."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Tuple4:
    """Homogeneous coordinate: a point (w=1) or a free vector (w=0).

    Build instances with Tuple4.point() / Tuple4.vector(); operators
    always return new tuples.
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def point(cls, x: float, y: float, z: float) -> 'Tuple4':
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> 'Tuple4':
        return cls(x, y, z, 0.0)

    def __repr__(self):
        return f"Tuple4({self.x}, {self.y}, {self.z}, {self.w})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        if index == 3: return self.w
        raise IndexError("Tuple4 index out of range")

    def __eq__(self, other):
        if not isinstance(other, Tuple4):
            return NotImplemented
        return (float_eq(self.x, other.x) and float_eq(self.y, other.y)
                and float_eq(self.z, other.z) and float_eq(self.w, other.w))

    # Tolerance equality is not transitive, so no hashing.
    __hash__ = None

    def is_point(self) -> bool:
        return float_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        return float_eq(self.w, 0.0)

    def __add__(self, other):
        if isinstance(other, Tuple4):
            return Tuple4(self.x + other.x, self.y + other.y,
                          self.z + other.z, self.w + other.w)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Tuple4):
            return Tuple4(self.x - other.x, self.y - other.y,
                          self.z - other.z, self.w - other.w)
        return NotImplemented

    def __neg__(self):
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Tuple4(self.x * scalar, self.y * scalar,
                          self.z * scalar, self.w * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (int, float)):
            return Tuple4(ieee_div(self.x, scalar), ieee_div(self.y, scalar),
                          ieee_div(self.z, scalar), ieee_div(self.w, scalar))
        return NotImplemented

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y
                         + self.z * self.z + self.w * self.w)

    def normalize(self) -> 'Tuple4':
        # A zero-length tuple yields nan components.
        return self / self.magnitude()

    def dot(self, other: 'Tuple4') -> float:
        if not (self.is_vector() and other.is_vector()):
            raise ValueError("dot product is only defined for two vectors")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Tuple4') -> 'Tuple4':
        if not (self.is_vector() and other.is_vector()):
            raise ValueError("cross product is only defined for two vectors")
        return Tuple4.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )
