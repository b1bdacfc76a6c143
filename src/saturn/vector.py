"""Point types and vector algebra over a numeric kernel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .scalar import Scalar, ScalarKernel


@dataclass(frozen=True, slots=True)
class Point3:
    """Immutable 3D position or direction in raw kernel units."""

    x: Scalar
    y: Scalar
    z: Scalar

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True, slots=True)
class Point2:
    """Screen-space coordinate before truncation to a pixel index."""

    x: Scalar
    y: Scalar


class VectorMath:
    """Vector operations whose products go through ``kernel``."""

    def __init__(self, kernel: ScalarKernel) -> None:
        self.kernel = kernel
        self.origin = Point3(kernel.zero, kernel.zero, kernel.zero)
        self.unit_y = Point3(kernel.zero, kernel.one, kernel.zero)
        self.unit_z = Point3(kernel.zero, kernel.zero, kernel.one)

    def point(self, x: float, y: float, z: float) -> Point3:
        """Build a point from world units."""
        k = self.kernel
        return Point3(k.from_float(x), k.from_float(y), k.from_float(z))

    def to_floats(self, p: Point3) -> tuple[float, float, float]:
        k = self.kernel
        return k.to_float(p.x), k.to_float(p.y), k.to_float(p.z)

    def dot(self, a: Point3, b: Point3) -> Scalar:
        mul = self.kernel.mul
        return mul(a.x, b.x) + mul(a.y, b.y) + mul(a.z, b.z)

    def cross(self, a: Point3, b: Point3) -> Point3:
        mul = self.kernel.mul
        return Point3(
            mul(a.y, b.z) - mul(a.z, b.y),
            mul(a.z, b.x) - mul(a.x, b.z),
            mul(a.x, b.y) - mul(a.y, b.x),
        )

    def scale(self, v: Point3, factor: Scalar) -> Point3:
        mul = self.kernel.mul
        return Point3(mul(v.x, factor), mul(v.y, factor), mul(v.z, factor))

    def length(self, v: Point3) -> Scalar:
        return self.kernel.sqrt(self.dot(v, v))

    def normalize(self, v: Point3, fallback: Optional[Point3] = None) -> Point3:
        """Return ``v`` scaled to unit length.

        Vectors no longer than the kernel epsilon cannot be divided safely:
        ``fallback`` is returned for them, or ``v`` itself when no fallback
        is given.
        """
        k = self.kernel
        length = self.length(v)
        if length > k.epsilon:
            return Point3(k.div(v.x, length), k.div(v.y, length), k.div(v.z, length))
        if fallback is not None:
            return fallback
        return v

    def rotate_x(self, p: Point3, angle: Scalar) -> Point3:
        k = self.kernel
        cos_a = k.cos(angle)
        sin_a = k.sin(angle)
        return Point3(
            p.x,
            k.mul(p.y, cos_a) - k.mul(p.z, sin_a),
            k.mul(p.y, sin_a) + k.mul(p.z, cos_a),
        )

    def rotate_y(self, p: Point3, angle: Scalar) -> Point3:
        k = self.kernel
        cos_a = k.cos(angle)
        sin_a = k.sin(angle)
        return Point3(
            k.mul(p.x, cos_a) - k.mul(p.z, sin_a),
            p.y,
            k.mul(p.x, sin_a) + k.mul(p.z, cos_a),
        )
