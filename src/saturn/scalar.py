"""Numeric kernels: Q16.16 fixed-point and native floating-point scalars.

Every piece of geometry in the package is written against a kernel object
instead of using ``math`` directly. A kernel owns the representation of a
scalar (a raw ``int`` for fixed-point, a ``float`` otherwise) and provides
the handful of operations the pipeline needs. Addition and subtraction are
the native ``+``/``-`` of the raw value and therefore not part of the kernel.

The fixed-point kernel reproduces the behaviour of a 16.16 embedded math
library bit for bit: multiplication floors, division truncates toward zero,
sine and cosine come from a 256-entry table and the square root is a short
Newton-Raphson iteration.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Protocol, Tuple, Union

Scalar = Union[int, float]

FIXED_SHIFT = 16
FIXED_ONE = 1 << FIXED_SHIFT

SIN_TABLE_SIZE = 256
SQRT_ITERATIONS = 10

# First quarter turn plus its end point, Q16.16. The remaining three quarters
# are mirrored from it.
_QUARTER_SINE: Tuple[int, ...] = (
    0, 1608, 3216, 4821, 6424, 8022, 9616, 11204, 12785, 14359, 15924, 17479, 19024, 20557, 22078, 23586,
    25080, 26558, 28020, 29466, 30893, 32302, 33692, 35061, 36410, 37736, 39040, 40320, 41576, 42806, 44011, 45190,
    46341, 47464, 48559, 49624, 50660, 51665, 52639, 53581, 54491, 55368, 56212, 57022, 57798, 58538, 59244, 59914,
    60547, 61145, 61705, 62228, 62714, 63162, 63572, 63944, 64277, 64571, 64827, 65043, 65220, 65358, 65457, 65516,
    65536,
)


def _mirror_quarter(quarter: Tuple[int, ...], size: int) -> Tuple[int, ...]:
    q = size // 4
    table = []
    for i in range(size):
        if i <= q:
            table.append(quarter[i])
        elif i < 2 * q:
            table.append(quarter[2 * q - i])
        elif i <= 3 * q:
            table.append(-quarter[i - 2 * q])
        else:
            table.append(-quarter[4 * q - i])
    return tuple(table)


# One full turn sampled in 256 steps.
SIN_TABLE: Tuple[int, ...] = _mirror_quarter(_QUARTER_SINE, SIN_TABLE_SIZE)


class ScalarKernel(Protocol):
    """Operations shared by every scalar representation."""

    name: str
    zero: Scalar
    one: Scalar
    pi: Scalar
    half_pi: Scalar
    two_pi: Scalar
    epsilon: Scalar

    def from_float(self, value: float) -> Scalar: ...

    def from_int(self, value: int) -> Scalar: ...

    def to_float(self, value: Scalar) -> float: ...

    def to_int(self, value: Scalar) -> int: ...

    def mul(self, a: Scalar, b: Scalar) -> Scalar: ...

    def div(self, a: Scalar, b: Scalar) -> Scalar: ...

    def sqrt(self, value: Scalar) -> Scalar: ...

    def sin(self, angle: Scalar) -> Scalar: ...

    def cos(self, angle: Scalar) -> Scalar: ...

    def radians(self, degrees: Scalar) -> Scalar: ...

    def wrap_angle(self, angle: Scalar) -> Scalar: ...

    def whole_steps(self, span: Scalar, step: Scalar) -> int: ...


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


class FixedPointKernel:
    """Signed Q16.16 arithmetic on plain Python integers."""

    name = "fixed"

    def __init__(self) -> None:
        self.zero = 0
        self.one = FIXED_ONE
        self.pi = self.from_float(math.pi)
        self.half_pi = self.from_float(math.pi / 2.0)
        # Twice the truncated pi rather than the truncated 2*pi.
        self.two_pi = 2 * self.pi
        self.epsilon = self.from_float(0.001)
        self._degrees_per_half_turn = self.from_int(180)

    def from_float(self, value: float) -> int:
        return int(value * FIXED_ONE)

    def from_int(self, value: int) -> int:
        return int(value) << FIXED_SHIFT

    def to_float(self, value: Scalar) -> float:
        return value / FIXED_ONE

    def to_int(self, value: Scalar) -> int:
        return int(value) >> FIXED_SHIFT

    def mul(self, a: Scalar, b: Scalar) -> int:
        return (int(a) * int(b)) >> FIXED_SHIFT

    def div(self, a: Scalar, b: Scalar) -> int:
        return _truncating_div(int(a) << FIXED_SHIFT, int(b))

    def sqrt(self, value: Scalar) -> int:
        """Newton-Raphson square root, 0 for non-positive input.

        The seed is ``value / 2``. For inputs below 4.0 that seed lies under
        the root, so the first step is always taken (it lands above the root)
        and the loop stops as soon as the estimate stops decreasing.
        """
        value = int(value)
        if value <= 0:
            return 0

        guess = value >> 1
        if guess == 0:
            guess = 1

        for iteration in range(SQRT_ITERATIONS):
            new_guess = (guess + self.div(value, guess)) >> 1
            if iteration and new_guess >= guess:
                break
            guess = new_guess
        return guess

    def wrap_angle(self, angle: Scalar) -> int:
        return int(angle) % self.two_pi

    def whole_steps(self, span: Scalar, step: Scalar) -> int:
        return int(span) // int(step)

    def sin(self, angle: Scalar) -> int:
        normalised = self.wrap_angle(angle)
        index = (normalised * SIN_TABLE_SIZE) // self.two_pi
        if index >= SIN_TABLE_SIZE:
            index = SIN_TABLE_SIZE - 1
        return SIN_TABLE[index]

    def cos(self, angle: Scalar) -> int:
        return self.sin(int(angle) + self.half_pi)

    def radians(self, degrees: Scalar) -> int:
        return self.div(self.mul(degrees, self.pi), self._degrees_per_half_turn)


class FloatKernel:
    """Native floating-point scalars backed by :mod:`math`."""

    name = "float"

    def __init__(self) -> None:
        self.zero = 0.0
        self.one = 1.0
        self.pi = math.pi
        self.half_pi = math.pi / 2.0
        self.two_pi = math.tau
        self.epsilon = 0.001

    def from_float(self, value: float) -> float:
        return float(value)

    def from_int(self, value: int) -> float:
        return float(value)

    def to_float(self, value: Scalar) -> float:
        return float(value)

    def to_int(self, value: Scalar) -> int:
        return math.floor(value)

    def mul(self, a: Scalar, b: Scalar) -> float:
        return a * b

    def div(self, a: Scalar, b: Scalar) -> float:
        return a / b

    def sqrt(self, value: Scalar) -> float:
        if value <= 0:
            return 0.0
        return math.sqrt(value)

    def wrap_angle(self, angle: Scalar) -> float:
        wrapped = angle % math.tau
        # Tiny negative inputs round up to exactly tau.
        if wrapped >= math.tau:
            return 0.0
        return wrapped

    def whole_steps(self, span: Scalar, step: Scalar) -> int:
        """Number of complete ``step``s in ``span``, forgiving rounding error."""
        return math.floor(span / step + 1e-9)

    def sin(self, angle: Scalar) -> float:
        return math.sin(angle)

    def cos(self, angle: Scalar) -> float:
        return math.cos(angle)

    def radians(self, degrees: Scalar) -> float:
        return math.radians(degrees)


KERNELS: Dict[str, Callable[[], ScalarKernel]] = {
    FixedPointKernel.name: FixedPointKernel,
    FloatKernel.name: FloatKernel,
}


def make_kernel(name: str) -> ScalarKernel:
    """Return a fresh kernel for ``"fixed"`` or ``"float"``."""

    try:
        factory = KERNELS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown numeric variant '{name}'") from exc
    return factory()
