"""Camera orbit animation."""

from __future__ import annotations

from dataclasses import dataclass

from .scalar import Scalar, ScalarKernel
from .vector import Point3


@dataclass(frozen=True, slots=True)
class CameraState:
    orbit_angle: Scalar
    position: Point3


class OrbitController:
    """Advances the orbit angle by one full turn per ``frames_per_orbit`` frames.

    The camera circles the origin in the X-Z plane at a constant height of 0.
    """

    def __init__(
        self,
        kernel: ScalarKernel,
        *,
        radius: float,
        rotation_period_seconds: float,
        target_fps: float,
        start_angle: Scalar = 0,
    ) -> None:
        self.kernel = kernel
        self.radius: Scalar = kernel.from_float(radius)
        frames = kernel.from_float(rotation_period_seconds * target_fps)
        self.step: Scalar = kernel.div(kernel.two_pi, frames)
        self.angle: Scalar = kernel.wrap_angle(start_angle)

    def advance(self) -> Scalar:
        self.angle = self.kernel.wrap_angle(self.angle + self.step)
        return self.angle

    def camera_position(self) -> Point3:
        k = self.kernel
        return Point3(
            k.mul(self.radius, k.cos(self.angle)),
            k.zero,
            k.mul(self.radius, k.sin(self.angle)),
        )

    def state(self) -> CameraState:
        return CameraState(self.angle, self.camera_position())

    def angle_degrees(self) -> float:
        k = self.kernel
        return k.to_float(self.angle) * 180.0 / k.to_float(k.pi)
