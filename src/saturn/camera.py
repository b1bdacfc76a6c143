"""Look-at camera transform and perspective projection."""

from __future__ import annotations

from .scalar import Scalar, ScalarKernel
from .vector import Point2, Point3, VectorMath

BEHIND_CAMERA_OFFSET = -1000


class CameraTransform:
    """Maps world points into a right-handed look-at camera frame.

    The basis is rebuilt on every call because both the camera and the
    target may differ between calls.
    """

    def __init__(self, vectors: VectorMath) -> None:
        self.vectors = vectors
        self._world_up = vectors.unit_y

    def to_camera_space(self, point: Point3, camera: Point3, target: Point3) -> Point3:
        vm = self.vectors
        # Camera sitting on the target looks down +Z.
        forward = vm.normalize(target - camera, fallback=vm.unit_z)
        right = vm.normalize(vm.cross(forward, self._world_up))
        up = vm.cross(right, forward)

        relative = point - camera
        return Point3(
            vm.dot(relative, right),
            vm.dot(relative, up),
            vm.dot(relative, forward),
        )


class Projector:
    """Perspective divide onto a ``width`` x ``height`` display plane."""

    def __init__(
        self,
        transform: CameraTransform,
        width: int,
        height: int,
        *,
        projection_distance: float,
    ) -> None:
        kernel = transform.vectors.kernel
        self.kernel: ScalarKernel = kernel
        self.transform = transform
        self.width = width
        self.height = height
        self.projection_distance: Scalar = kernel.from_float(projection_distance)
        self._centre_x = kernel.from_int(width // 2)
        self._centre_y = kernel.from_int(height // 2)
        sentinel = kernel.from_int(BEHIND_CAMERA_OFFSET)
        self.behind_camera = Point2(sentinel, sentinel)

    def project(self, point: Point3, camera: Point3, target: Point3) -> Point2:
        """Return screen coordinates, or ``behind_camera`` for depth <= 0."""
        k = self.kernel
        transformed = self.transform.to_camera_space(point, camera, target)
        if transformed.z <= 0:
            return self.behind_camera

        perspective = k.div(self.projection_distance, transformed.z)
        return Point2(
            k.mul(transformed.x, perspective) + self._centre_x,
            k.mul(transformed.y, perspective) + self._centre_y,
        )

    def is_visible(self, projected: Point2) -> bool:
        return projected != self.behind_camera

    def to_pixel(self, projected: Point2) -> tuple[int, int]:
        return self.kernel.to_int(projected.x), self.kernel.to_int(projected.y)
