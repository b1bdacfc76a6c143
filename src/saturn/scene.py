"""Procedural scene: starfield, planet body and ring bands."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator, List, Optional

from .camera import CameraTransform, Projector
from .config import RingSpec, SceneConfig
from .framebuffer import Framebuffer
from .orbit import OrbitController
from .scalar import ScalarKernel, make_kernel
from .vector import Point3, VectorMath


class StarfieldState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class SceneGenerator:
    """Draws the scene primitives into a framebuffer.

    Primitives are OR-composited in the order they are drawn: there is no
    depth test and nothing is ever erased except by ``Framebuffer.clear``.
    """

    def __init__(self, config: SceneConfig, kernel: ScalarKernel) -> None:
        self.config = config
        self.kernel = kernel
        self.vectors = VectorMath(kernel)
        self.projector = Projector(
            CameraTransform(self.vectors),
            config.width,
            config.height,
            projection_distance=config.projection_distance,
        )
        self.body_centre = self.vectors.origin
        self._body_radius = kernel.from_float(config.body_radius)
        self._radial_step = kernel.from_float(config.ring_radial_step)

    # Starfield --------------------------------------------------------

    def generate_stars(self, rng: random.Random) -> List[Point3]:
        """Scatter stars through a cube and push close ones away from the origin.

        Stars inside ``star_min_distance`` are doubled once. A star that is
        still too close afterwards is moved along its direction to just past
        the threshold, with +Z used for a star sitting on the origin.
        """
        k = self.kernel
        vm = self.vectors
        half = self.config.star_half_extent
        min_distance = k.from_float(self.config.star_min_distance)
        pushed_distance = k.from_float(self.config.star_min_distance + 1.0)
        doubled = k.from_int(2)

        stars: List[Point3] = []
        for _ in range(self.config.star_count):
            star = Point3(
                k.from_int(rng.randrange(-half, half)),
                k.from_int(rng.randrange(-half, half)),
                k.from_int(rng.randrange(-half, half)),
            )
            if vm.length(star) < min_distance:
                star = vm.scale(star, doubled)
                if vm.length(star) < min_distance:
                    direction = vm.normalize(star, fallback=vm.unit_z)
                    star = vm.scale(direction, pushed_distance)
            stars.append(star)
        return stars

    def draw_stars(
        self, framebuffer: Framebuffer, stars: List[Point3], camera: Point3, target: Point3
    ) -> int:
        return sum(1 for star in stars if self.plot(framebuffer, star, camera, target))

    # Planet body ------------------------------------------------------

    def draw_body(self, framebuffer: Framebuffer, camera: Point3, target: Point3) -> int:
        if self.config.body_mode == "sphere":
            return self._draw_body_points(framebuffer, camera, target)
        return self._draw_body_disc(framebuffer, camera, target)

    def apparent_radius(self, camera: Point3) -> Optional[int]:
        """Body radius in pixels as seen from ``camera``, None when undefined."""
        k = self.kernel
        distance = self.vectors.length(camera - self.body_centre)
        if distance <= k.epsilon:
            return None
        perspective = k.div(self.projector.projection_distance, distance)
        return k.to_int(k.mul(self._body_radius, perspective))

    def _draw_body_disc(self, framebuffer: Framebuffer, camera: Point3, target: Point3) -> int:
        radius = self.apparent_radius(camera)
        if radius is None:
            return 0
        centre = self.projector.project(self.body_centre, camera, target)
        if not self.projector.is_visible(centre):
            return 0

        centre_x, centre_y = self.projector.to_pixel(centre)
        width, height = framebuffer.width, framebuffer.height
        if not (-radius <= centre_x < width + radius and -radius <= centre_y < height + radius):
            return 0

        lit = 0
        radius_sq = radius * radius
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if dx * dx + dy * dy > radius_sq:
                    continue
                x = centre_x + dx
                y = centre_y + dy
                if 0 <= x < width and 0 <= y < height:
                    framebuffer.set_pixel(x, y, 1)
                    lit += 1
        return lit

    def sphere_points(self) -> Iterator[Point3]:
        """Latitude/longitude samples on the body surface."""
        k = self.kernel
        step = self.config.sphere_angle_step
        radius = self._body_radius
        for latitude in range(-90, 91, step):
            lat = k.radians(k.from_int(latitude))
            ring_radius = k.mul(radius, k.cos(lat))
            y = k.mul(radius, k.sin(lat))
            for longitude in range(0, 360, step):
                lon = k.radians(k.from_int(longitude))
                yield self.body_centre + Point3(
                    k.mul(ring_radius, k.cos(lon)),
                    y,
                    k.mul(ring_radius, k.sin(lon)),
                )

    def _draw_body_points(self, framebuffer: Framebuffer, camera: Point3, target: Point3) -> int:
        return sum(1 for point in self.sphere_points() if self.plot(framebuffer, point, camera, target))

    # Rings ------------------------------------------------------------

    def ring_points(self, ring: RingSpec) -> Iterator[Point3]:
        """Candidate points of one ring band, already tilted about the X axis.

        ``(360 / ring_angle_step) * (floor((outer - inner) / ring_radial_step) + 1)``
        points are produced; both radii are inclusive.
        """
        k = self.kernel
        vm = self.vectors
        inner = k.from_float(ring.inner_radius)
        outer = k.from_float(ring.outer_radius)
        tilt = k.radians(k.from_float(ring.tilt_degrees))
        steps = k.whole_steps(outer - inner, self._radial_step)

        for degrees in range(0, 360, self.config.ring_angle_step):
            angle = k.radians(k.from_int(degrees))
            cos_a = k.cos(angle)
            sin_a = k.sin(angle)
            for i in range(steps + 1):
                radius = inner + i * self._radial_step
                flat = self.body_centre + Point3(k.mul(radius, cos_a), k.zero, k.mul(radius, sin_a))
                yield vm.rotate_x(flat, tilt)

    def draw_ring(
        self, framebuffer: Framebuffer, ring: RingSpec, camera: Point3, target: Point3
    ) -> int:
        return sum(1 for point in self.ring_points(ring) if self.plot(framebuffer, point, camera, target))

    # Shared -----------------------------------------------------------

    def plot(self, framebuffer: Framebuffer, point: Point3, camera: Point3, target: Point3) -> bool:
        projected = self.projector.project(point, camera, target)
        if not self.projector.is_visible(projected):
            return False
        x, y = self.projector.to_pixel(projected)
        if not (0 <= x < framebuffer.width and 0 <= y < framebuffer.height):
            return False
        framebuffer.set_pixel(x, y, 1)
        return True


class RenderContext:
    """Owns everything that persists between frames of one animated scene."""

    def __init__(
        self,
        config: SceneConfig | None = None,
        *,
        kernel: ScalarKernel | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else SceneConfig()
        self.kernel = kernel if kernel is not None else make_kernel(self.config.variant)
        self.framebuffer = Framebuffer(self.config.width, self.config.height)
        self.scene = SceneGenerator(self.config, self.kernel)
        self.orbit = OrbitController(
            self.kernel,
            radius=self.config.camera_distance,
            rotation_period_seconds=self.config.rotation_period_seconds,
            target_fps=self.config.target_fps,
        )
        self.stars: List[Point3] = []
        self.starfield_state = StarfieldState.UNINITIALIZED
        self._rng = rng if rng is not None else random.Random(self.config.star_seed)

    def ensure_starfield(self) -> None:
        if self.starfield_state is StarfieldState.INITIALIZED:
            return
        self.stars = self.scene.generate_stars(self._rng)
        self.starfield_state = StarfieldState.INITIALIZED

    def render_frame(self) -> None:
        framebuffer = self.framebuffer
        scene = self.scene
        framebuffer.clear()
        self.ensure_starfield()

        camera = self.orbit.camera_position()
        target = scene.body_centre

        scene.draw_stars(framebuffer, self.stars, camera, target)
        scene.draw_body(framebuffer, camera, target)
        for ring in self.config.rings:
            scene.draw_ring(framebuffer, ring, camera, target)

    def step(self) -> None:
        """Advance the orbit by one frame, then render it."""
        self.orbit.advance()
        self.render_frame()
