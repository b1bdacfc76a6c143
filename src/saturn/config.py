"""Scene configuration fixed at start-up."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .framebuffer import DISPLAY_HEIGHT, DISPLAY_WIDTH
from .scalar import KERNELS

BODY_MODES = ("disc", "sphere")


@dataclass(frozen=True, slots=True)
class RingSpec:
    """One concentric ring band, in world units and degrees."""

    inner_radius: float
    outer_radius: float
    tilt_degrees: float = 27.0

    def __post_init__(self) -> None:
        if self.inner_radius < 0.0:
            raise ValueError("Ring inner radius must be >= 0")
        if self.outer_radius < self.inner_radius:
            raise ValueError("Ring outer radius must be >= inner radius")


def _default_rings() -> Tuple[RingSpec, ...]:
    return (
        RingSpec(18.0, 20.0),
        RingSpec(22.0, 24.0),
        RingSpec(26.0, 28.0),
    )


@dataclass(frozen=True, slots=True)
class SceneConfig:
    width: int = DISPLAY_WIDTH
    height: int = DISPLAY_HEIGHT
    scale: int = 8
    body_radius: float = 20.0
    rings: Tuple[RingSpec, ...] = field(default_factory=_default_rings)
    ring_angle_step: int = 3
    ring_radial_step: float = 1.0
    sphere_angle_step: int = 10
    camera_distance: float = 70.0
    rotation_period_seconds: float = 20.0
    target_fps: float = 30.0
    projection_distance: float = 80.0
    star_count: int = 100
    star_half_extent: int = 200
    star_min_distance: float = 50.0
    star_seed: Optional[int] = None
    variant: str = "fixed"
    body_mode: str = "disc"

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Display width and height must be >= 1")
        if self.scale < 1:
            raise ValueError("Presentation scale must be >= 1")
        if self.body_radius <= 0.0:
            raise ValueError("Body radius must be > 0")
        if self.ring_angle_step < 1 or self.sphere_angle_step < 1:
            raise ValueError("Angular steps must be >= 1 degree")
        if self.ring_radial_step <= 0.0:
            raise ValueError("Ring radial step must be > 0")
        if self.camera_distance <= 0.0:
            raise ValueError("Camera distance must be > 0")
        if self.rotation_period_seconds <= 0.0:
            raise ValueError("Rotation period must be > 0 seconds")
        if self.target_fps <= 0.0:
            raise ValueError("Target FPS must be > 0")
        if self.projection_distance <= 0.0:
            raise ValueError("Projection distance must be > 0")
        if self.star_count < 0:
            raise ValueError("Star count must be >= 0")
        if self.star_half_extent < 1:
            raise ValueError("Star half extent must be >= 1")
        if self.variant not in KERNELS:
            raise ValueError(f"Unknown numeric variant '{self.variant}'")
        if self.body_mode not in BODY_MODES:
            raise ValueError(f"Unknown body mode '{self.body_mode}'")

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.width * self.scale, self.height * self.scale

    @property
    def frames_per_orbit(self) -> float:
        return self.rotation_period_seconds * self.target_fps
