"""Ringed-planet renderer for a 128x64 monochrome display."""

from .camera import CameraTransform, Projector
from .config import RingSpec, SceneConfig
from .framebuffer import Framebuffer
from .orbit import CameraState, OrbitController
from .scalar import FixedPointKernel, FloatKernel, make_kernel
from .scene import RenderContext, SceneGenerator, StarfieldState
from .terminal import TerminalController
from .vector import Point2, Point3, VectorMath

__all__ = [
    "CameraState",
    "CameraTransform",
    "FixedPointKernel",
    "FloatKernel",
    "Framebuffer",
    "OrbitController",
    "Point2",
    "Point3",
    "Projector",
    "RenderContext",
    "RingSpec",
    "SceneConfig",
    "SceneGenerator",
    "StarfieldState",
    "TerminalController",
    "VectorMath",
    "make_kernel",
]
