"""pygame window presenter that mimics the physical display at a larger scale.

pygame is imported when the window opens so that the rest of the package,
and the array conversion below, work on machines without a display.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import numpy as np

from .framebuffer import PAGE_HEIGHT, Framebuffer

LIT_COLOUR = (255, 255, 255)
WINDOW_TITLE = "Saturn Renderer Prototype"


class PresenterError(RuntimeError):
    """Raised when the output surface cannot be created."""


def framebuffer_to_array(framebuffer: Framebuffer) -> np.ndarray:
    """Unpack the page-ordered buffer into a ``(height, width)`` array of 0/1."""

    pages = np.frombuffer(framebuffer.get_buffer(), dtype=np.uint8)
    pages = pages.reshape(framebuffer.pages, 1, framebuffer.width)
    bits = np.unpackbits(pages, axis=1, bitorder="little")
    return bits.reshape(framebuffer.pages * PAGE_HEIGHT, framebuffer.width)[: framebuffer.height]


def framebuffer_to_rgb(
    framebuffer: Framebuffer, colour: Tuple[int, int, int] = LIT_COLOUR
) -> np.ndarray:
    mono = framebuffer_to_array(framebuffer)
    rgb = np.zeros(mono.shape + (3,), dtype=np.uint8)
    rgb[mono.astype(bool)] = colour
    return rgb


class WindowPresenter:
    """Context manager owning a pygame window of ``scale`` x the display size."""

    def __init__(self, width: int, height: int, *, scale: int = 8, title: str = WINDOW_TITLE) -> None:
        self.width = width
        self.height = height
        self.scale = max(1, int(scale))
        self.title = title
        self._pygame: Optional[Any] = None
        self._screen: Optional[Any] = None

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.width * self.scale, self.height * self.scale

    def __enter__(self) -> "WindowPresenter":
        try:
            import pygame
        except ImportError as exc:
            raise PresenterError(f"pygame is not available: {exc}") from exc

        try:
            pygame.init()
            self._screen = pygame.display.set_mode(self.window_size)
        except pygame.error as exc:
            pygame.quit()
            raise PresenterError(f"Window could not be created: {exc}") from exc

        pygame.display.set_caption(self.title)
        self._pygame = pygame
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._pygame is not None:
            self._pygame.quit()
        self._pygame = None
        self._screen = None

    def present(self, framebuffer: Framebuffer) -> None:
        pygame = self._pygame
        if pygame is None or self._screen is None:
            return
        rgb = framebuffer_to_rgb(framebuffer)
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        self._screen.blit(pygame.transform.scale(surface, self.window_size), (0, 0))
        pygame.display.flip()

    def poll_keys(self) -> List[str]:
        pygame = self._pygame
        if pygame is None:
            return []
        keys: List[str] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keys.append("QUIT")
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                keys.append("ESC")
        return keys

    def quit_requested(self) -> bool:
        return bool(self.poll_keys())
