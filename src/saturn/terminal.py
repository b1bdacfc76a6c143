"""ANSI terminal presenter for the monochrome framebuffer."""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from typing import List, Optional, Sequence

from .framebuffer import Framebuffer

TermiosAttr = List[int | List[bytes | int]]

# Indexed by (upper pixel, lower pixel).
_HALF_BLOCKS = {
    (0, 0): " ",
    (1, 0): "▀",
    (0, 1): "▄",
    (1, 1): "█",
}

QUIT_KEYS = frozenset({"q", "Q", "ESC"})


def framebuffer_to_text(framebuffer: Framebuffer) -> str:
    """Render two pixel rows per text line using half-block glyphs."""

    lines: List[str] = []
    get_pixel = framebuffer.get_pixel
    for y in range(0, framebuffer.height, 2):
        lines.append(
            "".join(
                _HALF_BLOCKS[(get_pixel(x, y), get_pixel(x, y + 1))]
                for x in range(framebuffer.width)
            )
        )
    return "\n".join(lines)


class TerminalController:
    """Context manager that prepares the terminal for smooth animations."""

    def __init__(self, *, clear: bool = True) -> None:
        self._clear = clear
        self._cursor_hidden = False
        self._stdin_fd: Optional[int] = None
        self._termios_before: Optional[TermiosAttr] = None
        self._input_enabled = False

    def __enter__(self) -> "TerminalController":
        if self._clear:
            sys.stdout.write("\033[2J")
        sys.stdout.write("\033[H")
        sys.stdout.write("\033[?25l")
        sys.stdout.flush()
        self._cursor_hidden = True

        if sys.stdin.isatty():
            fd = sys.stdin.fileno()
            self._stdin_fd = fd
            try:
                self._termios_before = termios.tcgetattr(fd)
                tty.setcbreak(fd)
                self._input_enabled = True
            except termios.error:
                self._termios_before = None
                self._stdin_fd = None
                self._input_enabled = False
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._cursor_hidden:
            sys.stdout.write("\033[0m")
            sys.stdout.write("\033[?25h")
            sys.stdout.flush()
            self._cursor_hidden = False

        if self._input_enabled and self._stdin_fd is not None and self._termios_before is not None:
            try:
                termios.tcsetattr(self._stdin_fd, termios.TCSADRAIN, self._termios_before)
            except termios.error:
                pass
        self._input_enabled = False
        self._stdin_fd = None
        self._termios_before = None

    def present(self, framebuffer: Framebuffer, hud: Sequence[str] = ()) -> None:
        sys.stdout.write("\033[H")
        sys.stdout.write(framebuffer_to_text(framebuffer))
        for line in hud:
            sys.stdout.write("\n\033[2K")
            sys.stdout.write(line)
        sys.stdout.flush()

    def poll_keys(self) -> List[str]:
        if not self._input_enabled or self._stdin_fd is None:
            return []

        keys: List[str] = []
        try:
            while True:
                readable, _, _ = select.select([sys.stdin], [], [], 0)
                if not readable:
                    break

                data = os.read(self._stdin_fd, 1)
                if not data:
                    break

                char = data.decode("utf-8", errors="ignore")
                if not char:
                    continue

                if char == "\x03":
                    raise KeyboardInterrupt

                if char == "\x1b":
                    sequence = self._read_escape_sequence()
                    # A lone escape byte is the ESC key; longer ones are cursor keys.
                    if sequence == "\x1b":
                        keys.append("ESC")
                    continue

                keys.append(char)
        except OSError:
            return keys

        return keys

    def quit_requested(self) -> bool:
        return any(key in QUIT_KEYS for key in self.poll_keys())

    def _read_escape_sequence(self) -> str:
        sequence = "\x1b"
        if self._stdin_fd is None:
            return sequence

        while True:
            readable, _, _ = select.select([sys.stdin], [], [], 0)
            if not readable:
                break
            data = os.read(self._stdin_fd, 1)
            if not data:
                break
            char = data.decode("utf-8", errors="ignore")
            if not char:
                continue
            sequence += char
            if char.isalpha() or char == "~":
                break
        return sequence
