"""Interactive entry point for the ringed-planet display renderer."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .saturn.config import BODY_MODES, SceneConfig
from .saturn.scalar import KERNELS
from .saturn.scene import RenderContext
from .saturn.terminal import TerminalController
from .saturn.window import PresenterError, WindowPresenter


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ringed planet on a simulated 128x64 monochrome display")
    parser.add_argument("--fps", type=float, default=30.0, help="Target frames per second (default: 30)")
    parser.add_argument(
        "--period",
        type=float,
        default=20.0,
        help="Seconds for one full camera orbit (default: 20)",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=8,
        help="Window pixels per display pixel (default: 8)",
    )
    parser.add_argument(
        "--variant",
        type=str,
        default="fixed",
        choices=sorted(KERNELS),
        help="Numeric representation used by the pipeline (default: fixed)",
    )
    parser.add_argument(
        "--body",
        type=str,
        default="disc",
        choices=BODY_MODES,
        help="Planet body policy: filled disc or lat/long point cloud (default: disc)",
    )
    parser.add_argument("--stars", type=int, default=100, help="Number of background stars (default: 100)")
    parser.add_argument("--seed", type=int, default=None, help="Starfield random seed")
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Run for a fixed number of frames (0 = infinite)",
    )
    parser.add_argument(
        "--window",
        action="store_true",
        help="Present through a pygame window instead of the terminal",
    )
    return parser.parse_args(argv)


@dataclass
class RuntimeConfig:
    scene: SceneConfig
    presenter: Any
    using_window: bool
    warnings: list[str]
    frame_duration: float
    frame_limit: int


def _setup_runtime(args: argparse.Namespace) -> RuntimeConfig:
    warnings: list[str] = []

    fps = args.fps
    if fps <= 0.0:
        warnings.append(f"Ignoring non-positive --fps {fps}; using 30")
        fps = 30.0

    scale = args.scale
    if scale < 1:
        warnings.append(f"Ignoring --scale {scale}; using 1")
        scale = 1

    stars = args.stars
    if stars < 0:
        warnings.append(f"Ignoring negative --stars {stars}; using 0")
        stars = 0

    scene = SceneConfig(
        scale=scale,
        rotation_period_seconds=args.period,
        target_fps=fps,
        star_count=stars,
        star_seed=args.seed,
        variant=args.variant,
        body_mode=args.body,
    )

    if args.window:
        presenter: Any = WindowPresenter(scene.width, scene.height, scale=scene.scale)
    else:
        presenter = TerminalController()
        if scale != 8:
            warnings.append("--scale only applies to --window output")

    return RuntimeConfig(
        scene=scene,
        presenter=presenter,
        using_window=args.window,
        warnings=warnings,
        frame_duration=1.0 / fps,
        frame_limit=max(0, args.frames),
    )


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[saturn] {warning}\n")
    sys.stderr.flush()


def _print_banner(scene: SceneConfig) -> None:
    sys.stdout.write("Saturn Renderer Prototype\n")
    sys.stdout.write("Controls: ESC to quit\n")
    sys.stdout.write(f"Display: {scene.width}x{scene.height} pixels (simulating SSD1306)\n")
    sys.stdout.flush()


def _run_loop(config: RuntimeConfig, context: RenderContext) -> None:
    frame_counter = 0
    last_frame_start: float | None = None
    smoothed_fps = config.scene.target_fps

    with config.presenter as presenter:
        try:
            while True:
                frame_start = time.perf_counter()
                if last_frame_start is not None:
                    delta = frame_start - last_frame_start
                    instantaneous_fps = 1.0 / max(delta, 1e-6)
                    smoothed_fps = smoothed_fps * 0.85 + instantaneous_fps * 0.15
                last_frame_start = frame_start

                if presenter.quit_requested():
                    break

                context.step()

                if config.using_window:
                    presenter.present(context.framebuffer)
                else:
                    hud = (
                        f"FPS {smoothed_fps:5.1f}  orbit {context.orbit.angle_degrees():6.1f}°  "
                        f"{context.kernel.name}  q/ESC: quit",
                    )
                    presenter.present(context.framebuffer, hud)

                frame_counter += 1
                if config.frame_limit and frame_counter >= config.frame_limit:
                    break

                frame_time = time.perf_counter() - frame_start
                sleep_time = config.frame_duration - frame_time
                if sleep_time > 0:
                    time.sleep(sleep_time)
        except KeyboardInterrupt:  # pragma: no cover - interactive loop
            presenter.restore()
            sys.stdout.write("\nInterrupted. Bye!\n")
            sys.stdout.flush()


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    try:
        config = _setup_runtime(args)
    except ValueError as exc:
        _emit_warnings([f"Invalid configuration: {exc}"])
        return 2
    _emit_warnings(config.warnings)

    context = RenderContext(config.scene)
    if config.using_window:
        _print_banner(config.scene)

    try:
        _run_loop(config, context)
    except PresenterError as exc:
        _emit_warnings([str(exc)])
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
