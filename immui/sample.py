"""A small demo window showing a button and two lines of text."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import pygame

from immui.context import Context
from immui.geometry import RED, WHITE, Vector2f
from immui.pygame_backend import PygameBindings

__all__ = ["WIDTH", "HEIGHT", "DEFAULT_FONT", "main"]

WIDTH = 800
HEIGHT = 600
DEFAULT_FONT = "res/fonts/arial.ttf"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="UI sample window.")
    parser.add_argument("--font", default=DEFAULT_FONT, help="path of a TTF font")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames (runs until closed by default)",
    )
    return parser.parse_args(argv)


def _font_is_valid(path: str) -> bool:
    try:
        pygame.font.Font(path, 12)
    except (OSError, pygame.error):
        return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Open the sample window and run it until it is closed."""
    args = _parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        surface = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("UI sample")

        if not _font_is_valid(args.font):
            print(f"[ERROR] font '{args.font}' is not valid!", file=sys.stderr)
            return 1

        bindings = PygameBindings(surface)
        ctx = Context(
            args.font, Vector2f(100.0, 100.0), "Sample", WIDTH, HEIGHT, bindings.backend()
        )
        clock = pygame.time.Clock()
        frame = 0
        while args.frames is None or frame < args.frames:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            bindings.update(events)

            surface.fill((0, 0, 0))
            with ctx.frame():
                if ctx.button("Click me!", 18, WHITE):
                    print("[INFO] Button Clicked!")
                ctx.text("This is a long text.", 24, RED)
                ctx.text("This too is a long text.", 18, WHITE)

            pygame.display.flip()
            clock.tick(60)
            frame += 1
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())