"""Backend callbacks implemented with pygame.

Fonts handed to the UI are font file paths (or ``None`` for pygame's
default font); a sized font object is loaded and cached on first use.
"""

from __future__ import annotations

from typing import Any, Iterable

import pygame

from immui.backend import Backend, MouseButton
from immui.geometry import Color, Vector2f

__all__ = ["PygameBindings"]

_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


class PygameBindings:
    """Feeds pygame input to the UI and draws its output onto a surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.mouse_pos = Vector2f()
        self._pressed: set[MouseButton] = set()
        self._released: set[MouseButton] = set()
        self._down: set[MouseButton] = set()
        self._fonts: dict[tuple[Any, int], pygame.font.Font] = {}

    def update(self, events: Iterable[pygame.event.Event]) -> None:
        """Take in one frame's worth of events."""
        self._pressed.clear()
        self._released.clear()
        for event in events:
            if event.type not in (
                pygame.MOUSEMOTION,
                pygame.MOUSEBUTTONDOWN,
                pygame.MOUSEBUTTONUP,
            ):
                continue
            pos = getattr(event, "pos", None)
            if pos is not None:
                self.mouse_pos = Vector2f(float(pos[0]), float(pos[1]))
            if event.type == pygame.MOUSEMOTION:
                continue
            button = _BUTTONS.get(getattr(event, "button", None))
            if button is None:
                continue
            if event.type == pygame.MOUSEBUTTONDOWN:
                self._pressed.add(button)
                self._down.add(button)
            else:
                self._released.add(button)
                self._down.discard(button)

    def backend(self) -> Backend:
        """Return a backend whose callbacks use these bindings."""
        return Backend(
            measure_text=self._measure_text,
            get_mpos=self._get_mpos,
            mouse_button_released=self._released.__contains__,
            mouse_button_pressed=self._pressed.__contains__,
            mouse_button_down=self._down.__contains__,
            draw_rect=self._draw_rect,
            draw_text=self._draw_text,
        )

    def _font(self, font: Any, font_size: int) -> pygame.font.Font:
        key = (font, font_size)
        cached = self._fonts.get(key)
        if cached is None:
            if not pygame.font.get_init():
                pygame.font.init()
            cached = pygame.font.Font(font, font_size)
            self._fonts[key] = cached
        return cached

    def _measure_text(self, font: Any, text: str, font_size: int) -> Vector2f:
        width, height = self._font(font, font_size).size(text)
        return Vector2f(float(width), float(height))

    def _get_mpos(self) -> Vector2f:
        return self.mouse_pos

    def _draw_rect(
        self, pos: Vector2f, size: Vector2f, fill_color: Color, out_color: Color
    ) -> None:
        rect = pygame.Rect(int(pos.x), int(pos.y), int(size.x), int(size.y))
        if rect.width <= 0 or rect.height <= 0:
            return
        if fill_color.a:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill((fill_color.r, fill_color.g, fill_color.b, fill_color.a))
            self.surface.blit(overlay, rect.topleft)
        if out_color.a:
            pygame.draw.rect(
                self.surface,
                (out_color.r, out_color.g, out_color.b, out_color.a),
                rect,
                width=1,
            )

    def _draw_text(
        self, font: Any, text: str, pos: Vector2f, font_size: int, color: Color
    ) -> None:
        if not text or not color.a:
            return
        rendered = self._font(font, font_size).render(
            text, True, (color.r, color.g, color.b)
        )
        if color.a < 255:
            rendered.set_alpha(color.a)
        self.surface.blit(rendered, (int(pos.x), int(pos.y)))