"""The set of callbacks a graphics library supplies to drive the UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional

from immui.geometry import Color, Vector2f

__all__ = ["CALLBACK_NAMES", "MouseButton", "MissingCallbackError", "Backend"]


class MouseButton(IntEnum):
    """Mouse buttons the UI asks about."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class MissingCallbackError(RuntimeError):
    """Raised when the UI needs a callback that was never provided."""


CALLBACK_NAMES = (
    "measure_text",
    "get_mpos",
    "mouse_button_released",
    "mouse_button_pressed",
    "mouse_button_down",
    "draw_rect",
    "draw_text",
)


@dataclass
class Backend:
    """Callbacks for measuring, input and drawing.

    ``measure_text(font, text, font_size) -> Vector2f``
    ``get_mpos() -> Vector2f``
    ``mouse_button_released(button) -> bool`` (also ``_pressed`` and ``_down``)
    ``draw_rect(pos, size, fill_color, outline_color)``
    ``draw_text(font, text, pos, font_size, color)``
    """

    measure_text: Optional[Callable[[Any, str, int], Vector2f]] = None
    get_mpos: Optional[Callable[[], Vector2f]] = None
    mouse_button_released: Optional[Callable[[MouseButton], bool]] = None
    mouse_button_pressed: Optional[Callable[[MouseButton], bool]] = None
    mouse_button_down: Optional[Callable[[MouseButton], bool]] = None
    draw_rect: Optional[Callable[[Vector2f, Vector2f, Color, Color], None]] = None
    draw_text: Optional[Callable[[Any, str, Vector2f, int, Color], None]] = None

    def require(self, name: str) -> Callable[..., Any]:
        """Return the callback called ``name``, failing if it is not set."""
        if name not in CALLBACK_NAMES:
            raise ValueError(f"unknown callback {name!r}")
        callback = getattr(self, name)
        if callback is None:
            raise MissingCallbackError(f"Trying to call {name!r}, which is not set")
        return callback