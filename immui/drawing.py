"""Deferred drawing: elements recorded during a frame and drawn at its end."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from immui.geometry import TRANSPARENT, Color, Vector2f

__all__ = [
    "DRAW_ELEMENT_STACK_COUNT",
    "DrawElementKind",
    "DrawElement",
    "DrawStackOverflow",
    "DrawElementStack",
]

DRAW_ELEMENT_STACK_COUNT = 1024


class DrawElementKind(Enum):
    """What a recorded draw element represents."""

    RECT = auto()
    CIRCLE = auto()
    TEXT = auto()


@dataclass(frozen=True)
class DrawElement:
    """One primitive to draw once the frame ends."""

    kind: DrawElementKind
    fill_color: Color = TRANSPARENT
    out_color: Color = TRANSPARENT
    text: str | None = None
    font: Any = None
    font_size: int = 0
    pos: Vector2f = field(default_factory=Vector2f)
    size: Vector2f = field(default_factory=Vector2f)


class DrawStackOverflow(RuntimeError):
    """Raised when more elements are pushed than the stack can hold."""


class DrawElementStack:
    """A bounded last-in, first-out stack of draw elements."""

    def __init__(self, capacity: int = DRAW_ELEMENT_STACK_COUNT) -> None:
        self.capacity = capacity
        self._items: list[DrawElement] = []

    def push(self, element: DrawElement) -> None:
        """Add an element on top of the stack."""
        if len(self._items) >= self.capacity:
            raise DrawStackOverflow("Used up all the items on stack!")
        self._items.append(element)

    def pop(self) -> DrawElement:
        """Remove and return the most recently pushed element."""
        if not self._items:
            raise IndexError("pop from an empty draw stack")
        return self._items.pop()

    def clear(self) -> None:
        """Drop every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)