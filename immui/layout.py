"""Vertical layout that stacks widgets one under another."""

from __future__ import annotations

from dataclasses import dataclass, field

from immui.geometry import Vector2f

__all__ = ["Layout"]


@dataclass
class Layout:
    """A column of widgets growing downwards from ``pos``."""

    pos: Vector2f = field(default_factory=Vector2f)
    size: Vector2f = field(default_factory=Vector2f)

    def available_pos(self) -> Vector2f:
        """Return where the next widget goes."""
        return Vector2f(self.pos.x, self.pos.y + self.size.y)

    def push_widget(self, size: Vector2f) -> None:
        """Account for a widget of ``size`` placed at the next position."""
        self.size = Vector2f(max(self.size.x, size.x), self.size.y + size.y)