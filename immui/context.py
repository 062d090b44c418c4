"""The immediate-mode UI window: layouts, widgets and the per-frame cycle."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from immui.backend import Backend, MouseButton
from immui.drawing import DrawElement, DrawElementKind, DrawElementStack
from immui.geometry import TRANSPARENT, WHITE, Color, Rect, Vector2f
from immui.layout import Layout

__all__ = ["LAYOUTS_CAP", "LayoutStackError", "UsageError", "Context"]

LAYOUTS_CAP = 1024


class LayoutStackError(RuntimeError):
    """Raised when the layout stack is exhausted or popped while empty."""


class UsageError(RuntimeError):
    """Raised when a widget is used outside ``begin``/``end``."""


class Context:
    """A movable, minimisable UI window holding widgets laid out in a column."""

    def __init__(
        self,
        font: Any,
        pos: Vector2f,
        title: str,
        window_width: float,
        window_height: float,
        backend: Backend,
    ) -> None:
        self.backend = backend
        self.font = font
        self.pos = pos
        self.offset = Vector2f()
        self.title = title
        self.moving = False
        self.minimized = False
        self.active_id = -1
        self.last_used_id = 0
        self.button_padding = Vector2f(10.0, 10.0)
        self.text_padding = Vector2f(10.0, 10.0)
        self.window_width = window_width
        self.window_height = window_height
        self.ui_window_size = Vector2f()
        self.draw_stack = DrawElementStack()
        self._layouts: list[Layout] = []

        self.title_font_size = int(window_width * 0.035)
        measured = backend.require("measure_text")(font, title, self.title_font_size)
        bar_height = max(measured.y, self.title_font_size * 1.30)
        self.minimize_button_size = Vector2f(bar_height, bar_height)
        self.title_bar_size = Vector2f(
            measured.x * 1.25 + self.minimize_button_size.x, bar_height
        )
        self.title_bar_vert_padding = window_height * 0.015

    # Layout stack

    def push_layout(self, layout: Layout) -> None:
        """Make ``layout`` the one new widgets are placed in."""
        if len(self._layouts) + 1 >= LAYOUTS_CAP:
            raise LayoutStackError("Layouts exhausted! Please increase LAYOUTS_CAP!")
        self._layouts.append(layout)

    def pop_layout(self) -> Layout:
        """Remove and return the current layout."""
        if not self._layouts:
            raise LayoutStackError("Popping from an empty stack!")
        return self._layouts.pop()

    def top_layout(self) -> Layout | None:
        """Return the current layout, or None outside a frame."""
        return self._layouts[-1] if self._layouts else None

    # Frame cycle

    def _push_widget(self, layout: Layout, size: Vector2f) -> None:
        self.ui_window_size = Vector2f(
            max(self.ui_window_size.x, size.x), self.ui_window_size.y + size.y
        )
        self.title_bar_size = Vector2f(
            max(self.title_bar_size.x, size.x), self.title_bar_size.y
        )
        layout.push_widget(size)

    def _current_layout(self) -> Layout:
        layout = self.top_layout()
        if layout is None:
            raise UsageError("This function must be used between 'begin' and 'end'!")
        return layout

    def begin(self) -> None:
        """Start a frame: reset the window and reserve room for the title bar."""
        self.draw_stack.clear()
        self.ui_window_size = Vector2f()
        self.push_layout(Layout(pos=Vector2f(self.pos.x, self.pos.y)))
        top = self._current_layout()
        self._push_widget(
            top,
            Vector2f(
                self.title_bar_size.x,
                self.title_bar_size.y + self.title_bar_vert_padding,
            ),
        )

    def end(self) -> None:
        """Finish a frame: handle dragging and minimising, then draw everything."""
        backend = self.backend
        pressed = backend.require("mouse_button_pressed")
        released = backend.require("mouse_button_released")
        draw_rect = backend.require("draw_rect")
        draw_text = backend.require("draw_text")

        self.last_used_id = 0
        self.pop_layout()

        title_bar_color = WHITE.with_alpha(120)
        title_bar_rect = Rect(
            self.pos.x, self.pos.y, self.title_bar_size.x, self.title_bar_size.y
        )
        mpos = backend.require("get_mpos")()
        if title_bar_rect.has_point(mpos):
            title_bar_color = title_bar_color.with_alpha(200)
            if pressed(MouseButton.LEFT):
                self.offset = mpos - self.pos
                self.moving = True

        if self.moving:
            self.pos = mpos - self.offset

        if released(MouseButton.LEFT):
            self.moving = False

        draw_rect(self.pos, self.title_bar_size, title_bar_color, WHITE)
        title_pos = Vector2f(
            self.pos.x + self.title_font_size * 0.15,
            self.pos.y + self.title_font_size * 0.15,
        )
        draw_text(self.font, self.title, title_pos, self.title_font_size, WHITE)

        minimize_pos = Vector2f(
            self.pos.x + self.title_bar_size.x - self.minimize_button_size.x,
            self.pos.y,
        )
        draw_rect(minimize_pos, self.minimize_button_size, TRANSPARENT, WHITE)
        minimize_rect = Rect(
            minimize_pos.x,
            minimize_pos.y,
            self.minimize_button_size.x,
            self.minimize_button_size.y,
        )
        if pressed(MouseButton.LEFT) and minimize_rect.has_point(mpos):
            self.minimized = not self.minimized

        if self.minimized:
            return

        draw_rect(self.pos, self.ui_window_size, TRANSPARENT, WHITE)
        while self.draw_stack:
            element = self.draw_stack.pop()
            if element.kind is DrawElementKind.RECT:
                draw_rect(element.pos, element.size, element.fill_color, element.out_color)
            elif element.kind is DrawElementKind.TEXT:
                draw_text(
                    element.font,
                    element.text,
                    element.pos,
                    element.font_size,
                    element.fill_color,
                )
            else:
                raise ValueError(f"cannot draw element of kind {element.kind.name}")

    @contextmanager
    def frame(self) -> Iterator[Context]:
        """Run ``begin`` on entry and ``end`` on a clean exit."""
        self.begin()
        try:
            yield self
        except BaseException:
            self._layouts.clear()
            raise
        self.end()

    # Widgets

    def button(self, text: str, font_size: int, color: Color) -> bool:
        """Place a button; return True on the frame it is clicked."""
        widget_id = self.last_used_id
        self.last_used_id += 1
        top = self._current_layout()
        backend = self.backend

        pos = top.available_pos()
        measured = backend.require("measure_text")(self.font, text, font_size)
        size = Vector2f(
            measured.x + self.button_padding.x * 2.0,
            measured.y + self.button_padding.y * 2.0,
        )
        rect = Rect(pos.x, pos.y, size.x, size.y)

        click = False
        mpos = backend.require("get_mpos")()
        hovering = rect.has_point(mpos)

        if self.active_id == widget_id:
            if backend.require("mouse_button_released")(MouseButton.LEFT):
                self.active_id = -1
                click = hovering
        elif hovering and backend.require("mouse_button_pressed")(MouseButton.LEFT):
            self.active_id = widget_id

        alpha = 0.4
        if hovering:
            alpha += 0.1
        held = hovering and backend.require("mouse_button_down")(MouseButton.LEFT)
        if held:
            alpha += 0.2

        self._push_widget(top, size)

        self.draw_stack.push(
            DrawElement(
                kind=DrawElementKind.RECT,
                fill_color=color.with_alpha(int(alpha * 255.0)),
                out_color=WHITE,
                pos=pos,
                size=size,
            )
        )

        text_pos = Vector2f(pos.x + self.button_padding.x, pos.y + self.button_padding.y)
        if held:
            text_pos = text_pos + Vector2f(
                self.button_padding.x * 0.25, self.button_padding.y * 0.25
            )
        self.draw_stack.push(
            DrawElement(
                kind=DrawElementKind.TEXT,
                fill_color=WHITE,
                text=text,
                pos=text_pos,
                font=self.font,
                font_size=font_size,
            )
        )
        return click

    def text(self, text: str, font_size: int, color: Color) -> None:
        """Place a line of text."""
        top = self._current_layout()
        pos = top.available_pos()
        measured = self.backend.require("measure_text")(self.font, text, font_size)
        size = Vector2f(
            measured.x + self.text_padding.x * 2.0,
            measured.y + self.text_padding.y * 2.0,
        )
        self._push_widget(top, size)
        self.draw_stack.push(
            DrawElement(
                kind=DrawElementKind.TEXT,
                fill_color=color,
                text=text,
                pos=pos,
                font=self.font,
                font_size=font_size,
            )
        )