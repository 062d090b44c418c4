# immui

A small immediate-mode UI toolkit. Each frame you describe the widgets you want
and get back whether they were clicked. The toolkit does no input or drawing of
its own. It calls a set of backend callbacks that measure text, read the mouse
and draw rectangles and text, so it can sit on top of any graphics library. A
pygame backend is included.

Widgets sit in a movable window laid out as a single column. The window has a
title bar that you drag with the left mouse button and a minimize button in the
title bar's top-right corner.

## Installation

```
pip install immui
```

With the test dependencies:

```
pip install "immui[test]"
```

## Quick start

```python
import pygame

from immui.context import Context
from immui.geometry import RED, WHITE, v2
from immui.pygame_backend import PygameBindings

pygame.init()
screen = pygame.display.set_mode((800, 600))
bindings = PygameBindings(screen)

# With the pygame backend a font is a path to a font file, or None for
# pygame's default font.
ctx = Context(None, v2(100.0, 100.0), "Sample", 800, 600, bindings.backend())

running = True
while running:
    events = pygame.event.get()
    running = not any(e.type == pygame.QUIT for e in events)
    bindings.update(events)

    screen.fill((0, 0, 0))
    with ctx.frame():
        if ctx.button("Click me!", 18, WHITE):
            print("Button clicked!")
        ctx.text("This is a long text.", 24, RED)
    pygame.display.flip()
```

`Context.frame()` is a context manager. It calls `begin()` on entry and `end()`
on a clean exit. You can also call `begin()` and `end()` yourself. `button()`
and `text()` only work between those two calls. Outside them they raise
`UsageError`. Popping the layout stack when it is empty, or filling it, raises
`LayoutStackError`.

`button()` returns `True` on the frame the left button is released over a
button that it was pressed on.

## Modules

- `immui.geometry` has `Vector2f` (with `+` and `-`), `Rect.has_point()` and
  `Color.with_alpha()`, the helpers `v2()` and `v2xx()`, and the colours
  `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE` and `TRANSPARENT`.
- `immui.layout` has `Layout`, a column that grows downwards.
- `immui.drawing` has `DrawElement` and `DrawElementStack`. The stack is bounded
  and raises `DrawStackOverflow` when it is full. A frame records its widgets on
  this stack and draws them in `end()`.
- `immui.backend` has `Backend`, `MouseButton` and `MissingCallbackError`.
- `immui.context` has `Context`.
- `immui.pygame_backend` has `PygameBindings`.

## Writing your own backend

A `Backend` holds these callbacks:

- `measure_text(font, text, font_size)` returns a `Vector2f`
- `get_mpos()` returns a `Vector2f`
- `mouse_button_pressed(button)`, `mouse_button_released(button)` and
  `mouse_button_down(button)` return a `bool`
- `draw_rect(pos, size, fill_color, outline_color)`
- `draw_text(font, text, pos, font_size, color)`

`button` is a `MouseButton`. Positions and sizes are `Vector2f` values and
colours are `Color` values. `Backend.require(name)` returns a callback. It
raises `MissingCallbackError` if that callback was never set, and `ValueError`
for a name that is not a callback.

With `PygameBindings`, call `update(events)` once per frame with that frame's
pygame events. Then `backend()` gives you the callbacks.

## Sample

The package ships a demo window with a button and two lines of text:

```
immui-sample --font path/to/font.ttf
```

`--font` defaults to `res/fonts/arial.ttf`. If the font cannot be loaded, the
command prints an error and exits with status 1. `--frames N` stops the demo
after N frames. Without it, the demo runs until the window is closed.

## Limitations

The only widgets are buttons and text. There is a circle draw-element kind, but
it cannot be drawn: `end()` raises `ValueError` if it meets one.