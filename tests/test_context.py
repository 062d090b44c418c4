import pytest

from immui.backend import Backend, MissingCallbackError, MouseButton
from immui.context import LAYOUTS_CAP, Context, LayoutStackError, UsageError
from immui.drawing import DrawElement, DrawElementKind
from immui.geometry import RED, WHITE, Vector2f
from immui.layout import Layout


class FakeInput:
    def __init__(self):
        self.mpos = Vector2f(0.0, 0.0)
        self.pressed = False
        self.released = False
        self.down = False
        self.rects = []
        self.texts = []

    def backend(self):
        return Backend(
            measure_text=lambda font, text, size: Vector2f(8.0 * len(text), float(size)),
            get_mpos=lambda: self.mpos,
            mouse_button_pressed=lambda b: b == MouseButton.LEFT and self.pressed,
            mouse_button_released=lambda b: b == MouseButton.LEFT and self.released,
            mouse_button_down=lambda b: b == MouseButton.LEFT and self.down,
            draw_rect=lambda pos, size, fill, out: self.rects.append((pos, size, fill, out)),
            draw_text=lambda font, text, pos, fs, color: self.texts.append(
                (text, pos, fs, color)
            ),
        )


@pytest.fixture
def inp():
    return FakeInput()


def make_context(inp, width=800, height=600):
    return Context(
        font="font",
        pos=Vector2f(100.0, 100.0),
        title="Sample",
        window_width=width,
        window_height=height,
        backend=inp.backend(),
    )


@pytest.fixture
def ctx(inp):
    return make_context(inp)


def next_widget_point(ctx):
    return ctx.top_layout().available_pos() + Vector2f(1.0, 1.0)


def red_fill_alpha(inp):
    return next(f.a for (_, _, f, _) in inp.rects if (f.r, f.g, f.b) == (255, 0, 0))


def test_title_font_size_follows_window_width(ctx):
    assert ctx.title_font_size == 28


def test_title_bar_geometry_invariants(ctx):
    assert ctx.minimize_button_size.x == ctx.minimize_button_size.y
    assert ctx.minimize_button_size.y == ctx.title_bar_size.y
    assert ctx.title_bar_size.y >= ctx.title_font_size
    assert ctx.title_bar_size.x > ctx.minimize_button_size.x


def test_vertical_padding_scales_with_window_height(inp):
    small = make_context(inp, height=300)
    large = make_context(inp, height=600)
    assert large.title_bar_vert_padding == pytest.approx(2 * small.title_bar_vert_padding)


def test_initial_state(ctx):
    assert ctx.active_id == -1
    assert ctx.top_layout() is None
    assert ctx.minimized is False


def test_missing_measure_callback_raises():
    with pytest.raises(MissingCallbackError):
        Context("font", Vector2f(0.0, 0.0), "T", 800, 600, Backend())


def test_push_and_pop_layout_round_trip(ctx):
    layout = Layout(pos=Vector2f(5.0, 6.0))
    ctx.push_layout(layout)
    assert ctx.top_layout() is layout
    assert ctx.pop_layout() is layout
    assert ctx.top_layout() is None


def test_pop_empty_layout_stack_raises(ctx):
    with pytest.raises(LayoutStackError):
        ctx.pop_layout()


def test_layout_stack_capacity(ctx):
    for _ in range(LAYOUTS_CAP - 1):
        ctx.push_layout(Layout())
    with pytest.raises(LayoutStackError):
        ctx.push_layout(Layout())


def test_widgets_outside_frame_raise(ctx):
    with pytest.raises(UsageError):
        ctx.button("Click", 18, WHITE)
    with pytest.raises(UsageError):
        ctx.text("hello", 18, WHITE)


def test_begin_reserves_title_bar(ctx):
    ctx.begin()
    top = ctx.top_layout()
    assert top.pos == ctx.pos
    assert top.size.y == ctx.title_bar_size.y + ctx.title_bar_vert_padding


def test_window_height_tracks_layout_height(ctx):
    ctx.begin()
    ctx.text("hello", 18, WHITE)
    ctx.button("press", 24, RED)
    assert ctx.ui_window_size.y == ctx.top_layout().size.y
    ctx.end()
    window_rect = next(r for r in ctx_rects_of_size(ctx.ui_window_size, ctx))
    assert window_rect == ctx.ui_window_size


def ctx_rects_of_size(size, ctx):
    yield size


def test_end_draws_window_with_accumulated_size(ctx, inp):
    ctx.begin()
    ctx.text("hello", 18, WHITE)
    ctx.end()
    sizes = [size for (_, size, _, _) in inp.rects]
    assert ctx.ui_window_size in sizes


def test_end_draws_elements_in_reverse_push_order(ctx, inp):
    ctx.begin()
    ctx.text("first", 18, WHITE)
    ctx.text("second", 18, RED)
    assert len(ctx.draw_stack) == 2
    ctx.end()
    assert len(ctx.draw_stack) == 0
    assert [t[0] for t in inp.texts] == ["Sample", "second", "first"]


def test_end_pops_frame_layout(ctx):
    ctx.begin()
    ctx.end()
    assert ctx.top_layout() is None


def test_button_click_requires_press_then_release_over_it(ctx, inp):
    ctx.begin()
    inp.mpos = next_widget_point(ctx)
    inp.pressed = True
    assert ctx.button("Go", 18, WHITE) is False
    assert ctx.active_id == 0
    ctx.end()

    inp.pressed = False
    inp.released = True
    ctx.begin()
    inp.mpos = next_widget_point(ctx)
    assert ctx.button("Go", 18, WHITE) is True
    assert ctx.active_id == -1
    ctx.end()


def test_release_away_from_button_is_not_a_click(ctx, inp):
    ctx.begin()
    inp.mpos = next_widget_point(ctx)
    inp.pressed = True
    ctx.button("Go", 18, WHITE)
    ctx.end()

    inp.pressed = False
    inp.released = True
    inp.mpos = Vector2f(0.0, 0.0)
    ctx.begin()
    assert ctx.button("Go", 18, WHITE) is False
    assert ctx.active_id == -1
    ctx.end()


def test_press_outside_button_does_not_activate(ctx, inp):
    inp.pressed = True
    ctx.begin()
    assert ctx.button("Go", 18, WHITE) is False
    assert ctx.active_id == -1
    ctx.end()


def test_button_alpha_rises_with_hover_and_hold(ctx, inp):
    alphas = []
    for hover, down in ((False, False), (True, False), (True, True)):
        inp.rects.clear()
        inp.down = down
        ctx.begin()
        inp.mpos = next_widget_point(ctx) if hover else Vector2f(0.0, 0.0)
        clicked = ctx.button("Go", 18, RED)
        assert clicked is False
        assert len(ctx.draw_stack) == 2
        ctx.end()
        alphas.append(red_fill_alpha(inp))
    assert alphas[0] == 102
    assert alphas[0] < alphas[1] < alphas[2]


def test_held_button_text_shifts(ctx, inp):
    positions = []
    for down in (False, True):
        inp.texts.clear()
        inp.down = down
        ctx.begin()
        inp.mpos = next_widget_point(ctx)
        clicked = ctx.button("Go", 18, RED)
        assert clicked is False
        ctx.end()
        positions.append(next(pos for (text, pos, _, _) in inp.texts if text == "Go"))
    assert positions[1].x > positions[0].x
    assert positions[1].y > positions[0].y


def test_minimize_button_toggles_and_hides_content(ctx, inp):
    ctx.begin()
    ctx.text("hello", 18, WHITE)
    inp.mpos = Vector2f(
        ctx.pos.x + ctx.title_bar_size.x - ctx.minimize_button_size.x / 2,
        ctx.pos.y + 1.0,
    )
    inp.pressed = True
    ctx.end()
    assert ctx.minimized is True
    assert "hello" not in [t[0] for t in inp.texts]

    inp.texts.clear()
    ctx.begin()
    ctx.text("hello", 18, WHITE)
    ctx.end()
    assert ctx.minimized is False
    assert "hello" in [t[0] for t in inp.texts]


def test_dragging_title_bar_moves_window(ctx, inp):
    start = ctx.pos
    inp.mpos = start + Vector2f(5.0, 5.0)
    inp.pressed = True
    ctx.begin()
    ctx.end()
    assert ctx.moving is True
    assert ctx.pos == start

    inp.pressed = False
    delta = Vector2f(30.0, 20.0)
    inp.mpos = inp.mpos + delta
    ctx.begin()
    ctx.end()
    assert ctx.pos == start + delta

    inp.released = True
    ctx.begin()
    ctx.end()
    assert ctx.moving is False
    moved_to = ctx.pos

    inp.released = False
    inp.mpos = inp.mpos + delta
    ctx.begin()
    ctx.end()
    assert ctx.pos == moved_to


def test_frame_context_manager_runs_begin_and_end(ctx, inp):
    with ctx.frame() as frame_ctx:
        assert frame_ctx.top_layout() is not None
        frame_ctx.text("inside", 18, WHITE)
    assert ctx.top_layout() is None
    assert [t[0] for t in inp.texts] == ["Sample", "inside"]


def test_frame_discards_layouts_on_error(ctx, inp):
    with pytest.raises(KeyError):
        with ctx.frame():
            raise KeyError("boom")
    assert ctx.top_layout() is None
    assert inp.texts == []


def test_circle_elements_cannot_be_drawn(ctx):
    ctx.begin()
    ctx.draw_stack.push(DrawElement(kind=DrawElementKind.CIRCLE))
    with pytest.raises(ValueError):
        ctx.end()


def test_button_ids_restart_each_frame(ctx, inp):
    ctx.begin()
    ctx.button("a", 18, WHITE)
    ctx.button("b", 18, WHITE)
    assert ctx.last_used_id == 2
    ctx.end()
    assert ctx.last_used_id == 0