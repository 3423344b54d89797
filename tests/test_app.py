import random
from types import SimpleNamespace

import pytest

from colorecho.app import GameWindow, TkScheduler, main
from colorecho.model import GameModel
from colorecho.view import GameView


class Recorder:
    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))


class FakeCanvas:
    def __init__(self):
        self.items = []
        self.bindings = {}

    def bind(self, sequence, func):
        self.bindings[sequence] = func

    def delete(self, *tags):
        self.items.clear()

    def create_rectangle(self, *coords, **options):
        self.items.append(("rect", coords, options))

    def create_text(self, *coords, **options):
        self.items.append(("text", coords, options))


class FakeRoot:
    def __init__(self):
        self.calls = []

    def after(self, delay_ms, callback):
        self.calls.append((delay_ms, callback))
        return "after#1"


@pytest.fixture
def setup():
    view = GameView(scheduler=Recorder())
    model = GameModel(scheduler=Recorder(), rng=random.Random(3))
    view.connect_model(model)
    canvas = FakeCanvas()
    window = GameWindow(None, view, canvas=canvas)
    return view, model, canvas, window


def _centre(widget):
    return SimpleNamespace(
        x=widget.x + widget.width // 2, y=widget.y + widget.height // 2
    )


def _texts(canvas):
    return [opts.get("text") for kind, _, opts in canvas.items if kind == "text"]


def test_scheduler_forwards_to_root_after():
    root = FakeRoot()
    callback = lambda: None
    result = TkScheduler(root)(500, callback)
    assert result == "after#1"
    assert root.calls == [(500, callback)]


def test_initial_draw_shows_start_button(setup):
    view, _, canvas, _ = setup
    assert "START GAME" in _texts(canvas)


def test_click_on_start_starts_game(setup):
    view, model, canvas, _ = setup
    button = view.start_game_button
    y0 = button.y
    event = _centre(button)
    canvas.bindings["<ButtonPress-1>"](event)
    assert button.y == y0 + 3
    canvas.bindings["<ButtonRelease-1>"](event)
    assert button.y == y0
    assert not button.visible
    assert len(model.sequence) == model.sequence_length
    assert "START GAME" not in _texts(canvas)


def test_disabled_button_ignores_press(setup):
    view, model, canvas, _ = setup
    y0 = view.red_button.y
    canvas.bindings["<ButtonPress-1>"](_centre(view.red_button))
    canvas.bindings["<ButtonRelease-1>"](_centre(view.red_button))
    assert view.red_button.y == y0
    assert model.sequence is None


def test_release_outside_does_not_click(setup):
    view, model, canvas, _ = setup
    button = view.start_game_button
    y0 = button.y
    canvas.bindings["<ButtonPress-1>"](_centre(button))
    canvas.bindings["<ButtonRelease-1>"](SimpleNamespace(x=0, y=0))
    assert button.y == y0
    assert button.visible
    assert model.sequence is None


def test_refresh_draws_buttons_at_view_positions(setup):
    view, _, canvas, window = setup
    view.on_red_button_move(100, 300)
    window.refresh()
    rects = [coords for kind, coords, _ in canvas.items if kind == "rect"]
    red = view.red_button
    base = view.red_button_base
    assert (red.x, red.y, red.x + red.width, red.y + red.height) in rects
    assert (base.x, base.y, base.x + base.width, base.y + base.height) in rects


def test_refresh_shows_end_message_in_style_colour(setup):
    view, _, canvas, window = setup
    view.on_user_won_game()
    window.refresh()
    fills = [
        opts["fill"]
        for kind, _, opts in canvas.items
        if kind == "text" and opts.get("text") == "USER WON"
    ]
    assert "yellow" in fills


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--sequence-length" in capsys.readouterr().out


def test_main_rejects_bad_sequence_length():
    with pytest.raises(SystemExit) as info:
        main(["--sequence-length", "0"])
    assert info.value.code == 2