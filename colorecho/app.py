"""Tk front end for the colour-sequence memory game."""

from __future__ import annotations

import argparse
import random
import re
from collections.abc import Callable
from typing import Any

from .model import DEFAULT_SEQUENCE_LENGTH, GameModel
from .view import WINDOW_HEIGHT, WINDOW_WIDTH, GameView, Widget

REFRESH_MS = 16
BACKGROUND = "#2b2b3a"
_FONT = ("Helvetica", 12, "bold")
_TITLE_FONT = ("Helvetica", 16, "bold")
_END_FONT = ("Helvetica", 20, "bold")

_BUTTON_COLOURS = {
    "red": ("#e53935", "#8e1f1c", "#a35e5c"),
    "blue": ("#1e88e5", "#12508a", "#5c7fa3"),
}


class TkScheduler:
    """Run callbacks after a delay on a Tk event loop."""

    def __init__(self, root: Any) -> None:
        self._root = root

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> object:
        return self._root.after(delay_ms, callback)


def _contains(widget: Widget, x: int, y: int) -> bool:
    return widget.x <= x < widget.x + widget.width and widget.y <= y < widget.y + widget.height


def _style_colour(style_sheet: str, default: str = "white") -> str:
    match = re.search(r"color:\s*([#\w]+)", style_sheet)
    return match.group(1) if match else default


class GameWindow:
    """Draws a GameView on a canvas and feeds mouse input back into it."""

    def __init__(self, root: Any, view: GameView, canvas: Any = None) -> None:
        self._root = root
        self._view = view
        if canvas is None:
            import tkinter

            canvas = tkinter.Canvas(
                root,
                width=WINDOW_WIDTH,
                height=WINDOW_HEIGHT,
                bg=BACKGROUND,
                highlightthickness=0,
            )
            canvas.pack()
        self._canvas = canvas
        self._held: Widget | None = None
        canvas.bind("<ButtonPress-1>", self._on_press)
        canvas.bind("<ButtonRelease-1>", self._on_release)
        self.refresh()

    def refresh(self) -> None:
        """Redraw every visible widget from the view's current state."""
        view = self._view
        self._canvas.delete("all")

        self._draw_text(view.score_shadow, "black", "HIGH SCORE: ", _FONT)
        self._draw_text(view.score, "white", "HIGH SCORE: ", _FONT)

        self._draw_text(view.how_to_play_title_shadow, "black", "", _TITLE_FONT)
        self._draw_text(view.how_to_play_title, "white", "", _TITLE_FONT)
        self._draw_text(view.how_to_play_shadow, "black", "", _FONT)
        self._draw_text(view.how_to_play, "white", "", _FONT)

        self._draw_colour_button(view.red_button_base, view.red_button, "red")
        self._draw_colour_button(view.blue_button_base, view.blue_button, "blue")

        self._draw_rect(view.start_game_button_shadow, "#1b5e20")
        if view.start_game_button.visible:
            self._draw_rect(view.start_game_button, "#43a047")
            button = view.start_game_button
            self._canvas.create_text(
                button.x + button.width // 2,
                button.y + button.height // 2,
                text=button.text,
                fill="white",
                font=_FONT,
            )

        self._draw_text(view.end_game_state_shadow, "black", "", _END_FONT)
        self._draw_text(
            view.end_game_state,
            _style_colour(view.end_game_state.style_sheet),
            "",
            _END_FONT,
        )

        bar = view.progress_bar
        if bar.visible:
            self._canvas.create_rectangle(
                bar.x, bar.y, bar.x + bar.width, bar.y + bar.height, outline="white"
            )
            filled = bar.width * max(0, min(bar.value, 100)) // 100
            if filled:
                self._canvas.create_rectangle(
                    bar.x, bar.y, bar.x + filled, bar.y + bar.height,
                    fill="#fdd835", outline="",
                )

    def _draw_rect(self, widget: Widget, fill: str) -> None:
        if widget.visible:
            self._canvas.create_rectangle(
                widget.x,
                widget.y,
                widget.x + widget.width,
                widget.y + widget.height,
                fill=fill,
                outline="",
            )

    def _draw_text(self, widget: Widget, fill: str, prefix: str, font: tuple) -> None:
        if widget.visible and widget.text:
            self._canvas.create_text(
                widget.x, widget.y, text=prefix + widget.text, fill=fill,
                anchor="nw", font=font,
            )

    def _draw_colour_button(self, base: Widget, button: Widget, colour: str) -> None:
        face, shade, disabled = _BUTTON_COLOURS[colour]
        self._draw_rect(base, shade)
        self._draw_rect(button, face if button.enabled else disabled)

    def _widget_at(self, x: int, y: int) -> Widget | None:
        view = self._view
        for widget in (view.start_game_button, view.red_button, view.blue_button):
            if widget.visible and widget.enabled and _contains(widget, x, y):
                return widget
        return None

    def _on_press(self, event: Any) -> None:
        widget = self._widget_at(event.x, event.y)
        if widget is None:
            return
        self._held = widget
        widget.pressed.emit()
        self.refresh()

    def _on_release(self, event: Any) -> None:
        widget = self._held
        if widget is None:
            return
        self._held = None
        inside = _contains(widget, event.x, event.y)
        widget.released.emit()
        if inside and widget.enabled and widget.visible:
            widget.clicked.emit()
        self.refresh()

    def _tick(self) -> None:
        self.refresh()
        self._root.after(REFRESH_MS, self._tick)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="colorecho",
        description="Repeat the computer's sequence of red and blue presses.",
    )
    parser.add_argument(
        "--sequence-length",
        type=_positive_int,
        default=DEFAULT_SEQUENCE_LENGTH,
        help="number of presses needed to win (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    import tkinter

    root = tkinter.Tk()
    root.title("Color Echo")
    root.resizable(False, False)
    scheduler = TkScheduler(root)
    model = GameModel(
        scheduler=scheduler,
        rng=random.Random(args.seed),
        sequence_length=args.sequence_length,
    )
    view = GameView(scheduler=scheduler)
    view.connect_model(model)
    window = GameWindow(root, view)
    window._tick()
    root.mainloop()
    return 0