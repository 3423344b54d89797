"""Toolkit-independent state of the game window and its reactions to the model."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .model import Button, GameModel
from .signals import Signal

Scheduler = Callable[[int, Callable[[], None]], object]

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

RED_HOME = (250, 260)
BLUE_HOME = (450, 260)
BUTTON_WIDTH = 100
BUTTON_HEIGHT = 60
BASE_OFFSET = 15

PRESS_DEPTH = 15
START_PRESS_DEPTH = 3
CPU_RELEASE_DELAY_MS = 500
PROGRESS_RESET_DELAY_MS = 750

WON_TEXT = "USER WON"
LOST_TEXT = "USER LOST"
WON_STYLE = "color: yellow; font: bold 20px;"
LOST_STYLE = "color: red; font: bold 20px;"

HOW_TO_PLAY_TITLE = "HOW TO PLAY"
HOW_TO_PLAY_TEXT = (
    "Watch the computer press the red and blue buttons,\n"
    "then repeat the sequence in the same order.\n"
    "The buttons move after every turn, so follow the colours!"
)


def _run_now(delay_ms: int, callback: Callable[[], None]) -> None:
    callback()


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


@dataclass(eq=False)
class Widget:
    """A positioned element of the window with the state a toolkit would draw."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    text: str = ""
    style_sheet: str = ""
    visible: bool = True
    enabled: bool = True
    value: int = 0
    pressed: Signal = field(default_factory=lambda: Signal("pressed"), repr=False)
    released: Signal = field(default_factory=lambda: Signal("released"), repr=False)
    clicked: Signal = field(default_factory=lambda: Signal("clicked"), repr=False)

    def move(self, x: int, y: int) -> None:
        """Place the widget's top-left corner at (x, y)."""
        self.x = x
        self.y = y


class GameView:
    """The window's widgets and the slots that update them."""

    def __init__(self, scheduler: Scheduler | None = None) -> None:
        self._schedule: Scheduler = scheduler or _run_now

        self.red_button = Widget(*RED_HOME, BUTTON_WIDTH, BUTTON_HEIGHT, enabled=False)
        self.red_button_base = Widget(
            RED_HOME[0], RED_HOME[1] + BASE_OFFSET, BUTTON_WIDTH, BUTTON_HEIGHT
        )
        self.blue_button = Widget(*BLUE_HOME, BUTTON_WIDTH, BUTTON_HEIGHT, enabled=False)
        self.blue_button_base = Widget(
            BLUE_HOME[0], BLUE_HOME[1] + BASE_OFFSET, BUTTON_WIDTH, BUTTON_HEIGHT
        )

        self.start_game_button = Widget(300, 510, 200, 50, text="START GAME")
        self.start_game_button_shadow = Widget(304, 516, 200, 50)

        self.how_to_play_title = Widget(60, 90, text=HOW_TO_PLAY_TITLE)
        self.how_to_play_title_shadow = Widget(62, 92, text=HOW_TO_PLAY_TITLE)
        self.how_to_play = Widget(60, 130, text=HOW_TO_PLAY_TEXT)
        self.how_to_play_shadow = Widget(62, 132, text=HOW_TO_PLAY_TEXT)

        self.end_game_state = Widget(320, 478)
        self.end_game_state_shadow = Widget(322, 480)

        self.score = Widget(620, 20, text="0")
        self.score_shadow = Widget(622, 22, text="0")

        self.progress_bar = Widget(50, 575, 700, 15)

        self.red_button.pressed.connect(self.on_red_button_pressed)
        self.red_button.released.connect(self.on_red_button_released)
        self.blue_button.pressed.connect(self.on_blue_button_pressed)
        self.blue_button.released.connect(self.on_blue_button_released)
        self.start_game_button.pressed.connect(self.on_start_game_pressed)
        self.start_game_button.released.connect(self.on_start_game_released)

    def connect_model(self, model: GameModel) -> None:
        """Wire the model's signals to this view and the buttons' clicks to the model."""
        model.press_red_button.connect(self.on_cpu_red_button)
        model.press_blue_button.connect(self.on_cpu_blue_button)

        self.start_game_button.clicked.connect(model.start_game)
        model.game_started.connect(self.on_start_game)

        model.cpu_turn_began.connect(self.on_cpu_turn)
        model.user_turn_began.connect(self.on_user_turn)

        self.red_button.clicked.connect(lambda: model.user_turn(Button.RED))
        self.blue_button.clicked.connect(lambda: model.user_turn(Button.BLUE))

        model.game_won.connect(self.on_user_won_game)
        model.game_lost.connect(self.on_user_lost_game)

        model.move_red_button.connect(self.on_red_button_move)
        model.move_blue_button.connect(self.on_blue_button_move)

        model.correct_guess.connect(self._set_progress)

    # Animation helpers

    def animate_button_press(self, button: Widget) -> None:
        """Push a button down to show it being pressed."""
        button.move(button.x, button.y + PRESS_DEPTH)

    def animate_button_release(self, button: Widget) -> None:
        """Lift a pressed button back up."""
        button.move(button.x, button.y - PRESS_DEPTH)

    # User button animation

    def on_red_button_pressed(self) -> None:
        self.animate_button_press(self.red_button)

    def on_red_button_released(self) -> None:
        self.animate_button_release(self.red_button)

    def on_blue_button_pressed(self) -> None:
        self.animate_button_press(self.blue_button)

    def on_blue_button_released(self) -> None:
        self.animate_button_release(self.blue_button)

    def on_start_game_pressed(self) -> None:
        button = self.start_game_button
        button.move(button.x, button.y + START_PRESS_DEPTH)

    def on_start_game_released(self) -> None:
        button = self.start_game_button
        button.move(button.x, button.y - START_PRESS_DEPTH)

    # CPU button animation

    def on_cpu_red_button(self) -> None:
        """Show the CPU pressing red, releasing it after a short delay."""
        self.animate_button_press(self.red_button)
        self._schedule(
            CPU_RELEASE_DELAY_MS, lambda: self.animate_button_release(self.red_button)
        )

    def on_cpu_blue_button(self) -> None:
        """Show the CPU pressing blue, releasing it after a short delay."""
        self.animate_button_press(self.blue_button)
        self._schedule(
            CPU_RELEASE_DELAY_MS, lambda: self.animate_button_release(self.blue_button)
        )

    # Game states

    def on_start_game(self) -> None:
        """Hide the start screen and put the buttons back in place."""
        for widget in (
            self.start_game_button,
            self.start_game_button_shadow,
            self.how_to_play,
            self.how_to_play_shadow,
            self.how_to_play_title,
            self.how_to_play_title_shadow,
        ):
            widget.visible = False

        self.end_game_state.text = ""
        self.end_game_state_shadow.text = ""

        self.on_red_button_move(*RED_HOME)
        self.on_blue_button_move(*BLUE_HOME)

    def on_cpu_turn(self, score: int) -> None:
        """Lock user input, clear progress shortly, and raise the high score if beaten."""
        self.red_button.enabled = False
        self.blue_button.enabled = False

        self._schedule(PROGRESS_RESET_DELAY_MS, lambda: self._set_progress(0))

        if _to_int(self.score.text) < score:
            self.score.text = str(score)
            self.score_shadow.text = str(score)

    def on_user_turn(self) -> None:
        self.red_button.enabled = True
        self.blue_button.enabled = True

    def on_user_won_game(self) -> None:
        self.end_game_state.text = WON_TEXT
        self.end_game_state.style_sheet = WON_STYLE
        self.end_game_state_shadow.text = WON_TEXT
        self.on_end_of_game()

    def on_user_lost_game(self) -> None:
        self.end_game_state.text = LOST_TEXT
        self.end_game_state.style_sheet = LOST_STYLE
        self.end_game_state_shadow.text = LOST_TEXT
        self.on_end_of_game()

    def on_red_button_move(self, x: int, y: int) -> None:
        self.red_button.move(x, y)
        self.red_button_base.move(x, y + BASE_OFFSET)

    def on_blue_button_move(self, x: int, y: int) -> None:
        self.blue_button.move(x, y)
        self.blue_button_base.move(x, y + BASE_OFFSET)

    def on_end_of_game(self) -> None:
        """Disable the colour buttons and bring back the start screen."""
        self.red_button.enabled = False
        self.blue_button.enabled = False
        for widget in (
            self.start_game_button,
            self.start_game_button_shadow,
            self.how_to_play,
            self.how_to_play_shadow,
            self.how_to_play_title,
            self.how_to_play_title_shadow,
        ):
            widget.visible = True

    def _set_progress(self, value: int) -> None:
        self.progress_bar.value = value