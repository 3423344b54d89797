"""Game logic for the colour-sequence memory game."""

from __future__ import annotations

import random
import struct
from collections.abc import Callable
from enum import IntEnum
from typing import Protocol

from .signals import Signal

Scheduler = Callable[[int, Callable[[], None]], object]

DEFAULT_SEQUENCE_LENGTH = 100
DEFAULT_GAME_SPEED = 1000
DEFAULT_CPU_INITIAL_DELAY = 750

# Bounds for button placement, chosen to fit the window layout.
BUTTON_X_RANGE = (50, 650)
BUTTON_Y_RANGE = (200, 400)
MIN_BUTTON_GAP = 250
MAX_BUTTON_GAP = 750


class Button(IntEnum):
    """The two coloured buttons; values match the sequence entries."""

    BLUE = 0
    RED = 1


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _run_now(delay_ms: int, callback: Callable[[], None]) -> None:
    """Scheduler that ignores the delay and runs the callback at once."""
    callback()


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class GameModel:
    """Holds the sequence and turn state, and announces changes through signals."""

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        rng: _RandomSource | None = None,
        sequence_length: int = DEFAULT_SEQUENCE_LENGTH,
    ) -> None:
        if sequence_length < 1:
            raise ValueError("sequence_length must be at least 1")
        self._schedule: Scheduler = scheduler or _run_now
        self._rng: _RandomSource = rng or random.Random()

        self.sequence_length = sequence_length
        self.sequence: list[int] | None = None
        self.current_sequence_length = 1
        self.cpu_index = 0
        self.user_index = 0
        self.current_score = 0
        self.game_speed = DEFAULT_GAME_SPEED
        self.cpu_initial_delay = DEFAULT_CPU_INITIAL_DELAY

        self.game_started = Signal("game_started")
        self.cpu_turn_began = Signal("cpu_turn_began")
        self.user_turn_began = Signal("user_turn_began")
        self.game_won = Signal("game_won")
        self.game_lost = Signal("game_lost")
        self.correct_guess = Signal("correct_guess")
        self.press_red_button = Signal("press_red_button")
        self.press_blue_button = Signal("press_blue_button")
        self.move_red_button = Signal("move_red_button")
        self.move_blue_button = Signal("move_blue_button")

    def start_game(self) -> None:
        """Announce the start, build a new sequence and schedule the first CPU turn."""
        self.game_started.emit()
        self.create_sequence()
        self.cpu_turn_began.emit(self.current_score)
        self._schedule(self.cpu_initial_delay, self.cpu_turn)

    def create_sequence(self) -> None:
        """Fill a fresh random sequence of 0s and 1s and reset turn tracking."""
        self.current_sequence_length = 1
        self.cpu_index = 0
        self.user_index = 0
        self.sequence = [
            self.generate_random_number(0, 1) for _ in range(self.sequence_length)
        ]

    def cpu_turn(self) -> None:
        """Play one step of the CPU's demonstration, or hand over to the user."""
        sequence = self._require_sequence()
        if self.cpu_index < self.current_sequence_length:
            if sequence[self.cpu_index]:
                self.press_red_button.emit()
            else:
                self.press_blue_button.emit()
            self.cpu_index += 1
            self._schedule(self.game_speed, self.cpu_turn)
            return

        self.cpu_index = 0
        self.game_speed -= 60 if self.current_sequence_length % 5 == 0 else 20

        red_y = self.generate_random_number(*BUTTON_Y_RANGE)
        blue_y = self.generate_random_number(*BUTTON_Y_RANGE)
        while True:
            red_x = self.generate_random_number(*BUTTON_X_RANGE)
            blue_x = self.generate_random_number(*BUTTON_X_RANGE)
            if MIN_BUTTON_GAP <= abs(red_x - blue_x) <= MAX_BUTTON_GAP:
                break

        self.move_red_button.emit(red_x, red_y)
        self.move_blue_button.emit(blue_x, blue_y)
        self.user_turn_began.emit()

    def user_turn(self, button_pressed: int) -> None:
        """Check one user press against the sequence and advance the game."""
        sequence = self._require_sequence()
        if sequence[self.user_index] != int(button_pressed):
            self.game_lost.emit()
            return

        progress = _f32((self.user_index + 1.0) / self.current_sequence_length)
        self.correct_guess.emit(int(_f32(progress * 100)))

        if self.user_index < self.current_sequence_length - 1:
            self.user_index += 1
            return

        self.user_index = 0
        self.current_score = self.current_sequence_length
        if self.current_sequence_length < self.sequence_length:
            self.current_sequence_length += 1
            self.cpu_turn_began.emit(self.current_score)
            self._schedule(self.cpu_initial_delay, self.cpu_turn)
        else:
            self.game_won.emit()

    def generate_random_number(self, low: int, high: int) -> int:
        """Return a random integer in the closed range [low, high]."""
        return self._rng.randint(low, high)

    def _require_sequence(self) -> list[int]:
        if self.sequence is None:
            raise RuntimeError("the game has not been started")
        return self.sequence