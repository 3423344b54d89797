# colorecho

A small memory game with two buttons, one red and one blue.

The computer plays a sequence of presses. You press the same buttons in the
same order. Each round adds one press to the sequence, and the computer gets a
little faster every round. The speed-up is larger on every fifth round. After
each computer turn the two buttons jump to new random places on the board, so
you have to follow the colours and not just left and right.

A wrong press ends the game. Repeat the full sequence (100 presses by default)
and you win. The high score shown in the corner is the best score since the
window was opened.

## Install

```
pip install .
```

The game window uses `tkinter`, which comes with most Python installations.
Python 3.10 or newer is required.

## Play

```
colorecho
```

Options:

- `--sequence-length N` sets how many presses are needed to win (default 100,
  must be at least 1).
- `--seed N` seeds the random generator, so the sequence and button positions
  repeat from run to run.

Click **Start Game**. Watch the buttons the computer presses, then click the
same ones in the same order. The progress bar shows how far through the
current sequence you are.

## Using the game logic directly

The rules live in `colorecho.model.GameModel`, which has no GUI of its own.
It reports everything through `colorecho.signals.Signal` objects that you
`connect` to. Its timed steps go through a scheduler, a callable taking a
delay in milliseconds and a callback; without one, callbacks run at once.

```python
from colorecho.model import Button, GameModel

pending = []
model = GameModel(scheduler=lambda delay_ms, callback: pending.append(callback))

model.press_red_button.connect(lambda: print("cpu: red"))
model.press_blue_button.connect(lambda: print("cpu: blue"))
model.user_turn_began.connect(lambda: print("your turn"))
model.game_lost.connect(lambda: print("game over"))

model.start_game()
while pending:
    pending.pop(0)()
```

To answer, call `model.user_turn(Button.RED)` or `model.user_turn(Button.BLUE)`.
The other signals are `game_started`, `cpu_turn_began` (with the current
score), `game_won`, `correct_guess` (with the percentage of the current
sequence done), `move_red_button` and `move_blue_button` (with x and y).
`GameModel` also accepts `rng`, any object with a `randint` method, and
`sequence_length`.

`colorecho.view.GameView` holds the state of the screen: where each widget is,
whether it can be clicked, and what text it shows. `GameView.connect_model`
wires it to a model. `colorecho.app.GameWindow` draws that state with tkinter.

## Limits

The high score is not saved; it is lost when the window closes.

## Tests

```
pip install .[test]
pytest
```