# chickensaw

A small arcade game. A chicken runs left and right across a fenced yard
while sawblades come in from the top and bounce off the walls and the ground.
Jump over a sawblade and land to score a point. If a blade touches the
chicken, the game is over.

## Installing

```
pip install .
```

This installs `pygame` as a dependency.

## Playing

```
chickensaw
```

The command opens a 900×700 window and plays background music in a loop.
By default it looks in the current directory for:

- `images/` holding the sprites: `chicken.png`, `chickenrun.png`, `saw.png`,
  `bg.png`, `menu1.png`, `menu2.png`, `start.png`, `number.png`, `stop.png`.
  An image that cannot be loaded is reported on standard error and simply
  not drawn.
- `music.mp3`, the background music. This one is required: if the audio
  device cannot be opened or the music cannot be loaded, the command prints
  the error and exits with status 1.
- `highscore.txt`, where the best score is kept. A missing or unreadable
  file counts as a high score of 0. It is written whenever a round ends
  with a new best score, and again when the game closes.

Options:

- `--images DIR` – directory holding the sprites (default `images`)
- `--high-score-file PATH` – high-score file (default `highscore.txt`)
- `--music PATH` – music file (default `music.mp3`)

Controls:

- Click **Start** on the menu to begin.
- **Left** / **Right** arrows move the chicken.
- **Up** jumps. Hold it during the first jump to jump higher. Press it again
  in the air for a second, slightly weaker jump.
- Click the pause button at the top right to pause. On the pause panel, the
  upper half resumes the game and the lower half ends it.
- On the game-over screen, the middle button restarts and the one below it
  quits. The screen shows the round's score in the middle and the high score
  small in the top-left corner.

## Using it as a library

The game logic can be driven without a window, which is handy for tests or
bots. `Game.step` and `Game.handle_event` take the current time in
milliseconds and a sequence of pressed-key flags indexed by pygame key
constants (as returned by `pygame.key.get_pressed()`):

```python
import random
from chickensaw.game import Game

game = Game("images", "highscore.txt", random.Random(1))
game.start(0)
game.step(600, keys)
print(game.score, game.high_score, game.game_over)
```

Other pieces:

- `chickensaw.chicken.Chicken` – the player sprite and its jump physics.
- `chickensaw.saw.Saw` – one bouncing sawblade; `update(now_ms)` returns
  `True` once it has left through the top.
- `chickensaw.scene.Scene` – backgrounds, menus, the score digits and the
  pause panel; `chickensaw.scene.score_digit_rects` gives where each digit
  of a score is drawn.
- `chickensaw.collision` – `check_circle_collision` and
  `check_jump_over_saw`, the two tests run between the chicken and each
  sawblade.
- `chickensaw.game.load_high_score` and `save_high_score` – read and write
  the score file.

## What it does not include

The package ships no images or music; they must be supplied in the files
named above.

## Running the tests

```
pip install .[test]
pytest
```