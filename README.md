# asciistorm

A shoot-'em-up that runs in the terminal. You fly a ship (`<=A=>`) through a
scrolling star field. Enemies cross the screen and shoot at you, obstacles fall
and chase you, and falling items give you coins to spend on power-ups.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Playing

```
asciistorm
```

Options:

- `--setting PATH`: the engine setting file (default `../Config/Setting.txt`).
  If this file does not exist, the command prints
  `Failed to open engine setting file.` and exits with status 1.
- `--title PATH`: the title art file (default `../Assets/Title.txt`). If it is
  missing, the title screen shows `FILE NOT FOUND` and the path instead of the
  art. At most 40 lines are read.

The game takes over the terminal in full-screen mode and draws a 200 by 120
character field, so the terminal needs to be at least that large to show all
of it.

The title screen offers **GAME START**, **CREDIT** and **EXIT**. Move between
them with the up and down arrows, then press Enter or Space to choose. On the
credit page, Enter or Esc goes back to the menu.

### Controls in the game

| Key | Action |
| --- | --- |
| Arrow keys | Move. The ship speeds up and slows down gradually. |
| Space | Switch weapon: single shot, triple burst, seven-round series. |
| 1 | Bomb: costs 5 coins and destroys every enemy, enemy bullet and obstacle, scoring 2 for each. |
| 2 | Speed boost: costs 5 coins; speed and acceleration are multiplied by 2.3 for about five seconds. |
| G | Show or hide the quadtree used to find collisions. |
| H | With the quadtree shown, also show which actors each node holds. |
| Esc | Go back to the title screen. |

Your ship fires on its own, aimed in the direction of the arrow keys held
(straight up when none are). Each bullet hit on an enemy or an obstacle scores
a point; obstacles take one to five hits to destroy and may drop an item.
Picking up an item gives 5 coins. The weapon follows the score: a triple burst
from 10 points, a seven-round series from 20, the single shot below 10. Each
hit you take from an enemy bullet or an obstacle costs 5 points. When your
score would drop below zero the game is over, and after three seconds you go
back to the title screen.

## Settings

The setting file holds one `name = value` per line. `framerate` sets the
frame rate of the game loop (60 when it is missing or zero). `width` and
`height` are read too, but the screen size is always 200 by 120. Unknown or
malformed lines are ignored.

```
framerate = 60
```

## Using the engine

The game is built from a small set of parts that can be used on their own:

- `asciistorm.engine.Engine` runs the fixed-rate game loop (`run`).
  `Engine.step(delta_time)` advances the game by exactly one frame, and
  `set_new_level` switches level at the end of the current frame. It takes an
  optional setting path, an output callable that receives each rendered screen
  as text, and an event source that returns the frame's input events.
- `asciistorm.engine.parse_setting` and `load_setting` read setting text or a
  setting file into an `EngineSetting`.
- `asciistorm.level.Level` holds actors. Actors added during a frame join the
  level at the end of that frame, and destroyed actors leave at the same point.
- `asciistorm.actor.Actor` is a one-line text sprite with a position, a colour
  and a sorting order.
- `asciistorm.renderer.Renderer` collects draw commands with `submit` and
  builds each frame with `draw`. Where two commands cover the same cell, the
  one with the higher sorting order wins; commands starting off screen are
  dropped.
- `asciistorm.screen.ScreenBuffer` holds a grid of `Cell`s and renders it as
  text with ANSI colour sequences; `TerminalSession` is the full-screen
  terminal the command runs in.
- `asciistorm.input.Input` tracks key states from `KeyEvent` and `MouseEvent`
  objects and reports presses, releases and held keys.
- `asciistorm.quadtree.QuadTree` splits a region into quadrants so that overlap
  queries only look at nearby actors.
- `asciistorm.bounds.Bounds`, `asciistorm.vector2.Vector2`,
  `asciistorm.vector2.Color`, `asciistorm.timer.Timer` and the helpers in
  `asciistorm.util` (`random_int`, `random_range`, `clamp`,
  `set_random_seed`) are the small building blocks the rest uses.

## What it does not do

- There is no mouse input in the terminal. `TerminalSession` only produces key
  events, so the cursor readout shown on a left click (`MouseTester`) never
  appears while playing; `Input` still handles `MouseEvent`s passed to it
  directly.
- Terminals report key presses, not releases. A key counts as released once it
  has not repeated for about 0.35 seconds, so holding a key relies on the
  terminal's key repeat.
- The screen size cannot be changed through the setting file.
- Scores are not saved between games.