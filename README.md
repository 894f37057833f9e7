# stormcastle

A small arcade game in which a viking walks across the screen, level by level,
under a hail of arrows. It is drawn on a simulated 84x48-pixel Nokia 5110
(PCD8544) monochrome LCD. Text uses a 5x8 bitmap font, and sprites are
16-colour, 4-bit BMP images.

## Installing

```
pip install .
```

## Playing a scripted game

The `stormcastle` command plays a game from a script of button presses, one
character per timer tick, and prints the final screen:

```
stormcastle --script "wwwwwwwwww" --seed 7
```

Script characters:

- `w`: walk. On the title screen it starts the game; while playing it moves
  the viking two pixels to the right.
- `b`: block (the viking raises his shield).
- `a`: attack (the viking swings his axe).
- `.`: no button pressed.

Any other character is rejected. `--seed` (default 0) seeds the stand-in for
the timer count that drives the arrows' random steps.

The screen is printed as 48 lines of 84 characters, `#` for a lit pixel and
`.` for a dark one, followed by a line such as `level 2 playing`. The state is
`start`, `playing` or `won`.

Each time the viking reaches column 70 he goes back to the left edge and the
next level begins, with the arrows reset. When the level count reaches 5
(after four crossings) the victory screen is shown and the game is won.

## Using the pieces

```python
from stormcastle.lcd import Nokia5110
from stormcastle.game import Buttons, Game

lcd = Nokia5110(contrast=0xB9)
lcd.init()
lcd.clear()
game = Game(lcd)                     # shows the title screen
state = game.tick(Buttons.WALK, seed=12345)
print(state, game.level)
print(lcd.render())
```

`Game.tick(buttons, seed)` advances one frame and returns a `GameState`
(`START`, `PLAYING` or `WON`). `seed` is a timer count, or a callable that is
called afresh for each random draw. `Game.reset()` puts everything back and
shows the title screen again.

From `stormcastle.lcd`:

- `Nokia5110` simulates the controller. Every byte sent through
  `write(kind, message)` with a `WriteType` of `COMMAND` or `DATA` is recorded
  in `transmissions` and updates the display RAM (`ram`) and settings.
- `out_char`, `out_string`, `out_udec` (five characters, right-justified) and
  `set_cursor(x, y)` (text column 0-11, row 0-5; other positions are ignored)
  print text. `clear()` blanks the display.
- `print_bmp(xpos, ypos, bmp, threshold)` draws a 4-bit BMP into the screen
  buffer (`buffer`) with its bottom-left corner at `(xpos, ypos)`, and returns
  `False` without drawing when the image would be cut off.
  `clear_buffer()` zeroes the buffer, `display_buffer()` sends it to the
  display, and `draw_full_image(image)` sends any 504-byte image.
- `pixel(x, y)` reads one pixel of display RAM; `render()` returns what the
  panel shows as text.

Also available:

- `glyph(char)` in `stormcastle.font` returns the five column bytes for a
  character code from 0x20 to 0x7F.
- `random_step(seed)` in `stormcastle.game` returns an arrow step of 1 or 2.
- `systick_reload(clock_hz, rate_hz)` returns the timer reload count for a
  tick rate (2666667 for 80 MHz at 30 Hz).

## What it does not do

- There is no live, real-time play: the command reads a prepared script and
  does not take keyboard input or run on a clock.
- Arrows fall, but nothing collides with anything. The player's `hp` is never
  reduced, and blocking and attacking only change the sprite.
- The knight is placed on the field but never drawn or moved.

## Tests

```
pip install .[test]
pytest
```