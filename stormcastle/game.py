"""Storm The Castle: a side-scrolling game driven by a 30 Hz timer tick."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, IntFlag

from stormcastle.font import SCREEN_HEIGHT
from stormcastle.lcd import Nokia5110

CLOCK_HZ = 80_000_000
FRAME_RATE_HZ = 30
SYSTICK_MAX_RELOAD = 0xFFFFFF

MAX_LEVEL = 5
LEVEL_END_X = 70
WALK_STEP = 2
PLAYER_HP = 5
KNIGHT_X = 80
ARROW_START_X = 75
ARROW_SPACING_X = 5
ARROW_SPACING_Y = 10
ARROW_COUNT = 3

_WORD = 1 << 32

# 16x10 pixel, 4 bits per pixel BMP header with its 16-colour palette.
_BMP_HEADER = bytes((
    0x42, 0x4D, 0xC6, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x76, 0x00, 0x00, 0x00, 0x28,
    0x00, 0x00, 0x00, 0x10, 0x00, 0x00, 0x00, 0x0A, 0x00, 0x00, 0x00, 0x01, 0x00, 0x04, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x50, 0x00, 0x00, 0x00, 0x13, 0x0B, 0x00, 0x00, 0x13, 0x0B, 0x00,
    0x00, 0x10, 0x00, 0x00, 0x00, 0x10, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x80, 0x00, 0x00, 0x80, 0x00, 0x00, 0x00, 0x80, 0x80, 0x00, 0x80, 0x00, 0x00, 0x00, 0x80,
    0x00, 0x80, 0x00, 0x80, 0x80, 0x00, 0x00, 0x80, 0x80, 0x80, 0x00, 0xC0, 0xC0, 0xC0, 0x00,
    0x00, 0x00, 0xFF, 0x00, 0x00, 0xFF, 0x00, 0x00, 0x00, 0xFF, 0xFF, 0x00, 0xFF, 0x00, 0x00,
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0xFF, 0x00, 0x00, 0xFF, 0xFF, 0xFF, 0x00,
))

# Pixel rows are stored bottom row first, eight bytes (16 pixels) per row.
VIKING = _BMP_HEADER + bytes((
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x0F, 0xF0, 0x0F, 0xF0, 0x00, 0x00,
    0x00, 0xF0, 0x0F, 0x00, 0x0F, 0x00, 0x00, 0x00,
    0x00, 0xF0, 0xFF, 0xFF, 0xFF, 0xF0, 0xF0, 0x00,
    0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xF0, 0x00,
    0x00, 0xF0, 0xFF, 0xFF, 0xFF, 0xF0, 0xF0, 0xF0,
    0x00, 0xF0, 0x00, 0xFF, 0xF0, 0x00, 0xFF, 0xF0,
    0x00, 0xF0, 0x00, 0xFF, 0xF0, 0x00, 0xFF, 0xF0,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
))

VIKING_BLOCK = _BMP_HEADER + bytes((
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x0F, 0xF0, 0x0F, 0xF0, 0x00, 0x00, 0x00,
    0x00, 0x0F, 0x00, 0x0F, 0x00, 0x00, 0x00, 0x00,
    0x00, 0xFF, 0xFF, 0xFF, 0xF0, 0x00, 0x0F, 0x00,
    0x0F, 0xFF, 0xFF, 0xFF, 0xFF, 0xF0, 0xFF, 0x00,
    0x00, 0xFF, 0xFF, 0xFF, 0xF0, 0x0F, 0xF0, 0x00,
    0x00, 0x00, 0xFF, 0xF0, 0x00, 0xFF, 0x00, 0x00,
    0x00, 0x00, 0xFF, 0xF0, 0x0F, 0xF0, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0xFF, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
))

VIKING_ATTACK = _BMP_HEADER + bytes((
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0xFF, 0x0F, 0xF0, 0x00, 0x00, 0x00, 0x00,
    0x00, 0xF0, 0x0F, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x0F, 0xFF, 0xFF, 0xF0, 0xF0, 0x00, 0x00, 0x00,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x00, 0x0F, 0x00,
    0x0F, 0xFF, 0xFF, 0xF0, 0x00, 0xF0, 0x00, 0xFF,
    0x00, 0x0F, 0xF0, 0x00, 0x00, 0x0F, 0x0F, 0xFF,
    0x00, 0x0F, 0xF0, 0x00, 0x00, 0x00, 0xFF, 0xF0,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
))

ARROW = _BMP_HEADER + bytes((
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xF0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x0F, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0xF0, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x0F, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0xFF, 0xF0, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0xFF, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0xF0, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
))

_START_SCREEN = (
    (2, 0, "Storm The"),
    (3, 1, "Castle!"),
    (1, 3, "Press walk"),
    (3, 4, "button"),
)

_VICTORY_SCREEN = (
    (2, 0, "Victory!"),
    (2, 2, "The loot"),
    (2, 3, "is yours!"),
)


class Buttons(IntFlag):
    """The three push buttons on port E, as read from its data register."""

    NONE = 0
    WALK = 0x01
    BLOCK = 0x02
    ATTACK = 0x04


class GameState(Enum):
    """Where the game stands."""

    START = 0
    PLAYING = 1
    WON = -1


@dataclass
class Sprite:
    """Something drawn on screen with the bottom-left corner of its bitmap at (x, y)."""

    x: int
    y: int
    image: bytes


@dataclass
class Player(Sprite):
    """The viking the player controls."""

    hp: int = PLAYER_HP
    stance: str = ""


def random_step(seed: int) -> int:
    """Return 1 or 2, drawn from a linear congruential step of a 32-bit seed."""
    value = (1664525 * seed + 1013904223) % _WORD
    return ((value >> 24) % 2) + 1


def systick_reload(clock_hz: int, rate_hz: int) -> int:
    """Return the SysTick reload count that gives interrupts at rate_hz.

    The count is rounded to the nearest whole tick; the timer's reload
    register holds one less than it in 24 bits.
    """
    if clock_hz <= 0 or rate_hz <= 0:
        raise ValueError("clock and rate must be positive")
    reload = (clock_hz + rate_hz // 2) // rate_hz
    if not 1 <= reload <= SYSTICK_MAX_RELOAD + 1:
        raise ValueError(f"a reload of {reload} does not fit the 24-bit SysTick timer")
    return reload


def _starting_arrows() -> list[Sprite]:
    return [
        Sprite(ARROW_START_X + i * ARROW_SPACING_X, i * ARROW_SPACING_Y, ARROW)
        for i in range(ARROW_COUNT)
    ]


class Game:
    """The game state, updated once per timer tick and drawn on an LCD."""

    def __init__(self, lcd: Nokia5110) -> None:
        self.lcd = lcd
        self.reset()

    def reset(self) -> None:
        """Place the player, knight and arrows, and show the start screen."""
        self.state = GameState.START
        self.level = 0
        self.player = Player(0, SCREEN_HEIGHT, VIKING)
        self.knight = Sprite(KNIGHT_X, SCREEN_HEIGHT, VIKING)
        self.arrows = _starting_arrows()
        self._show_text(_START_SCREEN)

    def _show_text(self, lines: Sequence[tuple[int, int, str]]) -> None:
        for x, y, text in lines:
            self.lcd.set_cursor(x, y)
            self.lcd.out_string(text)

    def _draw(self, sprite: Sprite) -> None:
        # Positions reach the drawing routine as 8-bit values.
        self.lcd.print_bmp(sprite.x & 0xFF, sprite.y & 0xFF, sprite.image, 0)

    def tick(
        self,
        buttons: Buttons | int = Buttons.NONE,
        seed: int | Callable[[], int] = 0,
    ) -> GameState:
        """Advance the game by one frame and return the resulting state.

        ``seed`` is the timer's current count, or a callable read afresh for
        each random draw.
        """
        buttons = Buttons(buttons)
        read_counter: Callable[[], int] = seed if callable(seed) else (lambda: seed)

        if buttons & Buttons.WALK and self.state is GameState.START:
            self.lcd.clear_buffer()
            self._draw(self.player)
            self.lcd.display_buffer()
            self.state = GameState.PLAYING
            self.level = 1

        if self.level <= MAX_LEVEL and self.player.x >= LEVEL_END_X:
            self.level += 1
            self.player.x = 0
            self.arrows = _starting_arrows()
            if self.level == MAX_LEVEL:
                self.lcd.clear()
                self._show_text(_VICTORY_SCREEN)
                self.state = GameState.WON

        if self.state is GameState.PLAYING:
            if buttons & Buttons.WALK:
                self.player.x += WALK_STEP
                self.lcd.clear_buffer()
                self.player.image = VIKING
            elif buttons & Buttons.BLOCK:
                self.player.stance = "b"
                self.lcd.clear_buffer()
                self.player.image = VIKING_BLOCK
            elif buttons & Buttons.ATTACK:
                self.player.stance = "a"
                self.lcd.clear_buffer()
                self.player.image = VIKING_ATTACK

            if any(arrow.y == SCREEN_HEIGHT for arrow in self.arrows):
                self.lcd.clear_buffer()

            for arrow in self.arrows:
                arrow.x = (arrow.x - random_step(read_counter())) % _WORD
                arrow.y = (arrow.y + random_step(read_counter())) % _WORD

            for sprite in (*self.arrows, self.player):
                self._draw(sprite)
            self.lcd.display_buffer()

        return self.state


_SCRIPT_KEYS = {
    "w": Buttons.WALK,
    "b": Buttons.BLOCK,
    "a": Buttons.ATTACK,
    ".": Buttons.NONE,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Play a scripted game and print the final screen."""
    parser = argparse.ArgumentParser(
        prog="stormcastle",
        description="Play Storm The Castle from a script of button presses.",
    )
    parser.add_argument(
        "--script",
        default="",
        help="one character per tick: w walk, b block, a attack, . no button",
    )
    parser.add_argument("--seed", type=int, default=0, help="seed for the timer count")
    args = parser.parse_args(argv)

    unknown = sorted(set(args.script) - set(_SCRIPT_KEYS))
    if unknown:
        parser.error(f"unknown script characters: {''.join(unknown)!r}")

    reload = systick_reload(CLOCK_HZ, FRAME_RATE_HZ)
    rng = random.Random(args.seed)

    def counter() -> int:
        return rng.randrange(reload)

    lcd = Nokia5110()
    lcd.init()
    lcd.clear()
    game = Game(lcd)
    for key in args.script:
        game.tick(_SCRIPT_KEYS[key], counter)

    print(lcd.render())
    print(f"level {game.level} {game.state.name.lower()}")
    return 0