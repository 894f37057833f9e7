import pytest

from stormcastle.game import (
    ARROW,
    CLOCK_HZ,
    FRAME_RATE_HZ,
    MAX_LEVEL,
    VIKING,
    VIKING_ATTACK,
    VIKING_BLOCK,
    WALK_STEP,
    Buttons,
    Game,
    GameState,
    Player,
    Sprite,
    main,
    random_step,
    systick_reload,
)
from stormcastle.lcd import Nokia5110


@pytest.fixture
def lcd():
    display = Nokia5110()
    display.init()
    display.clear()
    return display


@pytest.fixture
def game(lcd):
    return Game(lcd)


def _bank(lcd, bank):
    return lcd.ram[bank * 84:(bank + 1) * 84]


def _lit_banks(lcd):
    return [bank for bank in range(6) if any(_bank(lcd, bank))]


def _walk_until(game, predicate, limit=1000):
    for _ in range(limit):
        game.tick(Buttons.WALK, 0)
        if predicate(game):
            return
    raise AssertionError("condition never reached")


def test_random_step_is_one_or_two():
    assert {random_step(seed) for seed in range(2000)} == {1, 2}


def test_random_step_wraps_at_32_bits():
    for seed in (0, 1, 12345, 2666666):
        assert random_step(seed) == random_step(seed + 2**32)


def test_systick_reload_for_thirty_hertz():
    assert systick_reload(80_000_000, 30) == 2666667
    assert systick_reload(CLOCK_HZ, FRAME_RATE_HZ) == 2666667


@pytest.mark.parametrize("clock, rate", [(80_000_000, 1), (0, 30), (80_000_000, 0)])
def test_systick_reload_rejects_bad_values(clock, rate):
    with pytest.raises(ValueError):
        systick_reload(clock, rate)


def test_bitmaps_draw_inside_their_sixteen_by_ten_box(lcd):
    for image in (VIKING, VIKING_BLOCK, VIKING_ATTACK, ARROW):
        assert len(image) == 0xC6
        assert (image[10], image[18], image[22]) == (0x76, 0x10, 0x0A)
        lcd.clear_buffer()
        lcd.print_bmp(0, 47, image, 0)
        lcd.display_buffer()
        lit = {(x, y) for x in range(84) for y in range(48) if lcd.pixel(x, y)}
        assert len(lit) > 0
        assert all(x < 16 and 38 <= y <= 47 for x, y in lit)


def test_initial_sprites(game):
    assert game.state is GameState.START
    assert game.level == 0
    assert game.player == Player(0, 48, VIKING, hp=5, stance="")
    assert game.knight == Sprite(80, 48, VIKING)
    assert [(a.x, a.y) for a in game.arrows] == [(75, 0), (80, 10), (85, 20)]
    assert all(a.image == ARROW for a in game.arrows)


def test_start_screen_uses_text_rows(game, lcd):
    assert _lit_banks(lcd) == [0, 1, 3, 4]


def test_idle_tick_keeps_start_screen(game, lcd):
    before = bytes(lcd.ram)
    assert game.tick(Buttons.NONE, 0) is GameState.START
    assert game.level == 0
    assert bytes(lcd.ram) == before


def test_walk_starts_game(game, lcd):
    assert game.tick(Buttons.WALK, 0) is GameState.PLAYING
    assert game.level == 1
    assert game.player.x == WALK_STEP
    assert any(lcd.pixel(x, y) for x in range(2, 18) for y in range(39, 48))


def test_plain_int_buttons_are_accepted(game):
    assert game.tick(1, 0) is GameState.PLAYING


def test_block_and_attack_change_stance(game):
    game.tick(Buttons.WALK, 0)
    game.tick(Buttons.BLOCK, 0)
    assert game.player.stance == "b"
    assert game.player.image == VIKING_BLOCK
    assert game.player.x == WALK_STEP
    game.tick(Buttons.ATTACK, 0)
    assert game.player.stance == "a"
    assert game.player.image == VIKING_ATTACK


def test_walk_takes_priority(game):
    game.tick(Buttons.WALK, 0)
    game.tick(Buttons.ATTACK, 0)
    game.tick(Buttons.WALK | Buttons.BLOCK, 0)
    assert game.player.x == 2 * WALK_STEP
    assert game.player.stance == "a"
    assert game.player.image == VIKING


def test_arrows_fall_by_random_steps(game):
    seed = 777
    game.tick(Buttons.WALK, seed)
    step = random_step(seed)
    assert [(a.x, a.y) for a in game.arrows] == [
        (75 - step, 0 + step),
        (80 - step, 10 + step),
        (85 - step, 20 + step),
    ]


def test_counter_is_read_for_every_draw(game):
    reads = []

    def counter():
        reads.append(len(reads))
        return len(reads)

    game.tick(Buttons.WALK, counter)
    assert len(reads) == 6
    assert game.arrows[0].x == 75 - random_step(1)
    assert game.arrows[0].y == 0 + random_step(2)
    assert game.arrows[2].y == 20 + random_step(6)


def test_arrow_position_wraps_as_unsigned(game):
    game.tick(Buttons.WALK, 0)
    game.arrows[0].x = 0
    game.tick(Buttons.NONE, 0)
    assert game.arrows[0].x == 2**32 - random_step(0)


def test_level_advances_at_end_of_screen(game):
    _walk_until(game, lambda g: g.level == 2)
    step = random_step(0)
    assert game.player.x == WALK_STEP
    assert [(a.x, a.y) for a in game.arrows] == [
        (75 - step, step),
        (80 - step, 10 + step),
        (85 - step, 20 + step),
    ]


def test_victory_after_last_level(game, lcd):
    _walk_until(game, lambda g: g.state is GameState.WON)
    assert game.level == MAX_LEVEL
    assert game.player.x == 0
    assert _lit_banks(lcd) == [0, 2, 3]
    before = bytes(lcd.ram)
    assert game.tick(Buttons.WALK, 0) is GameState.WON
    assert game.player.x == 0
    assert bytes(lcd.ram) == before


def test_reset_returns_to_start(game):
    game.tick(Buttons.WALK, 0)
    game.reset()
    assert game.state is GameState.START
    assert game.level == 0
    assert game.player.x == 0


def test_main_prints_screen_and_status(capsys):
    assert main(["--script", "ww.b", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 49
    assert all(len(line) == 84 for line in lines[:48])
    assert lines[-1] == "level 1 playing"


def test_main_without_script_shows_start(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "level 0 start"
    assert any("#" in line for line in lines[:48])


def test_main_rejects_unknown_script(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--script", "wx"])
    assert excinfo.value.code == 2