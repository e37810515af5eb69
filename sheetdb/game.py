"""The falling-block game: splash screen, play state, layout and a terminal front end."""

from __future__ import annotations

import curses
import random
import time
from dataclasses import dataclass
from enum import Enum

from sheetdb.blocks import (
    BG_MARGIN,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    NORMAL_SPEED,
    QUEUE_SIZE,
    SPEED_UP_DIVIDER,
    BlockType,
    Color,
    block_color,
    block_data,
)
from sheetdb.field import Field

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 760
FRAME_RATE = 30

BACKGROUND_COLOR: Color = (30, 30, 30)
START_BUTTON_COLOR: Color = (255, 204, 229)
START_BUTTON_SIZE = (200, 50)
START_BUTTON_TOP = 550

_FAST_KEYS = frozenset({"down", "s"})


class GameState(Enum):
    """Which screen the game shows."""

    SPLASH = "splash"
    PLAYING = "playing"


@dataclass(frozen=True)
class Rect:
    """A filled rectangle to draw."""

    x: float
    y: float
    width: float
    height: float
    color: Color

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside (left and top edges included)."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class SplashScreen:
    """The title screen, left by pressing Enter."""

    title = "Tetris"
    prompt = "Press Enter to Start"

    def handle_key(self, key: str) -> bool:
        """Return whether ``key`` starts the game."""
        return key.lower() == "enter"


def _block_rects(block: BlockType, x: int, y: int, size: int, rotation: int) -> list[Rect]:
    color = block_color(block)
    return [
        Rect(x + (index % 4) * size, y + (index // 4) * size, size, size, color)
        for index, filled in enumerate(block_data(block, rotation))
        if filled
    ]


class Game:
    """Game state, timing and screen layout for a window of the given size."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self.field = Field(rng)
        self.tile_size = (height - BG_MARGIN * 2) // FIELD_HEIGHT
        self.update_speed = NORMAL_SPEED
        self.time_passed = 0.0
        self.state = GameState.SPLASH
        button_width, button_height = START_BUTTON_SIZE
        self.start_button = Rect(
            width // 2 - button_width / 2,
            START_BUTTON_TOP,
            button_width,
            button_height,
            START_BUTTON_COLOR,
        )

    def start(self) -> None:
        """Leave the splash screen and start playing."""
        self.state = GameState.PLAYING
        self.time_passed = 0.0

    def click(self, x: float, y: float) -> None:
        """A mouse press at (x, y); on the splash screen the start button starts play."""
        if self.state is GameState.SPLASH and self.start_button.contains(x, y):
            self.start()

    def key_down(self, key: str) -> None:
        """A key press while playing: down or s speeds up, others steer the block."""
        if self.state is not GameState.PLAYING:
            return
        if key.lower() in _FAST_KEYS:
            self.update_speed = NORMAL_SPEED / SPEED_UP_DIVIDER
        self.field.handle_key(key)

    def key_up(self, key: str) -> None:
        """A key release while playing: releasing down or s restores normal speed."""
        if self.state is GameState.PLAYING and key.lower() in _FAST_KEYS:
            self.update_speed = NORMAL_SPEED

    def update(self, elapsed: float) -> None:
        """Advance play by ``elapsed`` seconds, one field step per interval."""
        if self.state is not GameState.PLAYING:
            return
        self.time_passed += elapsed
        while self.time_passed >= self.update_speed:
            self.field.tick()
            self.time_passed -= self.update_speed

    def render(self) -> list[Rect]:
        """Return the rectangles that make up the current screen, in drawing order."""
        if self.state is GameState.SPLASH:
            return [self.start_button]

        margin = BG_MARGIN
        panel_height = self.height - margin * 2
        queue_width = (self.width - margin * 3) / 3
        rects = [Rect(margin, margin, queue_width, panel_height, BACKGROUND_COLOR)]

        queue_tile = int(queue_width / 6)
        if queue_tile > 0:
            slots = int(panel_height / queue_tile / 5)
            shown = self.field.queue()[: min(slots, QUEUE_SIZE) + 1]
            for i, block in enumerate(shown):
                multiplier = 1.0 if block in (BlockType.I, BlockType.O) else 0.5
                rects.extend(
                    _block_rects(
                        block,
                        int(margin + queue_tile * multiplier),
                        int(margin + i * queue_tile * 5),
                        queue_tile,
                        0,
                    )
                )

        field_x = 20 + queue_width + margin
        field_width = 2 / 3 * (self.width - margin * 3)
        rects.append(Rect(field_x, margin, field_width, panel_height, BACKGROUND_COLOR))

        left, top, tile = int(field_x), margin, self.tile_size
        field = self.field
        rects.extend(
            _block_rects(
                field.current,
                left + tile * field.offset,
                top + tile * field.height,
                tile,
                field.rotation,
            )
        )
        for x, column in enumerate(field.cells):
            for y, cell in enumerate(column):
                rects.append(Rect(left + x * tile, top + y * tile, tile, tile, block_color(cell)))
        return rects


_CURSES_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
}


def _key_name(code: int) -> str | None:
    if code == -1:
        return None
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    if 32 <= code < 127:
        return chr(code).lower()
    return None


def _falling_tiles(field: Field) -> set[tuple[int, int]]:
    data = block_data(field.current, field.rotation)
    return {
        (field.offset + index % 4, field.height + index // 4)
        for index, filled in enumerate(data)
        if filled
    }


def _draw(screen, game: Game, splash: SplashScreen) -> None:
    screen.erase()
    try:
        if game.state is GameState.SPLASH:
            screen.addstr(1, 2, splash.title)
            screen.addstr(3, 2, splash.prompt)
            screen.addstr(4, 2, "q quits")
            return
        field = game.field
        falling = _falling_tiles(field)
        for y in range(FIELD_HEIGHT):
            line = "".join(
                "[]" if (x, y) in falling or field.cells[x][y] != BlockType.NONE else " ."
                for x in range(FIELD_WIDTH)
            )
            screen.addstr(y + 1, 1, "|" + line + "|")
        screen.addstr(FIELD_HEIGHT + 1, 1, "+" + "-" * (FIELD_WIDTH * 2) + "+")
        upcoming = " ".join(block.name for block in field.queue()[:5])
        screen.addstr(1, FIELD_WIDTH * 2 + 5, f"Next: {upcoming}")
    except curses.error:
        pass
    finally:
        screen.refresh()


def _play(screen) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.nodelay(True)
    screen.keypad(True)

    game = Game(WINDOW_WIDTH, WINDOW_HEIGHT)
    splash = SplashScreen()
    last = time.monotonic()
    while True:
        key = _key_name(screen.getch())
        fast = False
        if key == "q":
            break
        if key is not None:
            if game.state is GameState.SPLASH:
                if splash.handle_key(key):
                    game.start()
            else:
                game.key_down(key)
                fast = key in _FAST_KEYS
        now = time.monotonic()
        game.update(now - last)
        last = now
        if fast:
            # Terminals report no key releases, so a fast drop lasts one frame.
            game.key_up(key)
        _draw(screen, game, splash)
        time.sleep(1 / FRAME_RATE)


def run_tetris() -> None:
    """Play the game in the terminal until q is pressed."""
    curses.wrapper(_play)