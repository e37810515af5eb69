"""The playfield of the falling-block game."""

from __future__ import annotations

import random
from collections import deque

from sheetdb.blocks import (
    BLOCK_COUNT,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    QUEUE_SIZE,
    BlockType,
    block_data,
    collision_tiles,
)

SPAWN_OFFSET = 3
SPAWN_HEIGHT = -4

_ROTATE_KEYS = frozenset({"up", "w"})
_LEFT_KEYS = frozenset({"left", "a"})
_RIGHT_KEYS = frozenset({"right", "d"})


class Field:
    """A grid of settled tiles, the falling block and the queue of next blocks.

    ``cells[x][y]`` holds the block type settled at column ``x``, row ``y``.
    ``offset`` and ``height`` place the falling block's 4x4 box on the grid.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cells: list[list[BlockType]] = []
        self._queue: deque[BlockType] = deque()
        self.current = BlockType.I
        self.rotation = 0
        self.offset = SPAWN_OFFSET
        self.height = SPAWN_HEIGHT
        self.reset()

    def _random_block(self) -> BlockType:
        return BlockType(self._rng.randrange(BLOCK_COUNT))

    def queue(self) -> list[BlockType]:
        """The upcoming blocks, next one first."""
        return list(self._queue)

    def spawn(self, block: BlockType) -> None:
        """Start ``block`` falling from the top and advance the queue."""
        self.offset = SPAWN_OFFSET
        self.height = SPAWN_HEIGHT
        self.rotation = 0
        self.current = block
        if self._queue:
            self._queue.popleft()
            self._queue.append(self._random_block())

    def reset(self) -> None:
        """Clear the field, spawn a random block and refill the queue."""
        self.cells = [[BlockType.NONE] * FIELD_HEIGHT for _ in range(FIELD_WIDTH)]
        self.spawn(self._random_block())
        self._queue.extend(self._random_block() for _ in range(QUEUE_SIZE))

    def _occupied(self) -> list[tuple[int, int]]:
        data = block_data(self.current, self.rotation)
        return [
            (self.offset + index % 4, self.height + index // 4)
            for index, filled in enumerate(data)
            if filled
        ]

    def _settled(self, x: int, y: int) -> bool:
        return (
            0 <= x < FIELD_WIDTH
            and 0 <= y < FIELD_HEIGHT
            and self.cells[x][y] != BlockType.NONE
        )

    def place_block(self) -> None:
        """Settle the falling block, clearing any rows it completes.

        A block that settles partly above the field ends the game and
        resets the field.
        """
        for x, y in self._occupied():
            if x < 0 or x >= FIELD_WIDTH or y >= FIELD_HEIGHT:
                continue
            if y < 0:
                self.reset()
                return
            self.cells[x][y] = self.current

        cleared: set[int] = set()
        for y in range(max(0, self.height), min(FIELD_HEIGHT, self.height + 4)):
            if all(column[y] != BlockType.NONE for column in self.cells):
                cleared.add(y)
                for column in self.cells:
                    column[y] = BlockType.NONE

        shift = 0
        for y in range(FIELD_HEIGHT - 1, -1, -1):
            if y in cleared:
                shift += 1
                continue
            if shift:
                for column in self.cells:
                    column[y + shift] = column[y]

    def _hits_left(self) -> bool:
        return any(x < 0 or self._settled(x, y) for x, y in self._occupied())

    def _hits_right(self) -> bool:
        return any(x >= FIELD_WIDTH or self._settled(x, y) for x, y in self._occupied())

    def handle_key(self, key: str) -> None:
        """Rotate (up, w) or move (left, a, right, d) the falling block."""
        name = key.lower()
        if name in _ROTATE_KEYS:
            self.rotation += 1
            if self._hits_left() or self._hits_right():
                self.rotation -= 1
        elif name in _LEFT_KEYS:
            self.offset = max(self.offset - 1, -2)
            if self._hits_left():
                self.offset += 1
        elif name in _RIGHT_KEYS:
            self.offset = min(self.offset + 1, FIELD_WIDTH - 1)
            if self._hits_right():
                self.offset -= 1

    def tick(self) -> None:
        """Move the falling block down one row, settling it when it lands."""
        for tx, ty in collision_tiles(self.current, self.rotation):
            x, y = tx + self.offset, ty + self.height
            if y == FIELD_HEIGHT or self._settled(x, y):
                self.place_block()
                self.spawn(self._queue[0])
                break
        self.height += 1