"""Falling-block shapes, their rotations, colours and the playfield settings."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

Color = tuple[int, int, int]

BG_MARGIN = 20
FIELD_WIDTH = 10
FIELD_HEIGHT = 20
NORMAL_SPEED = 0.2
SPEED_UP_DIVIDER = 4
QUEUE_SIZE = 10

EMPTY_COLOR: Color = (30, 30, 30)

_GRID_SIDE = 4
_GRID_CELLS = _GRID_SIDE * _GRID_SIDE


class BlockType(IntEnum):
    """The seven block shapes, plus ``NONE`` for an empty field cell."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6
    NONE = 8


BLOCK_COUNT = 7


def _grid(cells: Iterable[tuple[int, int]]) -> tuple[int, ...]:
    """Turn a set of occupied (x, y) cells into a row-major 4x4 occupancy grid."""
    occupied = set(cells)
    return tuple(
        int((index % _GRID_SIDE, index // _GRID_SIDE) in occupied)
        for index in range(_GRID_CELLS)
    )


# Occupied (x, y) cells of each rotation, in rotation order.
_CELLS: dict[BlockType, list[list[tuple[int, int]]]] = {
    BlockType.I: [
        [(0, 1), (1, 1), (2, 1), (3, 1)],
        [(2, 0), (2, 1), (2, 2), (2, 3)],
    ],
    BlockType.O: [
        [(1, 1), (2, 1), (1, 2), (2, 2)],
    ],
    BlockType.T: [
        [(1, 1), (2, 1), (3, 1), (2, 2)],
        [(2, 0), (2, 1), (3, 1), (2, 2)],
        [(2, 0), (1, 1), (2, 1), (3, 1)],
        [(2, 0), (1, 1), (2, 1), (2, 2)],
    ],
    BlockType.S: [
        [(2, 1), (3, 1), (1, 2), (2, 2)],
        [(2, 0), (2, 1), (3, 1), (3, 2)],
    ],
    BlockType.Z: [
        [(1, 1), (2, 1), (2, 2), (3, 2)],
        [(3, 0), (2, 1), (3, 1), (2, 2)],
    ],
    BlockType.J: [
        [(1, 1), (2, 1), (3, 1), (3, 2)],
        [(2, 0), (3, 0), (2, 1), (2, 2)],
        [(1, 0), (1, 1), (2, 1), (3, 1)],
        [(2, 0), (2, 1), (1, 2), (2, 2)],
    ],
    BlockType.L: [
        [(1, 1), (2, 1), (3, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2), (3, 2)],
        [(3, 0), (1, 1), (2, 1), (3, 1)],
        [(1, 0), (2, 0), (2, 1), (2, 2)],
    ],
}

_SHAPES: dict[BlockType, tuple[tuple[int, ...], ...]] = {
    block: tuple(_grid(rotation) for rotation in rotations)
    for block, rotations in _CELLS.items()
}

_COLORS: dict[BlockType, Color] = {
    BlockType.I: (171, 220, 242),
    BlockType.O: (255, 204, 229),
    BlockType.T: (204, 153, 255),
    BlockType.S: (204, 255, 204),
    BlockType.Z: (255, 102, 102),
    BlockType.J: (255, 241, 117),
    BlockType.L: (255, 204, 153),
}


def _shapes(block: BlockType) -> tuple[tuple[int, ...], ...]:
    try:
        return _SHAPES[BlockType(block)]
    except (KeyError, ValueError):
        raise ValueError(f"No shape for block {block!r}") from None


def block_data(block: BlockType, rotation: int) -> tuple[int, ...]:
    """Return the 4x4 occupancy grid of ``block`` in ``rotation``, row by row."""
    rotations = _shapes(block)
    return rotations[rotation % len(rotations)]


def collision_tiles(block: BlockType, rotation: int) -> list[tuple[int, int]]:
    """Return the positions just below each occupied tile that has no tile beneath it."""
    data = block_data(block, rotation)
    tiles: list[tuple[int, int]] = []
    for index, occupied in enumerate(data):
        if not occupied:
            continue
        x, y = index % _GRID_SIDE, index // _GRID_SIDE
        below = (y + 1) * _GRID_SIDE + x
        if below >= _GRID_CELLS or not data[below]:
            tiles.append((x, y + 1))
    return tiles


def block_color(block: BlockType) -> Color:
    """Return the fill colour of ``block``; empty cells get the background colour."""
    return _COLORS.get(BlockType(block), EMPTY_COLOR)