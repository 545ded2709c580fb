import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from tile_puzzle.edges import OFF, ON
from tile_puzzle.orientation import ORIENTATIONS, orient_image
from tile_puzzle.patterns import SEA_MONSTER
from tile_puzzle.tile import Tile

TILE_SIZE = 10


def _border_patterns(count, width):
    """Border pixel rows with off corners, no two equal in either direction."""
    used, patterns = set(), []
    for code in range(1, 2 ** width):
        bits = tuple((code >> (width - 1 - i)) & 1 for i in range(width))
        if bits == bits[::-1] or bits in used:
            continue
        used.update((bits, bits[::-1]))
        patterns.append(np.array((OFF,) + bits + (OFF,), dtype=np.int8))
        if len(patterns) == count:
            return patterns
    raise ValueError(f'Only {len(patterns)} border patterns of width {width}')


def build_puzzle(rows=3, cols=3, picture=None, seed=0):
    """Cut picture into tiles with unique borders, then scramble them.

    Returns:
        dict: tiles (scrambled Tile list), pixels (scrambled full pixel
            grids by id), layout (ids in solved order), picture
    """
    rng = np.random.default_rng(seed)
    inner = TILE_SIZE - 2
    if picture is None:
        picture = rng.integers(0, 2, size=(rows * inner, cols * inner)).astype(np.int8)

    patterns = iter(_border_patterns((rows + 1) * cols + rows * (cols + 1), inner))
    horizontal = [[next(patterns) for _ in range(cols)] for _ in range(rows + 1)]
    vertical = [[next(patterns) for _ in range(cols + 1)] for _ in range(rows)]

    layout = [[1001 + r * cols + c for c in range(cols)] for r in range(rows)]
    pixels = {}
    for r in range(rows):
        for c in range(cols):
            p = np.zeros((TILE_SIZE, TILE_SIZE), dtype=np.int8)
            p[1:-1, 1:-1] = picture[r * inner:(r + 1) * inner, c * inner:(c + 1) * inner]
            p[0, :] = horizontal[r][c]
            p[-1, :] = horizontal[r + 1][c]
            p[:, 0] = vertical[r][c]
            p[:, -1] = vertical[r][c + 1]
            orientation = ORIENTATIONS[rng.integers(len(ORIENTATIONS))]
            pixels[layout[r][c]] = orient_image(p, orientation)

    ids = [int(i) for i in rng.permutation(list(pixels))]
    tiles = [Tile.from_pixels(tile_id, pixels[tile_id]) for tile_id in ids]
    return {'tiles': tiles, 'pixels': {i: pixels[i] for i in ids}, 'layout': layout, 'picture': picture}


def plant(image, lines, y, x):
    for dy, line in enumerate(lines):
        for dx, glyph in enumerate(line):
            if glyph == '#':
                image[y + dy, x + dx] = ON
    return image


def tiles_text(pixels):
    blocks = []
    for tile_id, p in pixels.items():
        rows = [''.join('#' if v else '.' for v in row) for row in p]
        blocks.append('\n'.join([f'Tile {tile_id}:'] + rows))
    return '\n\n'.join(blocks) + '\n'


@pytest.fixture
def puzzle():
    return build_puzzle()


@pytest.fixture
def monster_picture():
    """24x24 picture with one sea monster and a few noise cells."""
    picture = np.zeros((24, 24), dtype=np.int8)
    plant(picture, SEA_MONSTER, 10, 2)
    for y, x in [(0, 0), (0, 23), (23, 0), (5, 5), (20, 15)]:
        picture[y, x] = ON
    return picture
