import os
import re
from dataclasses import dataclass

import numpy as np

from .edges import OFF, ON, STATES, TOP, LEFT, BOTTOM, RIGHT, border_edges
from .orientation import IDENTITY, Orientation

TILE_HEADER = re.compile(r'^Tile (\d+):$')


@dataclass(frozen=True, eq=False)
class Tile:
    """Square tile with its 8 cached edge ids and its interior image.

    ``edges`` must always describe the current orientation of the border,
    ``image`` holds the pixels without the border.
    """
    id: int
    edges: tuple
    image: np.ndarray
    orientation: Orientation = IDENTITY

    @classmethod
    def from_pixels(cls, tile_id, pixels):
        pixels = np.asarray(pixels, dtype=np.int8)

        if pixels.ndim != 2:
            raise ValueError(f'Tile {tile_id} must be 2D, got {pixels.ndim}D')

        height, width = pixels.shape
        if height != width:
            raise ValueError(f'Tile {tile_id} is not square ({height}x{width})')
        if height < 3:
            raise ValueError(f'Tile {tile_id} is too small ({height}x{width}) to have an interior')
        if not np.isin(pixels, [OFF, ON]).all():
            raise ValueError(f'Tile {tile_id} has pixel states other than on/off')

        return cls(id=tile_id, edges=border_edges(pixels), image=pixels[1:-1, 1:-1].copy())

    @classmethod
    def from_lines(cls, tile_id, lines):
        widths = {len(line) for line in lines}
        if len(widths) > 1:
            raise ValueError(f'Tile {tile_id} has rows of unequal length {sorted(widths)}')

        pixels = []
        for line in lines:
            row = []
            for glyph in line:
                if glyph not in ('#', '.'):
                    raise ValueError(f'Tile {tile_id} has unknown glyph {glyph!r}')
                row.append(STATES[glyph])
            pixels.append(row)

        return cls.from_pixels(tile_id, pixels)

    @property
    def top(self):
        return self.edges[TOP]

    @property
    def left(self):
        return self.edges[LEFT]

    @property
    def bottom(self):
        return self.edges[BOTTOM]

    @property
    def right(self):
        return self.edges[RIGHT]

    def __repr__(self):
        return f'Tile({self.id}, {self.orientation.code}, edges={self.edges[:4]})'


def parse_tiles(text):
    """Parse tile blocks: a ``Tile <id>:`` header followed by glyph rows."""
    tiles = []
    ids = set()
    tile_id, lines = None, []

    for line in text.splitlines() + ['']:
        line = line.strip()

        if not line:
            if tile_id is not None:
                tiles.append(Tile.from_lines(tile_id, lines))
            tile_id, lines = None, []
            continue

        header = TILE_HEADER.match(line)
        if header:
            if tile_id is not None:
                tiles.append(Tile.from_lines(tile_id, lines))
            tile_id, lines = int(header.group(1)), []
            if tile_id in ids:
                raise ValueError(f'Duplicate tile {tile_id}')
            ids.add(tile_id)
        elif tile_id is None:
            raise ValueError(f'Tile rows without header: {line!r}')
        else:
            lines.append(line)

    return tiles


def load_tiles(tiles_file):
    if not os.path.isfile(tiles_file):
        raise ValueError(f'Tiles file {tiles_file} not found')

    with open(tiles_file) as f:
        tiles = parse_tiles(f.read())

    print(f'Loaded {len(tiles)} tiles from {tiles_file}')
    return tiles
