"""Rotations and mirrorings of tiles and images.

The 8 orientations form the dihedral group of the square. An orientation
is stored as "mirror left-right (if flipped), then rotate 90 degrees
counter-clockwise `rotation` times", which is exactly what numpy's
``fliplr`` and ``rot90`` do.

Tile transforms never mutate: they return a new tile whose cached edge ids
and interior image went through the same transform.
"""

from dataclasses import replace
from typing import NamedTuple

import numpy as np

from .edges import TOP, LEFT, BOTTOM, RIGHT, MIRRORED


class Orientation(NamedTuple):
    rotation: int = 0
    flipped: bool = False

    def compose(self, other):
        """Orientation of applying self first, then other."""
        sign = -1 if other.flipped else 1
        return Orientation((other.rotation + sign * self.rotation) % 4, self.flipped != other.flipped)

    def inverse(self):
        # every mirrored orientation is its own inverse
        if self.flipped:
            return self
        return Orientation(-self.rotation % 4, False)

    @property
    def code(self):
        return f'r{self.rotation}' + ('m' if self.flipped else '')


IDENTITY = Orientation(0, False)

# Search order: the 4 rotations, then the 4 rotations of the mirrored image
ORIENTATIONS = [Orientation(rotation, flipped) for flipped in (False, True) for rotation in range(4)]

# New edge tuple is old_edges[i] for i in the table
ROTATE_90 = (
    RIGHT,               # top
    MIRRORED + TOP,      # left
    LEFT,                # bottom
    MIRRORED + BOTTOM,   # right
    MIRRORED + RIGHT,    # top (mirrored)
    TOP,                 # left (mirrored)
    MIRRORED + LEFT,     # bottom (mirrored)
    BOTTOM,              # right (mirrored)
)

MIRROR_HORIZONTAL = (
    MIRRORED + TOP,
    RIGHT,
    MIRRORED + BOTTOM,
    LEFT,
    TOP,
    MIRRORED + RIGHT,
    BOTTOM,
    MIRRORED + LEFT,
)

MIRROR_VERTICAL = (
    BOTTOM,
    MIRRORED + LEFT,
    TOP,
    MIRRORED + RIGHT,
    MIRRORED + BOTTOM,
    LEFT,
    MIRRORED + TOP,
    RIGHT,
)


def _permute(edges, table):
    return tuple(edges[i] for i in table)


def orient_image(image, orientation):
    """Copy of a 2D buffer in the given orientation."""
    image = np.asarray(image)
    if orientation.flipped:
        image = np.fliplr(image)
    return np.rot90(image, orientation.rotation).copy()


def rotate90(tile, amount=1):
    """Rotate a tile counter-clockwise by amount quarter turns."""
    amount %= 4
    edges = tile.edges
    for _ in range(amount):
        edges = _permute(edges, ROTATE_90)

    return replace(tile,
                   edges=edges,
                   image=np.rot90(tile.image, amount).copy(),
                   orientation=tile.orientation.compose(Orientation(amount, False)))


def mirror_horizontal(tile):
    """Mirror left-right: left and right sides swap."""
    return replace(tile,
                   edges=_permute(tile.edges, MIRROR_HORIZONTAL),
                   image=np.fliplr(tile.image).copy(),
                   orientation=tile.orientation.compose(Orientation(0, True)))


def mirror_vertical(tile):
    """Mirror top-bottom: top and bottom sides swap."""
    # flipud == fliplr followed by a half turn
    return replace(tile,
                   edges=_permute(tile.edges, MIRROR_VERTICAL),
                   image=np.flipud(tile.image).copy(),
                   orientation=tile.orientation.compose(Orientation(2, True)))


def orient_tile(tile, orientation):
    if orientation.flipped:
        tile = mirror_horizontal(tile)
    return rotate90(tile, orientation.rotation)
