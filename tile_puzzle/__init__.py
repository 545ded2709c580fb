"""Assemble square tiles by their edges and find patterns in the joined image."""

from .assembler import assemble, corner_ids, corner_product, find_corners, read_grid, write_grid
from .compositor import from_grid, write_image
from .orientation import IDENTITY, ORIENTATIONS, Orientation, orient_image, orient_tile
from .patterns import SEA_MONSTER, find_patterns, pattern_mask, roughness
from .solver import solve
from .tile import Tile, load_tiles, parse_tiles

__all__ = [
    "IDENTITY",
    "ORIENTATIONS",
    "Orientation",
    "SEA_MONSTER",
    "Tile",
    "assemble",
    "corner_ids",
    "corner_product",
    "find_corners",
    "find_patterns",
    "from_grid",
    "load_tiles",
    "orient_image",
    "orient_tile",
    "parse_tiles",
    "pattern_mask",
    "read_grid",
    "roughness",
    "solve",
    "write_grid",
    "write_image",
]
