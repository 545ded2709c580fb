import math
import os
import pickle
from collections import Counter

import pandas as pd

from .edges import TOP, LEFT, BOTTOM, RIGHT, MIRRORED, SIDES
from .orientation import rotate90, mirror_horizontal, mirror_vertical


def edge_counts(tiles):
    """How many times every edge id occurs in the pool (8 ids per tile)."""
    return dict(Counter(edge for tile in tiles for edge in tile.edges))


def unique_edges(tile, counts):
    return [edge for edge in tile.edges if counts[edge] == 1]


def find_corners(tiles):
    """Tiles with two unmatched sides.

    An unmatched side contributes both its normal and mirrored id, so a
    corner has exactly 4 ids that occur once in the whole pool.
    """
    counts = edge_counts(tiles)
    corners = [tile for tile in tiles if len(unique_edges(tile, counts)) == 4]

    if len(corners) != 4:
        raise ValueError(f'Expected 4 corner tiles, found {len(corners)} {[tile.id for tile in corners]}')

    return corners


def align_top_left(tile, edges):
    """Rotate a corner tile so its unmatched sides face top and left."""
    edges = set(edges)
    sides = tuple(tile.edges[side] in edges for side in (TOP, LEFT, BOTTOM, RIGHT))

    #        top    left   bottom right
    turns = {(True,  True,  False, False): 0,
             (True,  False, False, True):  1,
             (False, False, True,  True):  2,
             (False, True,  True,  False): 3}

    if sides not in turns:
        unmatched = [SIDES[side] for side, unique in enumerate(sides) if unique]
        raise ValueError(f'Tile {tile.id} is not a corner, unmatched sides {unmatched}')

    return rotate90(tile, turns[sides])


def align_left(tile, edge):
    """Orient tile so that its left edge reads as edge."""
    side = tile.edges.index(edge) % MIRRORED
    turns = {TOP: 1, LEFT: 0, BOTTOM: 3, RIGHT: 2}
    tile = rotate90(tile, turns[side])

    if tile.left != edge:
        tile = mirror_vertical(tile)
    return tile


def align_top(tile, edge):
    """Orient tile so that its top edge reads as edge."""
    side = tile.edges.index(edge) % MIRRORED
    turns = {TOP: 0, LEFT: 3, BOTTOM: 2, RIGHT: 1}
    tile = rotate90(tile, turns[side])

    if tile.top != edge:
        tile = mirror_horizontal(tile)
    return tile


def _candidates(pool, edge):
    return [i for i, tile in enumerate(pool) if edge in tile.edges]


def find_top_left_tile(pool):
    """Take the first corner of the pool and orient it as the top left tile.

    Returns:
        tuple: (oriented tile, remaining pool)
    """
    counts = edge_counts(pool)
    corner = find_corners(pool)[0]

    tile = align_top_left(corner, unique_edges(corner, counts))
    return tile, [t for t in pool if t is not corner]


def find_right_tile(pool, row):
    """Tile matching the right edge of the last tile in row.

    Returns:
        tuple: (tile aligned to the left, remaining pool), or (None, pool)
            when the row is complete
    """
    edge = row[-1].right
    candidates = _candidates(pool, edge)

    if not candidates:
        return None, pool

    if len(candidates) > 1:
        raise ValueError(f'Right edge {edge} of tile {row[-1].id} matches {len(candidates)} tiles '
                         f'{[pool[i].id for i in candidates]}')

    i = candidates[0]
    return align_left(pool[i], edge), pool[:i] + pool[i + 1:]


def find_bottom_tile(pool, grid):
    """Tile matching the bottom edge of the first tile of the last row."""
    edge = grid[-1][0].bottom
    candidates = _candidates(pool, edge)

    if not candidates:
        raise ValueError(f'No tile matches bottom edge {edge} of tile {grid[-1][0].id} '
                         f'({len(pool)} tiles left)')

    if len(candidates) > 1:
        raise ValueError(f'Bottom edge {edge} of tile {grid[-1][0].id} matches {len(candidates)} tiles '
                         f'{[pool[i].id for i in candidates]}')

    i = candidates[0]
    return align_top(pool[i], edge), pool[:i] + pool[i + 1:]


def check_adjacency(grid):
    """Raise if any two neighbouring tiles do not share their edge."""
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            if c > 0 and row[c - 1].right != tile.left:
                raise ValueError(f'Tile {tile.id} at ({r+1},{c+1}) does not match its left neighbour '
                                 f'{row[c - 1].id}')

            if r > 0 and grid[r - 1][c].bottom != tile.top:
                raise ValueError(f'Tile {tile.id} at ({r+1},{c+1}) does not match its top neighbour '
                                 f'{grid[r - 1][c].id}')


def assemble(tiles, verbose=False):
    """Place all tiles in a square grid by matching edges.

    The grid is grown row by row from a corner, every next tile must be the
    only one carrying the needed edge. There is no backtracking: ambiguous or
    incomplete puzzles raise ValueError.

    Args:
        tiles (list): tiles in any orientation
        verbose (bool, optional): print placement progress. Defaults to False.

    Returns:
        list: rows of oriented tiles
    """
    pool = list(tiles)
    if not pool:
        raise ValueError('No tiles to assemble')

    shapes = {tile.image.shape for tile in pool}
    if len(shapes) > 1:
        raise ValueError(f'Tiles have different sizes {sorted(shapes)}')

    ids = [tile.id for tile in pool]
    if len(set(ids)) != len(ids):
        raise ValueError('Tile ids are not unique')

    grid = []
    while pool:
        if not grid:
            tile, pool = find_top_left_tile(pool)
        else:
            tile, pool = find_bottom_tile(pool, grid)
        row = [tile]

        if verbose:
            print(f'Start row {len(grid)+1} with tile {tile.id} ({tile.orientation.code})')

        while True:
            tile, pool = find_right_tile(pool, row)
            if tile is None:
                break
            row.append(tile)

        grid.append(row)
        if verbose:
            print(f'Row {len(grid)}: {[tile.id for tile in row]}, {len(pool)} tiles left')

    side = len(grid)
    if side * side != len(tiles) or any(len(row) != side for row in grid):
        raise ValueError(f'Grid of {len(tiles)} tiles is not square, row lengths {[len(row) for row in grid]}')

    check_adjacency(grid)
    return grid


def corner_ids(grid):
    return [grid[0][0].id, grid[0][-1].id, grid[-1][0].id, grid[-1][-1].id]


def corner_product(grid):
    return math.prod(corner_ids(grid))


def grid_frame(grid):
    """Table of ``<tile id>.<orientation>`` with rows and cols starting from 1."""
    table = [[f'{tile.id}.{tile.orientation.code}' for tile in row] for row in grid]
    return pd.DataFrame(table, index=range(1, len(grid) + 1), columns=range(1, len(grid[0]) + 1))


def write_grid(grid, grid_file='grid.pkl'):
    """Pickle the grid and write its table in .md format next to it."""
    with open(grid_file, 'wb') as f:
        pickle.dump(grid, f)

    md_file = os.path.splitext(grid_file)[0] + '.md'
    with open(md_file, 'w') as f:
        f.write(grid_frame(grid).to_markdown(index=True))

    return md_file


def read_grid(grid_file='grid.pkl'):
    if not os.path.isfile(grid_file):
        raise ValueError(f'Grid file {grid_file} not found')

    with open(grid_file, 'rb') as f:
        grid = pickle.load(f)
    return grid
