import numpy as np

# Pixel states
OFF, ON, MARKED = 0, 1, 2
GLYPHS = {OFF: '.', ON: '#', MARKED: 'O'}
STATES = {'.': OFF, '#': ON, 'O': MARKED}

# Edge ids of a tile: sides in normal reading direction, then MIRRORED + side
TOP, LEFT, BOTTOM, RIGHT = 0, 1, 2, 3
MIRRORED = 4
SIDES = ('top', 'left', 'bottom', 'right')


def encode_edge(pixels, reverse=False):
    """Encode border pixels as a binary number, most significant bit first.

    Any state other than OFF counts as a set bit.
    """
    bits = np.asarray(pixels) != OFF
    if reverse:
        bits = bits[::-1]

    code = 0
    for bit in bits:
        code = (code << 1) | int(bit)
    return code


def border_edges(pixels):
    """All 8 edge ids of a square pixel grid.

    Top and bottom are read left to right, left and right top to bottom.
    The second half holds the same borders read in the opposite direction.
    """
    pixels = np.asarray(pixels)
    borders = [pixels[0, :], pixels[:, 0], pixels[-1, :], pixels[:, -1]]

    edges = [encode_edge(border) for border in borders]
    edges += [encode_edge(border, reverse=True) for border in borders]
    return tuple(edges)
