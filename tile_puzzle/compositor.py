import cv2 as cv
import numpy as np

from .edges import OFF, ON, MARKED, GLYPHS

# BGR colors used for png export
COLORS = {OFF: (96, 48, 0), ON: (230, 200, 120), MARKED: (60, 60, 230)}


def from_grid(grid):
    """Join tile interiors of an assembled grid into one image.

    Tile borders are never copied, the result does not share memory with
    the tiles.
    """
    if not grid or not grid[0]:
        raise ValueError('Cannot compose an empty grid')

    shapes = {tile.image.shape for row in grid for tile in row}
    if len(shapes) > 1:
        raise ValueError(f'Tile interiors have different sizes {sorted(shapes)}')

    return np.block([[tile.image for tile in row] for row in grid]).astype(np.int8)


def count_cells(image, value=ON):
    return int(np.count_nonzero(np.asarray(image) == value))


def image_lines(image):
    return [''.join(GLYPHS[int(v)] for v in row) for row in image]


def write_image(image, image_file, cell_size=8):
    """Save image as png, every cell drawn as a cell_size square."""
    image = np.asarray(image)
    colored = np.zeros(image.shape + (3,), dtype=np.uint8)
    for value, color in COLORS.items():
        colored[image == value] = color

    height, width = image.shape
    colored = cv.resize(colored, (width * cell_size, height * cell_size), interpolation=cv.INTER_NEAREST)

    if not cv.imwrite(image_file, colored):
        raise ValueError(f'Could not write image {image_file}')
    return colored
