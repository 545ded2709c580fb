import math

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from .edges import OFF, MARKED

CMAP = ListedColormap(['navy', 'lightblue', 'red'])


def _clear_ticks(ax):
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xticklabels([])
    ax.set_yticklabels([])


def plot_grid(grid, show=True):
    """Plot the interior of every tile in its grid position."""
    m = len(grid)
    n = max(len(row) for row in grid)
    fig, axs = plt.subplots(m, n, squeeze=False, figsize=(1.5 * n, 1.5 * m))

    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            axs[r, c].imshow(tile.image, cmap=CMAP, vmin=OFF, vmax=MARKED)
            axs[r, c].set_title(f'{tile.id} {tile.orientation.code}', pad=0, fontsize=8)
            _clear_ticks(axs[r, c])

    fig.suptitle(f'Grid {m}x{n}')
    if show:
        plt.show()
    return fig


def plot_image(image, title='Image', show=True):
    height, width = image.shape
    size = max(4, math.ceil(max(height, width) / 12))
    fig, ax = plt.subplots(figsize=(size, size))

    ax.imshow(image, cmap=CMAP, vmin=OFF, vmax=MARKED)
    ax.set_title(title)
    _clear_ticks(ax)

    if show:
        plt.show()
    return fig
