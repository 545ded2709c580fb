"""
Solve a tile puzzle end to end.

Usage::

    python -m tile_puzzle.solver tiles.txt --grid-file grid.pkl --image-file image.png
"""

import argparse

from .assembler import assemble, corner_ids, corner_product, write_grid
from .compositor import from_grid, count_cells, image_lines, write_image
from .patterns import SEA_MONSTER, pattern_mask, find_patterns, roughness
from .plots import plot_grid, plot_image
from .tile import load_tiles


def solve(tiles, pattern=SEA_MONSTER, verbose=True, plot=False):
    """Assemble tiles, compose the image and mark the pattern in it.

    Args:
        tiles (list): tiles in any order and orientation
        pattern (tuple, optional): pattern rows, '#' cells must be on. Defaults to SEA_MONSTER.
        verbose (bool, optional): print progress. Defaults to True.
        plot (bool, optional): plot grid and final image. Defaults to False.

    Returns:
        dict: grid, corner_ids, corner_product, image, patterns, orientation, roughness
    """
    mask = pattern_mask(pattern)

    grid = assemble(tiles, verbose=verbose)
    corners = corner_ids(grid)
    product = corner_product(grid)
    if verbose:
        print(f'Corner tiles {corners}, product {product}')

    image = from_grid(grid)
    if verbose:
        print(f'Image {image.shape[0]}x{image.shape[1]} with {count_cells(image)} on cells')

    image, patterns, orientation = find_patterns(image, mask, verbose=verbose)
    rough = roughness(image)
    if verbose:
        print(f'Patterns found: {patterns}, roughness {rough}')

    if plot:
        plot_grid(grid)
        plot_image(image, title=f'{patterns} pattern(s), roughness {rough}')

    return {'grid': grid, 'corner_ids': corners, 'corner_product': product,
            'image': image, 'patterns': patterns, 'orientation': orientation, 'roughness': rough}


def main(argv=None):
    parser = argparse.ArgumentParser(description='Assemble tiles and find patterns in the image.')
    parser.add_argument('tiles_file', help='file with "Tile <id>:" blocks')
    parser.add_argument('--grid-file', help='pickle the grid here (and its .md table next to it)')
    parser.add_argument('--image-file', help='save the final image as png')
    parser.add_argument('--show-image', action='store_true', help='print the final image')
    parser.add_argument('--plot', action='store_true', help='plot grid and image')
    parser.add_argument('--quiet', action='store_true', help='only print the results')
    args = parser.parse_args(argv)

    tiles = load_tiles(args.tiles_file)
    result = solve(tiles, verbose=not args.quiet, plot=args.plot)

    if args.grid_file:
        md_file = write_grid(result['grid'], args.grid_file)
        print(f'Grid written to {args.grid_file} and {md_file}')

    if args.image_file:
        write_image(result['image'], args.image_file)
        print(f'Image written to {args.image_file}')

    if args.show_image:
        print('\n'.join(image_lines(result['image'])))

    print(f'Product of corner tile ids: {result["corner_product"]}')
    print(f'Roughness: {result["roughness"]}')
    return result


if __name__ == "__main__":
    main()
