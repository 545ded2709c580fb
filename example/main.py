import os
import sys

local = os.path.dirname(os.path.abspath(__file__))
print(f'Current path {local}')

parent_dir = os.path.abspath(os.path.join(local, '..'))
sys.path.append(parent_dir)
from tile_puzzle.assembler import assemble, corner_ids, corner_product, write_grid, read_grid
from tile_puzzle.compositor import from_grid, image_lines, write_image
from tile_puzzle.patterns import SEA_MONSTER, pattern_mask, find_patterns, roughness
from tile_puzzle.plots import plot_grid, plot_image
from tile_puzzle.tile import load_tiles

# Tiles file with "Tile <id>:" blocks, e.g. python example/main.py tiles.txt
tiles_file = sys.argv[1] if len(sys.argv) > 1 else os.path.join(local, 'tiles.txt')
plot = '--plot' in sys.argv

# Step 1. Load tiles
tiles = load_tiles(tiles_file)

# Step 2. Assemble grid and save it (grid.pkl + grid.md)
grid = assemble(tiles, verbose=True)
write_grid(grid, os.path.join(local, 'grid.pkl'))
print(f'Corner tiles {corner_ids(grid)}, product {corner_product(grid)}')

# Read grid back instead of assembling again
# grid = read_grid(os.path.join(local, 'grid.pkl'))

if plot:
    plot_grid(grid)

# Step 3. Compose image
image = from_grid(grid)

# Step 4. Find sea monsters in all orientations
image, patterns, orientation = find_patterns(image, pattern_mask(SEA_MONSTER), verbose=True)
print('\n'.join(image_lines(image)))
print(f'Sea monsters: {patterns}, roughness: {roughness(image)}')

write_image(image, os.path.join(local, 'image.png'))
if plot:
    plot_image(image, title=f'{patterns} sea monster(s)')
