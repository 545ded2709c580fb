import numpy as np
import pytest

from conftest import plant
from tile_puzzle.edges import MARKED, ON
from tile_puzzle.orientation import IDENTITY, Orientation
from tile_puzzle.patterns import SEA_MONSTER, find_patterns, mark_patterns, pattern_mask, roughness

MONSTER_CELLS = 15


@pytest.fixture
def mask():
    return pattern_mask(SEA_MONSTER)


def test_pattern_mask(mask):
    assert mask.shape == (3, 20)
    assert np.count_nonzero(mask) == MONSTER_CELLS
    assert not mask.flags.writeable


def test_pattern_mask_errors():
    with pytest.raises(ValueError):
        pattern_mask(['#  ', '# '])
    with pytest.raises(ValueError):
        pattern_mask(['   '])


def test_mark_patterns(monster_picture, mask):
    marked, count = mark_patterns(monster_picture, mask)

    assert count == 1
    assert np.count_nonzero(marked == MARKED) == MONSTER_CELLS
    assert roughness(marked) == np.count_nonzero(monster_picture) - MONSTER_CELLS


def test_mark_patterns_leaves_input_alone(monster_picture, mask):
    before = monster_picture.copy()
    mark_patterns(monster_picture, mask)

    np.testing.assert_array_equal(monster_picture, before)


def test_marking_is_idempotent(monster_picture, mask):
    marked, count = mark_patterns(monster_picture, mask)
    marked2, count2 = mark_patterns(marked, mask)

    assert count2 == count
    assert roughness(marked2) == roughness(marked)
    np.testing.assert_array_equal(marked2, marked)


def test_two_patterns(mask):
    image = np.zeros((10, 30), dtype=np.int8)
    plant(image, SEA_MONSTER, 0, 0)
    plant(image, SEA_MONSTER, 6, 9)

    marked, count = mark_patterns(image, mask)
    assert count == 2
    assert roughness(marked) == 0


def test_pattern_larger_than_image(mask):
    image = np.ones((2, 30), dtype=np.int8)
    assert mark_patterns(image, mask)[1] == 0


def test_find_in_natural_orientation(monster_picture, mask):
    marked, count, orientation = find_patterns(monster_picture, mask)

    assert count == 1
    assert orientation == IDENTITY


def test_find_rotated_pattern(monster_picture, mask):
    rotated = np.rot90(monster_picture)
    assert mark_patterns(rotated, mask)[1] == 0

    marked, count, orientation = find_patterns(rotated, mask)

    assert count == 1
    assert orientation == Orientation(3, False)
    assert roughness(marked) == np.count_nonzero(monster_picture) - MONSTER_CELLS
    assert np.count_nonzero(marked == MARKED) == MONSTER_CELLS


def test_find_mirrored_pattern(monster_picture, mask):
    marked, count, orientation = find_patterns(np.fliplr(monster_picture), mask)

    assert count == 1
    assert orientation == Orientation(0, True)


def test_find_patterns_default_mask(monster_picture):
    assert find_patterns(np.rot90(monster_picture, 2))[1] == 1


def test_no_pattern_is_not_an_error(mask, capsys):
    image = np.zeros((24, 24), dtype=np.int8)
    image[3, 4] = image[7, 7] = ON

    marked, count, orientation = find_patterns(image, mask, verbose=True)

    assert count == 0
    assert orientation is None
    assert roughness(marked) == 2
    assert capsys.readouterr().out.count('No pattern') == 8
