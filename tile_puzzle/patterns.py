import numpy as np
from scipy.signal import correlate2d

from .edges import OFF, ON, MARKED
from .orientation import ORIENTATIONS, orient_image

SEA_MONSTER = (
    '                  # ',
    '#    ##    ##    ###',
    ' #  #  #  #  #  #   ',
)


def pattern_mask(lines=SEA_MONSTER):
    """Boolean mask of the '#' cells of a pattern, other cells are ignored."""
    widths = {len(line) for line in lines}
    if len(widths) != 1:
        raise ValueError(f'Pattern rows have unequal length {sorted(widths)}')

    mask = np.array([[glyph == '#' for glyph in line] for line in lines], dtype=bool)
    if not mask.any():
        raise ValueError('Pattern has no cells to match')

    mask.setflags(write=False)
    return mask


def mark_patterns(image, mask):
    """Mark every occurrence of mask in a copy of image.

    A cell that is already marked still counts as on, so overlapping
    occurrences and repeated scans are found as well.

    Returns:
        tuple: (marked image, number of occurrences)
    """
    image = np.array(image, dtype=np.int8)
    mask = np.asarray(mask, dtype=bool)

    if mask.shape[0] > image.shape[0] or mask.shape[1] > image.shape[1]:
        return image, 0

    lit = (image != OFF).astype(np.int32)
    hits = correlate2d(lit, mask.astype(np.int32), mode='valid')
    offsets = np.argwhere(hits == np.count_nonzero(mask))

    ys, xs = np.nonzero(mask)
    for y, x in offsets:
        image[ys + y, xs + x] = MARKED

    return image, len(offsets)


def find_patterns(image, mask=None, verbose=False):
    """Search the pattern in all 8 orientations of image.

    The search stops at the first orientation with any occurrence, the image
    is assumed to have a single orientation where the pattern shows up.

    Returns:
        tuple: (marked image in the matching orientation, number of
            occurrences, orientation), or (copy of image, 0, None) when the
            pattern is not found
    """
    if mask is None:
        mask = pattern_mask(SEA_MONSTER)

    for orientation in ORIENTATIONS:
        marked, count = mark_patterns(orient_image(image, orientation), mask)
        if count:
            if verbose:
                print(f'Found {count} pattern(s) in orientation {orientation.code}')
            return marked, count, orientation

        if verbose:
            print(f'No pattern in orientation {orientation.code}')

    return np.array(image, dtype=np.int8), 0, None


def roughness(image):
    """Number of on cells not covered by a pattern."""
    return int(np.count_nonzero(np.asarray(image) == ON))
