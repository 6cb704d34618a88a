from types import SimpleNamespace

import numpy as np

from .matrix import Matrix


def flip_horizontal(matrix):
    """Reverse the column order of every row into a new matrix."""
    return Matrix.from_array(np.fliplr(matrix.to_array()))


flip_horizontal.is_identity = False


def flip_vertical(matrix):
    """Reverse the row order of every column into a new matrix."""
    return Matrix.from_array(np.flipud(matrix.to_array()))


flip_vertical.is_identity = False


flip_matrix_2d = SimpleNamespace(h=flip_horizontal, v=flip_vertical)
