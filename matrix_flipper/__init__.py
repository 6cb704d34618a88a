from .matrix import InvalidShapeError, Matrix
from .orientation import flip_image_orientation_patient
from .transformations import flip_horizontal, flip_matrix_2d, flip_vertical

__all__ = [
    "InvalidShapeError",
    "Matrix",
    "flip_horizontal",
    "flip_image_orientation_patient",
    "flip_matrix_2d",
    "flip_vertical",
]
