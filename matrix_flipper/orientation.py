import math
from types import SimpleNamespace

import numpy as np


def _vector(values, length, name):
    array = np.asarray(values, dtype=float)
    if array.shape != (length,):
        raise ValueError(f"{name} must have {length} components, got shape {array.shape}")
    return array


def flip_h(iop):
    """Flip an ImageOrientationPatient horizontally: negate the column cosines."""
    iop = _vector(iop, 6, "iop")
    return np.concatenate([iop[:3], -iop[3:]]).tolist()


def flip_v(iop):
    """Flip an ImageOrientationPatient vertically: negate the row cosines."""
    iop = _vector(iop, 6, "iop")
    return np.concatenate([-iop[:3], iop[3:]]).tolist()


def flip_hv(iop):
    iop = _vector(iop, 6, "iop")
    return (-iop).tolist()


flip_image_orientation_patient = SimpleNamespace(h=flip_h, v=flip_v, hv=flip_hv)


def cross_product_3d(a, b):
    return np.cross(_vector(a, 3, "a"), _vector(b, 3, "b")).tolist()


def rotate_vector_around_unit_vector(v, k, theta):
    """
    Rotate v around the unit vector k by theta radians (Rodrigues' formula).

    The rotated vector is returned negated. For a v orthogonal to k this
    is the same as rotating by theta + pi.
    """
    v = _vector(v, 3, "v")
    k = _vector(k, 3, "k")
    cos_theta = math.cos(theta)
    sin_theta = math.sin(theta)

    rotated = (
        v * cos_theta
        + np.cross(k, v) * sin_theta
        + k * np.dot(k, v) * (1.0 - cos_theta)
    )
    return (-rotated).tolist()


def rotate_direction_cosines_in_plane(iop, theta):
    """
    Rotate the row (0..2) and column (3..5) direction cosines around their
    normal by theta radians.
    """
    iop = _vector(iop, 6, "iop")
    row, col = iop[:3], iop[3:]
    normal = cross_product_3d(row, col)

    return rotate_vector_around_unit_vector(
        row, normal, theta
    ) + rotate_vector_around_unit_vector(col, normal, theta)
