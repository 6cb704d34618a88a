import operator

import numpy as np


class InvalidShapeError(ValueError):
    pass


def parse_shape(shape):
    """Return ``shape`` as a ``(rows, cols)`` pair of non-negative ints."""
    try:
        rows, cols = shape
        if isinstance(rows, bool) or isinstance(cols, bool):
            raise TypeError("bool is not a dimension")
        rows, cols = operator.index(rows), operator.index(cols)
    except (TypeError, ValueError):
        raise InvalidShapeError(f"shape must be (rows, cols) integers, got {shape!r}") from None
    if rows < 0 or cols < 0:
        raise InvalidShapeError(f"shape must be non-negative, got {(rows, cols)}")
    return rows, cols


class Matrix:
    """
    Dense 2D grid of unsigned 8-bit cells.

    The cells live in a flat, row-major uint8 buffer; ``shape`` gives the
    ``(rows, cols)`` layout over it. Byte buffers (bytes, bytearray,
    memoryview) are wrapped without copying, anything else is converted
    to a new uint8 array.
    """

    def __init__(self, buffer, shape):
        rows, cols = parse_shape(shape)

        if isinstance(buffer, (bytes, bytearray, memoryview)):
            data = np.frombuffer(buffer, dtype=np.uint8)
        else:
            data = np.asarray(buffer, dtype=np.uint8)
        if data.ndim != 1:
            raise InvalidShapeError(f"buffer must be flat, got {data.ndim} dimensions")
        if data.size != rows * cols:
            raise InvalidShapeError(
                f"buffer holds {data.size} values, shape {(rows, cols)} needs {rows * cols}"
            )

        self._data = data
        self._shape = (rows, cols)

    @classmethod
    def zeros(cls, shape):
        rows, cols = parse_shape(shape)
        return cls(np.zeros(rows * cols, dtype=np.uint8), (rows, cols))

    @classmethod
    def from_array(cls, array):
        # Always copies, so the new matrix never aliases the caller's data
        grid = np.array(array, dtype=np.uint8, order="C")
        if grid.ndim != 2:
            raise InvalidShapeError(f"expected a 2D array, got {grid.ndim} dimensions")
        return cls(grid.reshape(-1), grid.shape)

    @property
    def shape(self):
        return self._shape

    @property
    def buffer(self):
        return self._data

    def get(self, row, col):
        return int(self.to_array()[row, col])

    def set(self, row, col, value):
        self.to_array()[row, col] = value

    def to_array(self):
        """2D view over the buffer; writes through to this matrix."""
        return self._data.reshape(self._shape)

    def tolist(self):
        return self.to_array().tolist()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self._data.tolist()}, shape={self._shape})"
