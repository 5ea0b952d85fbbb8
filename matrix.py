import numpy as np
from utils import EPSILON, vec
from tuples import Tuple

"""
Dense row-major matrices used to build and invert affine transforms.  The
determinant is computed by cofactor (Laplace) expansion along the first row,
which is exponential in the size but fine for the 2x2 to 4x4 matrices that
transforms need.
"""


class MatrixDimensionError(ValueError):
    """Raised when matrix shapes do not fit the requested operation."""


class NonInvertibleMatrixError(ValueError):
    """Raised when the inverse of a (near) singular matrix is requested."""


class Matrix:

    def __init__(self, values, rows, columns):
        """Create a matrix from a flat sequence of values.

        Parameters:
          values : (rows*columns,) -- the entries in row-major order
          rows, columns : int -- the shape of the matrix
        """
        values = vec(values).ravel()
        if values.size != rows * columns:
            raise MatrixDimensionError(
                'expected %d values for a %dx%d matrix, got %d' % (rows * columns, rows, columns, values.size))
        self.values = values
        self.rows = rows
        self.columns = columns

    @classmethod
    def from_rows(cls, rows):
        """Create a matrix from a nested list of rows."""
        a = vec(rows)
        if a.ndim != 2:
            raise MatrixDimensionError('rows must form a 2-D array')
        return cls(a.ravel(), a.shape[0], a.shape[1])

    @classmethod
    def identity(cls, n=4):
        return cls(np.eye(n).ravel(), n, n)

    @property
    def shape(self):
        return (self.rows, self.columns)

    def as_array(self):
        """Return a (rows, columns) view of the values."""
        return self.values.reshape(self.rows, self.columns)

    def get(self, i, j):
        return float(self.values[i * self.columns + j])

    def set(self, i, j, value):
        # Only used while a transform is being assembled
        self.values[i * self.columns + j] = value

    def __getitem__(self, index):
        i, j = index
        return self.get(i, j)

    def is_square(self):
        return self.rows == self.columns

    def copy(self):
        return Matrix(self.values.copy(), self.rows, self.columns)

    def multiply(self, other):
        """Multiply by another matrix or by a Tuple.

        Parameters:
          other : Matrix or Tuple -- the right-hand operand
        Return:
          Matrix, or Tuple when other is a Tuple
        """
        if isinstance(other, Tuple):
            if self.columns != 4:
                raise MatrixDimensionError('a %dx%d matrix cannot multiply a 4-tuple' % self.shape)
            if self.rows != 4:
                raise MatrixDimensionError('only 4x4 matrices map a tuple to a tuple')
            coords = self.as_array() @ other.coords
            # snap rounding noise in w from an inverse; any other w is left for callers to reject
            w = np.round(coords[3])
            if abs(coords[3] - w) < EPSILON:
                coords[3] = w
            return Tuple.from_array(coords)
        if self.columns != other.rows:
            raise MatrixDimensionError(
                'cannot multiply a %dx%d matrix by a %dx%d matrix' % (self.shape + other.shape))
        product = self.as_array() @ other.as_array()
        return Matrix(product.ravel(), self.rows, other.columns)

    def __mul__(self, other):
        return self.multiply(other)

    def __matmul__(self, other):
        return self.multiply(other)

    def transpose(self):
        return Matrix(self.as_array().T.ravel(), self.columns, self.rows)

    def submatrix(self, i, j):
        """Return a copy of this matrix with row i and column j removed."""
        a = np.delete(np.delete(self.as_array(), i, axis=0), j, axis=1)
        return Matrix(a.ravel(), self.rows - 1, self.columns - 1)

    def minor(self, i, j):
        return self.submatrix(i, j).determinant()

    def cofactor(self, i, j):
        minor = self.minor(i, j)
        return -minor if (i + j) % 2 else minor

    def determinant(self):
        if not self.is_square():
            raise MatrixDimensionError('determinant of a non-square %dx%d matrix' % self.shape)
        if self.rows == 1:
            return float(self.values[0])
        if self.rows == 2:
            a, b, c, d = self.values
            return float(a * d - b * c)
        return sum(self.get(0, j) * self.cofactor(0, j) for j in range(self.columns))

    def is_invertible(self):
        return self.is_square() and abs(self.determinant()) > EPSILON

    def inverse(self):
        """Return the inverse, built from the cofactors in a single pass.

        Writing cofactor(i, j) / det into position (j, i) transposes the
        cofactor matrix while dividing, so no separate adjugate is formed.
        """
        det = self.determinant()
        if abs(det) <= EPSILON:
            raise NonInvertibleMatrixError('matrix with determinant %g is not invertible' % det)
        result = Matrix(np.zeros(self.rows * self.columns), self.rows, self.columns)
        for i in range(self.rows):
            for j in range(self.columns):
                result.set(j, i, self.cofactor(i, j) / det)
        return result

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self.values - other.values) < EPSILON))

    __hash__ = None

    def __repr__(self):
        return 'Matrix(%r, %d, %d)' % (self.values.tolist(), self.rows, self.columns)
