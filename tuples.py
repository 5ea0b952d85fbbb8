import numpy as np
from utils import EPSILON, vec, normalize

"""
Homogeneous 4-component tuples.  A tuple with w=1 is a point and one with w=0 is
a vector; the arithmetic keeps that meaning (point - point is a vector, point +
vector is a point).  Adding two points gives w=2, which is the caller's mistake
and is not checked here.
"""


class Tuple:

    def __init__(self, x, y, z, w):
        """Create a tuple from its components.

        Parameters:
          x, y, z : float -- the spatial components
          w : float -- 1 for a point, 0 for a vector
        """
        self.coords = vec([x, y, z, w])

    @classmethod
    def from_array(cls, coords):
        """Wrap a length-4 array without copying component by component."""
        t = cls.__new__(cls)
        t.coords = np.array(coords, np.float64)
        return t

    @property
    def x(self):
        return self.coords[0]

    @property
    def y(self):
        return self.coords[1]

    @property
    def z(self):
        return self.coords[2]

    @property
    def w(self):
        return self.coords[3]

    def is_point(self):
        return self.w == 1

    def is_vector(self):
        return self.w == 0

    def with_w(self, w):
        """Return a copy of this tuple with w replaced."""
        coords = self.coords.copy()
        coords[3] = w
        return Tuple.from_array(coords)

    def __add__(self, other):
        return Tuple.from_array(self.coords + other.coords)

    def __sub__(self, other):
        return Tuple.from_array(self.coords - other.coords)

    def __neg__(self):
        return Tuple.from_array(-self.coords)

    def __mul__(self, scalar):
        return Tuple.from_array(self.coords * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Tuple.from_array(self.coords / scalar)

    def magnitude(self):
        """Length of the x, y, z part; w does not contribute."""
        return float(np.linalg.norm(self.coords[:3]))

    def normalize(self):
        """Return a unit-length copy; a zero tuple has no direction."""
        if self.magnitude() == 0:
            raise ValueError('cannot normalize a zero-length tuple')
        coords = self.coords.copy()
        coords[:3] = normalize(coords[:3])
        return Tuple.from_array(coords)

    def dot(self, other):
        return float(np.dot(self.coords, other.coords))

    def cross(self, other):
        """Cross product of two vectors (w is ignored and the result is a vector)."""
        return vector(*np.cross(self.coords[:3], other.coords[:3]))

    def reflect(self, normal):
        """Reflect this vector about the given unit normal."""
        return self - normal * 2 * self.dot(normal)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.w == other.w and bool(np.all(np.abs(self.coords[:3] - other.coords[:3]) < EPSILON))

    __hash__ = None

    def __repr__(self):
        kind = 'point' if self.is_point() else 'vector' if self.is_vector() else 'Tuple'
        if kind == 'Tuple':
            return 'Tuple(%g, %g, %g, %g)' % tuple(self.coords)
        return '%s(%g, %g, %g)' % ((kind,) + tuple(self.coords[:3]))


def point(x, y, z):
    """Create a point (w=1)."""
    return Tuple(x, y, z, 1)

def vector(x, y, z):
    """Create a vector (w=0)."""
    return Tuple(x, y, z, 0)

def origin():
    return point(0, 0, 0)
