import numpy as np
from matrix import Matrix

"""
Builders for 4x4 affine transforms.  Transforms compose right to left: to apply
A, then B, then C to a point p, compute C * B * A * p (or chain(A, B, C) * p).
"""


def translation(x, y, z):
    m = Matrix.identity(4)
    m.set(0, 3, x)
    m.set(1, 3, y)
    m.set(2, 3, z)
    return m

def scaling(x, y, z):
    m = Matrix.identity(4)
    m.set(0, 0, x)
    m.set(1, 1, y)
    m.set(2, 2, z)
    return m

def rotation_x(radians):
    """Right-handed rotation about the x axis."""
    c, s = np.cos(radians), np.sin(radians)
    m = Matrix.identity(4)
    m.set(1, 1, c)
    m.set(1, 2, -s)
    m.set(2, 1, s)
    m.set(2, 2, c)
    return m

def rotation_y(radians):
    """Right-handed rotation about the y axis."""
    c, s = np.cos(radians), np.sin(radians)
    m = Matrix.identity(4)
    m.set(0, 0, c)
    m.set(0, 2, s)
    m.set(2, 0, -s)
    m.set(2, 2, c)
    return m

def rotation_z(radians):
    """Right-handed rotation about the z axis."""
    c, s = np.cos(radians), np.sin(radians)
    m = Matrix.identity(4)
    m.set(0, 0, c)
    m.set(0, 1, -s)
    m.set(1, 0, s)
    m.set(1, 1, c)
    return m

def shearing(xy, xz, yx, yz, zx, zy):
    """Shear each axis in proportion to the other two.

    Parameters:
      xy, xz : float -- how much x moves in proportion to y and to z
      yx, yz : float -- how much y moves in proportion to x and to z
      zx, zy : float -- how much z moves in proportion to x and to y
    """
    m = Matrix.identity(4)
    m.set(0, 1, xy)
    m.set(0, 2, xz)
    m.set(1, 0, yx)
    m.set(1, 2, yz)
    m.set(2, 0, zx)
    m.set(2, 1, zy)
    return m

def chain(*transforms):
    """Compose transforms given in the order they should be applied."""
    result = Matrix.identity(4)
    for t in transforms:
        result = t * result
    return result
