import numpy as np
from utils import vec, approx_equal, to_byte8


class Color:

    def __init__(self, red, green, blue):
        """Create an RGB color.  Channels are not clamped; values above 1 are
        legal until the color is exported.
        """
        self.rgb = vec([red, green, blue])

    @classmethod
    def from_array(cls, rgb):
        c = cls.__new__(cls)
        c.rgb = np.array(rgb, np.float64)
        return c

    @property
    def red(self):
        return self.rgb[0]

    @property
    def green(self):
        return self.rgb[1]

    @property
    def blue(self):
        return self.rgb[2]

    def __add__(self, other):
        return Color.from_array(self.rgb + other.rgb)

    def __sub__(self, other):
        return Color.from_array(self.rgb - other.rgb)

    def __mul__(self, other):
        # Color * Color is the component-wise (Hadamard) product
        if isinstance(other, Color):
            return Color.from_array(self.rgb * other.rgb)
        return Color.from_array(self.rgb * other)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def to_rgb8(self):
        """Return the clamped color as three integers in 0-255."""
        return tuple(int(c) for c in to_byte8(self.rgb))

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return approx_equal(self.rgb, other.rgb)

    __hash__ = None

    def __repr__(self):
        return 'Color(%g, %g, %g)' % tuple(self.rgb)


def black():
    return Color(0, 0, 0)

def white():
    return Color(1, 1, 1)
