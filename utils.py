import numpy as np
from PIL import Image

# Tolerance shared by Tuple, Color and Matrix equality
EPSILON = 1e-5


def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def normalize(v):
    """Return a unit vector in the direction of the vector v."""
    return v / np.linalg.norm(v)

def approx_equal(a, b):
    """True if every component of a and b differs by less than EPSILON."""
    return bool(np.all(np.abs(np.asarray(a) - np.asarray(b)) < EPSILON))


def to_byte8(img):
    """Clamp linear color values to [0, 1] and scale them to 0-255 integers."""
    return np.clip(np.round(255.0 * np.clip(img, 0, 1)), 0, 255).astype(np.uint8)

def save_image(img, filename):
    """Write an (h, w, 3) float image to any file format Pillow understands."""
    Image.fromarray(to_byte8(img)).save(filename)
