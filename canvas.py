import logging
import os
import textwrap

import numpy as np
from colors import Color
from utils import to_byte8, save_image

logger = logging.getLogger(__name__)

PPM_LINE_LENGTH = 70


class Canvas:

    def __init__(self, width, height):
        """Create a black canvas of the given size in pixels."""
        if width < 1 or height < 1:
            raise ValueError('canvas size must be positive, got %dx%d' % (width, height))
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), np.float64)

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x, y, color):
        """Store a color at (x, y).  Writes outside the canvas are dropped."""
        if not self.contains(x, y):
            return
        self.pixels[y, x] = color.rgb

    def pixel_at(self, x, y):
        if not self.contains(x, y):
            raise IndexError('pixel (%d, %d) is outside a %dx%d canvas' % (x, y, self.width, self.height))
        return Color.from_array(self.pixels[y, x])

    def to_ppm(self):
        """Serialize to plain-text PPM (P3), wrapping lines at 70 characters."""
        lines = ['P3', '%d %d' % (self.width, self.height), '255']
        img8 = to_byte8(self.pixels)
        for row in img8:
            lines.extend(textwrap.wrap(' '.join(str(v) for v in row.ravel()), PPM_LINE_LENGTH))
        return '\n'.join(lines) + '\n'

    def save(self, filename):
        """Write the canvas to a file; .ppm is written as text, anything else through Pillow."""
        ext = os.path.splitext(filename)[1].lower()
        if ext == '.ppm':
            with open(filename, 'w') as f:
                f.write(self.to_ppm())
        else:
            save_image(self.pixels, filename)
        logger.info('wrote %dx%d canvas to %s', self.width, self.height, filename)
