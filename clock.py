import numpy as np
from canvas import Canvas
from colors import Color
from transformations import chain, rotation_z, translation
from tuples import point


def hour_position(hour, center, radius):
    """World-space position of an hour mark on a clock face in the xy plane.

    Hour 0 (twelve o'clock) is straight up; hours advance clockwise.
    """
    to_hour = chain(rotation_z(-hour * 2 * np.pi / 12), translation(center, center, 0))
    return to_hour * point(0, radius, 0)


def clock_face(size=100, radius=30):
    """Plot the twelve hour marks of a clock on a square canvas."""
    canvas = Canvas(size, size)
    center = size / 2.0
    for hour in range(12):
        p = hour_position(hour, center, radius)
        fade = 1.0 / (hour + 1)
        canvas.write_pixel(int(round(p.x)), canvas.height - int(round(p.y)),
                           Color(1 - fade, 1 - fade, fade))
    return canvas
