import numpy as np
from colors import Color, white
from geometry import Sphere
from lights import PointLight
from materials import Material
from ray import Scene
from transformations import chain, scaling, shearing, rotation_z, translation
from tuples import point

"""
Scene definitions for the demo renders.  Each function returns a Scene ready
for ray.render_image().
"""


def sphere_silhouette():
    """A red unit sphere with no light: every hit is drawn in flat red."""
    red = Material(color=Color(1, 0, 0))
    return Scene([Sphere(material=red)])


def shaded_sphere():
    """A magenta unit sphere lit from the upper left behind the eye."""
    magenta = Material(color=Color(1, 0.2, 1))
    light = PointLight(point(-10, 10, -10), white())
    return Scene([Sphere(material=magenta)], light)


def transformed_spheres():
    """Three spheres squashed, sheared and moved by their transforms."""
    light = PointLight(point(-10, 10, -10), white())

    flat = Sphere(
        chain(scaling(1.2, 0.4, 1.2), translation(0, -1.2, 0)),
        Material(color=Color(0.3, 0.3, 0.8), specular=0.3),
    )
    leaning = Sphere(
        chain(scaling(0.5, 1, 0.5), shearing(0.6, 0, 0, 0, 0, 0), rotation_z(np.pi / 8), translation(-1.5, 0.4, 0)),
        Material(color=Color(0.7, 0.6, 0.3), shininess=40),
    )
    small = Sphere(
        chain(scaling(0.6, 0.6, 0.6), translation(1.4, 0.5, -0.5)),
        Material(color=Color(0.2, 0.8, 0.3)),
    )
    return Scene([flat, leaning, small], light)


SCENES = {
    'silhouette': sphere_silhouette,
    'shaded': shaded_sphere,
    'spheres': transformed_spheres,
}
