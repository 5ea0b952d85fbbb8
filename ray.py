import logging

from canvas import Canvas
from colors import black
from geometry import Intersections, no_hit
from lights import lighting
from tuples import point

"""
Core implementation of the ray tracer: rays, the transform-aware intersection
protocol, and a small scene/render loop that shades one ray per pixel.
"""

logger = logging.getLogger(__name__)

# Eye and "wall" the render loop projects onto
RAY_ORIGIN = (0.0, 0.0, -5.0)
WALL_Z = 10.0
WALL_SIZE = 7.0


class RayConstructionError(ValueError):
    """Raised when a ray's origin is not a point or its direction is not a vector."""


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        Parameters:
          origin : Tuple -- the start point of the ray, a point (w=1)
          direction : Tuple -- the direction of the ray, a vector (w=0), not necessarily normalized
        """
        if not origin.is_point():
            raise RayConstructionError('ray origin must be a point, got %r' % (origin,))
        if not direction.is_vector():
            raise RayConstructionError('ray direction must be a vector, got %r' % (direction,))
        self.origin = origin
        self.direction = direction

    def position(self, t):
        """Return the point at parameter t along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix):
        """Return this ray with origin and direction multiplied by matrix."""
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self):
        return 'Ray(%r, %r)' % (self.origin, self.direction)


def intersect(ray, primitive):
    """Intersect a world-space ray with a primitive.

    The ray is mapped into the primitive's object space by the inverse of its
    transform, so the primitive only ever sees its canonical shape.  A singular
    transform raises NonInvertibleMatrixError.
    """
    inverse = getattr(primitive, 'inverse_transform', None)
    if inverse is None:
        inverse = primitive.get_transform().inverse()
    return primitive.ray_intersections(ray.transform(inverse))


class Scene:

    def __init__(self, objects, light=None, background=None):
        """Create a scene containing the given objects.

        Parameters:
          objects : list of Intersectable -- the objects in the scene
          light : PointLight -- the single light; None renders flat material colors
          background : Color -- color of rays that hit nothing (defaults to black)
        """
        self.objects = list(objects)
        self.light = light
        self.background = background if background is not None else black()

    def intersect(self, ray):
        """All intersections of the ray with every object, in object order."""
        xs = Intersections()
        for obj in self.objects:
            xs = xs + intersect(ray, obj)
        return xs

    def color_at(self, ray):
        """Shade the nearest visible surface along the ray."""
        hit = self.intersect(ray).get_hit()
        if hit is no_hit:
            return self.background
        material = hit.object.get_material()
        if self.light is None:
            return material.color
        surface_point = ray.position(hit.time)
        normal = hit.object.normal_at(surface_point)
        eye = -ray.direction.normalize()
        return lighting(material, self.light, surface_point, eye, normal)


def render_image(scene, canvas_size, ray_origin=None, wall_z=WALL_Z, wall_size=WALL_SIZE):
    """
    Render a square image by casting one ray per pixel from ray_origin
    through a wall of side wall_size centered on the z axis at z=wall_z.
    """
    if ray_origin is None:
        ray_origin = point(*RAY_ORIGIN)
    canvas = Canvas(canvas_size, canvas_size)
    pixel_size = wall_size / canvas_size
    half = wall_size / 2.0

    logger.info('rendering %dx%d image of %d objects', canvas_size, canvas_size, len(scene.objects))
    for y in range(canvas.height):
        logger.debug('rendering row %d/%d', y + 1, canvas.height)
        world_y = half - pixel_size * y
        for x in range(canvas.width):
            world_x = -half + pixel_size * x
            target = point(world_x, world_y, wall_z)
            ray = Ray(ray_origin, (target - ray_origin).normalize())
            canvas.write_pixel(x, y, scene.color_at(ray))
    return canvas
