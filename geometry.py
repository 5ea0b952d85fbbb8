import numpy as np
from tuples import origin
from matrix import Matrix
from materials import Material


class Intersection:

    def __init__(self, time, object):
        """Record that a ray meets an object.

        Parameters:
          time : float -- the t value of the intersection along the ray
          object : Intersectable -- the object that was hit (the object itself, not a copy)
        """
        self.time = time
        self.object = object

    def __repr__(self):
        return 'Intersection(%g, %r)' % (self.time, self.object)

# Value to represent absence of a visible intersection
no_hit = Intersection(np.inf, None)


class Intersections:
    """Intersections in the order they were found.  Never sorted."""

    def __init__(self, items=()):
        self.items = list(items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __iter__(self):
        return iter(self.items)

    def __add__(self, other):
        return Intersections(self.items + list(other))

    def get_hit(self):
        """Return the intersection with the smallest non-negative time, or no_hit.

        Intersections behind the ray origin (negative time) are never the hit,
        even when they are numerically the smallest.
        """
        hit = no_hit
        for i in self.items:
            if i.time >= 0 and i.time < hit.time:
                hit = i
        return hit

    def __repr__(self):
        return 'Intersections(%r)' % (self.items,)


class Intersectable:
    """Common base for anything a ray can be intersected with.

    Subclasses compute intersections in their own object space;
    ray.intersect() maps the world-space ray there first.
    """

    def ray_intersections(self, ray):
        """Return Intersections for a ray already expressed in object space."""
        raise NotImplementedError

    def get_transform(self):
        """Return the Matrix mapping object space to world space."""
        raise NotImplementedError

    def get_material(self):
        raise NotImplementedError

    def normal_at(self, world_point):
        """Return the outward unit normal (a vector) at a world-space point."""
        raise NotImplementedError


class Sphere(Intersectable):

    def __init__(self, transform=None, material=None):
        """Create a unit sphere centered at the object-space origin.

        Parameters:
          transform : Matrix -- object space to world space (defaults to identity)
          material : Material -- the material of the surface (defaults to Material())
        """
        self.origin = origin()
        self.radius = 1.0
        # copied: the inverse is cached, so the transform must not change underneath it
        self._transform = transform.copy() if transform is not None else Matrix.identity(4)
        self.material = material if material is not None else Material()
        self._inverse = None

    def with_transform(self, transform):
        """Return a new sphere with the same material and the given transform."""
        return Sphere(transform, self.material)

    def with_material(self, material):
        """Return a new sphere with the same transform and the given material."""
        return Sphere(self._transform, material)

    @property
    def transform(self):
        return self._transform.copy()

    def get_transform(self):
        return self._transform.copy()

    def get_material(self):
        return self.material

    @property
    def inverse_transform(self):
        """Inverse of the transform, computed on first use.

        Raises NonInvertibleMatrixError for a singular transform.
        """
        if self._inverse is None:
            self._inverse = self._transform.inverse()
        return self._inverse

    def ray_intersections(self, ray):
        """Computes the intersections between an object-space ray and this sphere.

        Parameters:
          ray : Ray -- the ray, already mapped into object space
        Return:
          Intersections -- empty on a miss, otherwise both roots, smaller first
        """
        sphere_to_ray = ray.origin - self.origin
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return Intersections()
        disc_sqrt = np.sqrt(discriminant)
        minus = (-b - disc_sqrt) / (2 * a)
        plus = (-b + disc_sqrt) / (2 * a)
        return Intersections([Intersection(minus, self), Intersection(plus, self)])

    def normal_at(self, world_point):
        inverse = self.inverse_transform
        object_point = inverse * world_point
        object_normal = object_point - self.origin
        world_normal = inverse.transpose() * object_normal
        # the transposed inverse carries the translation into w; a normal is a vector
        return world_normal.with_w(0).normalize()

    def __repr__(self):
        return 'Sphere(transform=%r, material=%r)' % (self._transform, self.material)
