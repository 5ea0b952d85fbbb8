from colors import white


class Material:

    def __init__(self, color=None, ambient=0.1, diffuse=0.9, specular=0.9, shininess=200.0):
        """
        Create a new Phong material with the given parameters.

        Parameters:
          color : Color -- surface color (defaults to white)
          ambient : float -- ambient reflectance
          diffuse : float -- diffuse reflectance
          specular : float -- specular reflectance
          shininess : float -- specular exponent; larger is a smaller, tighter highlight
        """
        for name, value in (('ambient', ambient), ('diffuse', diffuse), ('specular', specular)):
            if value < 0:
                raise ValueError('%s must be non-negative, got %r' % (name, value))
        if shininess <= 0:
            raise ValueError('shininess must be positive, got %r' % (shininess,))
        self.color = color if color is not None else white()
        self.ambient = float(ambient)
        self.diffuse = float(diffuse)
        self.specular = float(specular)
        self.shininess = float(shininess)

    def replace(self, **changes):
        """Return a copy of this material with some parameters changed."""
        params = dict(color=self.color, ambient=self.ambient, diffuse=self.diffuse,
                      specular=self.specular, shininess=self.shininess)
        params.update(changes)
        return Material(**params)

    def __eq__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color and self.ambient == other.ambient
                and self.diffuse == other.diffuse and self.specular == other.specular
                and self.shininess == other.shininess)

    __hash__ = None

    def __repr__(self):
        return 'Material(color=%r, ambient=%g, diffuse=%g, specular=%g, shininess=%g)' % (
            self.color, self.ambient, self.diffuse, self.specular, self.shininess)
