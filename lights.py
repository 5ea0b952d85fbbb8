from colors import black


class PointLight:
    def __init__(self, position, intensity):
        """Create a point light at given position and with given intensity"""
        self.position = position
        self.intensity = intensity

    def __repr__(self):
        return 'PointLight(%r, %r)' % (self.position, self.intensity)


def lighting(material, light, point, eye_vector, normal_vector):
    """Compute the Phong shading at a surface point due to a single light.

    Parameters:
      material : Material -- the material of the surface
      light : PointLight -- the light source
      point : Tuple -- the world-space surface point
      eye_vector : Tuple -- unit vector from the point toward the viewer
      normal_vector : Tuple -- outward unit normal at the point
    Return:
      Color -- ambient + diffuse + specular, not clamped
    """
    effective_color = material.color * light.intensity
    light_vector = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    light_dot_normal = light_vector.dot(normal_vector)
    if light_dot_normal < 0:
        # light is on the other side of the surface: no diffuse, no specular
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal
    reflect_vector = (-light_vector).reflect(normal_vector)
    reflect_dot_eye = reflect_vector.dot(eye_vector)
    if reflect_dot_eye <= 0:
        specular = black()
    else:
        specular = light.intensity * material.specular * (reflect_dot_eye ** material.shininess)
    return ambient + diffuse + specular
