from canvas import Canvas
from colors import white
from tuples import point, vector

"""
Falling projectile demo: a point launched under gravity and wind, plotted one
pixel per tick until it lands.
"""


class Environment:
    def __init__(self, gravity, wind):
        self.gravity = gravity
        self.wind = wind


class Projectile:
    def __init__(self, position, velocity):
        self.position = position
        self.velocity = velocity


def tick(env, proj):
    """Advance the projectile by one time step."""
    return Projectile(proj.position + proj.velocity,
                      proj.velocity + env.gravity + env.wind)


def run(canvas_width=900, canvas_height=550, speed=11.25):
    """Fly a projectile until it lands and plot its path.

    Return:
      (Canvas, int) -- the plotted path and the number of ticks it took to land
    """
    env = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.02, 0, 0))
    proj = Projectile(point(0, 1, 0), vector(1, 1.8, 0).normalize() * speed)
    canvas = Canvas(canvas_width, canvas_height)

    ticks = 0
    while proj.position.y > 0:
        proj = tick(env, proj)
        ticks += 1
        # canvas y grows downward; positions off the canvas are dropped by write_pixel
        canvas.write_pixel(int(round(proj.position.x)),
                           canvas.height - int(round(proj.position.y)),
                           white())
    return canvas, ticks
