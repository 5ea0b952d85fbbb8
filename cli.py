import argparse
import logging
import time

from clock import clock_face
from projectile import run as run_projectile
from ray import render_image
from scenes import SCENES

logger = logging.getLogger(__name__)

DEMOS = sorted(SCENES) + ['clock', 'projectile']
DEFAULT_SIZE = 100


def render(name, size=None):
    """Produce the canvas for a named demo.

    Parameters:
      name : str -- one of DEMOS
      size : int -- canvas side in pixels for the ray traced scenes and the clock;
        the projectile demo has a fixed canvas and takes no size
    Return:
      Canvas
    """
    if size is not None and size < 1:
        raise ValueError('canvas size must be positive, got %d' % size)
    if name in SCENES:
        return render_image(SCENES[name](), size if size is not None else DEFAULT_SIZE)
    if name == 'clock':
        return clock_face(size if size is not None else DEFAULT_SIZE)
    if name == 'projectile':
        if size is not None:
            raise ValueError('the projectile demo has a fixed canvas size')
        canvas, ticks = run_projectile()
        logger.info('projectile landed after %d ticks', ticks)
        return canvas
    raise ValueError('Unknown demo %r' % (name,))


def main(argv=None):
    parser = argparse.ArgumentParser(description='Render a demo with the sphere ray tracer')
    parser.add_argument('demo', choices=DEMOS, help='Which demo to render')
    parser.add_argument('output', type=str, help='Output image; .ppm is written as text, other extensions via Pillow')
    parser.add_argument('--size', type=int, default=None, help='Canvas side in pixels')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log progress of every row')
    args = parser.parse_args(argv)
    if args.size is not None and args.size < 1:
        parser.error('--size must be a positive number of pixels')
    if args.size is not None and args.demo == 'projectile':
        parser.error('--size does not apply to the projectile demo')

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    time_start = time.time()
    canvas = render(args.demo, args.size)
    canvas.save(args.output)
    print(f"Rendered {args.demo} to {args.output} in {time.time() - time_start:.2f} seconds")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
