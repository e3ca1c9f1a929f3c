"""Command line: build a hull with either algorithm and animate its trace."""
import argparse
import logging
import random
import sys

from .config import INTERVAL_CHOICES, AnimationConfig, HullConfig, RandomPointsConfig
from .errors import HullError
from .geometry import Point
from .run import run_convex_hull, run_jarvis_march

ALGORITHMS = {
    'jarvis': ("Jarvis March (Gift Wrapping) Visualization", run_jarvis_march),
    'kps': ("Kirkpatrick-Seidel Visualization", run_convex_hull),
}


def random_points(rng=None, config=None):
    """Integer points scattered over the canvas, away from its border."""
    rng = rng or random.Random()
    config = config or RandomPointsConfig()
    count = rng.randint(config.min_count, config.max_count)
    return [Point(rng.randint(config.margin, config.width - config.margin),
                  rng.randint(config.margin, config.height - config.margin))
            for _ in range(count)]


def parse_points(text):
    """Parse "x,y x,y ..." into points."""
    points = []
    for token in text.split():
        try:
            x, y = token.split(',')
            points.append(Point(float(x), float(y)))
        except ValueError:
            raise argparse.ArgumentTypeError(f"bad point {token!r}, expected x,y") from None
    return points


def build_parser():
    parser = argparse.ArgumentParser(prog='hull_trace', description='Step through a convex hull construction')
    parser.add_argument('algorithm', choices=sorted(ALGORITHMS), help='hull algorithm to run')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--points', type=parse_points, help='points as "x,y x,y ..."')
    source.add_argument('--random', type=int, metavar='N', help='use N random points')
    parser.add_argument('--seed', type=int, help='seed for random points')
    parser.add_argument('--interval', type=int, default=700, choices=INTERVAL_CHOICES,
                        help='delay between steps in ms')
    parser.add_argument('--strict', action='store_true', help='fail on degenerate input')
    parser.add_argument('--save', metavar='FILE', help='save the animation (e.g. hull.gif)')
    parser.add_argument('--no-show', action='store_true', help='do not open a window')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    rng = random.Random(args.seed)
    if args.points is not None:
        points = args.points
    elif args.random is not None:
        points = random_points(rng, RandomPointsConfig(min_count=args.random, max_count=args.random))
    else:
        points = random_points(rng)

    title, run = ALGORITHMS[args.algorithm]
    try:
        result = run(points, HullConfig(strict=args.strict))
    except HullError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result.degeneracy is not None:
        print(f"Degenerate input ({result.degeneracy.value}).")
    print("\nFinal Convex Hull Points (in order):")
    for pt in result.hull:
        print(pt)

    if args.save or not args.no_show:
        # imported here so printing a hull does not need a display backend
        from .animate import BRIDGE_COLOR, PAIR_COLOR, REJECTED_COLOR, SOLID_COLOR, animate
        colors = {'jarvis': (SOLID_COLOR, REJECTED_COLOR), 'kps': (BRIDGE_COLOR, PAIR_COLOR)}
        solid, dashed = colors[args.algorithm]
        animate(points, result.events, title, AnimationConfig(interval_ms=args.interval),
                save_path=args.save, show=not args.no_show, solid_color=solid, dashed_color=dashed)
    return 0


if __name__ == '__main__':
    sys.exit(main())
