import argparse
import logging
import sys

from .engine import DistanceConfig, compute_distances
from .errors import DegenerateRootError, InvalidInputError
from .io import get_device, load_points, save_distances


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='polydist',
        description='Distance of points to a polynomial curve y = p(x)'
    )
    parser.add_argument('--coeffs', metavar='C', type=float, nargs='+', required=True,
                        help='polynomial coefficients, highest degree first')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--points-file', metavar='file', type=str,
                        help='text file with one "x y" (or "x,y") pair per line')
    source.add_argument('--point', metavar=('X', 'Y'), type=float, nargs=2, action='append',
                        help='a single point, may be repeated')
    parser.add_argument('--output', metavar='file', type=str, help='write distances here instead of stdout')
    parser.add_argument('--plot', metavar='file', type=str, help='save a plot of points, curve and distances')
    parser.add_argument('--show', action='store_true', help='show the plot interactively')
    parser.add_argument('--imag-tolerance', type=float, default=DistanceConfig.imag_tolerance,
                        help='relative imaginary part below which a root counts as real')
    parser.add_argument('--device', type=str, default='cpu', help="torch device, or 'auto'")
    parser.add_argument('--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None):
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(levelname)s] %(message)s',
    )

    config = DistanceConfig(
        imag_tolerance=args.imag_tolerance,
        device=str(get_device(args.device)),
    )

    renderer = None
    visualize = bool(args.plot or args.show)
    if visualize:
        from .plot import MatplotlibRenderer
        renderer = MatplotlibRenderer(output_path=args.plot, show=args.show)

    try:
        points = load_points(args.points_file) if args.points_file else args.point
        distances = compute_distances(
            args.coeffs, points, visualize=visualize, renderer=renderer, config=config,
        )
    except InvalidInputError as e:
        logger.error("invalid input: %s", e)
        return 2
    except DegenerateRootError as e:
        logger.error("%s", e)
        return 1

    if args.output:
        save_distances(args.output, distances)
        logger.info("wrote %d distances to %s", len(distances), args.output)
    else:
        for d in distances:
            print(f'{d:.12g}')
    if args.plot:
        logger.info("saved plot to %s", args.plot)
    return 0


if __name__ == '__main__':
    sys.exit(main())
