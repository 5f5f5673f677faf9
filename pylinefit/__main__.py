"""
Command-line report.

Usage:
    python -m pylinefit
    python -m pylinefit --seed 7 --sample-sizes 20 200 --noise-levels 0.5 3
    python -m pylinefit --plot comparison.png
"""

import argparse
import sys

from pylinefit.core.exceptions import PyLineFitError
from pylinefit.fitting.design import DEFAULT_GRID_BOUNDS, DEFAULT_GRID_POINTS, ParameterGrid
from pylinefit.report.design import GRID_BACKENDS, ReportConfig
from pylinefit.report.solvers import run_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m pylinefit',
        description='Fit y = b0 + b1*x on synthetic data by grid search and '
                    'by the normal equations, across sample sizes and noise levels.',
    )
    parser.add_argument('--seed', type=int, default=1,
                        help='Random seed (default: 1)')
    parser.add_argument('--intercept', type=float, default=2.0,
                        help='True intercept (default: 2)')
    parser.add_argument('--slope', type=float, default=3.0,
                        help='True slope (default: 3)')
    parser.add_argument('--x-range', type=float, nargs=2, default=(0.0, 10.0),
                        metavar=('LOW', 'HIGH'), help='Range x is drawn from (default: 0 10)')
    parser.add_argument('--sample-sizes', type=int, nargs='+', default=[10, 100, 1000],
                        metavar='N', help='Sample sizes to compare (default: 10 100 1000)')
    parser.add_argument('--noise-levels', type=float, nargs='+', default=[1.0, 6.0],
                        metavar='SIGMA', help='Noise standard deviations (default: 1 6)')
    parser.add_argument('--grid-bounds', type=float, nargs=2, default=DEFAULT_GRID_BOUNDS,
                        metavar=('LOW', 'HIGH'),
                        help='Candidate range for intercept and slope (default: -10 10)')
    parser.add_argument('--grid-points', type=int, default=DEFAULT_GRID_POINTS,
                        help=f'Candidates per parameter (default: {DEFAULT_GRID_POINTS})')
    parser.add_argument('--backend', choices=GRID_BACKENDS, default='auto',
                        help='Grid-search backend (default: auto)')
    parser.add_argument('--plot', metavar='PATH', default=None,
                        help='Save the comparison figure to PATH')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ReportConfig.build(
            intercept=args.intercept,
            slope=args.slope,
            x_range=tuple(args.x_range),
            sample_sizes=args.sample_sizes,
            noise_levels=args.noise_levels,
            grid=ParameterGrid.linspace(*args.grid_bounds, args.grid_points),
            seed=args.seed,
            backend=args.backend,
        )
        run_report(config, plot_path=args.plot)
    except (PyLineFitError, RuntimeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
