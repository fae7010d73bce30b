"""
CLI entry point for the neutron clustering demo.

Usage:
    python -m neutron_cluster 2000                     # Live window, 2000 neutrons
    python -m neutron_cluster 2000 --headless --ticks 5000
    python -m neutron_cluster 2000 --quick             # Headless, 200 ticks
    python -m neutron_cluster --validate               # Check sampling laws
"""
import argparse
import json
import os
import sys

from .constants import TICK_DURATION
from .errors import ConfigurationError


def build_parser():
    parser = argparse.ArgumentParser(
        description='Monte Carlo neutron clustering demo in a 2-D toroidal domain',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m neutron_cluster 2000                     Live animation
  python -m neutron_cluster 2000 --headless --ticks 5000 -o run.json
  python -m neutron_cluster 2000 --quick --plot history.png
  python -m neutron_cluster --validate               Check sampling laws
        """,
    )

    parser.add_argument('particles', type=int, nargs='?', default=None,
                        help='Number of neutrons to simulate (rounded to a 2:1 grid)')
    parser.add_argument('--seed', type=int, default=1, help='Random seed')
    parser.add_argument('--dt', type=float, default=TICK_DURATION,
                        help=f'Tick duration in seconds (default: {TICK_DURATION:g})')
    parser.add_argument('--ticks', '-t', type=int, default=None,
                        help='Number of ticks (headless default: 1000)')
    parser.add_argument('--headless', action='store_true', help='Run without a window')
    parser.add_argument('--quick', action='store_true', help='Quick headless run: 200 ticks')
    parser.add_argument('--output', '-o', type=str, default=None, help='Output JSON file (headless runs and --validate)')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save population/entropy history PNG (headless runs)')
    parser.add_argument('--validate', action='store_true',
                        help='Run statistical checks of the sampling laws')
    parser.add_argument('--samples', type=int, default=20000,
                        help='Samples per law for --validate (default: 20000)')
    parser.add_argument('--quiet', '-q', action='store_true', help='Minimal output')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate mode
    if args.validate:
        from .validation.statistics import run_validation
        return run_validation(n_samples=args.samples, seed=args.seed, output=args.output)

    if args.particles is None:
        parser.error("the number of neutrons to simulate is required")

    headless = args.headless or args.quick
    if args.ticks is not None and args.ticks <= 0:
        parser.error(f"--ticks must be positive, got {args.ticks}")
    if not headless and (args.output or args.plot):
        parser.error("--output and --plot require --headless or --quick")

    from .simulation import ClusteringSimulation

    try:
        simulation = ClusteringSimulation(args.particles, seed=args.seed)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.ticks is not None:
        n_ticks = args.ticks
    elif args.quick:
        n_ticks = 200
    else:
        n_ticks = 1000

    if not headless:
        import matplotlib.pyplot as plt
        from .render import animate

        fig, anim = animate(simulation, dt=args.dt, frames=args.ticks)
        plt.show()
        return 0

    try:
        result = simulation.run(n_ticks, dt=args.dt, verbose=not args.quiet)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.plot:
        from .render import plot_history
        plot_history(result, args.plot)
        if not args.quiet:
            print(f"\nHistory plot saved to {args.plot}")

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(args.output, 'w') as f:
            json.dump(result.to_dict(), f, indent=2)
        if not args.quiet:
            print(f"\nResults saved to {args.output}")
    elif args.quiet:
        print(result.final_population)

    return 0


if __name__ == '__main__':
    sys.exit(main())
