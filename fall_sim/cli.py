"""
Falling Objects Simulation - CLI

Runs a headless drop, prints a summary and optionally saves graphs.
"""

import argparse
import logging
import os
import sys

from . import constants as C
from .config import create_basics_config, create_terminal_config
from .main import simulate_drop
from .objects import OBJECT_REGISTRY, name_to_key

logger = logging.getLogger(__name__)

SCREENS = {
    'basics': create_basics_config,
    'terminal': create_terminal_config,
}


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Falling Objects Simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--object",
        type=name_to_key,
        choices=sorted(OBJECT_REGISTRY),
        default="BASEBALL",
        help="Object to drop (registry key or display name)"
    )
    parser.add_argument(
        "--screen",
        choices=sorted(SCREENS),
        default="terminal",
        help="Screen preset (basics: infinite fall at sea level, terminal: drop to the ground)"
    )
    parser.add_argument(
        "--altitude",
        type=float,
        default=None,
        help="Initial altitude in m (defaults to the screen preset)"
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=C.STEP_DT,
        help="Integration time step in s"
    )
    parser.add_argument(
        "--max-time",
        type=float,
        default=C.MAX_TIME,
        help="Maximum simulated time in s"
    )
    drag = parser.add_mutually_exclusive_group()
    drag.add_argument("--drag", dest="drag", action="store_true", default=None,
                      help="Enable drag regardless of the screen preset")
    drag.add_argument("--no-drag", dest="drag", action="store_false",
                      help="Disable drag regardless of the screen preset")
    parser.add_argument(
        "--parachute",
        action="store_true",
        help="Deploy the parachute before the drop (terminal screen only)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    overrides = dict(verbose=not args.quiet)
    if args.altitude is not None:
        overrides['initial_altitude'] = args.altitude
    config = SCREENS[args.screen](**overrides)

    try:
        result = simulate_drop(
            args.object, config=config, dt=args.dt, max_time=args.max_time,
            drag_enabled=args.drag, parachute=args.parachute,
        )

        body = result.body
        print("\n" + "=" * 60)
        print("DROP SUMMARY")
        print("=" * 60)
        print(f"Object: {body.name}")
        print(f"Termination reason: {result.reason}")
        print(f"Final time: {result.clock.elapsed_time:.3f} s")
        print(f"Final position: {body.position:.3f} m")
        print(f"Final velocity: {body.velocity:.3f} m/s")
        print("=" * 60 + "\n")

        if not args.no_plots and len(result.log) > 0:
            from .plotting import generate_all_plots

            plot_dir = os.path.abspath(args.output_dir)
            logger.info(f"Generating plots in {plot_dir}")
            for path in generate_all_plots(result.graphs, result.log, plot_dir):
                print(f">> Saved {path}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
