# src/featuredemo/cli.py
"""
Command-line interface for featuredemo
"""

import argparse
import logging

from .config import DemoConfig
from .demos import EXTRA_ROUTINES, ROUTINES, run
from . import __version__


def split_resource(value):
    """Split ``NAME.EXT`` into its two parts."""
    name, dot, ext = value.rpartition(".")
    if not dot or not name or not ext:
        raise argparse.ArgumentTypeError(f"expected NAME.EXT, got {value!r}")
    if "/" in value or "\\" in value:
        raise argparse.ArgumentTypeError(f"resource must be a bundled file name, got {value!r}")
    return name, ext


def build_parser():
    parser = argparse.ArgumentParser(
        prog="featuredemo",
        description="featuredemo: prints a series of small language feature demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  featuredemo                          # Run every demo in order
  featuredemo --only call_fetch        # Run a single demo
  featuredemo --resource test.txt      # Read a bundled file that exists
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'featuredemo v{__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log diagnostic messages'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List the available demos and exit'
    )

    parser.add_argument(
        '--only',
        nargs='+',
        metavar='NAME',
        choices=[*ROUTINES, *EXTRA_ROUTINES],
        help='Run only the named demos, in the order given'
    )

    parser.add_argument(
        '--resource',
        type=split_resource,
        metavar='NAME.EXT',
        help='Bundled file read by result_example (default: test.pdf)'
    )

    parser.add_argument(
        '--url',
        help='URL of the request built by call_fetch'
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        for name in ROUTINES:
            print(name)
        for name in EXTRA_ROUTINES:
            print(f"{name} (not run by default)")
        return 0

    config = DemoConfig(verbose=args.verbose)
    if args.resource:
        config.resource_name, config.resource_type = args.resource
    if args.url:
        config.request_url = args.url

    run(args.only or list(ROUTINES), config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
