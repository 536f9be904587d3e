import argparse
import logging
import os
import sys

from .config import ConfigurationError
from .io import InputMissing, OutputUnavailable
from .processor import make_tables

logger = logging.getLogger(__name__)

usage = """
Writes one flux table per line of the parameter file to $OUTFLUXDIR.
If th12 is absent, no MSW assumed; if present, tables for normal and inverted
hierarchy are also written to $OUTFLUXDIR/nh and $OUTFLUXDIR/ih.
"""


def make_parser():
    parser = argparse.ArgumentParser(
        prog="pinched",
        description="Pinched supernova neutrino flux tables",
        epilog=usage,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "th12",
        type=float,
        nargs="?",
        default=None,
        help="mixing angle theta12 in radians",
    )
    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.environ.get("PINCHED_LOGLEVEL", "INFO").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        make_tables(args.th12)
    except (ConfigurationError, InputMissing, OutputUnavailable) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
