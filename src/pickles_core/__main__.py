import sys
import argparse
import logging

from os import environ
from typing import List, Optional

from pickles_core.cli import cli
from pickles_core.constants import DEFAULT_LANGUAGE, ENV_FEATURE_LANGUAGE


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='pickles-core')

    parser.add_argument(
        'files',
        nargs='*',
        type=str,
        default=['.'],
        help='feature files, or directories with feature files',
    )

    parser.add_argument(
        '--results',
        type=str,
        default=None,
        required=False,
        help='SpecRun report with the test results to correlate',
    )

    parser.add_argument(
        '--language',
        type=str,
        default=environ.get(ENV_FEATURE_LANGUAGE, DEFAULT_LANGUAGE),
        required=False,
        help='language of feature files without a language marker',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        required=False,
        default=False,
        help='verbose output',
    )

    parser.add_argument(
        '--no-verbose',
        nargs='+',
        type=str,
        default=None,
        help='name of loggers to disable',
    )

    parser.add_argument(
        '--version',
        action='store_true',
        required=False,
        default=False,
        help='print version and exit',
    )

    args = parser.parse_args(argv)

    if args.version:
        from pickles_core import __version__

        print(__version__, file=sys.stderr)

        raise SystemExit(0)

    return args


def setup_logging(args: argparse.Namespace) -> None:
    level = logging.INFO if not args.verbose else logging.DEBUG

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    no_verbose: Optional[List[str]] = args.no_verbose

    if no_verbose is None:
        no_verbose = []

    for logger_name in no_verbose:
        if logger_name in logging.Logger.manager.loggerDict:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.ERROR)
        else:
            print(f'!! logger "{logger_name}" does not exist', file=sys.stderr)


def main() -> None:
    args = parse_arguments()

    setup_logging(args)

    raise SystemExit(cli(args))


if __name__ == '__main__':  # pragma: no cover
    main()
